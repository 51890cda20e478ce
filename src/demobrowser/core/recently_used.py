# -*- coding: utf-8 -*-
"""Bounded most-recent-first sequence."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Sequence
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def push_recent(items: Sequence[T], item: T, capacity: int) -> tuple[T, ...]:
    """Return ``items`` with ``item`` moved or inserted at the front.

    Older entries beyond ``capacity`` are evicted. Pushing the entry that is
    already first returns an equal sequence.
    """
    if capacity < 1:
        raise ValueError(f"capacity must be positive, got {capacity}")
    bounded: deque[T] = deque(maxlen=capacity)
    bounded.append(item)
    for existing in items:
        if len(bounded) == capacity:
            break
        if existing != item:
            bounded.append(existing)
    return tuple(bounded)
