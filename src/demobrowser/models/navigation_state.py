# -*- coding: utf-8 -*-
"""Navigation state value."""

from __future__ import annotations

from dataclasses import dataclass, field

from demobrowser.models.catalog import ItemKey, Screen


@dataclass(frozen=True)
class NavigationState:
    """Immutable navigation snapshot, replaced on every dispatched action.

    ``active_module_example_key`` is only ever set while
    ``active_module_key`` is set.
    """

    screen: Screen = Screen.COMPONENTS
    active_module_key: str | None = None
    active_module_title: str | None = None
    active_module_example_key: str | None = None
    bookmarks: frozenset[ItemKey] = field(default_factory=frozenset)
    recently_used: tuple[ItemKey, ...] = field(default_factory=tuple)


def initial_navigation_state(screen: Screen | str = Screen.COMPONENTS) -> NavigationState:
    """Return the state the application starts from."""
    return NavigationState(screen=Screen(screen))
