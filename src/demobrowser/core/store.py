# -*- coding: utf-8 -*-
"""Single-cell navigation store with FIFO dispatch."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable

from demobrowser.constants import RECENTLY_USED_CAPACITY
from demobrowser.core.actions import Action, BackButtonPress
from demobrowser.core.curator import CuratedLists, curate
from demobrowser.core.reducer import reduce
from demobrowser.core.selectors import can_go_back
from demobrowser.models.catalog import CatalogRegistry
from demobrowser.models.navigation_state import NavigationState, initial_navigation_state

logger = logging.getLogger(__name__)

StateListener = Callable[[NavigationState], None]


class NavigationStore:
    """Own the current navigation state and apply actions one at a time.

    Actions dispatched from inside a listener are queued and run after the
    current one completes, so listeners always observe whole snapshots in
    dispatch order.
    """

    def __init__(
        self,
        registry: CatalogRegistry | None,
        capacity: int = RECENTLY_USED_CAPACITY,
        initial_state: NavigationState | None = None,
    ) -> None:
        self.registry = registry
        self.capacity = int(capacity)
        if self.capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._state = initial_state if initial_state is not None else initial_navigation_state()
        self._listeners: list[StateListener] = []
        self._pending: deque[Action] = deque()
        self._dispatching = False
        self._lists_inputs: tuple[object, object, object] | None = None
        self._lists: CuratedLists | None = None

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def lists(self) -> CuratedLists | None:
        """Curated lists, recomputed only when bookmarks or recency change."""
        inputs = (self.registry, self._state.bookmarks, self._state.recently_used)
        if self._lists_inputs is None or any(a is not b for a, b in zip(inputs, self._lists_inputs)):
            self._lists = curate(self.registry, self._state.bookmarks, self._state.recently_used)
            self._lists_inputs = inputs
        return self._lists

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def dispatch(self, action: Action) -> NavigationState:
        """Queue ``action`` and drain the queue unless already draining."""
        self._pending.append(action)
        if self._dispatching:
            return self._state

        self._dispatching = True
        try:
            while self._pending:
                next_action = self._pending.popleft()
                next_state = reduce(self._state, next_action, capacity=self.capacity)
                if next_state is self._state:
                    continue
                self._state = next_state
                for listener in list(self._listeners):
                    listener(next_state)
        except Exception:
            self._pending.clear()
            raise
        finally:
            self._dispatching = False
        return self._state

    def handle_back_press(self) -> bool:
        """Consume a platform back gesture if there is a module to leave.

        Returns False when the platform should handle the gesture itself.
        """
        if not can_go_back(self._state):
            return False
        self.dispatch(BackButtonPress())
        return True
