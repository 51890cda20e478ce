# -*- coding: utf-8 -*-
"""Navigation reducer.

Pure function: (state, action) -> state. No side effects, no IO.
The input state is never modified; transitions that change nothing return
the input instance so callers can detect a no-op by identity.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from demobrowser.constants import RECENTLY_USED_CAPACITY
from demobrowser.core.actions import (
    Action,
    BackButtonPress,
    BookmarkToggle,
    ExampleCardPress,
    ModuleCardPress,
    NavBarPress,
)
from demobrowser.core.errors import InvalidAction
from demobrowser.core.recently_used import push_recent
from demobrowser.models.catalog import Category, ItemKey, Screen
from demobrowser.models.navigation_state import NavigationState

logger = logging.getLogger(__name__)

Handler = Callable[[NavigationState, Action, int], NavigationState]


def reduce(
    state: NavigationState,
    action: Action,
    *,
    capacity: int = RECENTLY_USED_CAPACITY,
) -> NavigationState:
    """Apply one action and return the next state.

    ``capacity`` bounds the recently-used sequence. Raises ``InvalidAction``
    for anything that is not one of the known action kinds.
    """
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise InvalidAction(action)
    next_state = handler(state, action, capacity)
    if next_state is state:
        logger.debug("No-op navigation action: %s", action)
    else:
        logger.debug("Navigation action %s -> %s", action, next_state)
    return next_state


def _clear_module(state: NavigationState, **changes) -> NavigationState:
    return replace(
        state,
        active_module_key=None,
        active_module_title=None,
        active_module_example_key=None,
        **changes,
    )


def _back_button_press(state: NavigationState, action: BackButtonPress, capacity: int) -> NavigationState:
    if state.active_module_example_key is not None:
        return replace(state, active_module_example_key=None)
    if state.active_module_key is not None:
        return _clear_module(state)
    return state


def _module_card_press(state: NavigationState, action: ModuleCardPress, capacity: int) -> NavigationState:
    item = ItemKey(Category(action.category), action.module_key)
    return replace(
        state,
        active_module_key=action.module_key,
        active_module_title=action.title,
        active_module_example_key=None,
        recently_used=push_recent(state.recently_used, item, capacity),
    )


def _example_card_press(state: NavigationState, action: ExampleCardPress, capacity: int) -> NavigationState:
    if state.active_module_key is None:
        logger.warning("Ignoring example press %r: no module is open", action.example_key)
        return state
    return replace(state, active_module_example_key=action.example_key)


def _bookmark_toggle(state: NavigationState, action: BookmarkToggle, capacity: int) -> NavigationState:
    item = ItemKey(Category(action.category), action.key)
    if item in state.bookmarks:
        return replace(state, bookmarks=state.bookmarks - {item})
    return replace(state, bookmarks=state.bookmarks | {item})


def _nav_bar_press(state: NavigationState, action: NavBarPress, capacity: int) -> NavigationState:
    # Pressing the current screen again also resets it to its root list.
    return _clear_module(state, screen=Screen(action.screen))


_HANDLERS: dict[type, Handler] = {
    BackButtonPress: _back_button_press,
    ModuleCardPress: _module_card_press,
    ExampleCardPress: _example_card_press,
    BookmarkToggle: _bookmark_toggle,
    NavBarPress: _nav_bar_press,
}
