# -*- coding: utf-8 -*-
"""Read-only views over navigation state for the shell."""

from __future__ import annotations

from demobrowser.constants import SCREEN_TITLES
from demobrowser.core.curator import CuratedLists, Section
from demobrowser.models.catalog import CatalogRegistry, Example, Module, Screen
from demobrowser.models.navigation_state import NavigationState


def screen_title(state: NavigationState) -> str:
    """Title bar text: the open module's title, else the screen's label."""
    if state.active_module_title is not None:
        return state.active_module_title
    return SCREEN_TITLES[Screen(state.screen).value]


def active_module(registry: CatalogRegistry, state: NavigationState) -> Module | None:
    return registry.get(state.active_module_key)


def active_example(registry: CatalogRegistry, state: NavigationState) -> Example | None:
    if state.active_module_example_key is None:
        return None
    module = active_module(registry, state)
    if module is None:
        return None
    return module.find_example(state.active_module_example_key)


def active_sections(state: NavigationState, lists: CuratedLists) -> tuple[Section, ...]:
    return lists.for_screen(state.screen)


def show_empty_bookmarks(state: NavigationState, lists: CuratedLists) -> bool:
    """True when the bookmarks screen should show its empty-state placeholder."""
    return (
        state.active_module_key is None
        and Screen(state.screen) is Screen.BOOKMARKS
        and lists.bookmark_count == 0
    )


def can_go_back(state: NavigationState) -> bool:
    """Whether a back gesture has anything to undo."""
    return state.active_module_key is not None
