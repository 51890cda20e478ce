# -*- coding: utf-8 -*-
"""Tests for the navigation reducer."""

from __future__ import annotations

from dataclasses import replace

import pytest

from demobrowser.core.actions import (
    BackButtonPress,
    BookmarkToggle,
    ExampleCardPress,
    ModuleCardPress,
    NavBarPress,
)
from demobrowser.core.errors import InvalidAction
from demobrowser.core.reducer import reduce
from demobrowser.models.catalog import Category, ItemKey, Screen
from demobrowser.models.navigation_state import NavigationState, initial_navigation_state


def _open_button(state: NavigationState | None = None) -> NavigationState:
    state = state or initial_navigation_state()
    return reduce(state, ModuleCardPress("Button", "Button", Category.COMPONENTS))


def test_initial_state_is_components_with_nothing_open() -> None:
    state = initial_navigation_state()
    assert state.screen is Screen.COMPONENTS
    assert state.active_module_key is None
    assert state.active_module_title is None
    assert state.active_module_example_key is None
    assert state.bookmarks == frozenset()
    assert state.recently_used == ()


def test_module_card_press_opens_module_and_records_recent() -> None:
    state = _open_button()
    assert state.active_module_key == "Button"
    assert state.active_module_title == "Button"
    assert state.recently_used == (ItemKey(Category.COMPONENTS, "Button"),)


def test_example_card_press_then_back_returns_to_module_landing() -> None:
    state = reduce(_open_button(), ExampleCardPress("basic usage"))
    assert state.active_module_example_key == "basic usage"

    state = reduce(state, BackButtonPress())
    assert state.active_module_example_key is None
    assert state.active_module_key == "Button"


def test_back_from_module_landing_returns_to_list() -> None:
    state = reduce(_open_button(), BackButtonPress())
    assert state.active_module_key is None
    assert state.active_module_title is None
    assert state.recently_used == (ItemKey(Category.COMPONENTS, "Button"),)


@pytest.mark.parametrize("screen", list(Screen))
def test_back_without_active_module_returns_same_instance(screen: Screen) -> None:
    state = replace(
        initial_navigation_state(screen),
        bookmarks=frozenset({ItemKey(Category.APIS, "Alert")}),
    )
    assert reduce(state, BackButtonPress()) is state


def test_example_card_press_without_module_is_noop() -> None:
    state = initial_navigation_state()
    assert reduce(state, ExampleCardPress("basic usage")) is state


def test_module_card_press_clears_previous_example() -> None:
    state = reduce(_open_button(), ExampleCardPress("basic usage"))
    state = reduce(state, ModuleCardPress("Alert", "Alert", Category.APIS))
    assert state.active_module_key == "Alert"
    assert state.active_module_example_key is None
    assert state.recently_used == (
        ItemKey(Category.APIS, "Alert"),
        ItemKey(Category.COMPONENTS, "Button"),
    )


def test_bookmark_toggle_adds_then_removes() -> None:
    state = initial_navigation_state()
    toggled = reduce(state, BookmarkToggle("Button", Category.COMPONENTS))
    assert ItemKey(Category.COMPONENTS, "Button") in toggled.bookmarks

    restored = reduce(toggled, BookmarkToggle("Button", Category.COMPONENTS))
    assert restored == state


def test_bookmark_toggle_twice_from_populated_state_is_identity() -> None:
    state = _open_button()
    state = reduce(state, BookmarkToggle("Alert", Category.APIS))
    again = reduce(reduce(state, BookmarkToggle("Button/disabled", Category.COMPONENTS)),
                   BookmarkToggle("Button/disabled", Category.COMPONENTS))
    assert again == state


def test_bookmark_category_is_part_of_the_key() -> None:
    state = reduce(initial_navigation_state(), BookmarkToggle("Shared", Category.COMPONENTS))
    state = reduce(state, BookmarkToggle("Shared", Category.APIS))
    assert len(state.bookmarks) == 2


def test_bookmark_toggle_does_not_touch_navigation() -> None:
    state = reduce(_open_button(), ExampleCardPress("disabled"))
    toggled = reduce(state, BookmarkToggle("Button", Category.COMPONENTS))
    assert toggled.active_module_key == "Button"
    assert toggled.active_module_example_key == "disabled"


def test_nav_bar_press_other_screen_exits_module() -> None:
    state = reduce(_open_button(), ExampleCardPress("basic usage"))
    state = reduce(state, NavBarPress(Screen.APIS))
    assert state.screen is Screen.APIS
    assert state.active_module_key is None
    assert state.active_module_title is None
    assert state.active_module_example_key is None


@pytest.mark.parametrize("screen", list(Screen))
def test_nav_bar_press_same_screen_resets_to_root(screen: Screen) -> None:
    state = reduce(initial_navigation_state(screen), ModuleCardPress("Button", "Button", Category.COMPONENTS))
    state = reduce(state, NavBarPress(screen))
    assert state.screen is screen
    assert state.active_module_key is None


def test_nav_bar_press_keeps_bookmarks_and_recent() -> None:
    state = reduce(_open_button(), BookmarkToggle("Button", Category.COMPONENTS))
    after = reduce(state, NavBarPress(Screen.BOOKMARKS))
    assert after.bookmarks == state.bookmarks
    assert after.recently_used == state.recently_used


def test_recently_used_is_bounded_by_capacity() -> None:
    state = initial_navigation_state()
    for index in range(12):
        state = reduce(state, ModuleCardPress(f"M{index}", f"M{index}", Category.COMPONENTS), capacity=3)
        assert len(state.recently_used) <= 3
    assert [item.key for item in state.recently_used] == ["M11", "M10", "M9"]


def test_repressing_most_recent_module_leaves_sequence_unchanged() -> None:
    state = _open_button()
    state = reduce(state, ModuleCardPress("Alert", "Alert", Category.APIS))
    before = state.recently_used
    state = reduce(state, ModuleCardPress("Alert", "Alert", Category.APIS))
    assert state.recently_used == before


def test_repressing_older_module_moves_it_to_front() -> None:
    state = _open_button()
    state = reduce(state, ModuleCardPress("Alert", "Alert", Category.APIS))
    state = reduce(state, ModuleCardPress("Button", "Button", Category.COMPONENTS))
    assert [item.key for item in state.recently_used] == ["Button", "Alert"]


def test_reducer_does_not_mutate_input() -> None:
    state = _open_button()
    snapshot = replace(state)
    reduce(state, BookmarkToggle("Button", Category.COMPONENTS))
    reduce(state, NavBarPress(Screen.APIS))
    assert state == snapshot


def test_unknown_action_raises_invalid_action() -> None:
    with pytest.raises(InvalidAction):
        reduce(initial_navigation_state(), {"type": "BACK_BUTTON_PRESS"})  # type: ignore[arg-type]


def test_example_invariant_holds_over_mixed_sequence() -> None:
    actions = [
        ExampleCardPress("orphan"),
        ModuleCardPress("Button", "Button", Category.COMPONENTS),
        ExampleCardPress("basic usage"),
        NavBarPress(Screen.BOOKMARKS),
        ExampleCardPress("orphan"),
        ModuleCardPress("Alert", "Alert", Category.APIS),
        ExampleCardPress("simple"),
        BackButtonPress(),
        BackButtonPress(),
        ExampleCardPress("orphan"),
    ]
    state = initial_navigation_state()
    for action in actions:
        state = reduce(state, action)
        if state.active_module_example_key is not None:
            assert state.active_module_key is not None
    assert state.active_module_key is None
