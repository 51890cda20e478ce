# -*- coding: utf-8 -*-
"""Navigation actions, one frozen dataclass per kind."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from demobrowser.core.errors import InvalidAction
from demobrowser.models.catalog import Category, Screen


@dataclass(frozen=True)
class BackButtonPress:
    pass


@dataclass(frozen=True)
class ModuleCardPress:
    module_key: str
    title: str
    category: Category


@dataclass(frozen=True)
class ExampleCardPress:
    example_key: str


@dataclass(frozen=True)
class BookmarkToggle:
    key: str
    category: Category


@dataclass(frozen=True)
class NavBarPress:
    screen: Screen


Action = Union[BackButtonPress, ModuleCardPress, ExampleCardPress, BookmarkToggle, NavBarPress]


def action_from_dict(data: dict[str, Any]) -> Action:
    """Build an action from a ``{"type": ..., **fields}`` mapping.

    Used for scripted replays. Unknown types and missing fields raise
    ``InvalidAction``.
    """
    kind = data.get("type")
    try:
        if kind == "back_button_press":
            return BackButtonPress()
        if kind == "module_card_press":
            return ModuleCardPress(
                module_key=str(data["module_key"]),
                title=str(data.get("title") or data["module_key"]),
                category=Category(data["category"]),
            )
        if kind == "example_card_press":
            return ExampleCardPress(example_key=str(data["example_key"]))
        if kind == "bookmark_toggle":
            return BookmarkToggle(key=str(data["key"]), category=Category(data["category"]))
        if kind == "nav_bar_press":
            return NavBarPress(screen=Screen(data["screen"]))
    except (KeyError, ValueError) as exc:
        raise InvalidAction(data) from exc
    raise InvalidAction(data)
