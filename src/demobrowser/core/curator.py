# -*- coding: utf-8 -*-
"""Derive the sectioned lists shown on each catalog screen."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from demobrowser.constants import (
    SECTION_APIS,
    SECTION_COMPONENTS,
    SECTION_RECENT_APIS,
    SECTION_RECENT_COMPONENTS,
)
from demobrowser.core.errors import StaleKeyLookup
from demobrowser.models.catalog import CatalogRegistry, Category, Example, ItemKey, Module, Screen, example_item_key

logger = logging.getLogger(__name__)

_SECTION_KEYS = {
    Category.COMPONENTS: (SECTION_RECENT_COMPONENTS, SECTION_COMPONENTS),
    Category.APIS: (SECTION_RECENT_APIS, SECTION_APIS),
}


@dataclass(frozen=True)
class ListItem:
    """One browsable row: a module, or a single example of a module."""

    key: str
    module_key: str
    title: str
    category: Category
    is_bookmarked: bool
    example_name: str | None = None
    description: str = ""
    documentation_url: str | None = None

    @property
    def is_example(self) -> bool:
        return self.example_name is not None


@dataclass(frozen=True)
class Section:
    key: str
    data: tuple[ListItem, ...]

    def __len__(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class CuratedLists:
    """Sections for every screen plus the recently-used items."""

    components: tuple[Section, ...]
    apis: tuple[Section, ...]
    bookmarks: tuple[Section, ...]
    recently_used: tuple[ListItem, ...]

    def for_screen(self, screen: Screen | str) -> tuple[Section, ...]:
        screen = Screen(screen)
        if screen is Screen.COMPONENTS:
            return self.components
        if screen is Screen.APIS:
            return self.apis
        return self.bookmarks

    @property
    def bookmark_count(self) -> int:
        return sum(len(section) for section in self.bookmarks)

    def bookmarked_keys(self) -> list[str]:
        return [item.key for section in self.bookmarks for item in section.data]


def _module_item(module: Module, bookmarks: frozenset[ItemKey]) -> ListItem:
    return ListItem(
        key=module.key,
        module_key=module.key,
        title=module.title,
        category=module.category,
        is_bookmarked=ItemKey(module.category, module.key) in bookmarks,
        description=module.description,
        documentation_url=module.documentation_url,
    )


def _example_item(module: Module, example: Example, bookmarks: frozenset[ItemKey]) -> ListItem:
    key = example_item_key(module.key, example.name)
    return ListItem(
        key=key,
        module_key=module.key,
        title=example.display_title,
        category=module.category,
        is_bookmarked=ItemKey(module.category, key) in bookmarks,
        example_name=example.name,
        description=example.description,
        documentation_url=module.documentation_url,
    )


def _resolve_recent(
    registry: CatalogRegistry,
    recently_used: Iterable[ItemKey],
    bookmarks: frozenset[ItemKey],
) -> list[ListItem]:
    items: list[ListItem] = []
    for entry in recently_used:
        try:
            module, example = registry.resolve(entry)
        except StaleKeyLookup as exc:
            logger.debug("Omitting recently used entry: %s", exc)
            continue
        if example is None:
            items.append(_module_item(module, bookmarks))
        else:
            items.append(_example_item(module, example, bookmarks))
    return items


def curate(
    registry: CatalogRegistry | None,
    bookmarks: Iterable[ItemKey],
    recently_used: Iterable[ItemKey],
) -> CuratedLists | None:
    """Build the component, API and bookmark sections.

    Returns ``None`` while the registry is missing or still loading. Module
    order always follows the registry; only ``recently_used`` follows the
    recency sequence. Keys that no longer resolve are left out.
    """
    if registry is None or not registry.is_loaded:
        return None

    bookmark_set = frozenset(bookmarks)
    all_items: dict[Category, list[ListItem]] = {category: [] for category in Category}
    bookmarked: dict[Category, list[ListItem]] = {category: [] for category in Category}
    matched_bookmarks = 0

    for module in registry:
        module_item = _module_item(module, bookmark_set)
        all_items[module.category].append(module_item)
        if module_item.is_bookmarked:
            bookmarked[module.category].append(module_item)
            matched_bookmarks += 1
        for example in module.examples:
            example_item = _example_item(module, example, bookmark_set)
            if example_item.is_bookmarked:
                bookmarked[module.category].append(example_item)
                matched_bookmarks += 1

    stale_bookmarks = len(bookmark_set) - matched_bookmarks
    if stale_bookmarks:
        logger.debug("Omitting %d bookmark(s) with no catalog entry", stale_bookmarks)

    recent = _resolve_recent(registry, recently_used, bookmark_set)

    def _category_sections(category: Category) -> tuple[Section, ...]:
        recent_key, all_key = _SECTION_KEYS[category]
        recent_modules = tuple(item for item in recent if item.category is category and not item.is_example)
        return (
            Section(key=recent_key, data=recent_modules),
            Section(key=all_key, data=tuple(all_items[category])),
        )

    return CuratedLists(
        components=_category_sections(Category.COMPONENTS),
        apis=_category_sections(Category.APIS),
        bookmarks=(
            Section(key=SECTION_COMPONENTS, data=tuple(bookmarked[Category.COMPONENTS])),
            Section(key=SECTION_APIS, data=tuple(bookmarked[Category.APIS])),
        ),
        recently_used=tuple(recent),
    )
