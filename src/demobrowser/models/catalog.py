# -*- coding: utf-8 -*-
"""Catalog data models: modules, examples and the read-only registry."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

from demobrowser.constants import EXAMPLE_KEY_SEPARATOR
from demobrowser.core.errors import CatalogError, NotReady, StaleKeyLookup


class Category(str, Enum):
    """Top-level category a module is filed under."""

    COMPONENTS = "components"
    APIS = "apis"


class Screen(str, Enum):
    """Top-level catalog view."""

    COMPONENTS = "components"
    APIS = "apis"
    BOOKMARKS = "bookmarks"


class ItemKey(NamedTuple):
    """Bookmark / recently-used key: a module key or an example item key."""

    category: Category
    key: str


def example_item_key(module_key: str, example_name: str) -> str:
    """Build the catalog-wide key of one example."""
    return f"{module_key}{EXAMPLE_KEY_SEPARATOR}{example_name}"


@dataclass(frozen=True)
class Example:
    """One named example inside a module."""

    name: str
    title: str = ""
    description: str = ""
    platform: str | None = None

    @property
    def display_title(self) -> str:
        return self.title or self.name


@dataclass(frozen=True)
class Module:
    """Catalog module metadata."""

    key: str
    title: str
    category: Category
    examples: tuple[Example, ...] = field(default_factory=tuple)
    description: str = ""
    documentation_url: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", Category(self.category))
        object.__setattr__(self, "examples", tuple(self.examples))

    def find_example(self, name: str) -> Example | None:
        for example in self.examples:
            if example.name == name:
                return example
        return None


class CatalogRegistry:
    """Ordered, read-only mapping from module key to module.

    A registry built with ``pending()`` stands for a catalog that has not
    finished loading yet.
    """

    def __init__(self, modules: Iterable[Module] = (), *, loaded: bool = True) -> None:
        self._modules: dict[str, Module] = {}
        for module in modules:
            if module.key in self._modules:
                raise CatalogError(f"Duplicate module key: {module.key}")
            names = [example.name for example in module.examples]
            if len(names) != len(set(names)):
                raise CatalogError(f"Duplicate example name in module: {module.key}")
            self._modules[module.key] = module
        self._loaded = loaded

    @classmethod
    def pending(cls) -> CatalogRegistry:
        return cls((), loaded=False)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def ensure_loaded(self) -> None:
        if not self._loaded:
            raise NotReady("Catalog registry has not finished loading")

    def __len__(self) -> int:
        return len(self._modules)

    def __iter__(self) -> Iterator[Module]:
        return iter(self._modules.values())

    def __contains__(self, key: object) -> bool:
        return key in self._modules

    def modules(self) -> tuple[Module, ...]:
        return tuple(self._modules.values())

    def get(self, key: str | None) -> Module | None:
        if key is None:
            return None
        return self._modules.get(key)

    def example_count(self) -> int:
        return sum(len(module.examples) for module in self._modules.values())

    def resolve(self, item: ItemKey) -> tuple[Module, Example | None]:
        """Resolve a bookmark / recently-used key.

        Raises ``StaleKeyLookup`` when the key no longer names a module or
        example of the given category.
        """
        category = Category(item.category)
        module = self._modules.get(item.key)
        if module is not None and module.category == category:
            return module, None

        module_key, sep, example_name = item.key.partition(EXAMPLE_KEY_SEPARATOR)
        if sep:
            module = self._modules.get(module_key)
            if module is not None and module.category == category:
                example = module.find_example(example_name)
                if example is not None:
                    return module, example
        raise StaleKeyLookup(category.value, item.key)
