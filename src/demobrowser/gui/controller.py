# -*- coding: utf-8 -*-
"""Qt controller that turns user gestures into navigation actions."""

from __future__ import annotations

import logging
from typing import Any

from PyQt6.QtCore import QObject, pyqtSignal

from demobrowser.constants import RECENTLY_USED_CAPACITY
from demobrowser.core.actions import BookmarkToggle, ExampleCardPress, ModuleCardPress, NavBarPress
from demobrowser.core.selectors import active_example, active_module, screen_title
from demobrowser.core.store import NavigationStore
from demobrowser.models.catalog import CatalogRegistry, Category, Example, Module, Screen
from demobrowser.models.navigation_state import NavigationState, initial_navigation_state

logger = logging.getLogger(__name__)


class GalleryController(QObject):
    """
    Central controller for the gallery shell.
    Owns the navigation store and re-emits every new snapshot as signals.
    """
    state_changed = pyqtSignal(object)
    lists_changed = pyqtSignal(object)
    title_changed = pyqtSignal(str)

    def __init__(self, registry: CatalogRegistry, settings: dict[str, Any]) -> None:
        super().__init__()
        self.settings = settings
        navigation = settings.get("navigation", {})
        self.store = NavigationStore(
            registry,
            capacity=int(navigation.get("recently_used_capacity", RECENTLY_USED_CAPACITY)),
            initial_state=initial_navigation_state(navigation.get("initial_screen", "components")),
        )
        self._last_lists = self.store.lists
        self._last_title = screen_title(self.store.state)
        self.store.subscribe(self._on_state)

    @property
    def state(self) -> NavigationState:
        return self.store.state

    def active_module(self) -> Module | None:
        return active_module(self.store.registry, self.store.state)

    def active_example(self) -> Example | None:
        return active_example(self.store.registry, self.store.state)

    def _on_state(self, state: NavigationState) -> None:
        self.state_changed.emit(state)
        lists = self.store.lists
        if lists is not self._last_lists:
            self._last_lists = lists
            self.lists_changed.emit(lists)
        title = screen_title(state)
        if title != self._last_title:
            self._last_title = title
            self.title_changed.emit(title)

    def open_module(self, module_key: str) -> None:
        module = self.store.registry.get(module_key)
        if module is None:
            logger.warning("Cannot open unknown module %s", module_key)
            return
        self.store.dispatch(ModuleCardPress(module.key, module.title, module.category))

    def open_example(self, example_name: str) -> None:
        self.store.dispatch(ExampleCardPress(example_name))

    def toggle_bookmark(self, key: str, category: Category | str) -> None:
        self.store.dispatch(BookmarkToggle(key, Category(category)))

    def press_nav_bar(self, screen: Screen | str) -> None:
        self.store.dispatch(NavBarPress(Screen(screen)))

    def handle_back_press(self) -> bool:
        """Return True when the back gesture was consumed."""
        return self.store.handle_back_press()
