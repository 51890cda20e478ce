# -*- coding: utf-8 -*-
"""Error taxonomy for navigation and curation."""

from __future__ import annotations

from typing import Any


class NavigationError(Exception):
    """Base class for navigation core errors."""


class InvalidAction(NavigationError):
    """Raised for an action kind the reducer does not know.

    This is a defect in the caller, never a recoverable runtime condition.
    """

    def __init__(self, action: Any) -> None:
        self.action = action
        super().__init__(f"Unknown navigation action: {action!r}")


class StaleKeyLookup(NavigationError, LookupError):
    """A bookmark or recently-used key no longer resolves to a catalog entry."""

    def __init__(self, category: str, key: str) -> None:
        self.category = category
        self.key = key
        super().__init__(f"No catalog entry for {category}:{key}")


class NotReady(NavigationError):
    """The catalog registry has not finished loading."""


class CatalogError(ValueError):
    """Raised when a catalog file is malformed."""
