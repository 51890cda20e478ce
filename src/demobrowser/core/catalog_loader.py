# -*- coding: utf-8 -*-
"""Load the catalog registry from a JSON catalog file."""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any

from demobrowser.constants import DEFAULT_CATALOG_RESOURCE
from demobrowser.core.errors import CatalogError
from demobrowser.models.catalog import CatalogRegistry, Category, Example, Module
from demobrowser.utils.file_utils import read_json_file

logger = logging.getLogger(__name__)


def _read_example(module_key: str, raw: Any) -> Example:
    if isinstance(raw, str):
        return Example(name=raw)
    if not isinstance(raw, dict) or not str(raw.get("name", "")).strip():
        raise CatalogError(f"Example without a name in module {module_key}")
    return Example(
        name=str(raw["name"]),
        title=str(raw.get("title") or ""),
        description=str(raw.get("description") or ""),
        platform=raw.get("platform"),
    )


def _read_module(raw: Any) -> Module:
    if not isinstance(raw, dict):
        raise CatalogError(f"Module entry must be an object, got {type(raw).__name__}")
    key = str(raw.get("key", "")).strip()
    if not key:
        raise CatalogError("Module entry without a key")
    try:
        category = Category(raw.get("category"))
    except ValueError as exc:
        raise CatalogError(f"Module {key} has unknown category {raw.get('category')!r}") from exc
    examples = raw.get("examples", [])
    if not isinstance(examples, list):
        raise CatalogError(f"Module {key}: examples must be a list")
    return Module(
        key=key,
        title=str(raw.get("title") or key),
        category=category,
        examples=tuple(_read_example(key, example) for example in examples),
        description=str(raw.get("description") or ""),
        documentation_url=raw.get("documentation_url"),
    )


def parse_catalog(data: dict[str, Any]) -> CatalogRegistry:
    """Build a registry from a decoded catalog document."""
    modules = data.get("modules")
    if not isinstance(modules, list):
        raise CatalogError("Catalog must contain a 'modules' list")
    registry = CatalogRegistry(_read_module(raw) for raw in modules)
    logger.info(
        "Catalog loaded: %d modules, %d examples",
        len(registry),
        registry.example_count(),
    )
    return registry


def load_catalog(path: str | Path | None = None) -> CatalogRegistry:
    """Load a catalog file, or the bundled default catalog when no path is given."""
    if not path:
        text = resources.files("demobrowser.data").joinpath(DEFAULT_CATALOG_RESOURCE).read_text(encoding="utf-8")
        return parse_catalog(json.loads(text))

    catalog_path = Path(path)
    if not catalog_path.exists():
        raise CatalogError(f"Catalog file not found: {catalog_path}")
    try:
        data = read_json_file(catalog_path)
    except (json.JSONDecodeError, ValueError) as exc:
        raise CatalogError(f"Invalid catalog file {catalog_path}: {exc}") from exc
    return parse_catalog(data)
