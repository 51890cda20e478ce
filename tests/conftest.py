# -*- coding: utf-8 -*-
"""Shared pytest fixtures."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


SAMPLE_CATALOG = {
    "modules": [
        {
            "key": "Button",
            "title": "Button",
            "category": "components",
            "documentation_url": "https://reactnative.dev/docs/button",
            "examples": [
                {"name": "basic usage", "title": "Button with default styling"},
                {"name": "disabled", "title": "Disabled Button"},
            ],
        },
        {
            "key": "FlatList",
            "title": "FlatList",
            "category": "components",
            "examples": [{"name": "basic"}, {"name": "inverted"}],
        },
        {
            "key": "Alert",
            "title": "Alert",
            "category": "apis",
            "examples": [{"name": "simple"}],
        },
        {
            "key": "Switch",
            "title": "Switch",
            "category": "components",
            "examples": ["basic"],
        },
        {
            "key": "Vibration",
            "title": "Vibration",
            "category": "apis",
            "examples": [{"name": "once"}, {"name": "pattern"}],
        },
    ]
}


@pytest.fixture
def catalog_data() -> dict:
    return json.loads(json.dumps(SAMPLE_CATALOG))


@pytest.fixture
def catalog_file(tmp_path: Path, catalog_data: dict) -> Path:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(catalog_data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def registry(catalog_data: dict):
    from demobrowser.core.catalog_loader import parse_catalog

    return parse_catalog(catalog_data)


@pytest.fixture
def default_config() -> dict:
    from demobrowser.config import get_default_config

    return get_default_config()


@pytest.fixture
def qt_app():
    pytest.importorskip("PyQt6")
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app
