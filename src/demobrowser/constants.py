# -*- coding: utf-8 -*-
"""Application constants."""

APP_NAME = "demobrowser"
APP_VERSION = "0.1.0"

DEFAULT_SETTINGS_FILE = "settings.json"
DEFAULT_CATALOG_RESOURCE = "catalog.json"

RECENTLY_USED_CAPACITY = 5
MAX_RECENTLY_USED_CAPACITY = 100

EXAMPLE_KEY_SEPARATOR = "/"

SCREEN_TITLES = {
    "components": "Components",
    "apis": "APIs",
    "bookmarks": "Bookmarks",
}

SECTION_COMPONENTS = "COMPONENTS"
SECTION_APIS = "APIS"
SECTION_RECENT_COMPONENTS = "RECENT_COMPONENTS"
SECTION_RECENT_APIS = "RECENT_APIS"
