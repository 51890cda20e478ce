# -*- coding: utf-8 -*-
"""CLI commands for browsing the catalog and replaying navigation."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import typer

from demobrowser.config import ConfigError, load_config
from demobrowser.constants import APP_NAME
from demobrowser.core.actions import action_from_dict
from demobrowser.core.catalog_loader import load_catalog
from demobrowser.core.curator import CuratedLists, Section, curate
from demobrowser.core.errors import CatalogError, InvalidAction
from demobrowser.core.selectors import active_example, active_sections, screen_title, show_empty_bookmarks
from demobrowser.core.store import NavigationStore
from demobrowser.models.catalog import CatalogRegistry, Category, ItemKey, Screen
from demobrowser.models.navigation_state import NavigationState, initial_navigation_state
from demobrowser.utils.file_utils import read_json_value
from demobrowser.utils.logger import setup_session_logging

app = typer.Typer(help="Browse the component gallery catalog")
logger = logging.getLogger(__name__)


def _load(settings_path: Path | None, catalog: Path | None) -> tuple[dict[str, Any], CatalogRegistry]:
    try:
        settings = load_config(settings_path)
        if settings.get("logging", {}).get("session_log"):
            setup_session_logging(Path.cwd(), APP_NAME, settings["logging"].get("level", "INFO"))
        registry = load_catalog(catalog or settings.get("catalog", {}).get("path") or None)
    except (ConfigError, CatalogError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    return settings, registry


def _parse_item_key(raw: str) -> ItemKey:
    category, sep, key = raw.partition(":")
    if not sep or not key:
        raise typer.BadParameter(f"Expected CATEGORY:KEY, got {raw!r}")
    try:
        return ItemKey(Category(category), key)
    except ValueError as exc:
        raise typer.BadParameter(f"Unknown category {category!r}") from exc


def _echo_sections(sections: tuple[Section, ...]) -> None:
    for section in sections:
        typer.echo(f"[{section.key}] ({len(section)})")
        for item in section.data:
            star = "*" if item.is_bookmarked else " "
            typer.echo(f"  {star} {item.title} ({item.key})")


def _echo_screen(state: NavigationState, lists: CuratedLists) -> None:
    if show_empty_bookmarks(state, lists):
        typer.echo("No bookmarks yet. Star a module or example to keep it here.")
        return
    _echo_sections(active_sections(state, lists))


@app.command("list")
def list_command(
    screen: Screen = typer.Option(Screen.COMPONENTS, help="Screen to show: components, apis, bookmarks"),
    catalog: Path = typer.Option(None, help="Catalog JSON file (default: bundled catalog)"),
    settings: Path = typer.Option(None, help="Settings JSON file"),
    bookmark: list[str] = typer.Option([], help="Bookmarked item as CATEGORY:KEY"),
    recent: list[str] = typer.Option([], help="Recently used item as CATEGORY:KEY, most recent first"),
) -> None:
    """Print the curated sections for one screen."""
    _, registry = _load(settings, catalog)
    bookmarks = frozenset(_parse_item_key(raw) for raw in bookmark)
    recently_used = tuple(_parse_item_key(raw) for raw in recent)
    lists = curate(registry, bookmarks, recently_used)
    if lists is None:
        typer.echo("Catalog is not ready", err=True)
        raise typer.Exit(code=1)
    _echo_screen(initial_navigation_state(screen), lists)


@app.command()
def replay(
    script: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file with a list of actions"),
    catalog: Path = typer.Option(None, help="Catalog JSON file (default: bundled catalog)"),
    settings: Path = typer.Option(None, help="Settings JSON file"),
) -> None:
    """Apply a scripted sequence of actions and print the resulting state."""
    config, registry = _load(settings, catalog)
    try:
        raw_actions = read_json_value(script)
    except json.JSONDecodeError as exc:
        typer.echo(f"Error: invalid action script {script}: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    if not isinstance(raw_actions, list):
        typer.echo("Error: action script must be a JSON list", err=True)
        raise typer.Exit(code=1)

    navigation = config.get("navigation", {})
    store = NavigationStore(
        registry,
        capacity=navigation.get("recently_used_capacity"),
        initial_state=initial_navigation_state(navigation.get("initial_screen", "components")),
    )
    try:
        for index, raw in enumerate(raw_actions):
            if not isinstance(raw, dict):
                raise InvalidAction(raw)
            store.dispatch(action_from_dict(raw))
            logger.debug("Replayed action %d: %s", index, raw.get("type"))
    except InvalidAction as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    state = store.state
    typer.echo(f"Title: {screen_title(state)}")
    typer.echo(f"Screen: {Screen(state.screen).value}")
    typer.echo(f"Module: {state.active_module_key or '-'}")
    example = active_example(registry, state)
    typer.echo(f"Example: {example.display_title if example else state.active_module_example_key or '-'}")
    typer.echo("Bookmarks: " + (", ".join(sorted(item.key for item in state.bookmarks)) or "-"))
    typer.echo("Recently used: " + (", ".join(item.key for item in state.recently_used) or "-"))
    lists = store.lists
    if lists is not None and state.active_module_key is None:
        _echo_screen(state, lists)


@app.command()
def validate(
    catalog: Path = typer.Option(None, help="Catalog JSON file (default: bundled catalog)"),
    settings: Path = typer.Option(None, help="Settings JSON file"),
) -> None:
    """Load a catalog and report what it contains."""
    _, registry = _load(settings, catalog)
    components = sum(1 for module in registry if module.category is Category.COMPONENTS)
    apis = len(registry) - components
    typer.echo(f"Catalog OK: {len(registry)} modules ({components} components, {apis} APIs)")
    typer.echo(f"Examples: {registry.example_count()}")
