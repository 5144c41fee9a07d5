"""MCP server for vocablists – exposes list, selection and settings operations to AI agents."""

from __future__ import annotations

import json
import os
import sys
import threading
from pathlib import Path
from typing import Any

try:
    from fastmcp import FastMCP
except ImportError:
    sys.exit(
        "FastMCP is required for the MCP server. Install with: pip install -e \".[mcp]\""
    )

from vocablists.app import Stores, build_stores
from vocablists.config import load_config
from vocablists.errors import VocabListsError
from vocablists.namespace import ListCategory

# Opened on first tool call; the server process keeps one backend for its lifetime.
_stores: Stores | None = None
_stores_lock = threading.Lock()


def _get_stores() -> Stores:
    """Stores from config; VOCABLISTS_CONFIG names an extra config file."""
    global _stores
    with _stores_lock:
        if _stores is None:
            extra = os.environ.get("VOCABLISTS_CONFIG")
            _stores = build_stores(load_config(Path(extra) if extra else None))
        return _stores


def _error_json(error: str, message: str) -> str:
    """Return a JSON object with error structure for agent consumption."""
    return json.dumps({"error": error, "message": message})


def _ok(payload: dict[str, Any]) -> str:
    return json.dumps(payload)


def _call(fn, *args: Any) -> tuple[Any, str | None]:
    """Run a store operation; return (result, None) or (None, error JSON) for store errors."""
    try:
        return fn(*args), None
    except VocabListsError as e:
        return None, _error_json(type(e).__name__, str(e))
    except ValueError as e:
        return None, _error_json("ValueError", str(e))


mcp = FastMCP(
    "vocablists",
    instructions=(
        "Manage a vocabulary trainer's custom word lists, list selections and practice settings. "
        "Words are stored lowercase; list names are case-sensitive."
    ),
)


@mcp.tool
def vocab_list_names() -> str:
    """Return the names of all custom lists (sorted) and the built-in catalog names."""
    stores = _get_stores()
    return _ok({
        "custom": stores.lists.get_custom_list_names(),
        "builtin": sorted(stores.catalog.list_names()),
    })


@mcp.tool
def vocab_get_list(name: str, valid_only: bool = False) -> str:
    """
    Return the words of a custom list.

    Args:
        name: Custom list name (case-sensitive).
        valid_only: Only return words accepted by the configured word pattern.

    Returns:
        JSON object {"name", "words"}, or an error object if the list does not exist.
    """
    lists = _get_stores().lists
    getter = lists.get_custom_list_valid_words if valid_only else lists.get_custom_list
    words, err = _call(getter, name)
    if err:
        return err
    return _ok({"name": name, "words": words})


@mcp.tool
def vocab_create_list(name: str, words: list[str] | None = None) -> str:
    """Create a custom list, optionally adding words (lowercased, duplicates skipped)."""
    lists = _get_stores().lists
    _, err = _call(lists.create_custom_list, name)
    if err:
        return err
    for word in words or []:
        lists.add_custom_word(name, word)
    return _ok({"name": name, "words": lists.get_custom_list(name)})


@mcp.tool
def vocab_rename_list(old_name: str, new_name: str) -> str:
    """Rename a custom list."""
    _, err = _call(_get_stores().lists.rename_custom_list, old_name, new_name)
    return err or _ok({"renamed": old_name, "to": new_name})


@mcp.tool
def vocab_delete_list(name: str) -> str:
    """Delete a custom list."""
    _, err = _call(_get_stores().lists.delete_custom_list, name)
    return err or _ok({"deleted": name})


@mcp.tool
def vocab_add_words(list_name: str, words: list[str]) -> str:
    """Add words to a custom list (lowercased; words already present are skipped)."""
    lists = _get_stores().lists
    for word in words:
        _, err = _call(lists.add_custom_word, list_name, word)
        if err:
            return err
    return _ok({"name": list_name, "words": lists.get_custom_list(list_name)})


@mcp.tool
def vocab_edit_word(list_name: str, index: int, new_value: str) -> str:
    """Replace the word at index in a custom list."""
    lists = _get_stores().lists
    _, err = _call(lists.edit_custom_word, list_name, index, new_value)
    return err or _ok({"name": list_name, "words": lists.get_custom_list(list_name)})


@mcp.tool
def vocab_delete_word(list_name: str, index: int) -> str:
    """Delete the word at index from a custom list."""
    lists = _get_stores().lists
    _, err = _call(lists.delete_custom_word, list_name, index)
    return err or _ok({"name": list_name, "words": lists.get_custom_list(list_name)})


@mcp.tool
def vocab_export_list(name: str) -> str:
    """Export a custom list as JSON {"name", "words"}."""
    data, err = _call(_get_stores().lists.export_list_to_json, name)
    return err or data


@mcp.tool
def vocab_import_list(data: str) -> str:
    """Import a list from JSON {"name": str, "words": [str, ...]}."""
    name, err = _call(_get_stores().lists.import_list_from_json, data)
    return err or _ok({"imported": name})


@mcp.tool
def vocab_selected_lists() -> str:
    """Return selected built-in and custom lists (missing lists are dropped from the selection)."""
    selection = _get_stores().selection
    return _ok({
        "builtin": selection.get_selected_builtin_list_names(),
        "custom": selection.get_selected_custom_list_names(),
    })


@mcp.tool
def vocab_set_selected(category: str, list_name: str, is_selected: bool = True) -> str:
    """
    Select or deselect a list for practice. Re-selecting moves the list to the end.

    Args:
        category: "builtin" or "custom".
        list_name: Name of the list; existence is not checked here.
        is_selected: False to deselect.
    """
    selection = _get_stores().selection
    _, err = _call(selection.set_list_selected, category, list_name, is_selected)
    if err:
        return err
    return _ok({"category": ListCategory(category).value, "selected": selection.get_selected_list_names(category)})


@mcp.tool
def vocab_settings() -> str:
    """Return all practice settings."""
    return _ok(_get_stores().settings.get_all_settings())


@mcp.tool
def vocab_set_setting(name: str, value: str | int | bool) -> str:
    """Store a practice setting (written as given; unreadable values read back as null)."""
    settings = _get_stores().settings
    _, err = _call(settings.set_setting, name, value)
    if err:
        return err
    return _ok({name: settings.get_setting(name)})


def main() -> None:
    """Run the MCP server with stdio transport (for Cursor and other MCP clients)."""
    mcp.run()
