"""Built-in word list catalog consumed by the selection store."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class BuiltInCatalog(Protocol):
    def list_names(self) -> set[str]:
        """Return the names of all built-in lists currently shipped."""
        ...


class StaticCatalog:
    """
    Catalog over a fixed collection.

    Accepts either a mapping of list name -> words (only the names are used) or
    an iterable of names.
    """

    def __init__(self, lists: Mapping[str, object] | Iterable[str] = ()) -> None:
        if isinstance(lists, Mapping):
            self._names = set(lists.keys())
        else:
            self._names = set(lists)

    def list_names(self) -> set[str]:
        return set(self._names)


def load_catalog(path: Path | str | None) -> StaticCatalog:
    """
    Load a catalog from a JSON file holding an object (name -> words) or an array of names.

    A missing path or file yields an empty catalog. Raises ValueError if the file
    exists but does not hold one of those shapes.
    """
    if path is None:
        return StaticCatalog()
    path = Path(path).expanduser()
    if not path.is_file():
        logger.debug("Built-in list catalog %s not found; using empty catalog", path)
        return StaticCatalog()
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        return StaticCatalog(data)
    if isinstance(data, list) and all(isinstance(x, str) for x in data):
        return StaticCatalog(data)
    raise ValueError(f"Built-in list catalog {path} must be a JSON object or an array of names")
