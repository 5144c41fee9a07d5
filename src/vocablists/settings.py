"""Typed accessors over the fixed set of named practice settings."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable

from vocablists.errors import UnknownSettingError
from vocablists.namespace import setting_key, to_stored_string
from vocablists.storage.base import KeyValueStore

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

ASSISTANCE_LEVELS = ("NONE", "MIN", "MAX")
CAPITALIZATIONS = ("UPPERCASE", "LOWERCASE")


def parse_stored_int(value: str) -> int | None:
    """Parse a leading integer ('12' -> 12, ' 7px' -> 7); None when there is none."""
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


def parse_stored_bool(value: str) -> bool | None:
    if value == "true":
        return True
    if value == "false":
        return False
    return None


def parse_stored_string_caps(value: str) -> str:
    return value.upper()


@dataclass(frozen=True)
class Setting:
    """Definition of one named setting: where it lives, how it is read back, and its default."""

    name: str
    parser: Callable[[str], Any]
    default: Any
    choices: tuple[str, ...] | None = None  # recognized values; not enforced on write

    @property
    def key(self) -> str:
        return setting_key(self.name)


SETTINGS: dict[str, Setting] = {
    s.name: s
    for s in (
        Setting("wordRepetitions", parse_stored_int, 1),
        # 0 means no timer
        Setting("wordDisplayTime", parse_stored_int, 0),
        Setting("wordsPerSession", parse_stored_int, 5),
        Setting("assistanceLevel", parse_stored_string_caps, "MAX", ASSISTANCE_LEVELS),
        Setting("clickForNextWord", parse_stored_bool, True),
        Setting("wordDisplayCapitalization", parse_stored_string_caps, "UPPERCASE", CAPITALIZATIONS),
    )
}


def setting_names() -> list[str]:
    """Names of all settings, in definition order."""
    return list(SETTINGS)


def get_definition(name: str) -> Setting:
    """Return the Setting for name. Raises UnknownSettingError if name is not a known setting."""
    setting = SETTINGS.get(name)
    if setting is None:
        raise UnknownSettingError(name)
    return setting


def validate_setting(name: str, value: Any) -> list[str]:
    """
    Strict check of a (parsed) setting value for business logic that consumes it.

    Returns a list of problems; empty when the value is acceptable. Writes through
    SettingsStore.set_setting are not checked.
    """
    setting = get_definition(name)
    problems: list[str] = []
    if value is None:
        problems.append(f"{name}: stored value could not be parsed")
    elif setting.parser is parse_stored_int:
        if isinstance(value, bool) or not isinstance(value, int):
            problems.append(f"{name}: expected an integer, got {value!r}")
        elif value < 0:
            problems.append(f"{name}: must not be negative, got {value}")
    elif setting.parser is parse_stored_bool:
        if not isinstance(value, bool):
            problems.append(f"{name}: expected true or false, got {value!r}")
    elif setting.choices is not None and value not in setting.choices:
        problems.append(f"{name}: expected one of {', '.join(setting.choices)}, got {value!r}")
    return problems


class SettingsStore:
    """Settings persisted as strings under settings.<name> in a key-value store."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def get_setting(self, name: str) -> Any:
        """
        Return the parsed value of a setting.

        A setting that was never written gets its default stored first. Parsers
        return None for malformed stored values instead of raising.
        """
        setting = get_definition(name)
        if self._store.get(setting.key) is None:
            logger.debug("Setting %s unset; storing default %r", name, setting.default)
            self._store.set(setting.key, to_stored_string(setting.default))
        stored = self._store.get(setting.key)
        return setting.parser(stored)

    def set_setting(self, name: str, value: Any) -> None:
        """Store value's string form; no validation beyond the name."""
        setting = get_definition(name)
        self._store.set(setting.key, to_stored_string(value))
        logger.debug("Setting %s = %r", name, value)

    def get_all_settings(self) -> dict[str, Any]:
        """Every setting by name (unset ones are defaulted as in get_setting)."""
        return {name: self.get_setting(name) for name in SETTINGS}
