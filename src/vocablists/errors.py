"""Errors raised by the settings, list and selection stores."""

from __future__ import annotations


class VocabListsError(Exception):
    """Base class for errors reported to callers of the stores."""


class UnknownSettingError(VocabListsError, KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unknown setting: {self.name!r}"


class ListNotFoundError(VocabListsError, LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"not a custom list: {name!r}")
        self.name = name


class ListAlreadyExistsError(VocabListsError):
    def __init__(self, name: str) -> None:
        super().__init__(f"already a custom list: {name!r}")
        self.name = name


class IndexOutOfBoundsError(VocabListsError, IndexError):
    def __init__(self, list_name: str, index: int, length: int) -> None:
        super().__init__(
            f"index out of bounds: index = {index}, {list_name}.length = {length}"
        )
        self.list_name = list_name
        self.index = index
        self.length = length


class InvalidImportDataError(VocabListsError, ValueError):
    """Import payload is not JSON of the form {"name": str, "words": [str, ...]}."""
