"""Shell environment: an ordered list of ``NAME=value`` (or bare ``NAME``) entries."""

from __future__ import annotations

import os
import string
from collections.abc import Iterable, Iterator

_IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "_")


def _name_of(entry: str) -> str:
    """Return the part of an entry before its first ``=``."""
    return entry.partition("=")[0]


def _plus_equal(argument: str) -> int:
    """1 if the first ``+`` is followed by ``=``, 0 if not, -1 if there is no ``+``."""
    position = argument.find("+")
    if position == -1:
        return -1
    return 1 if argument[position + 1 : position + 2] == "=" else 0


def is_invalid_identifier(argument: str) -> bool:
    """Tell whether an ``export`` argument does not name a valid variable."""
    if not argument or argument[0].isdigit() or argument[0] == "=":
        return True
    if _plus_equal(argument) == 1:
        return False
    return any(char not in _IDENTIFIER_CHARS for char in _name_of(argument))


def remove_plus(argument: str) -> str:
    """Drop every ``+`` from an argument."""
    return argument.replace("+", "")


def split_assignment(entry: str) -> tuple[str, str | None]:
    """Split an entry at its first ``=``.

    The value is ``None`` when there is no ``=`` or when the only ``=`` found
    closes the entry; in the latter case that trailing ``=`` is dropped.
    """
    for position, char in enumerate(entry):
        if char == "=" and position != len(entry) - 1:
            return entry[:position], entry[position + 1 :]
    if entry.endswith("="):
        return entry[:-1], None
    return entry, None


def export_line(entry: str) -> str:
    """Format an entry the way ``export`` with no argument lists it."""
    if "=" not in entry:
        return f"export {entry}"
    name, value = split_assignment(entry)
    if value is None:
        return f'export {name}=""'
    return f'export {name}="{value}"'


class Environment:
    """Ordered, mutable set of environment entries."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: list[str] = list(entries)

    @classmethod
    def from_os(cls) -> Environment:
        """Build an environment from the process environment."""
        return cls(f"{name}={value}" for name, value in os.environ.items())

    def get(self, name: str) -> str | None:
        """Return the value of ``name``, or ``None`` when it has no value."""
        prefix = name + "="
        for entry in self._entries:
            if entry.startswith(prefix):
                return entry[len(prefix) :]
        return None

    def exists(self, name: str) -> bool:
        """Tell whether ``name`` is defined, with or without a value."""
        return any(_name_of(entry) == name for entry in self._entries)

    def export(self, assignment: str) -> None:
        """Apply one ``export`` argument: add, replace or append to a variable.

        Raises ``ValueError`` when the argument is not a valid identifier.
        """
        if is_invalid_identifier(assignment):
            raise ValueError(f"`{assignment}': not a valid identifier")
        name = _name_of(assignment)
        stripped = remove_plus(assignment)
        stripped_name = _name_of(stripped)
        appends = _plus_equal(assignment) == 1
        for index, entry in enumerate(self._entries):
            entry_name = _name_of(entry)
            if entry_name == name:
                if "=" in assignment:
                    self._entries[index] = assignment
                return
            if appends and entry_name == stripped_name:
                self._entries[index] = self._appended(entry, assignment)
                return
        self._entries.append(stripped)

    @staticmethod
    def _appended(entry: str, assignment: str) -> str:
        _, value = split_assignment(assignment)
        if "=" not in entry:
            entry += "="
        if value is not None:
            entry += value
        return entry

    def unset(self, names: Iterable[str]) -> None:
        """Remove every variable named in ``names``; unknown names are ignored."""
        for name in names:
            if self.exists(name):
                self._entries = [e for e in self._entries if _name_of(e) != name]

    def sorted_entries(self) -> list[str]:
        """Return the entries in character order, leaving the environment as is."""
        return sorted(self._entries)

    def search_path(self) -> str | None:
        """Return the value of ``PATH``, or ``None`` when it is not set."""
        for entry in self._entries:
            if entry.startswith("PATH="):
                return entry[len("PATH=") :]
        return None

    def to_dict(self) -> dict[str, str]:
        """Return the variables that have a value, as a mapping for child processes."""
        result: dict[str, str] = {}
        for entry in self._entries:
            name, sep, value = entry.partition("=")
            if sep:
                result.setdefault(name, value)
        return result

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __repr__(self) -> str:
        return f"Environment({self._entries!r})"