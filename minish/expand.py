"""Variable expansion and quote removal on command words."""

from __future__ import annotations

import re
from typing import Protocol

_NAME = re.compile(r"[A-Za-z0-9_]+")
_QUOTES = ("'", '"')


class _Lookup(Protocol):
    def get(self, name: str) -> str | None: ...


def expand(text: str, env: _Lookup | None, exit_status: int) -> str:
    """Expand ``$NAME`` and ``$?`` outside single quotes.

    Quotes are kept; an unquoted ``$`` directly before a quote is dropped, and a
    ``$`` not followed by a name stays as it is. Inserted values are not rescanned.
    """
    out: list[str] = []
    single = double = False
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char == "$" and not single:
            following = text[i + 1 : i + 2]
            if not double and following in _QUOTES and following:
                i += 1
                continue
            if following == "?":
                out.append(str(exit_status))
                i += 2
                continue
            match = _NAME.match(text, i + 1)
            if match is None:
                out.append(char)
                i += 1
                continue
            value = env.get(match.group()) if env is not None else None
            out.append(value or "")
            i = match.end()
            continue
        if char == '"' and not single:
            double = not double
        elif char == "'" and not double:
            single = not single
        out.append(char)
        i += 1
    return "".join(out)


def unquote(text: str) -> str:
    """Remove paired quotes, keeping what they enclose as it is."""
    out: list[str] = []
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char in _QUOTES:
            end = text.find(char, i + 1)
            if end == -1:
                out.append(text[i + 1 :])
                break
            out.append(text[i + 1 : end])
            i = end + 1
        else:
            out.append(char)
            i += 1
    return "".join(out)


def is_quoted(text: str | None) -> bool:
    """Tell whether the text holds any quote character."""
    return bool(text) and any(quote in text for quote in _QUOTES)