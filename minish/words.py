"""Splitting command text into arguments and resolving command paths."""

from __future__ import annotations

from minish.expand import expand, unquote

_BUILTINS = frozenset({"cd", "echo", "env", "exit", "export", "pwd", "unset"})
_QUOTES = ("'", '"')


def _skip_quoted(text: str, position: int) -> int:
    """Return the index after the quoted run that opens at ``position``."""
    close = text.find(text[position], position + 1)
    return len(text) if close == -1 else close + 1


def count_words(text: str) -> int:
    """Count the space-separated words of ``text``, quotes joining their content."""
    count = 0
    in_word = False
    position = 0
    length = len(text)
    while position < length:
        char = text[position]
        if char in _QUOTES:
            if not in_word:
                count += 1
                in_word = True
            position = _skip_quoted(text, position)
        elif char == " ":
            in_word = False
            position += 1
        else:
            if not in_word:
                count += 1
                in_word = True
            position += 1
    return count


def split_words(text: str) -> list[str]:
    """Split ``text`` at spaces outside quotes; quotes are kept in the words."""
    words: list[str] = []
    position = 0
    length = len(text)
    while position < length:
        if text[position] == " ":
            position += 1
            continue
        start = position
        while position < length and text[position] != " ":
            if text[position] in _QUOTES:
                position = _skip_quoted(text, position)
            else:
                position += 1
        words.append(text[start:position])
    return words


def split_search_path(value: str) -> list[str]:
    """Split a ``PATH`` value into directories, each ending with ``/``."""
    return [directory + "/" for directory in value.split(":") if directory]


def base_name(path: str) -> str:
    """Return the part of ``path`` after its last ``/``."""
    return path.rpartition("/")[2]


def has_slash(text: str) -> bool:
    """Tell whether ``text`` holds a ``/``."""
    return "/" in text


def ends_with_slash(text: str) -> bool:
    """Tell whether ``text`` ends with ``/``."""
    return text.endswith("/")


def is_builtin(word: str, env, exit_status: int) -> bool:
    """Tell whether ``word``, once expanded and unquoted, names a builtin."""
    return unquote(expand(word, env, exit_status)) in _BUILTINS