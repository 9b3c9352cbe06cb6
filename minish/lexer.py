"""Split a command line into operator and word tokens and check its syntax."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_METACHARS = frozenset("|&()<>;")
_BLANKS = frozenset(" \t")
_VALID_OPERATORS = frozenset({"|", "<", ">", ">>", "<<", "<>"})
_PIPE_PREFIXED = frozenset({"|>", "|<", "|>>", "|<<"})
_AFTER_PIPE = frozenset({"<", ">", "<<", ">>"})


class TokenType(enum.Enum):
    """Kind of a token."""

    OPERATOR = 0
    WORD = 1


@dataclass(frozen=True)
class Token:
    """One lexical unit of a command line."""

    content: str
    type: TokenType


class ShellSyntaxError(ValueError):
    """A command line that the shell refuses to run."""

    exit_status = 258


def _word_end(line: str, start: int) -> int:
    """Return the index just past the word starting at ``start``."""
    single = double = False
    position = start
    length = len(line)
    while position < length:
        char = line[position]
        if not (single or double) and (char in _METACHARS or char in _BLANKS):
            break
        if char == '"' and not single:
            double = not double
        elif char == "'" and not double:
            single = not single
        position += 1
    return position


def tokenize(line: str) -> list[Token]:
    """Split a line into tokens without checking their order."""
    tokens: list[Token] = []
    position = 0
    length = len(line)
    while position < length:
        while position < length and line[position] in _BLANKS:
            position += 1
        if position >= length:
            break
        if line[position] in _METACHARS:
            end = position
            while end < length and line[end] in _METACHARS:
                end += 1
            operator = line[position:end]
            if operator in _PIPE_PREFIXED:
                tokens.append(Token("|", TokenType.OPERATOR))
                tokens.append(Token(operator[1:], TokenType.OPERATOR))
            else:
                tokens.append(Token(operator, TokenType.OPERATOR))
        else:
            end = _word_end(line, position)
            word = line[position:end]
            if word:
                tokens.append(Token(word, TokenType.WORD))
        position = end
    return tokens


def _unclosed_quote(word: str) -> str | None:
    """Return the quote left open in ``word``, if any."""
    single = double = False
    for char in word:
        if char == '"' and not single:
            double = not double
        elif char == "'" and not double:
            single = not single
    if double:
        return '"'
    if single:
        return "'"
    return None


def _unexpected(token: str) -> ShellSyntaxError:
    return ShellSyntaxError(f"syntax error near unexpected token `{token}'")


def check(tokens: Iterable[Token]) -> None:
    """Raise ``ShellSyntaxError`` when the token sequence is not valid."""
    items: list[Token] = list(tokens)
    if not items:
        return
    first = items[0]
    if first.type is TokenType.OPERATOR and first.content == "|":
        raise _unexpected("|")
    followers: list[Token | None] = [*items[1:], None]
    for token, following in zip(items, followers):
        if token.type is TokenType.OPERATOR:
            if token.content not in _VALID_OPERATORS:
                raise _unexpected(token.content)
            if following is None:
                raise _unexpected("newline")
            if following.type is TokenType.OPERATOR and not (
                token.content == "|" and following.content in _AFTER_PIPE
            ):
                raise _unexpected(following.content)
        else:
            quote = _unclosed_quote(token.content)
            if quote is not None:
                raise ShellSyntaxError(f"syntax error: expected {quote} not found")


def lex(line: str) -> list[Token]:
    """Tokenize a line and check it; raise ``ShellSyntaxError`` on bad syntax."""
    tokens = tokenize(line)
    check(tokens)
    return tokens


def format_tokens(tokens: Sequence[Token] | Iterable[Token]) -> str:
    """Render tokens one per line as ``KIND:content``."""
    return "".join(f"{token.type.name}:{token.content}\n" for token in tokens)