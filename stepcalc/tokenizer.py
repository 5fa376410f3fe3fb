"""Lexical scanning of user input into Token objects."""

from __future__ import annotations

import re

from stepcalc.errors import InvalidFormat
from stepcalc.models import CLOSERS, OPENERS, OPERATORS, Token, TokenType

# One token per match; whitespace between tokens is skipped. ASCII only:
# fullwidth or other script digits and non-ASCII spaces are rejected.
# A number is digits with at most one fractional part: "3", "3.14" (not "3.", ".5").
_TOKEN_RE = re.compile(r"\s*(?:(?P<number>\d+(?:\.\d+)?)|(?P<symbol>[-+*/^(){}]))", re.ASCII)
_TRAILING_WS_RE = re.compile(r"\s*", re.ASCII)


def _classify(symbol: str) -> TokenType:
    if symbol in OPENERS:
        return TokenType.OPEN_BRACKET
    if symbol in CLOSERS:
        return TokenType.CLOSE_BRACKET
    if symbol in OPERATORS:
        return TokenType.OPERATOR
    raise InvalidFormat()


def tokenize(expression: str) -> list[Token]:
    """Scan an expression into tokens.

    Raises:
        InvalidFormat: on any character outside the grammar or a malformed
            numeric literal (the position of the offending character is
            attached to the error).
    """
    tokens: list[Token] = []
    pos = 0
    end = len(expression)

    while pos < end:
        m = _TOKEN_RE.match(expression, pos)
        if not m:
            tail = _TRAILING_WS_RE.match(expression, pos)
            if tail and tail.end() == end:
                break
            raise InvalidFormat(position=tail.end() if tail else pos)

        number = m.group("number")
        if number is not None:
            token = Token(TokenType.NUMBER, number, m.start("number"))
        else:
            symbol = m.group("symbol")
            token = Token(_classify(symbol), symbol, m.start("symbol"))
        tokens.append(token)
        pos = m.end()

    return tokens
