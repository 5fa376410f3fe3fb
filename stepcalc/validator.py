"""Structural validation of an expression before any computation.

Checks run in a fixed order so each failure maps to one error kind:

1. token grammar           → InvalidFormat
2. closer without a matching opener of the same kind → MismatchedBrackets
3. opener never closed     → UnclosedBrackets
4. operand/operator order  → InvalidFormat
"""

from __future__ import annotations

import logging

from stepcalc.errors import InvalidFormat, MismatchedBrackets, UnclosedBrackets
from stepcalc.models import Token, TokenType
from stepcalc.tokenizer import tokenize

logger = logging.getLogger(__name__)


def _check_brackets(tokens: list[Token]) -> None:
    stack: list[Token] = []
    for tok in tokens:
        if tok.type == TokenType.OPEN_BRACKET:
            stack.append(tok)
        elif tok.type == TokenType.CLOSE_BRACKET:
            if not stack or stack[-1].bracket_kind != tok.bracket_kind:
                raise MismatchedBrackets(position=tok.position)
            stack.pop()
    if stack:
        raise UnclosedBrackets(position=stack[-1].position)


def _check_sequence(tokens: list[Token]) -> None:
    """Operands and binary operators must alternate, brackets must hold something."""
    expect_operand = True
    for tok in tokens:
        if expect_operand:
            if tok.type == TokenType.NUMBER:
                expect_operand = False
            elif tok.type != TokenType.OPEN_BRACKET:
                raise InvalidFormat(position=tok.position)
        else:
            if tok.type == TokenType.OPERATOR:
                expect_operand = True
            elif tok.type != TokenType.CLOSE_BRACKET:
                raise InvalidFormat(position=tok.position)
    if expect_operand:
        position = tokens[-1].position if tokens else 0
        raise InvalidFormat(position=position)


def validate(expression: str) -> list[Token]:
    """Validate an expression, returning its tokens.

    Raises:
        InvalidFormat, MismatchedBrackets, UnclosedBrackets
    """
    tokens = tokenize(expression)
    if not tokens:
        raise InvalidFormat(position=0)
    _check_brackets(tokens)
    _check_sequence(tokens)
    logger.debug("Validated %r (%d tokens)", expression, len(tokens))
    return tokens
