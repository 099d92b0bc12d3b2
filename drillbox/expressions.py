"""Bracket matching and infix-to-postfix conversion using a stack."""

from __future__ import annotations

_PAIRS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = frozenset(_PAIRS.values())
OPERATORS = frozenset("+-*/%")
_PRIORITY = {"*": 1, "/": 1, "%": 1}


class ExpressionError(ValueError):
    """Raised when an expression cannot be converted."""


def is_balanced(expression: str) -> bool:
    """Check that every closing bracket closes an opening bracket of the same kind.

    Returns False when a closing bracket has no opener or closes the wrong kind.
    Opening brackets that are never closed are not reported.
    """
    stack: list[str] = []
    for symbol in expression:
        if symbol in _PAIRS:
            stack.append(symbol)
        elif symbol in _CLOSERS:
            if not stack or _PAIRS[stack.pop()] != symbol:
                return False
    return True


def precedence(symbol: str) -> int:
    """Return 1 for ``*``, ``/`` and ``%``, and 0 for any other single character.

    Raises ValueError when ``symbol`` is not exactly one character.
    """
    if len(symbol) != 1:
        raise ValueError(f"expected a single character, got {symbol!r}")
    return _PRIORITY.get(symbol, 0)


def to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operands are ASCII letters and digits; operators are ``+ - * / %``.
    An operator on the stack is emitted only when it binds strictly tighter
    than the incoming one.
    """
    stack: list[str] = []
    output: list[str] = []
    for symbol in expression:
        if symbol == "(":
            stack.append(symbol)
        elif symbol == ")":
            if not stack:
                raise ExpressionError("invalid expression")
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ExpressionError("invalid expression")
            stack.pop()
        elif symbol.isascii() and symbol.isalnum():
            output.append(symbol)
        elif symbol in OPERATORS:
            while stack and stack[-1] != "(" and precedence(stack[-1]) > precedence(symbol):
                output.append(stack.pop())
            stack.append(symbol)
        else:
            raise ExpressionError(f"invalid character {symbol!r}")
    while stack and stack[-1] != "(":
        output.append(stack.pop())
    return "".join(output)