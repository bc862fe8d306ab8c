"""Stack-based algorithms: infix to postfix, nearest greater elements."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operators are ``+ - * /``, left-associative; whitespace is ignored.
    Raises ValueError on unbalanced parentheses.
    """
    stack: list[str] = []
    output: list[str] = []
    for ch in expression:
        if ch.isspace():
            continue
        if ch in _PRECEDENCE:
            while stack and stack[-1] != "(" and _PRECEDENCE[stack[-1]] >= _PRECEDENCE[ch]:
                output.append(stack.pop())
            stack.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unmatched ')'")
            stack.pop()
        else:
            output.append(ch)
    while stack:
        top = stack.pop()
        if top == "(":
            raise ValueError("unmatched '('")
        output.append(top)
    return "".join(output)


def _nearest_not_smaller(values: Iterable[Any]) -> list[Any | None]:
    stack: list[Any] = []
    result: list[Any | None] = []
    for value in values:
        while stack and stack[-1] < value:
            stack.pop()
        result.append(stack[-1] if stack else None)
        stack.append(value)
    return result


def previous_greater(values: Iterable[Any]) -> list[Any | None]:
    """For each value, the nearest earlier value not smaller than it, or None."""
    return _nearest_not_smaller(values)


def next_greater(values: Sequence[Any]) -> list[Any | None]:
    """For each value, the nearest later value not smaller than it, or None."""
    result = _nearest_not_smaller(reversed(values))
    result.reverse()
    return result