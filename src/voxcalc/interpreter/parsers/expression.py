"""Small arithmetic evaluator for sanitized expressions.

Supported grammar::

    expression := term (("+" | "-") term)*
    term       := unary (("*" | "/" | "%") unary)*
    unary      := ("+" | "-") unary | primary
    primary    := NUMBER | "(" expression ")"

``%`` is the truncated remainder (the result takes the sign of the dividend).
Nothing outside this grammar is ever executed.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

__all__ = ["MAX_DEPTH", "ExpressionError", "Token", "evaluate_expression", "tokenize"]

_OPERATORS = "+-*/%()"
_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "%": 2}
_PREFIX_PRECEDENCE = 3
# Nested parentheses and prefix signs, each costing one parser frame.
MAX_DEPTH = 100


class ExpressionError(ValueError):
    """Raised when an expression cannot be tokenized or parsed."""


@dataclass(frozen=True)
class Token:
    kind: str  # "number" or "op"
    text: str
    position: int


def tokenize(expr: str) -> List[Token]:
    tokens: List[Token] = []
    i = 0
    while i < len(expr):
        ch = expr[i]
        if ch.isspace():
            i += 1
            continue
        if ch in _OPERATORS:
            tokens.append(Token("op", ch, i))
            i += 1
            continue
        if ch.isdigit() or ch == ".":
            j = i + 1
            saw_dot = ch == "."
            while j < len(expr):
                nxt = expr[j]
                if nxt.isdigit():
                    j += 1
                    continue
                if nxt == "." and not saw_dot:
                    saw_dot = True
                    j += 1
                    continue
                break
            literal = expr[i:j]
            if literal == ".":
                raise ExpressionError(f"Malformed number at position {i}")
            tokens.append(Token("number", literal, i))
            i = j
            continue
        raise ExpressionError(f"Unexpected character {ch!r} at position {i}")
    return tokens


def _apply(op: str, left: float, right: float) -> float:
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if right == 0:
        raise ZeroDivisionError(f"{'division' if op == '/' else 'modulo'} by zero")
    if op == "/":
        return left / right
    return math.fmod(left, right)


class _Parser:
    def __init__(self, tokens: List[Token]) -> None:
        self.tokens = tokens
        self.idx = 0
        self.depth = 0

    def peek(self) -> Token | None:
        return self.tokens[self.idx] if self.idx < len(self.tokens) else None

    def parse(self) -> float:
        value = self.expression(0)
        token = self.peek()
        if token is not None:
            raise ExpressionError(f"Unexpected {token.text!r} at position {token.position}")
        return value

    def expression(self, min_prec: int) -> float:
        if self.depth >= MAX_DEPTH:
            raise ExpressionError(f"Expression nested deeper than {MAX_DEPTH} levels")
        self.depth += 1
        try:
            return self._expression(min_prec)
        finally:
            self.depth -= 1

    def _expression(self, min_prec: int) -> float:
        token = self.peek()
        if token is None:
            raise ExpressionError("Unexpected end of expression")
        self.idx += 1
        if token.kind == "number":
            left = float(token.text)
        elif token.text in ("+", "-"):
            operand = self.expression(_PREFIX_PRECEDENCE)
            left = operand if token.text == "+" else -operand
        elif token.text == "(":
            left = self.expression(0)
            closing = self.peek()
            if closing is None or closing.text != ")":
                raise ExpressionError(f"Missing ')' for '(' at position {token.position}")
            self.idx += 1
        else:
            raise ExpressionError(f"Unexpected {token.text!r} at position {token.position}")

        while True:
            op = self.peek()
            if op is None or op.kind != "op":
                break
            prec = _PRECEDENCE.get(op.text)
            if prec is None or prec < min_prec:
                break
            self.idx += 1
            right = self.expression(prec + 1)
            left = _apply(op.text, left, right)
        return left


def evaluate_expression(expr: str) -> float:
    """Evaluate ``expr`` with standard precedence.

    Raises :class:`ExpressionError` on syntax errors and
    :class:`ZeroDivisionError` on division or modulo by zero.
    """

    tokens = tokenize(expr)
    if not tokens:
        raise ExpressionError("Empty expression")
    return _Parser(tokens).parse()
