#!/usr/bin/env python3
"""
Quick-Entry Parser

Turns free-text shorthand such as "$150-25 - new battery" or "45 oil filter"
into an amount and a title for a new line item.

Three grammars are tried in order and the first structural match wins:

1. Labeled:  optional "$", expression, "-", title   ("$150-25 - new battery")
2. Spaced:   expression, whitespace, title           ("45 oil filter")
3. Fallback: expression followed by anything         ("45", "45+5parts")

The amount expression is evaluated by a four-operator calculator over
decimal literals. Nothing here ever hands input to ``eval``.
"""

import logging
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, DecimalException, InvalidOperation
from enum import Enum

from ..core.currency import CENT
from ..core.money import Money

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Expense"

_EXPR = r"[0-9+\-*/.\s]+"
LABELED_PATTERN = re.compile(rf"\$?\s*({_EXPR})\s*-\s*(.+)")
SPACED_PATTERN = re.compile(rf"({_EXPR})\s+(.+)")
FALLBACK_PATTERN = re.compile(rf"({_EXPR})(.*)")

_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")
_ALPHABET = re.compile(r"[0-9+\-*/.]+")


class ParseErrorKind(Enum):
    """Reasons a quick entry can be rejected."""

    EMPTY_INPUT = "empty_input"
    EMPTY_TITLE = "empty_title"
    INVALID_AMOUNT = "invalid_amount"
    UNPARSEABLE = "unparseable"


@dataclass(frozen=True)
class QuickEntry:
    """A successfully parsed entry."""

    amount: Money
    title: str


@dataclass(frozen=True)
class QuickEntryError:
    """A rejected entry with a message suitable for showing to the user."""

    kind: ParseErrorKind
    message: str


class ExpressionError(ValueError):
    """Raised when an amount expression is malformed or cannot be evaluated."""

    pass


class _ExpressionParser:
    """
    Recursive-descent evaluator for the two-level grammar::

        expression := term (("+" | "-") term)*
        term       := number (("*" | "/") number)*
        number     := digits ["." digits] | "." digits
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def parse(self) -> Decimal:
        value = self._expression()
        if self.pos != len(self.text):
            raise ExpressionError(f"unexpected '{self.text[self.pos]}' at position {self.pos}")
        return value

    def _peek(self) -> str | None:
        return self.text[self.pos] if self.pos < len(self.text) else None

    def _expression(self) -> Decimal:
        result = self._term()
        while self._peek() in ("+", "-"):
            op = self.text[self.pos]
            self.pos += 1
            value = self._term()
            result = result + value if op == "+" else result - value
        return result

    def _term(self) -> Decimal:
        result = self._number()
        while self._peek() in ("*", "/"):
            op = self.text[self.pos]
            self.pos += 1
            value = self._number()
            if op == "*":
                result *= value
            else:
                if value == 0:
                    raise ExpressionError("division by zero")
                result /= value
        return result

    def _number(self) -> Decimal:
        match = _NUMBER.match(self.text, self.pos)
        if match is None:
            if self._peek() is None:
                raise ExpressionError("expression ends unexpectedly")
            raise ExpressionError(f"expected a number at position {self.pos}")
        self.pos = match.end()
        try:
            return Decimal(match.group())
        except InvalidOperation as e:
            raise ExpressionError(f"bad number '{match.group()}'") from e


def evaluate_expression(expression: str) -> Decimal:
    """
    Evaluate an amount expression and round it to cents.

    Whitespace is ignored. Only digits, ".", "+", "-", "*" and "/" are
    allowed; "*" and "/" bind tighter than "+" and "-", and each level folds
    left to right.

    Args:
        expression: Text like "150-25" or "3 * 12.50"

    Returns:
        The value rounded half-up to two decimal places

    Raises:
        ExpressionError: On an empty or malformed expression or division by zero

    Examples:
        evaluate_expression("150-25") -> Decimal("125.00")
        evaluate_expression("10/3") -> Decimal("3.33")
    """
    cleaned = re.sub(r"\s", "", expression)
    if not cleaned:
        raise ExpressionError("empty expression")
    if not _ALPHABET.fullmatch(cleaned):
        raise ExpressionError("expression contains unsupported characters")
    try:
        value = _ExpressionParser(cleaned).parse()
        return value.quantize(CENT, rounding=ROUND_HALF_UP)
    except DecimalException as e:
        raise ExpressionError("amount out of range") from e


def _build_entry(amount_text: str, title: str) -> QuickEntry | QuickEntryError:
    title = title.strip()
    if not title:
        return QuickEntryError(ParseErrorKind.EMPTY_TITLE, "Title cannot be empty")

    try:
        amount = evaluate_expression(amount_text)
    except ExpressionError as e:
        logger.debug("Rejected amount expression %r: %s", amount_text, e)
        return QuickEntryError(ParseErrorKind.INVALID_AMOUNT, f"Invalid amount: {e}")

    if not amount.is_finite() or amount <= 0:
        return QuickEntryError(ParseErrorKind.INVALID_AMOUNT, "Invalid amount: must be greater than zero")

    return QuickEntry(amount=Money.from_decimal(amount), title=title)


def parse_quick_entry(text: str, default_title: str = DEFAULT_TITLE) -> QuickEntry | QuickEntryError:
    """
    Parse quick-entry text into an amount and title.

    Args:
        text: Raw user input
        default_title: Title used when the fallback form has no trailing text

    Returns:
        QuickEntry on success, QuickEntryError describing the failure otherwise

    Examples:
        parse_quick_entry("$150-25 - new battery") -> QuickEntry($125.00, "new battery")
        parse_quick_entry("45 oil filter") -> QuickEntry($45.00, "oil filter")
        parse_quick_entry("10/0 something") -> QuickEntryError(INVALID_AMOUNT, ...)
    """
    trimmed = text.strip()
    if not trimmed:
        return QuickEntryError(ParseErrorKind.EMPTY_INPUT, "Input cannot be empty")

    match = LABELED_PATTERN.fullmatch(trimmed)
    if match:
        return _build_entry(match.group(1), match.group(2))

    match = SPACED_PATTERN.fullmatch(trimmed)
    if match:
        return _build_entry(match.group(1), match.group(2))

    match = FALLBACK_PATTERN.fullmatch(trimmed)
    if match:
        return _build_entry(match.group(1), match.group(2).strip() or default_title)

    return QuickEntryError(
        ParseErrorKind.UNPARSEABLE,
        "Could not parse input. Try format: $190 - description",
    )
