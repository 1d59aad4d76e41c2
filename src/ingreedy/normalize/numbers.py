"""Resolution of numeric literals (digits, fractions, number words) to amounts."""

import math
import re
from collections.abc import Callable

from ingreedy.exceptions import MalformedNumberError
from ingreedy.models import LiteralKind, NumericLiteral

# =============================================================================
# Lookup Tables
# =============================================================================

# Spelled-out numbers; compound forms like "twenty-one" are not recognized
WRITTEN_NUMBERS: dict[str, float] = {
    "a": 1.0,
    "an": 1.0,
    "zero": 0.0,
    "one": 1.0,
    "two": 2.0,
    "three": 3.0,
    "four": 4.0,
    "five": 5.0,
    "six": 6.0,
    "seven": 7.0,
    "eight": 8.0,
    "nine": 9.0,
    "ten": 10.0,
    "eleven": 11.0,
    "twelve": 12.0,
    "thirteen": 13.0,
    "fourteen": 14.0,
    "fifteen": 15.0,
    "sixteen": 16.0,
    "seventeen": 17.0,
    "eighteen": 18.0,
    "nineteen": 19.0,
    "twenty": 20.0,
    "thirty": 30.0,
    "forty": 40.0,
    "fifty": 50.0,
    "sixty": 60.0,
    "seventy": 70.0,
    "eighty": 80.0,
    "ninety": 90.0,
}

# Single-glyph vulgar fractions
UNICODE_FRACTIONS: dict[str, float] = {
    "¼": 1 / 4,
    "½": 1 / 2,
    "¾": 3 / 4,
    "⅐": 1 / 7,
    "⅑": 1 / 9,
    "⅒": 1 / 10,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "⅕": 1 / 5,
    "⅖": 2 / 5,
    "⅗": 3 / 5,
    "⅘": 4 / 5,
    "⅙": 1 / 6,
    "⅚": 5 / 6,
    "⅛": 1 / 8,
    "⅜": 3 / 8,
    "⅝": 5 / 8,
    "⅞": 7 / 8,
}

# Whole part, optional break or hyphen, then the fractional part
_MIXED_NUMBER = re.compile(r"^(\d+)[\s,-]*(.+)$")


# =============================================================================
# Resolvers
# =============================================================================


def _finite_value(text: str, compute: Callable[[], float]) -> float:
    """
    Evaluate a literal's value, which must fit in a finite float.

    Raises:
        MalformedNumberError: If the digits are too long or the value overflows.
    """
    try:
        value = compute()
    except (OverflowError, ValueError) as e:
        raise MalformedNumberError(f"Number too large: '{text}'", text=text) from e
    if not math.isfinite(value):
        raise MalformedNumberError(f"Number too large: '{text}'", text=text)
    return value


def resolve_integer(text: str) -> NumericLiteral:
    """Resolve a run of digits."""
    value = _finite_value(text, lambda: float(int(text)))
    return NumericLiteral(value=value, kind=LiteralKind.INTEGER, text=text)


def resolve_decimal(text: str) -> NumericLiteral:
    """Resolve a decimal such as "1.5" or ".25"."""
    value = _finite_value(text, lambda: float(text))
    return NumericLiteral(value=value, kind=LiteralKind.DECIMAL, text=text)


def resolve_vulgar_fraction(text: str) -> NumericLiteral:
    """
    Resolve a "<numerator>/<denominator>" fraction.

    Raises:
        MalformedNumberError: If the denominator is zero or the value overflows.
    """
    try:
        numerator, denominator = (int(part) for part in text.split("/"))
    except ValueError as e:
        raise MalformedNumberError(f"Number too large: '{text}'", text=text) from e
    if denominator == 0:
        raise MalformedNumberError(f"Zero denominator in fraction '{text}'", text=text)
    return NumericLiteral(
        value=_finite_value(text, lambda: numerator / denominator),
        kind=LiteralKind.VULGAR_FRACTION,
        text=text,
    )


def resolve_unicode_fraction(text: str) -> NumericLiteral:
    """Resolve a single fraction glyph such as "½"."""
    return NumericLiteral(
        value=UNICODE_FRACTIONS[text],
        kind=LiteralKind.UNICODE_FRACTION,
        text=text,
    )


def resolve_fraction(text: str) -> NumericLiteral:
    """Resolve either fraction form."""
    if text in UNICODE_FRACTIONS:
        return resolve_unicode_fraction(text)
    return resolve_vulgar_fraction(text)


def resolve_mixed_number(text: str) -> NumericLiteral:
    """Resolve "1 1/2", "1-1/2", "1-½" or "1½"."""
    match = _MIXED_NUMBER.match(text)
    if not match:
        raise MalformedNumberError(f"Not a mixed number: '{text}'", text=text)
    whole = match.group(1)
    fraction = resolve_fraction(match.group(2))
    return NumericLiteral(
        value=_finite_value(text, lambda: int(whole) + fraction.value),
        kind=LiteralKind.MIXED_NUMBER,
        text=text,
    )


def resolve_written_number(text: str) -> NumericLiteral:
    """Resolve a number word; matching ignores case."""
    return NumericLiteral(
        value=WRITTEN_NUMBERS[text.lower()],
        kind=LiteralKind.WRITTEN,
        text=text,
    )


_RESOLVERS: dict[LiteralKind, Callable[[str], NumericLiteral]] = {
    LiteralKind.INTEGER: resolve_integer,
    LiteralKind.DECIMAL: resolve_decimal,
    LiteralKind.VULGAR_FRACTION: resolve_vulgar_fraction,
    LiteralKind.UNICODE_FRACTION: resolve_unicode_fraction,
    LiteralKind.MIXED_NUMBER: resolve_mixed_number,
    LiteralKind.WRITTEN: resolve_written_number,
}


def resolve_literal(kind: LiteralKind, text: str) -> NumericLiteral:
    """
    Resolve a span the grammar already identified as a numeric literal.

    Args:
        kind: Which literal form the span was matched as.
        text: The matched text.

    Returns:
        NumericLiteral carrying the scalar value.
    """
    return _RESOLVERS[kind](text)


# =============================================================================
# Grammar Support
# =============================================================================


def written_number_pattern() -> str:
    """Regex alternation of number words, longest first so "sixteen" beats "six"."""
    words = sorted(WRITTEN_NUMBERS, key=len, reverse=True)
    return "(?:" + "|".join(words) + r")(?![^\W_])"


def unicode_fraction_pattern() -> str:
    """Character class of the supported fraction glyphs."""
    return "[" + "".join(UNICODE_FRACTIONS) + "]"
