"""Resolve matched text spans into amounts and units."""

from ingreedy.normalize.numbers import (
    UNICODE_FRACTIONS,
    WRITTEN_NUMBERS,
    resolve_literal,
)
from ingreedy.normalize.units import (
    CANONICAL_UNITS,
    ENGLISH_UNITS,
    IMPRECISE_UNITS,
    METRIC_UNITS,
    resolve_unit,
)

__all__ = [
    "CANONICAL_UNITS",
    "ENGLISH_UNITS",
    "IMPRECISE_UNITS",
    "METRIC_UNITS",
    "UNICODE_FRACTIONS",
    "WRITTEN_NUMBERS",
    "resolve_literal",
    "resolve_unit",
]
