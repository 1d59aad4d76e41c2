"""Unit vocabulary: textual synonyms, canonical names and categories."""

import re
from itertools import product

from ingreedy.logging_config import get_logger
from ingreedy.models import ResolvedUnit, UnitCategory

logger = get_logger(__name__)


# =============================================================================
# Unit Synonym Tables
# =============================================================================

# Matching is case-sensitive: "T" is a tablespoon, "t" a teaspoon.
_FLUID = ("fluid", "fl.", "fl")
_OUNCE = ("ounces", "ounce", "oz.", "oz")

ENGLISH_UNITS: dict[str, tuple[str, ...]] = {
    "cup": ("cups", "cup", "c.", "c"),
    "fluid ounce": tuple(f"{fluid} {ounce}" for fluid, ounce in product(_FLUID, _OUNCE)),
    "gallon": ("gallons", "gallon", "gal.", "gal"),
    "calorie": (
        "kilocalories",
        "kilocalorie",
        "calories",
        "calorie",
        "kcal",
        "kCal",
        "cal",
        "Cal",
    ),
    "ounce": _OUNCE,
    "pint": ("pints", "pint", "pt.", "pt"),
    "pound": ("pounds", "pound", "lbs.", "lbs", "lb.", "lb"),
    "quart": ("quarts", "quart", "qts.", "qts", "qt.", "qt"),
    "tablespoon": (
        "tablespoons",
        "tablespoon",
        "tbsp.",
        "tbsp",
        "tbs.",
        "tbs",
        "T.",
        "T",
    ),
    "teaspoon": ("teaspoons", "teaspoon", "tsp.", "tsp", "t.", "t"),
}

METRIC_UNITS: dict[str, tuple[str, ...]] = {
    "gram": ("grams", "gram", "gr.", "gr", "g.", "g"),
    "joule": ("joules", "joule", "J"),
    "kilogram": ("kilograms", "kilogram", "kg.", "kg"),
    "kilojoule": ("kilojoules", "kilojoule", "kJ", "kj"),
    "liter": ("liters", "liter", "litres", "litre", "l.", "l"),
    "milligram": ("milligrams", "milligram", "mg.", "mg"),
    "milliliter": (
        "milliliters",
        "milliliter",
        "millilitres",
        "millilitre",
        "ml.",
        "ml",
    ),
}

# No conversion factor; only recognized as a measure of their own
IMPRECISE_UNITS: dict[str, tuple[str, ...]] = {
    "dash": ("dashes", "dash"),
    "handful": ("handfuls", "handful"),
    "pinch": ("pinches", "pinch"),
    "touch": ("touches", "touch"),
}

UNIT_TABLES: dict[UnitCategory, dict[str, tuple[str, ...]]] = {
    UnitCategory.ENGLISH: ENGLISH_UNITS,
    UnitCategory.METRIC: METRIC_UNITS,
    UnitCategory.IMPRECISE: IMPRECISE_UNITS,
}


def _synonym_key(text: str) -> str:
    """Lookup key for a synonym: whitespace inside composed units is ignored."""
    return "".join(text.split())


def _build_synonym_index() -> dict[str, ResolvedUnit]:
    index: dict[str, ResolvedUnit] = {}
    for category, table in UNIT_TABLES.items():
        for name, synonyms in table.items():
            unit = ResolvedUnit(name=name, category=category)
            for synonym in synonyms:
                index.setdefault(_synonym_key(synonym), unit)
    return index


SYNONYM_INDEX: dict[str, ResolvedUnit] = _build_synonym_index()

CANONICAL_UNITS: frozenset[str] = frozenset(
    name for table in UNIT_TABLES.values() for name in table
)


# =============================================================================
# Resolution
# =============================================================================


def resolve_unit(text: str) -> ResolvedUnit | None:
    """
    Resolve a unit token to its canonical unit.

    Examples:
        "tbsp" -> tablespoon (English)
        "fl. oz" -> fluid ounce (English)
        "kg" -> kilogram (Metric)
        "pinches" -> pinch (Imprecise)

    Returns:
        The resolved unit, or None if the token is not in the vocabulary.
    """
    unit = SYNONYM_INDEX.get(_synonym_key(text))
    if unit is None:
        logger.debug(f"Unknown unit token: {text!r}")
    return unit


def unit_pattern(category: UnitCategory) -> str:
    """
    Build the regex matching any synonym of the given category.

    Longer synonyms come first so "tablespoons" is never cut short to "T",
    and a synonym may not be followed directly by another letter.
    """
    synonyms = sorted(
        (synonym for synonyms in UNIT_TABLES[category].values() for synonym in synonyms),
        key=len,
        reverse=True,
    )
    alternatives = [re.escape(synonym).replace(r"\ ", r"[ \t]*") for synonym in synonyms]
    return "(?:" + "|".join(alternatives) + r")(?![^\W\d_])"
