"""Natural-language parsing of recipe ingredient lines."""

from ingreedy.exceptions import MalformedNumberError, ParseError, UnrecognizedInputError
from ingreedy.models import (
    LiteralKind,
    NumericLiteral,
    ParsedIngredient,
    Quantity,
    ResolvedUnit,
    UnitCategory,
)
from ingreedy.parse import MultipartPolicy, ParseOptions, parse

__version__ = "0.2.0"

__all__ = [
    "LiteralKind",
    "MalformedNumberError",
    "MultipartPolicy",
    "NumericLiteral",
    "ParseError",
    "ParseOptions",
    "ParsedIngredient",
    "Quantity",
    "ResolvedUnit",
    "UnitCategory",
    "UnrecognizedInputError",
    "parse",
]
