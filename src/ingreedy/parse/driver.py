"""Top-level parsing of one ingredient line."""

from parsimonious.exceptions import ParseError as GrammarParseError
from pydantic import BaseModel, ConfigDict

from ingreedy.exceptions import UnrecognizedInputError
from ingreedy.logging_config import get_logger
from ingreedy.models import ParsedIngredient
from ingreedy.parse.combine import MultipartPolicy
from ingreedy.parse.grammar import INGREDIENT_GRAMMAR
from ingreedy.parse.visitor import IngredientVisitor

logger = get_logger(__name__)

# Stripped from both ends of the ingredient text; the same characters as the grammar's break
TRIM_CHARS = " \t,-"

# Characters normalized before parsing
_REPLACEMENTS = {
    "\u2044": "/",  # fraction slash
    "\u00a0": " ",  # non-breaking space
}


class ParseOptions(BaseModel):
    """Knobs for interpreting an ingredient line."""

    model_config = ConfigDict(frozen=True)

    multipart_policy: MultipartPolicy = MultipartPolicy.LIST
    strip_of_prefix: bool = False


DEFAULT_OPTIONS = ParseOptions()


def normalize_text(raw: str) -> str:
    """Trim the line and replace look-alike characters the grammar does not know."""
    text = raw.strip()
    for old, new in _REPLACEMENTS.items():
        text = text.replace(old, new)
    return text


def clean_ingredient_text(residual: str, strip_of_prefix: bool = False) -> str:
    """Trim separators around the residual text, optionally dropping a leading "of"."""
    text = residual.strip(TRIM_CHARS)
    if strip_of_prefix and text.startswith("of "):
        text = text[3:].strip(TRIM_CHARS)
    return text


def parse(raw: str, options: ParseOptions | None = None) -> ParsedIngredient:
    """
    Parse a single ingredient line into quantities and ingredient text.

    Args:
        raw: The ingredient line, e.g. "2 (28 ounce) can crushed tomatoes".
        options: Interpretation options; defaults list every fragment and keep
            the residual text verbatim.

    Returns:
        ParsedIngredient. A line without any quantity is not an error: its
        quantities are empty and the whole trimmed line is the ingredient text.

    Raises:
        MalformedNumberError: If a number matched but has no value, e.g. "1/0".
        UnrecognizedInputError: If the line cannot be consumed entirely,
            e.g. it spans several lines.
    """
    options = options or DEFAULT_OPTIONS
    text = normalize_text(raw)

    try:
        tree = INGREDIENT_GRAMMAR.parse(text)
    except GrammarParseError as e:
        logger.debug(f"Grammar rejected {text!r} at position {e.pos}")
        raise UnrecognizedInputError(
            f"Could not parse ingredient line at position {e.pos}: {text!r}",
            text=text,
            position=e.pos,
        ) from e

    expression, residual = IngredientVisitor(options.multipart_policy).visit(tree)

    quantities = expression.quantities if expression is not None else ()
    ingredient = ParsedIngredient(
        quantities=quantities,
        ingredient_text=clean_ingredient_text(residual, options.strip_of_prefix),
    )
    logger.debug(f"Parsed {text!r}: {len(quantities)} quantities")
    return ingredient
