"""PEG grammar recognizing the quantity prefix of an ingredient line.

The rules only decide *whether* text matches; what a match means is decided
by the interpretation functions in ``ingreedy.parse.fragments`` and
``ingreedy.parse.combine``. Unit and number-word alternatives are generated
from the same tables the resolvers use.
"""

from parsimonious.grammar import Grammar

from ingreedy.models import UnitCategory
from ingreedy.normalize.numbers import unicode_fraction_pattern, written_number_pattern
from ingreedy.normalize.units import unit_pattern

STRUCTURE_RULES = r"""
ingredient_addition = quantity_expression? break? ingredient

# 2lb 4oz / 1kg
quantity_expression = multipart_quantity alternative_quantity*
multipart_quantity = quantity_fragment (break? quantity_fragment)*
alternative_quantity = break? slash break? multipart_quantity

quantity_fragment = quantity / amount

quantity = amount_with_conversion
    / amount_with_attached_units
    / amount_with_multiplier
    / imprecise_unit

# 1 pound (16 ounces)
amount_with_conversion = amount break? unit break? parenthesized_quantity

# 12g, 16-ounce
amount_with_attached_units = amount break? unit

# 2 (28 ounce)
amount_with_multiplier = amount break? parenthesized_quantity

parenthesized_quantity = open break? amount_with_attached_units break? close

amount = float / mixed_number / fraction / integer / written_number

float = integer? "." integer
mixed_number = integer ((break fraction) / unicode_fraction)
fraction = multicharacter_fraction / unicode_fraction
multicharacter_fraction = integer "/" integer
integer = ~"[0-9]+"

unit = english_unit / metric_unit / imprecise_unit

ingredient = ingredient_name? residual
ingredient_name = word (break word)*
word = ~r"[^\W\d_]+"
residual = ~".*"

break = ~r"[ \t,-]+"
slash = "/"
open = "("
close = ")"
"""


def _vocabulary_rules() -> str:
    rules = {
        "english_unit": unit_pattern(UnitCategory.ENGLISH),
        "metric_unit": unit_pattern(UnitCategory.METRIC),
        "imprecise_unit": unit_pattern(UnitCategory.IMPRECISE),
        "unicode_fraction": unicode_fraction_pattern(),
    }
    lines = [f'{name} = ~r"{pattern}"' for name, pattern in rules.items()]
    lines.append(f'written_number = ~r"{written_number_pattern()}"i')
    return "\n".join(lines) + "\n"


def build_grammar() -> Grammar:
    """Compile the ingredient grammar; the first rule is the entry point."""
    return Grammar(STRUCTURE_RULES + _vocabulary_rules())


INGREDIENT_GRAMMAR: Grammar = build_grammar()
