"""Combination of fragments into multipart and alternative quantity expressions."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from itertools import chain

from ingreedy.models import Quantity
from ingreedy.parse.fragments import Fragment


class MultipartPolicy(str, Enum):
    """How consecutive fragments of one quantity expression combine."""

    # "2lb 4oz" -> 2 pound, 4 ounce
    LIST = "list"
    # "3 28 ounce cans" -> 84 ounce: a leading unitless count scales what follows
    MULTIPLY = "multiply"


@dataclass(frozen=True)
class QuantityExpression:
    """A multipart quantity plus any "/"-separated alternatives of it."""

    primary: tuple[Quantity, ...]
    alternatives: tuple[tuple[Quantity, ...], ...] = ()

    @property
    def quantities(self) -> tuple[Quantity, ...]:
        """All quantities in left-to-right order."""
        return tuple(chain(self.primary, *self.alternatives))


def combine_fragments(
    fragments: Iterable[Fragment],
    policy: MultipartPolicy = MultipartPolicy.LIST,
) -> QuantityExpression:
    """
    Combine the fragments of one multipart quantity, in appearance order.

    Args:
        fragments: Fragments as they appear in the input.
        policy: LIST keeps every fragment's quantities as separate entries.
            MULTIPLY lets a leading unitless quantity scale the next fragment,
            which then replaces it.

    Returns:
        QuantityExpression with no alternatives.
    """
    quantities: list[Quantity] = []
    for fragment in fragments:
        if policy == MultipartPolicy.MULTIPLY and quantities and quantities[0].unit is None:
            fragment = fragment.scaled(quantities[0].amount)
            quantities = []
        quantities.extend(fragment.quantities)
    return QuantityExpression(primary=tuple(quantities))


def merge_alternatives(
    primary: QuantityExpression,
    alternatives: Iterable[QuantityExpression],
) -> QuantityExpression:
    """Attach "/"-separated alternatives ("1 cup / 240 ml") to the primary expression."""
    return QuantityExpression(
        primary=primary.primary,
        alternatives=primary.alternatives
        + tuple(alternative.quantities for alternative in alternatives),
    )
