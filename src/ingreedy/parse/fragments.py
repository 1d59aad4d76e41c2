"""Interpretation of the five quantity-fragment patterns.

Each function receives the already-resolved pieces of one matched pattern and
decides what quantity (or quantities) the pattern means.
"""

from dataclasses import dataclass
from enum import Enum

from ingreedy.models import NumericLiteral, Quantity, ResolvedUnit


class FragmentKind(str, Enum):
    """Which structural pattern a fragment was recognized as."""

    CONVERSION = "conversion"
    ATTACHED = "attached"
    MULTIPLIER = "multiplier"
    IMPRECISE = "imprecise"
    BARE = "bare"


@dataclass(frozen=True)
class Fragment:
    """One recognized quantity expression and the quantities it resolves to."""

    kind: FragmentKind
    quantities: tuple[Quantity, ...]

    def scaled(self, factor: float) -> "Fragment":
        return Fragment(
            kind=self.kind,
            quantities=tuple(quantity.scaled(factor) for quantity in self.quantities),
        )


def conversion_fragment(amount: NumericLiteral, unit: ResolvedUnit, inner: Quantity) -> Fragment:
    """
    "1 pound (16 ounces)": the parenthesized part restates the same amount.

    Both expressions are kept, outer first; nothing is summed or multiplied.
    """
    outer = Quantity(amount=amount.value, unit=unit)
    return Fragment(kind=FragmentKind.CONVERSION, quantities=(outer, inner))


def attached_fragment(amount: NumericLiteral, unit: ResolvedUnit) -> Fragment:
    """Amount directly followed by a unit: "2 cups", "12g", "16-ounce"."""
    return Fragment(
        kind=FragmentKind.ATTACHED,
        quantities=(Quantity(amount=amount.value, unit=unit),),
    )


def multiplier_fragment(multiplier: NumericLiteral, inner: Quantity) -> Fragment:
    """
    "2 (28 ounce)": no unit before the parenthesis, so the outer amount counts
    containers of the inner quantity.
    """
    return Fragment(
        kind=FragmentKind.MULTIPLIER,
        quantities=(inner.scaled(multiplier.value),),
    )


def imprecise_fragment(unit: ResolvedUnit) -> Fragment:
    """A lone "pinch" or "dash" implies an amount of one."""
    return Fragment(
        kind=FragmentKind.IMPRECISE,
        quantities=(Quantity(amount=1.0, unit=unit),),
    )


def bare_fragment(amount: NumericLiteral) -> Fragment:
    """A number with no unit, e.g. the "2" in "2 eggs"."""
    return Fragment(kind=FragmentKind.BARE, quantities=(Quantity(amount=amount.value),))
