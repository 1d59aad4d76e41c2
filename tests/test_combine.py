"""Unit tests for fragment interpretation and multipart combination."""

import pytest
from parsimonious.nodes import Node

from ingreedy.exceptions import MalformedNumberError, UnrecognizedInputError
from ingreedy.models import LiteralKind, NumericLiteral, Quantity, ResolvedUnit, UnitCategory
from ingreedy.parse import (
    FragmentKind,
    MultipartPolicy,
    QuantityExpression,
    combine_fragments,
    merge_alternatives,
)
from ingreedy.parse.fragments import (
    attached_fragment,
    bare_fragment,
    conversion_fragment,
    imprecise_fragment,
    multiplier_fragment,
)
from ingreedy.parse.grammar import INGREDIENT_GRAMMAR
from ingreedy.parse.visitor import IngredientVisitor

OUNCE = ResolvedUnit(name="ounce", category=UnitCategory.ENGLISH)
POUND = ResolvedUnit(name="pound", category=UnitCategory.ENGLISH)
GRAM = ResolvedUnit(name="gram", category=UnitCategory.METRIC)
PINCH = ResolvedUnit(name="pinch", category=UnitCategory.IMPRECISE)


def _int(value: int) -> NumericLiteral:
    return NumericLiteral(value=value, kind=LiteralKind.INTEGER, text=str(value))


# =============================================================================
# Fragment Interpretation Tests
# =============================================================================


class TestFragments:
    """Tests for the per-pattern interpretation functions."""

    def test_conversion_keeps_both(self):
        """Test a conversion yields the outer then the inner quantity."""
        fragment = conversion_fragment(_int(1), POUND, Quantity(amount=16, unit=OUNCE))
        assert fragment.kind == FragmentKind.CONVERSION
        assert fragment.quantities == (
            Quantity(amount=1, unit=POUND),
            Quantity(amount=16, unit=OUNCE),
        )

    def test_multiplier_scales_inner(self):
        """Test a multiplier replaces itself with the scaled inner quantity."""
        fragment = multiplier_fragment(_int(2), Quantity(amount=28, unit=OUNCE))
        assert fragment.kind == FragmentKind.MULTIPLIER
        assert fragment.quantities == (Quantity(amount=56, unit=OUNCE),)

    def test_attached(self):
        """Test an amount with its unit."""
        fragment = attached_fragment(_int(12), GRAM)
        assert fragment.quantities == (Quantity(amount=12, unit=GRAM),)

    def test_imprecise_implies_one(self):
        """Test a lone imprecise unit has an amount of one."""
        fragment = imprecise_fragment(PINCH)
        assert fragment.kind == FragmentKind.IMPRECISE
        assert fragment.quantities[0].amount == 1.0
        assert fragment.quantities[0].unit_type == UnitCategory.IMPRECISE

    def test_bare_has_no_unit(self):
        """Test a bare amount has category None."""
        fragment = bare_fragment(_int(3))
        assert fragment.quantities[0].unit is None
        assert fragment.quantities[0].unit_type == UnitCategory.NONE

    def test_scaled_overflow(self):
        """Test scaling past float range is malformed, not infinite."""
        with pytest.raises(MalformedNumberError):
            Quantity(amount=1e300, unit=OUNCE).scaled(1e300)

    def test_multiplier_overflow(self):
        """Test a multiplier whose product overflows is malformed."""
        with pytest.raises(MalformedNumberError):
            multiplier_fragment(_int(10**300), Quantity(amount=1e300, unit=OUNCE))

    def test_scaled(self):
        """Test scaling a fragment scales every quantity."""
        fragment = conversion_fragment(_int(1), POUND, Quantity(amount=16, unit=OUNCE))
        scaled = fragment.scaled(2)
        assert [quantity.amount for quantity in scaled.quantities] == [2.0, 32.0]
        assert scaled.kind == FragmentKind.CONVERSION


# =============================================================================
# Combination Tests
# =============================================================================


class TestCombineFragments:
    """Tests for combine_fragments under each policy."""

    def test_list_keeps_every_fragment(self):
        """Test LIST keeps fragments as separate entries, in order."""
        expression = combine_fragments([bare_fragment(_int(3)), attached_fragment(_int(28), OUNCE)])
        assert expression.quantities == (
            Quantity(amount=3),
            Quantity(amount=28, unit=OUNCE),
        )

    def test_multiply_scales_next_fragment(self):
        """Test MULTIPLY turns "3 28 ounce" into 84 ounces."""
        expression = combine_fragments(
            [bare_fragment(_int(3)), attached_fragment(_int(28), OUNCE)],
            MultipartPolicy.MULTIPLY,
        )
        assert expression.quantities == (Quantity(amount=84, unit=OUNCE),)

    def test_multiply_scales_conversion(self):
        """Test MULTIPLY scales both sides of a conversion."""
        expression = combine_fragments(
            [
                bare_fragment(_int(2)),
                conversion_fragment(_int(1), POUND, Quantity(amount=16, unit=OUNCE)),
            ],
            MultipartPolicy.MULTIPLY,
        )
        assert expression.quantities == (
            Quantity(amount=2, unit=POUND),
            Quantity(amount=32, unit=OUNCE),
        )

    def test_multiply_needs_unitless_first(self):
        """Test MULTIPLY leaves "2lb 4oz" alone."""
        fragments = [attached_fragment(_int(2), POUND), attached_fragment(_int(4), OUNCE)]
        expression = combine_fragments(fragments, MultipartPolicy.MULTIPLY)
        assert expression.quantities == (
            Quantity(amount=2, unit=POUND),
            Quantity(amount=4, unit=OUNCE),
        )

    def test_single_fragment_unchanged(self):
        """Test both policies agree on one fragment."""
        fragments = [bare_fragment(_int(2))]
        assert combine_fragments(fragments) == combine_fragments(
            fragments, MultipartPolicy.MULTIPLY
        )

    @pytest.mark.parametrize("policy", list(MultipartPolicy))
    def test_no_fragments(self, policy):
        """Test an empty sequence yields an empty expression."""
        assert combine_fragments([], policy).quantities == ()


class TestMergeAlternatives:
    """Tests for merge_alternatives."""

    def test_order_preserved(self):
        """Test alternatives follow the primary, left to right."""
        primary = QuantityExpression(primary=(Quantity(amount=1, unit=POUND),))
        first = QuantityExpression(primary=(Quantity(amount=450, unit=GRAM),))
        second = QuantityExpression(primary=(Quantity(amount=16, unit=OUNCE),))

        merged = merge_alternatives(primary, [first, second])

        assert merged.primary == primary.primary
        assert len(merged.alternatives) == 2
        assert [quantity.amount for quantity in merged.quantities] == [1.0, 450.0, 16.0]

    def test_no_alternatives(self):
        """Test merging nothing leaves the expression as it was."""
        primary = QuantityExpression(primary=(Quantity(amount=1, unit=POUND),))
        assert merge_alternatives(primary, []) == primary


# =============================================================================
# Visitor Tests
# =============================================================================


class TestIngredientVisitor:
    """Tests for IngredientVisitor guards."""

    def test_unknown_unit_token(self):
        """Test a unit token missing from the tables is rejected."""
        node = Node(INGREDIENT_GRAMMAR["english_unit"], "2 floops", 2, 8)

        with pytest.raises(UnrecognizedInputError) as exc_info:
            IngredientVisitor().visit_english_unit(node, [])

        assert exc_info.value.position == 2
        assert exc_info.value.text == "2 floops"
