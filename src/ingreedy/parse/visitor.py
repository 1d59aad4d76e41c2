"""Walks a parse tree and hands each matched pattern to its interpretation function."""

from collections.abc import Iterator
from typing import Any

from parsimonious.nodes import Node, NodeVisitor

from ingreedy.exceptions import MalformedNumberError, UnrecognizedInputError
from ingreedy.models import LiteralKind, NumericLiteral, Quantity, ResolvedUnit
from ingreedy.normalize.numbers import resolve_literal
from ingreedy.normalize.units import resolve_unit
from ingreedy.parse import fragments
from ingreedy.parse.combine import (
    MultipartPolicy,
    QuantityExpression,
    combine_fragments,
    merge_alternatives,
)
from ingreedy.parse.fragments import Fragment


def _flatten(items: Any) -> Iterator[Any]:
    """Yield interpreted values from nested child lists, dropping raw nodes."""
    for item in items:
        if isinstance(item, list):
            yield from _flatten(item)
        elif item is not None and not isinstance(item, Node):
            yield item


def _of_type(children: list, kind: type) -> list:
    return [item for item in _flatten(children) if isinstance(item, kind)]


def _first(children: list, kind: type) -> Any:
    found = _of_type(children, kind)
    return found[0] if found else None


class IngredientVisitor(NodeVisitor):
    """
    Turns an ``ingredient_addition`` tree into a quantity expression and the
    residual ingredient text.

    Every visit method only collects its typed children; the decisions live
    in ``fragments`` and ``combine``.
    """

    unwrapped_exceptions = (MalformedNumberError, UnrecognizedInputError)

    def __init__(self, policy: MultipartPolicy = MultipartPolicy.LIST):
        self.policy = policy

    def generic_visit(self, node: Node, visited_children: list) -> list:
        return list(_flatten(visited_children))

    # -------------------------------------------------------------------------
    # Numeric literals
    # -------------------------------------------------------------------------

    def visit_integer(self, node: Node, visited_children: list) -> NumericLiteral:
        return resolve_literal(LiteralKind.INTEGER, node.text)

    def visit_float(self, node: Node, visited_children: list) -> NumericLiteral:
        return resolve_literal(LiteralKind.DECIMAL, node.text)

    def visit_multicharacter_fraction(self, node: Node, visited_children: list) -> NumericLiteral:
        return resolve_literal(LiteralKind.VULGAR_FRACTION, node.text)

    def visit_unicode_fraction(self, node: Node, visited_children: list) -> NumericLiteral:
        return resolve_literal(LiteralKind.UNICODE_FRACTION, node.text)

    def visit_mixed_number(self, node: Node, visited_children: list) -> NumericLiteral:
        return resolve_literal(LiteralKind.MIXED_NUMBER, node.text)

    def visit_written_number(self, node: Node, visited_children: list) -> NumericLiteral:
        return resolve_literal(LiteralKind.WRITTEN, node.text)

    def visit_fraction(self, node: Node, visited_children: list) -> NumericLiteral:
        return _first(visited_children, NumericLiteral)

    def visit_amount(self, node: Node, visited_children: list) -> NumericLiteral:
        return _first(visited_children, NumericLiteral)

    # -------------------------------------------------------------------------
    # Units
    # -------------------------------------------------------------------------

    def _visit_unit_token(self, node: Node, visited_children: list) -> ResolvedUnit:
        unit = resolve_unit(node.text)
        # Only reachable if the unit regexes and UNIT_TABLES disagree
        if unit is None:
            raise UnrecognizedInputError(
                f"Unit token '{node.text}' is not in the vocabulary",
                text=node.full_text,
                position=node.start,
            )
        return unit

    visit_english_unit = _visit_unit_token
    visit_metric_unit = _visit_unit_token
    visit_imprecise_unit = _visit_unit_token

    def visit_unit(self, node: Node, visited_children: list) -> ResolvedUnit:
        return _first(visited_children, ResolvedUnit)

    # -------------------------------------------------------------------------
    # Fragments
    # -------------------------------------------------------------------------

    def visit_amount_with_attached_units(self, node: Node, visited_children: list) -> Fragment:
        amount = _first(visited_children, NumericLiteral)
        unit = _first(visited_children, ResolvedUnit)
        return fragments.attached_fragment(amount, unit)

    def visit_parenthesized_quantity(self, node: Node, visited_children: list) -> Quantity:
        return _first(visited_children, Fragment).quantities[0]

    def visit_amount_with_conversion(self, node: Node, visited_children: list) -> Fragment:
        amount = _first(visited_children, NumericLiteral)
        unit = _first(visited_children, ResolvedUnit)
        inner = _first(visited_children, Quantity)
        return fragments.conversion_fragment(amount, unit, inner)

    def visit_amount_with_multiplier(self, node: Node, visited_children: list) -> Fragment:
        multiplier = _first(visited_children, NumericLiteral)
        inner = _first(visited_children, Quantity)
        return fragments.multiplier_fragment(multiplier, inner)

    def visit_quantity(self, node: Node, visited_children: list) -> Fragment:
        fragment = _first(visited_children, Fragment)
        if fragment is not None:
            return fragment
        # A lone imprecise unit: "pinch"
        return fragments.imprecise_fragment(_first(visited_children, ResolvedUnit))

    def visit_quantity_fragment(self, node: Node, visited_children: list) -> Fragment:
        fragment = _first(visited_children, Fragment)
        if fragment is not None:
            return fragment
        return fragments.bare_fragment(_first(visited_children, NumericLiteral))

    # -------------------------------------------------------------------------
    # Expressions
    # -------------------------------------------------------------------------

    def visit_multipart_quantity(self, node: Node, visited_children: list) -> QuantityExpression:
        return combine_fragments(_of_type(visited_children, Fragment), self.policy)

    def visit_alternative_quantity(self, node: Node, visited_children: list) -> QuantityExpression:
        return _first(visited_children, QuantityExpression)

    def visit_quantity_expression(self, node: Node, visited_children: list) -> QuantityExpression:
        primary, *alternatives = _of_type(visited_children, QuantityExpression)
        return merge_alternatives(primary, alternatives)

    def visit_ingredient(self, node: Node, visited_children: list) -> str:
        return node.text

    def visit_ingredient_addition(
        self, node: Node, visited_children: list
    ) -> tuple[QuantityExpression | None, str]:
        expression = _first(visited_children, QuantityExpression)
        residual = _first(visited_children, str)
        return expression, residual or ""
