"""Data models for parsed ingredient lines."""

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ingreedy.exceptions import MalformedNumberError


class LiteralKind(str, Enum):
    """Textual form a numeric literal was written in."""

    INTEGER = "integer"
    DECIMAL = "decimal"
    VULGAR_FRACTION = "vulgar_fraction"
    MIXED_NUMBER = "mixed_number"
    UNICODE_FRACTION = "unicode_fraction"
    WRITTEN = "written"


class UnitCategory(str, Enum):
    """System of measurement a unit belongs to."""

    ENGLISH = "English"
    METRIC = "Metric"
    IMPRECISE = "Imprecise"
    NONE = "None"


class NumericLiteral(BaseModel):
    """A resolved scalar amount and the literal it was read from."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(ge=0, allow_inf_nan=False)
    kind: LiteralKind
    text: str

    def render(self) -> str:
        """Render the value back in the literal's own form.

        Integers and decimals reproduce their source text; fractions and
        written numbers are normalized, so they render as a decimal.
        """
        if self.kind == LiteralKind.INTEGER:
            return str(int(self.value))
        if self.kind == LiteralKind.DECIMAL:
            places = len(self.text.split(".", 1)[1])
            rendered = f"{self.value:.{places}f}"
            if self.text.startswith("."):
                rendered = rendered.lstrip("0")
            return rendered
        return repr(self.value)


class ResolvedUnit(BaseModel):
    """A canonical unit name and its category."""

    model_config = ConfigDict(frozen=True)

    name: str
    category: UnitCategory


class Quantity(BaseModel):
    """One numeric expression extracted from an ingredient line."""

    model_config = ConfigDict(frozen=True)

    amount: float = Field(ge=0, allow_inf_nan=False)
    unit: ResolvedUnit | None = None

    @property
    def unit_type(self) -> UnitCategory:
        """Category of the unit, UnitCategory.NONE for bare counts."""
        if self.unit is None:
            return UnitCategory.NONE
        return self.unit.category

    def scaled(self, factor: float) -> "Quantity":
        """
        Return a copy with the amount multiplied by factor.

        Raises:
            MalformedNumberError: If the product does not fit in a finite float.
        """
        amount = self.amount * factor
        if not math.isfinite(amount):
            raise MalformedNumberError(f"Amount {self.amount!r} x {factor!r} is too large")
        return Quantity(amount=amount, unit=self.unit)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the output representation; unit fields are omitted when absent."""
        data: dict[str, Any] = {"amount": self.amount}
        if self.unit is not None:
            data["unit"] = self.unit.name
            data["unit_type"] = self.unit.category.value
        return data


class ParsedIngredient(BaseModel):
    """Quantities and residual text parsed from one ingredient line."""

    model_config = ConfigDict(frozen=True)

    quantities: tuple[Quantity, ...] = ()
    ingredient_text: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "quantities": [quantity.to_dict() for quantity in self.quantities],
            "ingredient": self.ingredient_text,
        }
