"""Request and response schemas for the HTTP API."""

from typing import Literal

from pydantic import BaseModel, Field

from ingreedy.models import ParsedIngredient


class QuantityOut(BaseModel):
    """One quantity in the output representation."""

    amount: float
    unit: str | None = None
    unit_type: Literal["English", "Metric", "Imprecise"] | None = None


class ParsedIngredientOut(BaseModel):
    """Parsed ingredient line."""

    quantities: list[QuantityOut] = Field(default_factory=list)
    ingredient: str

    @classmethod
    def from_parsed(cls, parsed: ParsedIngredient) -> "ParsedIngredientOut":
        return cls.model_validate(parsed.to_dict())


class ParseRequest(BaseModel):
    """Request to parse a single ingredient line."""

    text: str = Field(max_length=1000, description="Ingredient line to parse")


class BatchParseRequest(BaseModel):
    """Request to parse several ingredient lines."""

    lines: list[str] = Field(min_length=1, max_length=500)


class BatchParseResponse(BaseModel):
    """Parsed lines, in request order."""

    results: list[ParsedIngredientOut]
    total: int
