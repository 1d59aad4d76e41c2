"""API routes for parsing ingredient lines."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from ingreedy.config import Settings, get_settings
from ingreedy.exceptions import ParseError
from ingreedy.logging_config import LoggingContext, get_logger
from ingreedy.parse import parse
from ingreedy.schemas import (
    BatchParseRequest,
    BatchParseResponse,
    ParsedIngredientOut,
    ParseRequest,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/ingredients", tags=["ingredients"])


@router.post("/parse", response_model=ParsedIngredientOut)
async def parse_ingredient(
    request: ParseRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> ParsedIngredientOut:
    """Parse one ingredient line into quantities and ingredient text."""
    try:
        parsed = parse(request.text, settings.parse_options)
    except ParseError as e:
        logger.warning(f"Rejected ingredient line {request.text!r}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    return ParsedIngredientOut.from_parsed(parsed)


@router.post("/parse-batch", response_model=BatchParseResponse)
async def parse_ingredient_batch(
    request: BatchParseRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> BatchParseResponse:
    """
    Parse several ingredient lines.

    The whole batch fails if any line cannot be parsed; the error names the line.
    """
    logger.info(f"Parsing batch of {len(request.lines)} ingredient lines")

    results = []
    for line_number, line in enumerate(request.lines, start=1):
        with LoggingContext(line_number=line_number):
            try:
                parsed = parse(line, settings.parse_options)
            except ParseError as e:
                logger.warning(f"Rejected ingredient line {line!r}: {e}")
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=f"Line {line_number}: {e}",
                )
        results.append(ParsedIngredientOut.from_parsed(parsed))

    return BatchParseResponse(results=results, total=len(results))
