"""API endpoints for parsing recipes from raw text."""

import logging
from typing import Any, Literal

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from recipe_text.config import settings
from recipe_text.extractor import parse_recipe_text
from recipe_text.normalizer import detect_language

logger = logging.getLogger(__name__)

router = APIRouter(tags=["recipe-text"])


# =============================================================================
# Request/Response Models
# =============================================================================


class ParseTextRequest(BaseModel):
    """Raw recipe text from OCR or the clipboard."""

    text: str


class ParseTextResponse(BaseModel):
    """Parsed recipe plus hints for the client."""

    recipe: dict[str, Any]
    language: Literal["zh", "en"]
    low_confidence: bool  # No ingredients found; suggest manual entry


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/recipes/parse-text", response_model=ParseTextResponse)
async def parse_text(req: ParseTextRequest) -> ParseTextResponse:
    """
    Structure pasted or OCR'd recipe text for review.

    Nothing is saved; the client confirms and stores the recipe separately.
    """
    if len(req.text) > settings.max_input_chars:
        raise HTTPException(
            status_code=413,
            detail=f"Recipe text is too long (max {settings.max_input_chars} characters)",
        )

    recipe = parse_recipe_text(req.text)
    low_confidence = not recipe.ingredients
    if low_confidence:
        logger.info("Parsed recipe text with no ingredients; flagging for manual entry")

    return ParseTextResponse(
        recipe=recipe.to_dict(),
        language=detect_language(req.text),
        low_confidence=low_confidence,
    )
