import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from ..core.config import Settings, get_settings
from ..models.recipe import Recipe
from ..services.images import attach_images
from ..services.recipe_parser import RecipeParser

log = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1")


class ParseRequest(BaseModel):
    text: str
    # file name of the document, e.g. "soup.cook"; enables image matching
    document_name: Optional[str] = None
    siblings: List[str] = Field(default_factory=list)


@router.post("/recipes/parse", response_model=Recipe)
async def parse_recipe(body: ParseRequest, settings: Settings = Depends(get_settings)) -> Recipe:
    """Parse a cooklang document and attach any sibling images by name."""
    if len(body.text) > settings.max_document_chars:
        raise HTTPException(
            status_code=413,
            detail=f"Document is {len(body.text)} characters, limit is {settings.max_document_chars}",
        )

    recipe = RecipeParser.parse(body.text)
    if body.document_name:
        attach_images(recipe, body.document_name, body.siblings, settings.image_extensions)

    log.info(f"Parsed {body.document_name or 'document'}: {len(recipe.steps)} steps, {len(recipe.ingredients)} ingredients")
    return recipe
