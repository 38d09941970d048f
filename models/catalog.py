"""Loading and lookup for the bundled capsule template catalog."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import BaseModel, Field, field_validator

from models.capsule_template import (
    CapsuleTemplate,
    CapsuleTemplateItem,
    ShoppingLink,
    TemplateNotFoundError,
    validate_template,
)
from models.taxonomy import Category, WardrobeComposition, validate_category

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "capsule_templates.json"


class ShoppingLinkSchema(BaseModel):
    retailer: str
    price: float = Field(ge=0)
    url: str
    badge: Optional[str] = None


class TemplateItemSchema(BaseModel):
    id: str = Field(min_length=1)
    category: Category
    description: str
    essential: bool = True
    color: str = ""
    style_tags: List[str] = []
    shopping_links: List[ShoppingLinkSchema] = []
    placeholder_image: Optional[str] = None

    @field_validator("category", mode="before")
    @classmethod
    def _parse_category(cls, value: object) -> Category:
        return validate_category(str(value))


class TemplateSchema(BaseModel):
    id: str = Field(min_length=1)
    name: str
    description: str = ""
    total_items: int = Field(ge=0)
    total_outfits: int = Field(ge=0)
    season: Optional[str] = None
    style: str = ""
    color_palette: List[str] = []
    categories: List[Category] = []
    style_types: List[str] = []
    occasions: List[str] = []
    wardrobe_composition: WardrobeComposition
    preview_image_url: Optional[str] = None
    items: List[TemplateItemSchema]

    @field_validator("categories", mode="before")
    @classmethod
    def _parse_categories(cls, values: object) -> List[Category]:
        return [validate_category(str(value)) for value in (values or [])]


class CatalogSchema(BaseModel):
    version: int = 1
    templates: List[TemplateSchema]


def _to_template(schema: TemplateSchema) -> CapsuleTemplate:
    items = tuple(
        CapsuleTemplateItem(
            id=item.id,
            category=item.category,
            description=item.description,
            color=item.color,
            essential=item.essential,
            style_tags=tuple(item.style_tags),
            shopping_links=tuple(ShoppingLink(**link.model_dump()) for link in item.shopping_links),
            placeholder_image=item.placeholder_image,
        )
        for item in schema.items
    )
    template = CapsuleTemplate(
        id=schema.id,
        name=schema.name,
        description=schema.description,
        total_items=schema.total_items,
        total_outfits=schema.total_outfits,
        style=schema.style,
        wardrobe_composition=schema.wardrobe_composition,
        items=items,
        season=schema.season,
        color_palette=tuple(schema.color_palette),
        categories=tuple(dict.fromkeys(schema.categories)),
        style_types=tuple(schema.style_types),
        occasions=tuple(schema.occasions),
        preview_image_url=schema.preview_image_url,
    )
    return validate_template(template)


def parse_catalog(payload: dict) -> List[CapsuleTemplate]:
    """Validate a catalog payload and return frozen templates in catalog order.

    Raises :class:`pydantic.ValidationError` for malformed payloads and
    :class:`TemplateIntegrityError` for inconsistent template data.
    """

    catalog = CatalogSchema.model_validate(payload)
    templates = [_to_template(schema) for schema in catalog.templates]
    logger.info("Loaded %s capsule templates (catalog v%s)", len(templates), catalog.version)
    return templates


def load_catalog(path: str | Path | None = None) -> List[CapsuleTemplate]:
    """Load the catalog JSON from ``path`` (defaults to the bundled file)."""

    catalog_path = Path(path) if path else DEFAULT_CATALOG_PATH
    return list(_load_cached(str(catalog_path)))


@lru_cache(maxsize=4)
def _load_cached(path: str) -> tuple:
    return tuple(parse_catalog(json.loads(Path(path).read_text(encoding="utf-8"))))


def get_template(templates: Sequence[CapsuleTemplate], template_id: str) -> CapsuleTemplate:
    for template in templates:
        if template.id == template_id:
            return template
    raise TemplateNotFoundError(template_id)


__all__ = [
    "DEFAULT_CATALOG_PATH",
    "CatalogSchema",
    "parse_catalog",
    "load_catalog",
    "get_template",
]
