"""Capsule template catalog models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from models.taxonomy import Category, WardrobeComposition

BEST_VALUE_BADGE = "Best Value"


class TemplateIntegrityError(ValueError):
    """Raised when catalog data contradicts itself."""


class TemplateNotFoundError(KeyError):
    """Raised when a template id is not part of the catalog."""


@dataclass(frozen=True)
class ShoppingLink:
    retailer: str
    price: float
    url: str
    badge: Optional[str] = None


@dataclass(frozen=True)
class CapsuleTemplateItem:
    """One garment slot in a capsule template."""

    id: str
    category: Category
    description: str
    color: str
    essential: bool = True
    style_tags: Tuple[str, ...] = ()
    shopping_links: Tuple[ShoppingLink, ...] = ()
    placeholder_image: Optional[str] = None


@dataclass(frozen=True)
class CapsuleTemplate:
    """An editorially curated capsule wardrobe.

    ``total_outfits`` is an editorial constant and is not derived from the
    items. ``total_items`` must equal ``len(items)``; see
    :func:`validate_template`.
    """

    id: str
    name: str
    description: str
    total_items: int
    total_outfits: int
    style: str
    wardrobe_composition: WardrobeComposition
    items: Tuple[CapsuleTemplateItem, ...] = ()
    season: Optional[str] = None
    color_palette: Tuple[str, ...] = ()
    categories: Tuple[Category, ...] = ()
    style_types: Tuple[str, ...] = ()
    occasions: Tuple[str, ...] = ()
    preview_image_url: Optional[str] = None

    def item(self, item_id: str) -> Optional[CapsuleTemplateItem]:
        for template_item in self.items:
            if template_item.id == item_id:
                return template_item
        return None

    @property
    def item_ids(self) -> List[str]:
        return [template_item.id for template_item in self.items]


def validate_template(template: CapsuleTemplate) -> CapsuleTemplate:
    """Check that the declared item count matches the item list."""

    if template.total_items != len(template.items):
        raise TemplateIntegrityError(
            f"Template '{template.id}' declares {template.total_items} items "
            f"but lists {len(template.items)}"
        )
    seen = set()
    for template_item in template.items:
        if template_item.id in seen:
            raise TemplateIntegrityError(
                f"Template '{template.id}' repeats item id '{template_item.id}'"
            )
        seen.add(template_item.id)
    return template


__all__ = [
    "BEST_VALUE_BADGE",
    "ShoppingLink",
    "CapsuleTemplateItem",
    "CapsuleTemplate",
    "TemplateIntegrityError",
    "TemplateNotFoundError",
    "validate_template",
]
