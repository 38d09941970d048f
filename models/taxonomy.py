"""Canonical taxonomy definitions for wardrobe items and capsule templates.

This module centralises the closed category set together with the ordered
lookup tables the template matcher relies on. Table order is part of the
matching behaviour: the first item type whose synonyms match a template
description wins.
"""

from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy key."""

    return value.strip().lower().replace("_", " ")


class Category(str, Enum):
    """Closed set of garment categories used by inventory and templates."""

    TOP = "Top"
    BOTTOM = "Bottom"
    SHOES = "Shoes"
    DRESS = "Dress"
    OUTERWEAR = "Outerwear"
    ACCESSORY = "Accessory"

    def __str__(self) -> str:
        return self.value


class WardrobeComposition(str, Enum):
    """Editorial tag describing what a template is mostly built from."""

    PANTS_SHIRTS = "pants-shirts"
    DRESSES_SKIRTS = "dresses-skirts"
    MIXED = "mixed"
    ATHLEISURE = "athleisure"


class Fit(str, Enum):
    TAILORED = "tailored"
    RELAXED = "relaxed"
    MIXED = "mixed"


CATEGORY_ALIASES: Dict[str, Category] = {
    "top": Category.TOP,
    "tops": Category.TOP,
    "bottom": Category.BOTTOM,
    "bottoms": Category.BOTTOM,
    "shoes": Category.SHOES,
    "shoe": Category.SHOES,
    "dress": Category.DRESS,
    "dresses": Category.DRESS,
    "outerwear": Category.OUTERWEAR,
    "accessory": Category.ACCESSORY,
    "accessories": Category.ACCESSORY,
}

# Template descriptions are scanned in this order; the first key whose
# synonyms appear wins.
ITEM_TYPE_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    # shoes
    ("oxford", ("oxford", "dress shoe", "formal shoe")),
    ("loafer", ("loafer", "slip-on", "penny loafer")),
    ("sneaker", ("sneaker", "trainer", "running shoe", "athletic shoe")),
    ("boot", ("boot", "chelsea", "ankle boot")),
    ("sandal", ("sandal", "slide", "birkenstock")),
    # shirts
    ("t-shirt", ("t-shirt", "tee", "crew neck")),
    ("polo", ("polo", "polo shirt", "pique")),
    ("oxford shirt", ("oxford", "button-down", "button down", "dress shirt")),
    ("henley", ("henley",)),
    # pants
    ("chino", ("chino", "khaki")),
    ("jean", ("jean", "denim")),
    ("trouser", ("trouser", "dress pant", "wool pant")),
    # layers
    ("blazer", ("blazer", "sport coat", "suit jacket")),
    ("sweater", ("sweater", "jumper", "pullover", "knit")),
    ("hoodie", ("hoodie", "hooded")),
    ("jacket", ("jacket", "coat")),
)

# (user color fragment, template color fragment) pairs.
SIMILAR_COLOR_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("blue", "blue"),
    ("navy", "navy"),
    ("black", "black"),
    ("white", "white"),
    ("grey", "gray"),
    ("gray", "grey"),
    ("brown", "brown"),
    ("tan", "tan"),
    ("khaki", "tan"),
)

RELATED_COLOR_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("navy", "blue"),
    ("blue", "navy"),
    ("charcoal", "grey"),
    ("grey", "charcoal"),
)

STYLE_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "formal": ("formal", "dress", "professional"),
    "casual": ("casual", "relaxed", "everyday"),
    "athletic": ("athletic", "sport", "gym", "running"),
    "smart-casual": ("smart casual", "business casual"),
}


def validate_category(value: "str | Category") -> Category:
    """Validate and normalise a category value.

    Raises a :class:`ValueError` if the label is not part of the closed
    category set (plural aliases such as ``"Accessories"`` are accepted).
    """

    if isinstance(value, Category):
        return value
    category = CATEGORY_ALIASES.get(_normalize_key(str(value)))
    if category is None:
        raise ValueError(
            f"Unsupported category '{value}'. Allowed: {[c.value for c in Category]}"
        )
    return category


def try_category(value: object) -> Optional[Category]:
    """Return the category for ``value`` or ``None`` when it is unknown."""

    if value is None:
        return None
    try:
        return validate_category(value)  # type: ignore[arg-type]
    except ValueError:
        return None


def normalize_color_name(raw_string: Optional[str]) -> str:
    """Lower-case and trim a raw color string; ``None`` becomes ``""``."""

    return (raw_string or "").strip().lower()


def detect_item_type(description: str) -> Optional[str]:
    """Return the first item type whose synonyms occur in ``description``."""

    text = description.lower()
    for item_type, synonyms in ITEM_TYPE_KEYWORDS:
        if any(synonym in text for synonym in synonyms):
            return item_type
    return None


def item_type_synonyms(item_type: str) -> Tuple[str, ...]:
    for key, synonyms in ITEM_TYPE_KEYWORDS:
        if key == item_type:
            return synonyms
    return ()


def expand_style_tags(tags: Iterable[str]) -> List[str]:
    """Expand style tags into the keywords searched for in item analysis."""

    expanded: List[str] = []
    for tag in tags:
        for keyword in STYLE_KEYWORDS.get(tag, (tag,)):
            if keyword not in expanded:
                expanded.append(keyword)
    return expanded


__all__ = [
    "Category",
    "WardrobeComposition",
    "Fit",
    "CATEGORY_ALIASES",
    "ITEM_TYPE_KEYWORDS",
    "SIMILAR_COLOR_PAIRS",
    "RELATED_COLOR_PAIRS",
    "STYLE_KEYWORDS",
    "validate_category",
    "try_category",
    "normalize_color_name",
    "detect_item_type",
    "item_type_synonyms",
    "expand_style_tags",
]
