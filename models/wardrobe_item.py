"""Wardrobe item data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from models.taxonomy import Category, normalize_color_name, validate_category


def _ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]


@dataclass
class WardrobeItem:
    """Represents an item in the user's wardrobe.

    ``ai_analysis`` is the classifier's free text and is never ``None``;
    ``description`` and ``color`` are optional structured hints.
    """

    item_id: str
    category: Category
    ai_analysis: str = ""
    description: Optional[str] = None
    color: Optional[str] = None
    style_tags: List[str] = field(default_factory=list)
    user_id: Optional[str] = None
    image_url: Optional[str] = None

    def __post_init__(self) -> None:
        self.category = validate_category(self.category)
        self.ai_analysis = str(self.ai_analysis or "")
        self.color = normalize_color_name(self.color) or None
        self.style_tags = [str(tag).strip().lower() for tag in _ensure_list(self.style_tags) if str(tag).strip()]

    @property
    def analysis_text(self) -> str:
        """Lower-cased analysis used for keyword matching."""

        return self.ai_analysis.lower()

    @property
    def description_text(self) -> str:
        return (self.description or "").lower()


def from_raw_metadata(metadata: Dict[str, Any]) -> WardrobeItem:
    """Factory to build a :class:`WardrobeItem` from a loose inventory record.

    Accepts either ``id`` or ``item_id`` and either ``ai_analysis`` or
    ``analysis``. Raises :class:`ValueError` when the id or category is
    missing or the category is unknown.
    """

    item_id = metadata.get("item_id") or metadata.get("id")
    missing = [name for name, value in (("id", item_id), ("category", metadata.get("category"))) if not value]
    if missing:
        raise ValueError(f"Missing required fields for WardrobeItem: {missing}")

    return WardrobeItem(
        item_id=str(item_id),
        category=validate_category(str(metadata["category"])),
        ai_analysis=str(metadata.get("ai_analysis") or metadata.get("analysis") or ""),
        description=metadata.get("description"),
        color=metadata.get("color"),
        style_tags=_ensure_list(metadata.get("style_tags")),
        user_id=metadata.get("user_id"),
        image_url=metadata.get("image_url"),
    )


__all__ = ["WardrobeItem", "from_raw_metadata"]
