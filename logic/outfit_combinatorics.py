"""Outfit combination counting for capsule building and wishlist items."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, List, Mapping, Sequence, Tuple, Union

from models.match_result import OutfitSuggestion
from models.taxonomy import Category, try_category
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

DEFAULT_SUGGESTION_LIMIT = 5

Inventory = Union[Iterable[WardrobeItem], Mapping[object, int]]


def _category_counts(items: Iterable[WardrobeItem]) -> Counter:
    return Counter(item.category for item in items)


def _counts_from_inventory(inventory: Inventory) -> Counter:
    """Accept either items or a category -> count mapping."""

    if isinstance(inventory, Mapping):
        counts: Counter = Counter()
        for label, count in inventory.items():
            category = try_category(label)
            if category is not None:
                counts[category] += int(count or 0)
        return counts
    return _category_counts(inventory)


def _count_from_counts(counts: Mapping[Category, int]) -> int:
    tops = counts.get(Category.TOP, 0)
    bottoms = counts.get(Category.BOTTOM, 0)
    shoes = counts.get(Category.SHOES, 0)
    dresses = counts.get(Category.DRESS, 0)
    outerwear = counts.get(Category.OUTERWEAR, 0)

    base = tops * bottoms * shoes + dresses * shoes
    # every base outfit can optionally be worn under each outerwear piece
    layered = base * outerwear if outerwear > 0 else 0
    return base + layered


def count_outfits(items: Iterable[WardrobeItem]) -> int:
    """Number of outfit combinations the items can produce.

    Accessories are not counted.
    """

    return _count_from_counts(_category_counts(items))


def category_breakdown(items: Iterable[WardrobeItem]) -> List[Tuple[Category, int]]:
    """Per-category counts in canonical order, omitting empty categories."""

    counts = _category_counts(items)
    return [(category, counts[category]) for category in Category if counts[category] > 0]


def suggest_next_items(
    selected: Sequence[WardrobeItem],
    candidate_pool: Iterable[WardrobeItem],
    top_n: int = DEFAULT_SUGGESTION_LIMIT,
) -> List[OutfitSuggestion]:
    """Rank unselected candidates by how many outfits they would add."""

    selected_ids = {item.item_id for item in selected}
    counts = _category_counts(selected)
    current = _count_from_counts(counts)

    suggestions = []
    for candidate in candidate_pool:
        if candidate.item_id in selected_ids:
            continue
        counts[candidate.category] += 1
        new_total = _count_from_counts(counts)
        counts[candidate.category] -= 1
        suggestions.append(
            OutfitSuggestion(item=candidate, outfit_increase=new_total - current, new_total=new_total)
        )

    # sorted() is stable, so ties keep pool order
    ranked = sorted(suggestions, key=lambda suggestion: -suggestion.outfit_increase)
    logger.debug("Scored %s candidates against %s selected items", len(suggestions), len(selected_ids))
    return ranked[: max(top_n, 0)]


def outfit_potential(candidate_category: "str | Category", inventory: Inventory) -> int:
    """New complete outfits unlocked by acquiring one item of a category.

    The per-category formulas are not derived from :func:`count_outfits`:
    shoes also complete dresses, and outerwear or accessories add onto every
    existing complete outfit.
    """

    category = try_category(candidate_category)
    if category is None:
        logger.info("No outfit potential for unknown category %r", candidate_category)
        return 0

    counts = _counts_from_inventory(inventory)
    tops = counts.get(Category.TOP, 0)
    bottoms = counts.get(Category.BOTTOM, 0)
    shoes = counts.get(Category.SHOES, 0)
    dresses = counts.get(Category.DRESS, 0)

    if category is Category.TOP:
        return bottoms * shoes
    if category is Category.BOTTOM:
        return tops * shoes
    if category is Category.SHOES:
        return tops * bottoms + dresses
    if category is Category.DRESS:
        return shoes
    return tops * bottoms * shoes + dresses * shoes


__all__ = [
    "DEFAULT_SUGGESTION_LIMIT",
    "count_outfits",
    "category_breakdown",
    "suggest_next_items",
    "outfit_potential",
]
