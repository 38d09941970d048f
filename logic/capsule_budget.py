"""Completion and shopping budget figures derived from a match result."""

from __future__ import annotations

import math
from typing import Iterable, Optional

from models.capsule_template import BEST_VALUE_BADGE, CapsuleTemplate, CapsuleTemplateItem, ShoppingLink
from models.match_result import MatchResult


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def owned_count(match: MatchResult) -> int:
    return len(match.exact) + len(match.similar)


def completion_percentage(match: MatchResult, template: CapsuleTemplate) -> int:
    """Share of the template the user already owns, as a whole percentage."""

    if template.total_items <= 0:
        return 0
    return _round_half_up(owned_count(match) / template.total_items * 100)


def preferred_link(template_item: CapsuleTemplateItem) -> Optional[ShoppingLink]:
    """The "Best Value" link, else the cheapest, else ``None``."""

    links = template_item.shopping_links
    if not links:
        return None
    for link in links:
        if link.badge == BEST_VALUE_BADGE:
            return link
    return min(links, key=lambda link: link.price)


def budget(missing: Iterable[CapsuleTemplateItem]) -> float:
    """Cost of buying every missing item at its preferred link."""

    total = 0.0
    for template_item in missing:
        link = preferred_link(template_item)
        if link is not None:
            total += link.price
    return round(total, 2)


def cost_per_outfit(total_budget: float, template: CapsuleTemplate) -> float:
    if template.total_outfits <= 0:
        return 0.0
    return round(total_budget / template.total_outfits, 2)


__all__ = ["owned_count", "completion_percentage", "preferred_link", "budget", "cost_per_outfit"]
