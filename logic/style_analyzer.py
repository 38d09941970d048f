"""Infer style preferences and fit from a user's inventory."""

from __future__ import annotations

import logging
import re
from typing import Iterable, List

from models.match_result import WardrobeAnalysis
from models.taxonomy import Category, Fit
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

# One fit must outnumber the other by this factor to dominate.
FIT_DOMINANCE_RATIO = 1.5

_TAILORED_PATTERN = re.compile(r"tailored|fitted|structured")
_RELAXED_PATTERN = re.compile(r"relaxed|loose|oversized")

DEFAULT_STYLE_PREFERENCES = ("casual",)


def _predominant_fit(text: str) -> Fit:
    tailored = len(_TAILORED_PATTERN.findall(text))
    relaxed = len(_RELAXED_PATTERN.findall(text))
    if tailored > relaxed * FIT_DOMINANCE_RATIO:
        return Fit.TAILORED
    if relaxed > tailored * FIT_DOMINANCE_RATIO:
        return Fit.RELAXED
    return Fit.MIXED


def analyze_style(inventory: Iterable[WardrobeItem]) -> WardrobeAnalysis:
    """Summarise categories, style vocabulary and fit of an inventory.

    Keyword checks are plain case-insensitive substring tests over the
    classifier text, so they favour recall over precision.
    """

    items = list(inventory)
    categories: List[Category] = list(dict.fromkeys(item.category for item in items))
    texts = [item.analysis_text for item in items]

    has_dresses = any(
        item.category is Category.DRESS or "dress" in text for item, text in zip(items, texts)
    )
    has_skirts = any("skirt" in text for text in texts)
    has_suits = any("suit" in text or "blazer" in text for text in texts)

    combined = " ".join(texts)
    preferences: List[str] = []
    if "formal" in combined or "professional" in combined or has_suits:
        preferences.append("professional")
    if "casual" in combined or "relaxed" in combined:
        preferences.append("casual")
    if "athletic" in combined or "sport" in combined:
        preferences.append("athleisure")

    analysis = WardrobeAnalysis(
        categories=categories,
        style_preferences=preferences or list(DEFAULT_STYLE_PREFERENCES),
        predominant_fit=_predominant_fit(combined),
        has_dresses=has_dresses,
        has_skirts=has_skirts,
        has_suits=has_suits,
    )
    logger.debug(
        "Analyzed %s items: styles=%s fit=%s",
        len(items),
        analysis.style_preferences,
        analysis.predominant_fit.value,
    )
    return analysis


__all__ = ["FIT_DOMINANCE_RATIO", "analyze_style"]
