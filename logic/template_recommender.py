"""Rank capsule templates against a user's inventory."""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from logic.capsule_budget import completion_percentage
from logic.style_analyzer import analyze_style
from logic.template_matcher import match_template
from models.capsule_template import CapsuleTemplate
from models.match_result import TemplateRecommendation, WardrobeAnalysis
from models.taxonomy import WardrobeComposition, try_category
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

WEIGHTS = {
    "category": 40.0,
    "style": 30.0,
    "completion": 0.1,
}
COMPOSITION_BONUS = 20.0
MIXED_COMPOSITION_BONUS = 15.0
GREAT_MATCH_THRESHOLD = 60


def _lower(values: Iterable[object]) -> List[str]:
    return [str(value).strip().lower() for value in values]


def _category_score(analysis: WardrobeAnalysis, template: CapsuleTemplate) -> float:
    if not template.categories:
        return 0.0
    overlap = sum(1 for category in analysis.categories if category in template.categories)
    return overlap / len(template.categories) * WEIGHTS["category"]


def _style_score(analysis: WardrobeAnalysis, template: CapsuleTemplate) -> float:
    style_types = set(_lower(template.style_types))
    overlap = sum(1 for style in _lower(analysis.style_preferences) if style in style_types)
    return overlap / max(len(template.style_types), 1) * WEIGHTS["style"]


def _composition_score(analysis: WardrobeAnalysis, template: CapsuleTemplate) -> float:
    composition = template.wardrobe_composition
    score = 0.0
    if analysis.has_dresses and composition is WardrobeComposition.DRESSES_SKIRTS:
        score += COMPOSITION_BONUS
    if not analysis.has_dresses and composition is WardrobeComposition.PANTS_SHIRTS:
        score += COMPOSITION_BONUS
    if analysis.has_dresses and analysis.has_skirts and composition is WardrobeComposition.MIXED:
        score += MIXED_COMPOSITION_BONUS
    return score


def recommend(
    inventory: Iterable[WardrobeItem],
    templates: Sequence[CapsuleTemplate],
    great_match_threshold: int = GREAT_MATCH_THRESHOLD,
) -> List[TemplateRecommendation]:
    """Return templates ordered by how well they suit the inventory.

    An empty inventory returns every template unscored in catalog order.
    """

    items = list(inventory)
    if not items:
        return [TemplateRecommendation(template=template, score=0.0, match_percentage=0) for template in templates]

    analysis = analyze_style(items)
    recommendations = []
    for template in templates:
        match = match_template(items, template)
        percentage = completion_percentage(match, template)
        score = (
            _category_score(analysis, template)
            + _style_score(analysis, template)
            + _composition_score(analysis, template)
            + percentage * WEIGHTS["completion"]
        )
        recommendations.append(
            TemplateRecommendation(
                template=template,
                score=score,
                match_percentage=percentage,
                is_great_match=percentage > great_match_threshold,
            )
        )

    ranked = sorted(recommendations, key=lambda rec: -rec.score)
    logger.info(
        "Ranked %s templates for %s items; top=%s",
        len(ranked),
        len(items),
        ranked[0].template.id if ranked else None,
    )
    return ranked


def filter_templates(
    templates: Iterable[CapsuleTemplate],
    categories: Iterable[str] = (),
    style_types: Iterable[str] = (),
    occasions: Iterable[str] = (),
) -> List[CapsuleTemplate]:
    """Keep templates matching at least one selected value in every active facet."""

    wanted_categories = {
        category.value.lower() if category else raw
        for raw, category in ((raw, try_category(raw)) for raw in _lower(categories))
    }
    wanted_styles = set(_lower(style_types))
    wanted_occasions = set(_lower(occasions))

    def _matches(selected: set, values: Iterable[object]) -> bool:
        return not selected or bool(selected.intersection(_lower(values)))

    return [
        template
        for template in templates
        if _matches(wanted_categories, [category.value for category in template.categories])
        and _matches(wanted_styles, template.style_types)
        and _matches(wanted_occasions, template.occasions)
    ]


__all__ = ["GREAT_MATCH_THRESHOLD", "WEIGHTS", "recommend", "filter_templates"]
