"""Match a user's inventory against the slots of a capsule template.

Scoring is additive over four capped bands:

* category (40) - same garment category
* item type (30) - template type, found through the ordered synonym table,
  appears in the user item's analysis or description
* color (20/15/10) - exact, same family, or related color
* style (10) - a template style keyword appears in the user item's analysis

A slot is ``exact`` at 70 or above, ``similar`` from 45 to 69 and ``missing``
below 45. Manually pinned matches bypass scoring entirely. Each user item can
fill at most one slot.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional, Set, Tuple

from models.capsule_template import CapsuleTemplate, CapsuleTemplateItem
from models.match_result import ExactMatch, MatchResult, SimilarMatch
from models.taxonomy import (
    RELATED_COLOR_PAIRS,
    SIMILAR_COLOR_PAIRS,
    detect_item_type,
    expand_style_tags,
    item_type_synonyms,
    normalize_color_name,
)
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

CATEGORY_POINTS = 40
ITEM_TYPE_POINTS = 30
EXACT_COLOR_POINTS = 20
SIMILAR_COLOR_POINTS = 15
RELATED_COLOR_POINTS = 10
STYLE_POINTS = 10

EXACT_THRESHOLD = 70
DETAILED_REASON_THRESHOLD = 60
SIMILAR_THRESHOLD = 45


@dataclass(frozen=True)
class CandidateScore:
    score: int
    reasons: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def reason_text(self) -> str:
        return ", ".join(self.reasons)


def _has_pair(user_color: str, template_color: str, pairs: Iterable[Tuple[str, str]]) -> bool:
    return any(user in user_color and template in template_color for user, template in pairs)


def _color_points(user_color: str, template_color: str) -> Tuple[int, Optional[str]]:
    if not user_color or not template_color:
        return 0, None
    if user_color == template_color:
        return EXACT_COLOR_POINTS, "exact color match"
    if _has_pair(user_color, template_color, SIMILAR_COLOR_PAIRS):
        return SIMILAR_COLOR_POINTS, "similar color"
    if _has_pair(user_color, template_color, RELATED_COLOR_PAIRS):
        return RELATED_COLOR_POINTS, "related color"
    return 0, None


def score_candidate(user_item: WardrobeItem, template_item: CapsuleTemplateItem) -> CandidateScore:
    """Score one user item against one template slot (0-100)."""

    score = 0
    reasons: List[str] = []
    analysis = user_item.analysis_text
    description = user_item.description_text

    if user_item.category == template_item.category:
        score += CATEGORY_POINTS
        reasons.append("same category")

    template_type = detect_item_type(template_item.description or "")
    if template_type:
        synonyms = item_type_synonyms(template_type)
        if any(keyword in analysis or keyword in description for keyword in synonyms):
            score += ITEM_TYPE_POINTS
            reasons.append(f"matching {template_type}")

    color_points, color_reason = _color_points(
        normalize_color_name(user_item.color), normalize_color_name(template_item.color)
    )
    if color_reason:
        score += color_points
        reasons.append(color_reason)

    if template_item.style_tags and any(
        keyword in analysis for keyword in expand_style_tags(template_item.style_tags)
    ):
        score += STYLE_POINTS
        reasons.append("matching style")

    return CandidateScore(score=score, reasons=tuple(reasons))


def _similar_reason(template_item: CapsuleTemplateItem, best: CandidateScore) -> str:
    if best.score >= DETAILED_REASON_THRESHOLD:
        return f"Similar {template_item.category.value.lower()}, {best.reason_text}"
    return f"Similar item, but {best.reason_text or 'different details'}"


def match_template(
    inventory: Iterable[WardrobeItem],
    template: CapsuleTemplate,
    manual_matches: Optional[Mapping[str, WardrobeItem]] = None,
) -> MatchResult:
    """Partition the template's items into exact, similar and missing.

    ``manual_matches`` maps template item ids to user items confirmed by the
    user; those slots are always ``exact`` and never re-scored.
    """

    items = list(inventory)
    manual = dict(manual_matches or {})
    result = MatchResult()
    used_items: Set[str] = set()

    for template_item in template.items:
        pinned = manual.get(template_item.id)
        if pinned is not None:
            result.exact.append(ExactMatch(template_item=template_item, user_item=pinned))
            used_items.add(pinned.item_id)

    for template_item in template.items:
        if manual.get(template_item.id) is not None:
            continue

        best_item: Optional[WardrobeItem] = None
        best = CandidateScore(score=0)
        for user_item in items:
            if user_item.item_id in used_items:
                continue
            candidate = score_candidate(user_item, template_item)
            if candidate.score > best.score:
                best_item, best = user_item, candidate

        if best_item is not None and best.score >= EXACT_THRESHOLD:
            result.exact.append(ExactMatch(template_item=template_item, user_item=best_item))
            used_items.add(best_item.item_id)
        elif best_item is not None and best.score >= SIMILAR_THRESHOLD:
            result.similar.append(
                SimilarMatch(
                    template_item=template_item,
                    user_item=best_item,
                    reason=_similar_reason(template_item, best),
                )
            )
            used_items.add(best_item.item_id)
        else:
            result.missing.append(template_item)

    logger.debug(
        "Matched template %s: exact=%s similar=%s missing=%s",
        template.id,
        len(result.exact),
        len(result.similar),
        len(result.missing),
    )
    return result


__all__ = [
    "CandidateScore",
    "EXACT_THRESHOLD",
    "SIMILAR_THRESHOLD",
    "score_candidate",
    "match_template",
]
