"""Derived, never-persisted results of matching and analysis."""

from dataclasses import dataclass, field
from typing import Dict, List

from models.capsule_template import CapsuleTemplate, CapsuleTemplateItem
from models.taxonomy import Category, Fit
from models.wardrobe_item import WardrobeItem


@dataclass(frozen=True)
class ExactMatch:
    template_item: CapsuleTemplateItem
    user_item: WardrobeItem


@dataclass(frozen=True)
class SimilarMatch:
    template_item: CapsuleTemplateItem
    user_item: WardrobeItem
    reason: str


@dataclass
class MatchResult:
    """Three-way partition of a template's items against an inventory."""

    exact: List[ExactMatch] = field(default_factory=list)
    similar: List[SimilarMatch] = field(default_factory=list)
    missing: List[CapsuleTemplateItem] = field(default_factory=list)

    def status_by_item(self) -> Dict[str, str]:
        statuses = {entry.template_item.id: "owned" for entry in self.exact}
        statuses.update({entry.template_item.id: "similar" for entry in self.similar})
        statuses.update({template_item.id: "missing" for template_item in self.missing})
        return statuses

    def to_dict(self) -> Dict[str, object]:
        return {
            "exact": [
                {"template_item_id": entry.template_item.id, "user_item_id": entry.user_item.item_id}
                for entry in self.exact
            ],
            "similar": [
                {
                    "template_item_id": entry.template_item.id,
                    "user_item_id": entry.user_item.item_id,
                    "reason": entry.reason,
                }
                for entry in self.similar
            ],
            "missing": [template_item.id for template_item in self.missing],
        }


@dataclass(frozen=True)
class WardrobeAnalysis:
    categories: List[Category]
    style_preferences: List[str]
    predominant_fit: Fit
    has_dresses: bool
    has_skirts: bool
    has_suits: bool


@dataclass(frozen=True)
class TemplateRecommendation:
    template: CapsuleTemplate
    score: float
    match_percentage: int
    is_great_match: bool = False


@dataclass(frozen=True)
class OutfitSuggestion:
    item: WardrobeItem
    outfit_increase: int
    new_total: int


__all__ = [
    "ExactMatch",
    "SimilarMatch",
    "MatchResult",
    "WardrobeAnalysis",
    "TemplateRecommendation",
    "OutfitSuggestion",
]
