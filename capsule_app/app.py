"""Capsule wardrobe app bootstrap."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, Iterable, List, Optional, Sequence

from capsule_app.config import CapsuleConfig
from capsule_app.logging_config import configure_logging, get_logger
from logic.capsule_budget import budget, completion_percentage, cost_per_outfit, owned_count, preferred_link
from logic.outfit_combinatorics import category_breakdown, count_outfits, outfit_potential, suggest_next_items
from logic.style_analyzer import analyze_style
from logic.template_matcher import match_template
from logic.template_recommender import filter_templates, recommend
from logic.validation import (
    MatchRequest,
    OutfitCountRequest,
    OutfitPotentialRequest,
    RecommendRequest,
    validation_failure,
)
from models.capsule_template import CapsuleTemplate
from models.catalog import get_template, load_catalog
from models.ingestion_mapping import map_inventory
from models.wardrobe_item import WardrobeItem
from tools.manual_matches import build_manual_matches
from tools.observability import instrument_operation

LOGGER = get_logger(__name__)


def _invalid(message: str):
    return lambda exc: validation_failure(message, exc)


def template_summary(template: CapsuleTemplate) -> Dict[str, Any]:
    """Catalog card fields, without the item list."""

    payload = asdict(template)
    payload.pop("items")
    return payload


def _item_ref(item: WardrobeItem) -> Dict[str, Any]:
    return {"id": item.item_id, "category": item.category.value, "description": item.description}


class CapsuleWardrobeApp:
    """Wires together configuration, the template catalog and the matching logic."""

    def __init__(
        self,
        config: CapsuleConfig | None = None,
        templates: Optional[Sequence[CapsuleTemplate]] = None,
    ) -> None:
        self.config = config or CapsuleConfig.from_env()
        configure_logging(self.config.log_level)
        self.templates: List[CapsuleTemplate] = (
            list(templates) if templates is not None else load_catalog(self.config.catalog_path)
        )

    def list_templates(
        self,
        categories: Iterable[str] = (),
        style_types: Iterable[str] = (),
        occasions: Iterable[str] = (),
    ) -> List[CapsuleTemplate]:
        return filter_templates(self.templates, categories, style_types, occasions)

    def get_template(self, template_id: str) -> CapsuleTemplate:
        """Raises :class:`TemplateNotFoundError` for unknown ids."""

        return get_template(self.templates, template_id)

    @instrument_operation(
        "recommend_templates", RecommendRequest, _invalid("Invalid recommendation request")
    )
    def recommend_templates(self, *, inventory: List[Dict[str, Any]]) -> Dict[str, Any]:
        items = map_inventory(inventory)
        recommendations = recommend(items, self.templates, self.config.great_match_threshold)
        return {
            "status": "ok",
            "analysis": asdict(analyze_style(items)) if items else None,
            "recommendations": [
                {
                    "template": template_summary(rec.template),
                    "score": round(rec.score, 2),
                    "match_percentage": rec.match_percentage,
                    "is_great_match": rec.is_great_match,
                }
                for rec in recommendations
            ],
        }

    @instrument_operation("match_template", MatchRequest, _invalid("Invalid match request"))
    def match_template(
        self,
        template_id: str,
        *,
        inventory: List[Dict[str, Any]],
        manual_links: List[Dict[str, Any]],
    ) -> Dict[str, Any]:
        template = self.get_template(template_id)
        items = map_inventory(inventory)
        manual = build_manual_matches(manual_links, items, template.id)
        match = match_template(items, template, manual)
        missing_budget = budget(match.missing)
        return {
            "status": "ok",
            "template_id": template.id,
            "match": match.to_dict(),
            "owned_count": owned_count(match),
            "completion_percentage": completion_percentage(match, template),
            "budget": missing_budget,
            "cost_per_outfit": cost_per_outfit(missing_budget, template),
            "shopping_list": [
                {
                    "template_item_id": template_item.id,
                    "description": template_item.description,
                    "link": asdict(link) if link else None,
                }
                for template_item, link in ((item, preferred_link(item)) for item in match.missing)
            ],
        }

    @instrument_operation("outfit_summary", OutfitCountRequest, _invalid("Invalid outfit request"))
    def outfit_summary(
        self,
        *,
        items: List[Dict[str, Any]],
        candidate_pool: List[Dict[str, Any]],
        top_n: Optional[int],
    ) -> Dict[str, Any]:
        selected = map_inventory(items)
        pool = map_inventory(candidate_pool)
        limit = self.config.suggestion_limit if top_n is None else top_n
        return {
            "status": "ok",
            "total_outfits": count_outfits(selected),
            "breakdown": [
                {"category": category.value, "count": count} for category, count in category_breakdown(selected)
            ],
            "suggestions": [
                {
                    "item": _item_ref(suggestion.item),
                    "outfit_increase": suggestion.outfit_increase,
                    "new_total": suggestion.new_total,
                }
                for suggestion in suggest_next_items(selected, pool, limit)
            ],
        }

    @instrument_operation(
        "wishlist_outfit_potential", OutfitPotentialRequest, _invalid("Invalid outfit potential request")
    )
    def wishlist_outfit_potential(
        self,
        *,
        category: str,
        inventory: List[Dict[str, Any]],
        category_counts: Dict[str, int],
    ) -> Dict[str, Any]:
        source: Any = category_counts if category_counts else map_inventory(inventory)
        return {"status": "ok", "category": category, "outfit_potential": outfit_potential(category, source)}


__all__ = ["CapsuleWardrobeApp", "template_summary"]
