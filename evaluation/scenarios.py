"""Evaluation scenarios exercising matching and recommendation on the bundled catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class EvaluationScenario:
    name: str
    description: str
    inventory: List[Dict[str, object]]
    template_id: str
    expectations: Dict[str, object] = field(default_factory=dict)


def _basics_inventory() -> List[Dict[str, object]]:
    return [
        {"id": "tee", "category": "Top", "ai_analysis": "black crew neck t-shirt"},
        {"id": "jeans", "category": "Bottom", "ai_analysis": "dark jeans"},
        {"id": "sneakers", "category": "Shoes", "ai_analysis": "white sneakers"},
    ]


def _business_inventory() -> List[Dict[str, object]]:
    return [
        {
            "id": "blazer",
            "category": "Outerwear",
            "ai_analysis": "Navy tailored blazer, formal",
            "color": "Navy",
        },
        {
            "id": "shirt",
            "category": "Top",
            "ai_analysis": "```json\n"
            '{"description": "White dress shirt, fitted", "color": "white", "category": "Top"}\n'
            "```\nProfessional cotton shirt",
        },
        {
            "id": "pants",
            "category": "Bottom",
            "ai_analysis": "Navy wool dress pants, tailored",
            "color": "navy",
        },
        {
            "id": "oxfords",
            "category": "Shoes",
            "ai_analysis": "Black oxford dress shoes, formal",
            "color": "black",
        },
    ]


SCENARIOS: List[EvaluationScenario] = [
    EvaluationScenario(
        name="minimal_basics",
        description="Three basics against the minimalist capsule",
        inventory=_basics_inventory(),
        template_id="minimalist-essentials",
        expectations={
            "total_outfits": 1,
            "exact_contains": ["black-jeans", "white-sneakers"],
            "min_owned": 3,
        },
    ),
    EvaluationScenario(
        name="business_suiting",
        description="Suiting pieces should surface the business capsule first",
        inventory=_business_inventory(),
        template_id="business-professional",
        expectations={
            "total_outfits": 2,
            "exact_contains": ["navy-blazer", "white-dress-shirt", "navy-dress-pants", "black-oxford-shoes"],
            "top_recommendation": "business-professional",
            "style_preferences": ["professional"],
            "predominant_fit": "tailored",
        },
    ),
    EvaluationScenario(
        name="empty_wardrobe",
        description="New users see the catalog unscored in editorial order",
        inventory=[],
        template_id="winter-essentials",
        expectations={"total_outfits": 0, "catalog_order": True, "min_owned": 0},
    ),
]


__all__ = ["EvaluationScenario", "SCENARIOS"]
