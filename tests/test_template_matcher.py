"""Template matching: scoring bands, thresholds and the greedy one-to-one assignment."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.outfit_combinatorics import count_outfits
from logic.template_matcher import match_template, score_candidate
from models.capsule_template import CapsuleTemplate, CapsuleTemplateItem
from models.catalog import get_template, load_catalog
from models.taxonomy import Category, WardrobeComposition
from models.wardrobe_item import WardrobeItem


def _slot(item_id: str, category: Category, description: str, color: str = "", style_tags=()) -> CapsuleTemplateItem:
    return CapsuleTemplateItem(
        id=item_id,
        category=category,
        description=description,
        color=color,
        style_tags=tuple(style_tags),
    )


def _template(*slots: CapsuleTemplateItem) -> CapsuleTemplate:
    return CapsuleTemplate(
        id="test-capsule",
        name="Test capsule",
        description="",
        total_items=len(slots),
        total_outfits=1,
        style="Test",
        wardrobe_composition=WardrobeComposition.PANTS_SHIRTS,
        items=tuple(slots),
    )


def _assert_partition(result, template: CapsuleTemplate) -> None:
    matched = (
        [entry.template_item.id for entry in result.exact]
        + [entry.template_item.id for entry in result.similar]
        + [template_item.id for template_item in result.missing]
    )
    assert sorted(matched) == sorted(template.item_ids)
    assert len(matched) == len(set(matched))
    user_ids = [entry.user_item.item_id for entry in result.exact + result.similar]
    assert len(user_ids) == len(set(user_ids))


def test_type_and_category_alone_reach_exact():
    slot = _slot("plain-tee", Category.TOP, "Plain t-shirt", color="red")
    user = WardrobeItem(item_id="u1", category="Top", ai_analysis="Grey tee")

    assert score_candidate(user, slot).score == 70
    result = match_template([user], _template(slot))
    assert [entry.template_item.id for entry in result.exact] == ["plain-tee"]


def test_category_color_and_style_without_type_is_similar():
    slot = _slot("henley", Category.TOP, "Linen henley", color="Navy Blue", style_tags=["casual"])
    user = WardrobeItem(item_id="u1", category="Top", ai_analysis="relaxed weekend top", color="blue")

    candidate = score_candidate(user, slot)
    assert candidate.score == 65
    result = match_template([user], _template(slot))
    assert result.exact == []
    assert len(result.similar) == 1
    assert result.similar[0].reason == "Similar top, same category, similar color, matching style"


def test_lowest_similar_score_uses_short_reason():
    slot = _slot("coat", Category.OUTERWEAR, "Wool coat", color="gray")
    user = WardrobeItem(item_id="u1", category="Top", ai_analysis="grey coat", color="grey")

    assert score_candidate(user, slot).score == 45
    result = match_template([user], _template(slot))
    assert result.similar[0].reason == "Similar item, but matching jacket, similar color"


def test_category_only_is_missing_and_leaves_item_free():
    henley = _slot("henley", Category.TOP, "Linen henley", color="navy blue")
    tee = _slot("tee", Category.TOP, "Crew neck t-shirt")
    user = WardrobeItem(item_id="u1", category="Top", ai_analysis="cotton tee")

    assert score_candidate(user, henley).score == 40
    result = match_template([user], _template(henley, tee))
    assert [template_item.id for template_item in result.missing] == ["henley"]
    assert [entry.template_item.id for entry in result.exact] == ["tee"]


def test_related_and_exact_color_points():
    navy_slot = _slot("navy", Category.BOTTOM, "Pleated skirt", color="blue")
    user = WardrobeItem(item_id="u1", category="Bottom", color="Navy")
    assert score_candidate(user, navy_slot).score == 50
    assert "related color" in score_candidate(user, navy_slot).reasons

    exact_slot = _slot("exact", Category.BOTTOM, "Pleated skirt", color="NAVY")
    assert score_candidate(user, exact_slot).reasons == ("same category", "exact color match")


def test_missing_color_scores_no_color_points():
    slot = _slot("tee", Category.TOP, "White t-shirt", color="white")
    user = WardrobeItem(item_id="u1", category="Top", ai_analysis="white t-shirt")
    assert score_candidate(user, slot).score == 70


def test_each_user_item_fills_at_most_one_slot():
    first = _slot("tee-1", Category.TOP, "Crew neck t-shirt")
    second = _slot("tee-2", Category.TOP, "Crew neck t-shirt")
    user = WardrobeItem(item_id="u1", category="Top", ai_analysis="basic tee")

    template = _template(first, second)
    result = match_template([user], template)
    assert [entry.template_item.id for entry in result.exact] == ["tee-1"]
    assert [template_item.id for template_item in result.missing] == ["tee-2"]
    _assert_partition(result, template)


def test_first_best_candidate_wins_ties():
    slot = _slot("tee", Category.TOP, "Crew neck t-shirt")
    first = WardrobeItem(item_id="a", category="Top", ai_analysis="tee")
    second = WardrobeItem(item_id="b", category="Top", ai_analysis="tee")
    result = match_template([first, second], _template(slot))
    assert result.exact[0].user_item.item_id == "a"


def test_manual_matches_take_precedence_and_consume_the_item():
    tee = _slot("tee", Category.TOP, "Crew neck t-shirt")
    sneakers_slot = _slot("sneakers", Category.SHOES, "White sneakers", color="white")
    sneakers = WardrobeItem(item_id="kicks", category="Shoes", ai_analysis="white sneakers", color="white")

    template = _template(tee, sneakers_slot)
    result = match_template([sneakers], template, manual_matches={"tee": sneakers})

    assert [(entry.template_item.id, entry.user_item.item_id) for entry in result.exact] == [("tee", "kicks")]
    assert [template_item.id for template_item in result.missing] == ["sneakers"]
    _assert_partition(result, template)


def test_empty_inventory_leaves_everything_missing():
    template = get_template(load_catalog(), "winter-essentials")
    result = match_template([], template)
    assert result.exact == [] and result.similar == []
    assert [template_item.id for template_item in result.missing] == template.item_ids


def _mixed_inventory() -> List[WardrobeItem]:
    return [
        WardrobeItem(item_id="1", category="Top", ai_analysis="white crew neck t-shirt, casual", color="white"),
        WardrobeItem(item_id="2", category="Top", ai_analysis="navy oxford button-down", color="navy"),
        WardrobeItem(item_id="3", category="Bottom", ai_analysis="dark denim jeans", color="dark blue"),
        WardrobeItem(item_id="4", category="Bottom", ai_analysis="khaki chinos", color="khaki"),
        WardrobeItem(item_id="5", category="Shoes", ai_analysis="white leather sneakers", color="white"),
        WardrobeItem(item_id="6", category="Outerwear", ai_analysis="navy wool blazer, formal", color="navy"),
        WardrobeItem(item_id="7", category="Accessory", ai_analysis="grey merino scarf", color="grey"),
        WardrobeItem(item_id="8", category="Dress", ai_analysis="black midi dress", color="black"),
    ]


@pytest.mark.parametrize(
    "template_id",
    ["winter-essentials", "guardian-capsule", "minimalist-essentials", "business-professional"],
)
def test_catalog_matches_partition_every_template(template_id):
    template = get_template(load_catalog(), template_id)
    result = match_template(_mixed_inventory(), template)
    _assert_partition(result, template)
    statuses: Dict[str, str] = result.status_by_item()
    assert set(statuses) == set(template.item_ids)


def test_minimalist_basics_end_to_end():
    inventory = [
        WardrobeItem(item_id="t1", category="Top", ai_analysis="black crew neck t-shirt"),
        WardrobeItem(item_id="b1", category="Bottom", ai_analysis="dark jeans"),
        WardrobeItem(item_id="s1", category="Shoes", ai_analysis="white sneakers"),
    ]
    template = get_template(load_catalog(), "minimalist-essentials")
    result = match_template(inventory, template)

    exact = {entry.template_item.id: entry.user_item.item_id for entry in result.exact}
    # Slots are filled in template order, so the first t-shirt slot claims the tee.
    assert exact == {"white-tee": "t1", "black-jeans": "b1", "white-sneakers": "s1"}
    assert result.similar == []
    missing_ids = [template_item.id for template_item in result.missing]
    assert "black-tee" in missing_ids
    assert "khaki-chinos" in missing_ids
    assert len(missing_ids) == 17
    assert count_outfits(inventory) == 1


def test_known_colors_raise_catalog_scores():
    template = get_template(load_catalog(), "minimalist-essentials")
    black_tee = WardrobeItem(item_id="t1", category="Top", ai_analysis="black crew neck t-shirt", color="black")
    sneakers = WardrobeItem(item_id="s1", category="Shoes", ai_analysis="white sneakers", color="white")

    assert score_candidate(black_tee, template.item("black-tee")).score == 90
    assert score_candidate(black_tee, template.item("white-tee")).score == 70
    assert score_candidate(sneakers, template.item("white-sneakers")).score == 90
