"""Catalog loading, inventory record mapping and manual link resolution."""

from __future__ import annotations

import copy
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from models.capsule_template import TemplateIntegrityError, TemplateNotFoundError
from models.catalog import DEFAULT_CATALOG_PATH, get_template, load_catalog, parse_catalog
from models.ingestion_mapping import describe_item, map_inventory, map_inventory_record, parse_analysis_block
from models.taxonomy import Category, WardrobeComposition, detect_item_type, validate_category
from models.wardrobe_item import WardrobeItem, from_raw_metadata
from tools.manual_matches import build_manual_matches


def _raw_catalog() -> dict:
    return json.loads(Path(DEFAULT_CATALOG_PATH).read_text(encoding="utf-8"))


def test_bundled_catalog_loads_in_editorial_order():
    templates = load_catalog()
    assert [template.id for template in templates] == [
        "winter-essentials",
        "guardian-capsule",
        "minimalist-essentials",
        "business-professional",
    ]
    for template in templates:
        assert template.total_items == len(template.items)
        assert template.wardrobe_composition is WardrobeComposition.PANTS_SHIRTS


def test_plural_category_labels_are_normalised():
    guardian = get_template(load_catalog(), "guardian-capsule")
    assert Category.ACCESSORY in guardian.categories
    assert guardian.item("scarf").category is Category.ACCESSORY


def test_get_template_raises_for_unknown_id():
    with pytest.raises(TemplateNotFoundError):
        get_template(load_catalog(), "does-not-exist")


def test_parse_catalog_rejects_item_count_mismatch():
    payload = _raw_catalog()
    payload["templates"][0]["total_items"] += 1
    with pytest.raises(TemplateIntegrityError):
        parse_catalog(payload)


def test_parse_catalog_rejects_unknown_category():
    payload = copy.deepcopy(_raw_catalog())
    payload["templates"][0]["items"][0]["category"] = "Hats"
    with pytest.raises(ValidationError):
        parse_catalog(payload)


def test_validate_category_accepts_aliases_only():
    assert validate_category("tops") is Category.TOP
    assert validate_category(" Shoes ") is Category.SHOES
    with pytest.raises(ValueError):
        validate_category("Swimwear")


def test_item_type_order_prefers_shoes_for_oxford():
    assert detect_item_type("Black oxford dress shoes") == "oxford"
    assert detect_item_type("White dress shirt") == "oxford shirt"
    assert detect_item_type("Wool blend coat") == "jacket"
    assert detect_item_type("Pocket square") is None


def test_parse_fenced_analysis_block():
    analysis = (
        "Classifier output\n"
        "```json\n"
        '{"description": "Navy wool blazer", "color": "Navy", "category": "Outerwear"}\n'
        "```\n"
    )
    assert parse_analysis_block(analysis) == {
        "description": "Navy wool blazer",
        "color": "Navy",
        "category": "Outerwear",
    }


@pytest.mark.parametrize("analysis", [None, "", "white tee", "```json\n{not json}\n```", "[1, 2]"])
def test_unparseable_analysis_yields_empty_dict(analysis):
    assert parse_analysis_block(analysis) == {}


def test_bare_json_analysis_is_parsed():
    assert parse_analysis_block('{"color": "white"}') == {"color": "white"}


def test_map_record_fills_missing_fields_from_analysis():
    record = {
        "id": 42,
        "ai_analysis": '```json\n{"description": "Grey merino scarf", "color": "Grey", "category": "Accessories"}\n```',
    }
    item = map_inventory_record(record)
    assert item.item_id == "42"
    assert item.category is Category.ACCESSORY
    assert item.color == "grey"
    assert item.description == "Grey merino scarf"
    assert describe_item(record) == "Grey merino scarf"


def test_record_fields_win_over_analysis():
    record = {
        "id": "x",
        "category": "Top",
        "color": "Black",
        "ai_analysis": '```json\n{"color": "white", "category": "Shoes"}\n```',
    }
    item = map_inventory_record(record)
    assert item.category is Category.TOP
    assert item.color == "black"


def test_map_inventory_skips_invalid_records_unless_strict():
    records = [
        {"id": "ok", "category": "Top", "ai_analysis": "tee"},
        {"id": "bad", "category": "Hats"},
        {"category": "Top"},
    ]
    assert [item.item_id for item in map_inventory(records)] == ["ok"]
    with pytest.raises(ValueError):
        map_inventory(records, strict=True)


def test_wardrobe_item_normalises_fields():
    item = from_raw_metadata({"item_id": "1", "category": "shoes", "analysis": None, "color": "  ", "style_tags": "Casual"})
    assert item.category is Category.SHOES
    assert item.ai_analysis == ""
    assert item.color is None
    assert item.style_tags == ["casual"]
    with pytest.raises(ValueError):
        WardrobeItem(item_id="2", category="Swimwear")


def test_manual_links_resolve_against_inventory_and_template():
    inventory = [
        WardrobeItem(item_id="w1", category="Top"),
        WardrobeItem(item_id="w2", category="Shoes"),
    ]
    links = [
        {"template_id": "minimalist-essentials", "template_item_id": "white-tee", "wardrobe_item_id": "w1"},
        {"template_id": "minimalist-essentials", "template_item_id": "white-tee", "wardrobe_item_id": "w2"},
        {"template_id": "guardian-capsule", "template_item_id": "black-tee", "wardrobe_item_id": "w1"},
        {"template_id": "minimalist-essentials", "template_item_id": "black-tee", "wardrobe_item_id": "gone"},
    ]
    overrides = build_manual_matches(links, inventory, "minimalist-essentials")
    assert {key: item.item_id for key, item in overrides.items()} == {"white-tee": "w2"}
