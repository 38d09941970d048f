"""Mapping logic from classifier inventory records to :class:`WardrobeItem`."""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, Iterable, List, Optional

from models.taxonomy import try_category
from models.wardrobe_item import WardrobeItem, from_raw_metadata

logger = logging.getLogger(__name__)

_FENCED_JSON = re.compile(r"```json\s*\n([\s\S]*?)\n```")


def parse_analysis_block(analysis: Optional[str]) -> Dict[str, Any]:
    """Extract the structured fields the classifier embeds in its analysis.

    The classifier usually wraps a JSON object in a ```` ```json ```` fence;
    items added from a template store the bare JSON object. Anything else is
    opaque text and yields an empty dict.
    """

    if not analysis:
        return {}
    match = _FENCED_JSON.search(analysis)
    candidate = match.group(1) if match else analysis.strip()
    if not candidate.startswith("{"):
        return {}
    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError:
        logger.debug("Analysis block is not valid JSON; treating as free text")
        return {}
    return parsed if isinstance(parsed, dict) else {}


def describe_item(record: Dict[str, Any]) -> str:
    """Human readable label for an inventory record."""

    parsed = parse_analysis_block(record.get("ai_analysis"))
    return str(
        record.get("description")
        or parsed.get("description")
        or parsed.get("category")
        or record.get("ai_analysis")
        or "Unnamed item"
    )


def map_inventory_record(record: Dict[str, Any]) -> WardrobeItem:
    """Map a stored inventory record into a validated :class:`WardrobeItem`.

    Fields the record lacks (description, color, category) are filled from
    the parsed analysis block. Raises :class:`ValueError` when no valid
    category can be resolved.
    """

    parsed = parse_analysis_block(record.get("ai_analysis"))
    merged = dict(record)
    if not merged.get("description") and parsed.get("description"):
        merged["description"] = str(parsed["description"])
    if not merged.get("color") and parsed.get("color"):
        merged["color"] = str(parsed["color"])
    if try_category(merged.get("category")) is None and try_category(parsed.get("category")) is not None:
        logger.debug("Using category from analysis block", extra={"category": parsed["category"]})
        merged["category"] = parsed["category"]
    return from_raw_metadata(merged)


def map_inventory(records: Iterable[Dict[str, Any]], strict: bool = False) -> List[WardrobeItem]:
    """Map many records, skipping (or, when ``strict``, raising on) bad ones."""

    items: List[WardrobeItem] = []
    for record in records:
        try:
            items.append(map_inventory_record(record))
        except ValueError as exc:
            if strict:
                raise
            logger.warning("Skipping inventory record due to validation error: %s", exc)
    return items


__all__ = ["parse_analysis_block", "describe_item", "map_inventory_record", "map_inventory"]
