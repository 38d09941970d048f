"""Resolve persisted manual match links into matcher overrides."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping, Union

from logic.validation import ManualMatchLink
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)


def build_manual_matches(
    links: Iterable[Union[ManualMatchLink, Mapping[str, object]]],
    inventory: Iterable[WardrobeItem],
    template_id: str,
) -> Dict[str, WardrobeItem]:
    """Map template item ids to the user items the user pinned to them.

    Links for other templates, or pointing at wardrobe items that are no
    longer in the inventory, are ignored. When several links target the same
    template item the last one wins.
    """

    by_id = {item.item_id: item for item in inventory}
    overrides: Dict[str, WardrobeItem] = {}
    for raw in links:
        link = raw if isinstance(raw, ManualMatchLink) else ManualMatchLink.model_validate(raw)
        if link.template_id != template_id:
            continue
        user_item = by_id.get(link.wardrobe_item_id)
        if user_item is None:
            logger.info(
                "Ignoring manual link %s -> %s; wardrobe item not in inventory",
                link.template_item_id,
                link.wardrobe_item_id,
            )
            continue
        overrides[link.template_item_id] = user_item
    return overrides


__all__ = ["build_manual_matches"]
