"""Item-level voice command handlers.

Each handler turns the extracted items into an action descriptor. Commands
that need items but got none answer with their own "couldn't identify"
message instead of the generic unknown-command reply.
"""

from __future__ import annotations

from shopvoice.voice.models import Dispatch, ExtractedItem, IntentType
from shopvoice.voice.responses import format_quantity, join_names, render


def _nothing_found(intent: IntentType, action: str, language: str) -> Dispatch:
    return Dispatch(
        action=intent.value,
        item_info={"items": [], "action": action},
        response=render(language, f"{intent.short_name}.empty"),
    )


def handle_add_item(items: list[ExtractedItem], language: str) -> Dispatch:
    if not items:
        return _nothing_found(IntentType.ADD_ITEM, "add_multiple", language)
    return Dispatch(
        action=IntentType.ADD_ITEM.value,
        item_info={"items": list(items), "action": "add_multiple"},
        response=render(language, "add_item", items=join_names(items)),
    )


def handle_remove_item(items: list[ExtractedItem], language: str) -> Dispatch:
    if not items:
        return _nothing_found(IntentType.REMOVE_ITEM, "remove_multiple", language)
    return Dispatch(
        action=IntentType.REMOVE_ITEM.value,
        item_info={"items": list(items), "action": "remove_multiple"},
        response=render(language, "remove_item", items=join_names(items)),
    )


def handle_search_item(items: list[ExtractedItem], language: str) -> Dispatch:
    if not items:
        return _nothing_found(IntentType.SEARCH_ITEM, "search", language)
    return Dispatch(
        action=IntentType.SEARCH_ITEM.value,
        item_info={"items": list(items), "action": "search"},
        response=render(language, "search_item", items=join_names(items)),
    )


def handle_update_quantity(items: list[ExtractedItem], language: str) -> Dispatch:
    """Only the first item is updated."""
    if not items:
        return _nothing_found(IntentType.UPDATE_QUANTITY, "update_quantity", language)
    item = items[0]
    return Dispatch(
        action=IntentType.UPDATE_QUANTITY.value,
        item_info={"items": [item], "action": "update_quantity"},
        response=render(language, "update_quantity", quantity=format_quantity(item)),
    )


def handle_filter_category(items: list[ExtractedItem], language: str) -> Dispatch:
    if not items or not items[0].category:
        return _nothing_found(IntentType.FILTER_CATEGORY, "filter_category", language)
    item = items[0]
    return Dispatch(
        action=IntentType.FILTER_CATEGORY.value,
        item_info={"items": [item], "action": "filter_category", "category": item.category},
        response=render(language, "filter_category", category=item.category),
    )
