"""Handlers that turn a classified intent and its items into an action."""

from shopvoice.voice.commands.item_commands import (
    handle_add_item,
    handle_filter_category,
    handle_remove_item,
    handle_search_item,
    handle_update_quantity,
)
from shopvoice.voice.commands.list_commands import (
    handle_clear_list,
    handle_new_list,
    handle_show_list,
)

__all__ = [
    "handle_add_item",
    "handle_clear_list",
    "handle_filter_category",
    "handle_new_list",
    "handle_remove_item",
    "handle_search_item",
    "handle_show_list",
    "handle_update_quantity",
]
