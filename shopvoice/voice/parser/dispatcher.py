"""Map a classified intent and its extracted items to an action.

The dispatcher is single-step: one intent label in, one Dispatch out. No
state is kept between calls.
"""

from __future__ import annotations

import logging
from typing import Callable

from shopvoice.voice.models import Dispatch, ExtractedItem, IntentType
from shopvoice.voice.responses import render

logger = logging.getLogger(__name__)

# Handler type: function(items, language) -> Dispatch
HandlerFn = Callable[[list[ExtractedItem], str], Dispatch]


class IntentDispatcher:
    """Routes intent labels to registered handlers."""

    def __init__(self):
        self._handlers: dict[IntentType, HandlerFn] = {}

    def register(self, intent: IntentType, handler: HandlerFn) -> None:
        """Register a handler for an intent type."""
        self._handlers[intent] = handler

    @property
    def intents(self) -> tuple[IntentType, ...]:
        return tuple(self._handlers)

    def dispatch(
        self,
        label: str | None,
        items: list[ExtractedItem],
        language: str = "en",
    ) -> Dispatch:
        """Build the action descriptor for ``label``.

        Absent or unrecognized labels give the generic "didn't understand"
        reply with ``recognized=False``.
        """
        intent = IntentType.from_label(label)
        if intent is None:
            if label:
                logger.info(f"Unrecognized intent label: {label}")
            return Dispatch(
                action=IntentType.UNKNOWN.value,
                response=render(language, "unknown"),
                recognized=False,
            )

        handler = self._handlers.get(intent)
        if handler is None:
            return Dispatch(
                action=intent.value,
                response=render(language, "unsupported"),
            )

        return handler(items, language)


def create_default_dispatcher() -> IntentDispatcher:
    """Create a dispatcher with all default handlers registered."""
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

    dispatcher = IntentDispatcher()

    # Item commands
    dispatcher.register(IntentType.ADD_ITEM, handle_add_item)
    dispatcher.register(IntentType.REMOVE_ITEM, handle_remove_item)
    dispatcher.register(IntentType.SEARCH_ITEM, handle_search_item)
    dispatcher.register(IntentType.UPDATE_QUANTITY, handle_update_quantity)
    dispatcher.register(IntentType.FILTER_CATEGORY, handle_filter_category)

    # List commands
    dispatcher.register(IntentType.SHOW_LIST, handle_show_list)
    dispatcher.register(IntentType.CLEAR_LIST, handle_clear_list)
    dispatcher.register(IntentType.NEW_LIST, handle_new_list)

    return dispatcher


__all__ = [
    "HandlerFn",
    "IntentDispatcher",
    "create_default_dispatcher",
]
