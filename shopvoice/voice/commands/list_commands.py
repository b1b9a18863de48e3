"""List-level voice command handlers.

These act on the whole list, so extracted items are ignored.
"""

from __future__ import annotations

from shopvoice.voice.models import Dispatch, ExtractedItem, IntentType
from shopvoice.voice.responses import render


def _list_action(intent: IntentType, language: str) -> Dispatch:
    return Dispatch(
        action=intent.value,
        item_info={"action": intent.short_name},
        response=render(language, intent.short_name),
    )


def handle_show_list(items: list[ExtractedItem], language: str) -> Dispatch:
    return _list_action(IntentType.SHOW_LIST, language)


def handle_clear_list(items: list[ExtractedItem], language: str) -> Dispatch:
    return _list_action(IntentType.CLEAR_LIST, language)


def handle_new_list(items: list[ExtractedItem], language: str) -> Dispatch:
    return _list_action(IntentType.NEW_LIST, language)
