"""Tests for intent dispatch and the command handlers."""

import logging

import pytest

from shopvoice.voice.models import Dispatch, ExtractedItem, IntentType
from shopvoice.voice.parser.dispatcher import IntentDispatcher, create_default_dispatcher


@pytest.fixture
def dispatcher():
    return create_default_dispatcher()


@pytest.fixture
def milk_and_bread():
    return [
        ExtractedItem(name="milk", category="dairy"),
        ExtractedItem(name="bread", category="bakery"),
    ]


# =============================================================================
# Routing
# =============================================================================


class TestRouting:
    def test_all_intents_registered(self, dispatcher):
        assert set(dispatcher.intents) == set(IntentType) - {IntentType.UNKNOWN}

    @pytest.mark.parametrize("label", ["shopping.add_item", "add_item", "SHOPPING.ADD_ITEM"])
    def test_label_forms(self, dispatcher, milk_and_bread, label):
        result = dispatcher.dispatch(label, milk_and_bread)
        assert result.action == "shopping.add_item"
        assert result.recognized is True

    @pytest.mark.parametrize("label", [None, "", "shopping.fly_to_moon", "unknown"])
    def test_unrecognized_label(self, dispatcher, milk_and_bread, label):
        result = dispatcher.dispatch(label, milk_and_bread)
        assert result.action == "unknown"
        assert result.recognized is False
        assert result.item_info == {}
        assert result.response == "I didn't understand that command. Please try again."

    def test_unrecognized_label_logged(self, dispatcher, caplog):
        with caplog.at_level(logging.INFO):
            dispatcher.dispatch("shopping.fly_to_moon", [])
        assert "shopping.fly_to_moon" in caplog.text

    def test_recognized_without_handler(self, milk_and_bread):
        empty = IntentDispatcher()
        result = empty.dispatch("shopping.add_item", milk_and_bread)
        assert result.action == "shopping.add_item"
        assert result.recognized is True
        assert result.response == "I'm not sure how to help with that."

    def test_custom_handler(self, milk_and_bread):
        custom = IntentDispatcher()
        custom.register(
            IntentType.ADD_ITEM,
            lambda items, language: Dispatch(action="custom", response=f"{len(items)}:{language}"),
        )
        result = custom.dispatch("add_item", milk_and_bread, "fr")
        assert result.action == "custom"
        assert result.response == "2:fr"


# =============================================================================
# Item Commands
# =============================================================================


class TestItemCommands:
    def test_add(self, dispatcher, milk_and_bread):
        result = dispatcher.dispatch("shopping.add_item", milk_and_bread)
        assert result.item_info == {"items": milk_and_bread, "action": "add_multiple"}
        assert result.response == "I've added milk, bread to your shopping list."

    def test_add_spanish(self, dispatcher, milk_and_bread):
        result = dispatcher.dispatch("shopping.add_item", milk_and_bread, "es")
        assert result.response == "He agregado milk, bread a tu lista de compras."

    def test_add_unknown_language_uses_english(self, dispatcher, milk_and_bread):
        result = dispatcher.dispatch("shopping.add_item", milk_and_bread, "ja")
        assert result.response == "I've added milk, bread to your shopping list."

    def test_remove(self, dispatcher, milk_and_bread):
        result = dispatcher.dispatch("shopping.remove_item", milk_and_bread)
        assert result.item_info["action"] == "remove_multiple"
        assert result.response == "I've removed milk, bread from your shopping list."

    def test_remove_nothing(self, dispatcher):
        result = dispatcher.dispatch("shopping.remove_item", [])
        assert result.action == "shopping.remove_item"
        assert result.item_info == {"items": [], "action": "remove_multiple"}
        assert result.response == "I couldn't identify any items to remove. Please try again."

    def test_search(self, dispatcher, milk_and_bread):
        result = dispatcher.dispatch("shopping.search_item", milk_and_bread)
        assert result.item_info["action"] == "search"

    @pytest.mark.parametrize(
        "quantity,unit,expected",
        [
            (3, "", "3"),
            (1, "bottles", "1 bottle"),
            (3, "bottle", "3 bottles"),
            (2, "box", "2 boxes"),
            (1, "loaves", "1 loaf"),
            (2, "loaf", "2 loaves"),
            (1, "1.5 kg", "1.5 kg"),
        ],
    )
    def test_update_quantity(self, dispatcher, quantity, unit, expected):
        water = ExtractedItem(name="water", quantity=quantity, unit=unit)
        result = dispatcher.dispatch("shopping.update_quantity", [water, ExtractedItem(name="milk")])
        assert result.item_info == {"items": [water], "action": "update_quantity"}
        assert result.response == f"I've updated the quantity to {expected}."

    def test_filter_category(self, dispatcher, milk_and_bread):
        result = dispatcher.dispatch("shopping.filter_category", milk_and_bread)
        assert result.item_info["category"] == "dairy"
        assert result.response == "Here are the items in the dairy category."

    def test_filter_without_category(self, dispatcher):
        result = dispatcher.dispatch("shopping.filter_category", [ExtractedItem(name="eggs")])
        assert result.item_info == {"items": [], "action": "filter_category"}


# =============================================================================
# List Commands
# =============================================================================


class TestListCommands:
    @pytest.mark.parametrize(
        "label,action,response",
        [
            ("shopping.show_list", "show_list", "Here's your current shopping list."),
            ("shopping.clear_list", "clear_list", "I've cleared your shopping list."),
            ("shopping.new_list", "new_list", "I've created a new shopping list for you."),
        ],
    )
    def test_list_commands(self, dispatcher, milk_and_bread, label, action, response):
        result = dispatcher.dispatch(label, milk_and_bread)
        assert result.action == label
        assert result.item_info == {"action": action}
        assert result.response == response

    def test_list_command_ignores_missing_items(self, dispatcher):
        result = dispatcher.dispatch("shopping.show_list", [])
        assert result.item_info == {"action": "show_list"}
