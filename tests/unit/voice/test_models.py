"""Tests for voice data models."""

import pytest

from shopvoice.voice.models import (
    ExtractedItem,
    IntentClassification,
    IntentType,
    Utterance,
    VoiceCommandResult,
    primary_subtag,
)


class TestIntentType:
    def test_short_name(self):
        assert IntentType.UPDATE_QUANTITY.short_name == "update_quantity"

    @pytest.mark.parametrize(
        "label,expected",
        [
            ("shopping.new_list", IntentType.NEW_LIST),
            ("new_list", IntentType.NEW_LIST),
            (" Shopping.Clear_List ", IntentType.CLEAR_LIST),
            ("unknown", None),
            ("shopping.teleport", None),
            (None, None),
        ],
    )
    def test_from_label(self, label, expected):
        assert IntentType.from_label(label) is expected


class TestPrimarySubtag:
    @pytest.mark.parametrize(
        "tag,expected",
        [("es-ES", "es"), ("pt_BR", "pt"), ("FR", "fr"), ("", "en"), (None, "en")],
    )
    def test_primary_subtag(self, tag, expected):
        assert primary_subtag(tag) == expected

    def test_utterance(self):
        assert Utterance("agregar leche", "es-MX").primary_language == "es"


class TestExtractedItem:
    def test_defaults(self):
        item = ExtractedItem(name="milk")
        assert item.quantity == 1
        assert item.price_ceiling is None
        assert item.is_valid

    def test_quantity_clamped(self):
        assert ExtractedItem(name="milk", quantity=0).quantity == 1

    def test_to_dict_keys(self):
        data = ExtractedItem(name="apples", price_ceiling=5).to_dict()
        assert data["priceCeiling"] == 5
        assert set(data) == {
            "name", "quantity", "unit", "category", "organic", "brand", "priceCeiling", "notes",
        }


class TestIntentClassification:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, IntentClassification()),
            (("shopping.add_item", 0.8), IntentClassification("shopping.add_item", 0.8)),
            ({"intent": "shopping.add_item", "score": 0.7}, IntentClassification("shopping.add_item", 0.7)),
            ({"intentLabel": "shopping.add_item", "score": 0.9}, IntentClassification("shopping.add_item", 0.9)),
            ({"label": "", "score": None}, IntentClassification()),
        ],
    )
    def test_coerce(self, value, expected):
        assert IntentClassification.coerce(value) == expected

    def test_coerce_passthrough(self):
        value = IntentClassification("shopping.show_list", 0.9)
        assert IntentClassification.coerce(value) is value


class TestVoiceCommandResult:
    def test_to_dict(self):
        milk = ExtractedItem(name="milk")
        result = VoiceCommandResult(
            success=True,
            response="ok",
            action="shopping.add_item",
            items=[milk],
            item_info={"items": [milk], "action": "add_multiple"},
        )
        data = result.to_dict()
        assert data["itemInfo"] == {"items": [milk.to_dict()], "action": "add_multiple"}
        assert data["items"] == [milk.to_dict()]
        assert data["error"] is None

    def test_defaults(self):
        result = VoiceCommandResult(success=False, response="sorry")
        assert result.action == "unknown"
        assert result.items == []
        assert result.confidence == 0.0
