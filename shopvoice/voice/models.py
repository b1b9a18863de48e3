"""Voice shopping data models.

Defines intents, extracted items, and result types for the voice command
pipeline:
    Utterance → IntentClassification + [ExtractedItem] → VoiceCommandResult
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class IntentType(str, Enum):
    """Shopping intents the dispatcher knows how to handle."""

    # Item operations
    ADD_ITEM = "shopping.add_item"
    REMOVE_ITEM = "shopping.remove_item"
    SEARCH_ITEM = "shopping.search_item"
    UPDATE_QUANTITY = "shopping.update_quantity"
    FILTER_CATEGORY = "shopping.filter_category"

    # List operations
    SHOW_LIST = "shopping.show_list"
    CLEAR_LIST = "shopping.clear_list"
    NEW_LIST = "shopping.new_list"

    UNKNOWN = "unknown"

    @property
    def short_name(self) -> str:
        """Label without the ``shopping.`` domain prefix."""
        return self.value.rsplit(".", 1)[-1]

    @classmethod
    def from_label(cls, label: str | None) -> IntentType | None:
        """Resolve a classifier label (``shopping.add_item`` or ``add_item``).

        Returns None for absent or unrecognized labels.
        """
        if not label:
            return None
        label = label.strip().lower()
        for intent in cls:
            if intent is cls.UNKNOWN:
                continue
            if label in (intent.value, intent.short_name):
                return intent
        return None


@dataclass(frozen=True)
class Utterance:
    """A pre-transcribed command and the language it was spoken in."""

    text: str
    language: str = "en"

    @property
    def primary_language(self) -> str:
        """Primary subtag of the language tag (``es-ES`` → ``es``)."""
        return primary_subtag(self.language)


def primary_subtag(language: str | None) -> str:
    if not language:
        return "en"
    return language.replace("_", "-").split("-", 1)[0].lower()


@dataclass
class ExtractedItem:
    """A single shopping item pulled out of an utterance."""

    name: str = ""
    quantity: int = 1
    unit: str = ""
    category: str = ""
    organic: bool = False
    brand: str = ""
    price_ceiling: float | None = None
    notes: str = ""

    def __post_init__(self) -> None:
        if self.quantity < 1:
            self.quantity = 1

    @property
    def is_valid(self) -> bool:
        return bool(self.name)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "category": self.category,
            "organic": self.organic,
            "brand": self.brand,
            "priceCeiling": self.price_ceiling,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class IntentClassification:
    """Output of the intent classifier. ``label=None`` means unknown."""

    label: str | None = None
    score: float = 0.0

    @classmethod
    def coerce(cls, value: Any) -> IntentClassification:
        """Accept an IntentClassification, a ``(label, score)`` pair, or a dict.

        Dicts may name the label ``intentLabel``, ``intent`` or ``label``.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls()
        if isinstance(value, dict):
            label = value.get("intentLabel", value.get("intent", value.get("label")))
            score = value.get("score") or 0.0
        else:
            label, score = value
        return cls(label=label or None, score=float(score or 0.0))


@dataclass
class Dispatch:
    """Action descriptor produced by the intent dispatcher."""

    action: str
    item_info: dict[str, Any] = field(default_factory=dict)
    response: str = ""
    recognized: bool = True


@dataclass
class VoiceCommandResult:
    """Result of interpreting one voice command."""

    success: bool
    response: str
    action: str = IntentType.UNKNOWN.value
    items: list[ExtractedItem] = field(default_factory=list)
    item_info: dict[str, Any] = field(default_factory=dict)
    confidence: float = 0.0
    language: str = "en"
    intent: str | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "action": self.action,
            "items": [item.to_dict() for item in self.items],
            "itemInfo": _serialize(self.item_info),
            "response": self.response,
            "confidence": self.confidence,
            "language": self.language,
            "intent": self.intent,
            "error": self.error,
        }


def _serialize(value: Any) -> Any:
    if isinstance(value, ExtractedItem):
        return value.to_dict()
    if isinstance(value, dict):
        return {k: _serialize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_serialize(v) for v in value]
    return value
