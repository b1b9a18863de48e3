"""Intent classification for shopping commands.

The pipeline treats the classifier as a black box:
``classify(language, utterance) -> IntentClassification``. Anything that
satisfies ``IntentClassifier`` can be injected (a statistical model, a remote
NLU service); ``RuleIntentClassifier`` is the built-in implementation.

RuleIntentClassifier uses priority-sorted regex patterns per language, built
from the same example commands the statistical model was trained on. Higher
priority patterns are tried first and produce higher confidence.
"""

from __future__ import annotations

import re
from typing import Awaitable, Protocol, Union, runtime_checkable

from shopvoice.voice.models import IntentClassification, IntentType, primary_subtag

_CATEGORY_NAMES = (
    r"(?:dairy|produce|meat|bakery|pantry|frozen|beverages?|snacks?|household"
    r"|personal\s+care|electronics)"
)

# Intent patterns per language: (pattern, intent, priority)
# Higher priority = matched first.
INTENT_PATTERNS: dict[str, list[tuple[str, IntentType, int]]] = {
    "en": [
        # List management first: "remove everything" is a clear, not a remove
        (r"\b(?:clear|empty|wipe|reset)\s+(?:out\s+)?(?:my\s+|the\s+)?(?:shopping\s+)?list\b", IntentType.CLEAR_LIST, 95),
        (r"^(?:remove|delete)\s+(?:everything|all)(?:\s+items?)?$", IntentType.CLEAR_LIST, 95),
        (r"\b(?:new|another|fresh)\s+(?:shopping\s+)?list\b", IntentType.NEW_LIST, 94),
        (r"\b(?:create|start)\s+(?:a\s+)?(?:new\s+)?(?:shopping\s+)?list\b", IntentType.NEW_LIST, 93),
        (r"\b(?:show|read|display|view)\s+(?:me\s+)?(?:my\s+|the\s+)?(?:shopping\s+)?list\b", IntentType.SHOW_LIST, 90),
        (r"\bwhat(?:'s|\s+is)\s+on\s+(?:my\s+|the\s+)?(?:shopping\s+)?list\b", IntentType.SHOW_LIST, 90),

        # Quantity
        (r"\b(?:change|update|set)\s+(?:the\s+)?quantity\b", IntentType.UPDATE_QUANTITY, 85),
        (r"^make\s+(?:it|that|them)\s+\d+", IntentType.UPDATE_QUANTITY, 84),

        # Category filter
        (r"\b(?:filter\s+by|only\s+show|show\s+only)\b", IntentType.FILTER_CATEGORY, 80),
        (r"^show\s+(?:me\s+)?(?:the\s+)?(?:my\s+)?" + _CATEGORY_NAMES + r"\s+items\b", IntentType.FILTER_CATEGORY, 79),

        # Search
        (r"\b(?:find|search|look\s+(?:for|up)|locate)\b", IntentType.SEARCH_ITEM, 75),
        (r"^show\s+me\b", IntentType.SEARCH_ITEM, 72),

        # Item removal
        (r"\b(?:remove|delete|take\s+off|get\s+rid\s+of|drop|cross\s+off)\b", IntentType.REMOVE_ITEM, 70),
        (r"\bi\s+don'?t\s+(?:need|want)\b", IntentType.REMOVE_ITEM, 68),

        # Item addition (lowest: "i need" appears everywhere)
        (r"\b(?:add|buy|purchase|get|grab|pick\s+up|put|include)\b", IntentType.ADD_ITEM, 60),
        (r"\b(?:i\s+)?(?:need|want|would\s+like)\b", IntentType.ADD_ITEM, 58),
        (r"\bremember\s+to\s+buy\b", IntentType.ADD_ITEM, 58),
    ],
    "es": [
        (r"\b(?:borra|borrar|vacía|vacia|vaciar|limpia|limpiar)\s+(?:mi\s+|la\s+)?lista\b", IntentType.CLEAR_LIST, 95),
        (r"\b(?:nueva\s+lista|crea(?:r)?\s+(?:una\s+)?(?:nueva\s+)?lista)\b", IntentType.NEW_LIST, 94),
        (r"\b(?:muestra|mostrar|ver|enseña)(?:me)?\s+(?:mi\s+|la\s+)?lista\b", IntentType.SHOW_LIST, 90),
        (r"\b(?:cambia|cambiar|actualiza|actualizar)\s+(?:la\s+)?cantidad\b", IntentType.UPDATE_QUANTITY, 85),
        (r"\b(?:busca|buscar|encuentra|encontrar)\b", IntentType.SEARCH_ITEM, 75),
        (r"\b(?:quita|quitar|elimina|eliminar|borra|borrar|saca|sacar)\b", IntentType.REMOVE_ITEM, 70),
        (r"\b(?:agrega|agregar|añade|añadir|anadir|compra|comprar|necesito|quiero|pon|poner)\b", IntentType.ADD_ITEM, 60),
    ],
    "fr": [
        (r"\b(?:vide|vider|efface|effacer)\s+(?:ma\s+|la\s+)?liste\b", IntentType.CLEAR_LIST, 95),
        (r"\bnouvelle\s+liste\b", IntentType.NEW_LIST, 94),
        (r"\b(?:montre|affiche|afficher|voir)(?:-moi)?\s+(?:ma\s+|la\s+)?liste\b", IntentType.SHOW_LIST, 90),
        (r"\b(?:change|changer|modifie|modifier)\s+(?:la\s+)?quantité\b", IntentType.UPDATE_QUANTITY, 85),
        (r"\b(?:cherche|chercher|trouve|trouver)\b", IntentType.SEARCH_ITEM, 75),
        (r"\b(?:retire|retirer|supprime|supprimer|enlève|enlever)\b", IntentType.REMOVE_ITEM, 70),
        (r"\b(?:ajoute|ajouter|achète|acheter|besoin|prendre)\b", IntentType.ADD_ITEM, 60),
    ],
    "de": [
        (r"\b(?:liste\s+(?:leeren|löschen)|leere\s+(?:meine\s+|die\s+)?liste)\b", IntentType.CLEAR_LIST, 95),
        (r"\bneue\s+(?:einkaufs)?liste\b", IntentType.NEW_LIST, 94),
        (r"\b(?:zeig|zeige|zeigen)\s+(?:mir\s+)?(?:meine\s+|die\s+)?(?:einkaufs)?liste\b", IntentType.SHOW_LIST, 90),
        (r"\b(?:ändere|ändern)\s+(?:die\s+)?menge\b", IntentType.UPDATE_QUANTITY, 85),
        (r"\b(?:suche|suchen|finde|finden)\b", IntentType.SEARCH_ITEM, 75),
        (r"\b(?:entferne|entfernen|lösche|löschen|streiche|streichen)\b", IntentType.REMOVE_ITEM, 70),
        (r"\b(?:hinzufügen|füge|kaufen|kaufe|brauche|besorgen|holen)\b", IntentType.ADD_ITEM, 60),
    ],
}

ClassifyOutcome = Union[IntentClassification, Awaitable[IntentClassification]]


@runtime_checkable
class IntentClassifier(Protocol):
    """Anything that can label an utterance with an intent and a score."""

    def classify(self, language: str, utterance: str) -> ClassifyOutcome:
        ...


class RuleIntentClassifier:
    """Regex-based classifier over per-language pattern tables.

    Languages without patterns fall back to English. Matches scoring below
    ``min_score`` are reported as unknown.
    """

    def __init__(
        self,
        patterns: dict[str, list[tuple[str, IntentType, int]]] | None = None,
        min_score: float = 0.5,
        base_confidence: float = 0.6,
        fallback_language: str = "en",
    ):
        self.min_score = min_score
        self.base_confidence = base_confidence
        self.fallback_language = fallback_language
        self._patterns: dict[str, tuple[tuple[re.Pattern, IntentType, int], ...]] = {
            language: tuple(
                sorted(
                    (
                        (re.compile(p, re.IGNORECASE), intent, priority)
                        for p, intent, priority in entries
                    ),
                    key=lambda x: x[2],
                    reverse=True,
                )
            )
            for language, entries in (patterns or INTENT_PATTERNS).items()
        }

    @property
    def languages(self) -> tuple[str, ...]:
        return tuple(self._patterns)

    def _patterns_for(self, language: str) -> tuple[tuple[re.Pattern, IntentType, int], ...]:
        code = primary_subtag(language)
        if code in self._patterns:
            return self._patterns[code]
        return self._patterns.get(self.fallback_language, ())

    def classify(self, language: str, utterance: str) -> IntentClassification:
        """Label ``utterance``; returns an empty classification when nothing matches."""
        text = " ".join((utterance or "").lower().replace("’", "'").split())
        if not text:
            return IntentClassification()

        for pattern, intent, priority in self._patterns_for(language):
            if pattern.search(text):
                confidence = min(0.95, self.base_confidence + (priority / 200))
                if confidence < self.min_score:
                    return IntentClassification(score=confidence)
                return IntentClassification(label=intent.value, score=confidence)

        return IntentClassification()


__all__ = [
    "INTENT_PATTERNS",
    "IntentClassifier",
    "RuleIntentClassifier",
]
