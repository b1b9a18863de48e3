"""Spoken confirmation templates.

Templates are keyed by language, then by response key. Keys are the short
intent names ("add_item"), their ``.empty`` variants for commands that found
no items, and the generic ``unknown`` / ``unsupported`` / ``error`` replies.
Missing languages and keys fall back to English.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from shopvoice.voice.lexicon import UNITS
from shopvoice.voice.models import ExtractedItem, primary_subtag

RESPONSE_TEMPLATES: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "en": MappingProxyType({
        "add_item": "I've added {items} to your shopping list.",
        "add_item.empty": "I couldn't identify any items to add. Please try again.",
        "remove_item": "I've removed {items} from your shopping list.",
        "remove_item.empty": "I couldn't identify any items to remove. Please try again.",
        "search_item": "Here are the results for {items}.",
        "search_item.empty": "I couldn't identify what to search for. Please try again.",
        "show_list": "Here's your current shopping list.",
        "clear_list": "I've cleared your shopping list.",
        "new_list": "I've created a new shopping list for you.",
        "update_quantity": "I've updated the quantity to {quantity}.",
        "update_quantity.empty": "I couldn't identify the item to update. Please try again.",
        "filter_category": "Here are the items in the {category} category.",
        "filter_category.empty": "I couldn't identify the category to filter by. Please try again.",
        "unknown": "I didn't understand that command. Please try again.",
        "unsupported": "I'm not sure how to help with that.",
        "error": "Sorry, I encountered an error processing your command.",
    }),
    "es": MappingProxyType({
        "add_item": "He agregado {items} a tu lista de compras.",
        "add_item.empty": "No pude identificar ningún artículo para agregar. Inténtalo de nuevo.",
        "remove_item": "He eliminado {items} de tu lista de compras.",
        "remove_item.empty": "No pude identificar ningún artículo para eliminar. Inténtalo de nuevo.",
        "search_item": "Aquí están los resultados para {items}.",
        "search_item.empty": "No pude identificar qué buscar. Inténtalo de nuevo.",
        "show_list": "Aquí está tu lista de compras actual.",
        "clear_list": "He vaciado tu lista de compras.",
        "new_list": "He creado una nueva lista de compras para ti.",
        "update_quantity": "He actualizado la cantidad a {quantity}.",
        "update_quantity.empty": "No pude identificar el artículo que quieres actualizar. Inténtalo de nuevo.",
        "filter_category": "Aquí están los artículos de la categoría {category}.",
        "filter_category.empty": "No pude identificar la categoría para filtrar. Inténtalo de nuevo.",
        "unknown": "No entendí ese comando. Inténtalo de nuevo.",
        "unsupported": "No estoy seguro de cómo ayudarte con eso.",
        "error": "Lo siento, ocurrió un error al procesar tu comando.",
    }),
    "fr": MappingProxyType({
        "add_item": "J'ai ajouté {items} à votre liste de courses.",
        "add_item.empty": "Je n'ai identifié aucun article à ajouter. Veuillez réessayer.",
        "remove_item": "J'ai supprimé {items} de votre liste de courses.",
        "remove_item.empty": "Je n'ai identifié aucun article à supprimer. Veuillez réessayer.",
        "search_item": "Voici les résultats pour {items}.",
        "search_item.empty": "Je n'ai pas compris ce qu'il faut rechercher. Veuillez réessayer.",
        "show_list": "Voici votre liste de courses actuelle.",
        "clear_list": "J'ai vidé votre liste de courses.",
        "new_list": "J'ai créé une nouvelle liste de courses pour vous.",
        "update_quantity": "J'ai mis à jour la quantité à {quantity}.",
        "update_quantity.empty": "Je n'ai pas identifié l'article à modifier. Veuillez réessayer.",
        "filter_category": "Voici les articles de la catégorie {category}.",
        "filter_category.empty": "Je n'ai pas identifié la catégorie à filtrer. Veuillez réessayer.",
        "unknown": "Je n'ai pas compris cette commande. Veuillez réessayer.",
        "unsupported": "Je ne sais pas comment vous aider avec cela.",
        "error": "Désolé, une erreur s'est produite lors du traitement de votre commande.",
    }),
    "de": MappingProxyType({
        "add_item": "Ich habe {items} zu Ihrer Einkaufsliste hinzugefügt.",
        "add_item.empty": "Ich konnte keine Artikel zum Hinzufügen erkennen. Bitte versuchen Sie es erneut.",
        "remove_item": "Ich habe {items} von Ihrer Einkaufsliste entfernt.",
        "remove_item.empty": "Ich konnte keine Artikel zum Entfernen erkennen. Bitte versuchen Sie es erneut.",
        "search_item": "Hier sind die Ergebnisse für {items}.",
        "search_item.empty": "Ich konnte nicht erkennen, wonach gesucht werden soll. Bitte versuchen Sie es erneut.",
        "show_list": "Hier ist Ihre aktuelle Einkaufsliste.",
        "clear_list": "Ich habe Ihre Einkaufsliste geleert.",
        "new_list": "Ich habe eine neue Einkaufsliste für Sie erstellt.",
        "update_quantity": "Ich habe die Menge auf {quantity} geändert.",
        "update_quantity.empty": "Ich konnte den Artikel zum Ändern nicht erkennen. Bitte versuchen Sie es erneut.",
        "filter_category": "Hier sind die Artikel der Kategorie {category}.",
        "filter_category.empty": "Ich konnte die Kategorie zum Filtern nicht erkennen. Bitte versuchen Sie es erneut.",
        "unknown": "Ich habe diesen Befehl nicht verstanden. Bitte versuchen Sie es erneut.",
        "unsupported": "Ich weiß nicht, wie ich dabei helfen kann.",
        "error": "Entschuldigung, bei der Verarbeitung Ihres Befehls ist ein Fehler aufgetreten.",
    }),
})

DEFAULT_LANGUAGE = "en"


def get_template(language: str | None, key: str) -> str:
    templates = RESPONSE_TEMPLATES.get(primary_subtag(language), {})
    if key in templates:
        return templates[key]
    return RESPONSE_TEMPLATES[DEFAULT_LANGUAGE][key]


def render(language: str | None, key: str, **values: Any) -> str:
    """Fill the ``key`` template for ``language``."""
    return get_template(language, key).format(**values)


def join_names(items: list[ExtractedItem]) -> str:
    return ", ".join(item.name for item in items)


# Plurals that suffix rules get wrong
_IRREGULAR_PLURALS = {"loaf": "loaves"}
_IRREGULAR_SINGULARS = {plural: singular for singular, plural in _IRREGULAR_PLURALS.items()}


def _inflect(unit: str, quantity: int) -> str:
    if quantity == 1:
        if unit in _IRREGULAR_SINGULARS:
            return _IRREGULAR_SINGULARS[unit]
        for suffix in ("es", "s"):
            if unit.endswith(suffix) and unit[: -len(suffix)] in UNITS:
                return unit[: -len(suffix)]
    else:
        if unit in _IRREGULAR_PLURALS:
            return _IRREGULAR_PLURALS[unit]
        for suffix in ("s", "es"):
            if unit + suffix in UNITS:
                return unit + suffix
    return unit


def format_quantity(item: ExtractedItem) -> str:
    """``3``, ``1 bottle``, ``2 bottles`` or a measured ``1.5 kg``."""
    if not item.unit:
        return str(item.quantity)
    if item.unit[0].isdigit():
        return item.unit
    return f"{item.quantity} {_inflect(item.unit, item.quantity)}"


__all__ = [
    "RESPONSE_TEMPLATES",
    "format_quantity",
    "get_template",
    "join_names",
    "render",
]
