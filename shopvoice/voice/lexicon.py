"""Keyword tables used by the normalizer, segmenter and entity extractor.

Everything here is built once at import time and never mutated. A
``LexiconSet`` is passed into the pipeline explicitly so tests can swap in
fixture tables.

Category and brand tables are ordered: the first match wins, so reordering
them changes extraction results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from shopvoice.voice.models import primary_subtag

# =============================================================================
# Language-independent tables
# =============================================================================

UNITS: tuple[str, ...] = (
    # English
    "bottle", "bottles", "can", "cans", "pack", "packs", "packet", "packets",
    "piece", "pieces", "item", "items", "unit", "units", "box", "boxes",
    "bag", "bags", "jar", "jars", "carton", "cartons", "loaf", "loaves",
    "bunch", "bunches", "dozen", "pair", "pairs", "set", "sets",
    "lb", "lbs", "pound", "pounds", "oz", "ounce", "ounces",
    "kg", "kilo", "kilos", "kilogram", "kilograms", "g", "gram", "grams",
    "liter", "liters", "litre", "litres", "ml", "milliliter", "milliliters",
    "gallon", "gallons",
    # Spanish
    "botella", "botellas", "lata", "latas", "paquete", "paquetes",
    "bolsa", "bolsas", "docena", "docenas", "litro", "litros", "gramos",
    # French
    "bouteille", "bouteilles", "canette", "canettes", "paquet", "paquets",
    "sachet", "sachets", "douzaine", "douzaines",
    # German
    "flasche", "flaschen", "dose", "dosen", "packung", "packungen",
    "stück", "tüte", "tüten", "liter", "gramm",
)

# Earlier brands win when several appear in one phrase
BRANDS: tuple[str, ...] = (
    "nike", "adidas", "coca-cola", "pepsi", "kraft", "nestle", "unilever",
    "apple", "samsung", "sony", "lg", "hp", "dell", "lenovo",
)

# (category, keywords) in tie-break order. Keyword lists mix languages on
# purpose: a Spanish word still categorizes an item spoken in English.
CATEGORY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("dairy", (
        "dairy", "milk", "cheese", "yogurt", "butter", "cream",
        "leche", "queso", "lait", "fromage", "milch", "käse",
    )),
    ("produce", (
        "produce", "apple", "banana", "orange", "lettuce", "tomato", "carrot",
        "manzana", "naranja", "pomme", "banane", "apfel",
    )),
    ("meat", (
        "meat", "chicken", "beef", "pork", "fish", "lamb",
        "pollo", "res", "cerdo", "poulet", "boeuf", "porc",
        "huhn", "rind", "schwein",
    )),
    ("bakery", (
        "bakery", "bread", "cake", "cookie", "pastry", "muffin",
        "pan", "pastel", "galleta", "pain", "gâteau", "brot", "kuchen",
    )),
    ("pantry", (
        "pantry", "rice", "pasta", "flour", "sugar", "oil",
        "arroz", "harina", "riz", "pâtes", "farine", "reis", "nudeln", "mehl",
    )),
    ("frozen", (
        "frozen", "ice cream", "frozen pizza", "frozen vegetables",
        "helado", "pizza congelada", "crème glacée", "pizza surgelée",
        "eis", "gefrorene pizza",
    )),
    ("beverages", (
        "beverage", "water", "juice", "soda", "coffee", "tea",
        "agua", "jugo", "eau", "jus", "wasser", "saft",
    )),
    ("snacks", (
        "snack", "chips", "crackers", "nuts", "candy",
        "papas", "galletas", "nueces", "noix", "bonbons",
    )),
    ("household", (
        "household", "soap", "detergent", "paper towel", "toilet paper",
        "jabón", "detergente", "toallas", "savon", "détergent", "serviettes",
        "seife", "waschmittel", "handtücher",
    )),
    ("personal-care", (
        "personal care", "toothpaste", "shampoo", "deodorant", "lotion",
        "pasta dental", "champú", "desodorante", "dentifrice", "shampooing",
        "déodorant", "zahnpasta", "deo",
    )),
    ("electronics", (
        "electronics", "laptop", "computer", "phone", "tablet", "tv",
        "television", "headphones", "earbuds", "charger", "cable", "wire",
        "battery",
    )),
)

CATEGORIES: tuple[str, ...] = tuple(name for name, _ in CATEGORY_KEYWORDS)

# Always segment on these, whatever the language
SYMBOL_SEPARATORS: tuple[str, ...] = (",", "&", "+")


# =============================================================================
# Lexicon
# =============================================================================


@dataclass(frozen=True)
class Lexicon:
    """Keyword tables for one language.

    ``conjunctions`` split an utterance into several items, so they are never
    treated as stop words.
    """

    code: str
    filler_phrases: tuple[str, ...] = ()
    action_words: tuple[str, ...] = ()
    stop_words: tuple[str, ...] = ()
    conjunctions: tuple[str, ...] = ()
    articles: tuple[str, ...] = ()
    unit_links: tuple[str, ...] = ()
    organic_words: tuple[str, ...] = ()
    price_phrases: tuple[str, ...] = ()
    units: tuple[str, ...] = UNITS
    brands: tuple[str, ...] = BRANDS
    categories: tuple[tuple[str, tuple[str, ...]], ...] = CATEGORY_KEYWORDS

    def __post_init__(self) -> None:
        # Longest first so "can you add" goes before "add" could split it
        object.__setattr__(
            self, "filler_phrases", tuple(sorted(self.filler_phrases, key=len, reverse=True))
        )
        conjunctions = set(self.conjunctions)
        object.__setattr__(
            self, "stop_words", tuple(w for w in self.stop_words if w not in conjunctions)
        )

    @property
    def separators(self) -> tuple[str, ...]:
        """Segment separators in application order."""
        return (SYMBOL_SEPARATORS[0], *self.conjunctions, *SYMBOL_SEPARATORS[1:])

    @property
    def is_empty(self) -> bool:
        return not (self.filler_phrases or self.action_words or self.stop_words)


ENGLISH = Lexicon(
    code="en",
    filler_phrases=(
        "i like", "i want", "i need", "i would like", "i should get",
        "can you add", "could you add", "please add",
        "can you remove", "could you remove", "please remove",
        "can you find", "could you find", "please find",
        "i don't want", "i don't need",
        "get rid of", "throw away", "pick up", "look for", "search for",
        "add to list", "put on list", "remember to buy", "take off",
        "to my shopping list", "to my list", "from my shopping list",
        "from my list", "on my list", "off my list", "shopping list",
    ),
    action_words=(
        "add", "buy", "get", "need", "want", "like", "put", "include",
        "remember", "forget", "grab", "fetch", "purchase", "order",
        "remove", "delete", "cancel", "drop", "skip", "exclude",
        "find", "search", "locate", "show", "display", "check",
        "please", "thanks", "thank",
    ),
    stop_words=(
        "i", "me", "my", "we", "us", "our", "you", "your",
        "the", "a", "an", "or", "but", "for", "of", "to", "from", "at", "by", "with",
        "is", "are", "was", "were", "be", "been", "being",
        "have", "has", "had", "having", "do", "does", "did", "doing",
        "will", "would", "should", "could", "might", "may",
        "not", "no", "don't", "doesn't", "didn't",
        "what's", "that's", "it's", "let's", "i'm", "i'd", "i'll", "we're",
        "that", "this", "these", "those", "some", "any",
        "there", "here", "where", "when", "how", "why", "what", "which", "who", "whom", "whose",
        # placeholders that never name a product on their own
        "it", "them", "item", "items", "thing", "things", "stuff", "list",
        "only", "just", "also", "too",
    ),
    conjunctions=("and", "plus"),
    articles=("a", "an", "the"),
    unit_links=("of",),
    organic_words=("organic",),
    price_phrases=("under", "less than", "below", "cheaper than"),
)

SPANISH = Lexicon(
    code="es",
    filler_phrases=(
        "me gustaría", "quiero comprar", "necesito comprar",
        "puedes agregar", "podrías agregar", "puedes quitar", "podrías quitar",
        "por favor", "a mi lista", "de mi lista", "a la lista", "de la lista",
        "lista de compras",
    ),
    action_words=(
        "agregar", "agrega", "añadir", "añade", "anadir", "comprar", "compra",
        "necesito", "quiero", "pon", "poner", "incluir",
        "quitar", "quita", "eliminar", "elimina", "borrar", "borra", "sacar", "saca",
        "buscar", "busca", "encontrar", "encuentra", "mostrar", "muestra",
        "gracias",
    ),
    stop_words=(
        "yo", "me", "mi", "mis", "tu", "tus", "nosotros",
        "el", "la", "los", "las", "un", "una", "unos", "unas",
        "de", "del", "al", "a", "o", "para", "con", "por", "que",
        "es", "son", "lo", "eso", "esto", "ese", "esa", "este", "esta",
        "algo", "algunos", "algunas", "favor", "lista", "cosa", "cosas",
    ),
    conjunctions=("y",),
    articles=("el", "la", "los", "las", "un", "una", "unos", "unas"),
    unit_links=("de",),
    organic_words=(
        "orgánico", "orgánica", "orgánicos", "orgánicas",
        "organico", "organica", "organicos", "organicas",
        "ecológico", "ecológica",
    ),
    price_phrases=("por menos de", "menos de", "menos", "por debajo de", "debajo"),
)

FRENCH = Lexicon(
    code="fr",
    filler_phrases=(
        "j'ai besoin de", "j'ai besoin d'", "je voudrais", "je veux",
        "peux-tu ajouter", "pouvez-vous ajouter",
        "s'il vous plaît", "s'il te plaît",
        "à ma liste", "de ma liste", "à la liste", "de la liste",
        "liste de courses",
    ),
    action_words=(
        "ajouter", "ajoute", "acheter", "achète", "prendre", "prends",
        "retirer", "retire", "supprimer", "supprime", "enlever", "enlève",
        "chercher", "cherche", "trouver", "trouve", "afficher", "affiche",
        "montrer", "montre", "merci",
    ),
    stop_words=(
        "je", "j'", "moi", "me", "mon", "ma", "mes", "tu", "ton", "ta", "tes",
        "vous", "votre", "nous", "notre",
        "le", "la", "les", "l'", "un", "une", "des", "du", "de", "d'",
        "au", "aux", "à", "ou", "pour", "avec",
        "ai", "besoin", "est", "sont", "ce", "cette", "ces", "quelque", "liste", "chose",
    ),
    conjunctions=("et",),
    articles=("le", "la", "les", "l'", "un", "une", "des", "du", "de"),
    unit_links=("de", "d'"),
    organic_words=("bio", "biologique", "biologiques"),
    price_phrases=("moins de", "moins d'", "moins", "sous"),
)

GERMAN = Lexicon(
    code="de",
    filler_phrases=(
        "ich brauche", "ich möchte", "ich will", "kannst du", "könntest du",
        "zu meiner liste", "von meiner liste", "auf die liste", "zur liste",
        "auf meine liste", "einkaufsliste",
    ),
    action_words=(
        "hinzufügen", "hinzufugen", "füge", "kaufen", "kaufe", "brauche",
        "besorgen", "holen", "entfernen", "entferne", "löschen", "lösche",
        "streichen", "streiche", "suchen", "suche", "finden", "finde",
        "zeigen", "zeige", "zeig", "bitte", "danke", "hinzu",
    ),
    stop_words=(
        "ich", "mir", "mich", "mein", "meine", "meiner", "meinen", "du", "wir", "uns",
        "der", "die", "das", "den", "dem", "des", "ein", "eine", "einen", "einem",
        "zu", "zur", "von", "mit", "für", "auf", "oder",
        "ist", "sind", "etwas", "liste", "sachen",
    ),
    conjunctions=("und",),
    articles=("der", "die", "das", "den", "dem", "ein", "eine", "einen"),
    organic_words=("bio", "öko", "biologisch", "biologische", "biologischen"),
    price_phrases=("weniger als", "unter"),
)


@dataclass(frozen=True)
class LexiconSet:
    """Lexicons keyed by primary language subtag.

    Languages without an entry get an empty lexicon: extraction still runs,
    but no filler or stop-word removal happens.
    """

    lexicons: Mapping[str, Lexicon] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lexicons", MappingProxyType(dict(self.lexicons)))

    @classmethod
    def of(cls, *lexicons: Lexicon) -> LexiconSet:
        return cls({lexicon.code: lexicon for lexicon in lexicons})

    def for_language(self, language: str | None) -> Lexicon:
        code = primary_subtag(language)
        lexicon = self.lexicons.get(code)
        if lexicon is None:
            return Lexicon(code=code)
        return lexicon

    def with_lexicon(self, lexicon: Lexicon) -> LexiconSet:
        return LexiconSet({**self.lexicons, lexicon.code: lexicon})

    @property
    def languages(self) -> tuple[str, ...]:
        return tuple(self.lexicons)


DEFAULT_LEXICONS = LexiconSet.of(ENGLISH, SPANISH, FRENCH, GERMAN)


def get_lexicon(language: str | Lexicon | None = "en") -> Lexicon:
    """Resolve a language tag against the default tables."""
    if isinstance(language, Lexicon):
        return language
    return DEFAULT_LEXICONS.for_language(language)


__all__ = [
    "BRANDS",
    "CATEGORIES",
    "CATEGORY_KEYWORDS",
    "DEFAULT_LEXICONS",
    "ENGLISH",
    "FRENCH",
    "GERMAN",
    "Lexicon",
    "LexiconSet",
    "SPANISH",
    "SYMBOL_SEPARATORS",
    "UNITS",
    "get_lexicon",
]
