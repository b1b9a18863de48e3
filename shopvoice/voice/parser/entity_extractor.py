"""Entity extraction from item phrases.

Turns one item phrase ("2 bottles of organic water") into an ExtractedItem.
Fields are pulled out in a fixed order, each removing its span from a working
copy of the phrase:

    quantity/unit → organic → price ceiling → brand → category → name

Category matching runs on what is left after the earlier removals, so a brand
like "apple" never categorizes "apple laptop" as produce.
"""

from __future__ import annotations

import re
from functools import lru_cache

from shopvoice.voice.lexicon import Lexicon, get_lexicon
from shopvoice.voice.models import ExtractedItem
from shopvoice.voice.parser.normalizer import compile_words, normalize
from shopvoice.voice.parser.segmenter import segment

_LEADING_NUMBER = re.compile(r"^\s*(\d+)(?![\d.])\s*")
_WHITESPACE = re.compile(r"\s+")


def _alternation(words: tuple[str, ...]) -> str:
    return "|".join(re.escape(w) for w in sorted(set(words), key=len, reverse=True))


@lru_cache(maxsize=None)
def _quantity_pattern(units: tuple[str, ...], links: tuple[str, ...]) -> re.Pattern:
    link = ""
    if links:
        link = r"(?:\s+(?:%s))?" % compile_words(links).pattern
    return re.compile(
        r"(?<![\w.])(\d+(?:\.\d+)?)\s*(%s)(?!\w)%s" % (_alternation(units), link),
        re.IGNORECASE,
    )


@lru_cache(maxsize=None)
def _price_pattern(phrases: tuple[str, ...]) -> re.Pattern | None:
    if not phrases:
        return None
    return re.compile(
        r"(?:%s)\s*[$€£]?\s*(\d+(?:\.\d+)?)\s*[$€£]?" % compile_words(phrases).pattern,
        re.IGNORECASE,
    )


@lru_cache(maxsize=None)
def _brand_patterns(brands: tuple[str, ...]) -> tuple[tuple[str, re.Pattern], ...]:
    # "coca-cola" may arrive as "coca cola" once punctuation is stripped
    return tuple(
        (
            brand,
            re.compile(
                r"(?<!\w)%s(?!\w)" % r"[\s-]?".join(re.escape(p) for p in brand.split("-")),
                re.IGNORECASE,
            ),
        )
        for brand in brands
    )


@lru_cache(maxsize=None)
def _article_pattern(articles: tuple[str, ...]) -> re.Pattern:
    prefixes = [re.escape(a) for a in articles if not a[-1].isalnum()]
    words = [a for a in articles if a[-1].isalnum()]
    parts = [r"(?:%s)\s+" % _alternation(tuple(words))] if words else []
    parts.extend(r"%s\s*" % p for p in prefixes)
    return re.compile(r"^(?:%s)" % "|".join(parts), re.IGNORECASE)


def extract_quantity(text: str, lexicon: Lexicon) -> tuple[int, str, str]:
    """Pull ``<number> <unit>`` or a bare leading integer out of ``text``.

    A decimal amount ("1.5 kg") is a measure, not a count: quantity stays 1
    and the amount is kept in the unit ("1.5 kg").

    Returns:
        (quantity, unit, remaining_text); quantity defaults to 1 and is never
        less than 1.
    """
    match = _quantity_pattern(lexicon.units, lexicon.unit_links).search(text)
    if match:
        amount, unit = match.group(1), match.group(2).lower()
        text = text[: match.start()] + " " + text[match.end():]
        if "." in amount:
            return 1, f"{amount} {unit}", text
        return max(int(amount), 1), unit, text

    match = _LEADING_NUMBER.match(text)
    if match:
        return max(int(match.group(1)), 1), "", text[match.end():]

    return 1, "", text


def extract_organic(text: str, lexicon: Lexicon) -> tuple[bool, str]:
    pattern = compile_words(lexicon.organic_words)
    if pattern is None or not pattern.search(text):
        return False, text
    return True, pattern.sub(" ", text)


def extract_price_ceiling(text: str, lexicon: Lexicon) -> tuple[float | None, str]:
    """Handles: "under $5", "less than 3.50", "menos de 10€", "unter 4"."""
    pattern = _price_pattern(lexicon.price_phrases)
    match = pattern.search(text) if pattern else None
    if not match:
        return None, text
    text = text[: match.start()] + " " + text[match.end():]
    value = float(match.group(1))
    if value <= 0:
        return None, text
    if value.is_integer():
        value = int(value)
    return value, text


def extract_brand(text: str, lexicon: Lexicon) -> tuple[str, str]:
    for brand, pattern in _brand_patterns(lexicon.brands):
        if pattern.search(text):
            return brand, pattern.sub(" ", text)
    return "", text


def extract_category(text: str, lexicon: Lexicon) -> str:
    """First category in table order with a keyword inside ``text``."""
    lowered = text.lower()
    for category, keywords in lexicon.categories:
        if any(keyword in lowered for keyword in keywords):
            return category
    return ""


def clean_name(text: str, lexicon: Lexicon) -> str:
    """Strip a leading article and collapse whitespace."""
    text = _WHITESPACE.sub(" ", text).strip()
    articles = tuple(lexicon.articles) + ("a", "an", "the")
    text = _article_pattern(articles).sub("", text, count=1)
    return _WHITESPACE.sub(" ", text).strip()


def extract_details(phrase: str, lexicon: Lexicon | str | None = "en") -> ExtractedItem:
    """Extract a structured item from a single item phrase.

    An empty ``name`` on the returned item means nothing item-like was left
    after extraction; callers treat that as "no item".
    """
    lexicon = get_lexicon(lexicon)
    working = (phrase or "").lower().strip()

    quantity, unit, working = extract_quantity(working, lexicon)
    organic, working = extract_organic(working, lexicon)
    price_ceiling, working = extract_price_ceiling(working, lexicon)
    brand, working = extract_brand(working, lexicon)
    category = extract_category(working, lexicon)

    return ExtractedItem(
        name=clean_name(working, lexicon),
        quantity=quantity,
        unit=unit,
        category=category,
        organic=organic,
        brand=brand,
        price_ceiling=price_ceiling,
    )


def extract_items(text: str, lexicon: Lexicon | str | None = "en") -> list[ExtractedItem]:
    """Normalize, segment and extract every item in an utterance.

    Items whose name came out empty are dropped. Returns an empty list when
    the utterance has no item content.
    """
    lexicon = get_lexicon(lexicon)
    normalized = normalize(text, lexicon)
    if not normalized:
        return []

    items: list[ExtractedItem] = []
    for phrase in segment(normalized, lexicon):
        item = extract_details(phrase, lexicon)
        if item.is_valid:
            items.append(item)
    return items


__all__ = [
    "clean_name",
    "extract_brand",
    "extract_category",
    "extract_details",
    "extract_items",
    "extract_organic",
    "extract_price_ceiling",
    "extract_quantity",
]
