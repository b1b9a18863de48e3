"""Tests for utterance normalization.

Verifies that filler phrases, action words, stop words and punctuation are
stripped while item content, separators and prices survive.
"""

import pytest

from shopvoice.voice.lexicon import ENGLISH
from shopvoice.voice.parser.normalizer import (
    compile_words,
    normalize,
    remove_filler_phrases,
    strip_punctuation,
)


class TestNormalizeEnglish:
    """English utterances."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Add 2 bottles of water", "2 bottles water"),
            ("Could you add milk, please?", "milk"),
            ("I would like some bread please", "bread"),
            ("Can you add eggs to my shopping list", "eggs"),
            ("find organic apples under $5", "organic apples under $5"),
            ("Add organic apples under $4.99.", "organic apples under $4.99"),
            ("I need apples, bananas, and oranges", "apples, bananas, and oranges"),
        ],
    )
    def test_strips_non_item_words(self, text, expected):
        assert normalize(text) == expected

    def test_placeholder_only_is_empty(self):
        assert normalize("remove that item") == ""

    def test_curly_apostrophe(self):
        assert normalize("What’s on my list") == ""

    def test_conjunctions_survive(self):
        assert normalize("add milk and bread") == "milk and bread"

    def test_empty_input(self):
        assert normalize("") == ""
        assert normalize(None) == ""

    @pytest.mark.parametrize(
        "text",
        [
            "Could you add milk, please?",
            "add 2 bottles of water and some organic apples under $5",
            "I don't need the cheese anymore",
        ],
    )
    def test_idempotent(self, text):
        once = normalize(text)
        assert normalize(once) == once


class TestNormalizeOtherLanguages:
    """Spanish, French and German lexicons."""

    def test_spanish(self):
        assert normalize("agregar leche y pan", "es") == "leche y pan"

    def test_spanish_region_tag(self):
        assert normalize("agregar leche y pan", "es-ES") == "leche y pan"

    def test_french(self):
        assert normalize("ajouter du lait et du pain", "fr") == "lait et pain"

    def test_french_elision(self):
        assert normalize("J'ai besoin de lait", "fr") == "lait"

    def test_german(self):
        assert normalize("milch und brot hinzufügen", "de") == "milch und brot"

    def test_unknown_language_only_strips_punctuation(self):
        assert normalize("Add milk!", "ja") == "add milk"

    def test_custom_lexicon(self, pirate_lexicon):
        assert normalize("Fetch me grog wit biscuits, ye", pirate_lexicon) == "grog wit biscuits"


class TestSteps:
    """Individual normalization steps."""

    def test_filler_longest_first(self):
        result = remove_filler_phrases("i would like milk", ENGLISH)
        assert result.split() == ["milk"]

    def test_strip_punctuation(self):
        assert strip_punctuation("milk!!  bread?") == "milk bread"

    def test_strip_punctuation_trims_dangling_separators(self):
        assert strip_punctuation(", milk ,") == "milk"

    def test_strip_punctuation_keeps_prices(self):
        assert strip_punctuation("cheese under €3.50.") == "cheese under €3.50"

    def test_compile_words_empty(self):
        assert compile_words(()) is None

    def test_compile_words_whole_word(self):
        pattern = compile_words(("and",))
        assert pattern.search("sandwich") is None
        assert pattern.search("milk and bread") is not None

    def test_compile_words_elision_prefix(self):
        pattern = compile_words(("l'",))
        assert pattern.sub("", "l'eau") == "eau"
