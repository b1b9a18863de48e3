"""Utterance normalization.

Strips the words that carry no item content out of a transcript so the
segmenter only sees item phrases. The steps run in a fixed order:

    1. filler phrases ("could you add", "i would like")
    2. action words ("add", "buy", "remove")
    3. stop words (pronouns, articles, auxiliaries, question words)
    4. punctuation and whitespace

Later steps assume earlier ones already ran: "i would like" has to go as a
phrase before "i" and "would" are stripped on their own.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Callable

from shopvoice.voice.lexicon import SYMBOL_SEPARATORS, Lexicon, get_lexicon

# Re-running the steps can expose a phrase split by punctuation ("throw.away")
MAX_PASSES = 3

_APOSTROPHES = str.maketrans({"’": "'", "‘": "'", "`": "'"})

# Keep separators for the segmenter and currency symbols for price ceilings
_PUNCTUATION = re.compile(
    r"[^\w\s$€£.%s]" % re.escape("".join(SYMBOL_SEPARATORS))
)
# A dot survives only inside a number ("4.99")
_STRAY_DOT = re.compile(r"(?<!\d)\.|\.(?!\d)")
_WHITESPACE = re.compile(r"\s+")
_EDGE_CHARS = " " + "".join(SYMBOL_SEPARATORS)


@lru_cache(maxsize=None)
def compile_words(words: tuple[str, ...]) -> re.Pattern | None:
    """Compile a whole-word alternation, longest entries first.

    Entries ending in an apostrophe ("l'", "j'") match as prefixes.
    Returns None for an empty word list.
    """
    if not words:
        return None
    parts = []
    for word in sorted(set(words), key=len, reverse=True):
        part = re.escape(word)
        if word[0].isalnum():
            part = r"(?<!\w)" + part
        if word[-1].isalnum():
            part += r"(?!\w)"
        parts.append(part)
    return re.compile("|".join(parts), re.IGNORECASE)


def _remove(text: str, words: tuple[str, ...]) -> str:
    pattern = compile_words(words)
    if pattern is None:
        return text
    return pattern.sub(" ", text)


def remove_filler_phrases(text: str, lexicon: Lexicon) -> str:
    return _remove(text, lexicon.filler_phrases)


def remove_action_words(text: str, lexicon: Lexicon) -> str:
    return _remove(text, lexicon.action_words)


def remove_stop_words(text: str, lexicon: Lexicon) -> str:
    return _remove(text, lexicon.stop_words)


def strip_punctuation(text: str, lexicon: Lexicon | None = None) -> str:
    """Turn punctuation into whitespace, then collapse and trim.

    Separators left dangling at either end ("milk,") are trimmed too.
    """
    text = _PUNCTUATION.sub(" ", text)
    text = _STRAY_DOT.sub(" ", text)
    return _WHITESPACE.sub(" ", text).strip(_EDGE_CHARS)


NormalizationStep = Callable[[str, Lexicon], str]

NORMALIZATION_STEPS: tuple[NormalizationStep, ...] = (
    remove_filler_phrases,
    remove_action_words,
    remove_stop_words,
    strip_punctuation,
)


def normalize(text: str, lexicon: Lexicon | str | None = "en") -> str:
    """Reduce a transcript to its item phrases.

    An empty return value means the utterance had no item content.
    """
    lexicon = get_lexicon(lexicon)
    text = (text or "").lower().translate(_APOSTROPHES)

    for _ in range(MAX_PASSES):
        result = text
        for step in NORMALIZATION_STEPS:
            result = step(result, lexicon)
        if result == text:
            break
        text = result

    return text


__all__ = [
    "NORMALIZATION_STEPS",
    "compile_words",
    "normalize",
    "remove_action_words",
    "remove_filler_phrases",
    "remove_stop_words",
    "strip_punctuation",
]
