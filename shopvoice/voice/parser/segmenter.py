"""Split a normalized utterance into one phrase per item.

"milk, bread, eggs" and "rice and beans and tomatoes" both give three
phrases. Every separator is applied to every fragment left by the previous
one, so mixed forms ("milk, bread and eggs") split fully too.
"""

from __future__ import annotations

from shopvoice.voice.lexicon import Lexicon, get_lexicon
from shopvoice.voice.parser.normalizer import compile_words


def _split(fragment: str, separator: str) -> list[str]:
    if separator[0].isalnum():
        pattern = compile_words((separator,))
        return pattern.split(fragment)
    return fragment.split(separator)


def segment(text: str, lexicon: Lexicon | str | None = "en") -> list[str]:
    """Return the candidate item phrases of ``text``, empties dropped."""
    lexicon = get_lexicon(lexicon)
    fragments = [text or ""]

    for separator in lexicon.separators:
        fragments = [part for fragment in fragments for part in _split(fragment, separator)]

    return [" ".join(part.split()) for part in fragments if part.strip()]


__all__ = ["segment"]
