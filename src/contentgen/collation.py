from __future__ import annotations

import unicodedata
from functools import lru_cache
from typing import Tuple

from pyuca import Collator

# Polish alphabet order; letters with diacritics are separate letters, not accents
_POLISH_ALPHABET = "aąbcćdeęfghijklłmnńoópqrsśtuvwxyzźż"
_POLISH_RANK = {ch: i for i, ch in enumerate(_POLISH_ALPHABET)}

# Primary classes, compared before the character itself
_PUNCT, _DIGIT, _LETTER, _OTHER_LETTER = 0, 1, 2, 3


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Loads the DUCET table once per process
    return Collator()


def _primary(ch: str) -> Tuple[int, int]:
    lower = ch.lower()
    if lower in _POLISH_RANK:
        return _LETTER, _POLISH_RANK[lower]

    base = unicodedata.normalize("NFD", lower)[:1]
    if base in _POLISH_RANK:
        # é -> e, ü -> u: non-Polish accents only differ at the tie-break level
        return _LETTER, _POLISH_RANK[base]

    if ch.isdigit():
        return _DIGIT, unicodedata.digit(ch, 0)
    if ch.isalpha():
        return _OTHER_LETTER, ord(lower)
    return _PUNCT, ord(ch)


def polish_sort_key(text: str) -> tuple:
    """
    Sort key approximating the "pl" locale collation.

    Primary level follows the Polish alphabet case-insensitively
    ("Łódź" sorts after "Lublin", "Ćma" after "Cukier"); equal primaries
    fall back to the Unicode Collation Algorithm key, which orders
    lower case before upper case.
    """
    normalized = unicodedata.normalize("NFC", text)
    primary = tuple(_primary(ch) for ch in normalized)
    return primary, tuple(_collator().sort_key(normalized))


def polish_compare(a: str, b: str) -> int:
    ka, kb = polish_sort_key(a), polish_sort_key(b)
    return (ka > kb) - (ka < kb)
