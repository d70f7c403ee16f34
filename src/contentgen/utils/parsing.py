from __future__ import annotations

import math
import re
from typing import Iterator, Optional, Tuple

from contentgen.domain.models import StatValue, StatsMap
from contentgen.domain.schema import META_DESCRIPTION

# A line that is exactly "---", with a newline on both sides
_DELIMITER_RE = re.compile(r"\r?\n---\r?\n")
_LINE_BREAK_RE = re.compile(r"\r?\n")
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)
# Integral floats below this are written as ints ("1e3" -> 1000), like JSON from JS
_MAX_SAFE_INTEGER = 2**53


def iter_key_values(block: str) -> Iterator[Tuple[str, str]]:
    """
    Yield (key, value) for every non-blank `key: value` line.

    Only the first ':' splits; both sides are trimmed. Lines without ':' are skipped.
    """
    for line in _LINE_BREAK_RE.split(block):
        if not line.strip():
            continue
        key, sep, value = line.partition(":")
        if not sep:
            continue
        yield key.strip(), value.strip()


def split_meta_text(text: str) -> Tuple[str, str]:
    """
    Split a metadata document into (header, body).

    The first delimiter line wins; later '---' lines stay inside the body.
    Without a delimiter the whole text is header and the body is empty.
    """
    parts = _DELIMITER_RE.split(text, maxsplit=1)
    if len(parts) == 1:
        return text, ""
    header, body = parts
    return header, body.strip()


def parse_meta_text(text: str) -> dict[str, str]:
    """
    Parse a meta.txt document.

    Args:
        text (str): header lines (`Key: value`), optionally followed by a `---` line and a free-text body.

    Returns:
        (dict[str, str]): header keys mapped to trimmed values, plus the trimmed body under "description".
    """
    header, body = split_meta_text(text)
    meta = dict(iter_key_values(header))
    meta[META_DESCRIPTION] = body
    return meta


def parse_tags(value: Optional[str]) -> list[str]:
    """
    "a, b ,, c" -> ["a", "b", "c"]
    """
    if not value:
        return []
    parts = [p.strip() for p in value.split(",")]
    return [p for p in parts if p]


def coerce_number(value: str) -> StatValue:
    """
    Return value as a number when it is a finite ASCII decimal literal, else unchanged.

    Integral results ("42", "3.0", "1e3") come back as int, others as float.
    """
    if not _DECIMAL_RE.fullmatch(value):
        return value
    if _INTEGER_RE.fullmatch(value):
        return int(value)
    number = float(value)
    if not math.isfinite(number):
        # e.g. "1e999"
        return value
    if number.is_integer() and abs(number) < _MAX_SAFE_INTEGER:
        return int(number)
    return number


def parse_stats(text: str) -> StatsMap:
    return {key: coerce_number(value) for key, value in iter_key_values(text)}
