"""Name normalization and tokenization."""

from __future__ import annotations

import re


_QUOTE_RE = re.compile(r"['\"`]")
_HYPHEN_RE = re.compile(r"-")
_MULTISPACE_RE = re.compile(r"\s+")


def normalize_name(value: str) -> str:
    """Canonicalize a raw name for comparison.

    - Lowercase
    - Drop apostrophes, double quotes and backticks ("O'Brien" -> "obrien")
    - Hyphens become spaces ("Al-Hilal" -> "al hilal")
    - Collapse whitespace and trim

    Idempotent: normalizing an already normalized name returns it unchanged.
    """

    lowered = value.lower()
    cleaned = _QUOTE_RE.sub("", lowered)
    spaced = _HYPHEN_RE.sub(" ", cleaned)
    return _MULTISPACE_RE.sub(" ", spaced).strip()


def tokenize_name(normalized: str) -> list[str]:
    """Split a normalized name into its ordered, non-empty tokens."""

    return [token for token in normalized.split(" ") if token]
