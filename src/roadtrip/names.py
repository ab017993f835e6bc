"""Country-name normalization shared by every dataset parser."""

from __future__ import annotations

import re

_FIRST_DIGIT = re.compile(r"\d")


def normalize_name(raw: str) -> str:
    """Drop everything from the first '(' onwards and trim whitespace.

    ``normalize_name("Congo (Brazzaville) ") == "Congo"``. Idempotent.
    """
    return raw.split("(", 1)[0].strip()


def neighbor_name(entry: str) -> str:
    """Canonical neighbor name from a borders entry such as ``"China 91 km"``."""
    match = _FIRST_DIGIT.search(entry)
    head = entry[: match.start()] if match else entry
    return normalize_name(head)
