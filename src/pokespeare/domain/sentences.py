"""Sentence segmentation for flavor text."""

from __future__ import annotations

import re

_CONTROL_CHARS = re.compile(r"[\f\n\r]")
_SENTENCE_BOUNDARY = re.compile(r"(?<=\.)\s+")


def clean_description(raw_text: str) -> str:
    """Replace every form feed, line feed and carriage return with a single space."""

    return _CONTROL_CHARS.sub(" ", raw_text)


def split_sentences(raw_text: str) -> tuple[str, ...]:
    """Split text into trimmed sentences, keeping each period with its sentence.

    >>> split_sentences("A. B. C.")
    ('A.', 'B.', 'C.')
    """

    cleaned = clean_description(raw_text)
    units = (unit.strip() for unit in _SENTENCE_BOUNDARY.split(cleaned))
    return tuple(unit for unit in units if unit)
