"""
Header and type-name normalization.

Responsibilities:
- Turn a raw CSV header into a snake_case field identifier
- Escape identifiers that collide with reserved words
- Derive a PascalCase model name from a file stem or user input
"""

import re
import string
from typing import List

from csv2pydantic.standards.reserved_keywords import is_reserved_keyword

_PUNCTUATION = re.compile("[" + re.escape(string.punctuation) + "]")
_SEPARATORS = re.compile(r"[_\s]+")


def _is_boundary(chunk: str, i: int) -> bool:
    """
    True when a word starts at chunk[i].

    Boundaries: lower->Upper, letter<->digit, and the last capital of an
    acronym followed by a lowercase letter (HTTPServer -> HTTP|Server).
    """
    prev, cur = chunk[i - 1], chunk[i]

    if prev.islower() and cur.isupper():
        return True
    if prev.isdigit() and cur.isalpha():
        return True
    if prev.isalpha() and cur.isdigit():
        return True
    if prev.isupper() and cur.isupper():
        return i + 1 < len(chunk) and chunk[i + 1].islower()
    return False


def split_words(value: str) -> List[str]:
    words: List[str] = []
    for chunk in _SEPARATORS.split(value):
        if not chunk:
            continue
        start = 0
        for i in range(1, len(chunk)):
            if _is_boundary(chunk, i):
                words.append(chunk[start:i])
                start = i
        words.append(chunk[start:])
    return words


def to_snake_case(value: str) -> str:
    return "_".join(word.lower() for word in split_words(value))


def to_pascal_case(value: str) -> str:
    """
    Model name from free text: "daily-scores_2023.v1" -> "DailyScores2023V1"
    """
    value = _PUNCTUATION.sub("_", value)
    return "".join(word[:1].upper() + word[1:].lower() for word in split_words(value))


def sanitize_identifier(raw: str) -> str:
    """
    Build a field identifier from a raw header.

    Rules:
    - Replace ASCII punctuation with underscores
    - Drop leading underscores
    - Convert to snake_case
    - Append "_" when the result is a reserved word (class -> class_)

    Distinct headers may map to the same identifier ("A-B", "A_B");
    no disambiguation is attempted.
    """
    name = _PUNCTUATION.sub("_", raw).lstrip("_")
    name = to_snake_case(name)

    if is_reserved_keyword(name):
        name = f"{name}_"

    return name
