"""
Name mangling helpers for JSON Schema to SDL conversion.
"""

import re

# A run of separators followed by a lowercase letter, e.g. "_n" in "first_name"
_CAMEL_PATTERN = re.compile(r"[-_.\s]+[a-z]")

_SEPARATOR_PATTERN = re.compile(r"[-.\s]")

# Uppercase letter sitting on a lower->upper word boundary
_WORD_BOUNDARY_PATTERN = re.compile(r"(?<=[a-z0-9])([A-Z])")

# Last uppercase letter followed only by non-uppercase characters
_LAST_WORD_PATTERN = re.compile(r"[A-Z](?=[^A-Z]*$)")


def camel_case(text: str) -> str:
    """Collapse separators followed by a lowercase letter into that letter uppercased.

    Examples:
        "first_name" -> "firstName"
        "Pet_status" -> "PetStatus"
        "x-rate--limit" -> "xRateLimit"
        "Pet" -> "Pet"

    The first character is left untouched, so definition names keep their casing.
    """
    return _CAMEL_PATTERN.sub(lambda m: m.group(0)[-1].upper(), text)


def snake_case(text: str) -> str:
    """Convert text to UPPER_SNAKE_CASE, suitable for SDL enum members.

    Examples:
        "available" -> "AVAILABLE"
        "inStock" -> "IN_STOCK"
        "out-of-stock" -> "OUT_OF_STOCK"
        "IN_STOCK" -> "IN_STOCK"
    """
    text = _SEPARATOR_PATTERN.sub("_", text)
    text = _WORD_BOUNDARY_PATTERN.sub(r"_\1", text)
    return text.upper()


def last_case_word(text: str) -> str:
    """Return the trailing case-boundary word ("PetStatusCode" -> "Code").

    Text without any uppercase letter is returned whole.
    """
    match = _LAST_WORD_PATTERN.search(text)
    if match is None:
        return text
    return text[match.start() :]
