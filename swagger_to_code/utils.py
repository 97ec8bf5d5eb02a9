"""
Utility functions for the Swagger to Code generator.
"""

import pprint
import re

# Letters that do not start a new word: lowercase ASCII and any non-ASCII letter
_LOWER = r"[^\W\dA-Z_]"

# Splits text into words on separators, case boundaries and digit runs.
# "HTTPServer" -> ["HTTP", "Server"], "getItemsId" -> ["get", "Items", "Id"]
_WORD_PATTERN = re.compile(rf"[A-Z]+(?!{_LOWER})|[A-Z]?{_LOWER}+|[0-9]+")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens, slashes, braces...) to spaces."""
    return re.sub(r"[\W_]+", " ", text)


def split_words(text) -> list[str]:
    """Split text into words, handling camelCase boundaries.

    Non-string values (enum literals such as integers) are converted first.
    """
    if text is None:
        return []
    return _WORD_PATTERN.findall(_normalize_separators(str(text)))


def camel_case(text) -> str:
    """Convert text to camelCase.

    Examples:
        "/items/{id}" -> "itemsId"
        "get/pets" -> "getPets"
        "user_ID" -> "userId"
    """
    words = split_words(text)
    if not words:
        return ""
    return words[0].lower() + "".join(word.capitalize() for word in words[1:])


def snake_case(text) -> str:
    """Convert text to snake_case.

    Examples:
        "get/items/{id}" -> "get_items_id"
        "petId" -> "pet_id"
    """
    return "_".join(word.lower() for word in split_words(text))


def upper_snake_case(text) -> str:
    """Convert text to UPPER_SNAKE_CASE ("in-progress" -> "IN_PROGRESS")."""
    return "_".join(word.upper() for word in split_words(text))


def upper_first(text: str) -> str:
    """Uppercase the first character, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def join_url_path(*parts: str | None) -> str:
    """Join URL path fragments with single slashes.

    Empty fragments are skipped; a leading slash on the first fragment is kept.

    Examples:
        join_url_path("/", "v1", "/pets") -> "/v1/pets"
        join_url_path("get", "/items/{id}") -> "get/items/{id}"
    """
    pieces = [part for part in parts if part]
    if not pieces:
        return ""
    joined = "/".join(pieces)
    return re.sub(r"/{2,}", "/", joined)


def describe(it) -> str:
    """Structural dump of a schema or IR node for error messages and reports."""
    return pprint.pformat(it, width=150, sort_dicts=False)
