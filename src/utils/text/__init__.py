"""Text utilities."""

from .cleaning import clean_markup_text, strip_markup_tags, unescape_extra_entities

__all__ = [
    "clean_markup_text",
    "strip_markup_tags",
    "unescape_extra_entities",
]
