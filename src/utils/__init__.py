"""Utilities package - Flat structure (no nested directories)"""

# URL utilities
from .url_utils import SITE_ORIGIN, normalize_href

# Text utilities
from .text import clean_markup_text, strip_markup_tags, unescape_extra_entities

__all__ = [
    # url
    "SITE_ORIGIN",
    "normalize_href",
    # text
    "clean_markup_text",
    "strip_markup_tags",
    "unescape_extra_entities",
]
