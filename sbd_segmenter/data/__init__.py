"""Bundled language data."""

from .abbreviations import (
    AbbreviationCatalog,
    AbbreviationCategory,
    AbbreviationEntry,
    all_abbreviations,
    load_catalog,
    number_abbreviations,
    prefix_abbreviations,
)

__all__ = [
    "AbbreviationCatalog",
    "AbbreviationCategory",
    "AbbreviationEntry",
    "all_abbreviations",
    "load_catalog",
    "number_abbreviations",
    "prefix_abbreviations",
]
