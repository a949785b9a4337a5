"""Utility functions."""

from .cleaner import TextCleaner, clean_text
from .lists import add_line_break

__all__ = ["TextCleaner", "clean_text", "add_line_break"]
