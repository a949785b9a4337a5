"""Rule-based sentence boundary disambiguation."""

__version__ = "0.1.0"

from .engines import (
    ReservedCharacterError,
    RuleSegmenter,
    SegmentationEngine,
    get_grammar,
    segment,
)
from .data import load_catalog
from .utils import add_line_break, clean_text

__all__ = [
    "segment",
    "RuleSegmenter",
    "SegmentationEngine",
    "ReservedCharacterError",
    "clean_text",
    "add_line_break",
    "load_catalog",
    "get_grammar",
]
