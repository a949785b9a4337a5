"""Segmentation engines."""

from .base import ReservedCharacterError, SegmentationEngine
from .grammar import BoundaryGrammar, get_grammar
from .masking import MaskingEngine
from .rule_engine import RuleSegmenter, segment

__all__ = [
    "SegmentationEngine",
    "ReservedCharacterError",
    "BoundaryGrammar",
    "get_grammar",
    "MaskingEngine",
    "RuleSegmenter",
    "segment",
]
