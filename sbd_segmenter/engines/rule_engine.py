"""Rule-based sentence boundary engine."""

import logging
import re
from typing import Optional

from ..data.abbreviations import load_catalog
from ..models import Document
from ..utils.cleaner import TextCleaner
from ..utils.lists import add_line_break
from .base import (
    AMBIGUOUS_PERIOD,
    DOUBLE_EXCLAMATION,
    DOUBLE_QUESTION,
    ELLIPSIS_3_SPACED,
    ELLIPSIS_4_SPACED,
    ELLIPSIS_COLLAPSED,
    ELLIPSIS_PREFIX,
    EMAIL_PERIOD,
    END_OF_LINE,
    EXCLAMATION_QUESTION,
    MASKED_ARABIC_COMMA,
    MASKED_COLON,
    MASKED_EXCLAMATION,
    MASKED_QUESTION,
    NEWLINE,
    QUESTION_EXCLAMATION,
    RECORD_SEPARATOR,
    SegmentationEngine,
    check_reserved,
    restore_ellipses,
    restore_symbols,
)
from .grammar import get_grammar
from .masking import MaskingEngine
from .protection import protect_spans

logger = logging.getLogger(__name__)


# Ellipses, most specific first
ELLIPSIS_3_SPACED_PATTERN = re.compile(r"(?:\s\.){3}\s")
ELLIPSIS_4_SPACED_PATTERN = re.compile(r"(?<=[a-z])(?:\.\s){3}\.$")
ELLIPSIS_4_CONSECUTIVE_PATTERN = re.compile(r"(?<=\S)\.{3}(?=\.\s[A-Z])")
ELLIPSIS_3_CONSECUTIVE_PATTERN = re.compile(r"\.\.\.(?=\s+[A-Z])")
ELLIPSIS_OTHER_PATTERN = re.compile(r"\.\.\.")

EMAIL_PERIOD_PATTERN = re.compile(r"(?<=\w)\.(?=\w)", re.ASCII)

DOUBLE_PUNCTUATION = (
    ("?!", QUESTION_EXCLAMATION),
    ("!?", EXCLAMATION_QUESTION),
    ("??", DOUBLE_QUESTION),
    ("!!", DOUBLE_EXCLAMATION),
)

QUESTION_MARK_IN_QUOTATION = re.compile(r"\?(?=['\"])")
EXCLAMATION_POINT_IN_QUOTATION = re.compile(r"!(?=['\"])")
EXCLAMATION_POINT_BEFORE_COMMA_MID_SENTENCE = re.compile(r"!(?=,\s[a-z])")
EXCLAMATION_POINT_MID_SENTENCE = re.compile(r"!(?=\s[a-z])")

DIGIT_COLON = re.compile(r"(?<=\d):(?=\d)")
ARABIC_LIST_COMMA = re.compile(r"،(?=\s\S+،)")

REPEATED_UNDERSCORES = re.compile(r"_{3,}")
EXTRA_WHITESPACE = re.compile(r"\s{3,}")
QUOTATION_AT_END_OF_SENTENCE = re.compile(r"[!?.][\"'”“]\s[A-Z]")
SPLIT_SPACE_QUOTATION_AT_END_OF_SENTENCE = re.compile(r"(?<=[!?.][\"'”“])\s(?=[A-Z])")


def mask_ellipses(line: str) -> str:
    """Mask ellipsis variants, each with its own sentinel."""
    line = ELLIPSIS_3_SPACED_PATTERN.sub(ELLIPSIS_3_SPACED, line)
    line = ELLIPSIS_4_SPACED_PATTERN.sub(ELLIPSIS_4_SPACED, line)
    line = ELLIPSIS_4_CONSECUTIVE_PATTERN.sub(ELLIPSIS_COLLAPSED, line)
    # The trailing real period stays a boundary before a capitalized word
    line = ELLIPSIS_3_CONSECUTIVE_PATTERN.sub(ELLIPSIS_PREFIX + ".", line)
    return ELLIPSIS_OTHER_PATTERN.sub(ELLIPSIS_COLLAPSED, line)


def mask_email_periods(line: str) -> str:
    return EMAIL_PERIOD_PATTERN.sub(EMAIL_PERIOD, line)


def fold_double_punctuation(line: str) -> str:
    """Fold ?!, !?, ?? and !! into single boundary glyphs."""
    for cluster, sentinel in DOUBLE_PUNCTUATION:
        line = line.replace(cluster, sentinel)
    return line


def mask_interjections(line: str) -> str:
    """Mask ?/! before a closing quote and mid-clause exclamations."""
    line = QUESTION_MARK_IN_QUOTATION.sub(MASKED_QUESTION, line)
    line = EXCLAMATION_POINT_IN_QUOTATION.sub(MASKED_EXCLAMATION, line)
    line = EXCLAMATION_POINT_BEFORE_COMMA_MID_SENTENCE.sub(MASKED_EXCLAMATION, line)
    return EXCLAMATION_POINT_MID_SENTENCE.sub(MASKED_EXCLAMATION, line)


def mask_list_separators(line: str) -> str:
    """Mask time colons and mid-list Arabic commas."""
    line = DIGIT_COLON.sub(MASKED_COLON, line)
    return ARABIC_LIST_COMMA.sub(MASKED_ARABIC_COMMA, line)


class RuleSegmenter(SegmentationEngine):
    """Multi-pass masking sentence segmenter."""

    def __init__(
        self,
        language: Optional[str] = "en",
        doc_type: Optional[str] = None,
        clean: bool = True,
        check_reserved: bool = True,
    ):
        """Initialize rule segmenter.

        Args:
            language: ISO 639-1 code; unknown codes use the generic grammar
            doc_type: Optional document type hint for the cleaner (e.g. "pdf")
            clean: Whether to clean the text before segmenting
            check_reserved: Reject input containing sentinel characters
        """
        self.language = (language or "en").lower()
        self.doc_type = doc_type
        self.clean = clean
        self.check_reserved = check_reserved

        self.grammar = get_grammar(self.language)
        self.catalog = load_catalog(self.language)
        self.masking = MaskingEngine(self.language, self.catalog)
        self.cleaner = TextCleaner(self.language, doc_type, catalog=self.catalog)

    def segment(self, text: Optional[str]) -> list[str]:
        """Segment text into sentences.

        Args:
            text: Input text

        Returns:
            Ordered list of trimmed, sentinel-free sentences

        Raises:
            ReservedCharacterError: If text contains a sentinel character
        """
        if not text:
            return []
        if self.check_reserved:
            check_reserved(text)

        document = Document(text=text, language=self.language, doc_type=self.doc_type)
        if self.clean:
            document = document.with_text(self.cleaner.clean(document.text))
        document = document.with_text(add_line_break(document.text))
        document = document.with_text(self.masking.run(document.text))
        sentences = self.split_lines(document.text)
        logger.debug(f"Found {len(sentences)} sentences in {len(text)} characters")
        return sentences

    def split_lines(self, text: str) -> list[str]:
        """Analyze every record of masked text and reassemble sentences.

        Args:
            text: Masked document text

        Returns:
            Final sentences
        """
        segments = []
        for line in text.split(RECORD_SEPARATOR):
            if not line:
                continue
            segments.extend(self.analyze_line(line))

        sentences = []
        for segment in segments:
            if not REPEATED_UNDERSCORES.sub("", segment) or len(segment) < 2:
                continue
            segment = restore_ellipses(segment)
            segment = EXTRA_WHITESPACE.sub(" ", segment)
            if QUOTATION_AT_END_OF_SENTENCE.search(segment):
                sentences.extend(SPLIT_SPACE_QUOTATION_AT_END_OF_SENTENCE.split(segment))
            else:
                sentences.append(segment)
        return [s.strip() for s in sentences if s.strip()]

    def analyze_line(self, line: str) -> list[str]:
        """Resolve the boundaries of one line.

        Args:
            line: One record of globally masked text

        Returns:
            Raw sentence candidates with per-line sentinels restored
        """
        line = line.replace("\n", NEWLINE)
        line = mask_ellipses(line)
        line = mask_email_periods(line)

        grammar = self.grammar
        if not grammar.has_punctuation(line):
            return [line.replace(NEWLINE, "\n").replace(AMBIGUOUS_PERIOD, ".")]
        if grammar.appends_end_marker and not grammar.ends_with_punctuation(line):
            line += END_OF_LINE

        line = protect_spans(line, self.language)
        line = fold_double_punctuation(line)
        if grammar.masks_list_separators:
            line = mask_list_separators(line)
        elif grammar.generic:
            line = mask_interjections(line)
        return [restore_symbols(candidate) for candidate in grammar.scan(line)]


def segment(
    text: Optional[str],
    language: Optional[str] = "en",
    doc_type: Optional[str] = None,
    clean: bool = True,
) -> list[str]:
    """Split text into sentences.

    Example:
        >>> segment("Hello world. My name is Jonas.")
        ['Hello world.', 'My name is Jonas.']

    Args:
        text: Input text (None or empty yields [])
        language: ISO 639-1 code, "en" by default
        doc_type: Optional document type hint (e.g. "pdf")
        clean: Clean the text before segmenting

    Returns:
        Ordered list of sentences
    """
    return RuleSegmenter(language=language, doc_type=doc_type, clean=clean).segment(text)
