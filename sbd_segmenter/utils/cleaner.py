"""Text cleaning applied before segmentation."""

import logging
import re
from typing import Optional

from ..data.abbreviations import AbbreviationCatalog, load_catalog

logger = logging.getLogger(__name__)


class TextCleaner:
    """Normalize line breaks, markup and spacing artifacts in raw text.

    Line breaks that end a paragraph become the record separator (\\r) that
    the segmenter splits on; line breaks inside a sentence are removed.
    """

    # Line breaks
    NEWLINE_IN_MIDDLE_OF_SENTENCE = re.compile(r"(?<= )\n(?=[a-z(])")
    NEWLINE_IN_MIDDLE_OF_WORD = re.compile(r"\n(?=[a-zA-Z]{1,2}\n)")
    DOUBLE_NEWLINE_WITH_SPACE = re.compile(r"\n \n")
    DOUBLE_NEWLINE = re.compile(r"\n\n")
    NEWLINE_FOLLOWED_BY_PERIOD = re.compile(r"\n(?=\.(?:\s|\n))")
    NEWLINE = re.compile(r"\n")

    # PDF line breaks
    NEWLINE_FOLLOWED_BY_BULLET = re.compile(r"\n(?=•)")
    PDF_NEWLINE_IN_MIDDLE_OF_SENTENCE = re.compile(r"(?<=[^\n]\s)\n(?=\S)")
    PDF_NEWLINE_BEFORE_LOWERCASE = re.compile(r"\n(?=[a-z])")

    # Escaped line breaks written out as text
    ESCAPED_NEWLINE = re.compile(r"\\n")
    ESCAPED_CARRIAGE_RETURN = re.compile(r"\\r")
    TYPO_ESCAPED_NEWLINE = re.compile(r"\\ n")
    TYPO_ESCAPED_CARRIAGE_RETURN = re.compile(r"\\ r")

    # Markup
    HTML_TAG = re.compile(r"</?[A-Za-z][\w-]*(?:\s+[^<>]*)?/?>")
    ESCAPED_HTML_TAG = re.compile(r"&lt;/?[^gt;]*gt;")
    INLINE_FORMATTING = re.compile(r"\{b\^&gt;\d*&lt;b\^\}|\{b\^>\d*<b\^\}")

    # Quotes, leaders and runs
    DOUBLE_BACKTICKS = re.compile(r"``")
    DOUBLE_APOSTROPHES = re.compile(r"''")
    TABLE_OF_CONTENTS = re.compile(r"\.{4,}\s*\d+-*\d*")
    CONSECUTIVE_PERIODS = re.compile(r"\.{5,}")
    CONSECUTIVE_FORWARD_SLASHES = re.compile(r"/{3}")

    # Sentences glued together without a space
    NO_SPACE_BETWEEN_SENTENCES = re.compile(r"(?<=[a-z])\.(?=[A-Z])")
    NO_SPACE_BETWEEN_SENTENCES_DIGIT = re.compile(r"(?<=\d)\.(?=[A-Z])")
    URL_EMAIL_KEYWORDS = ("@", "http", ".com", "net", "www", "//")

    def __init__(
        self,
        language: Optional[str] = "en",
        doc_type: Optional[str] = None,
        catalog: Optional[AbbreviationCatalog] = None,
    ):
        """Initialize cleaner.

        Args:
            language: ISO 639-1 code
            doc_type: Document type hint; "pdf" keeps hard-wrapped lines together
            catalog: Abbreviation catalog (defaults to the language's catalog)
        """
        self.language = (language or "en").lower()
        self.doc_type = doc_type
        self.catalog = catalog if catalog is not None else load_catalog(self.language)

    def clean(self, text: str) -> str:
        """Clean text for segmentation.

        Args:
            text: Raw input text

        Returns:
            Cleaned text with \\r between paragraphs
        """
        if not text:
            return text

        text = self.remove_inner_newlines(text)
        text = self.DOUBLE_NEWLINE_WITH_SPACE.sub("\r", text)
        text = self.DOUBLE_NEWLINE.sub("\r", text)
        text = self.replace_newlines(text)
        text = self.replace_escaped_newlines(text)
        text = self.strip_markup(text)
        text = self.DOUBLE_BACKTICKS.sub('"', text)
        text = self.DOUBLE_APOSTROPHES.sub('"', text)
        text = self.TABLE_OF_CONTENTS.sub("\r", text)
        text = self.split_glued_sentences(text)
        text = self.CONSECUTIVE_PERIODS.sub(" ", text)
        text = self.CONSECUTIVE_FORWARD_SLASHES.sub("", text)
        return text

    def remove_inner_newlines(self, text: str) -> str:
        text = self.NEWLINE_IN_MIDDLE_OF_SENTENCE.sub("", text)
        return self.NEWLINE_IN_MIDDLE_OF_WORD.sub("", text)

    def replace_newlines(self, text: str) -> str:
        """Turn remaining line breaks into record separators.

        PDF text is hard-wrapped, so its line breaks are mostly joined instead.
        """
        if self.doc_type == "pdf":
            text = self.NEWLINE_FOLLOWED_BY_BULLET.sub("\r", text)
            text = self.PDF_NEWLINE_IN_MIDDLE_OF_SENTENCE.sub("", text)
            return self.PDF_NEWLINE_BEFORE_LOWERCASE.sub(" ", text)
        text = self.NEWLINE_FOLLOWED_BY_PERIOD.sub("", text)
        return self.NEWLINE.sub("\r", text)

    def replace_escaped_newlines(self, text: str) -> str:
        text = self.ESCAPED_NEWLINE.sub("\n", text)
        text = self.ESCAPED_CARRIAGE_RETURN.sub("\r", text)
        text = self.TYPO_ESCAPED_NEWLINE.sub("\n", text)
        return self.TYPO_ESCAPED_CARRIAGE_RETURN.sub("\r", text)

    def strip_markup(self, text: str) -> str:
        text = self.HTML_TAG.sub("", text)
        text = self.ESCAPED_HTML_TAG.sub("", text)
        return self.INLINE_FORMATTING.sub("", text)

    def split_glued_sentences(self, text: str) -> str:
        """Insert the missing space in "end.Next" and "2010.Next".

        Words that look like URLs or e-mail addresses, or whose dotted part
        is a known abbreviation, are left alone.
        """
        for word in set(text.split()):
            if any(keyword in word for keyword in self.URL_EMAIL_KEYWORDS):
                continue
            fixed = word
            for pattern in (self.NO_SPACE_BETWEEN_SENTENCES, self.NO_SPACE_BETWEEN_SENTENCES_DIGIT):
                match = pattern.search(fixed)
                if match is None:
                    continue
                head = re.split(r"[^\w.]", fixed[: match.start()])[-1]
                if head.lower() in self.catalog:
                    continue
                fixed = pattern.sub(". ", fixed)
            if fixed != word:
                logger.debug(f"Splitting glued sentences in {word!r}")
                text = text.replace(word, fixed)
        return text


def clean_text(
    text: str, language: Optional[str] = "en", doc_type: Optional[str] = None
) -> str:
    """
    Convenience function for cleaning text before segmentation.

    Args:
        text: Raw input text
        language: ISO 639-1 code
        doc_type: Document type hint (e.g. "pdf")

    Returns:
        Cleaned text
    """
    return TextCleaner(language, doc_type).clean(text)
