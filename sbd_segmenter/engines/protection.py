"""Shield punctuation inside quoted and bracketed spans from boundary matching."""

import re
from typing import NamedTuple

from .base import SPAN_PUNCTUATION_MASK


class ProtectedSpan(NamedTuple):
    """A quoted or bracketed region of a line."""

    start: int
    end: int
    text: str


DOUBLE_QUOTES = re.compile(r'"(?:[^"\\]|\\.)*"')
GERMAN_LOW_QUOTES = re.compile(r"„(?:[^“\\]|\\.)*“")
GERMAN_COMMA_QUOTES = re.compile(r",,(?:[^“\\]|\\.)*“")
SINGLE_QUOTES = re.compile(r"(?<=\s)'(?:[^']|'[a-zA-Z])*'")
JAPANESE_QUOTES = re.compile(r"「(?:[^「」\\]|\\.)*」")
PARENTHESES = re.compile(r"\((?:[^()\\]|\\.)*\)")
FULLWIDTH_PARENTHESES = re.compile(r"（(?:[^（）\\]|\\.)*）")
GUILLEMETS = re.compile(r"«(?:[^»\\]|\\.)*»")
CLOSING_CURLY_QUOTES = re.compile(r"”(?:[^”\\]|\\.)*”")
CURLY_QUOTES = re.compile(r"“(?:[^”\\]|\\.)*”")

# Tokens whose "!" is not sentence punctuation
WORDS_WITH_EXCLAMATIONS = (
    "!Xũ", "!Kung", "ǃʼOǃKung", "!Xuun", "!Kung-Ekoka", "ǃHu", "ǃKhung",
    "ǃKu", "ǃung", "ǃXo", "ǃXû", "ǃXung", "ǃXũ", "!Xun", "Yahoo!", "Y!J",
    "Yum!",
)
EXCLAMATION_WORDS = re.compile(
    "|".join(re.escape(w) for w in sorted(WORDS_WITH_EXCLAMATIONS, key=len, reverse=True))
)


def find_protected_spans(line: str, language: str = "en") -> list[ProtectedSpan]:
    """Find every span whose internal punctuation must not end a sentence.

    Args:
        line: One line of masked text
        language: Document language code

    Returns:
        Protected spans in application order (may overlap)
    """
    if language == "de":
        if "„" in line:
            quote_patterns = [GERMAN_LOW_QUOTES]
        elif ",," in line:
            quote_patterns = [GERMAN_COMMA_QUOTES]
        else:
            quote_patterns = []
    else:
        quote_patterns = [DOUBLE_QUOTES]

    patterns = [
        EXCLAMATION_WORDS,
        CLOSING_CURLY_QUOTES,
        CURLY_QUOTES,
        GUILLEMETS,
        *quote_patterns,
        SINGLE_QUOTES,
        JAPANESE_QUOTES,
        PARENTHESES,
        FULLWIDTH_PARENTHESES,
    ]
    spans = []
    for pattern in patterns:
        for match in pattern.finditer(line):
            spans.append(ProtectedSpan(match.start(), match.end(), match.group(0)))
    return spans


def protect_spans(line: str, language: str = "en") -> str:
    """Replace sentence-final punctuation inside protected spans with sentinels.

    Args:
        line: One line of masked text
        language: Document language code

    Returns:
        Line where no protected span contains a boundary character
    """
    spans = find_protected_spans(line, language)
    if not spans:
        return line

    covered = bytearray(len(line))
    for span in spans:
        covered[span.start : span.end] = b"\x01" * (span.end - span.start)

    chars = list(line)
    for i, flag in enumerate(covered):
        if flag:
            chars[i] = chars[i].translate(SPAN_PUNCTUATION_MASK)
    return "".join(chars)
