"""Global masking passes that hide non-boundary periods behind sentinels.

Each pass is a pure ``str -> str`` function. ``MaskingEngine.run`` applies
them once over the whole document, in the order of ``MaskingEngine.PASSES``;
later passes may re-examine periods already masked by earlier ones.
"""

import re
from functools import lru_cache
from typing import Callable, Optional

from ..data.abbreviations import AbbreviationCatalog, AbbreviationCategory, load_catalog
from .base import AMBIGUOUS_PERIOD


P = AMBIGUOUS_PERIOD

# Languages whose abbreviations are masked without any look-ahead
UNCONDITIONAL_ABBREVIATION_LANGUAGES = {"ar", "fa"}

# Languages whose ordinary abbreviations are masked before any non-capitalized word
LOWERCASE_FOLLOWER_LANGUAGES = {"ru"}

POSSESSIVE_ABBREVIATION = re.compile(r"\.(?='s(?:\s|$))", re.MULTILINE)

SINGLE_UPPERCASE_LETTER_AT_LINE_START = re.compile(r"^([A-Z])\.(?=\s)", re.MULTILINE)
SINGLE_UPPERCASE_LETTER = re.compile(r"(?<=\s[A-Z])\.(?=\s)")
SINGLE_LOWERCASE_LETTER_AT_LINE_START_DE = re.compile(r"^([a-z])\.(?=\s)", re.MULTILINE)
SINGLE_LOWERCASE_LETTER_DE = re.compile(r"(?<=\s[a-z])\.(?=\s)")

# What may follow an ordinary abbreviation for its period to be masked
ORDINARY_FOLLOWER = re.compile(r"[.:?,]|\s(?:[^\W\d_]|\d)")
NUMBER_FOLLOWER = re.compile(r"\s\d|\s+\(")
PRONOUN_FOLLOWER = re.compile(r"\s(?:I\s|I'm|I'll)")

PERIOD_IN_NUMBER = re.compile(r"(?<=\d)\.(?=\S)|\.(?=\d)")
NUMBERED_ITEM_AFTER_RECORD = re.compile(r"(?<=\r\d)\.(?=\s\S|\))|(?<=\r\d\d)\.(?=\s\S|\))")
NUMBERED_ITEM_AT_LINE_START = re.compile(r"^(\d{1,2})\.(?=\s\S|\))", re.MULTILINE)
ORDINAL_AFTER_SPACE_DE = re.compile(r"(?<=\s\d)\.(?=\s)|(?<=\s[1-9]\d)\.(?=\s)")
ORDINAL_AFTER_HYPHEN_DE = re.compile(r"(?<=-\d)\.(?=\s)|(?<=-[1-9]\d)\.(?=\s)")

MULTI_PERIOD_ABBREVIATION = re.compile(r"\b[a-z](?:\.[a-z])+\.", re.IGNORECASE)
AM_PM_BEFORE_CAPITAL = re.compile(f"(?<=a{P}m|A{P}M|p{P}m|P{P}M){P}(?=\\s[A-Z])")

# Very common sentence-initial words that reveal a real boundary after an acronym
SENTENCE_STARTERS = (
    "A", "Being", "Did", "For", "He", "How", "However", "I", "In", "Millions",
    "More", "She", "That", "The", "There", "They", "We", "What", "When",
    "Where", "Who", "Why",
)
_STARTER = "|".join(SENTENCE_STARTERS)
ABBREVIATION_BOUNDARIES = [
    re.compile(f"(?<={acronym}){P}(?=\\s(?:{_STARTER})[\\s,])")
    for acronym in (
        f"U[.{P}]S[.{P}]A",
        f"U[.{P}]S",
        f"U[.{P}]K",
        f"E[.{P}]U",
        r"\bI",
    )
]

GEO_COORDINATE = re.compile(r"(?<=[a-zA-Z0-9]°)\.(?=\s*\d)")


def mask_possessive_abbreviations(text: str, language: str = "en") -> str:
    """Mask a period directly followed by 's, as in "Inc.'s"."""
    return POSSESSIVE_ABBREVIATION.sub(P, text)


def mask_single_letter_initials(text: str, language: str = "en") -> str:
    """Mask the period after single-letter initials such as "J. Smith".

    German also uses lower-case single-letter abbreviations ("z. B.").
    """
    text = SINGLE_UPPERCASE_LETTER_AT_LINE_START.sub(rf"\1{P}", text)
    text = SINGLE_UPPERCASE_LETTER.sub(P, text)
    if language == "de":
        text = SINGLE_LOWERCASE_LETTER_DE.sub(P, text)
        text = SINGLE_LOWERCASE_LETTER_AT_LINE_START_DE.sub(rf"\1{P}", text)
    return text


@lru_cache(maxsize=4096)
def _abbreviation_pattern(abbr: str) -> re.Pattern:
    # Abbreviation starting a line or following whitespace, then its period
    return re.compile(
        r"(?:^|(?<=\s))" + re.escape(abbr) + r"\.", re.IGNORECASE | re.MULTILINE
    )


def _starts_capitalized_word(following: str) -> bool:
    word = following.lstrip()
    return bool(word) and word[0].isupper() and following[:1].isspace()


def _should_mask_abbreviation(
    following: str, category: AbbreviationCategory, language: str
) -> bool:
    """Decide whether one abbreviation occurrence's period is masked.

    Args:
        following: Text after the abbreviation's period
        category: Catalog category of the abbreviation
        language: Document language code

    Returns:
        True if the period is not a sentence boundary
    """
    if language in UNCONDITIONAL_ABBREVIATION_LANGUAGES:
        return True
    if language == "de":
        return following[:1].isspace()

    if category == AbbreviationCategory.PREFIX:
        return following[:1].isspace()
    if category == AbbreviationCategory.NUMBER:
        return NUMBER_FOLLOWER.match(following) is not None

    # A capitalized next word may start a new sentence
    if _starts_capitalized_word(following):
        return PRONOUN_FOLLOWER.match(following) is not None
    if language in LOWERCASE_FOLLOWER_LANGUAGES:
        return True
    match = ORDINARY_FOLLOWER.match(following)
    if match is None:
        return False
    letter = match.group(0)[-1]
    return not letter.isalpha() or letter.islower()


def mask_abbreviations(
    text: str, language: str = "en", catalog: Optional[AbbreviationCatalog] = None
) -> str:
    """Mask catalog abbreviation periods that cannot end a sentence.

    Args:
        text: Document text
        language: Document language code
        catalog: Abbreviation catalog (defaults to the language's catalog)

    Returns:
        Text with non-boundary abbreviation periods masked
    """
    if catalog is None:
        catalog = load_catalog(language)
    downcased = text.lower()

    for abbr in catalog.all:
        if abbr not in downcased:
            continue
        category = catalog.category(abbr)

        def replace(match: re.Match) -> str:
            following = match.string[match.end() : match.end() + 8]
            if _should_mask_abbreviation(following, category, language):
                return match.group(0).replace(".", P)
            return match.group(0)

        text = _abbreviation_pattern(abbr).sub(replace, text)
    return text


def mask_numeric_periods(text: str, language: str = "en") -> str:
    """Mask decimal points and numbered-list periods.

    German also masks ordinal periods ("3. Mai", "2.-3. Mai").
    """
    text = PERIOD_IN_NUMBER.sub(P, text)
    text = NUMBERED_ITEM_AFTER_RECORD.sub(P, text)
    text = NUMBERED_ITEM_AT_LINE_START.sub(rf"\1{P}", text)
    if language == "de":
        text = ORDINAL_AFTER_SPACE_DE.sub(P, text)
        text = ORDINAL_AFTER_HYPHEN_DE.sub(P, text)
    return text


def mask_multi_period_abbreviations(text: str, language: str = "en") -> str:
    """Mask every period of letter-dot runs such as "U.S.A." or "e.g.".

    The final period of "a.m."/"p.m." before a capitalized word is kept.
    """
    text = MULTI_PERIOD_ABBREVIATION.sub(lambda m: m.group(0).replace(".", P), text)
    return AM_PM_BEFORE_CAPITAL.sub(".", text)


def restore_abbreviation_boundaries(text: str, language: str = "en") -> str:
    """Restore the final period of U.S./U.K./E.U./U.S.A./I before a sentence starter."""
    for pattern in ABBREVIATION_BOUNDARIES:
        text = pattern.sub(".", text)
    return text


def mask_geo_coordinates(text: str, language: str = "en") -> str:
    """Mask a period between a degree sign and a number."""
    return GEO_COORDINATE.sub(P, text)


MaskingPass = Callable[[str, str], str]


class MaskingEngine:
    """Applies the global masking passes in their required order."""

    PASSES: tuple[MaskingPass, ...] = (
        mask_possessive_abbreviations,
        mask_single_letter_initials,
        mask_abbreviations,
        mask_numeric_periods,
        mask_multi_period_abbreviations,
        restore_abbreviation_boundaries,
        mask_geo_coordinates,
    )

    def __init__(self, language: str = "en", catalog: Optional[AbbreviationCatalog] = None):
        """Initialize masking engine.

        Args:
            language: Document language code
            catalog: Abbreviation catalog (defaults to the language's catalog)
        """
        self.language = (language or "en").lower()
        self.catalog = catalog if catalog is not None else load_catalog(self.language)

    def run(self, text: str) -> str:
        """Run every pass over the document.

        Args:
            text: Cleaned, list-normalized document text

        Returns:
            Text with structurally unambiguous non-boundary periods masked
        """
        for masking_pass in self.PASSES:
            if masking_pass is mask_abbreviations:
                text = mask_abbreviations(text, self.language, self.catalog)
            else:
                text = masking_pass(text, self.language)
        return text
