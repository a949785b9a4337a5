"""Per-language punctuation inventories and sentence-boundary scanners."""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from .base import (
    DOUBLE_EXCLAMATION,
    DOUBLE_QUESTION,
    END_OF_LINE,
    EXCLAMATION_QUESTION,
    NEWLINE,
    QUESTION_EXCLAMATION,
)

logger = logging.getLogger(__name__)


GENERIC_PUNCTUATION = ("。", "．", ".", "！", "!", "?", "？")

# Bracketed or quoted span directly followed by a capitalized word, else
# the shortest run of text ending in a terminator
GENERIC_BOUNDARY = re.compile(
    r"（[^）]*）(?=\s?[A-Z])"
    r"|「[^」]*」(?=\s[A-Z])"
    r"|\([^)]*\)(?=\s[A-Z])"
    r"|'[^']*'(?=\s[A-Z])"
    r'|"[^"]*"(?=\s[A-Z])'
    r"|“[^”]*”(?=\s[A-Z])"
    r"|\S.*?[。．.！!?？"
    f"{END_OF_LINE}{NEWLINE}{QUESTION_EXCLAMATION}{EXCLAMATION_QUESTION}"
    f"{DOUBLE_QUESTION}{DOUBLE_EXCLAMATION}]"
)


@dataclass(frozen=True)
class BoundaryGrammar:
    """Punctuation inventory and boundary scanner for one language."""

    code: str
    punctuation: tuple[str, ...]
    pattern: re.Pattern
    generic: bool = False  # quote/interjection masking before the scan
    appends_end_marker: bool = True
    masks_list_separators: bool = False  # digit colons and Arabic list commas

    def has_punctuation(self, line: str) -> bool:
        return any(p in line for p in self.punctuation)

    def ends_with_punctuation(self, line: str) -> bool:
        return bool(line) and line[-1] in self.punctuation

    def scan(self, line: str) -> list[str]:
        """Return the candidate sentence spans of a masked line.

        Args:
            line: Line with all non-boundary punctuation masked

        Returns:
            Candidate segments in order, possibly including empty strings
        """
        return [match.group(0) for match in self.pattern.finditer(line)]


GENERIC = BoundaryGrammar(
    code="generic",
    punctuation=GENERIC_PUNCTUATION,
    pattern=GENERIC_BOUNDARY,
    generic=True,
)

GRAMMARS = {
    "am": BoundaryGrammar(
        code="am",
        punctuation=("።", "፧", "?", "!"),
        pattern=re.compile(r".*?[፧።!?]|.*?$"),
    ),
    "ar": BoundaryGrammar(
        code="ar",
        punctuation=("?", "!", ":", ".", "؟", "،"),
        pattern=re.compile(r".*?[:.!?؟،]|.*?\Z|.*?$"),
        appends_end_marker=False,
        masks_list_separators=True,
    ),
    "el": BoundaryGrammar(
        code="el",
        punctuation=(".", "!", ";", "?"),
        pattern=re.compile(r".*?[.;!?]|.*?$"),
    ),
    "fa": BoundaryGrammar(
        code="fa",
        punctuation=("?", "!", ":", ".", "؟"),
        pattern=re.compile(r".*?[:.!?؟]|.*?\Z|.*?$"),
        appends_end_marker=False,
        masks_list_separators=True,
    ),
    "hi": BoundaryGrammar(
        code="hi",
        punctuation=("।", "|", ".", "!", "?"),
        pattern=re.compile(r".*?[।|!?]|.*?$"),
    ),
    "hy": BoundaryGrammar(
        code="hy",
        punctuation=("։", "՜", ":"),
        pattern=re.compile(r".*?[։՜:]|.*?$"),
    ),
    "my": BoundaryGrammar(
        code="my",
        punctuation=("။", "၏", "?", "!"),
        pattern=re.compile(r".*?[။၏!?]|.*?$"),
    ),
    "ur": BoundaryGrammar(
        code="ur",
        punctuation=("?", "!", "۔", "؟"),
        pattern=re.compile(r".*?[۔؟!?]|.*?$"),
    ),
}


def get_grammar(language: Optional[str]) -> BoundaryGrammar:
    """Select the boundary grammar for a language code.

    Args:
        language: ISO 639-1 code (case-insensitive); None selects the default

    Returns:
        Registered grammar, or GENERIC for unregistered languages
    """
    if not language:
        return GENERIC
    grammar = GRAMMARS.get(language.lower())
    if grammar is None:
        logger.debug(f"No boundary grammar for '{language}', using generic")
        return GENERIC
    return grammar
