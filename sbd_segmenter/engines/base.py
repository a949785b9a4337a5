"""Base classes and sentinel constants for segmentation engines."""

import re
from abc import ABC, abstractmethod


# Sentinel alphabet: placeholder characters substituted for ambiguous
# punctuation while boundaries are resolved, restored before output.
AMBIGUOUS_PERIOD = "∯"
EMAIL_PERIOD = "∮"
MASKED_ARABIC_COMMA = "♬"  # ،
MASKED_COLON = "♭"  # :
MASKED_IDEOGRAPHIC_FULL_STOP = "ᓰ"  # 。
MASKED_FULLWIDTH_FULL_STOP = "ᓱ"  # ．
MASKED_FULLWIDTH_EXCLAMATION = "ᓳ"  # ！
MASKED_EXCLAMATION = "ᓴ"  # !
MASKED_QUESTION = "ᓷ"  # ?
MASKED_FULLWIDTH_QUESTION = "ᓸ"  # ？
QUESTION_EXCLAMATION = "☉"  # ?!
EXCLAMATION_QUESTION = "☈"  # !?
DOUBLE_QUESTION = "☇"  # ??
DOUBLE_EXCLAMATION = "☄"  # !!
END_OF_LINE = "ȸ"
NEWLINE = "ȹ"
ELLIPSIS_3_SPACED = "♟"  # " . . . "
ELLIPSIS_4_SPACED = "♝"  # ". . . ."
ELLIPSIS_COLLAPSED = "ƪ"  # "..."
ELLIPSIS_PREFIX = "☏"  # ".." (always followed by a real period)
LIST_PERIOD = "♨"

# Record separator emitted by the cleaner and the list normalizer
RECORD_SEPARATOR = "\r"

RESERVED_CHARACTERS = frozenset(
    {
        AMBIGUOUS_PERIOD,
        EMAIL_PERIOD,
        MASKED_ARABIC_COMMA,
        MASKED_COLON,
        MASKED_IDEOGRAPHIC_FULL_STOP,
        MASKED_FULLWIDTH_FULL_STOP,
        MASKED_FULLWIDTH_EXCLAMATION,
        MASKED_EXCLAMATION,
        MASKED_QUESTION,
        MASKED_FULLWIDTH_QUESTION,
        QUESTION_EXCLAMATION,
        EXCLAMATION_QUESTION,
        DOUBLE_QUESTION,
        DOUBLE_EXCLAMATION,
        END_OF_LINE,
        NEWLINE,
        ELLIPSIS_3_SPACED,
        ELLIPSIS_4_SPACED,
        ELLIPSIS_COLLAPSED,
        ELLIPSIS_PREFIX,
        LIST_PERIOD,
    }
)

# Punctuation inside protected spans -> dedicated sentinel
SPAN_PUNCTUATION_MASK = str.maketrans(
    {
        ".": AMBIGUOUS_PERIOD,
        "。": MASKED_IDEOGRAPHIC_FULL_STOP,
        "．": MASKED_FULLWIDTH_FULL_STOP,
        "！": MASKED_FULLWIDTH_EXCLAMATION,
        "!": MASKED_EXCLAMATION,
        "?": MASKED_QUESTION,
        "？": MASKED_FULLWIDTH_QUESTION,
    }
)

# Restored on every boundary-matched sub-segment
SYMBOL_RESTORE = str.maketrans(
    {
        AMBIGUOUS_PERIOD: ".",
        MASKED_ARABIC_COMMA: "،",
        MASKED_COLON: ":",
        MASKED_IDEOGRAPHIC_FULL_STOP: "。",
        MASKED_FULLWIDTH_FULL_STOP: "．",
        MASKED_FULLWIDTH_EXCLAMATION: "！",
        MASKED_EXCLAMATION: "!",
        MASKED_QUESTION: "?",
        MASKED_FULLWIDTH_QUESTION: "？",
        QUESTION_EXCLAMATION: "?!",
        EXCLAMATION_QUESTION: "!?",
        DOUBLE_QUESTION: "??",
        DOUBLE_EXCLAMATION: "!!",
        END_OF_LINE: None,
        NEWLINE: "\n",
    }
)

# Restored during reassembly, after segments are final
ELLIPSIS_RESTORE = str.maketrans(
    {
        ELLIPSIS_COLLAPSED: "...",
        ELLIPSIS_3_SPACED: " . . . ",
        ELLIPSIS_4_SPACED: ". . . .",
        ELLIPSIS_PREFIX: "..",
        EMAIL_PERIOD: ".",
    }
)


class ReservedCharacterError(ValueError):
    """Raised when input text already contains a sentinel character."""

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(
            f"Input contains reserved placeholder character {character!r} "
            f"(U+{ord(character):04X}) at position {position}"
        )

    def __reduce__(self):
        return (type(self), (self.character, self.position))


def check_reserved(text: str) -> None:
    """Raise ReservedCharacterError if text contains any sentinel.

    Args:
        text: Raw input text

    Raises:
        ReservedCharacterError: On the first reserved character found
    """
    if RESERVED_CHARACTERS.isdisjoint(text):
        return
    for position, char in enumerate(text):
        if char in RESERVED_CHARACTERS:
            raise ReservedCharacterError(char, position)


def restore_symbols(text: str) -> str:
    """Map every per-line sentinel back to its literal punctuation."""
    return text.translate(SYMBOL_RESTORE)


def restore_ellipses(text: str) -> str:
    """Map ellipsis and email-period sentinels back to literal text."""
    return text.translate(ELLIPSIS_RESTORE)


class SegmentationEngine(ABC):
    """Base class for segmentation engines."""

    @abstractmethod
    def segment(self, text: str) -> list[str]:
        """Segment text into an ordered list of sentences.

        Args:
            text: Input text to segment

        Returns:
            List of sentences
        """
        pass

    def segment_with_indices(self, text: str) -> list[tuple[str, int, int]]:
        """Segment text and return sentences with their indices.

        Sentences are located in the input left to right, tolerating
        whitespace differences. A sentence whose text was rewritten by the
        cleaner gets (-1, -1).

        Args:
            text: Input text to segment

        Returns:
            List of (sentence, start_index, end_index) tuples
        """
        if not text:
            return []

        located = []
        cursor = 0
        for sentence in self.segment(text):
            pattern = r"\s*".join(re.escape(token) for token in sentence.split())
            match = re.compile(pattern).search(text, cursor)
            if match is None:
                located.append((sentence, -1, -1))
                continue
            located.append((sentence, match.start(), match.end()))
            cursor = match.end()
        return located
