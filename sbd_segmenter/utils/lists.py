"""Detect enumerated list items and give each one its own record."""

import re
from typing import Callable, Optional

from ..engines.base import AMBIGUOUS_PERIOD, LIST_PERIOD, RECORD_SEPARATOR

ROMAN_NUMERALS = (
    "i", "ii", "iii", "iv", "v", "vi", "vii", "viii", "ix", "x",
    "xi", "xii", "xiii", "xiv", "xv", "xvi", "xvii", "xviii", "xix", "xx",
)

NUMBERED_WITH_PERIODS = re.compile(r"(?:^|(?<=\s))(\d{1,2})\.(?=\s)", re.MULTILINE)
NUMBERED_WITH_PARENS = re.compile(r"(?:^|(?<=\s))\(?(\d{1,2})\)(?=\s)", re.MULTILINE)
ROMAN_WITH_PERIODS = re.compile(r"(?:^|(?<=\s))([ivx]{1,5})\.(?=\s)", re.MULTILINE)
ROMAN_WITH_PARENS = re.compile(r"(?:^|(?<=\s))\(?([ivx]{1,5})\)(?=\s)", re.MULTILINE)
ALPHABETICAL_WITH_PERIODS = re.compile(r"(?:^|(?<=\s))([a-z])\.(?=\s)", re.MULTILINE)
ALPHABETICAL_WITH_PARENS = re.compile(r"(?:^|(?<=\s))\(?([a-zA-Z])\)(?=\s)", re.MULTILINE)


def _number(marker: str) -> Optional[int]:
    return int(marker)


def _roman(marker: str) -> Optional[int]:
    return ROMAN_NUMERALS.index(marker) if marker in ROMAN_NUMERALS else None


def _letter(marker: str) -> Optional[int]:
    return ord(marker.lower())


def _opens_list(text: str, start: int) -> bool:
    before = text[:start].rstrip(" \t")
    return not before or before[-1] in "\r\n:"


def _break_list(
    text: str,
    pattern: re.Pattern,
    ordinal: Callable[[str], Optional[int]],
    mask_period: bool,
) -> str:
    """Start a new record at every item of a consecutive list.

    Items form a list when at least two markers in a row have consecutive
    ordinals. Period markers also look like sentence ends ("up to 1. Then"),
    so such a list only counts when its first item starts a line or record
    or follows a colon.

    Args:
        text: Text to scan
        pattern: Marker pattern whose group 1 is the ordinal
        ordinal: Maps a marker to its position in the sequence
        mask_period: Replace the marker's period so it never ends a sentence

    Returns:
        Text with a record separator in front of each list item
    """
    runs = []
    run = []
    previous = None
    for match in pattern.finditer(text):
        value = ordinal(match.group(1))
        if value is None:
            continue
        if run and value == previous + 1:
            run.append(match)
        else:
            runs.append(run)
            run = [match]
        previous = value
    runs.append(run)

    items = [
        item
        for run in runs
        if len(run) > 1 and (not mask_period or _opens_list(text, run[0].start()))
        for item in run
    ]
    if not items:
        return text

    pieces = []
    last = 0
    for item in items:
        start = item.start()
        while start > last and text[start - 1].isspace():
            start -= 1
        pieces.append(text[last:start])
        if start > 0:
            pieces.append(RECORD_SEPARATOR)
        marker = item.group(0)
        pieces.append(marker[:-1] + LIST_PERIOD if mask_period else marker)
        last = item.end()
    pieces.append(text[last:])
    return "".join(pieces)


def add_line_break(text: str) -> str:
    """Put every detected list item on its own record.

    Handles "1." / "1)" numbered lists, "i." / "ii)" roman lists and
    "a." / "a)" alphabetical lists. List-marker periods are masked.

    Args:
        text: Cleaned text

    Returns:
        Text with record separators before list items
    """
    if not text:
        return text
    text = _break_list(text, NUMBERED_WITH_PERIODS, _number, mask_period=True)
    text = _break_list(text, NUMBERED_WITH_PARENS, _number, mask_period=False)
    text = _break_list(text, ROMAN_WITH_PERIODS, _roman, mask_period=True)
    text = _break_list(text, ROMAN_WITH_PARENS, _roman, mask_period=False)
    text = _break_list(text, ALPHABETICAL_WITH_PERIODS, _letter, mask_period=True)
    text = _break_list(text, ALPHABETICAL_WITH_PARENS, _letter, mask_period=False)
    return text.replace(LIST_PERIOD, AMBIGUOUS_PERIOD)
