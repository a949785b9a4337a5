"""Per-language abbreviation catalog backed by bundled YAML data."""

import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Iterator, Optional

import yaml

logger = logging.getLogger(__name__)

CATALOG_PATH = Path(__file__).parent / "abbreviations.yaml"


class AbbreviationCategory(str, Enum):
    """Which disambiguation rule applies to an abbreviation."""

    ORDINARY = "ordinary"
    PREFIX = "prefix"
    NUMBER = "number"


@dataclass(frozen=True)
class AbbreviationEntry:
    """A catalog abbreviation and its category."""

    text: str
    category: AbbreviationCategory


class AbbreviationCatalog:
    """Read-only abbreviation lists for one language."""

    def __init__(
        self,
        language: str,
        all: list[str],
        prefix: Optional[list[str]] = None,
        number: Optional[list[str]] = None,
    ):
        """Initialize catalog.

        Args:
            language: Language code the lists belong to
            all: Ordered abbreviations (without trailing period)
            prefix: Title/honorific abbreviations
            number: Abbreviations disambiguated by a following number
        """
        self.language = language
        self.prefix = frozenset(_normalize(a) for a in prefix or [])
        self.number = frozenset(_normalize(a) for a in number or [])

        # Keep catalog order, then append any prefix/number entries missing from `all`
        ordered = []
        seen = set()
        for abbr in [*all, *(prefix or []), *(number or [])]:
            abbr = _normalize(abbr)
            if abbr and abbr not in seen:
                seen.add(abbr)
                ordered.append(abbr)
        self.all = tuple(ordered)

    def __contains__(self, abbr: str) -> bool:
        return _normalize(abbr) in self.all

    def __len__(self) -> int:
        return len(self.all)

    def category(self, abbr: str) -> AbbreviationCategory:
        """Return the category of an abbreviation."""
        abbr = _normalize(abbr)
        if abbr in self.prefix:
            return AbbreviationCategory.PREFIX
        if abbr in self.number:
            return AbbreviationCategory.NUMBER
        return AbbreviationCategory.ORDINARY

    def entries(self) -> Iterator[AbbreviationEntry]:
        """Iterate over catalog entries in catalog order."""
        for abbr in self.all:
            yield AbbreviationEntry(text=abbr, category=self.category(abbr))


def _normalize(abbr: str) -> str:
    return abbr.strip().lower().rstrip(".")


@lru_cache(maxsize=1)
def _load_raw(path: Path = CATALOG_PATH) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    logger.debug(f"Loaded abbreviation data for {len(data['languages'])} languages")
    return data


@lru_cache(maxsize=None)
def load_catalog(language: Optional[str] = "en") -> AbbreviationCatalog:
    """Load the abbreviation catalog for a language.

    Falls back to the default list when no language-specific list exists.

    Args:
        language: ISO 639-1 code

    Returns:
        Cached, read-only AbbreviationCatalog
    """
    data = _load_raw()
    code = (language or data["default"]).lower()
    lists = data["languages"].get(code)
    if lists is None:
        logger.debug(f"No abbreviation list for '{code}', using '{data['default']}'")
        lists = data["languages"][data["default"]]
    return AbbreviationCatalog(
        language=code,
        all=lists.get("all") or [],
        prefix=lists.get("prefix") or [],
        number=lists.get("number") or [],
    )


def all_abbreviations(language: Optional[str] = "en") -> tuple[str, ...]:
    return load_catalog(language).all


def prefix_abbreviations(language: Optional[str] = "en") -> frozenset[str]:
    return load_catalog(language).prefix


def number_abbreviations(language: Optional[str] = "en") -> frozenset[str]:
    return load_catalog(language).number
