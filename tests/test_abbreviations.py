"""Tests for the abbreviation catalog."""

from sbd_segmenter.data import (
    AbbreviationCatalog,
    AbbreviationCategory,
    AbbreviationEntry,
    all_abbreviations,
    load_catalog,
    number_abbreviations,
    prefix_abbreviations,
)


class TestAbbreviationCatalog:
    """Tests for AbbreviationCatalog."""

    def test_membership_ignores_case_and_trailing_period(self):
        """Lookups are case-insensitive and accept a trailing period."""
        catalog = load_catalog("en")
        assert "dr" in catalog
        assert "Dr." in catalog
        assert "ETC" in catalog
        assert "hello" not in catalog

    def test_categories(self):
        """Prefix and number lists drive the category."""
        catalog = load_catalog("en")
        assert catalog.category("dr") == AbbreviationCategory.PREFIX
        assert catalog.category("no") == AbbreviationCategory.NUMBER
        assert catalog.category("etc") == AbbreviationCategory.ORDINARY

    def test_prefix_and_number_merged_into_all(self):
        """Prefix and number entries missing from `all` are appended in order."""
        catalog = AbbreviationCatalog("xx", all=["etc"], prefix=["Dr."], number=["No"])
        assert catalog.all == ("etc", "dr", "no")
        assert len(catalog) == 3
        assert list(catalog.entries()) == [
            AbbreviationEntry("etc", AbbreviationCategory.ORDINARY),
            AbbreviationEntry("dr", AbbreviationCategory.PREFIX),
            AbbreviationEntry("no", AbbreviationCategory.NUMBER),
        ]

    def test_yaml_keywords_load_as_strings(self):
        """Entries like "no" are not read as booleans."""
        assert "no" in number_abbreviations("en")
        assert "on" in prefix_abbreviations("it")


class TestLoadCatalog:
    """Tests for load_catalog."""

    def test_cached(self):
        """The same catalog object is returned for repeated loads."""
        assert load_catalog("en") is load_catalog("en")

    def test_unknown_language_falls_back_to_default(self):
        """Unknown languages use the English lists."""
        catalog = load_catalog("xx")
        assert catalog.language == "xx"
        assert catalog.all == load_catalog("en").all

    def test_language_specific_lists(self):
        """Each bundled language has its own list."""
        assert "z.b" in load_catalog("de")
        assert "т.е" in load_catalog("ru")
        assert "z.b" not in load_catalog("en")

    def test_module_helpers(self):
        """Helpers expose the cached catalog's lists."""
        assert all_abbreviations("en") == load_catalog("en").all
        assert "dr" in prefix_abbreviations("en")
