"""Tests for the global masking passes."""

from sbd_segmenter.engines.masking import (
    MaskingEngine,
    mask_abbreviations,
    mask_geo_coordinates,
    mask_multi_period_abbreviations,
    mask_numeric_periods,
    mask_possessive_abbreviations,
    mask_single_letter_initials,
    restore_abbreviation_boundaries,
)


class TestSimplePasses:
    """Tests for the single-rule passes."""

    def test_possessive(self):
        assert mask_possessive_abbreviations("Apple Inc.'s profits") == "Apple Inc∯'s profits"

    def test_single_letter_initials(self):
        assert mask_single_letter_initials("He met J. Smith there.") == "He met J∯ Smith there."
        assert mask_single_letter_initials("J. Smith arrived.") == "J∯ Smith arrived."

    def test_german_lowercase_initials(self):
        """German also masks lower-case single letters."""
        text = "Das ist z. B. gut."
        assert mask_single_letter_initials(text, "de") == "Das ist z∯ B∯ gut."
        assert mask_single_letter_initials(text, "en") == "Das ist z. B∯ gut."

    def test_decimal_numbers(self):
        assert mask_numeric_periods("It costs 3.50 dollars.") == "It costs 3∯50 dollars."

    def test_german_ordinals(self):
        assert mask_numeric_periods("Am 3. Mai.", "de") == "Am 3∯ Mai."
        assert mask_numeric_periods("Am 3. Mai.", "en") == "Am 3. Mai."

    def test_geo_coordinates(self):
        assert mask_geo_coordinates("Located at 50°.3 north.") == "Located at 50°∯3 north."


class TestAbbreviations:
    """Tests for catalog-driven abbreviation masking."""

    def test_prefix_before_name(self):
        assert mask_abbreviations("Dr. Smith went home.") == "Dr∯ Smith went home."

    def test_ordinary_before_lowercase(self):
        text = "We bought apples, pears, etc. and went home."
        assert mask_abbreviations(text) == "We bought apples, pears, etc∯ and went home."

    def test_ordinary_before_capital_is_boundary(self):
        """A capitalized next word keeps the period."""
        text = "I went to the store etc. Then I left."
        assert mask_abbreviations(text) == text

    def test_ordinary_before_pronoun_i(self):
        text = "He is the best, etc. I think so."
        assert mask_abbreviations(text) == "He is the best, etc∯ I think so."

    def test_number_abbreviation(self):
        assert mask_abbreviations("See p. 5 for details.") == "See p∯ 5 for details."

    def test_russian_masks_before_lowercase(self):
        """Russian abbreviations are masked when a lowercase word follows."""
        text = "Это т.е. пример."
        assert mask_abbreviations(text, "ru") == "Это т∯е∯ пример."

    def test_russian_keeps_period_before_capital(self):
        text = "Он родился в 1990 г. Потом он уехал."
        assert mask_abbreviations(text, "ru") == text


class TestMultiPeriod:
    """Tests for dotted acronyms and their boundary restoration."""

    def test_acronym(self):
        text = "He lives in the U.S. now."
        assert mask_multi_period_abbreviations(text) == "He lives in the U∯S∯ now."

    def test_pm_before_capital_keeps_period(self):
        text = "We met at 5 p.m. Then we left."
        assert mask_multi_period_abbreviations(text) == "We met at 5 p∯m. Then we left."

    def test_restore_before_sentence_starter(self):
        text = "the U∯S∯ However, he"
        assert restore_abbreviation_boundaries(text) == "the U∯S. However, he"

    def test_no_restore_before_other_words(self):
        text = "the U∯S∯ Army"
        assert restore_abbreviation_boundaries(text) == text


class TestMaskingEngine:
    """Tests for the ordered pass runner."""

    def test_passes_run_in_order(self):
        engine = MaskingEngine("en")
        text = "Dr. Smith lives in the U.S. However, he travels."
        assert engine.run(text) == "Dr∯ Smith lives in the U∯S. However, he travels."

    def test_language_normalized(self):
        assert MaskingEngine("DE").language == "de"
