"""Tests for the per-language boundary grammars."""

from sbd_segmenter.engines.grammar import GENERIC, GRAMMARS, get_grammar


class TestGetGrammar:
    """Tests for grammar selection."""

    def test_registered_languages(self):
        for code in ("am", "ar", "el", "fa", "hi", "hy", "my", "ur"):
            assert get_grammar(code) is GRAMMARS[code]

    def test_case_insensitive(self):
        assert get_grammar("EL") is GRAMMARS["el"]

    def test_fallback_to_generic(self):
        assert get_grammar("en") is GENERIC
        assert get_grammar("xx") is GENERIC
        assert get_grammar(None) is GENERIC


class TestBoundaryGrammar:
    """Tests for punctuation checks and scanning."""

    def test_punctuation_checks(self):
        assert GENERIC.has_punctuation("Hello world.")
        assert not GENERIC.has_punctuation("Hello; world")
        assert GENERIC.ends_with_punctuation("Really?")
        assert not GENERIC.ends_with_punctuation("Really? yes")
        assert not GENERIC.ends_with_punctuation("")

    def test_generic_scan(self):
        assert GENERIC.scan("Hello world. How are you?ȸ") == ["Hello world.", "How are you?"]

    def test_generic_scan_end_of_line_marker(self):
        """Text after the last terminator ends at the end-of-line marker."""
        assert GENERIC.scan("One. Twoȸ") == ["One.", "Twoȸ"]

    def test_greek_question_mark(self):
        segments = [s.strip() for s in GRAMMARS["el"].scan("Τι κάνεις; Καλά είμαι.") if s.strip()]
        assert segments == ["Τι κάνεις;", "Καλά είμαι."]

    def test_hindi_danda(self):
        segments = [s.strip() for s in GRAMMARS["hi"].scan("यह एक है। वह दो है।") if s.strip()]
        assert segments == ["यह एक है।", "वह दो है।"]

    def test_arabic_grammar_flags(self):
        assert not GRAMMARS["ar"].appends_end_marker
        assert GRAMMARS["ar"].masks_list_separators
        assert GENERIC.generic
