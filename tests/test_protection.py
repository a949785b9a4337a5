"""Tests for quoted and bracketed span protection."""

from sbd_segmenter.engines.protection import find_protected_spans, protect_spans


class TestProtectSpans:
    """Tests for protect_spans."""

    def test_double_quotes(self):
        line = 'She said, "Is this right? I think so." Then she left.'
        assert protect_spans(line) == 'She said, "Is this rightᓷ I think so∯" Then she left.'

    def test_parentheses(self):
        assert protect_spans("He left (quickly!) and ran.") == "He left (quicklyᓴ) and ran."

    def test_german_low_quotes(self):
        """German uses „...“ quotes instead of straight double quotes."""
        line = "Er sagte „Hallo. Wie geht's?“ und ging."
        assert protect_spans(line, "de") == "Er sagte „Hallo∯ Wie geht'sᓷ“ und ging."

    def test_text_outside_spans_untouched(self):
        line = "No quotes here. None at all!"
        assert protect_spans(line) == line


class TestFindProtectedSpans:
    """Tests for find_protected_spans."""

    def test_exclamation_words(self):
        spans = find_protected_spans("I use Yahoo! daily.")
        assert "Yahoo!" in [span.text for span in spans]

    def test_span_offsets(self):
        line = "A (b. c) d."
        spans = find_protected_spans(line)
        assert len(spans) == 1
        assert line[spans[0].start : spans[0].end] == "(b. c)"
