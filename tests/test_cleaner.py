"""Tests for text cleaning."""

from sbd_segmenter.utils.cleaner import TextCleaner, clean_text


class TestTextCleaner:
    """Tests for TextCleaner."""

    def test_paragraph_break_becomes_record_separator(self):
        assert TextCleaner().clean("Hello\n\nWorld") == "Hello\rWorld"

    def test_newline_inside_sentence_removed(self):
        assert TextCleaner().clean("This is the \nend of it.") == "This is the end of it."

    def test_html_tags_stripped(self):
        assert TextCleaner().clean("<p>Hello world.</p>") == "Hello world."

    def test_glued_sentences_split(self):
        assert TextCleaner().clean("Hello world.This is new.") == "Hello world. This is new."

    def test_urls_not_split(self):
        text = "Visit www.Example.com now."
        assert TextCleaner().clean(text) == text

    def test_table_of_contents_leader(self):
        assert TextCleaner().clean("Introduction.......5") == "Introduction\r"

    def test_double_backticks_become_quotes(self):
        assert TextCleaner().clean("``Hi''") == '"Hi"'

    def test_pdf_joins_wrapped_lines(self):
        """PDF text joins hard-wrapped lines; other text splits records."""
        text = "This is a line\nthat wraps."
        assert TextCleaner(doc_type="pdf").clean(text) == "This is a line that wraps."
        assert TextCleaner().clean(text) == "This is a line\rthat wraps."

    def test_empty(self):
        assert TextCleaner().clean("") == ""


def test_clean_text():
    """Test the convenience function."""
    assert clean_text("Hello\n\nWorld", language="de") == "Hello\rWorld"
