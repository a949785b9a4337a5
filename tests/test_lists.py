"""Tests for list item detection."""

from sbd_segmenter.utils.lists import add_line_break


class TestAddLineBreak:
    """Tests for add_line_break."""

    def test_numbered_list(self):
        text = "Steps: 1. Mix 2. Bake 3. Serve"
        assert add_line_break(text) == "Steps:\r1∯ Mix\r2∯ Bake\r3∯ Serve"

    def test_numbers_in_prose_ignored(self):
        """Period markers need a line start or a colon before the first item."""
        text = "I counted to 1. Then I counted to 2. Then"
        assert add_line_break(text) == text

    def test_list_at_start(self):
        """No separator is inserted before the first character."""
        assert add_line_break("1. First 2. Second") == "1∯ First\r2∯ Second"

    def test_roman_numerals(self):
        text = "Parts: i. one ii. two iii. three"
        assert add_line_break(text) == "Parts:\ri∯ one\rii∯ two\riii∯ three"

    def test_alphabetical_parens(self):
        text = "Choose a) red b) blue"
        assert add_line_break(text) == "Choose\ra) red\rb) blue"

    def test_non_consecutive_numbers_ignored(self):
        text = "He scored 3. Then 7. again"
        assert add_line_break(text) == text

    def test_empty(self):
        assert add_line_break("") == ""
