"""
Basic interpreter tests - simplest cases

Tests empty text, plain text, and single-word directives.
"""

import pytest

from reloaded.lib.interpreter import Interpreter, tokens_split


class TestEmptyAndPlain:
    """Test empty text and text without directives"""

    def test_empty_text(self):
        """Empty string stays empty"""
        assert Interpreter().process("") == ""

    def test_whitespace_only(self):
        """Only whitespace collapses to empty"""
        assert Interpreter().process("   \n\n  \t  ") == ""

    def test_plain_text_is_identity(self):
        """Text without markers is unchanged apart from whitespace"""
        assert Interpreter().process("hello world") == "hello world"

    def test_whitespace_collapses(self):
        """Runs of spaces, tabs and newlines become single spaces"""
        assert Interpreter().process("hello   world\n\tagain ") == "hello world again"

    def test_tokens_split(self):
        """Tokens are whitespace delimited"""
        assert tokens_split(" a  b\nc ") == ["a", "b", "c"]


class TestCaseDirectives:
    """Test (up), (low) and (cap)"""

    def test_up(self):
        assert Interpreter().process("hello (up)") == "HELLO"

    def test_low(self):
        assert Interpreter().process("I should stop SHOUTING (low)") == "I should stop shouting"

    def test_cap(self):
        assert Interpreter().process("the brooklyn bridge (cap)") == "the brooklyn Bridge"

    def test_cap_lowercases_rest(self):
        """Capitalize lowercases before uppercasing the first letter"""
        assert Interpreter().process("hELLO (cap)") == "Hello"

    def test_cap_skips_leading_quote(self):
        """The first letter is uppercased even after a quote or bracket"""
        assert Interpreter().process("'brooklyn (cap)") == "'Brooklyn"
        assert Interpreter().process("(bridge (cap)") == "(Bridge"

    def test_cap_keeps_apostrophe_words(self):
        """Only the start of the word is uppercased"""
        assert Interpreter().process("DON'T (cap)") == "Don't"

    def test_only_preceding_word_changes(self):
        """Default scope is one word"""
        assert Interpreter().process("ready set go (up) now") == "ready set GO now"

    def test_glued_punctuation_kept(self):
        """A word with glued punctuation is transformed as a whole"""
        assert Interpreter().process("hello, (up)") == "HELLO,"


class TestNumberDirectives:
    """Test (hex) and (bin)"""

    @pytest.mark.parametrize("source, expected", [
        ("ff (hex)", "255"),
        ("1E (hex) files were added", "30 files were added"),
        ("-ff (hex)", "-255"),
        ("It has been 10 (bin) years", "It has been 2 years"),
        ("101 (bin)", "5"),
    ])
    def test_conversion(self, source, expected):
        assert Interpreter().process(source) == expected

    @pytest.mark.parametrize("source", [
        "zz (hex)",
        "0xff (hex)",
        "f_f (hex)",
        "12 (bin)",
        "0b101 (bin)",
    ])
    def test_unparseable_becomes_zero(self, source):
        """Anything that is not plain digits of the base converts to 0"""
        assert Interpreter().process(source) == "0"


class TestMarkerRecognition:
    """Test what is and is not a directive"""

    def test_marker_at_start_is_removed(self):
        """No preceding word: nothing changes but the marker disappears"""
        assert Interpreter().process("(up) hello") == "hello"

    def test_unknown_operation_is_kept(self):
        """Unknown operations are ordinary words"""
        assert Interpreter().process("hello (foo)") == "hello (foo)"

    def test_operation_is_case_sensitive(self):
        assert Interpreter().process("hello (UP)") == "hello (UP)"

    def test_empty_parentheses_kept(self):
        assert Interpreter().process("hello ()") == "hello ()"

    def test_marker_must_start_token(self):
        """A marker glued to a word is not a directive"""
        assert Interpreter().process("hello(up)") == "hello(up)"

    def test_no_marker_survives(self):
        """Every recognized marker is removed"""
        result = Interpreter().process("a (up) b (low) c (cap) 1 (bin) f (hex)")
        for marker in ("(up)", "(low)", "(cap)", "(bin)", "(hex)"):
            assert marker not in result
        assert result == "A b C 1 15"

    def test_counters(self):
        """directives_applied and words_transformed reflect the last run"""
        interpreter = Interpreter()
        interpreter.process("one two (up, 2) three (low)")
        assert interpreter.directives_applied == 2
        assert interpreter.words_transformed == 3

        interpreter.process("plain")
        assert interpreter.directives_applied == 0
        assert interpreter.words_transformed == 0
