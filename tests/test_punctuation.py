"""
Punctuation normalizer tests

Tests gluing of .,!?:; to the preceding word, the single space after
a mark, quote padding removal and the fixed-point property.
"""

import pytest

from reloaded.config import AppSettings
from reloaded.lib.punctuation import PunctuationNormalizer


class TestGlue:
    """Test punctuation gluing and spacing"""

    @pytest.mark.parametrize("source, expected", [
        ("hello , world", "hello, world"),
        ("hello ,world", "hello, world"),
        ("hello.world", "hello. world"),
        ("end .", "end."),
        ("a  ,b", "a, b"),
        ("really ?!", "really?!"),
        ("wait ... what", "wait... what"),
        ("Punctuation tests are ... kinda boring ,what do you think ?",
         "Punctuation tests are... kinda boring, what do you think?"),
        ("I was sitting over there ,and then BAMM !!",
         "I was sitting over there, and then BAMM!!"),
        ("note:see ; here", "note: see; here"),
    ])
    def test_glue(self, source, expected):
        assert PunctuationNormalizer().punctuation_glue(source) == expected

    def test_leading_mark(self):
        """A mark at the start has nothing to glue to"""
        assert PunctuationNormalizer().punctuation_glue(", start") == ", start"

    def test_space_before_quote(self):
        """A quote after a mark starts a new word like any other"""
        assert PunctuationNormalizer().punctuation_glue("hi,'there'") == "hi, 'there'"

    def test_quoted_word_after_mark(self):
        assert PunctuationNormalizer().process("hello,'world'") == "hello, 'world'"

    def test_plain_text_unchanged(self):
        assert PunctuationNormalizer().punctuation_glue("no marks here") == "no marks here"


class TestQuotes:
    """Test quote padding removal"""

    def test_simple_pair(self):
        assert PunctuationNormalizer().process("' hi '") == "'hi'"

    def test_pair_in_sentence(self):
        source = "I am exactly how they describe me: ' awesome '"
        expected = "I am exactly how they describe me: 'awesome'"
        assert PunctuationNormalizer().process(source) == expected

    def test_multi_word_quote(self):
        source = "As Elton John said: ' I am the most well-known homosexual in the world '"
        expected = "As Elton John said: 'I am the most well-known homosexual in the world'"
        assert PunctuationNormalizer().process(source) == expected

    def test_apostrophe_ignored(self):
        """Quotes inside words are apostrophes, not quotation marks"""
        assert PunctuationNormalizer().process("don't ' go '") == "don't 'go'"

    def test_two_pairs(self):
        assert PunctuationNormalizer().process("' a ' and ' b '") == "'a' and 'b'"

    def test_unmatched_quote(self):
        """A lone quote is left as it is"""
        assert PunctuationNormalizer().process("it ' s") == "it ' s"

    def test_punctuation_inside_quote(self):
        assert PunctuationNormalizer().process("' hello , there '") == "'hello, there'"

    def test_collapse_disabled(self):
        normalizer = PunctuationNormalizer(AppSettings(collapse_quotes=False))
        assert normalizer.process("' hi '") == "' hi '"


class TestFixedPoint:
    """Normalizing twice gives the same result as normalizing once"""

    @pytest.mark.parametrize("source", [
        "hello , world",
        "hello.world",
        "' hi '",
        "' , '",
        "hello,'world'",
        "'hi,'",
        "x' y 'z",
        "wait ... what ?! ' ok , then '",
        "a ' b ' c ' d",
        ". . .",
        "",
    ])
    def test_idempotent(self, source):
        normalizer = PunctuationNormalizer()
        once = normalizer.process(source)
        assert normalizer.process(once) == once
