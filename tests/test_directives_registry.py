"""
Directive registry and settings tests
"""

import pytest

from reloaded.config import AppSettings
from reloaded.lib.directives import DirectiveRegistry, word_capitalize, hex_convert, bin_convert
from reloaded.models.directives import DirectiveKind


class TestRegistry:
    """Test the closed set of registered directives"""

    def test_all_kinds_registered(self):
        registry = DirectiveRegistry()
        assert registry.names_list() == ["hex", "bin", "up", "low", "cap"]
        for kind in DirectiveKind:
            assert registry.spec_get(kind.value).kind is kind

    def test_unknown_name(self):
        registry = DirectiveRegistry()
        assert registry.get("shout") is None
        assert registry.spec_get("shout") is None

    def test_get_returns_transform(self):
        assert DirectiveRegistry().get("up")("quiet") == "QUIET"

    def test_specs_have_examples(self):
        for spec in DirectiveRegistry().specs.values():
            assert spec.description
            assert spec.examples

    def test_name_resolve(self):
        assert DirectiveKind.name_resolve("cap") is DirectiveKind.CAP
        assert DirectiveKind.name_resolve("Cap") is None


class TestTransforms:
    """Test individual word transforms"""

    @pytest.mark.parametrize("word, expected", [
        ("hELLO", "Hello"),
        ("hello wORLD", "Hello World"),
        ("(hello", "(Hello"),
        ("'brooklyn", "'Brooklyn"),
        ("123abc", "123Abc"),
        ("...", "..."),
        ("", ""),
    ])
    def test_capitalize(self, word, expected):
        assert word_capitalize(word) == expected

    def test_hex(self):
        assert hex_convert("FF") == "255"
        assert hex_convert("") == "0"

    def test_bin(self):
        assert bin_convert("1010") == "10"
        assert bin_convert("2") == "0"


class TestSettings:
    """Test AppSettings helpers and environment overrides"""

    def test_defaults(self):
        settings = AppSettings()
        assert settings.punctuation_marks == ".,!?:;"
        assert settings.fix_articles is True

    def test_punctuation_is(self):
        settings = AppSettings()
        assert settings.punctuation_is(";")
        assert not settings.punctuation_is("'")
        assert not settings.punctuation_is("..")

    def test_article_trigger(self):
        settings = AppSettings()
        assert settings.articleTrigger_is("Hour")
        assert not settings.articleTrigger_is("banana")
        assert not settings.articleTrigger_is("")

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("RELOADED_FIX_ARTICLES", "false")
        assert AppSettings().fix_articles is False
