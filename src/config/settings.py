"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use RELOADED_ prefix (e.g., RELOADED_FIX_ARTICLES=false).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use RELOADED_ prefix.

    Examples:
        RELOADED_FIX_ARTICLES=false
        RELOADED_COLLAPSE_QUOTES=false
        RELOADED_ENCODING=latin-1
    """

    model_config = SettingsConfigDict(
        env_prefix="RELOADED_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Punctuation normalizer configuration
    punctuation_marks: str = Field(
        default=".,!?:;",
        description="Marks glued to the preceding word and followed by one space",
    )

    quote_char: str = Field(
        default="'",
        description="Quotation mark whose inner padding is collapsed",
    )

    collapse_quotes: bool = Field(
        default=True,
        description="Collapse spaces inside single-quote pairs",
    )

    # Article corrector configuration
    article_triggers: str = Field(
        default="aeiouAEIOUhH",
        description="Leading characters that turn a preceding 'a' into 'an'",
    )

    fix_articles: bool = Field(
        default=True,
        description="Run the a/an article correction stage",
    )

    # I/O configuration
    encoding: str = Field(
        default="utf-8",
        description="Encoding used to read the source and write the result",
    )

    def punctuation_is(self, char: str) -> bool:
        """
        Check whether a single character is a normalized punctuation mark.

        Example:
            >>> settings = AppSettings()
            >>> settings.punctuation_is(',')
            True
            >>> settings.punctuation_is("'")
            False
        """
        return len(char) == 1 and char in self.punctuation_marks

    def articleTrigger_is(self, word: str) -> bool:
        """
        Check whether a word starts with a sound that requires 'an'.

        Args:
            word: The word following a candidate article

        Returns:
            True if the first character is one of the article triggers

        Example:
            >>> settings = AppSettings()
            >>> settings.articleTrigger_is('hour')
            True
            >>> settings.articleTrigger_is('banana')
            False
        """
        return bool(word) and word[0] in self.article_triggers


# Singleton instance - import this in your code
appsettings = AppSettings()
