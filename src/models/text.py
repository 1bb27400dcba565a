"""
Text-level data models

Type-safe structures shared by the normalizer and corrector stages.
"""

import re
from dataclasses import dataclass

_TRAILING_PUNCTUATION = re.compile(r"^(.*?)([.,!?:;]*)$", re.DOTALL)


@dataclass
class Word:
    """
    A whitespace token split into its text and glued trailing punctuation

    After punctuation normalization, marks are glued to the word before
    them ("world," or "really?!"). Splitting them off explicitly lets a
    token-based stage inspect the word without losing the glued marks
    when the text is joined back together.

    Attributes:
        core: Token text without trailing punctuation
        trailing: Trailing run of punctuation marks (may be empty)

    Example:
        >>> Word.token_parse("world,")
        Word(core='world', trailing=',')
        >>> str(Word.token_parse("world,"))
        'world,'
    """
    core: str
    trailing: str = ""

    @classmethod
    def token_parse(cls, token: str) -> "Word":
        match = _TRAILING_PUNCTUATION.match(token)
        return cls(core=match.group(1), trailing=match.group(2))

    @property
    def first(self) -> str:
        """First character of the rendered token, or '' for an empty token"""
        return str(self)[:1]

    def __str__(self) -> str:
        return f"{self.core}{self.trailing}"
