"""
Punctuation and quotation spacing normalizer

Two character-stream passes over the interpreted text:

1. Glue: spaces before a mark (.,!?:;) are dropped so the mark attaches to
   the preceding word; a mark followed directly by a word gets one space.
   Runs of marks ("?!", "...") stay together.

2. Quotes: free-standing single quotes are paired left to right. The
   opening quote loses the spaces after it and the closing quote the
   spaces before it, so "' word '" becomes "'word'". A quote with a
   letter or digit on both sides ("don't") is an apostrophe and is left
   alone. The pass repeats until nothing changes.

Example:
    >>> PunctuationNormalizer().process("hello , world ' hi '")
    "hello, world 'hi'"
"""

from typing import List, Optional

from ..config import AppSettings, appsettings
from .log import LOG


class PunctuationNormalizer:
    """
    Punctuation normalizer

    Attributes:
        settings: AppSettings providing the marks, quote and quote toggle
    """

    def __init__(self, settings: Optional[AppSettings] = None) -> None:
        self.settings = settings or appsettings

    def punctuation_glue(self, text: str) -> str:
        """
        Glue marks to the preceding word and space them from the next one

        Example:
            >>> PunctuationNormalizer().punctuation_glue("hello .world")
            'hello. world'
        """
        settings = self.settings
        result: List[str] = []
        length = len(text)

        for pos, char in enumerate(text):
            if char == ' ':
                # Drop the whole run of spaces if a mark follows it
                ahead = pos
                while ahead < length and text[ahead] == ' ':
                    ahead += 1
                if ahead < length and settings.punctuation_is(text[ahead]):
                    continue

            result.append(char)

            if settings.punctuation_is(char) and pos + 1 < length:
                following = text[pos + 1]
                if following != ' ' and not settings.punctuation_is(following):
                    result.append(' ')

        return ''.join(result)

    def quotes_find(self, text: str) -> List[int]:
        """
        Positions of free-standing quotes in ``text``

        A quote with an alphanumeric character on both sides is treated as
        an apostrophe and skipped.
        """
        quote = self.settings.quote_char
        positions = []
        for pos, char in enumerate(text):
            if char != quote:
                continue
            before = text[pos - 1] if pos > 0 else ''
            after = text[pos + 1] if pos + 1 < len(text) else ''
            if before.isalnum() and after.isalnum():
                continue
            positions.append(pos)
        return positions

    def quotes_collapsePass(self, text: str) -> str:
        """
        One pass of quote padding removal over all quote pairs

        An unmatched final quote is left as it is.
        """
        positions = self.quotes_find(text)
        drop = set()

        for opening, closing in zip(positions[0::2], positions[1::2]):
            pos = opening + 1
            while pos < closing and text[pos] == ' ':
                drop.add(pos)
                pos += 1
            pos = closing - 1
            while pos > opening and text[pos] == ' ':
                drop.add(pos)
                pos -= 1

        return ''.join(char for pos, char in enumerate(text) if pos not in drop)

    def quotes_collapse(self, text: str) -> str:
        """
        Collapse quote padding until a fixed point is reached

        Example:
            >>> PunctuationNormalizer().quotes_collapse("' hi '")
            "'hi'"
        """
        passes = 0
        while True:
            collapsed = self.quotes_collapsePass(text)
            passes += 1
            if collapsed == text:
                break
            text = collapsed
        LOG(f"Quote padding settled after {passes} pass(es)", level=3)
        return text

    def process(self, text: str) -> str:
        """
        Normalize punctuation and quote spacing

        Args:
            text: Text produced by the Interpreter

        Returns:
            Normalized text; applying process() again returns it unchanged
        """
        text = self.punctuation_glue(text)
        if self.settings.collapse_quotes:
            text = self.quotes_collapse(text)
        return text
