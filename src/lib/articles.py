"""
Indefinite article corrector

Rewrites a standalone "a"/"A" to "an"/"An" when the next word starts with a
vowel or "h". Glued punctuation stays part of its word, so "a," is never
rewritten and "a apple." keeps its period.
"""

from typing import List, Optional

from ..config import AppSettings, appsettings
from ..models.text import Word
from .log import LOG

ARTICLES = ('a', 'A')


class ArticleCorrector:
    """
    Article corrector

    Attributes:
        settings: AppSettings providing the article trigger characters
        articles_corrected: Rewrites made during the last process() call
    """

    def __init__(self, settings: Optional[AppSettings] = None) -> None:
        self.settings = settings or appsettings
        self.articles_corrected = 0

    def process(self, text: str) -> str:
        """
        Correct "a" before vowel or "h" initial words

        Single left-to-right pass; a rewritten article is not examined
        again. Whitespace is collapsed to single spaces.

        Example:
            >>> ArticleCorrector().process("There it was. A amazing rock!")
            'There it was. An amazing rock!'
        """
        self.articles_corrected = 0
        words: List[Word] = [Word.token_parse(token) for token in text.split()]

        for current, following in zip(words, words[1:]):
            if current.trailing or current.core not in ARTICLES:
                continue
            if self.settings.articleTrigger_is(following.first):
                current.core += 'n'
                self.articles_corrected += 1

        LOG(f"Corrected {self.articles_corrected} article(s)", level=2)
        return ' '.join(str(word) for word in words)
