"""
Processor for reloaded text

Runs the stages in order and finalizes the result:

    Interpreter -> PunctuationNormalizer -> ArticleCorrector -> newline

Every stage is a pure function of its input text; the processor never
raises on any input.
"""

from typing import Any, Dict, Optional

from ..config import AppSettings, appsettings
from .articles import ArticleCorrector
from .directives import DirectiveRegistry
from .interpreter import Interpreter
from .log import LOG, state_connectToLogger
from .punctuation import PunctuationNormalizer


def text_finalize(text: str) -> str:
    """
    Ensure the text ends with exactly one newline

    Example:
        >>> text_finalize("done")
        'done\\n'
        >>> text_finalize("done\\n\\n")
        'done\\n'
    """
    return text.rstrip('\n') + '\n'


class Processor:
    """
    Runs the reloaded pipeline over one in-memory text

    Responsibilities:
    - Apply directives
    - Normalize punctuation and quote spacing
    - Correct indefinite articles (unless disabled in settings)
    - Guarantee a single trailing newline
    """

    def __init__(
        self,
        verbosity: int = 1,
        settings: Optional[AppSettings] = None,
        registry: Optional[DirectiveRegistry] = None,
    ) -> None:
        """
        Initialize processor

        Args:
            verbosity: Output verbosity level (0-3)
            settings: AppSettings to use (defaults to the appsettings singleton)
            registry: DirectiveRegistry to use (defaults to the built-ins)
        """
        self.verbosity = verbosity
        self.settings = settings or appsettings
        self.interpreter = Interpreter(registry)
        self.normalizer = PunctuationNormalizer(self.settings)
        self.corrector = ArticleCorrector(self.settings)

    def process(self, text: str, connect: bool = False) -> Dict[str, Any]:
        """
        Process text through every stage

        Args:
            text: Raw input text
            connect: Connect this processor's verbosity to the logger
                     (used when no ProgramState drives the run)

        Returns:
            dict with the processed text and per-stage statistics
        """
        if connect:
            state_connectToLogger(self)

        LOG(f"Processing {len(text)} characters", level=2)

        text = self.interpreter.process(text)
        text = self.normalizer.process(text)

        articles_corrected = 0
        if self.settings.fix_articles:
            text = self.corrector.process(text)
            articles_corrected = self.corrector.articles_corrected
        else:
            LOG("Article correction disabled", level=2)

        text = text_finalize(text)

        return {
            'status': True,
            'text': text,
            'directives_applied': self.interpreter.directives_applied,
            'words_transformed': self.interpreter.words_transformed,
            'articles_corrected': articles_corrected,
        }


def text_process(text: str, settings: Optional[AppSettings] = None) -> str:
    """
    Process text and return only the result string

    Example:
        >>> text_process("go home (up, 2) now")
        'GO HOME now\\n'
    """
    return Processor(verbosity=0, settings=settings).process(text)['text']
