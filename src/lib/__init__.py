"""
reloaded - Inline directive text post-processor

Applies (directive) markers, normalizes punctuation and fixes a/an articles.
"""

__version__ = "1.0.0"

from .interpreter import Interpreter
from .punctuation import PunctuationNormalizer
from .articles import ArticleCorrector
from .processor import Processor, text_process, text_finalize
from .directives import DirectiveRegistry
from .log import LOG, state_connectToLogger

__all__ = [
    "Interpreter",
    "PunctuationNormalizer",
    "ArticleCorrector",
    "Processor",
    "text_process",
    "text_finalize",
    "DirectiveRegistry",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
