"""
Models package for reloaded

Contains data structures and type definitions for the processing pipeline.
"""

from .state import ProgramState, pipeline
from .directives import Directive, DirectiveKind, DirectiveSpec
from .text import Word

__all__ = [
    "ProgramState",
    "pipeline",
    "Directive",
    "DirectiveKind",
    "DirectiveSpec",
    "Word",
]
