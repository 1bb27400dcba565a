"""
Interpreter for inline (directive) markers

Applies reloaded directives to the words that precede them and removes the
markers from the text.

Marker forms:
    word (up)            -> one preceding word
    two words (cap, 2)   -> scope given by a second "N)" token
    two words (cap,2)    -> compact single-token form of the above

The interpreter makes a single forward pass over the whitespace tokens,
building the output list as it goes. A directive rewrites the tail of the
output list, so a directive that immediately follows another one sees the
already transformed words (markers chain left to right).

Malformed markers never raise:
    - an unknown operation leaves the token in the text as a plain word
    - a scope larger than the words available is truncated at the start
    - a "(op," marker whose count token does not parse keeps scope 1 and
      leaves the count token in the text

Example:
    >>> Interpreter().process("it was the age of foolishness (cap, 6)")
    'It Was The Age Of Foolishness'
"""

import re
from typing import List, Optional

from ..models.directives import Directive
from .directives import DirectiveRegistry
from .log import LOG

_COUNT = re.compile(r'[+-]?[0-9]+')
_COMPACT = re.compile(r'([^,]*),([+-]?[0-9]+)')


def tokens_split(text: str) -> List[str]:
    """Split text on runs of whitespace (spaces, tabs and newlines)"""
    return text.split()


def count_parse(token: str) -> Optional[int]:
    """
    Parse the count of a paired marker from a token like "2)"

    Returns:
        The integer count, or None if the token is not a plain integer
    """
    value = token.strip('()')
    if not _COUNT.fullmatch(value):
        return None
    return int(value)


class Interpreter:
    """
    Directive interpreter

    Attributes:
        registry: DirectiveRegistry resolving marker names to transforms
        directives_applied: Markers recognized during the last process() call
        words_transformed: Words rewritten during the last process() call
    """

    def __init__(self, registry: Optional[DirectiveRegistry] = None) -> None:
        if registry is None:
            registry = DirectiveRegistry()
        self.registry = registry
        self.directives_applied = 0
        self.words_transformed = 0

    def directive_parse(self, tokens: List[str], index: int) -> Optional[Directive]:
        """
        Recognize a directive marker at ``tokens[index]``

        Args:
            tokens: Full token stream
            index: Position of the candidate marker

        Returns:
            Directive describing the marker, or None if the token is not one

        Example:
            >>> Interpreter().directive_parse(["ff", "(hex)"], 1)
            Directive(kind=<DirectiveKind.HEX: 'hex'>, scope=1, is_paired=False, position=1, width=1)
        """
        token = tokens[index]
        if not token.startswith('('):
            return None

        scope = 1
        is_paired = False
        width = 1

        if token.endswith(')'):
            name = token.strip('()')
            compact = _COMPACT.fullmatch(name)
            if compact:
                name = compact.group(1)
                scope = int(compact.group(2))
                is_paired = True
        elif token.endswith(',') and index + 1 < len(tokens) and tokens[index + 1].endswith(')'):
            name = token.strip('(,')
            count = count_parse(tokens[index + 1])
            if count is not None:
                scope = count
                is_paired = True
                width = 2
            else:
                LOG(f"Unparseable count {tokens[index + 1]!r} for {token!r}, using scope 1", level=3)
        else:
            return None

        spec = self.registry.spec_get(name)
        if spec is None:
            return None

        return Directive(kind=spec.kind, scope=scope, is_paired=is_paired, position=index, width=width)

    def scope_apply(self, directive: Directive, words: List[str]) -> int:
        """
        Apply a directive to the last ``directive.scope`` entries of ``words``

        Words are rewritten in place, nearest first. Application stops at
        the start of the list without error.

        Returns:
            Number of words rewritten
        """
        transform = self.registry.transform_get(directive.kind)
        reach = min(directive.scope, len(words))
        for offset in range(1, reach + 1):
            words[-offset] = transform(words[-offset])
        return max(reach, 0)

    def process(self, text: str) -> str:
        """
        Apply and remove all directives in ``text``

        Args:
            text: Raw input text

        Returns:
            Text with directives applied, markers removed and whitespace
            collapsed to single spaces
        """
        self.directives_applied = 0
        self.words_transformed = 0

        tokens = tokens_split(text)
        output: List[str] = []
        index = 0

        while index < len(tokens):
            directive = self.directive_parse(tokens, index)
            if directive is None:
                output.append(tokens[index])
                index += 1
                continue

            changed = self.scope_apply(directive, output)
            LOG(
                f"({directive.kind.value}) at token {directive.position}: scope {directive.scope}, "
                f"{changed} word(s) rewritten",
                level=3,
            )
            self.directives_applied += 1
            self.words_transformed += changed
            index += directive.width

        LOG(f"Applied {self.directives_applied} directive(s) to {self.words_transformed} word(s)", level=2)
        return ' '.join(output)
