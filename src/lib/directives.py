"""
Directive implementations for reloaded

Each directive transforms a single word. The registry maps every
DirectiveKind to a DirectiveSpec carrying its transform and metadata.
"""

import re
from typing import Callable, Dict, List, Optional

from ..models.directives import DirectiveKind, DirectiveSpec

_HEX_DIGITS = re.compile(r'[+-]?[0-9a-fA-F]+')
_BIN_DIGITS = re.compile(r'[+-]?[01]+')
_RUN_FIRST_LETTER = re.compile(r'(^|\s)(\S*?)([^\W\d_])')


def number_convert(word: str, base: int, digits: re.Pattern) -> str:
    """
    Convert a word written in ``base`` to its decimal representation

    Only plain digits of the base with an optional sign are accepted; no
    "0x"/"0b" prefixes, underscores or surrounding whitespace. Anything
    else converts to "0".

    Example:
        >>> number_convert('ff', 16, _HEX_DIGITS)
        '255'
        >>> number_convert('zz', 16, _HEX_DIGITS)
        '0'
    """
    if not digits.fullmatch(word):
        return "0"
    return str(int(word, base))


def hex_convert(word: str) -> str:
    return number_convert(word, 16, _HEX_DIGITS)


def bin_convert(word: str) -> str:
    return number_convert(word, 2, _BIN_DIGITS)


def word_upper(word: str) -> str:
    return word.upper()


def word_lower(word: str) -> str:
    return word.lower()


def word_capitalize(word: str) -> str:
    """
    Lowercase, then uppercase the first letter of each whitespace run

    Leading quotes, brackets or digits are skipped:
        >>> word_capitalize("'brooklyn")
        "'Brooklyn"
    """
    return _RUN_FIRST_LETTER.sub(
        lambda m: m.group(1) + m.group(2) + m.group(3).upper(), word.lower()
    )


class DirectiveRegistry:
    """
    Registry of directive specifications and transforms

    Maps directive kinds (and their marker names) to DirectiveSpec objects.
    The set of kinds is closed: every DirectiveKind is registered here and
    nothing else can be looked up.
    """

    def __init__(self) -> None:
        """Initialize the directive registry and register all built-in directives"""
        self.specs: Dict[DirectiveKind, DirectiveSpec] = {}
        self.numberDirectives_register()
        self.caseDirectives_register()

    def register(self, spec: DirectiveSpec) -> None:
        """Register a directive specification"""
        self.specs[spec.kind] = spec

    def get(self, name: str) -> Optional[Callable[[str], str]]:
        """
        Get directive transform by marker name

        Args:
            name: Marker name to look up (e.g. "hex")

        Returns:
            Transform function or None if the name is not a directive
        """
        spec = self.spec_get(name)
        return spec.transform if spec else None

    def spec_get(self, name: str) -> Optional[DirectiveSpec]:
        """Get full directive specification by marker name"""
        kind = DirectiveKind.name_resolve(name)
        if kind is None:
            return None
        return self.specs.get(kind)

    def transform_get(self, kind: DirectiveKind) -> Callable[[str], str]:
        """Get the transform for a kind that is known to be registered"""
        return self.specs[kind].transform

    def names_list(self) -> List[str]:
        """All registered marker names, in registration order"""
        return [spec.name for spec in self.specs.values()]

    def numberDirectives_register(self) -> None:
        """Register numeric base conversion directives"""

        self.register(DirectiveSpec(
            kind=DirectiveKind.HEX,
            description='Convert a hexadecimal word to decimal',
            transform=hex_convert,
            examples=['1E (hex) files were added', 'ff ff (hex, 2)'],
        ))

        self.register(DirectiveSpec(
            kind=DirectiveKind.BIN,
            description='Convert a binary word to decimal',
            transform=bin_convert,
            examples=['It has been 10 (bin) years'],
        ))

    def caseDirectives_register(self) -> None:
        """Register case folding directives"""

        case_specs = [
            (DirectiveKind.UP, word_upper, 'Uppercase', ['Ready, set, go (up) !']),
            (DirectiveKind.LOW, word_lower, 'Lowercase', ['I should stop SHOUTING (low)']),
            (DirectiveKind.CAP, word_capitalize, 'Capitalize', ['Welcome to the brooklyn bridge (cap)']),
        ]

        for kind, transform, desc, examples in case_specs:
            self.register(DirectiveSpec(
                kind=kind,
                description=desc,
                transform=transform,
                examples=examples,
            ))
