"""
Directive specification and metadata models

Defines the closed set of reloaded directive kinds, the registry metadata
attached to each kind, and the transient structure produced when a marker
is recognized in the token stream.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Callable, List, Optional


class DirectiveKind(Enum):
    """
    Closed set of directive operations

    The enum value is the marker name written between the parentheses.
    """
    HEX = "hex"     # (hex)  base-16 -> decimal
    BIN = "bin"     # (bin)  base-2 -> decimal
    UP = "up"       # (up)   uppercase
    LOW = "low"     # (low)  lowercase
    CAP = "cap"     # (cap)  capitalize

    @classmethod
    def name_resolve(cls, name: str) -> Optional["DirectiveKind"]:
        """Map a marker name to its kind, or None if it is not a directive"""
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass
class DirectiveSpec:
    """
    Specification for a reloaded directive

    Defines metadata and the word transform for one directive kind.
    Used by DirectiveRegistry to manage available directives.

    Attributes:
        kind: Directive kind this spec implements
        description: Human-readable description
        transform: Word transform function (word) -> word
        examples: Example usage strings
    """
    kind: DirectiveKind
    description: str
    transform: Callable[[str], str]
    examples: List[str] = field(default_factory=list)

    @property
    def name(self) -> str:
        """Marker name (e.g. 'hex')"""
        return self.kind.value


@dataclass
class Directive:
    """
    A directive recognized in the token stream

    Never persisted: recognized, applied and discarded within one pass.

    Attributes:
        kind: Operation to apply
        scope: Number of preceding words affected
        is_paired: True if the scope came from a separate "N)" token
        position: Token index of the marker
        width: Number of tokens the marker occupies (and is removed)

    Example:
        For tokens ["go", "home", "(up,", "2)"] at index 2:
        Directive(kind=DirectiveKind.UP, scope=2, is_paired=True,
                  position=2, width=2)
    """
    kind: DirectiveKind
    scope: int = 1
    is_paired: bool = False
    position: int = 0
    width: int = 1
