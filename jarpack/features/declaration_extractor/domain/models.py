from dataclasses import dataclass
from typing import Tuple, Union

DEFAULT_LABEL = "(default)"

@dataclass(frozen=True)
class NamespaceValue:
    """
    Value Object for a dotted package name.
    The empty tuple is the default (unnamed) package.
    """
    segments: Tuple[str, ...] = ()

    @classmethod
    def parse(cls, dotted: str) -> "NamespaceValue":
        if not dotted:
            return cls()
        return cls(tuple(dotted.split(".")))

    @property
    def is_empty(self) -> bool:
        return not self.segments

    @property
    def dotted(self) -> str:
        return ".".join(self.segments)

    @property
    def label(self) -> str:
        """Display form used in messages."""
        return self.dotted or DEFAULT_LABEL

    def __str__(self) -> str:
        return self.dotted

# --- Extraction outcomes ---

@dataclass(frozen=True)
class Declared:
    """Zero or one package statement: the (possibly empty) namespace."""
    value: NamespaceValue

@dataclass(frozen=True)
class Unreadable:
    """The file could not be opened or decoded."""
    cause: str

@dataclass(frozen=True)
class Malformed:
    """One package statement whose name could not be parsed."""
    line: str

@dataclass(frozen=True)
class Duplicate:
    """More than one package statement."""
    count: int

ExtractionOutcome = Union[Declared, Unreadable, Malformed, Duplicate]
