from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from jarpack.core.common.enums import Severity
from jarpack.features.source_scanner.domain.models import SourceFile

# --- Validation modes ---

@dataclass(frozen=True)
class PrefixMode:
    """
    Every namespace must equal `prefix` or start with `prefix + "."`.
    Directory layout is ignored.
    """
    prefix: str

    def __post_init__(self):
        if not self.prefix:
            raise ValueError("Prefix mode needs a non-empty prefix.")

    def covers(self, dotted: str) -> bool:
        return dotted == self.prefix or dotted.startswith(self.prefix + ".")

@dataclass(frozen=True)
class PathMode:
    """
    Every namespace must equal the dot-joined directory of the file
    relative to the scan root.
    `advisory_prefix` only ever produces warnings.
    """
    advisory_prefix: Optional[str] = None

ValidationMode = Union[PrefixMode, PathMode]

def mode_for(prefix: Optional[str], advisory_prefix: Optional[str] = None) -> ValidationMode:
    """Presence of a prefix selects prefix mode for the whole run."""
    if prefix:
        return PrefixMode(prefix)
    return PathMode(advisory_prefix=advisory_prefix or None)

# --- Per-file outcome ---

@dataclass(frozen=True)
class ValidationOutcome:
    source: SourceFile
    severity: Severity
    message: str = ""

    @classmethod
    def passed(cls, source: SourceFile) -> "ValidationOutcome":
        return cls(source, Severity.PASS)

    @classmethod
    def error(cls, source: SourceFile, message: str) -> "ValidationOutcome":
        return cls(source, Severity.ERROR, message)

    @classmethod
    def warning(cls, source: SourceFile, message: str) -> "ValidationOutcome":
        return cls(source, Severity.WARNING, message)

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

# --- Run summary ---

@dataclass(frozen=True)
class RunSummary:
    """
    Result of one validation run. Outcomes are in discovery order.
    `fatal_error` is set when the run could not start (missing root);
    such a run has no per-file entries.
    """
    outcomes: Tuple[ValidationOutcome, ...] = ()
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    fatal_error: Optional[str] = None

    @property
    def files_checked(self) -> int:
        return len(self.outcomes)

    @property
    def success(self) -> bool:
        return self.fatal_error is None and not self.errors

    @property
    def problems(self) -> List[str]:
        """Everything that made the run fail, run-level message first."""
        if self.fatal_error:
            return [self.fatal_error, *self.errors]
        return list(self.errors)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "files_checked": self.files_checked,
            "errors": self.problems,
            "warnings": list(self.warnings),
        }
