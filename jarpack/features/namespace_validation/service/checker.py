from jarpack.features.declaration_extractor.domain.models import (
    Declared,
    Duplicate,
    ExtractionOutcome,
    Malformed,
    NamespaceValue,
    Unreadable,
)
from jarpack.features.source_scanner.domain.models import SourceFile

from ..domain.models import PathMode, PrefixMode, ValidationMode, ValidationOutcome


def expected_namespace(source: SourceFile) -> NamespaceValue:
    """Directory of the file relative to the root; root-level files get the default package."""
    return NamespaceValue(tuple(source.directory_parts))


class ConsistencyChecker:
    """
    Decides pass / error / warning for one file.
    Stateless: safe to call from several worker threads.
    """

    def __init__(self, mode: ValidationMode):
        if not isinstance(mode, (PrefixMode, PathMode)):
            raise TypeError(f"Unknown validation mode: {mode!r}")
        self.mode = mode

    def check(self, source: SourceFile, extraction: ExtractionOutcome) -> ValidationOutcome:
        # 1. Extraction failures are errors in every mode
        if isinstance(extraction, Unreadable):
            return ValidationOutcome.error(source, f"Cannot read file {source.path}: {extraction.cause}")
        if isinstance(extraction, Duplicate):
            return ValidationOutcome.error(source, f"{source.path}: Multiple package declarations found")
        if isinstance(extraction, Malformed):
            return ValidationOutcome.error(source, f"{source.path}: Malformed package declaration: '{extraction.line}'")
        if not isinstance(extraction, Declared):
            raise TypeError(f"Unknown extraction outcome: {extraction!r}")

        # 2. Mode-specific rules
        if isinstance(self.mode, PrefixMode):
            return self._check_prefix(source, extraction.value, self.mode)
        return self._check_path(source, extraction.value, self.mode)

    def _check_prefix(self, source: SourceFile, actual: NamespaceValue, mode: PrefixMode) -> ValidationOutcome:
        if actual.is_empty:
            return ValidationOutcome.error(
                source,
                f"{source.path}: Missing package declaration! Expected package starting with '{mode.prefix}'"
            )

        if mode.covers(actual.dotted):
            return ValidationOutcome.passed(source)

        return ValidationOutcome.error(
            source,
            f"{source.path}: Expected package starting with '{mode.prefix}', found '{actual.label}'"
        )

    def _check_path(self, source: SourceFile, actual: NamespaceValue, mode: PathMode) -> ValidationOutcome:
        expected = expected_namespace(source)

        if actual != expected:
            return ValidationOutcome.error(
                source,
                f"{source.path}: Expected package '{expected.label}', found '{actual.label}'"
            )

        # Advisory only: the exact path match above already passed
        advisory = mode.advisory_prefix
        if advisory and not actual.is_empty and not PrefixMode(advisory).covers(actual.dotted):
            return ValidationOutcome.warning(
                source,
                f"{source.path}: Package '{actual.dotted}' does not start with '{advisory}'"
            )

        return ValidationOutcome.passed(source)
