from typing import Iterable

from ..domain.models import RunSummary, ValidationOutcome

def aggregate(outcomes: Iterable[ValidationOutcome]) -> RunSummary:
    """
    Folds per-file outcomes into a RunSummary.
    Input order is kept; nothing is re-sorted.
    """
    ordered = tuple(outcomes)
    return RunSummary(
        outcomes=ordered,
        errors=[o.message for o in ordered if o.is_error],
        warnings=[o.message for o in ordered if o.is_warning],
    )

def fatal(message: str) -> RunSummary:
    """Summary of a run that could not start."""
    return RunSummary(fatal_error=message)
