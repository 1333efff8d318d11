from abc import ABC, abstractmethod
from typing import TextIO

from .models import RunSummary

class IReportRenderer(ABC):
    """
    Contract for the console narration of a validation run.
    Kept apart from the computation so callers can run silently.
    """

    @abstractmethod
    def scan_started(self, src_dir: str, out: TextIO) -> None:
        pass

    @abstractmethod
    def no_sources(self, src_dir: str, out: TextIO) -> None:
        pass

    @abstractmethod
    def summary(self, summary: RunSummary, out: TextIO) -> None:
        pass
