from abc import ABC, abstractmethod
from pathlib import Path

from jarpack.core.common.enums import SourceLanguage
from .models import ExtractionOutcome

class ISourceReader(ABC):
    @abstractmethod
    def read_text(self, path: Path) -> str:
        """
        Returns the decoded file content.
        Raises OSError / UnicodeDecodeError on failure.
        """
        pass

class IDeclarationParser(ABC):
    @abstractmethod
    def parse(self, content: str, language: SourceLanguage) -> ExtractionOutcome:
        """Finds the package statement in already-read source text."""
        pass
