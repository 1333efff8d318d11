from abc import ABC, abstractmethod
from typing import List

from .models import RemoteValidationResult

class IVersionControl(ABC):
    """
    Contract for the repository operations a release needs.
    Abstracts the git command line.
    """

    @abstractmethod
    def pending_changes(self) -> List[str]:
        """Porcelain status lines; empty when the tree is clean."""
        pass

    @abstractmethod
    def current_commit(self) -> str:
        pass

    @abstractmethod
    def commit_all(self, message: str) -> None:
        """Stages everything and commits."""
        pass

    @abstractmethod
    def push(self) -> None:
        pass

    @abstractmethod
    def create_tag(self, tag: str) -> None:
        pass

    @abstractmethod
    def push_tags(self) -> None:
        pass

class IRegistryClient(ABC):
    """
    Contract for the package registry.
    """

    @abstractmethod
    def validate_remote(self, commit_sha: str, version: str) -> RemoteValidationResult:
        """Server-side namespace validation of a pushed commit."""
        pass

    @abstractmethod
    def finalize(self, version: str) -> None:
        """Publishes the tagged release."""
        pass

class IPrompt(ABC):
    @abstractmethod
    def ask(self, question: str) -> str:
        """Returns the user's answer without the trailing newline."""
        pass

    def confirm(self, question: str) -> bool:
        return self.ask(question).strip().lower() in ("y", "yes")
