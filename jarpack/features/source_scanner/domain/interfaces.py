from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator

class IFileWalker(ABC):
    """
    Contract for traversing a source tree.
    """
    @abstractmethod
    def walk(self, root: Path) -> Iterator[Path]:
        """
        Yields candidate source files one by one, in a deterministic order.
        Should handle filtering of hidden entries and foreign extensions internally.
        """
        pass
