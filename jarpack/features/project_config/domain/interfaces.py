from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from .models import ProjectConfig

class IConfigStore(ABC):
    @abstractmethod
    def load(self, path: Path) -> Optional[ProjectConfig]:
        """
        Returns None when the file does not exist.
        Raises ConfigError when it exists but is not a valid config.
        """
        pass

    @abstractmethod
    def save(self, path: Path, config: ProjectConfig) -> None:
        pass
