from dataclasses import dataclass
from pathlib import Path

from jarpack.core.common.enums import SourceLanguage
from jarpack.core.exceptions import RootNotFound

@dataclass(frozen=True)
class ScanRequest:
    """
    Intent to scan a source tree.
    """
    root_path: Path

    def __post_init__(self):
        if not self.root_path.is_dir():
            raise RootNotFound(self.root_path)

@dataclass(frozen=True)
class SourceFile:
    """
    A discovered Java/Kotlin file.
    `path` is the root joined with `relative_path`, so messages show
    paths the way the user typed the root (e.g. src/foo/Bar.java).
    """
    path: Path
    relative_path: Path
    language: SourceLanguage

    @property
    def directory_parts(self):
        return self.relative_path.parent.parts
