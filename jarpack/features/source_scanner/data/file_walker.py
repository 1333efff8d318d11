import os
from pathlib import Path
from typing import Iterator
from ..domain.interfaces import IFileWalker
from .ignore_rules import IgnoreRules

class LocalFileWalker(IFileWalker):
    """
    os.walk based implementation. Entries are sorted so the same tree
    always yields the same order.
    """

    def walk(self, root: Path) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(root):
            # Modifying 'dirnames' in place tells os.walk what to descend into
            dirnames[:] = sorted(d for d in dirnames if not IgnoreRules.should_skip_dir(d))

            for filename in sorted(filenames):
                file_path = Path(dirpath) / filename
                if IgnoreRules.is_source_file(file_path):
                    yield file_path
