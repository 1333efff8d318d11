import logging
from pathlib import Path
from typing import List, Union

from jarpack.core.common.enums import SourceLanguage

from ..domain.models import ScanRequest, SourceFile
from ..data.file_walker import LocalFileWalker

logger = logging.getLogger(__name__)

class SourceScanner:
    """
    Service responsible for discovering Java/Kotlin sources under a root.
    """

    def __init__(self, walker=None):
        self.walker = walker or LocalFileWalker()

    def scan(self, request: ScanRequest) -> List[SourceFile]:
        sources = []
        for file_path in self.walker.walk(request.root_path):
            sources.append(SourceFile(
                path=file_path,
                relative_path=file_path.relative_to(request.root_path),
                language=SourceLanguage.from_suffix(file_path.suffix),
            ))

        logger.debug(f"Discovered {len(sources)} source files under {request.root_path}")
        return sources


def scan_sources(root: Union[str, Path]) -> List[SourceFile]:
    """
    Public Service API: list all .java/.kt files under `root`.

    Raises:
        RootNotFound: if `root` is not an existing directory.
    """
    return SourceScanner().scan(ScanRequest(root_path=Path(root)))
