from pathlib import Path
from ..domain.interfaces import ISourceReader

class Utf8SourceReader(ISourceReader):
    """
    Strict UTF-8 (a leading BOM is dropped).
    Undecodable bytes are a read failure, not replaced.
    """

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8-sig")
