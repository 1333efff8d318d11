import logging

from jarpack.core.common.enums import SourceLanguage
from jarpack.features.source_scanner.domain.models import SourceFile

from ..domain.models import ExtractionOutcome, Unreadable
from ..data.text_reader import Utf8SourceReader
from ..data.declaration_parser import LinePrefixDeclarationParser

logger = logging.getLogger(__name__)

class DeclarationExtractor:
    """
    Facade for the Declaration Extractor feature.
    Mode-agnostic: an absent declaration is reported as the empty namespace,
    deciding whether that is acceptable is the checker's job.
    """

    def __init__(self, reader=None, parser=None):
        self.reader = reader or Utf8SourceReader()
        self.parser = parser or LinePrefixDeclarationParser()

    def extract(self, source: SourceFile) -> ExtractionOutcome:
        try:
            content = self.reader.read_text(source.path)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Cannot read {source.path}: {e}")
            return Unreadable(str(e))

        return self.parser.parse(content, source.language)


_extractor = DeclarationExtractor()

def extract_declaration(source: SourceFile) -> ExtractionOutcome:
    """
    Public Service API: read one file and return its ExtractionOutcome.
    """
    return _extractor.extract(source)

def parse_declaration(content: str, language: SourceLanguage) -> ExtractionOutcome:
    """
    Standalone API: same rules applied to text that is already in memory.
    """
    return _extractor.parser.parse(content, language)
