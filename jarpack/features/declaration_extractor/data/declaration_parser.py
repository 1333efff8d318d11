import re
from typing import List

from jarpack.core.common.enums import SourceLanguage
from ..domain.interfaces import IDeclarationParser
from ..domain.models import Declared, Duplicate, ExtractionOutcome, Malformed, NamespaceValue

COMMENT_MARKERS = ("//", "/*")

PACKAGE_LINE = re.compile(r"^\s*package\s+")

# Java:   package abc.def;  (terminator required)
# Kotlin: package abc.def   (no terminator)
STRICT_DECLARATION = re.compile(r"^\s*package\s+([a-zA-Z0-9_.]+)\s*;")
TERSE_DECLARATION = re.compile(r"^\s*package\s+([a-zA-Z0-9_.]+)")


class LinePrefixDeclarationParser(IDeclarationParser):
    """
    Heuristic package finder. Not a lexer.

    A line is ignored when, after stripping leading whitespace, it starts
    with `//` or `/*`. Known limitations:
      * a declaration inside a multi-line block comment is still found
        unless its own line starts with a comment marker;
      * a declaration sharing a line with preceding code is not found.
    """

    def parse(self, content: str, language: SourceLanguage) -> ExtractionOutcome:
        package_lines = self._package_lines(content)

        if not package_lines:
            return Declared(NamespaceValue())

        if len(package_lines) > 1:
            return Duplicate(len(package_lines))

        line = package_lines[0]
        pattern = STRICT_DECLARATION if language.requires_terminator else TERSE_DECLARATION
        match = pattern.match(line)
        if not match:
            return Malformed(line.strip())

        return Declared(NamespaceValue.parse(match.group(1)))

    def _package_lines(self, content: str) -> List[str]:
        candidates = []
        # Only "\n" ends a line; other Unicode line breaks stay inside it
        for line in content.split("\n"):
            if line.strip().startswith(COMMENT_MARKERS):
                continue
            if PACKAGE_LINE.match(line):
                candidates.append(line)
        return candidates
