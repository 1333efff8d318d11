from pathlib import Path

from jarpack.core.common.enums import SourceLanguage

class IgnoreRules:
    """
    Central logic for what the scanner should skip.
    Mirrors shell globbing: dot-entries are never matched.
    """

    SOURCE_EXTENSIONS = {language.extension for language in SourceLanguage}

    @classmethod
    def should_skip_dir(cls, name: str) -> bool:
        return name.startswith(".")

    @classmethod
    def is_source_file(cls, path: Path) -> bool:
        """
        Returns True for visible regular files with a recognized extension.
        Extensions are case-sensitive (Foo.JAVA is not a source file).
        """
        if path.name.startswith("."):
            return False
        if path.suffix not in cls.SOURCE_EXTENSIONS:
            return False
        return path.is_file()
