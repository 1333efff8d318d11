# File: jarpack/core/common/enums.py

from enum import Enum, unique

@unique
class SourceLanguage(str, Enum):
    JAVA = "java"
    KOTLIN = "kotlin"

    @property
    def extension(self) -> str:
        return ".kt" if self is SourceLanguage.KOTLIN else ".java"

    @property
    def requires_terminator(self) -> bool:
        """Java closes the package statement with ';', Kotlin does not."""
        return self is SourceLanguage.JAVA

    @classmethod
    def from_suffix(cls, suffix: str):
        for language in cls:
            if language.extension == suffix:
                return language
        return None

@unique
class Severity(str, Enum):
    PASS = "pass"
    ERROR = "error"
    WARNING = "warning"

@unique
class BumpType(str, Enum):
    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"

@unique
class DeployResult(str, Enum):
    DEPLOYED = "deployed"
    DRY_RUN = "dry_run"
    CANCELLED = "cancelled"
    PUSHED_NOT_TAGGED = "pushed_not_tagged"
