from dataclasses import dataclass
from typing import Optional

from jarpack.core.common.enums import BumpType
from jarpack.core.exceptions import InvalidVersion

@dataclass(frozen=True)
class Version:
    """
    Value Object for a MAJOR.MINOR.PATCH release number.
    Missing trailing components count as 0 ("1.2" == "1.2.0").
    """
    major: int
    minor: int = 0
    patch: int = 0

    @classmethod
    def parse(cls, text: str) -> "Version":
        parts = text.strip().split(".") if text else []
        if not parts or len(parts) > 3 or not all(p.isdecimal() for p in parts):
            raise InvalidVersion(f"Not a MAJOR.MINOR.PATCH version: '{text}'")
        numbers = [int(p) for p in parts] + [0] * (3 - len(parts))
        return cls(*numbers)

    def bump(self, bump: BumpType) -> "Version":
        if bump is BumpType.MAJOR:
            return Version(self.major + 1, 0, 0)
        if bump is BumpType.MINOR:
            return Version(self.major, self.minor + 1, 0)
        return Version(self.major, self.minor, self.patch + 1)

    @property
    def tag(self) -> str:
        return f"v{self}"

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

@dataclass(frozen=True)
class DeployRequest:
    """
    User intent to release. `version` None means "ask or bump the patch level".
    """
    version: Optional[str] = None
    dry_run: bool = False
    skip_confirmations: bool = False

@dataclass
class RemoteValidationResult:
    success: bool
    errors: list
    warnings: list
