from typing import Optional, TextIO

from jarpack.core.common.enums import BumpType
from jarpack.core.exceptions import DeployError
from jarpack.features.project_config.domain.models import DEFAULT_VERSION

from ..domain.interfaces import IPrompt
from ..domain.models import Version

def increment_version(version: str, bump: BumpType) -> str:
    """'1.2.3' -> '1.2.4' (patch), '1.3.0' (minor), '2.0.0' (major)."""
    return str(Version.parse(version).bump(BumpType(bump)))

def next_version(current: Optional[str]) -> str:
    return increment_version(current or DEFAULT_VERSION, BumpType.PATCH)

CHOICES = {
    "1": BumpType.PATCH,
    "2": BumpType.MINOR,
    "3": BumpType.MAJOR,
}

def select_version(current: Optional[str], prompt: IPrompt, out: TextIO) -> str:
    """
    Interactive version picker: patch / minor / major / custom.
    """
    current = current or DEFAULT_VERSION

    out.write("\n📈 Version Selection:\n")
    out.write(f"   Current: {current}\n")
    out.write(f"   [1] Patch: {increment_version(current, BumpType.PATCH)}\n")
    out.write(f"   [2] Minor: {increment_version(current, BumpType.MINOR)}\n")
    out.write(f"   [3] Major: {increment_version(current, BumpType.MAJOR)}\n")
    out.write("   [4] Custom version\n")
    out.flush()

    choice = prompt.ask("   Choose [1-4]: ").strip()
    if choice in CHOICES:
        return increment_version(current, CHOICES[choice])
    if choice == "4":
        custom = prompt.ask("   Enter custom version: ").strip()
        return str(Version.parse(custom))

    raise DeployError("Invalid choice")
