import logging
import subprocess
from typing import List

from jarpack.core.config.settings import settings
from jarpack.core.exceptions import VersionControlError
from ..domain.interfaces import IVersionControl

logger = logging.getLogger(__name__)

class GitCliAdapter(IVersionControl):
    """
    Runs git as a subprocess in the current working directory.
    """

    def __init__(self, binary: str = None):
        self.binary = binary or settings.GIT_BINARY

    def pending_changes(self) -> List[str]:
        output = self._run("status", "--porcelain")
        return [line.strip() for line in output.splitlines() if line.strip()]

    def current_commit(self) -> str:
        return self._run("rev-parse", "HEAD").strip()

    def commit_all(self, message: str) -> None:
        self._run("add", ".")
        self._run("commit", "-m", message)

    def push(self) -> None:
        self._run("push")

    def create_tag(self, tag: str) -> None:
        self._run("tag", tag)

    def push_tags(self) -> None:
        self._run("push", "--tags")

    def _run(self, *args: str) -> str:
        cmd = [self.binary, *args]
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                check=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True
            )
        except FileNotFoundError as e:
            raise VersionControlError(f"git executable not found: {self.binary}") from e
        except subprocess.CalledProcessError as e:
            error_msg = e.stderr.strip() if e.stderr else str(e)
            logger.error(f"git failed: {error_msg}")
            raise VersionControlError(f"Command failed: {' '.join(cmd)}: {error_msg}") from e

        return result.stdout
