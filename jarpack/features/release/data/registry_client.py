import logging
import time
from pathlib import Path
from typing import Optional, Union

from jarpack.core.config.settings import settings
from jarpack.features.namespace_validation.service.validator import validate_namespaces
from ..domain.interfaces import IRegistryClient
from ..domain.models import RemoteValidationResult

logger = logging.getLogger(__name__)

class SimulatedRegistryClient(IRegistryClient):
    """
    Stand-in for the registry API.
    Remote validation re-runs the local validator on the working tree;
    finalization only reports its steps.
    """

    def __init__(self, src_dir: Union[str, Path], prefix: Optional[str], delay: float = None):
        self.src_dir = src_dir
        self.prefix = prefix
        self.delay = settings.SIMULATED_DELAY if delay is None else delay

    def validate_remote(self, commit_sha: str, version: str) -> RemoteValidationResult:
        logger.info(f"Fetching repository content at {commit_sha or 'HEAD'}...")
        self._pause()
        logger.info("Running namespace validation...")
        self._pause()

        summary = validate_namespaces(self.src_dir, self.prefix, quiet=True)
        return RemoteValidationResult(
            success=summary.success,
            errors=summary.problems,
            warnings=list(summary.warnings),
        )

    def finalize(self, version: str) -> None:
        for step in ("Registering with Jarpack registry...",
                     "Building package metadata...",
                     "Publishing to repository..."):
            logger.info(step)
            self._pause()
        logger.info(f"🚀 Release {version} published")

    def _pause(self):
        if self.delay > 0:
            time.sleep(self.delay)
