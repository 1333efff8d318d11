import logging
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from jarpack.core.common.enums import DeployResult
from jarpack.core.exceptions import DeployError
from jarpack.features.namespace_validation.service.validator import validate_namespaces
from jarpack.features.project_config.domain.models import ProjectConfig
from jarpack.features.project_config.service.api import save_project_config

from ..domain.interfaces import IPrompt, IRegistryClient, IVersionControl
from ..domain.models import DeployRequest, Version
from .versioning import next_version, select_version

logger = logging.getLogger(__name__)

RULE = "=" * 50
MAX_LISTED_CHANGES = 5

class DeployWorkflow:
    """
    Validate, commit, push, verify on the server, tag and publish.

    Stops early (returns a DeployResult) on dry runs and declined prompts;
    raises DeployError when a step fails.
    """

    def __init__(self,
                 config: Optional[ProjectConfig],
                 config_path: Union[str, Path],
                 src_dir: Union[str, Path],
                 prefix: Optional[str],
                 vcs: IVersionControl,
                 registry: IRegistryClient,
                 prompt: IPrompt,
                 out: TextIO = None):
        self.config = config
        self.config_path = Path(config_path)
        self.src_dir = src_dir
        self.prefix = prefix
        self.vcs = vcs
        self.registry = registry
        self.prompt = prompt
        self.out = out or sys.stdout

    def deploy(self, request: DeployRequest) -> DeployResult:
        current = self.config.current_version if self.config else None

        # 1. Pick the version
        version = request.version
        if version is None and not request.skip_confirmations:
            version = select_version(current, self.prompt, self.out)
        if version is None:
            version = next_version(current)
        version = str(Version.parse(version))

        if request.dry_run:
            self._say("🧪 DRY RUN MODE - No changes will be made\n")

        # 2. Local validation
        self._say("🔍 Validating namespace structure locally...")
        summary = validate_namespaces(self.src_dir, self.prefix, quiet=True)
        if not summary.success:
            raise DeployError("Local validation failed", summary.problems)
        self._say("✅ Local validation passed!")

        # Prefix-only projects (no jarpack.json) cannot be released
        if self.config is None:
            raise DeployError("Cannot deploy without jarpack.json. Use 'jarpack validate' for validation only.")

        # 3. Summary
        self._show_summary(version)
        if request.dry_run:
            return DeployResult.DRY_RUN

        # 4. Commit & push
        if not (request.skip_confirmations or self._confirm_push()):
            self._say("❌ Deployment cancelled by user")
            return DeployResult.CANCELLED

        self._commit_and_push(version)

        # 5. Server-side validation
        self._say("\n🔍 Validating namespace structure on server...")
        remote = self.registry.validate_remote(self.vcs.current_commit(), version)
        if not remote.success:
            raise DeployError(
                "Server validation failed. Your code is already pushed, fix the namespaces and run 'jarpack deploy' again.",
                remote.errors,
            )
        self._say("✅ Server validation passed!")

        # 6. Tag & publish
        if not (request.skip_confirmations or self._confirm_tag(version)):
            self._say("⏸️  Code pushed but not tagged. Run 'jarpack deploy' again to create release.")
            return DeployResult.PUSHED_NOT_TAGGED

        tag = Version.parse(version).tag
        self._say("\n🏷️  Creating release tag...")
        self.vcs.create_tag(tag)
        self.vcs.push_tags()
        self._say(f"✅ Release tag {tag} created and pushed")

        self._say("\n🚀 Finalizing deployment...")
        self.registry.finalize(version)
        self._say(f"🎉 Successfully deployed {version}!")
        logger.info(f"Deployed {self.config.name} {version}")
        return DeployResult.DEPLOYED

    def _commit_and_push(self, version: str) -> None:
        self._say("\n📤 Committing and pushing changes...")

        self.config.version = version
        save_project_config(self.config, self.config_path)

        self.vcs.commit_all(f"Prepare release {version}")
        self.vcs.push()
        self._say("✅ Changes pushed (no tag yet)")

    def _show_summary(self, version: str) -> None:
        self._say("\n" + RULE)
        self._say("📦 DEPLOYMENT SUMMARY")
        self._say(RULE)
        self._say(f"Project: {self.config.name}")
        self._say(f"Version: {version}")
        self._say(f"Namespace: {self.config.namespace}")
        self._say(f"Repository: {self.config.repository or 'Not configured'}")

        changes = self.vcs.pending_changes()
        if changes:
            self._say("\n📝 Pending changes:")
            for line in changes[:MAX_LISTED_CHANGES]:
                self._say(f"   {line}")
            if len(changes) > MAX_LISTED_CHANGES:
                self._say(f"   ... and {len(changes) - MAX_LISTED_CHANGES} more files")
        else:
            self._say("\n📝 No uncommitted changes")

        current = self.config.current_version
        if current != version:
            self._say(f"\n📈 Version change: {current} → {version}")

        self._say(RULE)

    def _confirm_push(self) -> bool:
        self._say("\n❓ This will commit and push your changes.")
        return self.prompt.confirm("   Continue? [y/N]: ")

    def _confirm_tag(self, version: str) -> bool:
        self._say(f"\n❓ Create release tag 'v{version}' and deploy to Jarpack?")
        return self.prompt.confirm("   This will make the package publicly available. [y/N]: ")

    def _say(self, line: str) -> None:
        self.out.write(line + "\n")
        self.out.flush()
