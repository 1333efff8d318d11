# File: jarpack/cli.py

import argparse
import logging
import sys
from typing import List, Optional

from jarpack.core.config.settings import settings
from jarpack.core.exceptions import ConfigError, DeployError, JarpackError
from jarpack.features.namespace_validation.domain.models import mode_for
from jarpack.features.namespace_validation.service.validator import NamespaceValidator
from jarpack.features.project_config.domain.models import ProjectConfig
from jarpack.features.project_config.service.api import load_project_config
from jarpack.features.release.data.console_prompt import ConsolePrompt
from jarpack.features.release.data.git_adapter import GitCliAdapter
from jarpack.features.release.data.registry_client import SimulatedRegistryClient
from jarpack.features.release.domain.models import DeployRequest
from jarpack.features.release.service.deployer import DeployWorkflow
from jarpack.features.release.service.status import render_status

logger = logging.getLogger("jarpack")

EPILOG = """\
Examples:
  jarpack validate --prefix com.example --src src/main/kotlin
  jarpack deploy --version 1.2.3 --yes
  jarpack deploy --dry-run
  jarpack status --prefix com.example
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jarpack",
        description="Jarpack CLI - package manager for Kotlin/Java with namespace validation",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("command", nargs="?", choices=["validate", "check", "deploy", "status"],
                        help="validate/check: check namespace structure; deploy: validate, commit, tag "
                             "and deploy; status: show project status")

    validation = parser.add_argument_group("validation options")
    validation.add_argument("-s", "--src", dest="src_dir", default=None,
                            help=f"Source directory (default: {settings.SRC_DIR})")
    validation.add_argument("-p", "--prefix", default=None,
                            help="Expected package prefix (e.g. com.example)")
    validation.add_argument("--warn-prefix", default=None,
                            help="Without --prefix: warn about packages outside this prefix")
    validation.add_argument("-j", "--workers", type=int, default=None,
                            help="Files checked in parallel (default: $JARPACK_WORKERS or 1)")

    deploy = parser.add_argument_group("deploy options")
    deploy.add_argument("--version", dest="version", default=None, help="Specific version to deploy")
    deploy.add_argument("--yes", dest="skip_confirmations", action="store_true",
                        help="Skip confirmation prompts")
    deploy.add_argument("--dry-run", action="store_true", help="Preview deployment without making changes")

    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.LOG_LEVEL, logging.INFO)
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s" if verbose else "   %(message)s"
    logging.basicConfig(level=level, format=fmt, stream=sys.stderr)


def load_config(prefix: Optional[str]) -> Optional[ProjectConfig]:
    """
    jarpack.json is optional only when a prefix was given on the command line.
    """
    try:
        config = load_project_config()
    except ConfigError:
        if prefix:
            logger.debug("Ignoring invalid project config because --prefix was given")
            return None
        raise

    if config is None and not prefix:
        raise ConfigError("No jarpack.json found in current directory")
    return config


def cmd_validate(args, config: Optional[ProjectConfig], prefix: Optional[str]) -> int:
    mode = mode_for(prefix, args.warn_prefix)
    summary = NamespaceValidator(args.src_dir, mode, workers=args.workers).validate(quiet=False)

    if summary.success:
        print("\n✅ All namespace validations passed!")
        return 0
    print("\n❌ Validation failed! Fix the issues above before deploying.")
    return 1


def cmd_deploy(args, config: Optional[ProjectConfig], prefix: Optional[str]) -> int:
    workflow = DeployWorkflow(
        config=config,
        config_path=settings.config_path,
        src_dir=args.src_dir,
        prefix=prefix,
        vcs=GitCliAdapter(),
        registry=SimulatedRegistryClient(args.src_dir, prefix),
        prompt=ConsolePrompt(),
    )
    request = DeployRequest(
        version=args.version,
        dry_run=args.dry_run,
        skip_confirmations=args.skip_confirmations,
    )

    try:
        workflow.deploy(request)
    except DeployError as e:
        print(f"❌ {e}")
        for detail in e.details:
            print(f"   {detail}")
        return 1
    return 0


def cmd_status(args, config: Optional[ProjectConfig], prefix: Optional[str]) -> int:
    render_status(config, args.src_dir, prefix, sys.stdout)
    return 0


COMMANDS = {
    "validate": cmd_validate,
    "check": cmd_validate,
    "deploy": cmd_deploy,
    "status": cmd_status,
}


def main(argv: List[str] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 1

    if args.src_dir is None:
        args.src_dir = settings.SRC_DIR

    try:
        config = load_config(args.prefix)
        prefix = args.prefix or (config.namespace if config else None)
        return COMMANDS[args.command](args, config, prefix)
    except JarpackError as e:
        logger.error(f"❌ {e}")
        return 1
    except KeyboardInterrupt:
        print("\n❌ Aborted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
