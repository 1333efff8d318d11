from pathlib import Path
from typing import Optional, TextIO, Union

from jarpack.features.namespace_validation.domain.models import RunSummary
from jarpack.features.namespace_validation.service.validator import validate_namespaces
from jarpack.features.project_config.domain.models import ProjectConfig

RULE = "=" * 50
MAX_LISTED_ERRORS = 3

def render_status(config: Optional[ProjectConfig],
                  src_dir: Union[str, Path],
                  prefix: Optional[str],
                  out: TextIO) -> RunSummary:
    """
    Prints the project header and the current namespace health.
    Returns the validation summary it is based on.
    """
    if config is None:
        out.write("📊 Validation Status (Prefix Mode)\n")
        out.write(RULE + "\n")
        out.write(f"Source Directory: {src_dir}\n")
        out.write(f"Expected Prefix: {prefix or 'None'}\n")
    else:
        out.write("📊 Jarpack Project Status\n")
        out.write(RULE + "\n")
        out.write(f"Name: {config.name}\n")
        out.write(f"Namespace: {prefix or config.namespace}\n")
        out.write(f"Current Version: {config.current_version}\n")
        out.write(f"Repository: {config.repository or 'Not configured'}\n")

    out.write("\nNamespace Status: ")
    summary = validate_namespaces(src_dir, prefix, quiet=True)
    if summary.success:
        out.write("✅ Valid\n")
    else:
        problems = summary.problems
        out.write(f"❌ Invalid ({len(problems)} errors)\n")
        for error in problems[:MAX_LISTED_ERRORS]:
            out.write(f"   • {error}\n")
        if len(problems) > MAX_LISTED_ERRORS:
            out.write(f"   ... and {len(problems) - MAX_LISTED_ERRORS} more\n")

    out.write(RULE + "\n")
    return summary
