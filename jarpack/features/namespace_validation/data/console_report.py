import io
from typing import TextIO

from ..domain.interfaces import IReportRenderer
from ..domain.models import RunSummary

RULE = "=" * 60

class ConsoleReportRenderer(IReportRenderer):
    """
    Human-readable report: counts first, then every error, then every
    warning, then an all-clear line when both lists are empty.
    """

    def scan_started(self, src_dir: str, out: TextIO) -> None:
        out.write(f"🔍 Scanning Java files in {src_dir}...\n")

    def no_sources(self, src_dir: str, out: TextIO) -> None:
        out.write(f"⚠️  No Java/Kotlin files found in {src_dir}\n")

    def summary(self, summary: RunSummary, out: TextIO) -> None:
        out.write("\n" + RULE + "\n")
        out.write("📊 NAMESPACE VALIDATION\n")
        out.write(RULE + "\n")
        out.write(f"Files checked: {summary.files_checked}\n")
        out.write(f"Errors: {len(summary.problems)}\n")
        out.write(f"Warnings: {len(summary.warnings)}\n")

        if summary.problems:
            out.write("\n🚨 ERRORS:\n")
            for error in summary.problems:
                out.write(f"   ❌ {error}\n")

        if summary.warnings:
            out.write("\n⚠️  WARNINGS:\n")
            for warning in summary.warnings:
                out.write(f"   ⚠️  {warning}\n")

        if not summary.problems and not summary.warnings:
            out.write("\n✅ All files passed validation!\n")

        out.write(RULE + "\n")


def render_summary(summary: RunSummary) -> str:
    """Standalone API: the report as a string."""
    buffer = io.StringIO()
    ConsoleReportRenderer().summary(summary, buffer)
    return buffer.getvalue()
