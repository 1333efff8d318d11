import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, TextIO, Union

from jarpack.core.config.settings import settings
from jarpack.core.exceptions import RootNotFound
from jarpack.features.declaration_extractor.service.api import DeclarationExtractor
from jarpack.features.source_scanner.domain.models import ScanRequest, SourceFile
from jarpack.features.source_scanner.service.scanner import SourceScanner

from ..domain.models import RunSummary, ValidationMode, ValidationOutcome, mode_for
from ..data.console_report import ConsoleReportRenderer
from .aggregator import aggregate, fatal
from .checker import ConsistencyChecker

logger = logging.getLogger(__name__)

class NamespaceValidator:
    """
    Public API of the validation engine.
    Scanner -> Extractor -> Checker -> Aggregator, one fresh run per call.
    """

    def __init__(self,
                 src_dir: Union[str, Path] = None,
                 mode: ValidationMode = None,
                 workers: int = None,
                 out: TextIO = None):
        self.src_dir = Path(src_dir if src_dir is not None else settings.SRC_DIR)
        self.mode = mode if mode is not None else mode_for(None)
        self.workers = max(1, workers if workers is not None else settings.WORKERS)
        self.out = out
        self.scanner = SourceScanner()
        self.extractor = DeclarationExtractor()
        self.checker = ConsistencyChecker(self.mode)
        self.renderer = ConsoleReportRenderer()

    def validate(self, quiet: bool = False) -> RunSummary:
        """
        Runs the validation.

        Args:
            quiet: Suppress console narration. The returned summary is identical.
        """
        out = self.out or sys.stdout
        if not quiet:
            self.renderer.scan_started(str(self.src_dir), out)

        # 1. Discover
        try:
            sources = self.scanner.scan(ScanRequest(root_path=self.src_dir))
        except RootNotFound as e:
            logger.debug(str(e))
            summary = fatal(str(e))
            if not quiet:
                self.renderer.summary(summary, out)
            return summary

        if not sources:
            if not quiet:
                self.renderer.no_sources(str(self.src_dir), out)
            return aggregate([])

        # 2. Extract + check every file (order preserved by map)
        logger.debug(f"Validating {len(sources)} files with {self.workers} worker(s) in {type(self.mode).__name__}")
        outcomes = self._run(sources)

        # 3. Aggregate
        summary = aggregate(outcomes)
        logger.debug(f"Namespace validation: {summary.files_checked} files, "
                    f"{len(summary.errors)} errors, {len(summary.warnings)} warnings")

        if not quiet:
            self.renderer.summary(summary, out)
        return summary

    def _run(self, sources: List[SourceFile]) -> List[ValidationOutcome]:
        if self.workers == 1:
            return [self._check_one(source) for source in sources]

        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            return list(pool.map(self._check_one, sources))

    def _check_one(self, source: SourceFile) -> ValidationOutcome:
        return self.checker.check(source, self.extractor.extract(source))


def validate_namespaces(src_dir: Union[str, Path] = None,
                        prefix: Optional[str] = None,
                        quiet: bool = True,
                        advisory_prefix: Optional[str] = None,
                        workers: int = None) -> RunSummary:
    """
    Standalone API: validate a tree. A prefix selects prefix mode,
    otherwise the directory layout is enforced.
    """
    validator = NamespaceValidator(src_dir, mode_for(prefix, advisory_prefix), workers=workers)
    return validator.validate(quiet=quiet)
