"""
Analysis driver.

Discovers source files, parses each one and scores it independently.
A file that fails to read, parse or score is left out of the report and
the failure is recorded in ``AnalysisReport.errors``.
"""

from __future__ import annotations

import logging
import os
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from cogcomplexity.analysis.cognitive import score_file
from cogcomplexity.core.config import Config
from cogcomplexity.core.errors import CogComplexityError
from cogcomplexity.core.output import FileOutput
from cogcomplexity.parsing.treesitter import ParsedFile, parse_file, parse_source
from cogcomplexity.utils.files import iter_source_files

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisReport:
    files: Dict[str, FileOutput]
    errors: List[str] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def file_count(self) -> int:
        return len(self.files)

    @property
    def total_score(self) -> int:
        return sum(output.score for output in self.files.values())


class AnalysisEngine:
    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config or Config.load(None)

    def discover_files(self, path: str) -> List[str]:
        return list(
            iter_source_files(
                path,
                self.config.languages(),
                self.config.ignore_dirs(),
                self.config.max_file_size(),
            )
        )

    def analyze(self, path: str) -> AnalysisReport:
        start_time = time.time()
        files = self.discover_files(path)
        logger.debug("Analyzing %d files under %s", len(files), path)

        results: Dict[str, FileOutput] = {}
        errors: List[str] = []
        max_workers = self.config.max_workers()

        if len(files) > 1 and max_workers > 1:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                futures = {executor.submit(self._analyze_one, f): f for f in files}
                for future in as_completed(futures):
                    self._collect(path, futures[future], future.result(), results, errors)
        else:
            for file_path in files:
                self._collect(path, file_path, self._analyze_one(file_path), results, errors)

        return AnalysisReport(
            files=dict(sorted(results.items())),
            errors=sorted(errors),
            elapsed_seconds=round(time.time() - start_time, 3),
        )

    def analyze_file(self, file_path: str) -> FileOutput:
        return self._score(parse_file(file_path))

    def analyze_source(self, source: str, language: str, path: str = "<memory>") -> FileOutput:
        return self._score(parse_source(source, language, path=path))

    def _score(self, parsed: ParsedFile) -> FileOutput:
        if parsed.has_error:
            logger.warning("Syntax errors in %s; scoring the recovered tree", parsed.path)
        return score_file(parsed.root)

    def _analyze_one(self, file_path: str) -> Tuple[Optional[FileOutput], Optional[str]]:
        try:
            return self.analyze_file(file_path), None
        except (CogComplexityError, OSError, ValueError) as e:
            logger.error("Error analyzing %s: %s", file_path, e)
            return None, f"Error analyzing {file_path}: {e}"

    def _collect(
        self,
        root: str,
        file_path: str,
        outcome: Tuple[Optional[FileOutput], Optional[str]],
        results: Dict[str, FileOutput],
        errors: List[str],
    ) -> None:
        output, error = outcome
        if error is not None:
            errors.append(error)
            return
        results[_report_path(root, file_path)] = output


def _report_path(root: str, file_path: str) -> str:
    if Path(root).is_file():
        return Path(file_path).name
    return Path(os.path.relpath(file_path, root)).as_posix()
