"""
Tests for the analysis driver and file discovery.
"""

from pathlib import Path

import pytest

from cogcomplexity.core.config import Config
from cogcomplexity.core.engine import AnalysisEngine
from cogcomplexity.core.errors import UnreachableNodeState
from cogcomplexity.utils.files import iter_source_files


class TestFileDiscovery:
    """Tests for source file discovery."""

    def test_skips_ignored_and_unsupported(self, sample_project):
        """node_modules and non-source files are skipped."""
        files = list(iter_source_files(str(sample_project), {"typescript", "javascript"}, {"node_modules"}))
        names = sorted(Path(path).relative_to(sample_project).as_posix() for path in files)
        assert names == ["src/main.ts", "src/util/math.js"]

    def test_disabled_language(self, sample_project):
        """Only enabled languages are discovered."""
        files = list(iter_source_files(str(sample_project), {"javascript"}, {"node_modules"}))
        assert len(files) == 1
        assert files[0].endswith("math.js")

    def test_max_file_size(self, sample_project):
        """Files larger than the limit are skipped."""
        files = list(iter_source_files(str(sample_project), {"typescript", "javascript"}, {"node_modules"}, 10))
        assert files == []

    def test_single_file(self, sample_project):
        """A file target yields itself."""
        target = sample_project / "src" / "main.ts"
        assert list(iter_source_files(str(target), {"typescript"}, set())) == [str(target)]


class TestAnalysisEngine:
    """Tests for the AnalysisEngine class."""

    @pytest.mark.parametrize("workers", [1, 4])
    def test_analyze_directory(self, sample_project, workers):
        """Every discovered file is scored and keyed by its relative path."""
        config = Config.load(None).with_overrides({"scan": {"max_workers": workers}})
        report = AnalysisEngine(config).analyze(str(sample_project))

        assert list(report.files) == ["src/main.ts", "src/util/math.js"]
        assert report.errors == []
        assert report.files["src/main.ts"].score == 4
        assert report.files["src/util/math.js"].score == 5
        assert report.total_score == 9
        assert report.file_count == 2

    def test_analyze_single_file(self, sample_project):
        """A single file is keyed by its name."""
        report = AnalysisEngine().analyze(str(sample_project / "src" / "util" / "math.js"))
        assert list(report.files) == ["math.js"]
        fact = report.files["math.js"].inner[0]
        assert (fact.name, fact.score, fact.line, fact.column) == ("fact", 5, 1, 1)

    def test_failed_file_is_left_out(self, sample_project, monkeypatch):
        """A file that fails to score is absent and its error recorded."""
        from cogcomplexity.core import engine as engine_module

        real_score_file = engine_module.score_file

        def failing_score_file(root):
            if any(node.type == "ternary_expression" for node in root.walk()):
                raise UnreachableNodeState(root, "Broken tree.")
            return real_score_file(root)

        monkeypatch.setattr(engine_module, "score_file", failing_score_file)
        report = AnalysisEngine().analyze(str(sample_project))

        assert list(report.files) == ["src/main.ts"]
        assert len(report.errors) == 1
        assert "math.js" in report.errors[0]
        assert "Broken tree." in report.errors[0]

    def test_analyze_source(self):
        """Sources can be scored without touching the filesystem."""
        output = AnalysisEngine().analyze_source("const f = (a, b) => a && b;", "javascript")
        assert output.score == 1
        assert output.inner[0].name == "f"

    def test_syntax_errors_still_scored(self, caplog):
        """A file with syntax errors is scored from the recovered tree."""
        output = AnalysisEngine().analyze_source("function f() { if (a) { ", "typescript", path="broken.ts")
        assert output.score >= 0
        assert "broken.ts" in caplog.text

    def test_unsupported_language(self):
        """Unknown languages are rejected."""
        with pytest.raises(ValueError):
            AnalysisEngine().analyze_source("x", "cobol")
