"""Pytest fixtures for cogcomplexity tests."""

import os
import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cogcomplexity.analysis.cognitive import score_file
from cogcomplexity.parsing.treesitter import parse_source


def analyze(source: str, language: str = "typescript"):
    """Score a snippet of source code."""
    return score_file(parse_source(source, language).root)


def find_node(source: str, node_type: str, language: str = "typescript"):
    """First node of ``node_type`` in the parsed snippet."""
    root = parse_source(source, language).root
    for node in root.walk():
        if node.type == node_type:
            return node
    raise AssertionError(f"No {node_type} node in {source!r}")


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """Create a small project with TypeScript and JavaScript files."""
    project = tmp_path / "project"
    (project / "src" / "util").mkdir(parents=True)
    (project / "node_modules" / "dep").mkdir(parents=True)

    (project / "src" / "main.ts").write_text(
        """\
function main(args: string[]) {
    if (args.length > 0) {
        for (const arg of args) {
            console.log(arg);
        }
    }
}
"""
    )
    (project / "src" / "util" / "math.js").write_text(
        """\
function fact(n) {
    return n <= 1 ? 1 : n * fact(n - 1);
}
"""
    )
    (project / "node_modules" / "dep" / "index.ts").write_text("if (a) {}\n")
    (project / "README.md").write_text("# Sample\n")
    return project
