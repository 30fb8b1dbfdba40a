"""
Tests for report formatting.
"""

import json

from cogcomplexity.core.output import Container, FileOutput
from cogcomplexity.reporting import containers_over, format_json, format_text


def sample_files():
    callback = Container(name="", score=4, line=2, column=18)
    handler = Container(name="handler", score=5, line=1, column=1, inner=(callback,))
    return {
        "src/a.ts": FileOutput(score=5, inner=(handler,)),
        "src/b.js": FileOutput(score=0),
    }


class TestFormatJson:
    """Tests for JSON output."""

    def test_wire_format(self):
        """JSON output is the wire format keyed by path."""
        data = json.loads(format_json(sample_files()))
        assert list(data) == ["src/a.ts", "src/b.js"]
        assert data["src/a.ts"]["inner"][0]["name"] == "handler"
        assert data["src/a.ts"]["inner"][0]["inner"][0]["name"] == ""


class TestFormatText:
    """Tests for the text tree output."""

    def test_tree(self):
        """Files and containers are listed with scores and positions."""
        text = format_text(sample_files())
        assert "Cognitive Complexity" in text
        assert "src/a.ts" in text
        assert "handler (1:1)" in text
        assert "<anonymous> (2:18)" in text
        assert "Files analyzed: 2" in text
        assert "Total score: 5" in text
        assert "Errors" not in text

    def test_errors_listed(self):
        """Analysis errors are listed after the summary."""
        text = format_text({}, ["Error analyzing x.ts: boom"])
        assert "Errors: 1" in text
        assert "Error analyzing x.ts: boom" in text

    def test_markup_is_escaped(self):
        """Names are printed literally."""
        files = {"[x].ts": FileOutput(score=1, inner=(Container(name="[bold]f", score=1, line=1, column=1),))}
        text = format_text(files)
        assert "[x].ts" in text
        assert "[bold]f" in text


class TestContainersOver:
    """Tests for threshold checks."""

    def test_nested_containers_checked(self):
        """Containers at any depth are compared against the threshold."""
        over = containers_over(sample_files(), 3)
        assert [(path, c.name) for path, c in over] == [("src/a.ts", "handler"), ("src/a.ts", "")]

    def test_threshold_is_exclusive(self):
        """A score equal to the threshold passes."""
        assert containers_over(sample_files(), 5) == []
