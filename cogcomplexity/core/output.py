"""
Score report data structures and their JSON wire format.

The wire format is what the browser view fetches::

    {path: {"score": int, "inner": [Container, ...]}}
    Container = {"name": str, "score": int, "line": int, "column": int,
                 "inner": [Container, ...]}
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from cogcomplexity.core.errors import MalformedOutputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    """A function, class or namespace scored as its own unit."""

    name: str
    score: int
    line: int
    column: int
    inner: Tuple["Container", ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "score": self.score,
            "line": self.line,
            "column": self.column,
            "inner": [container.to_dict() for container in self.inner],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Container":
        if not isinstance(data, dict):
            raise MalformedOutputError(f"Container must be an object, got {type(data).__name__}")
        name = data.get("name")
        if not isinstance(name, str):
            raise MalformedOutputError("Container name must be a string")
        return cls(
            name=name,
            score=_non_negative_int(data, "score"),
            line=_non_negative_int(data, "line"),
            column=_non_negative_int(data, "column"),
            inner=_decode_inner(data),
        )


@dataclass(frozen=True)
class ScoreAndInner:
    score: int
    inner: Tuple[Container, ...] = ()


@dataclass(frozen=True)
class FileOutput:
    """Score of one file: the sum of its top-level contributions."""

    score: int
    inner: Tuple[Container, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "inner": [container.to_dict() for container in self.inner],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "FileOutput":
        if not isinstance(data, dict):
            raise MalformedOutputError(f"File result must be an object, got {type(data).__name__}")
        return cls(score=_non_negative_int(data, "score"), inner=_decode_inner(data))


def encode_program_output(files: Mapping[str, FileOutput], indent: int | None = 2) -> str:
    return json.dumps({path: output.to_dict() for path, output in files.items()}, indent=indent)


def decode_program_output(payload: str) -> Dict[str, FileOutput]:
    """
    Decode the JSON wire format.

    Raises MalformedOutputError (after logging the raw payload) rather
    than returning a partial result.
    """
    try:
        data = json.loads(payload)
        if not isinstance(data, dict):
            raise MalformedOutputError("Analysis result must be an object keyed by file path")
        return {str(path): FileOutput.from_dict(value) for path, value in data.items()}
    except (json.JSONDecodeError, MalformedOutputError) as e:
        logger.error("Could not parse the Cognitive Complexity result json: %s", e)
        logger.error("Could not parse: %s", payload)
        if isinstance(e, MalformedOutputError):
            raise MalformedOutputError(str(e), payload=payload) from e
        raise MalformedOutputError(f"Invalid JSON: {e}", payload=payload) from e


def _non_negative_int(data: Dict[str, Any], key: str) -> int:
    value = data.get(key)
    # bool is an int subclass but never a valid score
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise MalformedOutputError(f"'{key}' must be a non-negative integer, got {value!r}")
    return value


def _decode_inner(data: Dict[str, Any]) -> Tuple[Container, ...]:
    inner = data.get("inner")
    if not isinstance(inner, list):
        raise MalformedOutputError("'inner' must be a list")
    return tuple(Container.from_dict(item) for item in inner)
