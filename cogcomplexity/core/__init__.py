"""Configuration, errors and report data structures."""

from cogcomplexity.core.config import Config
from cogcomplexity.core.errors import CogComplexityError, MalformedOutputError, UnreachableNodeState
from cogcomplexity.core.output import Container, FileOutput, ScoreAndInner

__all__ = [
    "Config",
    "CogComplexityError",
    "MalformedOutputError",
    "UnreachableNodeState",
    "Container",
    "FileOutput",
    "ScoreAndInner",
]
