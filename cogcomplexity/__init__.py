"""
Cognitive Complexity

Scores TypeScript and JavaScript source files by how hard their control
flow is to follow: branches and loops cost more the deeper they are
nested, and recursive calls are charged too.
"""

__version__ = "1.0.0"
__author__ = "Cognitive Complexity Team"

from cogcomplexity.analysis.cognitive import score, score_file
from cogcomplexity.core.config import Config
from cogcomplexity.core.engine import AnalysisEngine, AnalysisReport
from cogcomplexity.core.errors import CogComplexityError, MalformedOutputError, UnreachableNodeState
from cogcomplexity.core.output import Container, FileOutput, ScoreAndInner, decode_program_output

__all__ = [
    "AnalysisEngine",
    "AnalysisReport",
    "Config",
    "Container",
    "FileOutput",
    "ScoreAndInner",
    "score",
    "score_file",
    "decode_program_output",
    "CogComplexityError",
    "MalformedOutputError",
    "UnreachableNodeState",
]
