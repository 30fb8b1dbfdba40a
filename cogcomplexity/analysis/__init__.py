from cogcomplexity.analysis.cognitive import score, score_file
from cogcomplexity.analysis.depth import classify_children
from cogcomplexity.analysis.naming import resolve_called_name, resolve_container_name

__all__ = [
    "score",
    "score_file",
    "classify_children",
    "resolve_called_name",
    "resolve_container_name",
]
