from cogcomplexity.parsing.nodes import SyntaxNode, from_tree_sitter
from cogcomplexity.parsing.treesitter import (
    LANGUAGE_SPECS,
    LanguageSpec,
    ParsedFile,
    language_for_path,
    parse_file,
    parse_source,
)

__all__ = [
    "SyntaxNode",
    "from_tree_sitter",
    "LANGUAGE_SPECS",
    "LanguageSpec",
    "ParsedFile",
    "language_for_path",
    "parse_file",
    "parse_source",
]
