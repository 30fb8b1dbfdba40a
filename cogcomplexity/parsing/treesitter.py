from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Callable, Optional

import tree_sitter_javascript
import tree_sitter_typescript
from tree_sitter import Language, Parser

from cogcomplexity.parsing.nodes import SyntaxNode, from_tree_sitter


@dataclass(frozen=True)
class LanguageSpec:
    name: str
    extensions: set[str]
    grammar: Callable[[], object]


LANGUAGE_SPECS = {
    "typescript": LanguageSpec(
        name="typescript",
        extensions={".ts", ".mts", ".cts"},
        grammar=tree_sitter_typescript.language_typescript,
    ),
    "tsx": LanguageSpec(
        name="tsx",
        extensions={".tsx"},
        grammar=tree_sitter_typescript.language_tsx,
    ),
    "javascript": LanguageSpec(
        name="javascript",
        extensions={".js", ".mjs", ".cjs", ".jsx"},
        grammar=tree_sitter_javascript.language,
    ),
}


@dataclass(frozen=True)
class ParsedFile:
    path: str
    language: str
    source: bytes
    root: SyntaxNode
    has_error: bool = False

    @property
    def text(self) -> str:
        return self.source.decode("utf-8", errors="replace")


def language_for_path(path: str) -> Optional[str]:
    ext = Path(path).suffix.lower()
    for name, spec in LANGUAGE_SPECS.items():
        if ext in spec.extensions:
            return name
    return None


@lru_cache(maxsize=None)
def _language(name: str) -> Language:
    return Language(LANGUAGE_SPECS[name].grammar())


def get_parser(language: str) -> Parser:
    if language not in LANGUAGE_SPECS:
        raise ValueError(f"Unsupported language: {language}")
    # Parsers are not shared between threads; languages are.
    return Parser(_language(language))


def parse_source(source: str | bytes, language: str, path: str = "<memory>") -> ParsedFile:
    if isinstance(source, str):
        source = source.encode("utf-8")
    tree = get_parser(language).parse(source)
    root = from_tree_sitter(tree.root_node, source)
    return ParsedFile(
        path=path,
        language=language,
        source=source,
        root=root,
        has_error=tree.root_node.has_error,
    )


def parse_file(path: str, language: Optional[str] = None) -> ParsedFile:
    language = language or language_for_path(path)
    if language is None:
        raise ValueError(f"Unsupported language for path: {path}")
    source = Path(path).read_bytes()
    return parse_source(source, language, path=path)
