"""
Read-only syntax nodes consumed by the scoring engine.

Tree-sitter nodes are copied into ``SyntaxNode`` values once per file so
the engine only depends on a node's kind, grammar field, ordered children
and position. Nodes hold no parent link.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class SyntaxNode:
    type: str
    line: int
    column: int
    start_byte: int
    end_byte: int
    field: Optional[str] = None
    is_named: bool = True
    children: Tuple["SyntaxNode", ...] = ()
    source: bytes = dataclasses.field(default=b"", repr=False, compare=False)

    @property
    def text(self) -> str:
        return self.source[self.start_byte : self.end_byte].decode("utf-8", errors="replace")

    @property
    def named_children(self) -> List["SyntaxNode"]:
        return [child for child in self.children if child.is_named]

    def child_by_field(self, name: str) -> Optional["SyntaxNode"]:
        for child in self.children:
            if child.field == name:
                return child
        return None

    def walk(self) -> Iterator["SyntaxNode"]:
        stack = [self]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))


def from_tree_sitter(node, source: bytes, field_name: Optional[str] = None) -> SyntaxNode:
    """Copy a tree-sitter node and its descendants into ``SyntaxNode`` values."""
    children = tuple(
        from_tree_sitter(child, source, node.field_name_for_child(index))
        for index, child in enumerate(node.children)
    )
    return SyntaxNode(
        type=node.type,
        line=node.start_point[0] + 1,
        column=node.start_point[1] + 1,
        start_byte=node.start_byte,
        end_byte=node.end_byte,
        field=field_name,
        is_named=node.is_named,
        children=children,
        source=source,
    )
