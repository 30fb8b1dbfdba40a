"""
Split a node's children into those scored at the node's own nesting
level and those scored one level deeper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from cogcomplexity.analysis.classify import is_else_if, rule_for
from cogcomplexity.parsing.nodes import SyntaxNode


@dataclass(frozen=True)
class ChildPartition:
    same: Tuple[SyntaxNode, ...]
    below: Tuple[SyntaxNode, ...]


def leveled_children(node: SyntaxNode) -> Iterator[Tuple[SyntaxNode, bool]]:
    """Yield ``(child, is_below)`` in source order."""
    if node.type == "else_clause":
        # `else if`: the nested `if` is the next link of the chain, not a
        # deeper block.
        chained = is_else_if(node)
        for child in node.children:
            yield child, not chained and child.is_named and child.type != "comment"
        return

    below_fields = rule_for(node).below
    for child in node.children:
        yield child, child.field in below_fields


def classify_children(node: SyntaxNode) -> ChildPartition:
    same = []
    below = []
    for child, is_below in leveled_children(node):
        (below if is_below else same).append(child)
    return ChildPartition(same=tuple(same), below=tuple(below))
