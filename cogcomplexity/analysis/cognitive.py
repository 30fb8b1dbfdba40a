"""
Cognitive Complexity scoring.

``score`` walks a syntax tree and returns the score of a subtree together
with the containers (functions, classes, namespaces) found directly
inside it. Containers nested in other containers are only reported under
their immediate parent.

Context a node would otherwise read from its parent is passed down
explicitly: the operator of an enclosing binary expression (so a
run like ``a && b && c`` is charged once) and whether an ``if`` is the
continuation of an ``else if`` chain.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from cogcomplexity.analysis.classify import (
    binary_operator,
    has_solo_else,
    is_container_introducing_node,
    is_else_if,
    is_function_like_node,
    is_inherent_cost_node,
    is_name_declaration,
    is_nesting_node,
    is_reported_container,
)
from cogcomplexity.analysis.depth import leveled_children
from cogcomplexity.analysis.naming import (
    called_function_name,
    declared_name,
    find_introduced_name,
    resolve_container_name,
)
from cogcomplexity.core.output import Container, FileOutput, ScoreAndInner
from cogcomplexity.parsing.nodes import SyntaxNode


def score_file(root: SyntaxNode) -> FileOutput:
    total = 0
    inner: List[Container] = []
    for child in root.children:
        child_score, child_inner = _score_child(
            child,
            top_level=True,
            depth=0,
            named_ancestors=(),
            hint=None,
            parent_operator=None,
            else_if=False,
        )
        total += child_score
        inner.extend(child_inner)
    return FileOutput(score=total, inner=tuple(inner))


def score(
    node: SyntaxNode,
    top_level: bool,
    depth: int = 0,
    named_ancestors: Sequence[str] = (),
    parent_operator: Optional[str] = None,
    else_if: bool = False,
) -> ScoreAndInner:
    total = inherent_increment(node, named_ancestors, parent_operator)
    total += nesting_increment(node, depth, else_if)

    own_name = introduced_name(node)
    ancestors_of_children = tuple(named_ancestors)
    if own_name:
        ancestors_of_children += (own_name,)

    # anonymous children are named after the innermost enclosing name
    hint = ancestors_of_children[-1] if ancestors_of_children else None
    operator = binary_operator(node)
    chained = is_else_if(node)

    inner: List[Container] = []
    for child, is_below in leveled_children(node):
        if top_level:
            child_depth = depth
            child_top_level = not is_below
        else:
            child_depth = depth + 1 if is_below else depth
            child_top_level = False

        child_score, child_inner = _score_child(
            child,
            top_level=child_top_level,
            depth=child_depth,
            named_ancestors=ancestors_of_children,
            hint=hint,
            parent_operator=operator,
            else_if=chained,
        )
        total += child_score
        inner.extend(child_inner)

    return ScoreAndInner(score=total, inner=tuple(inner))


def inherent_increment(
    node: SyntaxNode,
    named_ancestors: Sequence[str],
    parent_operator: Optional[str] = None,
) -> int:
    if node.type == "if_statement":
        # `if` and `else if` both land here; a trailing plain `else` costs one more.
        return 2 if has_solo_else(node) else 1

    if is_inherent_cost_node(node):
        return 1

    operator = binary_operator(node)
    if operator is not None:
        return 0 if operator == parent_operator else 1

    if node.type == "call_expression":
        name = called_function_name(node)
        if name and name in named_ancestors:
            return 1

    return 0


def nesting_increment(node: SyntaxNode, depth: int, else_if: bool = False) -> int:
    if depth <= 0 or not is_nesting_node(node):
        return 0
    # The `if` of an `else if` was charged as part of its chain.
    if node.type == "if_statement" and else_if:
        return 0
    return depth


def introduced_name(node: SyntaxNode) -> Optional[str]:
    """Name this node adds to the named ancestors of its descendants."""
    if is_container_introducing_node(node) or is_function_like_node(node):
        name = find_introduced_name(node)
    elif is_name_declaration(node):
        name = declared_name(node)
    else:
        return None
    return name or None


def _score_child(
    child: SyntaxNode,
    top_level: bool,
    depth: int,
    named_ancestors: Tuple[str, ...],
    hint: Optional[str],
    parent_operator: Optional[str],
    else_if: bool,
) -> Tuple[int, Tuple[Container, ...]]:
    cost = score(child, top_level, depth, named_ancestors, parent_operator, else_if)

    if not is_reported_container(child):
        # not a boundary: its containers belong to the parent's scope
        return cost.score, cost.inner

    container = Container(
        name=resolve_container_name(child, hint) or "",
        score=cost.score,
        line=child.line,
        column=child.column,
        inner=cost.inner,
    )
    return cost.score, (container,)
