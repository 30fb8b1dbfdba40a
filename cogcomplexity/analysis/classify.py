"""
Node classification for Cognitive Complexity scoring.

Every grammatical kind the engine treats specially is listed in
``NODE_RULES``: whether it carries an inherent increment, whether it is
charged the nesting increment, and which grammar fields hold children
that are scored one nesting level deeper. Kinds missing from the table
carry no cost and keep all of their children at the same level.
"""

from __future__ import annotations

from dataclasses import dataclass

from cogcomplexity.parsing.nodes import SyntaxNode


@dataclass(frozen=True)
class NodeRule:
    inherent: bool = False
    nesting: bool = False
    below: frozenset[str] = frozenset()


_BODY = frozenset({"body"})

LOOP_AND_BRANCH_RULE = NodeRule(inherent=True, nesting=True, below=_BODY)
FUNCTION_RULE = NodeRule(below=_BODY)

FUNCTION_KINDS = frozenset({
    "function_declaration",
    "generator_function_declaration",
    "function_expression",
    "function",
    "generator_function",
    "arrow_function",
    "method_definition",
})

CLASS_KINDS = frozenset({
    "class_declaration",
    "abstract_class_declaration",
    "class",
})

MODULE_KINDS = frozenset({
    "module",
    "internal_module",
})

# Introduce a name for recursion detection but are never reported.
TYPE_DECLARATION_KINDS = frozenset({
    "interface_declaration",
    "type_alias_declaration",
})

NAME_DECLARATION_KINDS = frozenset({
    "variable_declarator",
    "public_field_definition",
    "field_definition",
    "pair",
    "enum_declaration",
})

JUMP_KINDS = frozenset({"break_statement", "continue_statement"})

NODE_RULES: dict[str, NodeRule] = {
    "catch_clause": LOOP_AND_BRANCH_RULE,
    "do_statement": LOOP_AND_BRANCH_RULE,
    "for_statement": LOOP_AND_BRANCH_RULE,
    "for_in_statement": LOOP_AND_BRANCH_RULE,
    "while_statement": LOOP_AND_BRANCH_RULE,
    "switch_statement": LOOP_AND_BRANCH_RULE,
    "ternary_expression": NodeRule(
        inherent=True,
        nesting=True,
        below=frozenset({"consequence", "alternative"}),
    ),
    # The alternative (else clause) stays level so an `else if` remains a
    # link of the same chain; see classify_children.
    "if_statement": NodeRule(inherent=True, nesting=True, below=frozenset({"consequence"})),
    **{kind: FUNCTION_RULE for kind in FUNCTION_KINDS},
}

NO_RULE = NodeRule()


def rule_for(node: SyntaxNode) -> NodeRule:
    # keyword tokens share their type name with the construct (`function`, `class`)
    if not node.is_named:
        return NO_RULE
    return NODE_RULES.get(node.type, NO_RULE)


def is_labeled_jump(node: SyntaxNode) -> bool:
    """True for ``break label`` / ``continue label``; plain jumps are free."""
    return node.type in JUMP_KINDS and node.child_by_field("label") is not None


def is_inherent_cost_node(node: SyntaxNode) -> bool:
    return rule_for(node).inherent or is_labeled_jump(node)


def is_nesting_node(node: SyntaxNode) -> bool:
    return rule_for(node).nesting


def is_function_like_node(node: SyntaxNode) -> bool:
    return node.is_named and node.type in FUNCTION_KINDS


def is_accessor(node: SyntaxNode) -> bool:
    return node.type == "method_definition" and any(
        child.type in ("get", "set") for child in node.children if not child.is_named
    )


def is_class_node(node: SyntaxNode) -> bool:
    return node.is_named and node.type in CLASS_KINDS


def is_module_node(node: SyntaxNode) -> bool:
    return node.is_named and node.type in MODULE_KINDS


def is_container_introducing_node(node: SyntaxNode) -> bool:
    if is_class_node(node) or is_module_node(node):
        return True
    return node.is_named and node.type in TYPE_DECLARATION_KINDS


def is_reported_container(node: SyntaxNode) -> bool:
    """Functions, classes and namespaces get their own entry in the report."""
    return is_function_like_node(node) or is_class_node(node) or is_module_node(node)


def is_name_declaration(node: SyntaxNode) -> bool:
    return node.is_named and node.type in NAME_DECLARATION_KINDS


def binary_operator(node: SyntaxNode) -> str | None:
    """The operator of a binary expression, if the node is one."""
    if node.type != "binary_expression":
        return None
    operator = node.child_by_field("operator")
    if operator is None:
        return None
    return operator.type


def is_else_if(node: SyntaxNode) -> bool:
    """True for an else clause whose statement is directly another ``if``."""
    if node.type != "else_clause":
        return False
    statements = [child for child in node.named_children if child.type != "comment"]
    return len(statements) == 1 and statements[0].type == "if_statement"


def has_solo_else(node: SyntaxNode) -> bool:
    """True when an ``if`` ends with an ``else`` that does not start another ``if``."""
    alternative = node.child_by_field("alternative")
    return alternative is not None and not is_else_if(alternative)
