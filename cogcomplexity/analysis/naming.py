"""
Name resolution for containers and called expressions.
"""

from __future__ import annotations

from typing import Optional

from cogcomplexity.analysis.classify import (
    is_accessor,
    is_function_like_node,
    is_module_node,
    is_name_declaration,
)
from cogcomplexity.core.errors import UnreachableNodeState
from cogcomplexity.parsing.nodes import SyntaxNode


_NAMED_FUNCTION_KINDS = {"function_declaration", "generator_function_declaration"}
_FUNCTION_EXPRESSION_KINDS = {"function_expression", "function", "generator_function"}
_CLASS_DECLARATION_KINDS = {"class_declaration", "abstract_class_declaration"}
_STRING_KINDS = {"string", "template_string"}


def resolve_container_name(node: SyntaxNode, hint: Optional[str] = None) -> Optional[str]:
    """
    Name shown in the report for a function, class or namespace.

    ``hint`` is the name of the variable (or field, or property) the node
    is being assigned to. It is only used when the node itself is
    anonymous.
    """
    if is_function_like_node(node):
        return function_name(node, hint)
    if node.type == "class":
        return class_expression_name(node, hint)
    return find_introduced_name(node)


def find_introduced_name(node: SyntaxNode) -> Optional[str]:
    """Name a container introduces for its descendants, without any hint."""
    if node.type in _CLASS_DECLARATION_KINDS:
        return class_declaration_name(node)
    if node.type == "class":
        return class_expression_name(node)
    if is_function_like_node(node):
        return function_name(node)
    if is_module_node(node):
        return module_name(node)
    if node.type in ("interface_declaration", "type_alias_declaration"):
        return _required_name(node, "Type declaration has no name.")
    return None


def function_name(func: SyntaxNode, hint: Optional[str] = None) -> str:
    if is_accessor(func):
        return _required_name(func, "Accessor has no name.")

    if func.type == "arrow_function":
        return hint or ""

    if func.type in _NAMED_FUNCTION_KINDS:
        return _required_name(func, "Function declaration has no name.")

    if func.type in _FUNCTION_EXPRESSION_KINDS:
        name = func.child_by_field("name")
        if name is not None:
            return name.text
        return hint or ""

    if func.type == "method_definition":
        return _required_name(func, "Method has no identifier.")

    raise UnreachableNodeState(func, "Function node is not of a recognised type.")


def class_declaration_name(node: SyntaxNode) -> str:
    name = node.child_by_field("name")
    return name.text if name is not None else ""


def class_expression_name(node: SyntaxNode, hint: Optional[str] = None) -> Optional[str]:
    name = node.child_by_field("name")
    if name is not None:
        return name.text
    return hint


def module_name(node: SyntaxNode) -> str:
    name = node.child_by_field("name")
    if name is None:
        raise UnreachableNodeState(node, "Module declaration has no identifier.")
    return _unquote(name)


def declared_name(node: SyntaxNode) -> Optional[str]:
    """Name bound by a variable, field, property or enum declaration."""
    if not is_name_declaration(node):
        return None
    if node.type == "variable_declarator":
        name = node.child_by_field("name")
        # Destructuring patterns bind several names; none is the hint.
        if name is None or name.type != "identifier":
            return None
        return name.text
    if node.type == "pair":
        key = node.child_by_field("key")
        if key is None or key.type == "computed_property_name":
            return None
        return _unquote(key)
    name = node.child_by_field("name") or node.child_by_field("property")
    if name is None or name.type == "computed_property_name":
        return None
    return _unquote(name)


def resolve_called_name(node: SyntaxNode) -> Optional[str]:
    """
    Literal name of whatever a call, ``new``, property access, JSX element
    or type reference refers to. Redundant parentheses around the callee
    are ignored so ``(f)()`` resolves to ``f``.
    """
    if node.type == "call_expression":
        return called_function_name(node)
    if node.type == "new_expression":
        return newed_constructor_name(node)
    if node.type == "member_expression":
        prop = node.child_by_field("property")
        return prop.text if prop is not None else node.children[-1].text
    if node.type in ("jsx_opening_element", "jsx_self_closing_element"):
        name = node.child_by_field("name")
        return name.text if name is not None else None
    if node.type == "generic_type":
        name = node.child_by_field("name")
        return name.text if name is not None else None
    if node.type in ("type_identifier", "nested_type_identifier"):
        return node.text
    return None


def called_function_name(node: SyntaxNode) -> str:
    callee = node.child_by_field("function")
    if callee is None:
        raise UnreachableNodeState(node, "Call expression has no callee.")
    arguments = node.child_by_field("arguments")
    if arguments is not None and arguments.type == "template_string":
        # tagged template: the tag is referenced as written
        return callee.text
    return _identifier_despite_brackets(callee) or ""


def newed_constructor_name(node: SyntaxNode) -> str:
    constructor = node.child_by_field("constructor")
    if constructor is not None:
        name = _identifier_despite_brackets(constructor)
        if name is not None:
            return name
        if constructor.type == "member_expression":
            return resolve_called_name(constructor)
    raise UnreachableNodeState(node, "Newed constructor does not have a name.")


def _identifier_despite_brackets(node: SyntaxNode) -> Optional[str]:
    if node.type == "identifier":
        return node.text
    if node.type == "parenthesized_expression":
        inner = [child for child in node.named_children if child.type != "comment"]
        if inner:
            return _identifier_despite_brackets(inner[0])
    return None


def _required_name(node: SyntaxNode, message: str) -> str:
    name = node.child_by_field("name")
    if name is None:
        raise UnreachableNodeState(node, message)
    return name.text


def _unquote(node: SyntaxNode) -> str:
    if node.type in _STRING_KINDS:
        return node.text[1:-1]
    return node.text
