"""
Tree-sitter adapter for the extraction engine.

Wraps tree-sitter-c-sharp nodes so they satisfy ``DeclarationNode``. This is
the only module that knows the C# grammar's node type and field names.
"""

import logging
from typing import Dict, FrozenSet, List, Optional

from tree_sitter import Node, Tree

from extraction.config import (
    CLASS_NODE,
    INTERFACE_NODE,
    ENUM_NODE,
    STRUCT_NODE,
    RECORD_NODE,
    RECORD_STRUCT_NODE,
    PROPERTY_NODE,
    METHOD_NODE,
    CONSTRUCTOR_NODE,
    PARAMETER_NODE,
    ENUM_MEMBER_NODE,
    IMPLICIT_PARAMETER_NODE,
    OPAQUE_NODES,
    MODIFIER_NODE,
    EQUALS_VALUE_CLAUSE,
    LITERAL_NODE_TYPES,
    NAME_FIELD,
    TYPE_FIELDS,
    PARAMETERS_FIELD,
)
from extraction.literals import literal_value
from extraction.nodes import Initializer, NodeKind

logger = logging.getLogger(__name__)

# Grammar node type -> engine node tag
NODE_KIND_MAP: Dict[str, NodeKind] = {
    CLASS_NODE: NodeKind.CLASS,
    INTERFACE_NODE: NodeKind.INTERFACE,
    ENUM_NODE: NodeKind.ENUM,
    STRUCT_NODE: NodeKind.OTHER_TYPE,
    RECORD_NODE: NodeKind.OTHER_TYPE,
    RECORD_STRUCT_NODE: NodeKind.OTHER_TYPE,
    PROPERTY_NODE: NodeKind.PROPERTY,
    METHOD_NODE: NodeKind.METHOD,
    CONSTRUCTOR_NODE: NodeKind.CONSTRUCTOR,
    PARAMETER_NODE: NodeKind.PARAMETER,
    IMPLICIT_PARAMETER_NODE: NodeKind.PARAMETER,
    ENUM_MEMBER_NODE: NodeKind.ENUM_MEMBER,
}

# Members exposing only their parameter list unless bodies are exposed
_SIGNATURE_ONLY_KINDS = frozenset({NodeKind.METHOD, NodeKind.CONSTRUCTOR})

# Never have declaration-level children
_LEAF_KINDS = frozenset({NodeKind.PARAMETER, NodeKind.ENUM_MEMBER})


def node_text(node: Optional[Node]) -> Optional[str]:
    """Decode the source text spanned by a tree-sitter node."""
    if node is None or node.text is None:
        return None
    return node.text.decode("utf-8", errors="replace")


class TreeSitterNode:
    """``DeclarationNode`` view over a tree-sitter C# node.

    By default member bodies, field initializers and attributes are opaque:
    a method or constructor only exposes its parameter list and a property
    has no children. With ``expose_bodies`` every named descendant is
    visible, so lambda and local function parameters inside bodies are
    reachable.
    """

    __slots__ = ("_node", "_expose_bodies")

    def __init__(self, node: Node, expose_bodies: bool = False):
        self._node = node
        self._expose_bodies = expose_bodies

    def __repr__(self) -> str:
        return (
            f"TreeSitterNode(type={self._node.type!r}, "
            f"line={self._node.start_point.row + 1})"
        )

    @property
    def raw(self) -> Node:
        """The wrapped tree-sitter node."""
        return self._node

    @property
    def kind(self) -> NodeKind:
        return NODE_KIND_MAP.get(self._node.type, NodeKind.OTHER)

    @property
    def identifier(self) -> Optional[str]:
        if self._node.type == IMPLICIT_PARAMETER_NODE:
            return node_text(self._node) or None
        name_node = self._node.child_by_field_name(NAME_FIELD)
        name = node_text(name_node)
        if not name and self.kind is not NodeKind.OTHER:
            logger.debug(
                f"{self._node.type} at line {self._node.start_point.row + 1} has no name"
            )
        return name or None

    @property
    def modifiers(self) -> FrozenSet[str]:
        tokens = set()
        for child in self._node.children:
            if child.type == MODIFIER_NODE:
                text = node_text(child)
                if text:
                    tokens.add(text.strip())
        return frozenset(tokens)

    @property
    def type_text(self) -> Optional[str]:
        for field_name in TYPE_FIELDS.get(self._node.type, ()):
            type_node = self._node.child_by_field_name(field_name)
            if type_node is not None:
                return node_text(type_node)
        return None

    @property
    def initializer(self) -> Optional[Initializer]:
        if self._node.type != ENUM_MEMBER_NODE:
            return None

        value_node = self._node.child_by_field_name("value")
        if value_node is None:
            for child in self._node.named_children:
                if child.type == EQUALS_VALUE_CLAUSE and child.named_child_count:
                    value_node = child.named_children[0]
                    break
        if value_node is None:
            return None

        text = node_text(value_node) or ""
        if value_node.type not in LITERAL_NODE_TYPES:
            return Initializer(text=text, is_literal=False)
        return Initializer(text=literal_value(value_node.type, text), is_literal=True)

    def children(self) -> List["TreeSitterNode"]:
        kind = self.kind
        if kind in _LEAF_KINDS:
            return []
        if not self._expose_bodies:
            if kind is NodeKind.PROPERTY or self._node.type in OPAQUE_NODES:
                return []
            if kind in _SIGNATURE_ONLY_KINDS:
                params = self._node.child_by_field_name(PARAMETERS_FIELD)
                return [TreeSitterNode(params)] if params is not None else []
        return [
            TreeSitterNode(child, self._expose_bodies)
            for child in self._node.named_children
        ]


def wrap_tree(tree: Tree, expose_bodies: bool = False) -> TreeSitterNode:
    """Wrap the root node of a parsed tree.

    Args:
        tree: The parsed tree-sitter tree.
        expose_bodies: Make member bodies and initializers traversable.
    """
    return TreeSitterNode(tree.root_node, expose_bodies)
