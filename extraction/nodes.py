"""
Minimal node interface consumed by the extraction engine.

The engine never touches parser-specific node classes. A parsing
collaborator supplies objects satisfying ``DeclarationNode``; the
tree-sitter implementation lives in ``extraction.syntax``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterator, Optional, Protocol, Sequence


class NodeKind(Enum):
    """Closed set of node tags the engine dispatches on."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    PROPERTY = "property"
    METHOD = "method"
    CONSTRUCTOR = "constructor"
    PARAMETER = "parameter"
    ENUM_MEMBER = "enum_member"
    OTHER_TYPE = "other_type"
    OTHER = "other"


TYPE_KINDS: FrozenSet[NodeKind] = frozenset(
    {NodeKind.CLASS, NodeKind.INTERFACE, NodeKind.ENUM}
)

# Declarations that own their members: modelled types plus structs and records
SCOPE_KINDS: FrozenSet[NodeKind] = TYPE_KINDS | {NodeKind.OTHER_TYPE}


@dataclass(frozen=True)
class Initializer:
    """Explicit initializer of an enum member.

    Attributes:
        text: Decoded value of a literal initializer, or the source text of
            any other expression.
        is_literal: Whether the expression is a simple literal.
    """

    text: str
    is_literal: bool


class DeclarationNode(Protocol):
    """Capabilities the engine needs from a syntax node.

    ``kind`` tags the node. Structs and records are ``NodeKind.OTHER_TYPE``:
    they are traversed for nested types but never modelled. Everything else
    the engine does not understand is ``NodeKind.OTHER`` and is only traversed.
    """

    @property
    def kind(self) -> NodeKind: ...

    @property
    def identifier(self) -> Optional[str]: ...

    @property
    def modifiers(self) -> FrozenSet[str]: ...

    @property
    def type_text(self) -> Optional[str]: ...

    @property
    def initializer(self) -> Optional[Initializer]: ...

    def children(self) -> Sequence["DeclarationNode"]: ...


def iter_descendants(node: DeclarationNode) -> Iterator[DeclarationNode]:
    """Yield every descendant of ``node`` in depth-first pre-order.

    The walk keeps its own stack, so arbitrarily deep expression trees do
    not hit the interpreter's recursion limit.

    Args:
        node: Node whose subtree is walked. The node itself is not yielded.
    """
    stack = list(reversed(node.children()))
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children()))


def iter_scoped_descendants(node: DeclarationNode) -> Iterator[DeclarationNode]:
    """Yield descendants of ``node`` without entering nested type declarations.

    Nested types (modelled or not) are yielded themselves but their members
    are not, so a container only sees the declarations of its own body.
    """
    stack = list(reversed(node.children()))
    while stack:
        current = stack.pop()
        yield current
        if current.kind not in SCOPE_KINDS:
            stack.extend(reversed(current.children()))
