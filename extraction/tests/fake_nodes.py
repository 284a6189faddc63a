"""In-memory DeclarationNode implementation for parser-independent tests."""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Sequence, Tuple

from extraction.nodes import Initializer, NodeKind


@dataclass(frozen=True)
class FakeNode:
    kind: NodeKind
    identifier: Optional[str] = None
    modifiers: FrozenSet[str] = frozenset()
    type_text: Optional[str] = None
    initializer: Optional[Initializer] = None
    nodes: Tuple["FakeNode", ...] = field(default_factory=tuple)

    def children(self) -> Sequence["FakeNode"]:
        return self.nodes


def _mods(modifiers: str) -> FrozenSet[str]:
    return frozenset(modifiers.split())


def root(*nodes: FakeNode) -> FakeNode:
    return FakeNode(NodeKind.OTHER, nodes=tuple(nodes))


def other(*nodes: FakeNode) -> FakeNode:
    return FakeNode(NodeKind.OTHER, nodes=tuple(nodes))


def class_(name: str, modifiers: str = "", *members: FakeNode) -> FakeNode:
    return FakeNode(NodeKind.CLASS, name, _mods(modifiers), nodes=tuple(members))


def interface(name: str, modifiers: str = "", *members: FakeNode) -> FakeNode:
    return FakeNode(NodeKind.INTERFACE, name, _mods(modifiers), nodes=tuple(members))


def struct_(name: str, modifiers: str = "", *members: FakeNode) -> FakeNode:
    return FakeNode(NodeKind.OTHER_TYPE, name, _mods(modifiers), nodes=tuple(members))


def enum(name: str, modifiers: str = "", *members: FakeNode) -> FakeNode:
    return FakeNode(NodeKind.ENUM, name, _mods(modifiers), nodes=tuple(members))


def prop(name: str, type_text: str, modifiers: str = "") -> FakeNode:
    return FakeNode(NodeKind.PROPERTY, name, _mods(modifiers), type_text)


def method(name: str, returns: str, modifiers: str = "", *params: FakeNode) -> FakeNode:
    return FakeNode(NodeKind.METHOD, name, _mods(modifiers), returns, nodes=tuple(params))


def ctor(name: str, modifiers: str = "", *params: FakeNode) -> FakeNode:
    return FakeNode(NodeKind.CONSTRUCTOR, name, _mods(modifiers), nodes=tuple(params))


def param(name: str, type_text: Optional[str] = None) -> FakeNode:
    return FakeNode(NodeKind.PARAMETER, name, type_text=type_text)


def member(name: str, text: Optional[str] = None, is_literal: bool = True) -> FakeNode:
    initializer = Initializer(text, is_literal) if text is not None else None
    return FakeNode(NodeKind.ENUM_MEMBER, name, initializer=initializer)
