"""
Declaration traversal and model building.

This module walks a syntax tree through the ``DeclarationNode`` interface,
collects classes, interfaces and enums at any depth, and maps them with
their eligible members into a ``SourceModel``.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from tree_sitter import Tree

from extraction.config import (
    DEFAULT_LEGACY_SCOPING,
    MISSING_TYPE,
    MISSING_ENUM_VALUE,
)
from extraction.models import (
    ClassModel,
    ConstructorModel,
    EnumModel,
    EnumValueModel,
    InterfaceModel,
    MethodModel,
    ParameterModel,
    PropertyModel,
    SourceModel,
)
from extraction.modifiers import resolve_modifier
from extraction.nodes import (
    TYPE_KINDS,
    DeclarationNode,
    NodeKind,
    iter_descendants,
    iter_scoped_descendants,
)
from extraction.syntax import wrap_tree
from extraction.visibility import filter_visible

logger = logging.getLogger(__name__)


def collect_type_declarations(root: DeclarationNode) -> Dict[NodeKind, List[DeclarationNode]]:
    """Collect every class, interface and enum under ``root``.

    Nested declarations are included flat, in depth-first pre-order, which
    matches their order in the source text.

    Args:
        root: Root node of the tree.

    Returns:
        Mapping of each type kind to its declaration nodes. All three kinds
        are always present.
    """
    collected: Dict[NodeKind, List[DeclarationNode]] = {kind: [] for kind in TYPE_KINDS}
    for node in iter_descendants(root):
        if node.kind in TYPE_KINDS:
            collected[node.kind].append(node)
    return collected


def _members(
    container: DeclarationNode,
    kind: NodeKind,
    legacy_scoping: bool,
) -> List[DeclarationNode]:
    """Find member nodes of one kind belonging to ``container``.

    With legacy scoping every descendant counts, nested types included.
    """
    walk: Iterator[DeclarationNode]
    if legacy_scoping:
        walk = iter_descendants(container)
    else:
        walk = iter_scoped_descendants(container)
    return [node for node in walk if node.kind is kind]


def _named(nodes: List[DeclarationNode]) -> List[DeclarationNode]:
    """Drop declarations whose identifier the parser could not recover."""
    named = []
    for node in nodes:
        if node.identifier:
            named.append(node)
        else:
            logger.debug(f"Skipping anonymous {node.kind.value} declaration")
    return named


def extract_parameters(node: DeclarationNode) -> Tuple[ParameterModel, ...]:
    """Extract every parameter found under ``node``, in declaration order.

    A parameter without a type annotation is typed "any".

    Args:
        node: A method or constructor (or, for legacy scoping, a container).

    Returns:
        Tuple of parameter models.
    """
    parameters = []
    for candidate in _named([n for n in iter_descendants(node) if n.kind is NodeKind.PARAMETER]):
        parameters.append(
            ParameterModel(
                name=candidate.identifier,
                type=candidate.type_text or MISSING_TYPE,
            )
        )
    return tuple(parameters)


def extract_properties(
    container: DeclarationNode,
    legacy_scoping: bool = DEFAULT_LEGACY_SCOPING,
) -> Tuple[PropertyModel, ...]:
    """Extract properties declared public, internal or protected."""
    nodes = filter_visible(_named(_members(container, NodeKind.PROPERTY, legacy_scoping)))
    return tuple(
        PropertyModel(
            name=node.identifier,
            type=node.type_text or MISSING_TYPE,
            modifier=resolve_modifier(node.modifiers),
        )
        for node in nodes
    )


def extract_methods(
    container: DeclarationNode,
    legacy_scoping: bool = DEFAULT_LEGACY_SCOPING,
) -> Tuple[MethodModel, ...]:
    """Extract public methods.

    Parameters come from each method's own parameter list. With legacy
    scoping they are computed once from the whole container instead, and
    every method shares that combined list.
    """
    nodes = filter_visible(_named(_members(container, NodeKind.METHOD, legacy_scoping)))
    shared: Optional[Tuple[ParameterModel, ...]] = None
    if legacy_scoping:
        shared = extract_parameters(container)

    methods = []
    for node in nodes:
        methods.append(
            MethodModel(
                name=node.identifier,
                return_type=node.type_text or MISSING_TYPE,
                modifier=resolve_modifier(node.modifiers),
                parameters=shared if shared is not None else extract_parameters(node),
            )
        )
    return tuple(methods)


def extract_constructors(
    container: DeclarationNode,
    legacy_scoping: bool = DEFAULT_LEGACY_SCOPING,
) -> Tuple[ConstructorModel, ...]:
    """Extract public constructors with their own parameter lists."""
    nodes = filter_visible(_named(_members(container, NodeKind.CONSTRUCTOR, legacy_scoping)))
    return tuple(
        ConstructorModel(
            name=node.identifier,
            modifier=resolve_modifier(node.modifiers),
            parameters=extract_parameters(node),
        )
        for node in nodes
    )


def extract_enum_value(member: DeclarationNode) -> str:
    """Resolve the value of an enum member.

    Returns:
        The literal initializer text, or "no-value" when there is no
        initializer or it is not a simple literal.
    """
    initializer = member.initializer
    if initializer is None or not initializer.is_literal:
        return MISSING_ENUM_VALUE
    return initializer.text or MISSING_ENUM_VALUE


def extract_enum_values(enum_node: DeclarationNode) -> Tuple[EnumValueModel, ...]:
    """Extract every member of an enum in declaration order."""
    members = _named(_members(enum_node, NodeKind.ENUM_MEMBER, legacy_scoping=False))
    return tuple(
        EnumValueModel(name=member.identifier, value=extract_enum_value(member))
        for member in members
    )


def build_class_model(
    node: DeclarationNode,
    legacy_scoping: bool = DEFAULT_LEGACY_SCOPING,
) -> ClassModel:
    """Build the model of one class declaration."""
    model = ClassModel(
        name=node.identifier,
        modifier=resolve_modifier(node.modifiers),
        properties=extract_properties(node, legacy_scoping),
        methods=extract_methods(node, legacy_scoping),
        constructors=extract_constructors(node, legacy_scoping),
    )
    logger.debug(
        f"Extracted class {model.name}: {len(model.properties)} properties, "
        f"{len(model.methods)} methods, {len(model.constructors)} constructors"
    )
    return model


def build_interface_model(
    node: DeclarationNode,
    legacy_scoping: bool = DEFAULT_LEGACY_SCOPING,
) -> InterfaceModel:
    """Build the model of one interface declaration."""
    model = InterfaceModel(
        name=node.identifier,
        modifier=resolve_modifier(node.modifiers),
        properties=extract_properties(node, legacy_scoping),
        methods=extract_methods(node, legacy_scoping),
    )
    logger.debug(
        f"Extracted interface {model.name}: {len(model.properties)} properties, "
        f"{len(model.methods)} methods"
    )
    return model


def build_enum_model(node: DeclarationNode) -> EnumModel:
    """Build the model of one enum declaration."""
    model = EnumModel(
        name=node.identifier,
        modifier=resolve_modifier(node.modifiers),
        values=extract_enum_values(node),
    )
    logger.debug(f"Extracted enum {model.name}: {len(model.values)} values")
    return model


def build_source_model(
    root: DeclarationNode,
    file_path: str,
    legacy_scoping: bool = DEFAULT_LEGACY_SCOPING,
) -> SourceModel:
    """Build the declaration model of one file from its root node.

    This is the parser-independent entry point of the engine.

    Args:
        root: Root node of the file's syntax tree.
        file_path: Path recorded on the model.
        legacy_scoping: Reproduce container-wide member and shared method
            parameter collection.

    Returns:
        The file's ``SourceModel``. Kinds without declarations yield empty
        tuples.
    """
    declarations = collect_type_declarations(root)

    classes = tuple(
        build_class_model(node, legacy_scoping)
        for node in _named(declarations[NodeKind.CLASS])
    )
    interfaces = tuple(
        build_interface_model(node, legacy_scoping)
        for node in _named(declarations[NodeKind.INTERFACE])
    )
    enums = tuple(
        build_enum_model(node)
        for node in _named(declarations[NodeKind.ENUM])
    )

    return SourceModel(
        path=file_path,
        classes=classes,
        interfaces=interfaces,
        enums=enums,
    )


def extract_model_from_tree(
    tree: Tree,
    file_path: str,
    legacy_scoping: bool = DEFAULT_LEGACY_SCOPING,
) -> SourceModel:
    """Extract the declaration model from a parsed C# tree.

    Args:
        tree: The parsed tree-sitter tree.
        file_path: Path recorded on the model.
        legacy_scoping: See ``build_source_model``. Also exposes member
            bodies, so lambda and local function parameters join the shared
            method parameter list.

    Returns:
        The file's ``SourceModel``.
    """
    logger.info(f"Extracting declarations from {file_path}")
    model = build_source_model(
        wrap_tree(tree, expose_bodies=legacy_scoping), file_path, legacy_scoping
    )
    logger.info(
        f"Extracted {len(model.classes)} classes, {len(model.interfaces)} interfaces, "
        f"{len(model.enums)} enums from {file_path}"
    )
    return model
