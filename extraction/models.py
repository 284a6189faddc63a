"""
Data models for extracted C# declarations.

Every model is an immutable value record built once per parsed file. The
field names and shapes are the contract consumed by skeleton generators.
"""

from dataclasses import dataclass, asdict, field
from enum import Enum
from typing import Any, Dict, Tuple

from extraction.config import LANGUAGE_TAG


class ModifierKind(str, Enum):
    """Normalized modifier classification, exactly one per declaration."""

    STATIC = "Static"
    PUBLIC = "Public"
    INTERNAL = "Internal"
    PROTECTED = "Protected"
    PRIVATE = "Private"


def _to_plain(value: Any) -> Any:
    """Turn enum members into their values and tuples into lists."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: _to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    return value


class _Serializable:
    """Mixin providing JSON-ready dictionary conversion."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert the model to a dictionary suitable for JSON serialization.

        Returns:
            Dictionary representation with enum values and lists.
        """
        return _to_plain(asdict(self))


@dataclass(frozen=True)
class ParameterModel(_Serializable):
    """A single formal parameter.

    Attributes:
        name: Parameter identifier as written.
        type: Literal text of the parameter's type, or "any" when absent.
    """

    name: str
    type: str


@dataclass(frozen=True)
class PropertyModel(_Serializable):
    """A property declaration with its declared type text."""

    name: str
    type: str
    modifier: ModifierKind


@dataclass(frozen=True)
class MethodModel(_Serializable):
    """A method declaration with its return type and parameters."""

    name: str
    return_type: str
    modifier: ModifierKind
    parameters: Tuple[ParameterModel, ...] = ()


@dataclass(frozen=True)
class ConstructorModel(_Serializable):
    """A constructor declaration; parameters belong to this constructor only."""

    name: str
    modifier: ModifierKind
    parameters: Tuple[ParameterModel, ...] = ()


@dataclass(frozen=True)
class EnumValueModel(_Serializable):
    """An enum member.

    Attributes:
        name: Member identifier.
        value: Literal initializer text, or "no-value" when the member has
            no initializer or the initializer is not a literal.
    """

    name: str
    value: str


@dataclass(frozen=True)
class ClassModel(_Serializable):
    """A class declaration and its eligible members.

    Attributes:
        name: Unqualified class identifier.
        modifier: Resolved modifier of the class itself.
        properties: Properties passing the property visibility rule.
        methods: Public methods.
        constructors: Public constructors.
        language: Source language tag.
    """

    name: str
    modifier: ModifierKind
    properties: Tuple[PropertyModel, ...] = ()
    methods: Tuple[MethodModel, ...] = ()
    constructors: Tuple[ConstructorModel, ...] = ()
    language: str = LANGUAGE_TAG


@dataclass(frozen=True)
class InterfaceModel(_Serializable):
    """An interface declaration and its eligible members."""

    name: str
    modifier: ModifierKind
    properties: Tuple[PropertyModel, ...] = ()
    methods: Tuple[MethodModel, ...] = ()
    language: str = LANGUAGE_TAG


@dataclass(frozen=True)
class EnumModel(_Serializable):
    """An enum declaration and its members in declaration order."""

    name: str
    modifier: ModifierKind
    values: Tuple[EnumValueModel, ...] = ()
    language: str = LANGUAGE_TAG


@dataclass(frozen=True)
class SourceModel(_Serializable):
    """Declaration model for one source file.

    Attributes:
        path: Path of the originating file.
        classes: Every class in the file, nested ones included, in
            traversal order.
        interfaces: Every interface in the file, in traversal order.
        enums: Every enum in the file, in traversal order.
    """

    path: str
    classes: Tuple[ClassModel, ...] = field(default_factory=tuple)
    interfaces: Tuple[InterfaceModel, ...] = field(default_factory=tuple)
    enums: Tuple[EnumModel, ...] = field(default_factory=tuple)

    @property
    def declaration_count(self) -> int:
        """Number of type declarations in the model."""
        return len(self.classes) + len(self.interfaces) + len(self.enums)

    @property
    def is_empty(self) -> bool:
        return self.declaration_count == 0
