"""Variable declarations, identifiers and initial value assignments."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional, Union

from plcdsl.core import Id, Located, SourceSpan
from plcdsl.datatypes import (
    AddressAssignment,
    ArraySpecificationKind,
    ConstantKind,
    EnumeratedSpecificationKind,
    EnumeratedValue,
    StringType,
    StructureDeclaration,
    StructureElementInit,
    StructureInitializationDeclaration,
    SubrangeSpecificationKind,
)
from plcdsl.literals import Integer, Type


def _as_id(value: Id | str) -> Id:
    return Id(value) if isinstance(value, str) else value


def _as_type(value: Type | str) -> Type:
    return Type(value) if isinstance(value, str) else value


class VariableType(Enum):
    """Declaration block a variable belongs to."""

    VAR = "VAR"
    VAR_TEMP = "VAR_TEMP"
    INPUT = "VAR_INPUT"
    OUTPUT = "VAR_OUTPUT"
    IN_OUT = "VAR_IN_OUT"
    EXTERNAL = "VAR_EXTERNAL"
    GLOBAL = "VAR_GLOBAL"
    ACCESS = "VAR_ACCESS"


class DeclarationQualifier(Enum):
    """Qualifier of a variable declaration."""

    UNSPECIFIED = ""
    CONSTANT = "CONSTANT"
    RETAIN = "RETAIN"
    NON_RETAIN = "NON_RETAIN"


class EdgeDirection(Enum):
    RISING = "R_EDGE"
    FALLING = "F_EDGE"


@dataclass
class DirectVariableIdentifier(Located):
    """A variable mapped to a hardware address, optionally with a name."""

    address_assignment: AddressAssignment
    name: Optional[Id] = None
    position: SourceSpan = field(default_factory=SourceSpan)

    def __post_init__(self) -> None:
        if isinstance(self.name, str):
            self.name = Id(self.name)

    def span(self) -> SourceSpan:
        return self.position

    def __str__(self) -> str:
        if self.name is not None:
            return str(self.name)
        return str(self.address_assignment)


VariableIdentifier = Union[Id, DirectVariableIdentifier]


def new_symbol(name: str) -> Id:
    """Symbolic variable identifier."""
    return Id(name)


def new_direct(name: Optional[Id], location: AddressAssignment) -> DirectVariableIdentifier:
    """Directly represented variable identifier."""
    return DirectVariableIdentifier(location, name)


def symbolic_id(identifier: VariableIdentifier) -> Optional[Id]:
    """The symbolic name of the identifier, if it has one."""
    if isinstance(identifier, DirectVariableIdentifier):
        return identifier.name
    return identifier


@dataclass
class NoInitializer:
    """Declaration without any type initializer."""

    position: SourceSpan = field(default_factory=SourceSpan)


@dataclass
class SimpleInitializer:
    type_name: Type
    initial_value: Optional[ConstantKind] = None

    def __post_init__(self) -> None:
        self.type_name = _as_type(self.type_name)


@dataclass
class StringInitializer:
    """Initialization of a string variable."""

    length: Optional[Integer] = None
    width: StringType = StringType.STRING
    initial_value: Optional[str] = None
    keyword_span: SourceSpan = field(default_factory=SourceSpan)


@dataclass
class EnumeratedValuesInitializer:
    values: list[EnumeratedValue] = field(default_factory=list)
    initial_value: Optional[EnumeratedValue] = None


@dataclass
class EnumeratedInitialValueAssignment:
    type_name: Type
    initial_value: Optional[EnumeratedValue] = None

    def __post_init__(self) -> None:
        self.type_name = _as_type(self.type_name)


@dataclass
class FunctionBlockInitialValueAssignment:
    """Instance of a function block type with optional element initializers."""

    type_name: Type
    init: list[StructureElementInit] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.type_name = _as_type(self.type_name)


@dataclass
class ArrayInitialValueAssignment:
    spec: ArraySpecificationKind
    initial_values: list = field(default_factory=list)


@dataclass
class LateResolvedType:
    """Type that is ambiguous until all type definitions are known."""

    type_name: Type

    def __post_init__(self) -> None:
        self.type_name = _as_type(self.type_name)


InitialValueAssignmentKind = Union[
    NoInitializer,
    SimpleInitializer,
    StringInitializer,
    EnumeratedValuesInitializer,
    EnumeratedInitialValueAssignment,
    FunctionBlockInitialValueAssignment,
    SubrangeSpecificationKind,
    StructureInitializationDeclaration,
    ArrayInitialValueAssignment,
    LateResolvedType,
]


def simple_uninitialized(type_name: Type | str) -> SimpleInitializer:
    """Simple initializer without an initial value."""
    return SimpleInitializer(_as_type(type_name), None)


def simple_initializer(type_name: Type | str, value: ConstantKind) -> SimpleInitializer:
    """Simple initializer with the given constant."""
    return SimpleInitializer(_as_type(type_name), value)


def enumerated_values_initializer(
    values: list[EnumeratedValue], initial_value: Optional[EnumeratedValue]
) -> EnumeratedValuesInitializer:
    """Inline enumeration definition with an optional initial value."""
    return EnumeratedValuesInitializer(list(values), initial_value)


@dataclass
class StringSpecification:
    width: StringType = StringType.STRING
    length: Optional[Integer] = None
    keyword_span: SourceSpan = field(default_factory=SourceSpan)


VariableSpecificationKind = Union[
    Type,
    SubrangeSpecificationKind,
    EnumeratedSpecificationKind,
    ArraySpecificationKind,
    StructureDeclaration,
    StringSpecification,
]


@dataclass
class VarDecl(Located):
    """Declaration of a single variable."""

    identifier: Any
    var_type: VariableType = VariableType.VAR
    qualifier: DeclarationQualifier = DeclarationQualifier.UNSPECIFIED
    initializer: Any = field(default_factory=NoInitializer)

    def __post_init__(self) -> None:
        if isinstance(self.identifier, str):
            self.identifier = Id(self.identifier)

    @classmethod
    def simple(cls, name: str, type_name: str) -> VarDecl:
        """Variable of a simple type without initial value."""
        return cls(new_symbol(name), initializer=simple_uninitialized(Type(type_name)))

    @classmethod
    def string(
        cls, name: str, var_type: VariableType, qualifier: DeclarationQualifier
    ) -> VarDecl:
        """String variable of unspecified length and no initial value."""
        return cls(new_symbol(name), var_type, qualifier, StringInitializer())

    @classmethod
    def uninitialized_enumerated(cls, name: str, type_name: str) -> VarDecl:
        return cls(
            new_symbol(name),
            initializer=EnumeratedInitialValueAssignment(Type(type_name), None),
        )

    @classmethod
    def enumerated(cls, name: str, type_name: str, initial_value: str) -> VarDecl:
        return cls(
            new_symbol(name),
            initializer=EnumeratedInitialValueAssignment(
                Type(type_name), EnumeratedValue(Id(initial_value))
            ),
        )

    @classmethod
    def function_block(cls, name: str, type_name: str) -> VarDecl:
        return cls(
            new_symbol(name),
            initializer=FunctionBlockInitialValueAssignment(Type(type_name), []),
        )

    @classmethod
    def structure(cls, name: str, type_name: str) -> VarDecl:
        return cls(
            new_symbol(name),
            initializer=StructureInitializationDeclaration(Type(type_name), []),
        )

    @classmethod
    def late_bound(cls, name: str, type_name: str) -> VarDecl:
        """Variable whose type kind is resolved once all types are known."""
        return cls(new_symbol(name), initializer=LateResolvedType(Type(type_name)))

    def with_type(self, var_type: VariableType) -> VarDecl:
        """Copy of this declaration with the given variable type."""
        return replace(self, var_type=var_type)

    def with_qualifier(self, qualifier: DeclarationQualifier) -> VarDecl:
        """Copy of this declaration with the given qualifier."""
        return replace(self, qualifier=qualifier)

    def span(self) -> SourceSpan:
        return self.identifier.span()


@dataclass
class EdgeVarDecl:
    """Edge-triggered input declaration."""

    identifier: Id
    direction: EdgeDirection
    qualifier: DeclarationQualifier = DeclarationQualifier.UNSPECIFIED

    def __post_init__(self) -> None:
        self.identifier = _as_id(self.identifier)