"""Derived data type declarations and directly represented addresses."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from plcdsl.core import Id, Located, SourceSpan
from plcdsl.literals import (
    BitStringLiteral,
    BooleanLiteral,
    CharacterStringLiteral,
    ElementaryTypeName,
    Integer,
    IntegerLiteral,
    RealLiteral,
    SignedInteger,
    Type,
)
from plcdsl.time_literals import (
    DateAndTimeLiteral,
    DateLiteral,
    DurationLiteral,
    TimeOfDayLiteral,
)

ConstantKind = Union[
    IntegerLiteral,
    RealLiteral,
    BooleanLiteral,
    CharacterStringLiteral,
    DurationLiteral,
    TimeOfDayLiteral,
    DateLiteral,
    DateAndTimeLiteral,
    BitStringLiteral,
]


def _as_id(value: Id | str) -> Id:
    return Id(value) if isinstance(value, str) else value


def _as_type(value: Type | str) -> Type:
    return Type(value) if isinstance(value, str) else value


@dataclass
class LateBoundDeclaration:
    """Type declaration whose kind is only known once all types are parsed."""

    data_type_name: Type
    base_type_name: Type


@dataclass
class EnumeratedValue(Located):
    """A value of an enumeration, possibly qualified by its type name."""

    value: Id
    type_name: Optional[Type] = None

    def __post_init__(self) -> None:
        self.value = _as_id(self.value)
        if isinstance(self.type_name, str):
            self.type_name = Type(self.type_name)

    def span(self) -> SourceSpan:
        if self.type_name is not None:
            return SourceSpan.join2(self.type_name, self.value)
        return self.value.span()


@dataclass
class EnumeratedSpecificationValues:
    """Ordered list of enumeration values; the first is the implicit default."""

    values: list[EnumeratedValue] = field(default_factory=list)

    @classmethod
    def from_names(cls, values) -> EnumeratedSpecificationValues:
        return cls([EnumeratedValue(v) for v in values])


@dataclass
class EnumeratedSpecificationInit:
    """An enumeration specification with an optional default value."""

    spec: Union[Type, EnumeratedSpecificationValues]
    default: Optional[EnumeratedValue] = None

    @classmethod
    def values_and_default(cls, values, default: str) -> EnumeratedSpecificationInit:
        return cls(
            EnumeratedSpecificationValues.from_names(values),
            EnumeratedValue(default),
        )


@dataclass
class EnumerationDeclaration:
    type_name: Type
    spec_init: EnumeratedSpecificationInit


@dataclass
class Subrange:
    """Inclusive range of integers."""

    start: SignedInteger
    end: SignedInteger


@dataclass
class SubrangeSpecification:
    """Restriction of an elementary integer type to a subrange."""

    type_name: ElementaryTypeName
    subrange: Subrange


@dataclass
class SubrangeDeclaration:
    type_name: Type
    spec: Union[SubrangeSpecification, Type]
    default: Optional[SignedInteger] = None


@dataclass
class SimpleDeclaration:
    type_name: Type
    # One of the initial value assignment kinds.
    spec_and_init: Any


@dataclass
class ArraySubranges:
    ranges: list[Subrange]
    type_name: Type


@dataclass
class Repeated:
    """An array initial value repeated ``size`` times."""

    size: Integer
    init: Optional[Union[ConstantKind, EnumeratedValue, Repeated]] = None


@dataclass
class ArrayDeclaration:
    type_name: Type
    spec: Union[Type, ArraySubranges]
    init: list = field(default_factory=list)


@dataclass
class StructureElementDeclaration:
    name: Id
    # One of the initial value assignment kinds.
    init: Any


@dataclass
class StructureDeclaration:
    type_name: Type
    elements: list[StructureElementDeclaration] = field(default_factory=list)


@dataclass
class StructureElementInit:
    """Initial value of a named element in a structure."""

    name: Id
    # A constant, an enumerated value, or a list of array elements or
    # of structure element initializers.
    init: Any


@dataclass
class StructureInitializationDeclaration:
    type_name: Type
    elements_init: list[StructureElementInit] = field(default_factory=list)


class StringType(Enum):
    """Width of the characters of a string."""

    STRING = "STRING"
    WSTRING = "WSTRING"


@dataclass
class StringDeclaration:
    type_name: Type
    length: Integer
    width: StringType = StringType.STRING
    init: Optional[str] = None


class LocationPrefix(Enum):
    """Location prefix of directly represented variables."""

    I = "I"  # noqa: E741
    Q = "Q"
    M = "M"

    @classmethod
    def parse(cls, value: Optional[str]) -> LocationPrefix:
        """Location prefix from the first character of the text."""
        first = value[:1] if value else ""
        try:
            return cls(first)
        except ValueError:
            raise ValueError("Value must be one of I, Q, M") from None


class SizePrefix(Enum):
    """Size prefix of directly represented variables."""

    UNSPECIFIED = "*"
    NIL = ""
    X = "X"
    B = "B"
    W = "W"
    D = "D"
    L = "L"

    @classmethod
    def parse(cls, value: Optional[str]) -> SizePrefix:
        """Size prefix from the first character of the text; none is NIL."""
        first = value[:1] if value else ""
        try:
            return cls(first)
        except ValueError:
            raise ValueError("Value must be one of *, X, B, W, D, L, NIL") from None


_DIRECT_ADDRESS_UNASSIGNED = re.compile(r"%([IQM])\*")
_DIRECT_ADDRESS = re.compile(r"%([IQM])([XBWDL])?(\d(\.\d)*)")


@dataclass
class AddressAssignment:
    """Hardware address assigned to a variable."""

    location: LocationPrefix
    size: SizePrefix
    address: list[int] = field(default_factory=list)
    position: SourceSpan = field(default_factory=SourceSpan)

    @classmethod
    def parse(cls, value: str) -> AddressAssignment:
        """Parse a direct address such as ``%IX1.2`` or ``%Q*``."""
        match = _DIRECT_ADDRESS_UNASSIGNED.search(value)
        if match:
            return cls(LocationPrefix.parse(match[1]), SizePrefix.UNSPECIFIED, [])
        match = _DIRECT_ADDRESS.search(value)
        if match:
            return cls(
                LocationPrefix.parse(match[1]),
                SizePrefix.parse(match[2]),
                [int(part) for part in match[3].split(".")],
            )
        raise ValueError("Value not convertible to direct variable")

    def __str__(self) -> str:
        return (
            f"AddressAssignment {{ location: {self.location.name}, "
            f"size: {self.size.name.title()} }}"
        )


ArrayInitialElementKind = Union[ConstantKind, EnumeratedValue, Repeated]
ArraySpecificationKind = Union[Type, ArraySubranges]
EnumeratedSpecificationKind = Union[Type, EnumeratedSpecificationValues]
SubrangeSpecificationKind = Union[SubrangeSpecification, Type]
DataTypeDeclarationKind = Union[
    EnumerationDeclaration,
    SubrangeDeclaration,
    SimpleDeclaration,
    ArrayDeclaration,
    StructureDeclaration,
    StructureInitializationDeclaration,
    StringDeclaration,
    LateBoundDeclaration,
]