"""Elementary literals, type names and type identifiers."""

from __future__ import annotations

import math
import string
import struct
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from plcdsl.core import Id, Located, SourceSpan

_DECIMAL = "0123456789"
_OCTAL = "01234567"
_BINARY = "01"
_U128_LIMIT = 1 << 128
_U64_LIMIT = 1 << 64


class TryFromIntegerError(ValueError):
    """The integer does not fit in the requested type."""


def _parse_unsigned(digits: str, base: int, error: str, limit: int = _U128_LIMIT) -> int:
    if not digits:
        raise ValueError(error)
    value = int(digits, base)
    if value >= limit:
        raise ValueError(error)
    return value


def _checked(value: int, limit: int) -> int:
    if value >= limit:
        raise TryFromIntegerError(f"{value} is out of range")
    return value


def _prefixed(a: str, prefix: str, allowed: str, name: str) -> str:
    if not a.startswith(prefix):
        raise ValueError(f"Non-{name} start")
    chars = [c for c in a[len(prefix):] if c != "_"]
    if any(c not in allowed for c in chars):
        raise ValueError(f"Non-{name} characters")
    return "".join(chars)


@dataclass(frozen=True)
class Integer(Located):
    """Unsigned integer literal held at the largest possible size."""

    value: int
    position: SourceSpan = field(default_factory=SourceSpan)

    @classmethod
    def new(cls, a: str, span: SourceSpan | None = None) -> Integer:
        """Parse a decimal integer, ignoring every non-digit character."""
        digits = "".join(c for c in a if c in _DECIMAL)
        return cls(_parse_unsigned(digits, 10, "dec"), span or SourceSpan())

    @classmethod
    def try_hex(cls, a: str) -> Integer:
        """Parse a ``16#`` prefixed hexadecimal integer."""
        digits = _prefixed(a, "16#", string.hexdigits, "hex")
        return cls(_parse_unsigned(digits, 16, "hex"))

    @classmethod
    def hex(cls, a: str, span: SourceSpan | None = None) -> Integer:
        """Parse the hexadecimal digits of the text."""
        digits = "".join(c for c in a if c in string.hexdigits)
        return cls(_parse_unsigned(digits, 16, "hex"), span or SourceSpan())

    @classmethod
    def try_octal(cls, a: str) -> Integer:
        """Parse an ``8#`` prefixed octal integer."""
        digits = _prefixed(a, "8#", _OCTAL, "octal")
        return cls(_parse_unsigned(digits, 8, "octal"))

    @classmethod
    def octal(cls, a: str, span: SourceSpan | None = None) -> Integer:
        """Parse the octal digits of the text."""
        digits = "".join(c for c in a if c in _OCTAL)
        return cls(_parse_unsigned(digits, 8, "octal"), span or SourceSpan())

    @classmethod
    def try_binary(cls, a: str) -> Integer:
        """Parse a ``2#`` prefixed binary integer."""
        digits = _prefixed(a, "2#", _BINARY, "binary")
        return cls(_parse_unsigned(digits, 2, "binary"))

    @classmethod
    def binary(cls, a: str, span: SourceSpan | None = None) -> Integer:
        """Parse the binary digits of the text."""
        digits = "".join(c for c in a if c in _BINARY)
        return cls(_parse_unsigned(digits, 2, "binary"), span or SourceSpan())

    def to_u8(self) -> int:
        return _checked(self.value, 1 << 8)

    def to_u32(self) -> int:
        return _checked(self.value, 1 << 32)

    def to_i128(self) -> int:
        return _checked(self.value, 1 << 127)

    def to_f64(self) -> float:
        """Convert to a float; only values that fit in 32 bits are accepted."""
        return float(self.to_u32())

    def to_f32(self) -> float:
        """Convert to the nearest single precision value."""
        try:
            return struct.unpack("f", struct.pack("f", float(self.value)))[0]
        except OverflowError:
            return math.inf

    def span(self) -> SourceSpan:
        return self.position

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class SignedInteger:
    """An integer with a sign."""

    value: Integer
    is_neg: bool = False

    @classmethod
    def new(cls, a: str, span: SourceSpan | None = None) -> SignedInteger:
        """Parse a decimal integer with an optional leading sign."""
        if a.startswith("+"):
            return cls(Integer.new(a[1:], span), False)
        if a.startswith("-"):
            return cls(Integer.new(a[1:], span), True)
        return cls(Integer.new(a, span), False)

    @classmethod
    def positive(cls, a: str) -> SignedInteger:
        return cls(Integer.new(a), False)

    @classmethod
    def negative(cls, a: str) -> SignedInteger:
        return cls(Integer.new(a), True)

    @classmethod
    def from_integer(cls, value: Integer) -> SignedInteger:
        return cls(value, False)

    def to_u8(self) -> int:
        """Magnitude as an 8-bit value; the sign is not considered."""
        return self.value.to_u8()

    def to_u32(self) -> int:
        """Magnitude as a 32-bit value; the sign is not considered."""
        return self.value.to_u32()

    def to_i128(self) -> int:
        primitive = self.value.to_i128()
        return -primitive if self.is_neg else primitive

    def __str__(self) -> str:
        return f"-{self.value}" if self.is_neg else str(self.value)


class ElementaryTypeName(Enum):
    """Elementary type names."""

    BOOL = "BOOL"
    SINT = "SINT"
    INT = "INT"
    DINT = "DINT"
    LINT = "LINT"
    USINT = "USINT"
    UINT = "UINT"
    UDINT = "UDINT"
    ULINT = "ULINT"
    REAL = "REAL"
    LREAL = "LREAL"
    TIME = "TIME"
    DATE = "DATE"
    TIME_OF_DAY = "TIME_OF_DAY"
    DATE_AND_TIME = "DATE_AND_TIME"
    STRING = "STRING"
    BYTE = "BYTE"
    WORD = "WORD"
    DWORD = "DWORD"
    LWORD = "LWORD"
    WSTRING = "WSTRING"

    def as_id(self) -> Id:
        return Id(self.value)

    def as_type(self) -> Type:
        return Type(self.as_id())


@dataclass(frozen=True)
class IntegerLiteral:
    """A signed integer literal with an optional type name."""

    value: SignedInteger
    data_type: ElementaryTypeName | None = None


def integer_constant(value: str) -> IntegerLiteral:
    """Integer literal constant parsed from signed decimal text."""
    return IntegerLiteral(SignedInteger.new(value))


@dataclass(frozen=True)
class FixedPoint:
    """Fixed point number with whole part and femtosecond-scale fraction."""

    FRACTIONAL_UNITS: ClassVar[int] = 1_000_000_000_000_000

    whole: int
    femptos: int
    span: SourceSpan = field(default_factory=SourceSpan)

    @classmethod
    def parse(cls, text: str) -> FixedPoint:
        """Parse a decimal number, keeping up to 15 fractional digits exactly."""
        value = "".join(c for c in text if c in _DECIMAL or c == ".")
        whole, dot, decimal = value.partition(".")
        if not dot:
            if not value.isdigit():
                raise ValueError("u64")
            return cls(_parse_unsigned(value, 10, "u64", _U64_LIMIT), 0)

        if not whole.isdigit():
            raise ValueError("floating point whole not valid")
        whole_value = _parse_unsigned(whole, 10, "floating point whole not valid", _U64_LIMIT)

        if len(decimal) > 15:
            raise ValueError("floating point decimal excessive precision")
        decimal = decimal.ljust(15, "0")
        if not decimal.isdigit():
            raise ValueError("floating point decimal not valid")
        return cls(whole_value, int(decimal))

    @classmethod
    def from_integer(cls, value: Integer) -> FixedPoint:
        return cls(value.value % _U64_LIMIT, 0, value.span())


@dataclass(frozen=True)
class RealLiteral:
    """Real (floating point) literal."""

    value: float
    data_type: ElementaryTypeName | None = None

    @classmethod
    def try_parse(cls, a: str, type_name: ElementaryTypeName | None = None) -> RealLiteral:
        """Parse real literal text; underscores are ignored."""
        chars = [c for c in a if c != "_"]
        if any(not (c in _DECIMAL or c in ".Ee-") for c in chars):
            raise ValueError("Non-real characters")
        try:
            value = float("".join(chars))
        except ValueError:
            raise ValueError("real") from None
        return cls(value, type_name)


class Boolean(Enum):
    TRUE = True
    FALSE = False


@dataclass(frozen=True)
class BooleanLiteral:
    value: Boolean


@dataclass(frozen=True)
class CharacterStringLiteral:
    value: str


@dataclass(frozen=True)
class BitStringLiteral:
    value: Integer
    data_type: ElementaryTypeName | None = None


@dataclass(frozen=True)
class Type(Located):
    """A type identifier; accepts either an identifier or its text."""

    name: Id

    def __post_init__(self) -> None:
        if isinstance(self.name, str):
            object.__setattr__(self, "name", Id(self.name))

    @classmethod
    def from_id(cls, name: Id) -> Type:
        return cls(name)

    def span(self) -> SourceSpan:
        return self.name.span()

    def __str__(self) -> str:
        return str(self.name)