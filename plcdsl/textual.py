"""Elements of the textual languages: variables, expressions and statements."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from plcdsl.core import Id, Located, SourceSpan
from plcdsl.datatypes import AddressAssignment, EnumeratedValue, Subrange
from plcdsl.literals import IntegerLiteral, SignedInteger


def _as_id(value: Id | str) -> Id:
    return Id(value) if isinstance(value, str) else value


@dataclass
class Statements:
    """A body made of a list of statements."""

    body: list = field(default_factory=list)


@dataclass
class NamedVariable(Located):
    """A variable referenced by its symbolic name."""

    name: Id

    def __post_init__(self) -> None:
        self.name = _as_id(self.name)

    def span(self) -> SourceSpan:
        return self.name.span()

    def __str__(self) -> str:
        return str(self.name)


@dataclass
class ArrayVariable(Located):
    """An element of an array selected by subscript expressions."""

    subscripted_variable: Any
    subscripts: list = field(default_factory=list)

    def span(self) -> SourceSpan:
        return self.subscripted_variable.span()

    def __str__(self) -> str:
        return f"{self.subscripted_variable} {self.subscripts!r}"


@dataclass
class StructuredVariable(Located):
    """A field of a structured variable."""

    record: Any
    field: Id

    def __post_init__(self) -> None:
        self.field = _as_id(self.field)

    def span(self) -> SourceSpan:
        return SourceSpan.join2(self.record, self.field)

    def __str__(self) -> str:
        return f"{self.record} {self.field}"


SymbolicVariableKind = Union[NamedVariable, ArrayVariable, StructuredVariable]
Variable = Union[AddressAssignment, NamedVariable, ArrayVariable, StructuredVariable]


def named_variable(name: str) -> NamedVariable:
    """Variable referenced by name."""
    return NamedVariable(Id(name))


def structured_variable(record: str, field: str) -> StructuredVariable:
    """Field ``field`` of the named variable ``record``."""
    return StructuredVariable(named_variable(record), Id(field))


@dataclass
class FbCall(Located):
    """Invocation of a function block instance."""

    var_name: Id
    params: list = field(default_factory=list)
    position: SourceSpan = field(default_factory=SourceSpan)

    def __post_init__(self) -> None:
        self.var_name = _as_id(self.var_name)

    def span(self) -> SourceSpan:
        return self.position


class CompareOp(Enum):
    """Operators that produce a Boolean result."""

    OR = "OR"
    XOR = "XOR"
    AND = "AND"
    EQ = "="
    NE = "<>"
    LT = "<"
    GT = ">"
    LT_EQ = "<="
    GT_EQ = ">="


class Operator(Enum):
    """Arithmetic operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "MOD"
    POW = "**"


class UnaryOp(Enum):
    """Operators with a single operand."""

    NEG = "-"
    NOT = "NOT"


@dataclass
class CompareExpr:
    op: CompareOp
    left: Any
    right: Any


@dataclass
class BinaryExpr:
    op: Operator
    left: Any
    right: Any


@dataclass
class UnaryExpr:
    op: UnaryOp
    term: Any


@dataclass
class Expression:
    """A parenthesised expression."""

    expr: Any


@dataclass
class Function:
    """Invocation of a function within an expression."""

    name: Id
    param_assignment: list = field(default_factory=list)

    def __post_init__(self) -> None:
        self.name = _as_id(self.name)


@dataclass
class LateBound:
    """A name whose kind is only known once all declarations are resolved."""

    name: Id

    def __post_init__(self) -> None:
        self.name = _as_id(self.name)


def compare(op: CompareOp, left: Any, right: Any) -> CompareExpr:
    return CompareExpr(op, left, right)


def binary(op: Operator, left: Any, right: Any) -> BinaryExpr:
    return BinaryExpr(op, left, right)


def unary(op: UnaryOp, term: Any) -> UnaryExpr:
    return UnaryExpr(op, term)


def named_variable_expr(name: str) -> NamedVariable:
    """Expression that reads the named variable."""
    return named_variable(name)


def late_bound(name: str) -> LateBound:
    return LateBound(Id(name))


def integer_literal(value: str) -> IntegerLiteral:
    """Integer constant expression from signed decimal text."""
    return IntegerLiteral(SignedInteger.new(value))


@dataclass
class PositionalInput:
    """Input argument mapped by its position."""

    expr: Any


@dataclass
class NamedInput:
    """Input argument mapped by its name."""

    name: Id
    expr: Any

    def __post_init__(self) -> None:
        self.name = _as_id(self.name)


@dataclass
class Output:
    """Output captured from an invocation into a variable."""

    src: Id
    tgt: Any
    negated: bool = False

    def __post_init__(self) -> None:
        self.src = _as_id(self.src)


ParamAssignmentKind = Union[PositionalInput, NamedInput, Output]


def positional(expr: Any) -> PositionalInput:
    return PositionalInput(expr)


def named(name: str, expr: Any) -> NamedInput:
    return NamedInput(Id(name), expr)


@dataclass
class Assignment:
    target: Any
    value: Any


@dataclass
class ElseIf:
    expr: Any
    body: list = field(default_factory=list)


@dataclass
class If:
    expr: Any
    body: list = field(default_factory=list)
    else_ifs: list[ElseIf] = field(default_factory=list)
    else_body: list = field(default_factory=list)


@dataclass
class CaseStatementGroup:
    """Statements selected by subranges, integers or enumerated values."""

    selectors: list = field(default_factory=list)
    statements: list = field(default_factory=list)


@dataclass
class Case:
    selector: Any
    statement_groups: list[CaseStatementGroup] = field(default_factory=list)
    else_body: list = field(default_factory=list)


@dataclass
class For:
    control: Id
    from_: Any
    to: Any
    step: Optional[Any] = None
    body: list = field(default_factory=list)

    def __post_init__(self) -> None:
        self.control = _as_id(self.control)


@dataclass
class While:
    condition: Any
    body: list = field(default_factory=list)


@dataclass
class Repeat:
    until: Any
    body: list = field(default_factory=list)


@dataclass
class Return:
    """Return from the current unit."""


@dataclass
class Exit:
    """Exit the innermost loop."""


CaseSelectionKind = Union[Subrange, SignedInteger, EnumeratedValue]
StmtKind = Union[Assignment, FbCall, If, Case, For, While, Repeat, Return, Exit]


def if_then(condition: Any, body: list) -> If:
    return If(condition, list(body))


def if_then_else(condition: Any, body: list, else_body: list) -> If:
    return If(condition, list(body), [], list(else_body))


def fb_assign(fb_name: str, inputs, output: str) -> Assignment:
    """Assign the result of calling ``fb_name`` with late bound inputs."""
    params = [positional(late_bound(name)) for name in inputs]
    return assignment(named_variable(output), Function(Id(fb_name), params))


def fb_call_mapped(fb_name: str, inputs) -> FbCall:
    """Call ``fb_name`` with (parameter, late bound source) pairs."""
    params = [named(param, late_bound(src)) for param, src in inputs]
    return FbCall(Id(fb_name), params)


def assignment(target: Any, value: Any) -> Assignment:
    return Assignment(target, value)


def simple_assignment(target: str, src: str) -> Assignment:
    return Assignment(named_variable(target), late_bound(src))


def structured_assignment(target: str, record: str, field: str) -> Assignment:
    return Assignment(named_variable(target), structured_variable(record, field))