# plcdsl

`plcdsl` models the elements of IEC 61131-3 programs as Python objects:
literals, type names, data type declarations, direct addresses, variable
declarations, Structured Text expressions and statements, and diagnostics
for reporting problems at positions in source files.

Identifiers compare without regard to case, and source spans never take part
in equality, so elements built by hand compare equal to elements built with
positions attached.

## Installation

```
pip install plcdsl
```

To run the tests:

```
pip install "plcdsl[test]"
pytest
```

## Modules

- `plcdsl.core`: `FileId`, `SourceSpan` (with `join`, `join2`, `range` and
  `with_file_id`), the abstract `Located` and the case-insensitive `Id`.
- `plcdsl.literals`: `Integer` (decimal, `try_hex`/`hex`, `try_octal`/`octal`,
  `try_binary`/`binary`, range-checked conversions such as `to_u8` and
  `to_i128`), `SignedInteger`, `IntegerLiteral`, `FixedPoint`, `RealLiteral`,
  `BooleanLiteral`, `CharacterStringLiteral`, `BitStringLiteral`, `Type` and
  `ElementaryTypeName`.
- `plcdsl.time_literals`: `DurationLiteral` (built from days, hours, minutes,
  seconds or milliseconds, held in nanoseconds), `TimeOfDayLiteral`,
  `DateLiteral` and `DateAndTimeLiteral`.
- `plcdsl.datatypes`: enumeration, subrange, simple, array, structure and
  string declarations, `LocationPrefix`, `SizePrefix` and `AddressAssignment`
  for direct addresses such as `%IX1.2`.
- `plcdsl.variables`: `VarDecl` and its constructors, `VariableType`,
  `DeclarationQualifier`, `EdgeVarDecl`, direct variable identifiers and the
  initial value assignments.
- `plcdsl.textual`: variables, expressions and statements of Structured Text,
  with helpers such as `fb_assign`, `simple_assignment` and `if_then`.
- `plcdsl.diagnostic`: `Location`, `QualifiedPosition`, `Label` and
  `Diagnostic`.

Parsing functions raise `ValueError` when the text is not valid; the integer
conversions raise `TryFromIntegerError`, a subclass of `ValueError`, when the
value does not fit.

## Example

```python
from plcdsl.core import FileId, Id, SourceSpan
from plcdsl.datatypes import AddressAssignment
from plcdsl.diagnostic import Diagnostic, Label
from plcdsl.literals import FixedPoint, Integer, SignedInteger
from plcdsl.textual import fb_assign
from plcdsl.time_literals import DurationLiteral
from plcdsl.variables import VarDecl, VariableType

assert Id("Reset") == Id("RESET")

assert Integer.try_hex("16#FF").value == 255
assert SignedInteger.new("-12").to_i128() == -12

duration = DurationLiteral.seconds(FixedPoint.parse("1.001"))
print(duration.nanoseconds)  # 1001000000

address = AddressAssignment.parse("%IX1.2")
print(address.location, address.size, address.address)
# LocationPrefix.I SizePrefix.X [1, 2]

reset = VarDecl.simple("Reset", "BOOL").with_type(VariableType.INPUT)
stmt = fb_assign("AverageVal", ["Cnt1", "Cnt2"], "_TMP_AverageVal17_OUT")
print(stmt.target, [str(p.expr.name) for p in stmt.value.param_assignment])
# _TMP_AverageVal17_OUT ['Cnt1', 'Cnt2']

span = SourceSpan.range(4, 9).with_file_id(FileId.from_string("main.st"))
problem = Diagnostic("P0001", "Unexpected token", Label.from_span(span, "here"))
print(problem.with_context("name", "x").description())
# Unexpected token (name=x)
```

## What this package does not do

`plcdsl` holds element definitions only. It has no lexer or parser, so
programs are not read from text; there are no declarations for functions,
function blocks, programs, sequential function charts, resources or
configurations, no container for a whole library, and no tree traversal or
rewriting helpers. There is no command-line tool.