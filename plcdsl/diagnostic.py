"""Diagnostics: errors and warnings tied to positions in source files."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from plcdsl.core import FileId, Id, SourceSpan
from plcdsl.literals import Type


@dataclass(frozen=True)
class QualifiedPosition:
    """Position with 1-indexed line and column and 0-indexed byte offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True)
class Location:
    """Start and end byte offsets in a file."""

    start: int
    end: int

    def __str__(self) -> str:
        return f"Location {{ start: {self.start}, end: {self.end} }}"


@dataclass(frozen=True)
class Label:
    """A range in a file with a message about it."""

    location: Location
    file_id: FileId
    message: str

    @classmethod
    def from_span(cls, span: SourceSpan, message: str) -> Label:
        """Label covering the span."""
        return cls(Location(span.start, span.end), span.file_id, str(message))

    @classmethod
    def for_file(cls, file_id: FileId | str, message: str) -> Label:
        """Label referring to a file as a whole."""
        if isinstance(file_id, str):
            file_id = FileId.from_string(file_id)
        return cls(Location(0, 0), file_id, str(message))


@dataclass(frozen=True)
class Diagnostic:
    """A problem code with a primary label and optional secondary labels."""

    code: str
    message: str
    primary: Label
    described: tuple[str, ...] = field(default_factory=tuple)
    secondary: tuple[Label, ...] = field(default_factory=tuple)

    def with_context(self, description: str, item: str) -> Diagnostic:
        """Copy with ``description=item`` added to the description."""
        return replace(self, described=self.described + (f"{description}={item}",))

    def with_context_id(self, description: str, item: Id) -> Diagnostic:
        return self.with_context(description, str(item))

    def with_context_type(self, description: str, item: Type) -> Diagnostic:
        return self.with_context(description, str(item))

    def with_secondary(self, label: Label) -> Diagnostic:
        """Copy with an additional secondary label."""
        return replace(self, secondary=self.secondary + (label,))

    def description(self) -> str:
        """The message followed by any added context."""
        if not self.described:
            return self.message
        return f"{self.message} ({', '.join(self.described)})"

    def file_ids(self) -> set[FileId]:
        """Files referred to by the primary and secondary labels."""
        return {self.primary.file_id, *(label.file_id for label in self.secondary)}