"""Core items shared by all language elements: files, spans and identifiers."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class FileId:
    """Identifier for a file, normally its path."""

    path: str = ""

    @classmethod
    def from_path(cls, path: str | bytes | os.PathLike) -> FileId:
        """Create a file identifier from a path or directory entry."""
        return cls(os.fsdecode(path))

    @classmethod
    def from_string(cls, path: str) -> FileId:
        """Create a file identifier from text that is normally a file path."""
        return cls(path)

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True, eq=False)
class SourceSpan:
    """Range of character positions in a source file.

    Spans always compare equal: when comparing elements, their position
    in the source is almost never of interest.
    """

    start: int = 0
    end: int = 0
    file_id: FileId = field(default_factory=FileId)

    @classmethod
    def join(cls, start: SourceSpan, end: SourceSpan) -> SourceSpan:
        """Span from the start of ``start`` to the end of ``end``."""
        return cls(start.start, end.end, start.file_id)

    @classmethod
    def join2(cls, start: Located, end: Located) -> SourceSpan:
        """Span from the start of one located item to the start of another."""
        first = start.span()
        return cls(first.start, end.span().start, first.file_id)

    @classmethod
    def range(cls, start: int, end: int) -> SourceSpan:
        """Span over the given positions in an unnamed file."""
        return cls(start, end, FileId())

    def with_file_id(self, file_id: FileId) -> SourceSpan:
        """Copy of this span located in the given file."""
        return replace(self, file_id=file_id)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SourceSpan):
            return True
        return NotImplemented

    def __hash__(self) -> int:
        return 0


class Located(ABC):
    """An element that has a position in source code."""

    @abstractmethod
    def span(self) -> SourceSpan:
        """Return the source position of the element."""


class Id(Located):
    """Case-insensitive identifier."""

    __slots__ = ("original", "lower_case", "position")

    def __init__(self, original: str, position: SourceSpan | None = None) -> None:
        self.original = original
        self.lower_case = original.lower()
        self.position = position if position is not None else SourceSpan()

    def with_position(self, loc: SourceSpan) -> Id:
        """Copy of this identifier at the given position."""
        return Id(self.original, loc)

    def span(self) -> SourceSpan:
        return self.position

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Id):
            return self.lower_case == other.lower_case
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.lower_case)

    def __str__(self) -> str:
        return self.original

    def __repr__(self) -> str:
        return self.original