from dataclasses import dataclass
from typing import Protocol


class TextEditLike(Protocol):
    start: int
    length: int
    replacement: str


@dataclass(eq=True, frozen=True)
class Span:
    start: int
    end: int


@dataclass(eq=True, frozen=True)
class TextEdit:
    """Replace ``length`` units of text at ``start`` with ``replacement``.

    Bounds are not checked here, an edit is only validated against a text
    when an ``EditSet`` applies it.
    """

    start: int
    length: int
    replacement: str = ""

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def span(self) -> Span:
        return Span(self.start, self.end)

    @classmethod
    def create(cls, start: int, length: int, replacement: str = "") -> "TextEdit":
        return cls(start, length, replacement)

    @classmethod
    def from_span(cls, span: Span, replacement: str) -> "TextEdit":
        return cls(span.start, span.end - span.start, replacement)

    @classmethod
    def insert(cls, offset: int, text: str) -> "TextEdit":
        return cls(offset, 0, text)

    @classmethod
    def delete(cls, start: int, length: int) -> "TextEdit":
        return cls(start, length, "")
