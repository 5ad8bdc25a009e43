from typing import AnyStr, Iterable, Iterator, List, Tuple
import logging
import math

from textedit.edit import TextEditLike
from textedit.errors import OverlapError, RangeError, RangeReason

logger = logging.getLogger(__name__)


class EditSet:
    """An immutable set of text edits kept in ascending order of ``start``.

    Edits with the same start keep the order they were given in, so when two
    sets are merged the receiver's edits come first. Nothing is validated
    until ``apply``.
    """

    def __init__(self, *edits: TextEditLike):
        # sorted() is stable, ties keep their input order
        self._edits: Tuple[TextEditLike, ...] = tuple(
            sorted(edits, key=lambda edit: edit.start)
        )

    @classmethod
    def none(cls) -> "EditSet":
        return cls()

    @classmethod
    def one(cls, edit: TextEditLike) -> "EditSet":
        return cls(edit)

    @classmethod
    def from_text_edits(cls, edits: Iterable[TextEditLike]) -> "EditSet":
        return cls(*edits)

    def add(self, edit: TextEditLike) -> "EditSet":
        return EditSet(*self._edits, edit)

    def merge(self, other: "EditSet") -> "EditSet":
        """Merge ``other`` into this set.

        Edits from this set are ordered before those of ``other`` when they
        share a start offset.
        """
        return EditSet(*self._edits, *other._edits)

    def __iter__(self) -> Iterator[TextEditLike]:
        return iter(self._edits)

    def __len__(self) -> int:
        return len(self._edits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EditSet):
            return NotImplemented
        return self._edits == other._edits

    def __hash__(self) -> int:
        return hash(self._edits)

    def __repr__(self) -> str:
        return f"EditSet({', '.join(repr(edit) for edit in self._edits)})"

    def apply(self, text: AnyStr) -> AnyStr:
        """Apply every edit to ``text`` and return the result.

        Offsets index code points when ``text`` is a ``str`` and bytes when it
        is ``bytes``; in the latter case replacements are UTF-8 encoded.
        Edits are spliced from the end of the text backwards so offsets of the
        edits still to be applied stay valid.
        """
        logger.debug(f"Applying {len(self._edits)} edits to text of length {len(text)}")
        prev_edit_start = math.inf
        for edit in reversed(self._edits):
            start, length = edit.start, edit.length
            # Compares against the later edit's start, not its end
            if prev_edit_start < start or prev_edit_start < start + length:
                raise OverlapError(
                    "Overlapping text edit:", edit=edit, debug=self.render_debug(edit)
                )
            if start < 0:
                raise RangeError(
                    "Start cannot be < 0:",
                    RangeReason.NEGATIVE_START,
                    edit=edit,
                    debug=self.render_debug(edit),
                )
            if length < 0:
                raise RangeError(
                    "Length cannot be < 0:",
                    RangeReason.NEGATIVE_LENGTH,
                    edit=edit,
                    debug=self.render_debug(edit),
                )
            if start + length > len(text):
                raise RangeError(
                    f"Text edit end ({start + length}) exceeds length of text ({len(text)}):",
                    RangeReason.END_EXCEEDS_TEXT,
                    edit=edit,
                    debug=self.render_debug(edit),
                )
            prev_edit_start = start
            replacement = edit.replacement
            if isinstance(text, bytes):
                replacement = replacement.encode("utf-8")
            text = text[:start] + replacement + text[start + length :]
        logger.debug(f"Edited text has length {len(text)}")
        return text

    def render_debug(self, failing_edit: TextEditLike) -> str:
        lines: List[str] = []
        for edit in self._edits:
            marker = "> " if edit is failing_edit else "  "
            replacement = edit.replacement.replace("\n", "\\n")
            lines.append(
                f'{marker}{edit.start} {edit.start + edit.length} "{replacement}"'
            )
        return "\n".join(lines)
