from textedit.errors import RangeError, RangeReason


class LineAtOffset:
    """Return the line of ``text`` containing ``offset``.

    The offset indexes code points, so multi-byte characters are never
    split. An offset sitting on a terminator belongs to the line it ends, and
    the one-past-the-end offset is accepted.
    """

    def __init__(self, terminator: str = "\n"):
        if not terminator:
            raise ValueError("Line terminator cannot be empty.")
        self._terminator = terminator

    def __call__(self, text: str, offset: int) -> str:
        if offset < 0 or offset > len(text):
            raise RangeError(
                f"Offset {offset} is out of range for text of length {len(text)}",
                RangeReason.OFFSET_OUT_OF_RANGE,
            )
        # An offset inside a multi-character terminator belongs to the line it ends
        straddle = text.find(self._terminator, max(0, offset - len(self._terminator) + 1))
        if straddle != -1 and straddle < offset:
            offset = straddle
        start = text.rfind(self._terminator, 0, offset)
        start = 0 if start == -1 else start + len(self._terminator)
        end = text.find(self._terminator, offset)
        if end == -1:
            end = len(text)
        line = text[start:end]
        # Windows line endings
        if self._terminator == "\n" and line.endswith("\r"):
            line = line[:-1]
        return line


_line_at_offset = LineAtOffset()


def line_at_offset(text: str, offset: int) -> str:
    return _line_at_offset(text, offset)
