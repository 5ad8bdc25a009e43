from enum import Enum
from typing import Any, Optional


class RangeReason(Enum):
    NEGATIVE_START = "negative_start"
    NEGATIVE_LENGTH = "negative_length"
    END_EXCEEDS_TEXT = "end_exceeds_text"
    OFFSET_OUT_OF_RANGE = "offset_out_of_range"


class TextEditError(Exception):
    """Base class for errors raised while applying edits or locating lines.

    ``edit`` is the edit that failed, ``debug`` a dump of every edit in the
    set with the failing one marked. The dump is appended to the message.
    """

    def __init__(self, message: str, edit: Optional[Any] = None, debug: str = ""):
        super().__init__(f"{message}\n{debug}" if debug else message)
        self.edit = edit
        self.debug = debug


class OverlapError(TextEditError):
    pass


class RangeError(TextEditError, IndexError):
    def __init__(
        self,
        message: str,
        reason: RangeReason,
        edit: Optional[Any] = None,
        debug: str = "",
    ):
        super().__init__(message, edit=edit, debug=debug)
        self.reason = reason
