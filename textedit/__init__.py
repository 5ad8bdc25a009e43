from textedit.edit import Span, TextEdit, TextEditLike
from textedit.edit_set import EditSet
from textedit.errors import OverlapError, RangeError, RangeReason, TextEditError
from textedit.line import LineAtOffset, line_at_offset

__version__ = "0.1.0"
