from typing import List
import logging
import re

from textedit import EditSet, OverlapError, TextEdit, line_at_offset

logger = logging.getLogger(__name__)


class RenameSymbol:
    def __init__(self, old_name: str, new_name: str):
        self._pattern = re.compile(rf"\b{re.escape(old_name)}\b")
        self._new_name = new_name

    def __call__(self, text: str) -> List[TextEdit]:
        edits = []
        for match in self._pattern.finditer(text):
            logger.debug(f"Occurrence on line - {line_at_offset(text, match.start())}")
            edits.append(TextEdit.create(match.start(), len(match.group()), self._new_name))
        return edits


if __name__ == "__main__":
    # Rename a symbol, then try to stack a conflicting edit on top of it.
    logging.basicConfig(level=logging.DEBUG)
    source = "total = 0\nfor item in items:\n    total += item\nprint(total)\n"
    rename = EditSet.from_text_edits(RenameSymbol("total", "subtotal")(source))
    print(rename.apply(source))
    try:
        rename.add(TextEdit.delete(2, 4)).apply(source)
    except OverlapError as e:
        print(e)
