"""Recipe name selection from the top of the document."""

import re

from .instructions import STEP_NUMBER_RE

UNTITLED = "Untitled Recipe"

TITLE_WINDOW = 10
MIN_TITLE_CHARS = 6
MAX_TITLE_CHARS = 99

_SECTION_HEADER_RE = re.compile(r"ingredients?|食材|材料|instructions?|做法|步骤", re.IGNORECASE)
_LABELLED_TITLE_RE = re.compile(r"^(?:title|recipe|菜名|名称)\s*[:：]\s*(.+)$", re.IGNORECASE)


def _is_candidate(line: str) -> bool:
    return (
        MIN_TITLE_CHARS <= len(line) <= MAX_TITLE_CHARS
        and not _SECTION_HEADER_RE.search(line)
        and not STEP_NUMBER_RE.match(line)
    )


def extract_name(lines: list[str]) -> str:
    """
    Pick the recipe name from the first lines of the document.

    An explicit "Title: ..." / "菜名：..." label wins. Otherwise the longest
    qualifying line is used (first one on ties), then the first line, then
    "Untitled Recipe".
    """
    if not lines:
        return UNTITLED

    top_lines = lines[:TITLE_WINDOW]

    for line in top_lines:
        match = _LABELLED_TITLE_RE.match(line)
        if match and match.group(1).strip():
            return match.group(1).strip()

    candidates = [line for line in top_lines if _is_candidate(line)]
    if candidates:
        # max() keeps the first of equally long lines
        return max(candidates, key=len)

    return lines[0]
