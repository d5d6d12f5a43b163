"""Text normalization for OCR and pasted recipe text."""

import re

# Zero-width space/non-joiner/joiner and the byte-order mark
_INVISIBLE_RE = re.compile(r"[\u200b-\u200d\ufeff]")
# Every boundary str.splitlines() recognizes
_LINE_BREAKS = r"\n\r\v\f\x1c\x1d\x1e\x85\u2028\u2029"
# Whitespace runs that do not contain a line break
_HORIZONTAL_SPACE_RE = re.compile(rf"[^\S{_LINE_BREAKS}]+")
_CJK_RE = re.compile(r"[\u4e00-\u9fa5]")


def clean_text(raw: str) -> str:
    """
    Strip invisible characters and collapse spacing.

    Line breaks are kept so the text can still be read line by line.
    """
    if not raw:
        return ""
    text = _INVISIBLE_RE.sub("", raw)
    text = _HORIZONTAL_SPACE_RE.sub(" ", text)
    return text.strip()


def normalize(raw: str) -> list[str]:
    """
    Split raw text into trimmed, non-empty lines in reading order.

    Examples:
        "Title\\r\\n\\r\\n  2  cups   flour " -> ["Title", "2 cups flour"]
        "" -> []
    """
    cleaned = clean_text(raw)
    if not cleaned:
        return []
    lines = (line.strip() for line in cleaned.splitlines())
    return [line for line in lines if line]


def detect_language(text: str) -> str:
    """Return "zh" when the text has any Chinese characters, else "en"."""
    if text and _CJK_RE.search(text):
        return "zh"
    return "en"
