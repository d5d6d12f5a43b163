"""
Instruction step selection.

Pass 1 keeps lines that look like cooking steps: a step keyword or a
cooking verb, or simply a long line. If that finds fewer than three steps,
pass 2 also admits any long, non-ingredient, non-header line. Results are
always in document order and capped at MAX_STEPS.
"""

import re

MAX_STEPS = 15
MIN_PASS2_STEPS = 3

# Pass 1 bounds
LONG_LINE_CHARS = 20
MAX_LINE_CHARS = 200
MIN_STEP_CHARS = 6

# Pass 2 bounds
LENIENT_MIN_CHARS = 30

INSTRUCTION_KEYWORDS: tuple[str, ...] = (
    "做法", "步骤", "制作", "烹饪", "方法",
    "instructions", "directions", "method", "steps",
    "腌", "烤", "炒", "煮", "切", "拌", "放", "加", "倒",
    "marinate", "mix", "bake", "cook", "fry", "boil", "cut", "add", "pour", "stir",
)

# Quantity lines are ingredients, even inside an instructions block.
_QUANTITY_RE = re.compile(r"\d+\s*(g|ml|克|毫升|杯|勺)")
_LENIENT_QUANTITY_RE = re.compile(r"\d+\s*(g|ml|克|毫升)")
_INGREDIENT_HEADER_RE = re.compile(r"ingredients?|食材|材料", re.IGNORECASE)
_INSTRUCTION_HEADER_RE = re.compile(
    r"^(instructions?|directions?|method|steps?|做法|步骤)\s*[:：]?$",
    re.IGNORECASE,
)

# ASCII or full-width digits, then a step delimiter
STEP_NUMBER_RE = re.compile(r"^[0-9０-９]+\s*[.、)）．]")
_BULLET_RE = re.compile(r"^[•\-*]\s*")


def strip_step_marker(line: str) -> str:
    """Remove leading "1." / "2)" / "3、" numbers and bullets."""
    cleaned = line
    while True:
        stripped = STEP_NUMBER_RE.sub("", cleaned, count=1).strip()
        stripped = _BULLET_RE.sub("", stripped, count=1).strip()
        if stripped == cleaned:
            return cleaned
        cleaned = stripped


def _has_instruction_word(line: str) -> bool:
    return any(keyword in line for keyword in INSTRUCTION_KEYWORDS)


def _primary_step(line: str) -> str | None:
    if _QUANTITY_RE.search(line):
        return None
    if not (_has_instruction_word(line) or len(line) > LONG_LINE_CHARS):
        return None
    if len(line) >= MAX_LINE_CHARS:
        return None
    cleaned = strip_step_marker(line)
    return cleaned if len(cleaned) >= MIN_STEP_CHARS else None


def _lenient_step(line: str) -> str | None:
    if _LENIENT_QUANTITY_RE.search(line) or _INGREDIENT_HEADER_RE.search(line):
        return None
    cleaned = strip_step_marker(line)
    if LENIENT_MIN_CHARS <= len(cleaned) < MAX_LINE_CHARS:
        return cleaned
    return None


def _section_start(lines: list[str]) -> int:
    """Index of the first line after an instructions header, or 0."""
    for index, line in enumerate(lines):
        if _INSTRUCTION_HEADER_RE.match(line):
            return index + 1
    return 0


def extract_instructions(lines: list[str]) -> list[str]:
    """
    Extract up to MAX_STEPS instruction steps from normalized lines.

    When an "Instructions:" / "做法" header is present, pass 1 only looks
    below it. Pass 2 scans the whole document.
    """
    start = _section_start(lines)
    selected: dict[int, str] = {}

    for index in range(start, len(lines)):
        step = _primary_step(lines[index])
        if step is not None:
            selected[index] = step

    if len(selected) < MIN_PASS2_STEPS:
        for index, line in enumerate(lines):
            if index in selected:
                continue
            step = _lenient_step(line)
            if step is not None:
                selected[index] = step

    return [selected[index] for index in sorted(selected)][:MAX_STEPS]
