"""Metadata marker glyphs embedded in task lines."""

import re

from ..models.task import Priority

DUE = "\U0001F4C5"  # 📅
DONE = "\u2705"  # ✅
CREATED = "\u2795"  # ➕
SCHEDULED = "\u23f3"  # ⏳
START = "\U0001F6EB"  # 🛫
CANCELLED = "\u274c"  # ❌
RECURRENCE = "\U0001F501"  # 🔁

# Order matters: the first glyph present on a line wins
PRIORITY_MARKERS: tuple[tuple[str, Priority], ...] = (
    ("\U0001F53A", Priority.HIGHEST),  # 🔺
    ("\u23eb", Priority.HIGH),  # ⏫
    ("\U0001F53C", Priority.MEDIUM),  # 🔼
    ("\U0001F53D", Priority.LOW),  # 🔽
)

DATE_MARKERS: dict[str, str] = {
    "due_date": DUE,
    "done_date": DONE,
    "created_date": CREATED,
    "scheduled_date": SCHEDULED,
    "start_date": START,
    "cancelled_date": CANCELLED,
}

# Every glyph that starts a metadata section, used as tag insertion boundary
ALL_MARKERS: tuple[str, ...] = (
    *DATE_MARKERS.values(),
    RECURRENCE,
    *(glyph for glyph, _ in PRIORITY_MARKERS),
)

# Emoji may carry a trailing variation selector
_VS = "\ufe0f?"

DATE_VALUE = r"(\d{4}-\d{2}-\d{2})(?!\d)"

# Glyphs that terminate a recurrence rule
_STOP_CHARS = "".join(m for m in ALL_MARKERS if m != RECURRENCE)

PRIORITY_PATTERN = re.compile("[" + "".join(g for g, _ in PRIORITY_MARKERS) + "]" + _VS)

RECURRENCE_PATTERN = re.compile(
    re.escape(RECURRENCE) + _VS + r"\s+([^" + _STOP_CHARS + r"]+?)"
    r"(?=\s*$|\s+[" + _STOP_CHARS + "])"
)

TAG_PATTERN = re.compile(r"(?<!\w)[#@][\w-]+")
CONTEXT_TAG_PATTERN = re.compile(r"\s*(?<!\w)@[\w-]+")

CHECKBOX_PATTERN = re.compile(r"^(\s*- \[)([ x/\-!])(\])")


def date_pattern(marker: str) -> re.Pattern[str]:
    """Pattern matching `<marker> YYYY-MM-DD`, capturing the date."""
    return re.compile(re.escape(marker) + _VS + r"\s+" + DATE_VALUE)


def date_token_pattern(marker: str) -> re.Pattern[str]:
    """Like date_pattern() but also consuming the whitespace run before the marker."""
    return re.compile(r"\s*" + re.escape(marker) + _VS + r"\s+\d{4}-\d{2}-\d{2}(?!\d)")


def tag_token_pattern(tag: str) -> re.Pattern[str]:
    """Exact tag token with the whitespace run before it."""
    return re.compile(r"\s*" + re.escape(tag) + r"(?![\w-])")
