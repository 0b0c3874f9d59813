from __future__ import annotations

import re

# Applied in order; closing tags and the dialogue dash are matched against
# whatever the previous rule left behind.
_PRUNE_PATTERNS: tuple[tuple[re.Pattern[str], int], ...] = (
    (re.compile(r"<[0-9a-zA-Z.,:_\-]+>"), 0),
    (re.compile(r"</[0-9a-zA-Z.,:_\-]+>"), 0),
    (re.compile(r"^- "), 1),
)

# Deleted outright rather than decoded.
ESCAPES_TO_PRUNE: tuple[str, ...] = (
    "&amp;",
    "&lt;",
    "&gt;",
    "&lrm;",
    "&rlm;",
    "&nbsp;",
)


def sanitize_text(line: str) -> str:
    """Strip VTT inline tags, one leading ``- `` and named HTML escapes."""
    text = line
    for pattern, count in _PRUNE_PATTERNS:
        text = pattern.sub("", text, count=count)
    for escape in ESCAPES_TO_PRUNE:
        text = text.replace(escape, "")
    return text
