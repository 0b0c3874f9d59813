from __future__ import annotations

import re

from title_parser.core.errors import InvalidTimeCode, MalformedCue
from title_parser.core.sanitize import sanitize_text
from title_parser.core.timecode import parse_timecode
from title_parser.schemas.cue import Cue, TimeCode

# Anything after the end timestamp (cue settings) is discarded.
_TIMING_LINE_PATTERN = re.compile(r"([0-9:.,]{9,}) --> ([0-9:.,]{9,})(?: .*)?")
_LINE_BREAK_PATTERN = re.compile(r"\r?\n")


def _parse_timing_line(line: str) -> tuple[TimeCode, TimeCode]:
    match = _TIMING_LINE_PATTERN.fullmatch(line)
    if match is None:
        raise MalformedCue(f"Not a timing line: {line!r}")
    start_raw, end_raw = match.groups()
    try:
        return parse_timecode(start_raw), parse_timecode(end_raw)
    except InvalidTimeCode as exc:
        raise MalformedCue(f"Invalid timing line {line!r}: {exc}") from exc


def parse_cue(block: str) -> Cue:
    """Parse one SRT/WebVTT cue-block into a ``Cue``.

    The block is an optional identifier line, exactly one timing line and
    any number of text lines::

        14
        00:01:14.815 --> 00:01:18.114
        - This line belongs to a subtitle cue.
        - This line is also a member of the same cue.

    Text lines are sanitized and joined with ``\\n``. Raises ``MalformedCue``
    when the block does not hold exactly one timing line, when more than one
    line precedes it, or when either timestamp is invalid.
    """
    lines = _LINE_BREAK_PATTERN.split(block.strip())
    timing_indexes = [
        index
        for index, line in enumerate(lines)
        if _TIMING_LINE_PATTERN.fullmatch(line)
    ]
    if not timing_indexes:
        raise MalformedCue("Cue block has no timing line.")
    if len(timing_indexes) > 1:
        raise MalformedCue(
            f"Cue block has {len(timing_indexes)} timing lines, expected one."
        )
    timing_index = timing_indexes[0]
    if timing_index > 1:
        raise MalformedCue(
            f"Cue block has {timing_index} lines before its timing line, expected at most one."
        )

    start, end = _parse_timing_line(lines[timing_index])
    identifier = lines[0] if timing_index == 1 else None
    text = "\n".join(sanitize_text(line) for line in lines[timing_index + 1 :])
    return Cue(start=start, end=end, text=text, identifier=identifier)
