from __future__ import annotations

import re

from title_parser.core.errors import InvalidTimeCode
from title_parser.schemas.cue import TimeCode

# [HH[HH]:]MM:SS(.|,)mmm, minutes and seconds capped at 59.
_TIMECODE_PATTERN = re.compile(
    r"(?:([0-9]{2,4}):)?([0-5][0-9]):([0-5][0-9])[.,]([0-9]{3})"
)


def parse_timecode(text: str) -> TimeCode:
    """Parse a single SRT/WebVTT timestamp.

    Accepts ``HH:MM:SS.mmm``, ``MM:SS.mmm`` and the SRT comma variant
    ``HH:MM:SS,mmm``. The hour field may carry 2 to 4 digits and defaults
    to 0 when omitted. Raises ``InvalidTimeCode`` for anything else.
    """
    match = _TIMECODE_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidTimeCode(f"Invalid timecode: {text!r}")
    hours, minutes, seconds, milliseconds = match.groups()
    return TimeCode(
        string=text,
        hours=int(hours) if hours is not None else 0,
        minutes=int(minutes),
        seconds=int(seconds),
        milliseconds=int(milliseconds),
    )
