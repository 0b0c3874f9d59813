from __future__ import annotations


class TitleParserError(ValueError):
    """Base class for subtitle parsing failures."""


class InvalidTimeCode(TitleParserError):
    pass


class MalformedCue(TitleParserError):
    pass
