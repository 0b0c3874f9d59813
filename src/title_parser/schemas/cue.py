from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TimeCode:
    """A validated SRT/WebVTT timestamp such as ``00:01:14.815`` or ``01:14.815``."""

    string: str
    hours: int
    minutes: int
    seconds: int
    milliseconds: int

    def to_seconds(self) -> int:
        """Whole seconds; the millisecond field is dropped, not rounded."""
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    def to_milliseconds(self) -> int:
        return self.to_seconds() * 1000 + self.milliseconds

    def __str__(self) -> str:
        return self.string


@dataclass(frozen=True)
class Cue:
    start: TimeCode
    end: TimeCode
    text: str
    identifier: str | None = field(default=None, compare=False)


@dataclass(frozen=True)
class BlockFailure:
    index: int
    block: str
    error: str


@dataclass(frozen=True)
class ParsedDocument:
    cues: tuple[Cue, ...]
    failures: tuple[BlockFailure, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failures
