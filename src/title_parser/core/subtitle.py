from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

from title_parser.core.cue import parse_cue
from title_parser.core.errors import MalformedCue
from title_parser.schemas.cue import BlockFailure, Cue, ParsedDocument

logger = logging.getLogger(__name__)

_BLOCK_SEPARATOR_PATTERN = re.compile(r"\r?\n\s*\r?\n")
_METADATA_BLOCK_PATTERN = re.compile(r"(?:WEBVTT|NOTE|STYLE|REGION)(?:[ \t].*)?")


def split_blocks(content: str) -> list[str]:
    """Split an SRT/WebVTT document into cue-blocks on blank lines."""
    content = content.lstrip("\ufeff").strip()
    if not content:
        return []
    return _BLOCK_SEPARATOR_PATTERN.split(content)


def is_metadata_block(block: str) -> bool:
    """WebVTT header, NOTE, STYLE and REGION blocks carry no cue."""
    lines = block.strip().splitlines()
    if not lines:
        return False
    return _METADATA_BLOCK_PATTERN.fullmatch(lines[0].rstrip()) is not None


def parse_document(content: str) -> ParsedDocument:
    cues: list[Cue] = []
    failures: list[BlockFailure] = []
    for index, block in enumerate(split_blocks(content)):
        if is_metadata_block(block):
            logger.debug("Skipping metadata block %d", index)
            continue
        try:
            cues.append(parse_cue(block))
        except MalformedCue as exc:
            logger.debug("Skipping malformed block %d: %s", index, exc)
            failures.append(BlockFailure(index=index, block=block, error=str(exc)))
    return ParsedDocument(cues=tuple(cues), failures=tuple(failures))


def read_subtitle_file(input_path: Path, *, encoding: str = "utf-8") -> ParsedDocument:
    content = input_path.read_text(encoding=encoding)
    document = parse_document(content)
    logger.debug(
        "Read %s: cues=%d failures=%d",
        input_path,
        len(document.cues),
        len(document.failures),
    )
    return document


def document_to_payload(document: ParsedDocument) -> dict[str, Any]:
    return {
        "cues": [
            {
                "index": index,
                "identifier": cue.identifier,
                "start": cue.start.string,
                "end": cue.end.string,
                "start_ms": cue.start.to_milliseconds(),
                "end_ms": cue.end.to_milliseconds(),
                "text": cue.text,
            }
            for index, cue in enumerate(document.cues)
        ],
        "failures": [
            {"index": failure.index, "error": failure.error}
            for failure in document.failures
        ],
    }
