from __future__ import annotations

import codecs
import os
from dataclasses import dataclass

DEFAULT_ENCODING = "utf-8"
DEFAULT_OUTPUT_FORMAT = "text"
SUPPORTED_OUTPUT_FORMATS = {"text", "json"}
ENCODING_ENV_VAR = "TITLE_PARSER_ENCODING"


@dataclass(frozen=True)
class AppConfig:
    encoding: str
    output_format: str
    strict: bool


def resolve_encoding(value: str | None = None) -> str:
    encoding = (value or os.getenv(ENCODING_ENV_VAR) or DEFAULT_ENCODING).strip()
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ValueError(f"Unknown encoding '{encoding}'.") from exc
    return encoding


def normalize_output_format(value: str) -> str:
    """Lower-case ``value`` and check it names a cue output format."""
    output_format = value.strip().lower()
    if output_format not in SUPPORTED_OUTPUT_FORMATS:
        allowed = "|".join(sorted(SUPPORTED_OUTPUT_FORMATS))
        raise ValueError(f"Unsupported output format '{value}'. Use one of: {allowed}")
    return output_format


def build_app_config(
    *,
    encoding: str | None = None,
    output_format: str = DEFAULT_OUTPUT_FORMAT,
    strict: bool = False,
) -> AppConfig:
    return AppConfig(
        encoding=resolve_encoding(encoding),
        output_format=normalize_output_format(output_format),
        strict=strict,
    )
