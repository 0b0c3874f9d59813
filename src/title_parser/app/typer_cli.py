from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from title_parser.core.errors import InvalidTimeCode
from title_parser.core.sanitize import sanitize_text
from title_parser.core.subtitle import document_to_payload, read_subtitle_file
from title_parser.core.timecode import parse_timecode
from title_parser.infra.config import build_app_config
from title_parser.infra.storage import dump_json, write_json
from title_parser.schemas.cue import ParsedDocument

app = typer.Typer(
    name="title-parser",
    add_completion=False,
    help="Extract timed cues from SRT and WebVTT subtitles.",
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def _render_cue_table(document: ParsedDocument) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("start")
    table.add_column("end")
    table.add_column("text")
    for index, cue in enumerate(document.cues, start=1):
        table.add_row(str(index), cue.start.string, cue.end.string, escape(cue.text))
    return table


@app.command("cues")
def cues_command(
    input_path: Path = typer.Argument(..., help="Input SRT/WebVTT file path."),
    output_format: str = typer.Option(
        "text", "--format", "-f", help="text|json"
    ),
    output_path: Path | None = typer.Option(
        None, "--output-path", "-o", help="Write parsed cues as JSON to this path."
    ),
    encoding: str | None = typer.Option(
        None,
        "--encoding",
        help="Input file encoding (default: TITLE_PARSER_ENCODING or utf-8).",
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Exit with an error if any cue block is malformed."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Parse every cue of a subtitle file."""
    _configure_logging(verbose)
    if not input_path.exists() or not input_path.is_file():
        raise typer.BadParameter(f"Input not found: {input_path}")
    try:
        config = build_app_config(
            encoding=encoding,
            output_format=output_format,
            strict=strict,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        document = read_subtitle_file(input_path, encoding=config.encoding)
    except UnicodeDecodeError as exc:
        typer.echo(
            f"[failed] Could not decode {input_path} as {config.encoding}: {exc}", err=True
        )
        raise typer.Exit(code=2) from exc

    payload = document_to_payload(document)
    if config.output_format == "json":
        typer.echo(dump_json(payload))
    else:
        Console().print(_render_cue_table(document))
    for failure in document.failures:
        typer.echo(f"[skipped] block {failure.index}: {failure.error}", err=True)
    if output_path is not None:
        write_json(output_path, payload)
        typer.echo(f"- output: {output_path}", err=True)

    if not document.cues:
        typer.echo(f"[failed] No subtitle cues found in: {input_path}", err=True)
        raise typer.Exit(code=2)
    if config.strict and not document.ok:
        typer.echo(
            f"[failed] {len(document.failures)} malformed cue block(s) in strict mode.",
            err=True,
        )
        raise typer.Exit(code=2)


@app.command("timecode")
def timecode_command(
    value: str = typer.Argument(..., help="Timestamp such as 00:01:14.815 or 01:14,815."),
) -> None:
    """Parse a single timestamp."""
    try:
        timecode = parse_timecode(value)
    except InvalidTimeCode as exc:
        raise typer.BadParameter(str(exc), param_hint="VALUE") from exc
    typer.echo(
        f"- hours: {timecode.hours}\n"
        f"- minutes: {timecode.minutes}\n"
        f"- seconds: {timecode.seconds}\n"
        f"- milliseconds: {timecode.milliseconds}\n"
        f"- total seconds: {timecode.to_seconds()}"
    )


@app.command("sanitize")
def sanitize_command(
    line: str = typer.Argument(..., help="One subtitle text line."),
) -> None:
    """Strip inline tags, a leading dialogue dash and named escapes."""
    typer.echo(sanitize_text(line))


def run() -> None:
    """Console-script entrypoint."""
    app()
