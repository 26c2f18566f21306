from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

import typer

from cli.render import render_error, render_report, render_usage
from errors import TelegramError, UsageError
from logging_config import configure_logging
from services.pipeline import build_default_pipeline

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Decrypt a wireless M-Bus telegram with AES-128-CTR and print its readings as JSON.",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)


def _split_arguments(values: Sequence[str]) -> Tuple[str, str]:
    if len(values) != 2:
        raise UsageError(f"Expected 2 arguments, got {len(values)}.")
    return values[0], values[1]


@app.command(
    context_settings={"help_option_names": ["-h", "--help"], "ignore_unknown_options": True},
)
def decode(
    arguments: Optional[List[str]] = typer.Argument(
        None,
        metavar="KEY_HEX TELEGRAM_HEX",
        help="AES-128 key (32 hex digits) followed by the encrypted telegram in hex.",
        show_default=False,
    ),
) -> None:
    """Decrypt a telegram and print the extracted readings."""
    try:
        key_hex, telegram_hex = _split_arguments(arguments or [])
    except UsageError:
        render_usage()
        raise typer.Exit(code=1)

    try:
        result = build_default_pipeline().run(key_hex, telegram_hex)
    except TelegramError as exc:
        logger.debug("Telegram decode failed", extra={"reason": type(exc).__name__})
        render_error(exc)
        raise typer.Exit(code=1)

    render_report(result.report)


def run() -> None:
    """Console script entry point."""
    configure_logging()
    app()
