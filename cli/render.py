from __future__ import annotations

import typer

PROGRAM_NAME = "wmbus-decode"
USAGE = f"Usage: {PROGRAM_NAME} <AES-128 key HEX> <W-MBus telegram HEX>"


def render_report(report: str) -> None:
    typer.echo(report)


def render_usage() -> None:
    typer.echo(USAGE, err=True)


def render_error(exc: Exception) -> None:
    message = " ".join(str(exc).split()) or type(exc).__name__
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
