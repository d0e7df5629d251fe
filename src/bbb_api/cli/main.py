"""CLI entry point (`bbb-api`)."""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

from bbb_api.cli import doctor

app = typer.Typer(no_args_is_help=True, help="BigBlueButton API client tools.")
app.add_typer(doctor.app, name="doctor")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP activity."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def run() -> None:
    app()


if __name__ == "__main__":
    run()
