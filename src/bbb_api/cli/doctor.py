"""Doctor command for connection diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console

from bbb_api.cli.ui_components import build_checks_table, build_meetings_table, print_banner
from bbb_api.core.domain.enums import ApiMethod
from bbb_api.core.errors import BigBlueButtonError, ConfigurationError
from bbb_api.core.services.client import BigBlueButton

app = typer.Typer(no_args_is_help=True, help="Connection diagnostics for a BigBlueButton server.")

_console = Console()

# Operations that can be signed without any parameter.
_NO_ARGUMENT_METHODS = (ApiMethod.GET_MEETINGS, ApiMethod.HOOKS_LIST)


def _build_client(base_url: str | None, secret: str | None) -> BigBlueButton:
    try:
        return BigBlueButton(base_url=base_url, secret=secret)
    except ConfigurationError as exc:
        raise typer.BadParameter(
            f"{exc}. Pass --base-url/--secret or set BBB_SERVER_BASE_URL and BBB_SECURITY_SALT."
        ) from exc


@app.command()
def check(
    base_url: str | None = typer.Option(None, "--base-url", help="API endpoint URL."),
    secret: str | None = typer.Option(None, "--secret", help="Shared secret."),
    list_meetings: bool = typer.Option(False, "--meetings", help="Also list running meetings."),
) -> None:
    """Verify base URL and secret, and report the server API version."""

    print_banner(_console)
    with _build_client(base_url, secret) as client:
        table = build_checks_table()
        table.add_row("Base URL", "OK", client.url_builder.base_url)
        table.add_row("Checksum", "OK", client.url_builder.algorithm.value)

        try:
            version = client.get_api_version()
            table.add_row("API version", "OK", version.version or "unknown")
        except BigBlueButtonError as exc:
            table.add_row("API version", "FAIL", str(exc))

        working = client.is_connection_working()
        if working:
            table.add_row("Connection", "OK", "URL and secret accepted")
        else:
            error = client.connection_error
            table.add_row("Connection", "FAIL", error.label() if error else "unknown")

        _console.print(table)

        if working and list_meetings:
            _console.print(build_meetings_table(client.get_meetings().meetings))

    if not working:
        raise typer.Exit(code=1)


@app.command()
def url(
    method: ApiMethod = typer.Argument(ApiMethod.GET_MEETINGS, help="Operation to sign."),
    base_url: str | None = typer.Option(None, "--base-url", help="API endpoint URL."),
    secret: str | None = typer.Option(None, "--secret", help="Shared secret."),
) -> None:
    """Print a signed URL for an operation that takes no parameters."""

    if method not in _NO_ARGUMENT_METHODS:
        allowed = ", ".join(item.value for item in _NO_ARGUMENT_METHODS)
        raise typer.BadParameter(f"only parameterless operations are supported: {allowed}")

    with _build_client(base_url, secret) as client:
        _console.print(client.url_builder.build_url(method), soft_wrap=True)
