"""Command-line interface for qiitafetch."""

import asyncio

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from qiitafetch import ClientConfig, ProfileClient, __version__
from qiitafetch.config import LogFormat
from qiitafetch.exceptions import HttpStatusError
from qiitafetch.models.profile import Profile

app = typer.Typer(
    name="qiitafetch",
    help="Qiita user profile client",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool):
    if value:
        console.print(f"qiitafetch version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """qiitafetch - Qiita user profile client."""
    pass


@app.command()
def profile(
    username: str = typer.Argument(..., help="Qiita user id"),
    token: str = typer.Option(
        ..., "--token", "-t", envvar="QIITA_ACCESS_TOKEN", help="Qiita access token"
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the profile as JSON"
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Log level for stderr diagnostics"
    ),
):
    """Fetch and show a single user profile."""
    config = ClientConfig(
        log_level=log_level,
        log_format=LogFormat.JSON if as_json else LogFormat.CONSOLE,
    )

    async def run():
        async with ProfileClient(config) as client:
            return await client.get_profile(username, token)

    outcome = asyncio.run(run())

    if not outcome.ok:
        error = outcome.error
        status = f" (HTTP {error.status_code})" if isinstance(error, HttpStatusError) else ""
        err_console.print(
            f"[red]✗[/red] Failed to fetch {escape(username)}{status}: "
            f"{type(error).__name__}: {escape(str(error))}"
        )
        raise typer.Exit(1)

    if as_json:
        console.print_json(outcome.value.model_dump_json())
    else:
        _print_profile_table(username, outcome.value)


def _print_profile_table(username: str, p: Profile):
    """Print profile fields as a two-column table."""
    table = Table(title=Text(p.name or username), show_header=False)
    table.add_column("Field", style="dim")
    table.add_column("Value")

    for label, value in p.display_fields():
        if value is None:
            text = "-"
        elif isinstance(value, bool):
            text = "✓" if value else "✗"
        else:
            text = str(value)
        table.add_row(label, Text(text))

    console.print(table)


if __name__ == "__main__":
    app()
