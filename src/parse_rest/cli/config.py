"""CLI: parse-rest configure|config"""

from typing import Optional

import click
from rich.console import Console
from rich.table import Table

console = Console()


def _load_config() -> dict:
    from parse_rest.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from parse_rest.cli.main import _save_config
    _save_config(cfg)


@click.command("configure")
@click.option("--server-url", default=None, help="Parse server URL, e.g. https://example.com/parse")
@click.option("--app-id", "application_id", default=None)
@click.option("--javascript-key", default=None)
@click.option("--master-key", default=None)
@click.option("--server-auth-type", default=None, help="Authorization scheme sent with every request")
@click.option("--server-auth-token", default=None)
@click.option("--attempt-limit", "request_attempt_limit", default=None, type=int)
@click.option("--revocable-session/--no-revocable-session", "force_revocable_session", default=None)
def configure(**settings: Optional[object]):
    """Save connection settings to ~/.parse/config.json."""
    cfg = _load_config()
    changed = {k: v for k, v in settings.items() if v is not None}
    if not changed:
        console.print("[yellow]Nothing to change.[/yellow]")
        return
    _save_config({**cfg, **changed})
    console.print(f"[green]Saved {', '.join(sorted(changed))}.[/green]")


@click.command("config")
def show_config():
    """Show the effective settings (secrets masked)."""
    from parse_rest.cli.main import _effective_config

    table = Table(title="Parse configuration")
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    for key, value in _effective_config().masked().items():
        table.add_row(key, "" if value is None else str(value))
    console.print(table)
