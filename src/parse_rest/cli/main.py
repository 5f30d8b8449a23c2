"""
Parse REST CLI: `parse-rest` command.

Commands:
  parse-rest configure [options]        Save connection settings
  parse-rest config                     Show the effective settings
  parse-rest request METHOD PATH        Send one signed request
"""

import asyncio
import json
import logging
from pathlib import Path

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install parse-rest[cli]")

from parse_rest import __version__
from parse_rest.client import AsyncParse
from parse_rest.config import ParseConfig

console = Console()
CONFIG_FILE = Path.home() / ".parse" / "config.json"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _effective_config() -> ParseConfig:
    """Environment first, saved settings on top."""
    return ParseConfig.from_env(**_load_config())


def _get_client() -> AsyncParse:
    config = _effective_config()
    if not config.application_id:
        console.print("[red]No application id. Run `parse-rest configure --app-id ...` first.[/red]")
        raise SystemExit(1)
    return AsyncParse(config=config)


def _run(coro):
    return asyncio.run(coro)


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log every attempt and retry.")
def main(verbose: bool):
    """Parse REST CLI: signed requests against a Parse server."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Register subcommands from separate modules
from parse_rest.cli.config import configure, show_config
from parse_rest.cli.request import request_cmd

main.add_command(configure)
main.add_command(show_config)
main.add_command(request_cmd)


if __name__ == "__main__":
    main()
