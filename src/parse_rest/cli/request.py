"""CLI: parse-rest request METHOD PATH"""

import json
from typing import Optional

import click
from rich.console import Console

from parse_rest.errors import ConfigurationError, ParseError

console = Console()


def _get_client():
    from parse_rest.cli.main import _get_client
    return _get_client()


def _run(coro):
    from parse_rest.cli.main import _run
    return _run(coro)


@click.command("request")
@click.argument("method")
@click.argument("path")
@click.option("-d", "--data", default=None, help="JSON object sent as the request body.")
@click.option("--master-key", "use_master_key", is_flag=True, help="Sign with the master key.")
@click.option("--session-token", default=None)
@click.option("--installation-id", default=None)
@click.option("--json-output", "--json", is_flag=True)
def request_cmd(
    method: str,
    path: str,
    data: Optional[str],
    use_master_key: bool,
    session_token: Optional[str],
    installation_id: Optional[str],
    json_output: bool,
):
    """Send a signed request, e.g. `parse-rest request GET classes/GameScore`."""
    try:
        body = json.loads(data) if data else None
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="--data")

    options: dict = {}
    if use_master_key:
        options["use_master_key"] = True
    if session_token:
        options["session_token"] = session_token
    if installation_id:
        options["installation_id"] = installation_id

    client = _get_client()

    async def _request():
        try:
            with console.status(f"{method.upper()} {path}..."):
                return await client.request(method.upper(), path, body, options)
        finally:
            await client.close()

    try:
        result = _run(_request())
    except ConfigurationError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(2)
    except ParseError as e:
        console.print(f"[red]Parse error {e.code}: {e.message}[/red]")
        raise SystemExit(1)

    if json_output:
        click.echo(json.dumps(result, indent=2))
    else:
        console.print_json(data=result)
