"""CLI: api-envelope inspect FILE [--single|--list] [--json]"""

import json

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from api_envelope.codec.envelope import dump_envelope, parse_envelope, parse_envelope_list
from api_envelope.codec.fields import format_timestamp
from api_envelope.errors import EnvelopeError
from api_envelope.models.envelope import Envelope
from api_envelope.models.user import User

console = Console()


def _render_table(envelope: Envelope) -> None:
    title = "Users"
    if envelope.pagination is not None:
        title += f" (page {envelope.pagination.page}, {envelope.pagination.total} total)"
    table = Table(title=title)
    table.add_column("Name", style="bold")
    table.add_column("Email")
    for user in envelope.items:
        table.add_row(escape(user.name), escape(user.email))
    console.print(table)
    if envelope.created_at is not None:
        console.print(f"Created: {format_timestamp(envelope.created_at)}")
    if envelope.updated_at is not None:
        console.print(f"Updated: {format_timestamp(envelope.updated_at)}")


@click.command("inspect")
@click.argument("source", type=click.File("r"))
@click.option("--single/--list", "single", default=True, help="Shape of the data payload.")
@click.option("--output", type=click.Choice(["table", "json"]), default=None)
@click.option("--json-output", "--json", is_flag=True, help="Shortcut for --output json.")
@click.option("--indent", type=int, default=None)
@click.pass_context
def inspect_cmd(ctx, source, single, output, json_output, indent):
    """Parse an envelope document of users (use - for stdin)."""
    cfg = (ctx.obj or {}).get("config", {})
    if json_output:
        output = "json"
    elif output is None:
        output = cfg.get("output", "table")
    if indent is None:
        indent = cfg.get("indent", 2)

    try:
        raw = json.load(source)
    except json.JSONDecodeError as e:
        console.print(f"[red]invalid_json: {escape(str(e))}[/red]")
        raise SystemExit(1)

    parse = parse_envelope if single else parse_envelope_list
    try:
        envelope = parse(raw, User.from_json)
    except EnvelopeError as e:
        console.print(f"[red]{e.code}: {escape(str(e))}[/red]")
        raise SystemExit(1)

    if output == "json":
        click.echo(json.dumps(dump_envelope(envelope, User.to_json), indent=indent))
        return
    _render_table(envelope)
