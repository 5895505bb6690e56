"""
api-envelope CLI — `api-envelope` command.

Commands:
  api-envelope inspect <file>   Parse an envelope document and print it
"""

import json
import logging
from pathlib import Path
from typing import Any

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install api-envelope[cli]")

console = Console()
CONFIG_FILE = Path.home() / ".api-envelope" / "config.json"
DEFAULT_CONFIG: dict[str, Any] = {"indent": 2, "output": "table"}
OUTPUT_FORMATS = ("table", "json")


def _load_config() -> dict[str, Any]:
    cfg = dict(DEFAULT_CONFIG)
    try:
        loaded = json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, ValueError):  # bad JSON or bad encoding
        return cfg
    if not isinstance(loaded, dict):
        return cfg
    indent = loaded.get("indent")
    if isinstance(indent, int) and not isinstance(indent, bool) and indent >= 0:
        cfg["indent"] = indent
    if loaded.get("output") in OUTPUT_FORMATS:
        cfg["output"] = loaded["output"]
    return cfg


@click.group()
@click.version_option("0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx, verbose):
    """api-envelope — parse typed API response envelopes."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.ensure_object(dict)
    ctx.obj["config"] = _load_config()


from api_envelope.cli.envelopes import inspect_cmd

main.add_command(inspect_cmd)


if __name__ == "__main__":
    main()
