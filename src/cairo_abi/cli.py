"""CLI for decoding Cairo contract ABIs."""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console

from cairo_abi.config import DecoderSettings
from cairo_abi.decoder import decode_abi
from cairo_abi.errors import MalformedPayloadError
from cairo_abi.signatures import render_signatures

app = typer.Typer(name='cairo-abi', help='Render Cairo contract ABIs as readable signatures')
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main():
    """Cairo contract ABI tools."""


def _read_payload(path: Optional[Path]) -> str:
    if path is None or str(path) == '-':
        return sys.stdin.read()
    return path.read_text()


@app.command()
def decode(
    path: Optional[Path] = typer.Argument(None, help='ABI JSON file (default: stdin)'),
    as_json: Optional[bool] = typer.Option(None, '--json/--text', help='Output format (default: CAIRO_ABI_OUTPUT or text)'),
    strict: Optional[bool] = typer.Option(None, '--strict/--no-strict', help='Exit with an error if any item is malformed'),
    log_level: Optional[str] = typer.Option(None, '--log-level', help='Logging level (default: CAIRO_ABI_LOG_LEVEL or WARNING)'),
):
    """Print one signature per interface function and event."""
    load_dotenv()
    overrides = {}
    if log_level is not None:
        overrides['log_level'] = log_level
    if strict is not None:
        overrides['strict'] = strict
    if as_json is not None:
        overrides['output'] = 'json' if as_json else 'text'
    try:
        settings = DecoderSettings.from_env(**overrides)
    except ValueError as e:
        err_console.print(f'[red]Error:[/red] {e}')
        raise typer.Exit(1)

    logging.basicConfig(level=settings.log_level, format='%(levelname)s %(name)s: %(message)s', stream=sys.stderr)

    try:
        payload = _read_payload(path)
    except OSError as e:
        err_console.print(f'[red]Error:[/red] Failed to read ABI: {e}')
        raise typer.Exit(1)

    try:
        result = decode_abi(payload)
    except MalformedPayloadError as e:
        err_console.print(f'[red]Error:[/red] {e}')
        raise typer.Exit(1)

    signatures = render_signatures(result.items)
    if settings.output == 'json':
        console.print_json(json.dumps([s.to_dict() for s in signatures]))
    else:
        for signature in signatures:
            # Signatures contain brackets, so bypass rich markup
            console.print(signature.render(), markup=False, highlight=False, soft_wrap=True)

    if settings.strict and not result.ok:
        err_console.print(f'[yellow]⚠[/yellow] {len(result.diagnostics)} malformed item(s) skipped')
        raise typer.Exit(1)


if __name__ == '__main__':
    app()
