"""CLI principal (Typer).

Por qué los comandos solo reciben tokens crudos:
- La validación (`key=value`, URL) vive en `core.domain.parsing` y se llama
  de forma explícita; typer solo resuelve subcomando y aridad.
- Los errores esperados se traducen aquí a exit codes: 2 para argumentos
  inválidos, 1 para fallos de red o de render.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, NoReturn, Optional, Sequence

import typer
from pydantic import ValidationError
from rich.markup import escape

from adapters.http_client import HttpxTransport
from cli.logging_setup import configure_logging
from cli.ui_components import build_console, print_response
from core.config import AppSettings
from core.domain.models import Command, HttpResponse
from core.domain.parsing import build_command
from core.errors import HttpieLiteError, ParseError
from core.services.dispatcher import dispatch
from core.version import __version__

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="httpie-lite",
    no_args_is_help=True,
    add_completion=False,
    help="Minimal httpie-style HTTP client: GET or POST a URL and pretty-print the response.",
)

_console = build_console()
_err_console = build_console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"httpie-lite {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    configure_logging(verbose)


async def _send(command: Command, settings: AppSettings) -> HttpResponse:
    async with HttpxTransport(settings) as transport:
        return await dispatch(transport, command)


def _fail(exc: Exception, *, code: int) -> NoReturn:
    _err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    raise typer.Exit(code=code)


def _execute(subcommand: str, tokens: Sequence[str]) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        _fail(exc, code=2)

    try:
        command = build_command(subcommand, tokens)
        logger.debug("Parsed command: %r", command)
        response = asyncio.run(_send(command, settings))
        print_response(_console, response, invalid_json_fallback=settings.invalid_json_fallback)
    except ParseError as exc:
        _fail(exc, code=2)
    except HttpieLiteError as exc:
        _fail(exc, code=1)


@app.command()
def get(
    url: str = typer.Argument(..., help="HTTP request URL, e.g. http://httpbin.org/get"),
) -> None:
    """Feed get with a URL and retrieve the response."""

    _execute("get", [url])


@app.command()
def post(
    url: str = typer.Argument(..., help="HTTP request URL, e.g. http://httpbin.org/post"),
    body: Optional[List[str]] = typer.Argument(None, help="Body fields as key=value, sent as a JSON object."),
) -> None:
    """Feed post with a URL and optional key=value pairs; the pairs are posted as JSON."""

    _execute("post", [url, *(body or [])])


def run() -> None:
    app(prog_name="httpie-lite")


if __name__ == "__main__":
    run()
