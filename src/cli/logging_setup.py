"""Configuración de logging para la CLI (Rich).

Por qué stderr:
- stdout queda reservado para la respuesta HTTP (se puede redirigir a un archivo).
- `--verbose` activa DEBUG sin cambiar la salida de la respuesta.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from cli.ui_components import build_console


def configure_logging(verbose: bool = False) -> None:
    """DEBUG con `--verbose`, WARNING en otro caso. Nunca escribe en stdout."""

    handler = RichHandler(
        console=build_console(stderr=True),
        show_path=False,
        rich_tracebacks=verbose,
    )
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    # httpx/httpcore loggean cada conexión en DEBUG; solo los queremos con -v.
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)
