"""Despacho de la petición.

Por qué un servicio aparte:
- Convierte un `Command` ya validado en exactamente una llamada al transporte.
- Sin reintentos ni caché: lo que eleve el transporte sube tal cual.
"""

from __future__ import annotations

import logging
from typing import Iterable

from core.domain.models import Command, GetCommand, HttpResponse, KvPair, PostCommand
from core.interfaces.transport import HttpTransport

logger = logging.getLogger(__name__)


def build_json_body(pairs: Iterable[KvPair]) -> dict[str, str]:
    """Mapea cada key a su value; si una key se repite, gana el último valor."""

    body: dict[str, str] = {}
    for pair in pairs:
        body[pair.key] = pair.value
    return body


async def dispatch(transport: HttpTransport, command: Command) -> HttpResponse:
    if isinstance(command, GetCommand):
        logger.debug("GET %s", command.url)
        return await transport.send("GET", command.url)

    if isinstance(command, PostCommand):
        payload = build_json_body(command.body)
        logger.debug("POST %s json=%s", command.url, payload)
        return await transport.send("POST", command.url, json=payload)

    raise TypeError(f"Unsupported command: {command!r}")
