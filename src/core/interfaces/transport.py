"""Contrato del transporte HTTP.

Por qué Protocol:
- El dispatcher depende de una abstracción, no de httpx.
- Permite testear el dispatcher con un transporte falso sin red.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from core.domain.models import HttpResponse


@runtime_checkable
class HttpTransport(Protocol):
    """Contrato mínimo para enviar una petición.

    Reglas de diseño:
    - `send` es asíncrono: la única espera es el round trip + lectura del body.
    - `json` activa la conveniencia de body JSON (fija `Content-Type`).
    - Los fallos de red se elevan como `core.errors.TransportError`.
    """

    async def send(self, method: str, url: str, *, json: Any | None = None) -> HttpResponse:
        """Envía una petición y devuelve la respuesta ya leída."""

        ...
