"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y redirects en un único builder.
- Traduce `httpx.Response` al modelo del dominio y `httpx.HTTPError` a
  `TransportError`, así el Core no conoce httpx.
- Facilita testeo: se puede inyectar un `httpx.AsyncClient` con `MockTransport`.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from core.config import AppSettings
from core.domain.models import HttpResponse
from core.errors import TransportError

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que GET y POST se comporten igual.
    - `transport` permite sustituir la red en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {"User-Agent": settings.user_agent}
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=settings.follow_redirects,
        headers=headers,
        transport=transport,
    )


def to_http_response(response: httpx.Response) -> HttpResponse:
    return HttpResponse(
        http_version=response.http_version,
        status_code=response.status_code,
        reason_phrase=response.reason_phrase,
        headers=tuple(response.headers.multi_items()),
        text=response.text,
    )


class HttpxTransport:
    """Implementación de `HttpTransport` sobre `httpx.AsyncClient`.

    Uso:
        async with HttpxTransport(settings) as transport:
            response = await dispatch(transport, command)
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client or build_async_client(self._settings)

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def send(self, method: str, url: str, *, json: Any | None = None) -> HttpResponse:
        try:
            response = await self._client.request(method, url, json=json)
        except httpx.HTTPError as exc:
            # Sin reintentos: el error sube tal cual a la CLI.
            raise TransportError(url, str(exc) or exc.__class__.__name__) from exc

        logger.debug("%s %s -> %s %s", method, url, response.http_version, response.status_code)
        return to_http_response(response)
