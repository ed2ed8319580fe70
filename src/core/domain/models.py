"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Modelos inmutables (`frozen`) con validación en el borde, sin acoplar
  el Core a httpx ni a la CLI.
- `GetCommand | PostCommand` forma una unión etiquetada por `method`.

Nota:
- Estos modelos describen *qué* se pide y *qué* se recibió, no *cómo*.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class KvPair(BaseModel):
    """Un campo `key=value` del body, tal como llegó por la CLI."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Texto antes del primer '='.")
    value: str = Field(
        ...,
        description="Texto después del primer '=' (puede ser vacío o contener '=').",
    )


class GetCommand(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: Literal["GET"] = "GET"
    url: str = Field(..., min_length=1, description="URL absoluta ya validada.")


class PostCommand(BaseModel):
    """POST con body JSON construido a partir de pares `key=value`."""

    model_config = ConfigDict(frozen=True)

    method: Literal["POST"] = "POST"
    url: str = Field(..., min_length=1, description="URL absoluta ya validada.")
    body: tuple[KvPair, ...] = Field(
        default=(),
        description="Pares en el orden de la línea de comandos.",
    )


Command = Union[GetCommand, PostCommand]


class HttpResponse(BaseModel):
    """Respuesta HTTP ya leída por completo (sin streaming).

    Por qué headers como tupla de pares:
    - Conserva el orden del transporte y admite headers repetidos
      (p.ej. varios `Set-Cookie`).
    """

    model_config = ConfigDict(frozen=True)

    http_version: str = Field(default="HTTP/1.1", description="Versión del protocolo.")
    status_code: int = Field(
        ...,
        description="Código tal cual lo envía el servidor (puede ser no estándar, p.ej. 999).",
    )
    reason_phrase: str = Field(default="")
    headers: tuple[tuple[str, str], ...] = Field(default=())
    text: str = Field(default="", description="Body decodificado como texto.")

    def header(self, name: str) -> str | None:
        """Primer valor del header `name` (case-insensitive)."""

        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None
