"""Parsers puros de argumentos: `key=value`, URL y construcción del comando.

Por qué aquí (y no en la CLI):
- typer solo entrega tokens crudos; la validación vive en el dominio para
  poder testearla sin levantar la CLI.
- Ninguna función hace I/O.
"""

from __future__ import annotations

from typing import Sequence

import httpx

from core.domain.models import Command, GetCommand, KvPair, PostCommand
from core.errors import InvalidUrlError, MissingSeparatorError, UsageError


def parse_kv_pair(token: str) -> KvPair:
    """Divide `token` en el primer '=' y solo en el primero.

    `a=b=c` produce key `a` y value `b=c`; `b=` produce value vacío.
    """

    key, sep, value = token.partition("=")
    if not sep:
        raise MissingSeparatorError(token)
    return KvPair(key=key, value=value)


def validate_url(raw: str) -> str:
    """Acepta solo URLs absolutas (scheme + host). Devuelve `raw` sin tocar."""

    try:
        url = httpx.URL(raw)
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise InvalidUrlError(raw) from exc
    if not url.scheme or not url.host:
        raise InvalidUrlError(raw)
    return raw


def build_command(subcommand: str, tokens: Sequence[str]) -> Command:
    name = subcommand.strip().lower()

    if name == "get":
        if len(tokens) != 1:
            raise UsageError(f"get expects exactly one URL, got {len(tokens)} argument(s)")
        return GetCommand(url=validate_url(tokens[0]))

    if name == "post":
        if not tokens:
            raise UsageError("post expects a URL followed by optional key=value pairs")
        url = validate_url(tokens[0])
        # El primer token inválido corta la construcción.
        body = tuple(parse_kv_pair(token) for token in tokens[1:])
        return PostCommand(url=url, body=body)

    raise UsageError(f"Unknown subcommand {subcommand!r} (supported: get, post)")
