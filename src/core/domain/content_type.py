"""Parsing tolerante del header `Content-Type`.

Por qué tolerante:
- Un header mal formado nunca debe abortar el render.
- Todo camino de error devuelve `None` y el renderer imprime el body crudo.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

# RFC 7230 token chars.
_TOKEN = re.compile(r"^[!#$%&'*+.^_`|~0-9A-Za-z-]+$")

JSON_MIME_TYPE = "application/json"


class ContentType(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    subtype: str
    params: dict[str, str] = Field(default_factory=dict)

    @property
    def mime_type(self) -> str:
        return f"{self.type}/{self.subtype}"

    @property
    def is_json(self) -> bool:
        return self.mime_type == JSON_MIME_TYPE


def parse_content_type(raw: str | None) -> ContentType | None:
    """`text/html; charset=utf-8` -> ContentType(type="text", subtype="html", ...)."""

    if raw is None:
        return None

    essence, *raw_params = raw.split(";")
    main, slash, sub = essence.strip().partition("/")
    if not slash or not _TOKEN.match(main) or not _TOKEN.match(sub):
        return None

    params: dict[str, str] = {}
    for item in raw_params:
        item = item.strip()
        if not item:
            continue
        name, eq, value = item.partition("=")
        name = name.strip()
        if not eq or not _TOKEN.match(name):
            return None
        params[name.lower()] = value.strip().strip('"')

    return ContentType(type=main.lower(), subtype=sub.lower(), params=params)
