"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite testear el render con una `Console` sobre un buffer.

Política para JSON inválido:
- Si el servidor declara `application/json` y el body no parsea, se eleva
  `RenderError` *antes* de imprimir nada (no hay salida parcial).
- Con `invalid_json_fallback=True` se imprime el body crudo y se avisa por log.
"""

from __future__ import annotations

import json
import logging

from rich.console import Console
from rich.text import Text

from core.domain.content_type import ContentType, parse_content_type
from core.domain.models import HttpResponse
from core.errors import RenderError

logger = logging.getLogger(__name__)

STATUS_STYLE = "bold blue"
HEADER_NAME_STYLE = "green"
JSON_BODY_STYLE = "cyan"


def build_console(*, stderr: bool = False) -> Console:
    """Console que imprime texto tal cual (sin resaltado automático ni wrap duro)."""

    return Console(stderr=stderr, highlight=False, soft_wrap=True)


def extract_content_type(response: HttpResponse) -> ContentType | None:
    return parse_content_type(response.header("content-type"))


def pretty_json(text: str) -> str:
    return json.dumps(json.loads(text), indent=2, ensure_ascii=False)


def format_status(response: HttpResponse) -> Text:
    line = f"{response.http_version} {response.status_code} {response.reason_phrase}".rstrip()
    return Text(line, style=STATUS_STYLE)


def format_headers(response: HttpResponse) -> list[Text]:
    return [
        Text.assemble((name, HEADER_NAME_STYLE), ": ", value)
        for name, value in response.headers
    ]


def format_body(
    content_type: ContentType | None,
    body: str,
    *,
    invalid_json_fallback: bool = False,
) -> Text:
    """Pretty-print si el content-type es JSON; en otro caso, body crudo."""

    if content_type is None or not content_type.is_json:
        return Text(body)
    if not body.strip():
        # 204/HEAD-like: nada que formatear.
        return Text(body)

    try:
        pretty = pretty_json(body)
    except (ValueError, RecursionError) as exc:
        if not invalid_json_fallback:
            raise RenderError(
                f"Response declared {content_type.mime_type} but the body is not valid JSON: {exc}"
            ) from exc
        logger.warning("Body is not valid JSON despite %s; printing raw text", content_type.mime_type)
        return Text(body)
    return Text(pretty, style=JSON_BODY_STYLE)


def build_response_renderables(
    response: HttpResponse,
    *,
    invalid_json_fallback: bool = False,
) -> list[Text]:
    content_type = extract_content_type(response)
    logger.debug("Content-Type resolved to %s", content_type.mime_type if content_type else None)

    renderables: list[Text] = [format_status(response), Text("")]
    renderables.extend(format_headers(response))
    renderables.append(Text(""))
    renderables.append(format_body(content_type, response.text, invalid_json_fallback=invalid_json_fallback))
    return renderables


def print_response(
    console: Console,
    response: HttpResponse,
    *,
    invalid_json_fallback: bool = False,
) -> None:
    """Imprime status, headers y body. Todo se construye antes de imprimir."""

    renderables = build_response_renderables(response, invalid_json_fallback=invalid_json_fallback)
    for renderable in renderables:
        console.print(renderable)
