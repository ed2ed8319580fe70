"""Taxonomía de errores de httpie-lite.

Por qué una jerarquía cerrada:
- La CLI decide el exit code según el *tipo* de error, no por el texto.
- Los tests pueden comprobar el error exacto sin comparar mensajes.
"""

from __future__ import annotations


class HttpieLiteError(Exception):
    """Base de todos los errores esperados de la aplicación."""


class ParseError(HttpieLiteError):
    """Argumentos de línea de comandos inválidos."""


class MissingSeparatorError(ParseError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Failed to parse {token!r}: expected key=value")


class InvalidUrlError(ParseError):
    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Invalid URL {url!r}: expected an absolute URL like http://host/path")


class UsageError(ParseError):
    """Aridad incorrecta o subcomando desconocido."""


class TransportError(HttpieLiteError):
    """Fallo de red (DNS, conexión, timeout, TLS). No se reintenta."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Request to {url} failed: {reason}")


class RenderError(HttpieLiteError):
    """El servidor declaró JSON pero el body no es JSON válido."""
