"""Configuración de la aplicación.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Solo afecta al transporte (timeouts, redirects, UA) y a la política del
  renderer; el parsing y el dispatch no leen configuración.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.version import __version__


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="HTTPIE_LITE_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default=f"httpie-lite/{__version__}",
        min_length=1,
        description="User-Agent enviado en cada petición.",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Seguir redirecciones 3xx en el transporte.",
    )
    invalid_json_fallback: bool = Field(
        default=False,
        description=(
            "Si el servidor declara application/json pero el body no es JSON: "
            "False = fallar con error, True = imprimir el body crudo."
        ),
    )
