"""Configuración de la aplicación.

Se lee una sola vez desde variables de entorno; si existe un archivo ``.env``
en el directorio de trabajo, sus valores se cargan primero.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from mvvm_app.infrastructure.api_client import DEFAULT_TIMEOUT
from mvvm_app.infrastructure.endpoints import DEFAULT_API_BASE


@dataclass(frozen=True)
class Settings:
    api_base: str = DEFAULT_API_BASE
    http_timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"
    log_json: bool = False


def _leer_timeout(valor: str) -> float:
    try:
        timeout = float(valor)
    except ValueError as exc:
        raise ValueError(f"MVVM_HTTP_TIMEOUT no es numérico: {valor!r}") from exc
    if not math.isfinite(timeout) or timeout <= 0:
        raise ValueError(f"MVVM_HTTP_TIMEOUT debe ser un número positivo y finito: {valor!r}")
    return timeout


def cargar_configuracion(*, usar_dotenv: bool = True) -> Settings:
    """Construye :class:`Settings` a partir del entorno."""

    if usar_dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    return Settings(
        api_base=os.getenv("MVVM_API_BASE", DEFAULT_API_BASE),
        http_timeout=_leer_timeout(os.getenv("MVVM_HTTP_TIMEOUT", str(DEFAULT_TIMEOUT))),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_json=os.getenv("LOG_JSON", "0").lower() in {"1", "true", "yes"},
    )


__all__ = ["Settings", "cargar_configuracion"]
