"""Cliente HTTP genérico para el servicio de datos.

Realiza peticiones GET, interpreta la respuesta como JSON y la convierte al
tipo que necesite el llamador mediante una función de decodificación. No hay
caché ni reintentos: cada llamada es exactamente una petición.
"""

from __future__ import annotations

import json
import logging
import socket
from http.client import HTTPException
from typing import Any, Callable, TypeVar
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from mvvm_app.core.errors import FetchError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TIMEOUT = 10.0


class APIClient:
    """Descarga y decodifica recursos JSON."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._timeout = timeout

    def obtener(self, url: str, decodificar: Callable[[Any], T]) -> T:
        """Hace GET sobre ``url`` y devuelve ``decodificar(json)``.

        Lanza :class:`FetchError` si la conexión falla, si el servidor
        responde con un estado de error, si el cuerpo no es JSON válido o si
        el contenido no tiene la forma que espera ``decodificar``.
        """

        logger.debug("GET %s", url)
        try:
            request = Request(url, headers={"Accept": "application/json"})
            with urlopen(request, timeout=self._timeout) as response:
                raw_data = response.read()
        except HTTPError as exc:
            logger.warning("GET %s respondió HTTP %s", url, exc.code)
            raise FetchError(f"El servidor respondió con el error HTTP {exc.code}", exc) from exc
        except URLError as exc:
            logger.warning("GET %s falló: %s", url, exc.reason)
            if isinstance(exc.reason, socket.timeout):
                raise FetchError("La petición expiró por timeout", exc) from exc
            raise FetchError(f"No se pudo conectar al servicio: {exc.reason}", exc) from exc
        except (OSError, HTTPException, ValueError) as exc:
            # timeouts y cortes durante la lectura del cuerpo llegan sin envolver;
            # ValueError cubre URLs o timeouts que urlopen no acepta
            logger.warning("GET %s falló: %s", url, exc)
            raise FetchError("No se pudo completar la petición", exc) from exc

        try:
            payload = json.loads(raw_data)
        except ValueError as exc:
            # JSONDecodeError y UnicodeDecodeError para cuerpos que no son UTF-8
            logger.warning("GET %s devolvió un cuerpo que no es JSON", url)
            raise FetchError("La respuesta del servicio no es JSON válido", exc) from exc

        try:
            return decodificar(payload)
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("GET %s devolvió un formato inesperado: %r", url, exc)
            raise FetchError("Formato inesperado en la respuesta del servicio", exc) from exc


__all__ = ["APIClient", "DEFAULT_TIMEOUT"]
