"""Errores compartidos de la aplicación.

Los errores son explícitos para que la capa de presentación decida cómo
mostrarlos.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class AppError(Exception):
    """Error base de la aplicación."""

    message: str
    cause: Exception | None = None

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message} ({self.cause})"


class FetchError(AppError):
    """Fallo de red, de estado HTTP o de decodificación de la respuesta."""


__all__ = ["AppError", "FetchError"]
