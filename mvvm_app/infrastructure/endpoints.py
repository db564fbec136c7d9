"""Traducción de solicitudes lógicas a URLs concretas."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_API_BASE = "https://jsonplaceholder.typicode.com"


@dataclass(frozen=True, slots=True)
class UsersPage:
    """Solicitud de una página del listado de usuarios (1-indexada)."""

    pagina: int

    def __post_init__(self) -> None:
        if isinstance(self.pagina, bool) or not isinstance(self.pagina, int) or self.pagina < 1:
            raise ValueError(f"La página debe ser un entero positivo: {self.pagina!r}")


class APIEndpoints:
    """Construye las URLs del servicio a partir de una base."""

    def __init__(self, base_url: str = DEFAULT_API_BASE) -> None:
        self._base_url = base_url.rstrip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    def url_para(self, solicitud: UsersPage) -> str:
        if isinstance(solicitud, UsersPage):
            return f"{self._base_url}/users?_page={solicitud.pagina}"
        raise TypeError(f"Solicitud no soportada: {solicitud!r}")


__all__ = ["APIEndpoints", "DEFAULT_API_BASE", "UsersPage"]
