"""Definiciones de modelos de dominio."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class User:
    """Usuario obtenido del servicio remoto.

    La identidad la define ``id``: dos instancias con el mismo identificador
    se consideran el mismo usuario aunque difieran el nombre o el email.
    """

    id: int
    nombre: str = field(compare=False)
    email: str = field(compare=False)


__all__ = ["User"]
