"""Notificación de cambios desde los view models hacia la vista."""

from __future__ import annotations

from typing import Callable, List

Listener = Callable[[], None]


class Observable:
    """Lista de oyentes sin argumentos que se avisan tras cada cambio."""

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def suscribir(self, listener: Listener) -> Callable[[], None]:
        """Registra ``listener`` y devuelve una función para darlo de baja."""

        self._listeners.append(listener)

        def _cancelar() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _cancelar

    def _notificar(self) -> None:
        for listener in list(self._listeners):
            listener()


__all__ = ["Listener", "Observable"]
