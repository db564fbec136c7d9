"""View model del detalle de un usuario."""

from __future__ import annotations

from mvvm_app.models.user import User
from mvvm_app.viewmodels.observable import Observable


class UserDetailViewModel(Observable):
    """Expone un usuario y una marca de favorito local a la pantalla."""

    def __init__(self, usuario: User) -> None:
        super().__init__()
        self.usuario = usuario
        self._es_favorito = False

    @property
    def es_favorito(self) -> bool:
        return self._es_favorito

    def alternar_favorito(self) -> None:
        self._es_favorito = not self._es_favorito
        self._notificar()


__all__ = ["UserDetailViewModel"]
