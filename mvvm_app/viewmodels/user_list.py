"""View model del listado paginado de usuarios.

Mantiene el estado de carga, la lista acumulada y el cursor de paginación.
La carga completa (página 1) reemplaza la lista y reporta sus fallos como
estado :class:`Error`; la carga incremental agrega al final y, si falla,
deja la lista y el estado tal como estaban. Ese fallo solo se informa por el
log y por el callback opcional ``al_fallar_paginacion``.

Las operaciones son bloqueantes y pensadas para ejecutarse fuera del hilo de
la interfaz. Un candado reentrante por instancia las serializa: dos cargas
nunca modifican la lista a la vez. El aviso final a los oyentes y el callback
de paginación se ejecutan con el candado ya liberado.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, List, Optional

from mvvm_app.core.errors import FetchError
from mvvm_app.core.state import Error, Idle, LoadState, Loading, Success, UserDetailRoute
from mvvm_app.core.use_cases import FetchUsersUseCase
from mvvm_app.models.user import User
from mvvm_app.viewmodels.observable import Observable

logger = logging.getLogger(__name__)

PRIMERA_PAGINA = 1
MENSAJE_ERROR_GENERICO = "No se pudieron cargar los usuarios."

PaginationErrorHook = Callable[[int, FetchError], None]


class UserListViewModel(Observable):
    """Máquina de estados de la carga de usuarios."""

    def __init__(
        self,
        fetch_users: FetchUsersUseCase,
        *,
        al_fallar_paginacion: Optional[PaginationErrorHook] = None,
    ) -> None:
        super().__init__()
        self._fetch_users = fetch_users
        self._al_fallar_paginacion = al_fallar_paginacion
        self._candado = threading.RLock()
        self._estado: LoadState = Idle()
        self._usuarios: List[User] = []
        self._pagina = PRIMERA_PAGINA
        self._ruta: UserDetailRoute | None = None
        self._cerrado = False

    # ------------------------------------------------------------------
    # Estado observable
    # ------------------------------------------------------------------
    @property
    def estado(self) -> LoadState:
        return self._estado

    @property
    def usuarios(self) -> list[User]:
        return list(self._usuarios)

    @property
    def pagina(self) -> int:
        return self._pagina

    @property
    def ruta(self) -> UserDetailRoute | None:
        return self._ruta

    @property
    def cerrado(self) -> bool:
        return self._cerrado

    # ------------------------------------------------------------------
    # Acciones
    # ------------------------------------------------------------------
    def cargar_usuarios(self) -> None:
        """Carga la primera página y reemplaza la lista completa."""

        with self._candado:
            if self._cerrado:
                return
            self._pagina = PRIMERA_PAGINA
            self._estado = Loading()
            self._notificar()

            try:
                usuarios = self._fetch_users.ejecutar(PRIMERA_PAGINA)
            except Exception as exc:
                error = self._como_fetch_error(exc)
                if self._cerrado:
                    return
                logger.info("Falló la carga inicial de usuarios: %s", error)
                self._estado = Error(str(error) or MENSAJE_ERROR_GENERICO)
            else:
                if self._cerrado:
                    return
                self._usuarios = list(usuarios)
                self._estado = Success()
                logger.debug("Página %d cargada con %d usuarios", PRIMERA_PAGINA, len(usuarios))

        self._notificar()

    def cargar_mas(self) -> None:
        """Pide la página siguiente y la agrega al final de la lista."""

        fallo: FetchError | None = None
        with self._candado:
            if self._cerrado:
                return
            self._pagina += 1
            pagina = self._pagina
            self._notificar()

            try:
                usuarios = self._fetch_users.ejecutar(pagina)
            except Exception as exc:
                fallo = self._como_fetch_error(exc)
                if self._cerrado:
                    return
                logger.warning("Se descarta la página %d de usuarios: %s", pagina, fallo)
            else:
                if self._cerrado:
                    return
                self._usuarios = [*self._usuarios, *usuarios]
                logger.debug("Página %d agregada con %d usuarios", pagina, len(usuarios))

        if fallo is not None:
            self._reportar_fallo_paginacion(pagina, fallo)
            return
        self._notificar()

    def seleccionar_usuario(self, usuario: User) -> None:
        """Registra el usuario elegido como destino de navegación."""

        self._ruta = UserDetailRoute(usuario)
        self._notificar()

    def limpiar_ruta(self) -> None:
        if self._ruta is None:
            return
        self._ruta = None
        self._notificar()

    def cerrar(self) -> None:
        """Descarta la pantalla: las cargas pendientes ya no modifican el estado."""

        self._cerrado = True
        self._listeners.clear()

    # ------------------------------------------------------------------
    # Auxiliares
    # ------------------------------------------------------------------
    @staticmethod
    def _como_fetch_error(exc: Exception) -> FetchError:
        if isinstance(exc, FetchError):
            return exc
        logger.exception("Fallo inesperado al cargar usuarios")
        return FetchError("Error inesperado al cargar usuarios", exc)

    def _reportar_fallo_paginacion(self, pagina: int, error: FetchError) -> None:
        if self._al_fallar_paginacion is None:
            return
        try:
            self._al_fallar_paginacion(pagina, error)
        except Exception:
            logger.exception("El callback de fallo de paginación lanzó una excepción")


__all__ = ["MENSAJE_ERROR_GENERICO", "PRIMERA_PAGINA", "PaginationErrorHook", "UserListViewModel"]
