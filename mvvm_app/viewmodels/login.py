"""View model del formulario de ingreso."""

from __future__ import annotations

import logging

from mvvm_app.core.use_cases import LoginUseCase
from mvvm_app.core.validation import email_valido, password_valido
from mvvm_app.viewmodels.observable import Observable

logger = logging.getLogger(__name__)

CAMPOS = ("email", "password")


class LoginViewModel(Observable):
    """Mantiene los dos campos del formulario y su validez derivada."""

    def __init__(self, login_use_case: LoginUseCase | None = None) -> None:
        super().__init__()
        self._login_use_case = login_use_case or LoginUseCase()
        self._email = ""
        self._password = ""

    @property
    def email(self) -> str:
        return self._email

    @property
    def password(self) -> str:
        return self._password

    @property
    def es_valido(self) -> bool:
        # se calcula en cada lectura para que nunca quede desfasado de los campos
        return email_valido(self._email) and password_valido(self._password)

    def actualizar_campo(self, nombre: str, valor: str) -> None:
        """Actualiza ``email`` o ``password`` y avisa a los oyentes."""

        if nombre == "email":
            self._email = valor
        elif nombre == "password":
            self._password = valor
        else:
            raise ValueError(f"Campo desconocido: {nombre!r}")
        self._notificar()

    def iniciar_sesion(self) -> bool:
        """Valida las credenciales localmente; no hay autenticación remota."""

        aceptado = self._login_use_case.ejecutar(self._email, self._password)
        logger.info("Validación de ingreso para %r: %s", self._email, "aceptada" if aceptado else "rechazada")
        return aceptado


__all__ = ["CAMPOS", "LoginViewModel"]
