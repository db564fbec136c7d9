"""Reglas de validación de credenciales.

Son comprobaciones deliberadamente simples: no validan la estructura del
correo ni la complejidad de la contraseña.
"""

from __future__ import annotations

PASSWORD_MIN_LENGTH = 6


def email_valido(email: str) -> bool:
    """Indica si el texto contiene al menos una ``@`` y un ``.``."""

    return "@" in email and "." in email


def password_valido(password: str) -> bool:
    """Indica si la contraseña tiene al menos seis caracteres."""

    return len(password) >= PASSWORD_MIN_LENGTH


__all__ = ["PASSWORD_MIN_LENGTH", "email_valido", "password_valido"]
