"""Punto de entrada de la aplicación.

Crea la configuración, los componentes de infraestructura, los casos de uso
y los view models, y arranca la interfaz gráfica.
"""

from __future__ import annotations

import logging
import sys

from PyQt6.QtWidgets import QApplication, QDialog

from mvvm_app.config import cargar_configuracion
from mvvm_app.core.use_cases import FetchUsersUseCase, LoginUseCase
from mvvm_app.infrastructure.api_client import APIClient
from mvvm_app.infrastructure.endpoints import APIEndpoints
from mvvm_app.infrastructure.repositories import UserRepository
from mvvm_app.logging_config import setup_logging
from mvvm_app.ui.login_dialog import LoginDialog
from mvvm_app.ui.main_window import MainWindow
from mvvm_app.viewmodels.login import LoginViewModel
from mvvm_app.viewmodels.user_list import UserListViewModel

logger = logging.getLogger(__name__)


def crear_user_list_view_model(api_base: str, timeout: float) -> UserListViewModel:
    """Arma la cadena cliente → repositorio → caso de uso → view model."""

    api_client = APIClient(timeout=timeout)
    repository = UserRepository(api_client, APIEndpoints(api_base))
    return UserListViewModel(FetchUsersUseCase(repository))


def main() -> None:
    """Arranca la aplicación PyQt6 con las dependencias configuradas."""

    settings = cargar_configuracion()
    setup_logging(level=settings.log_level, json_logs=settings.log_json)
    logger.info("Usando el servicio %s", settings.api_base)

    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    login = LoginDialog(LoginViewModel(LoginUseCase()))
    if login.exec() != QDialog.DialogCode.Accepted:
        sys.exit(0)

    window = MainWindow(
        view_model=crear_user_list_view_model(settings.api_base, settings.http_timeout)
    )
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":  # pragma: no cover - punto de entrada interactivo
    main()
