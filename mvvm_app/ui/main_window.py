"""Ventana principal de la aplicación."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from PyQt6.QtCore import QObject, Qt, QThread, QTimer, pyqtSignal
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QStackedWidget,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from mvvm_app.core.state import Error, Idle, Loading, Success
from mvvm_app.models.user import User
from mvvm_app.ui.user_detail_dialog import UserDetailDialog
from mvvm_app.viewmodels.user_detail import UserDetailViewModel
from mvvm_app.viewmodels.user_list import UserListViewModel


@dataclass(slots=True)
class _TableColumns:
    nombre: int = 0
    email: int = 1


class _LoadWorker(QObject):
    finished = pyqtSignal()
    error = pyqtSignal(str)

    def __init__(self, accion: Callable[[], None]) -> None:
        super().__init__()
        self._accion = accion

    def run(self) -> None:
        try:
            self._accion()
        except Exception as exc:  # pragma: no cover - mostrado en UI
            self.error.emit(str(exc))
            return
        self.finished.emit()


class MainWindow(QMainWindow):
    """Ventana principal con el listado paginado de usuarios."""

    # los oyentes del view model pueden correr en el hilo de carga
    _state_changed = pyqtSignal()

    def __init__(self, *, view_model: UserListViewModel) -> None:
        super().__init__()
        self.view_model = view_model
        self._columns = _TableColumns()
        self._load_thread: QThread | None = None
        self._load_worker: _LoadWorker | None = None
        self._navigation_pending = False

        self.setWindowTitle("Usuarios")
        self.resize(640, 420)

        self.refresh_button = QPushButton("Recargar")
        self.refresh_button.clicked.connect(self._on_reload)

        self.more_button = QPushButton("Cargar más")
        self.more_button.clicked.connect(self._on_load_more)

        self.page_label = QLabel("")

        self.table = QTableWidget(columnCount=2)
        self.table.setHorizontalHeaderLabels(["Nombre", "Email"])
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.verticalHeader().setVisible(False)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        self.table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.table.cellDoubleClicked.connect(self._on_row_activated)

        self.loading_label = QLabel("Cargando usuarios...")
        self.loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.error_label = QLabel("")
        self.error_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet("color: #b91c1c; font-weight: 600;")
        self.retry_button = QPushButton("Reintentar")
        self.retry_button.clicked.connect(self._on_reload)

        error_layout = QVBoxLayout()
        error_layout.addStretch(1)
        error_layout.addWidget(self.error_label)
        error_layout.addWidget(self.retry_button, alignment=Qt.AlignmentFlag.AlignCenter)
        error_layout.addStretch(1)
        self.error_panel = QWidget()
        self.error_panel.setLayout(error_layout)

        self.stack = QStackedWidget()
        self.stack.addWidget(self.loading_label)
        self.stack.addWidget(self.table)
        self.stack.addWidget(self.error_panel)

        top_bar = QHBoxLayout()
        top_bar.addWidget(QLabel("Usuarios"))
        top_bar.addStretch(1)
        top_bar.addWidget(self.page_label)
        top_bar.addWidget(self.refresh_button)

        bottom_bar = QHBoxLayout()
        bottom_bar.addStretch(1)
        bottom_bar.addWidget(self.more_button)

        layout = QVBoxLayout()
        layout.addLayout(top_bar)
        layout.addWidget(self.stack)
        layout.addLayout(bottom_bar)

        container = QWidget()
        container.setLayout(layout)
        self.setCentralWidget(container)

        self._state_changed.connect(self._render)
        self._unsubscribe = self.view_model.suscribir(self._state_changed.emit)

        self._render()
        self._on_reload()

    # ------------------------------------------------------------------
    # Eventos y acciones
    # ------------------------------------------------------------------
    def _on_reload(self) -> None:
        self._run_load(self.view_model.cargar_usuarios)

    def _on_load_more(self) -> None:
        self._run_load(self.view_model.cargar_mas)

    def _on_row_activated(self, row: int, _column: int) -> None:
        usuarios = self.view_model.usuarios
        if 0 <= row < len(usuarios):
            self.view_model.seleccionar_usuario(usuarios[row])

    def _run_load(self, accion: Callable[[], None]) -> None:
        if self._load_thread is not None:
            return
        self._toggle_controls(False)

        self._load_thread = QThread(self)
        self._load_worker = _LoadWorker(accion)
        self._load_worker.moveToThread(self._load_thread)

        self._load_thread.started.connect(self._load_worker.run)
        self._load_worker.finished.connect(self._load_thread.quit)
        self._load_worker.error.connect(self._load_thread.quit)
        self._load_worker.error.connect(self._on_load_failed)
        self._load_thread.finished.connect(self._limpiar_hilo_carga)

        self._load_thread.start()

    def _on_load_failed(self, message: str) -> None:
        QMessageBox.critical(self, "Error", f"No se pudieron cargar usuarios: {message}")

    def _limpiar_hilo_carga(self) -> None:
        if self._load_worker:
            self._load_worker.deleteLater()
            self._load_worker = None
        if self._load_thread:
            self._load_thread.deleteLater()
            self._load_thread = None
        self._render()

    def _toggle_controls(self, enabled: bool) -> None:
        for widget in (self.refresh_button, self.more_button, self.retry_button):
            widget.setEnabled(enabled)

    # ------------------------------------------------------------------
    # Renderizado
    # ------------------------------------------------------------------
    def _render(self) -> None:
        estado = self.view_model.estado
        ocupado = self._load_thread is not None

        if isinstance(estado, (Idle, Loading)):
            self.stack.setCurrentWidget(self.loading_label)
        elif isinstance(estado, Success):
            self.stack.setCurrentWidget(self.table)
            self._populate_table(self.view_model.usuarios)
        elif isinstance(estado, Error):
            self.error_label.setText(estado.mensaje)
            self.stack.setCurrentWidget(self.error_panel)

        self.page_label.setText(f"Página {self.view_model.pagina}")
        self.refresh_button.setEnabled(not ocupado)
        self.retry_button.setEnabled(not ocupado)
        self.more_button.setEnabled(not ocupado and isinstance(estado, Success))

        if self.view_model.ruta is not None and not self._navigation_pending:
            # la navegación abre un diálogo modal; se hace fuera del renderizado
            self._navigation_pending = True
            QTimer.singleShot(0, self._navigate)

    def _navigate(self) -> None:
        self._navigation_pending = False
        ruta = self.view_model.ruta
        if ruta is None:
            return
        self.view_model.limpiar_ruta()
        self._open_detail(ruta.usuario)

    def _populate_table(self, usuarios: list[User]) -> None:
        self.table.setRowCount(len(usuarios))

        for row, usuario in enumerate(usuarios):
            nombre_item = QTableWidgetItem(usuario.nombre)
            email_item = QTableWidgetItem(usuario.email)

            nombre_item.setFlags(nombre_item.flags() ^ Qt.ItemFlag.ItemIsEditable)
            email_item.setFlags(email_item.flags() ^ Qt.ItemFlag.ItemIsEditable)

            self.table.setItem(row, self._columns.nombre, nombre_item)
            self.table.setItem(row, self._columns.email, email_item)

        self.table.resizeColumnsToContents()

    def _open_detail(self, usuario: User) -> None:
        dialog = UserDetailDialog(UserDetailViewModel(usuario), parent=self)
        dialog.exec()

    def closeEvent(self, event) -> None:  # pragma: no cover - ciclo de vida UI
        self._unsubscribe()
        self.view_model.cerrar()
        if self._load_thread is not None:
            self._load_thread.quit()
            self._load_thread.wait()
        super().closeEvent(event)


__all__ = ["MainWindow"]
