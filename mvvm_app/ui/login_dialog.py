"""Diálogo de ingreso con validación local de credenciales."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
)

from mvvm_app.core.validation import PASSWORD_MIN_LENGTH
from mvvm_app.viewmodels.login import LoginViewModel


class LoginDialog(QDialog):
    """Pantalla modal de ingreso.

    El botón "Ingresar" solo se habilita cuando el view model considera
    válidos ambos campos.
    """

    def __init__(self, view_model: LoginViewModel, parent=None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Ingreso")
        self.setModal(True)
        self.view_model = view_model

        self._lbl_status = QLabel("")
        self._lbl_status.setObjectName("statusLabel")

        self._input_email = QLineEdit()
        self._input_email.setPlaceholderText("correo@ejemplo.com")
        self._input_email.textChanged.connect(
            lambda texto: self.view_model.actualizar_campo("email", texto)
        )

        self._input_password = QLineEdit()
        self._input_password.setPlaceholderText(f"al menos {PASSWORD_MIN_LENGTH} caracteres")
        self._input_password.setEchoMode(QLineEdit.EchoMode.Password)
        self._input_password.textChanged.connect(
            lambda texto: self.view_model.actualizar_campo("password", texto)
        )

        self._btn_login = QPushButton("Ingresar")
        self._btn_login.clicked.connect(self._on_submit)

        self._btn_cancel = QPushButton("Cancelar")
        self._btn_cancel.clicked.connect(self.reject)

        self._build_ui()
        self._unsubscribe = self.view_model.suscribir(self._render)
        self._render()
        self._input_email.setFocus()

    def _build_ui(self) -> None:
        title = QLabel("Ingreso")
        title.setStyleSheet("font-size: 15pt; font-weight: 700;")
        subtitle = QLabel("Usa tu correo y contraseña para continuar")

        form = QFormLayout()
        form.setLabelAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        form.addRow("Email", self._input_email)
        form.addRow("Contraseña", self._input_password)

        buttons = QDialogButtonBox()
        buttons.addButton(self._btn_login, QDialogButtonBox.ButtonRole.AcceptRole)
        buttons.addButton(self._btn_cancel, QDialogButtonBox.ButtonRole.RejectRole)

        layout = QVBoxLayout()
        layout.setSpacing(16)
        layout.setContentsMargins(20, 18, 20, 16)
        layout.addWidget(title)
        layout.addWidget(subtitle)
        layout.addLayout(form)
        layout.addWidget(buttons)

        status_layout = QHBoxLayout()
        status_layout.addWidget(self._lbl_status)
        status_layout.addStretch(1)
        layout.addLayout(status_layout)

        self.setLayout(layout)
        self.setMinimumWidth(420)

    def _render(self) -> None:
        self._btn_login.setEnabled(self.view_model.es_valido)

    def _on_submit(self) -> None:
        if not self.view_model.iniciar_sesion():
            self._show_status("Revisa el email y la contraseña.")
            return
        self._unsubscribe()
        self.accept()

    def _show_status(self, message: str) -> None:
        self._lbl_status.setText(message)
        self._lbl_status.setToolTip(message)
        self._lbl_status.setVisible(bool(message))


__all__ = ["LoginDialog"]
