"""Diálogo con el detalle de un usuario."""

from __future__ import annotations

from PyQt6.QtWidgets import QDialog, QDialogButtonBox, QLabel, QPushButton, QVBoxLayout

from mvvm_app.viewmodels.user_detail import UserDetailViewModel


class UserDetailDialog(QDialog):
    def __init__(self, view_model: UserDetailViewModel, parent=None) -> None:
        super().__init__(parent)
        self.view_model = view_model
        self.setWindowTitle("Detalle de usuario")

        nombre = QLabel(view_model.usuario.nombre)
        nombre.setStyleSheet("font-size: 18pt; font-weight: 700;")
        email = QLabel(view_model.usuario.email)
        email.setStyleSheet("color: #6b7280;")

        self._btn_favorito = QPushButton()
        self._btn_favorito.clicked.connect(self.view_model.alternar_favorito)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Close)
        buttons.rejected.connect(self.reject)

        layout = QVBoxLayout()
        layout.setSpacing(12)
        layout.addWidget(nombre)
        layout.addWidget(email)
        layout.addWidget(self._btn_favorito)
        layout.addWidget(buttons)
        self.setLayout(layout)

        self.view_model.suscribir(self._render)
        self._render()

    def _render(self) -> None:
        texto = "Quitar de favoritos" if self.view_model.es_favorito else "Marcar como favorito"
        self._btn_favorito.setText(texto)


__all__ = ["UserDetailDialog"]
