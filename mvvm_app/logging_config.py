"""Configuración central del logging (solo biblioteca estándar)."""

from __future__ import annotations

import json
import logging
import sys

_FORMATO = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class _JsonFormatter(logging.Formatter):
    """Una línea JSON por registro, con los mismos campos que el formato de texto."""

    def format(self, record: logging.LogRecord) -> str:
        linea = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            linea["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(linea, ensure_ascii=False)


def setup_logging(*, level: str | int = "INFO", json_logs: bool = False) -> None:
    """Configura el logger raíz con una salida por ``stdout``.

    ``level`` acepta un nombre (``"debug"``, ``"INFO"``) o un entero de
    :mod:`logging`; los nombres desconocidos caen en ``INFO``.
    """

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream=sys.stdout)
    if json_logs:
        handler.setFormatter(_JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(fmt=_FORMATO, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(int(level))


__all__ = ["setup_logging"]
