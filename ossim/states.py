"""Lifecycle states a simulated process moves through."""

from __future__ import annotations

from enum import Enum


class ProcessState(Enum):
    """States of a process, in lifecycle order."""

    NUEVO = "NUEVO"
    LISTO = "LISTO"
    EJECUCION = "EJECUCION"
    TERMINADO = "TERMINADO"

    def __str__(self) -> str:
        return self.value