"""Excepciones propias de la conversión PDF -> CBZ.

`ConversionError` y sus subclases abortan sólo el documento en curso; el
lote sigue con el siguiente. `ToolMissingError` aborta la ejecución entera
antes de tocar ningún documento.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable


class ToolMissingError(RuntimeError):
    """Falta alguna herramienta externa en el PATH."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"Missing required tool(s): {', '.join(self.missing)}")


class InvalidInputError(ValueError):
    """El argumento no es un fichero PDF existente."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Skipping {path}: {reason}")


class ConversionError(Exception):
    """Fallo que aborta la conversión de un único documento."""


class RasterizationError(ConversionError):
    pass


class NoPagesProducedError(ConversionError):
    pass


class PropertyReadError(ConversionError):
    pass


class ArchiveWriteError(ConversionError):
    pass


class MeasurementError(Exception):
    """No se pudieron leer las dimensiones de una imagen (no es fatal)."""
