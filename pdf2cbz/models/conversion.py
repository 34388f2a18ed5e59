"""Resultado de convertir un documento.

Equivale al `Job` de una cola de trabajos, pero sin persistencia: la CLI
convierte los PDFs uno detrás de otro y sólo necesita saber en qué estado
terminó cada uno.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from pdf2cbz.core.enums import ConversionState


class ConversionResult(BaseModel):
    """Estado final de la conversión de un PDF."""

    source: Path
    state: ConversionState = ConversionState.START
    output_path: Optional[Path] = None  # Se rellena al crear el CBZ
    pages: int = 0
    error_message: Optional[str] = None  # Motivo del aborto, si lo hubo

    @property
    def succeeded(self) -> bool:
        return self.state == ConversionState.ARCHIVED

    def advance(self, state: ConversionState) -> None:
        """Avanza la máquina de estados."""
        self.state = state

    def mark_aborted(self, error_message: str) -> None:
        """Registra un fallo; el estado alcanzado se pierde a favor de ABORTED."""
        self.state = ConversionState.ABORTED
        self.error_message = error_message

    def mark_archived(self, output_path: Path, pages: int) -> None:
        self.state = ConversionState.ARCHIVED
        self.output_path = output_path
        self.pages = pages
