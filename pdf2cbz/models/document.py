"""Modelos del documento de entrada y de los datos que se derivan de él.

Todos viven lo que dura la conversión de un PDF; nada se comparte entre
documentos.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

# Propiedades tal y como las imprime `pdfinfo` ("Title", "CreationDate", ...)
DocumentProperties = Dict[str, str]


class SourceDocument(BaseModel):
    """PDF de entrada: ruta absoluta y nombre base (sin carpeta ni extensión)."""

    path: Path
    base_name: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_path(cls, path: Path | str) -> "SourceDocument":
        # absolute() y no resolve(): un enlace simbólico conserva su carpeta y su nombre
        full_path = Path(path).expanduser().absolute()
        return cls(path=full_path, base_name=full_path.stem)

    @property
    def output_path(self) -> Path:
        """El CBZ se escribe junto al PDF, nunca en el directorio actual."""
        return self.path.parent / f"{self.base_name}.cbz"


class SeriesInfo(BaseModel):
    """
    Serie y número deducidos del nombre del fichero.

    `matched` indica si el nombre seguía el patrón "Serie - N".
    """

    series: str = Field(min_length=1)
    number: str = ""
    matched: bool = False

    model_config = ConfigDict(frozen=True)


class MappedProperties(BaseModel):
    """Campos leídos de las propiedades del PDF, recortados y sin defaults."""

    title: Optional[str] = None
    author: Optional[str] = None
    creator: Optional[str] = None
    pages: Optional[str] = None
    year: Optional[str] = None
    summary: Optional[str] = None
