from __future__ import annotations

"""Modelos relacionados con páginas individuales rasterizadas."""

from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field


class PageImage(BaseModel):
    """
    Representa una página ya rasterizada y renombrada en disco.
    """

    index: int = Field(ge=1)  # 1-based, coincide con el nombre 0001.jpg
    image_path: Path  # Ruta en disco de la imagen de la página

    model_config = ConfigDict(frozen=True)


class PageEntry(BaseModel):
    """
    Descriptor de una página dentro de ComicInfo.xml.
    """

    index: int = Field(ge=0)  # 0-based, orden de salida
    width: int = 0  # 0 si no se pudo medir
    height: int = 0
    byte_size: int = 0

    model_config = ConfigDict(frozen=True)

    @property
    def is_front_cover(self) -> bool:
        return self.index == 0
