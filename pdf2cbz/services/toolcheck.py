"""Comprobación de las herramientas externas antes de empezar."""

from __future__ import annotations

import shutil
from typing import Iterable, List

from pdf2cbz.core.config import Settings
from pdf2cbz.core.enums import PropertyBackend, RasterBackend
from pdf2cbz.core.errors import ToolMissingError


def required_tools(settings: Settings) -> List[str]:
    """Binarios que necesitan los backends configurados.

    El CBZ (zipfile) y las dimensiones (Pillow) se resuelven en proceso.
    """
    tools: List[str] = []
    if settings.raster_backend == RasterBackend.PDFTOPPM:
        tools.append("pdftoppm")
    if settings.property_backend == PropertyBackend.PDFINFO:
        tools.append("pdfinfo")
    return tools


def check_tools(tools: Iterable[str]) -> None:
    """Lanza ToolMissingError con todas las herramientas que falten."""
    missing = [tool for tool in tools if shutil.which(tool) is None]
    if missing:
        raise ToolMissingError(missing)
