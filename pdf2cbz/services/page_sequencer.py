"""Renombrado de las páginas a 0001.jpg, 0002.jpg, ... y medición de cada una."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence, Tuple

from PIL import Image

from pdf2cbz.core.errors import MeasurementError, NoPagesProducedError, RasterizationError
from pdf2cbz.models.page import PageEntry, PageImage

logger = logging.getLogger(__name__)

SEQUENCE_WIDTH = 4


def sequence_name(index: int, suffix: str = ".jpg") -> str:
    """Nombre de la página `index` (1-based): 1 -> "0001.jpg"."""
    return f"{index:0{SEQUENCE_WIDTH}d}{suffix.lower()}"


def sequence_pages(raw_images: Sequence[Path]) -> List[PageImage]:
    """
    Renombra las imágenes del rasterizador, en el orden recibido, a una
    secuencia de cuatro dígitos que empieza en 0001.
    """
    if not raw_images:
        raise NoPagesProducedError("No images were created by the rasterizer")

    pages: List[PageImage] = []
    for index, raw in enumerate(raw_images, start=1):
        target = raw.with_name(sequence_name(index, raw.suffix))
        if raw != target:
            try:
                raw.replace(target)
            except OSError as e:
                raise RasterizationError(f"Could not rename {raw.name} to {target.name}: {e}") from e
        pages.append(PageImage(index=index, image_path=target))
    return pages


def read_dimensions(image_path: Path) -> Tuple[int, int]:
    """
    Devuelve (width, height) de una imagen usando Pillow.
    """
    try:
        with Image.open(image_path) as img:
            return img.width, img.height
    except (OSError, ValueError) as e:
        raise MeasurementError(f"Could not read dimensions of {image_path.name}: {e}") from e


def measure(image_path: Path) -> Tuple[int, int, int]:
    """(width, height, byte_size). Si no se pueden leer las dimensiones, 0x0."""
    try:
        byte_size = image_path.stat().st_size
    except OSError as e:
        raise RasterizationError(f"Page image {image_path.name} is not readable: {e}") from e
    try:
        width, height = read_dimensions(image_path)
    except MeasurementError as e:
        logger.warning("%s; using 0x0", e)
        width, height = 0, 0
    return width, height, byte_size


def build_page_entries(pages: Sequence[PageImage]) -> List[PageEntry]:
    """Mide cada página y la describe con su índice 0-based de salida."""
    entries: List[PageEntry] = []
    for position, page in enumerate(pages):
        width, height, byte_size = measure(page.image_path)
        entries.append(
            PageEntry(index=position, width=width, height=height, byte_size=byte_size)
        )
    return entries
