from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List

import fitz  # PyMuPDF
from PIL import Image

from pdf2cbz.core.config import get_settings
from pdf2cbz.core.enums import RasterBackend
from pdf2cbz.core.errors import RasterizationError

# Prefijo de las imágenes en bruto; pdftoppm añade "-<página>.jpg"
RAW_PREFIX = "page"


class RasterService:
    """
    Convierte cada página de un PDF en un JPEG dentro de `work_dir`.

    Devuelve las rutas en el orden de página que asigna el rasterizador
    (orden alfabético de los nombres, que el rasterizador rellena con ceros).
    """

    def __init__(
        self,
        backend: RasterBackend | None = None,
        dpi: int | None = None,
        quality: int | None = None,
    ) -> None:
        settings = get_settings()
        self.backend = backend or settings.raster_backend
        self.dpi = dpi or settings.dpi
        self.quality = quality or settings.jpeg_quality
        self.logger = logging.getLogger(__name__)

    def rasterize(self, pdf_path: Path, work_dir: Path) -> List[Path]:
        if not pdf_path.exists():
            raise RasterizationError(f"PDF not found: {pdf_path}")

        work_dir.mkdir(parents=True, exist_ok=True)

        if self.backend == RasterBackend.PDFTOPPM:
            self._rasterize_with_pdftoppm(pdf_path, work_dir)
        elif self.backend == RasterBackend.PYMUPDF:
            self._rasterize_with_pymupdf(pdf_path, work_dir)
        else:
            raise ValueError(f"Unsupported raster backend: {self.backend}")

        return self.collect_raw_images(work_dir)

    @staticmethod
    def collect_raw_images(work_dir: Path) -> List[Path]:
        return sorted(work_dir.glob(f"{RAW_PREFIX}-*.jpg"))

    # ---------- pdftoppm ----------

    def _rasterize_with_pdftoppm(self, pdf_path: Path, work_dir: Path) -> None:
        cmd = [
            "pdftoppm",
            "-jpeg",
            "-jpegopt",
            f"quality={self.quality}",
            "-r",
            str(self.dpi),
            str(pdf_path),
            str(work_dir / RAW_PREFIX),
        ]
        self.logger.debug("Running %s", " ".join(cmd))
        try:
            subprocess.run(cmd, check=True, capture_output=True)
        except FileNotFoundError as e:
            raise RasterizationError("pdftoppm is not installed") from e
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.decode("utf-8", errors="replace").strip()
            raise RasterizationError(
                f"pdftoppm failed for {pdf_path.name} (exit {e.returncode}): {stderr}"
            ) from e

    # ---------- PyMuPDF ----------

    def _rasterize_with_pymupdf(self, pdf_path: Path, work_dir: Path) -> None:
        try:
            with fitz.open(pdf_path) as doc:
                for page_index in range(len(doc)):
                    page = doc.load_page(page_index)
                    pix = page.get_pixmap(dpi=self.dpi)

                    # Pillow escribe el JPEG para poder fijar la calidad
                    img = Image.frombytes("RGB", (pix.width, pix.height), pix.samples)
                    output_path = work_dir / f"{RAW_PREFIX}-{page_index + 1:04d}.jpg"
                    img.save(output_path, format="JPEG", quality=self.quality)
        except Exception as e:
            raise RasterizationError(f"PyMuPDF could not render {pdf_path.name}: {e}") from e
