"""Punto de entrada de la línea de comandos.

    pdf2cbz file1.pdf [file2.pdf ...]

Cada `nombre.pdf` produce `nombre.cbz` en la misma carpeta que el PDF.
"""

from __future__ import annotations

import argparse
import logging
import signal
import sys
import tempfile
from pathlib import Path
from typing import List, Optional

from pdf2cbz.core.config import Settings, get_settings
from pdf2cbz.core.errors import ToolMissingError
from pdf2cbz.core.log import configure_logging
from pdf2cbz.services.conversion_service import ConversionService
from pdf2cbz.services.property_service import PropertyService
from pdf2cbz.services.raster_service import RasterService
from pdf2cbz.services.toolcheck import check_tools, required_tools

logger = logging.getLogger("pdf2cbz")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdf2cbz",
        usage="%(prog)s file1.pdf [file2.pdf ...]",
        description="Convert PDF files into CBZ comic archives with ComicInfo.xml",
    )
    parser.add_argument("pdfs", nargs="*", metavar="file.pdf", help="PDF files to convert")
    return parser


def _handle_sigterm(signum, frame):
    # SystemExit atraviesa el `with` y borra el directorio temporal
    sys.exit(128 + signum)


def _run_batch(settings: Settings, pdfs: List[str]) -> None:
    """Convierte todo el lote dentro de un único directorio temporal."""
    if settings.temp_root is not None:
        settings.temp_root.mkdir(parents=True, exist_ok=True)

    with tempfile.TemporaryDirectory(prefix="pdf2cbz-", dir=settings.temp_root) as tmp:
        logger.info("Temp dir: %s", tmp)
        service = ConversionService(
            work_root=Path(tmp),
            raster_service=RasterService(
                backend=settings.raster_backend,
                dpi=settings.dpi,
                quality=settings.jpeg_quality,
            ),
            property_service=PropertyService(backend=settings.property_backend),
        )
        service.convert_many(pdfs)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.pdfs:
        parser.print_usage(sys.stdout)
        return 1

    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        check_tools(required_tools(settings))
    except ToolMissingError as e:
        logger.error("%s (install poppler-utils)", e)
        return 1

    previous_handler = signal.signal(signal.SIGTERM, _handle_sigterm)
    try:
        _run_batch(settings, args.pdfs)
    except Exception:
        logger.exception("Unexpected failure, aborting")
        return 1
    finally:
        if previous_handler is not None:
            signal.signal(signal.SIGTERM, previous_handler)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
