from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from pdf2cbz.core.enums import ConversionState
from pdf2cbz.core.errors import ConversionError, InvalidInputError, NoPagesProducedError
from pdf2cbz.models.conversion import ConversionResult
from pdf2cbz.models.document import SourceDocument
from pdf2cbz.services.archive_service import ArchiveService
from pdf2cbz.services.comic_info import build_comic_metadata, build_metadata_document
from pdf2cbz.services.filename_parser import infer_series_and_number
from pdf2cbz.services.page_sequencer import build_page_entries, sequence_pages
from pdf2cbz.services.property_service import PropertyService, map_properties
from pdf2cbz.services.raster_service import RasterService


def validate_input(path: Path | str) -> SourceDocument:
    """Sólo se aceptan ficheros existentes con extensión .pdf."""
    candidate = Path(path)
    if not candidate.is_file():
        raise InvalidInputError(candidate, "not a valid file")
    if candidate.suffix.lower() != ".pdf":
        raise InvalidInputError(candidate, "not a PDF file")
    return SourceDocument.from_path(candidate)


class ConversionService:
    """
    Orquesta la conversión de un PDF:
    rasterizar -> leer propiedades -> secuenciar -> ComicInfo.xml -> CBZ.

    Cada documento trabaja en su propia subcarpeta de `work_root`; un fallo
    aborta sólo ese documento y el lote continúa.
    """

    def __init__(
        self,
        work_root: Path,
        raster_service: RasterService | None = None,
        property_service: PropertyService | None = None,
        archive_service: ArchiveService | None = None,
    ) -> None:
        self.work_root = work_root
        self.raster_service = raster_service or RasterService()
        self.property_service = property_service or PropertyService()
        self.archive_service = archive_service or ArchiveService()
        self.logger = logging.getLogger(__name__)

    def _work_dir_for(self, document: SourceDocument) -> Path:
        """Subcarpeta exclusiva; dos PDFs con el mismo nombre no se pisan."""
        work_dir = self.work_root / document.base_name
        suffix = 2
        while work_dir.exists():
            work_dir = self.work_root / f"{document.base_name}-{suffix}"
            suffix += 1
        work_dir.mkdir(parents=True)
        return work_dir

    # ---------- UN DOCUMENTO ----------

    def convert(self, document: SourceDocument) -> ConversionResult:
        result = ConversionResult(source=document.path)
        self.logger.info("Processing: %s", document.base_name)

        try:
            self._run(document, result)
        except ConversionError as e:
            result.mark_aborted(str(e))
            self.logger.error("Failed: %s (%s)", document.path, e)
            return result

        # Comprobación final: el zip dijo que sí, pero ¿existe el fichero?
        if result.output_path is not None and result.output_path.is_file():
            self.logger.info("Created: %s", result.output_path)
        else:
            self.logger.warning("CBZ not created: %s", document.output_path)
        return result

    def _run(self, document: SourceDocument, result: ConversionResult) -> None:
        work_dir = self._work_dir_for(document)

        # 1) PDF -> imágenes
        raw_images = self.raster_service.rasterize(document.path, work_dir)
        if not raw_images:
            raise NoPagesProducedError(
                f"No images were created by the rasterizer for {document.path.name}"
            )
        result.advance(ConversionState.RASTERIZED)

        # 2) Propiedades del documento
        props = self.property_service.read_properties(document.path)
        mapped = map_properties(props, document.base_name)
        result.advance(ConversionState.PROPERTIES_READ)

        # 3) 0001.jpg, 0002.jpg, ... y medidas de cada página
        pages = sequence_pages(raw_images)
        entries = build_page_entries(pages)
        result.advance(ConversionState.SEQUENCED)

        # 4) ComicInfo.xml
        series_info = infer_series_and_number(document.base_name)
        metadata = build_comic_metadata(mapped, series_info, document.base_name, entries)
        metadata_document = build_metadata_document(metadata)
        result.advance(ConversionState.METADATA_BUILT)

        # 5) CBZ junto al PDF original
        output_path = document.output_path
        self.logger.info("Creating CBZ: %s", output_path)
        self.archive_service.assemble(pages, metadata_document, output_path)
        result.mark_archived(output_path=output_path, pages=len(pages))

    # ---------- LOTE ----------

    def convert_many(self, paths: Iterable[Path | str]) -> List[ConversionResult]:
        """Convierte en orden; las entradas inválidas se avisan y se saltan."""
        results: List[ConversionResult] = []
        for path in paths:
            try:
                document = validate_input(path)
            except InvalidInputError as e:
                self.logger.warning("%s", e)
                continue
            results.append(self.convert(document))

        converted = sum(1 for r in results if r.succeeded)
        self.logger.info("Converted %d of %d document(s)", converted, len(results))
        return results
