from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import Sequence

from pdf2cbz.core.errors import ArchiveWriteError
from pdf2cbz.models.page import PageImage
from pdf2cbz.services.comic_info import COMIC_INFO_NAME


class ArchiveService:
    """
    Empaqueta las páginas y ComicInfo.xml en un CBZ (ZIP).
    """

    def __init__(self) -> None:
        self.logger = logging.getLogger(__name__)

    def assemble(
        self,
        images: Sequence[PageImage],
        metadata_document: str,
        output_path: Path,
    ) -> Path:
        """
        Escribe las imágenes sin carpetas (sólo el nombre base, así el orden
        0001, 0002, ... se respeta) y después ComicInfo.xml.
        """
        pages_sorted = sorted(images, key=lambda p: p.index)

        created = False
        try:
            with zipfile.ZipFile(output_path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
                created = True
                for page in pages_sorted:
                    zf.write(page.image_path, arcname=page.image_path.name)
                zf.writestr(COMIC_INFO_NAME, metadata_document.encode("utf-8"))
        except (OSError, zipfile.BadZipFile, zipfile.LargeZipFile) as e:
            # Si ni siquiera se abrió, el fichero que hubiera no es nuestro
            if created:
                self._remove_partial(output_path)
            raise ArchiveWriteError(f"Could not write {output_path}: {e}") from e

        return output_path

    def _remove_partial(self, output_path: Path) -> None:
        """Borra el CBZ a medio escribir si llegó a crearse."""
        try:
            output_path.unlink(missing_ok=True)
        except OSError:
            self.logger.warning("Could not remove partial archive %s", output_path)
