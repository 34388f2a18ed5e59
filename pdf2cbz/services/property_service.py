"""Lectura de las propiedades de un PDF y su mapeo a campos de cómic."""

from __future__ import annotations

import logging
import re
import subprocess
from pathlib import Path
from typing import Iterable, Optional

import fitz  # PyMuPDF

from pdf2cbz.core.config import get_settings
from pdf2cbz.core.enums import PropertyBackend
from pdf2cbz.core.errors import PropertyReadError
from pdf2cbz.models.document import DocumentProperties, MappedProperties

logger = logging.getLogger(__name__)

# Orden de búsqueda del año: CreationDate manda sobre ModDate
YEAR_KEYS = ("CreationDate", "ModDate")
_YEAR_RE = re.compile(r"[0-9]{4}")

# doc.metadata de PyMuPDF -> nombres de clave de pdfinfo
_PYMUPDF_KEYS = {
    "title": "Title",
    "author": "Author",
    "creator": "Creator",
    "producer": "Producer",
    "subject": "Subject",
    "keywords": "Keywords",
    "creationDate": "CreationDate",
    "modDate": "ModDate",
}


def parse_pdfinfo_output(text: str) -> DocumentProperties:
    """
    Convierte las líneas "Clave:   valor" de `pdfinfo` en un diccionario.
    Si una clave se repite, gana la primera aparición.
    """
    props: DocumentProperties = {}
    for line in text.splitlines():
        key, sep, value = line.partition(":")
        if not sep or not key or key != key.strip():
            continue
        props.setdefault(key, value.strip())
    return props


def _clean(value: Optional[str]) -> Optional[str]:
    """Recorta espacios; un valor en blanco cuenta como ausente."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def extract_year(props: DocumentProperties, keys: Iterable[str] = YEAR_KEYS) -> Optional[str]:
    """Primer grupo de cuatro dígitos en CreationDate y, si no, en ModDate."""
    for key in keys:
        match = _YEAR_RE.search(props.get(key, ""))
        if match:
            return match.group(0)
    return None


def map_properties(props: DocumentProperties, base_name: str) -> MappedProperties:
    """
    Extrae title/author/creator/pages/year/summary de las propiedades.

    No aplica valores por defecto: eso lo hace quien construye los metadatos,
    después de decidir qué valor usar. `base_name` sólo se usa para el log.
    """
    mapped = MappedProperties(
        title=_clean(props.get("Title")),
        author=_clean(props.get("Author")),
        creator=_clean(props.get("Creator")),
        pages=_clean(props.get("Pages")),
        year=extract_year(props),
        summary=_clean(props.get("Subject")),
    )
    logger.debug("Properties for %s: %s", base_name, mapped.model_dump())
    return mapped


class PropertyService:
    """
    Lee las propiedades del documento con `pdfinfo` (poppler) o con PyMuPDF.
    Cualquier fallo se traduce en PropertyReadError.
    """

    def __init__(self, backend: PropertyBackend | None = None) -> None:
        self.backend = backend or get_settings().property_backend

    def read_properties(self, pdf_path: Path) -> DocumentProperties:
        if self.backend == PropertyBackend.PDFINFO:
            return self._read_with_pdfinfo(pdf_path)
        elif self.backend == PropertyBackend.PYMUPDF:
            return self._read_with_pymupdf(pdf_path)
        else:
            raise ValueError(f"Unsupported property backend: {self.backend}")

    # ---------- pdfinfo ----------

    def _read_with_pdfinfo(self, pdf_path: Path) -> DocumentProperties:
        try:
            completed = subprocess.run(
                ["pdfinfo", "-enc", "UTF-8", str(pdf_path)],
                check=True,
                capture_output=True,
            )
        except FileNotFoundError as e:
            raise PropertyReadError("pdfinfo is not installed") from e
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.decode("utf-8", errors="replace").strip()
            raise PropertyReadError(
                f"pdfinfo failed for {pdf_path.name} (exit {e.returncode}): {stderr}"
            ) from e

        return parse_pdfinfo_output(completed.stdout.decode("utf-8", errors="replace"))

    # ---------- PyMuPDF ----------

    def _read_with_pymupdf(self, pdf_path: Path) -> DocumentProperties:
        try:
            with fitz.open(pdf_path) as doc:
                metadata = doc.metadata or {}
                page_count = doc.page_count
        except Exception as e:
            raise PropertyReadError(f"Could not read properties of {pdf_path.name}: {e}") from e

        props: DocumentProperties = {}
        for source_key, key in _PYMUPDF_KEYS.items():
            value = metadata.get(source_key)
            if value:
                props[key] = value
        props["Pages"] = str(page_count)
        return props
