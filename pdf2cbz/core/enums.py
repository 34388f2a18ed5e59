"""Enumeraciones compartidas que describen backends y estados de conversión."""

from enum import Enum


class ConversionState(str, Enum):
    """Estados por los que pasa la conversión de un documento."""

    START = "start"
    RASTERIZED = "rasterized"
    PROPERTIES_READ = "properties_read"
    SEQUENCED = "sequenced"
    METADATA_BUILT = "metadata_built"
    ARCHIVED = "archived"
    ABORTED = "aborted"


class RasterBackend(str, Enum):
    """Herramienta usada para convertir las páginas del PDF en imágenes."""

    PDFTOPPM = "pdftoppm"  # poppler-utils
    PYMUPDF = "pymupdf"


class PropertyBackend(str, Enum):
    """Herramienta usada para leer las propiedades del documento."""

    PDFINFO = "pdfinfo"  # poppler-utils
    PYMUPDF = "pymupdf"
