"""Carga de configuración de la herramienta.

Usa `pydantic-settings` para leer valores desde `.env` o variables de
entorno con el prefijo `PDF2CBZ_`. Los valores por defecto reproducen el
contrato de salida (150 DPI, calidad JPEG 70); sólo conviene tocarlos para
pruebas o depuración.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from pdf2cbz.core.enums import PropertyBackend, RasterBackend


class Settings(BaseSettings):
    """Contenedor tipado para todas las opciones configurables."""

    # Parámetros de rasterizado
    dpi: int = 150
    jpeg_quality: int = 70

    # Qué herramienta externa hace cada trabajo
    raster_backend: RasterBackend = RasterBackend.PDFTOPPM
    property_backend: PropertyBackend = PropertyBackend.PDFINFO

    # Directorio padre del espacio temporal de cada ejecución (None = el del sistema)
    temp_root: Path | None = None

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="PDF2CBZ_",
        env_file=".env",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    """Crea (y memoriza) la configuración de forma perezosa.

    Usamos `lru_cache` para que sólo se construya una instancia por proceso,
    evitando relecturas repetidas de `.env`.
    """

    return Settings()
