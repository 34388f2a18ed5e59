"""Registro canónico que acaba serializado en ComicInfo.xml."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from pdf2cbz.models.page import PageEntry

DEFAULT_AUTHOR = "Unknown"
DEFAULT_SUMMARY = "Auto-generated from PDF by script."
DEFAULT_YEAR = "1900"

GENRE = "General"
TAGS = "PDF,Comic"
COUNTRY = "France"
LANGUAGE = "French"
MANGA = "No"


class ComicMetadata(BaseModel):
    """
    Metadatos de un cómic. Los campos de texto llegan ya saneados
    (ver `sanitizer.sanitize`), el builder no vuelve a escapar nada.
    """

    title: str
    author: str = DEFAULT_AUTHOR
    creator: str = DEFAULT_AUTHOR
    series: str
    number: str = ""
    summary: str = DEFAULT_SUMMARY
    genre: str = GENRE
    tags: str = TAGS
    country: str = COUNTRY
    language: str = LANGUAGE
    manga: str = MANGA
    year: str = Field(default=DEFAULT_YEAR, pattern=r"^[0-9]{4}$")
    page_count: Optional[int] = None
    pages: List[PageEntry] = Field(default_factory=list)
