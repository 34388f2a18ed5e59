"""Construcción de ComicInfo.xml.

El esquema es fijo: mismos elementos, mismo orden y una única rama
(la portada lleva `Type="FrontCover"`). Los textos llegan ya escapados.
"""

from __future__ import annotations

from typing import List, Sequence

from pdf2cbz.models.comic import (
    DEFAULT_AUTHOR,
    DEFAULT_SUMMARY,
    DEFAULT_YEAR,
    ComicMetadata,
)
from pdf2cbz.models.document import MappedProperties, SeriesInfo
from pdf2cbz.models.page import PageEntry
from pdf2cbz.services.sanitizer import sanitize

COMIC_INFO_NAME = "ComicInfo.xml"

XML_DECLARATION = "<?xml version='1.0' encoding='utf-8'?>"
ROOT_OPEN = (
    '<ComicInfo xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" '
    'xmlns:xsd="http://www.w3.org/2001/XMLSchema">'
)
ROOT_CLOSE = "</ComicInfo>"
INDENT = "  "


def _parse_page_count(pages: str | None) -> int | None:
    if pages is None or not pages.isdigit():
        return None
    return int(pages)


def build_comic_metadata(
    props: MappedProperties,
    series_info: SeriesInfo,
    base_name: str,
    pages: Sequence[PageEntry],
) -> ComicMetadata:
    """
    Aplica los valores por defecto y sanea cada campo de texto.

    Se elige primero el valor (real o por defecto) y después se escapa.
    """
    return ComicMetadata(
        title=sanitize(props.title or base_name),
        author=sanitize(props.author or DEFAULT_AUTHOR),
        creator=sanitize(props.creator or DEFAULT_AUTHOR),
        series=sanitize(series_info.series or base_name),
        number=sanitize(series_info.number),
        summary=sanitize(props.summary or DEFAULT_SUMMARY),
        year=props.year or DEFAULT_YEAR,
        page_count=_parse_page_count(props.pages),
        pages=list(pages),
    )


def _element(name: str, text: str) -> str:
    return f"{INDENT}<{name}>{text}</{name}>"


def _page_element(entry: PageEntry) -> str:
    attrs = [
        ("DoublePage", "False"),
        ("Image", str(entry.index)),
        ("ImageHeight", str(entry.height)),
        ("ImageSize", str(entry.byte_size)),
        ("ImageWidth", str(entry.width)),
    ]
    if entry.is_front_cover:
        attrs.append(("Type", "FrontCover"))
    rendered = " ".join(f'{key}="{value}"' for key, value in attrs)
    return f"{INDENT * 2}<Page {rendered} />"


def build_metadata_document(metadata: ComicMetadata) -> str:
    """Serializa los metadatos como ComicInfo.xml (UTF-8, XML 1.0)."""
    page_count = "" if metadata.page_count is None else str(metadata.page_count)

    lines: List[str] = [
        XML_DECLARATION,
        ROOT_OPEN,
        _element("Series", metadata.series),
        _element("Number", metadata.number),
        _element("Title", metadata.title),
        _element("Volume", metadata.number),
        _element("Genre", metadata.genre),
        _element("Summary", metadata.summary),
        _element("Year", metadata.year),
        _element("LanguageISO", metadata.language),
        _element("Manga", metadata.manga),
        _element("Tags", metadata.tags),
        _element("PageCount", page_count),
        _element("Writer", metadata.author),
        f"{INDENT}<Pages>",
    ]
    lines.extend(_page_element(entry) for entry in metadata.pages)
    lines.append(f"{INDENT}</Pages>")
    lines.append(ROOT_CLOSE)
    return "\n".join(lines) + "\n"
