"""Escapado de texto libre antes de incrustarlo en ComicInfo.xml."""

from __future__ import annotations

from typing import Optional

# `&` tiene que ir primero para no escapar las entidades que añaden los demás
_REPLACEMENTS = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
)


def sanitize(text: Optional[str]) -> str:
    """Escapa `& < > "`. Nunca falla; `None` o "" devuelven ""."""
    if not text:
        return ""
    for raw, escaped in _REPLACEMENTS:
        text = text.replace(raw, escaped)
    return text
