"""Deduce serie y número a partir del nombre de un fichero.

Convención: "<serie> - <número>", con el guion rodeado de espacios
opcionales y el número al final del nombre ("Superman - 12", "Foo -007").
"""

from __future__ import annotations

import string

from pdf2cbz.models.document import SeriesInfo


def _strip_number(digits: str) -> str:
    # "007" -> "7", y también "000" -> "" (caso límite conocido, se mantiene)
    return digits.lstrip("0")


def _scan_suffix(base_name: str) -> tuple[str, str] | None:
    """
    Recorre el nombre desde el final: dígitos, espacios, guion, espacios.
    Devuelve (prefijo, dígitos) o None si el sufijo no encaja.
    """
    end = len(base_name)

    pos = end
    while pos > 0 and base_name[pos - 1] in string.digits:
        pos -= 1
    digits = base_name[pos:end]
    if not digits:
        return None

    while pos > 0 and base_name[pos - 1].isspace():
        pos -= 1
    if pos == 0 or base_name[pos - 1] != "-":
        return None
    pos -= 1

    while pos > 0 and base_name[pos - 1].isspace():
        pos -= 1
    return base_name[:pos], digits


def infer_series_and_number(base_name: str) -> SeriesInfo:
    """
    Separa "Serie - 12" en ("Serie", "12").

    Si el nombre no sigue la convención, la serie es el nombre completo y
    el número queda vacío. La serie nunca queda vacía: con "- 3" la serie
    es el nombre completo y el número sigue siendo "3".
    """
    match = _scan_suffix(base_name)
    if match is None:
        return SeriesInfo(series=base_name, number="", matched=False)

    prefix, digits = match
    return SeriesInfo(series=prefix or base_name, number=_strip_number(digits), matched=True)
