import zipfile
from pathlib import Path

import pytest
from PIL import Image

from pdf2cbz.core.errors import ArchiveWriteError
from pdf2cbz.models.page import PageImage
from pdf2cbz.services.archive_service import ArchiveService


def _pages(work_dir: Path, count: int):
    pages = []
    for index in range(1, count + 1):
        path = work_dir / f"{index:04d}.jpg"
        Image.new("RGB", (60, 80), color=(index * 20, 0, 0)).save(path, format="JPEG")
        pages.append(PageImage(index=index, image_path=path))
    return pages


def test_assemble_writes_flat_archive(tmp_path):
    work_dir = tmp_path / "work" / "nested"
    work_dir.mkdir(parents=True)
    pages = _pages(work_dir, 3)
    output = tmp_path / "out.cbz"

    # el orden de entrada no importa, manda el índice
    result = ArchiveService().assemble(list(reversed(pages)), "<ComicInfo />\n", output)

    assert result == output
    with zipfile.ZipFile(output) as zf:
        assert zf.namelist() == ["0001.jpg", "0002.jpg", "0003.jpg", "ComicInfo.xml"]
        assert zf.read("ComicInfo.xml") == b"<ComicInfo />\n"
        assert zf.getinfo("0001.jpg").compress_type == zipfile.ZIP_DEFLATED


def test_assemble_replaces_existing_archive(tmp_path):
    pages = _pages(tmp_path, 1)
    output = tmp_path / "out.cbz"
    output.write_bytes(b"old content")

    ArchiveService().assemble(pages, "<ComicInfo />", output)

    with zipfile.ZipFile(output) as zf:
        assert zf.namelist() == ["0001.jpg", "ComicInfo.xml"]


def test_assemble_into_missing_directory_fails(tmp_path):
    pages = _pages(tmp_path, 1)

    with pytest.raises(ArchiveWriteError):
        ArchiveService().assemble(pages, "<ComicInfo />", tmp_path / "missing" / "out.cbz")


def test_missing_page_removes_partial_archive(tmp_path):
    pages = _pages(tmp_path, 2)
    pages[1].image_path.unlink()
    output = tmp_path / "out.cbz"

    with pytest.raises(ArchiveWriteError):
        ArchiveService().assemble(pages, "<ComicInfo />", output)

    assert not output.exists()
