import shutil
import subprocess
from pathlib import Path

import pytest
from PIL import Image

import pdf2cbz.services.raster_service as raster_service
from pdf2cbz.core.enums import RasterBackend
from pdf2cbz.core.errors import RasterizationError
from pdf2cbz.services.raster_service import RasterService


def _build_pdf(path: Path, pages: int) -> Path:
    images = [Image.new("RGB", (200, 280), color=(240, 240, 240)) for _ in range(pages)]
    first, *rest = images
    first.save(path, format="PDF", save_all=True, append_images=rest)
    return path


def test_pdftoppm_command_and_output_order(monkeypatch, tmp_path):
    pdf = tmp_path / "doc.pdf"
    pdf.write_bytes(b"%PDF-1.4")
    work_dir = tmp_path / "work"
    calls = []

    def fake_run(cmd, check, capture_output):
        calls.append(cmd)
        prefix = Path(cmd[-1])
        # pdftoppm rellena con ceros según el número de páginas
        for n in (10, 2, 1):
            prefix.with_name(f"page-{n:02d}.jpg").write_bytes(b"jpg")
        return subprocess.CompletedProcess(cmd, 0, stdout=b"", stderr=b"")

    monkeypatch.setattr(raster_service.subprocess, "run", fake_run)

    images = RasterService(backend=RasterBackend.PDFTOPPM, dpi=150, quality=70).rasterize(pdf, work_dir)

    assert calls[0][:6] == ["pdftoppm", "-jpeg", "-jpegopt", "quality=70", "-r", "150"]
    assert calls[0][-1] == str(work_dir / "page")
    assert [p.name for p in images] == ["page-01.jpg", "page-02.jpg", "page-10.jpg"]


def test_pdftoppm_failure(monkeypatch, tmp_path):
    pdf = tmp_path / "doc.pdf"
    pdf.write_bytes(b"%PDF-1.4")

    def fake_run(cmd, check, capture_output):
        raise subprocess.CalledProcessError(99, cmd, output=b"", stderr=b"Couldn't open file")

    monkeypatch.setattr(raster_service.subprocess, "run", fake_run)

    with pytest.raises(RasterizationError, match="exit 99"):
        RasterService(backend=RasterBackend.PDFTOPPM).rasterize(pdf, tmp_path / "work")


def test_missing_pdf_fails(tmp_path):
    with pytest.raises(RasterizationError):
        RasterService().rasterize(tmp_path / "nope.pdf", tmp_path / "work")


def test_pymupdf_backend_renders_every_page(tmp_path):
    pdf = _build_pdf(tmp_path / "doc.pdf", pages=3)

    images = RasterService(backend=RasterBackend.PYMUPDF, dpi=72, quality=70).rasterize(
        pdf, tmp_path / "work"
    )

    assert [p.name for p in images] == ["page-0001.jpg", "page-0002.jpg", "page-0003.jpg"]
    with Image.open(images[0]) as img:
        assert img.format == "JPEG"


def test_pymupdf_backend_unreadable_pdf(tmp_path):
    bogus = tmp_path / "bogus.pdf"
    bogus.write_bytes(b"not a pdf")

    with pytest.raises(RasterizationError):
        RasterService(backend=RasterBackend.PYMUPDF).rasterize(bogus, tmp_path / "work")


@pytest.mark.skipif(shutil.which("pdftoppm") is None, reason="poppler-utils not installed")
def test_pdftoppm_real_binary(tmp_path):
    pdf = _build_pdf(tmp_path / "doc.pdf", pages=2)

    images = RasterService(backend=RasterBackend.PDFTOPPM).rasterize(pdf, tmp_path / "work")

    assert len(images) == 2
    assert all(p.suffix == ".jpg" for p in images)
