from pathlib import Path

import pytest
from PIL import Image

from pdf2cbz.core.errors import MeasurementError, NoPagesProducedError, RasterizationError
from pdf2cbz.services.page_sequencer import (
    build_page_entries,
    measure,
    read_dimensions,
    sequence_name,
    sequence_pages,
)


def _jpeg(path: Path, size=(100, 150)) -> Path:
    Image.new("RGB", size, color=(250, 250, 250)).save(path, format="JPEG", quality=70)
    return path


def test_sequence_name_is_zero_padded():
    assert sequence_name(1) == "0001.jpg"
    assert sequence_name(42, ".JPG") == "0042.jpg"


def test_sequence_pages_renames_in_given_order(tmp_path):
    raw = [_jpeg(tmp_path / f"page-{n:02d}.jpg") for n in (1, 2, 3)]

    pages = sequence_pages(raw)

    assert [p.index for p in pages] == [1, 2, 3]
    assert [p.image_path.name for p in pages] == ["0001.jpg", "0002.jpg", "0003.jpg"]
    assert all(p.image_path.exists() for p in pages)
    assert not any(r.exists() for r in raw)


def test_sequence_pages_without_images_fails():
    with pytest.raises(NoPagesProducedError):
        sequence_pages([])


def test_measure_reads_size_and_dimensions(tmp_path):
    img = _jpeg(tmp_path / "0001.jpg", size=(320, 480))

    width, height, byte_size = measure(img)

    assert (width, height) == (320, 480)
    assert byte_size == img.stat().st_size


def test_unreadable_image_degrades_to_zero(tmp_path):
    broken = tmp_path / "0001.jpg"
    broken.write_bytes(b"garbage")

    with pytest.raises(MeasurementError):
        read_dimensions(broken)

    assert measure(broken) == (0, 0, len(b"garbage"))


def test_page_entries_mark_only_first_as_cover(tmp_path):
    raw = [_jpeg(tmp_path / f"page-{n}.jpg") for n in range(1, 5)]
    entries = build_page_entries(sequence_pages(raw))

    assert [e.index for e in entries] == [0, 1, 2, 3]
    assert [e.is_front_cover for e in entries] == [True, False, False, False]
    assert all(e.width == 100 and e.height == 150 for e in entries)


def test_single_page_is_the_cover(tmp_path):
    entries = build_page_entries(sequence_pages([_jpeg(tmp_path / "page-1.jpg")]))

    assert len(entries) == 1
    assert entries[0].is_front_cover


def test_missing_raw_image_is_a_rasterization_error(tmp_path):
    with pytest.raises(RasterizationError):
        sequence_pages([tmp_path / "page-1.jpg"])


def test_measure_missing_file_is_a_rasterization_error(tmp_path):
    with pytest.raises(RasterizationError):
        measure(tmp_path / "0001.jpg")
