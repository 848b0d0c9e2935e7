import pytest

from imgconvert.image import Color, Image, ImageFormatError
from imgconvert.jpeg import load_jpeg, save_jpeg
from imgconvert.ppm import save_ppm

TOLERANCE = 6


def test_round_trip_keeps_size(tmp_path):
    path = tmp_path / "out.jpg"
    save_jpeg(path, Image(17, 9, Color(10, 20, 30)))
    loaded = load_jpeg(path)
    assert (loaded.width, loaded.height) == (17, 9)


def test_round_trip_solid_colour_is_close(tmp_path):
    path = tmp_path / "solid.jpg"
    fill = Color(200, 100, 50)
    save_jpeg(path, Image(16, 16, fill))
    loaded = load_jpeg(path)
    pixels = [pixel for row in loaded for pixel in row]
    assert len(pixels) == 256
    worst = max(
        max(abs(p.r - fill.r), abs(p.g - fill.g), abs(p.b - fill.b)) for p in pixels
    )
    assert worst <= TOLERANCE


def test_loaded_pixels_are_opaque(tmp_path):
    path = tmp_path / "alpha.jpg"
    save_jpeg(path, Image(8, 8, Color(50, 60, 70, 0)))
    loaded = load_jpeg(path)
    assert {pixel.a for row in loaded for pixel in row} == {255}


def test_saved_file_starts_with_jpeg_marker(tmp_path):
    path = tmp_path / "marker.jpg"
    save_jpeg(path, Image(4, 4, Color.black()))
    assert path.read_bytes()[:2] == b"\xff\xd8"


def test_black_round_trip(tmp_path):
    path = tmp_path / "black.jpg"
    save_jpeg(path, Image(8, 8, Color.black()))
    loaded = load_jpeg(path)
    pixel = loaded.get_pixel(3, 3)
    assert max(pixel.r, pixel.g, pixel.b) <= TOLERANCE


def test_empty_image_cannot_be_saved(tmp_path):
    with pytest.raises(ImageFormatError):
        save_jpeg(tmp_path / "empty.jpg", Image())


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_jpeg(tmp_path / "missing.jpg")


def test_load_non_jpeg_data(tmp_path):
    path = tmp_path / "fake.jpg"
    save_ppm(path, Image(2, 2, Color(1, 2, 3)))
    with pytest.raises(ImageFormatError):
        load_jpeg(path)


def test_load_truncated_jpeg(tmp_path):
    path = tmp_path / "cut.jpg"
    save_jpeg(path, Image(32, 32, Color(120, 130, 140)))
    data = path.read_bytes()
    path.write_bytes(data[: len(data) // 3])
    with pytest.raises(ImageFormatError):
        load_jpeg(path)