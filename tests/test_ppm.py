import pytest

from imgconvert.image import Color, Image, ImageFormatError
from imgconvert.ppm import load_ppm, save_ppm


def _sample(width=3, height=2):
    image = Image(width, height)
    for y in range(height):
        for x in range(width):
            image.set_pixel(x, y, Color(x * 40, y * 70, (x + y) * 20))
    return image


def test_round_trip(tmp_path):
    path = tmp_path / "img.ppm"
    image = _sample()
    save_ppm(path, image)
    assert load_ppm(path) == image


def test_saved_bytes_follow_format(tmp_path):
    path = tmp_path / "img.ppm"
    image = Image(2, 1)
    image.set_pixel(0, 0, Color(1, 2, 3))
    image.set_pixel(1, 0, Color(4, 5, 6))
    save_ppm(path, image)
    assert path.read_bytes() == b"P6\n2 1\n255\n" + bytes([1, 2, 3, 4, 5, 6])


def test_alpha_is_dropped_and_loaded_as_opaque(tmp_path):
    path = tmp_path / "img.ppm"
    save_ppm(path, Image(1, 1, Color(7, 8, 9, 10)))
    assert load_ppm(path).get_pixel(0, 0) == Color(7, 8, 9, 255)


def test_header_whitespace_is_flexible(tmp_path):
    path = tmp_path / "img.ppm"
    path.write_bytes(b"P6  2\t1\n 255\n" + bytes([1, 2, 3, 4, 5, 6]))
    image = load_ppm(path)
    assert (image.width, image.height) == (2, 1)
    assert image.get_pixel(1, 0) == Color(4, 5, 6)


@pytest.mark.parametrize(
    "content",
    [
        b"P3\n1 1\n255\n" + bytes(3),
        b"P6\n1 1\n65535\n" + bytes(6),
        b"P6\n1 1\n255 " + bytes(3),
        b"P6\n2 2\n255\n" + bytes(5),
        b"P6\nx 1\n255\n",
        b"",
    ],
)
def test_invalid_files_are_rejected(tmp_path, content):
    path = tmp_path / "bad.ppm"
    path.write_bytes(content)
    with pytest.raises(ImageFormatError):
        load_ppm(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_ppm(tmp_path / "absent.ppm")


def test_empty_image_round_trip(tmp_path):
    path = tmp_path / "empty.ppm"
    save_ppm(path, Image())
    assert path.read_bytes() == b"P6\n0 0\n255\n"
    assert not load_ppm(path)