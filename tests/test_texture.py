import pytest
from PIL import Image

from hoboengine.texture import Texture2D, set_flip_vertically

TOP = (255, 0, 0, 255)
BOTTOM = (0, 0, 255, 128)


@pytest.fixture(autouse=True)
def no_flip():
    set_flip_vertically(False)
    yield
    set_flip_vertically(False)


@pytest.fixture
def column_png(tmp_path):
    image = Image.new("RGBA", (1, 2))
    image.putpixel((0, 0), TOP)
    image.putpixel((0, 1), BOTTOM)
    path = tmp_path / "column.png"
    image.save(path)
    return path


def test_load_reads_rgba_pixels(column_png):
    texture = Texture2D(column_png)
    assert (texture.width, texture.height) == (1, 2)
    assert texture.data == bytes(TOP + BOTTOM)
    assert texture.empty() is False


def test_load_flipped(column_png):
    set_flip_vertically(True)
    texture = Texture2D(column_png)
    assert texture.data == bytes(BOTTOM + TOP)


def test_rgb_image_gets_opaque_alpha(tmp_path):
    path = tmp_path / "rgb.png"
    Image.new("RGB", (2, 1), (10, 20, 30)).save(path)
    texture = Texture2D(path)
    assert texture.data == bytes((10, 20, 30, 255) * 2)


def test_missing_file_is_empty(tmp_path):
    texture = Texture2D(tmp_path / "missing.png")
    assert texture.empty() is True
    assert texture.data is None


def test_non_image_file_is_empty(tmp_path):
    path = tmp_path / "text.png"
    path.write_text("not an image")
    assert Texture2D(path).empty() is True