import pytest
from PIL import Image

from label_image_manager import load_label_font


@pytest.fixture
def make_image(tmp_path):
    def _make(name, color, size=(200, 150), mode="RGB"):
        path = tmp_path / name
        Image.new(mode, size, color).save(path)
        return path

    return _make


@pytest.fixture
def font():
    return load_label_font()


@pytest.fixture
def cover_file(make_image):
    return make_image("cover.png", (255, 0, 0))


@pytest.fixture
def logo_file(make_image):
    return make_image("logo.png", (0, 0, 255), size=(64, 64))
