import pytest

from oledframe.frame import Frame
from oledframe.image import FrameImageWriter

Image = pytest.importorskip("PIL.Image")


def sample_frame():
    return Frame.from_text("#..#\n" + "....\n" * 6 + ".##.\n")


def test_export_frame(tmp_path):
    writer = FrameImageWriter(str(tmp_path / "images"))
    name = writer.export_frame(sample_frame(), "frame1")
    assert name == "frame1.png"

    with Image.open(tmp_path / "images" / name) as img:
        assert img.size == (4, 8)
        assert img.getpixel((0, 0)) == 255
        assert img.getpixel((1, 0)) == 0
        assert img.getpixel((1, 7)) == 255


def test_scale(tmp_path):
    writer = FrameImageWriter(str(tmp_path), scale=3)
    name = writer.export_frame(sample_frame(), "big")

    with Image.open(tmp_path / name) as img:
        assert img.size == (12, 24)
        assert img.getpixel((2, 2)) == 255
        assert img.getpixel((3, 0)) == 0


def test_names_are_unique(tmp_path):
    writer = FrameImageWriter(str(tmp_path))
    names = [writer.export_frame(sample_frame(), "frame") for _ in range(3)]
    assert names == ["frame.png", "frame.0.png", "frame.1.png"]


def test_invalid_scale(tmp_path):
    with pytest.raises(ValueError):
        FrameImageWriter(str(tmp_path), scale=0)
