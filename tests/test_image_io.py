"""Tests for tone mapping and image output."""

import numpy as np
import pytest
from PIL import Image

from core.vector import Vector3
from renderer.framebuffer import Framebuffer
from renderer.image_io import framebuffer_to_image, write_image
from renderer.raytracer import BACKGROUND_COLOR
from renderer.tone_mapping import quantize, reinhard_tone_mapping, rescale_highlights, tone_map


class TestToneMapping:
    """Linear color to 8-bit conversion."""

    def test_rescale_preserves_hue_of_highlights(self):
        image = np.array([[[2.0, 1.0, 0.5], [0.5, 0.2, 0.1]]], dtype=np.float32)
        out = rescale_highlights(image)
        np.testing.assert_allclose(out[0, 0], [1.0, 0.5, 0.25])
        np.testing.assert_allclose(out[0, 1], [0.5, 0.2, 0.1])
        # Input left untouched
        np.testing.assert_allclose(image[0, 0], [2.0, 1.0, 0.5])

    def test_quantize_clamps(self):
        out = quantize(np.array([[[-0.5, 0.5, 3.0]]], dtype=np.float32))
        assert out.dtype == np.uint8
        assert out.tolist() == [[[0, 127, 255]]]

    def test_reinhard_stays_in_unit_range(self):
        image = np.array([[[0.0, 1.0, 100.0]]], dtype=np.float32)
        out = reinhard_tone_mapping(image)
        assert out.min() >= 0.0
        assert out.max() < 1.0
        assert out[0, 0, 0] < out[0, 0, 1] < out[0, 0, 2]

    def test_methods(self):
        image = np.array([[[2.0, 1.0, 0.0]]], dtype=np.float32)
        assert tone_map(image, "rescale").tolist() == [[[255, 127, 0]]]
        assert tone_map(image, "clamp").tolist() == [[[255, 255, 0]]]

    def test_unknown_method(self):
        with pytest.raises(ValueError):
            tone_map(np.zeros((1, 1, 3), dtype=np.float32), "filmic")


class TestWriteImage:
    """Framebuffer serialization."""

    def test_ppm_output(self, tmp_path):
        fb = Framebuffer(4, 3, BACKGROUND_COLOR)
        fb.set(3, 2, Vector3(4, 2, 0))
        path = write_image(fb, str(tmp_path / "out" / "image.ppm"))

        with open(path, "rb") as f:
            assert f.read(2) == b"P6"
        with Image.open(path) as img:
            assert img.size == (4, 3)
            assert img.mode == "RGB"
            assert img.getpixel((0, 0)) == (75, 179, 250)
            assert img.getpixel((3, 2)) == (255, 127, 0)

    def test_png_output(self, tmp_path):
        fb = Framebuffer(2, 2, Vector3(1, 1, 1))
        path = write_image(fb, str(tmp_path / "image.png"))
        with Image.open(path) as img:
            assert img.format == "PNG"
            assert img.getpixel((1, 1)) == (255, 255, 255)

    def test_framebuffer_to_image_orientation(self):
        fb = Framebuffer(2, 1)
        fb.set(1, 0, Vector3(1, 0, 0))
        img = framebuffer_to_image(fb)
        assert img.size == (2, 1)
        assert img.getpixel((1, 0)) == (255, 0, 0)
        assert img.getpixel((0, 0)) == (0, 0, 0)
