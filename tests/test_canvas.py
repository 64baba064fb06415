"""Tests for Canvas storage, PPM output and image export."""

import numpy as np
import pytest
from PIL import Image

from core.color import Color
from renderer.canvas import PPM_MAX_LINE, Canvas
from renderer.tone_mapping import clamp_to_rgb8, reinhard_tone_mapping


class TestCanvas:
    def test_starts_black(self):
        c = Canvas(10, 20)
        assert c.width == 10
        assert c.height == 20
        assert all(c.pixel_at(x, y) == Color(0, 0, 0) for y in range(20) for x in range(10))

    def test_set_and_read_pixel(self):
        c = Canvas(10, 20)
        c.set_pixel(2, 3, Color(1, 0, 0))
        assert c.pixel_at(2, 3) == Color(1, 0, 0)

    def test_stores_out_of_range_colors(self):
        c = Canvas(2, 2)
        c.set_pixel(0, 0, Color(1.5, -0.5, 0))
        assert c.pixel_at(0, 0) == Color(1.5, -0.5, 0)

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (10, 0), (0, 20)])
    def test_out_of_bounds(self, x, y):
        c = Canvas(10, 20)
        with pytest.raises(IndexError):
            c.set_pixel(x, y, Color(1, 1, 1))
        with pytest.raises(IndexError):
            c.pixel_at(x, y)

    def test_rejects_empty_size(self):
        with pytest.raises(ValueError):
            Canvas(0, 5)


class TestPPM:
    def test_header(self):
        lines = Canvas(5, 3).to_ppm().splitlines()
        assert lines[:3] == ["P3", "5 3", "255"]

    def test_pixel_data(self):
        c = Canvas(5, 3)
        c.set_pixel(0, 0, Color(1.5, 0, 0))
        c.set_pixel(2, 1, Color(0, 0.5, 0))
        c.set_pixel(4, 2, Color(-0.5, 0, 1))
        lines = c.to_ppm().splitlines()
        assert lines[3:6] == [
            "255 0 0 0 0 0 0 0 0 0 0 0 0 0 0",
            "0 0 0 0 0 0 0 128 0 0 0 0 0 0 0",
            "0 0 0 0 0 0 0 0 0 0 0 0 0 0 255",
        ]

    def test_long_lines_are_wrapped(self):
        c = Canvas(10, 2)
        for y in range(2):
            for x in range(10):
                c.set_pixel(x, y, Color(1, 0.8, 0.6))
        lines = c.to_ppm().splitlines()
        assert lines[3:7] == [
            "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
            "153 255 204 153 255 204 153 255 204 153 255 204 153",
            "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
            "153 255 204 153 255 204 153 255 204 153 255 204 153",
        ]
        assert all(len(line) <= PPM_MAX_LINE for line in lines)

    def test_ends_with_newline(self):
        assert Canvas(5, 3).to_ppm().endswith("\n")


class TestToneMapping:
    def test_clamp_rounds_half_up(self):
        out = clamp_to_rgb8(np.array([[[0.5, 1.0, 2.0]]]))
        assert out.dtype == np.uint8
        assert out.tolist() == [[[128, 255, 255]]]

    def test_clamp_negative_to_zero(self):
        assert clamp_to_rgb8(np.array([[[-1.0, 0.0, 0.2]]])).tolist() == [[[0, 0, 51]]]

    def test_reinhard_compresses_highlights(self):
        out = reinhard_tone_mapping(np.array([[[0.0, 1.0, 10.0]]]))
        r, g, b = out[0, 0].tolist()
        assert r == 0
        assert g < b < 255


class TestSave:
    def test_save_ppm(self, tmp_path):
        c = Canvas(5, 3)
        c.set_pixel(0, 0, Color(1, 0, 0))
        path = tmp_path / "out.ppm"
        c.save(str(path))
        assert path.read_text() == c.to_ppm()

    def test_save_png(self, tmp_path):
        c = Canvas(4, 2)
        c.set_pixel(3, 1, Color(0, 0, 1))
        path = tmp_path / "out.png"
        c.save(str(path))
        with Image.open(path) as img:
            assert img.size == (4, 2)
            assert img.getpixel((3, 1)) == (0, 0, 255)
            assert img.getpixel((0, 0)) == (0, 0, 0)
