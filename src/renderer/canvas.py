# renderer/canvas.py
import os

import numpy as np
from PIL import Image

from core.color import Color
from renderer.tone_mapping import clamp_to_rgb8

PPM_MAX_LINE = 70


class Canvas:
    """
    Pixel buffer the renderer writes into.

    Colors are stored unclamped as a (height x width x 3) float64 array;
    clamping to 8-bit channels only happens when the image is exported.
    """
    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.float64)

    def _check_bounds(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")

    def set_pixel(self, x: int, y: int, color: Color):
        self._check_bounds(x, y)
        self.pixels[y, x] = (color.red, color.green, color.blue)

    def pixel_at(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        r, g, b = self.pixels[y, x]
        return Color(r, g, b)

    def to_rgb8(self, tone_map=clamp_to_rgb8) -> np.ndarray:
        """Returns the image as a (height x width x 3) uint8 array."""
        return tone_map(self.pixels)

    def to_ppm(self, tone_map=clamp_to_rgb8) -> str:
        """
        Serializes the canvas as plain-text PPM (P3). Pixel rows are wrapped
        so no line exceeds 70 characters, and the file ends with a newline.
        """
        lines = ["P3", f"{self.width} {self.height}", "255"]
        for row in self.to_rgb8(tone_map):
            line = ""
            for value in row.reshape(-1):
                token = str(int(value))
                if not line:
                    line = token
                elif len(line) + 1 + len(token) > PPM_MAX_LINE:
                    lines.append(line)
                    line = token
                else:
                    line = f"{line} {token}"
            lines.append(line)
        return "\n".join(lines) + "\n"

    def to_image(self, tone_map=clamp_to_rgb8) -> Image.Image:
        return Image.fromarray(self.to_rgb8(tone_map))

    def save(self, path: str, tone_map=clamp_to_rgb8):
        """
        Write the canvas to disk. `.ppm` files are written as P3 text; every
        other extension is handed to Pillow.
        """
        if os.path.splitext(path)[1].lower() == ".ppm":
            with open(path, "w", encoding="ascii") as f:
                f.write(self.to_ppm(tone_map))
        else:
            self.to_image(tone_map).save(path)
