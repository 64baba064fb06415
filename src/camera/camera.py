# camera/camera.py
import math
from typing import Optional

from core.matrix import Matrix
from core.point import Point3
from core.ray import Ray
from renderer.canvas import Canvas


class Camera:
    """
    Pinhole camera looking down -z in its own space, with the image plane one
    unit in front of the eye.

    `transform` is the world-to-camera (view) matrix, usually built with
    Matrix.view_transform(). half_width, half_height and pixel_size depend
    only on the resolution and field of view and are fixed at construction.
    """
    def __init__(self, hsize: int, vsize: int, field_of_view: float,
                 transform: Optional[Matrix] = None):
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera resolution must be positive, got {hsize}x{vsize}")
        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.update_viewport()
        self._set_transform(transform if transform is not None else Matrix.identity())

    def update_viewport(self):
        """Computes the half extents of the image plane and the pixel size."""
        half_view = math.tan(self.field_of_view / 2)
        aspect = self.hsize / self.vsize

        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view

        self.pixel_size = (self.half_width * 2) / self.hsize

    def _set_transform(self, transform: Matrix):
        self.transform = transform
        self._inverse = transform.inverse()
        self._origin = self._inverse @ Point3.origin()

    def set_transform(self, transform: Matrix) -> "Camera":
        """Returns a copy of this camera using the given view transform."""
        return Camera(self.hsize, self.vsize, self.field_of_view, transform)

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """Returns the world-space ray through the centre of pixel (px, py)."""
        xoffset = (px + 0.5) * self.pixel_size
        yoffset = (py + 0.5) * self.pixel_size

        # The camera looks toward -z, so +x is to the left.
        world_x = self.half_width - xoffset
        world_y = self.half_height - yoffset

        pixel = self._inverse @ Point3(world_x, world_y, -1)
        direction = (pixel - self._origin).normalize()
        return Ray(self._origin, direction)

    def render(self, world, canvas=None):
        """
        Renders every pixel of the image sequentially.

        Args:
            world: Scene providing color_at(ray)
            canvas: Pixel buffer with set_pixel(x, y, color); a new Canvas is
                created when omitted

        Returns:
            The canvas that was written to
        """
        if canvas is None:
            canvas = Canvas(self.hsize, self.vsize)
        for y in range(self.vsize):
            for x in range(self.hsize):
                canvas.set_pixel(x, y, world.color_at(self.ray_for_pixel(x, y)))
        return canvas

    def __repr__(self) -> str:
        return f"Camera({self.hsize}x{self.vsize}, fov={self.field_of_view:.4f})"
