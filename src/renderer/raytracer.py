# renderer/raytracer.py
import logging
import math
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import List, Optional, Tuple

import numpy as np

import config
from camera.camera import Camera
from core.color import Color
from geometry.world import World
from renderer.canvas import Canvas

logger = logging.getLogger(__name__)

DEFAULT_ROWS_PER_CHUNK = 8


def render_rows(camera: Camera, world: World, y_start: int, y_end: int) -> Tuple[int, np.ndarray]:
    """
    Render rows [y_start, y_end) and return them as a
    ((y_end - y_start) x hsize x 3) array of linear colors.

    Module-level so it can be shipped to worker processes.
    """
    block = np.zeros((y_end - y_start, camera.hsize, 3), dtype=np.float64)
    for row, y in enumerate(range(y_start, y_end)):
        for x in range(camera.hsize):
            color = world.color_at(camera.ray_for_pixel(x, y))
            block[row, x] = (color.red, color.green, color.blue)
    return y_start, block


class Renderer:
    """
    Drives a full render of a World through a Camera into a Canvas.

    Each pixel depends only on (world, camera, x, y), so the image is split
    into bands of rows. With workers > 1 the bands are rendered in a process
    pool and written back into disjoint rows of the canvas; with a single
    worker everything runs in-process.
    """
    def __init__(self, workers: Optional[int] = None, rows_per_chunk: int = DEFAULT_ROWS_PER_CHUNK):
        if workers is None:
            workers = config.RENDER_WORKERS
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        if rows_per_chunk < 1:
            raise ValueError(f"rows_per_chunk must be at least 1, got {rows_per_chunk}")
        self.workers = workers
        self.rows_per_chunk = rows_per_chunk
        self.last_render_time = 0.0

    def chunks(self, vsize: int) -> List[Tuple[int, int]]:
        return [(start, min(start + self.rows_per_chunk, vsize))
                for start in range(0, vsize, self.rows_per_chunk)]

    def render(self, camera: Camera, world: World, canvas=None):
        """
        Render the world into canvas, creating a Canvas when none is given.

        Any pixel buffer with set_pixel(x, y, color) is accepted; every pixel
        is written exactly once.
        """
        if canvas is None:
            canvas = Canvas(camera.hsize, camera.vsize)

        chunks = self.chunks(camera.vsize)
        logger.info("Rendering %dx%d with %d objects, %d chunks, %d worker(s)",
                    camera.hsize, camera.vsize, len(world.objects), len(chunks), self.workers)
        start = time.perf_counter()

        if self.workers == 1:
            for done, (y_start, y_end) in enumerate(chunks, 1):
                self._store(canvas, *render_rows(camera, world, y_start, y_end))
                logger.debug("Chunk %d/%d done (rows %d-%d)", done, len(chunks), y_start, y_end - 1)
        else:
            with ProcessPoolExecutor(max_workers=self.workers) as pool:
                futures = [pool.submit(render_rows, camera, world, y_start, y_end)
                           for y_start, y_end in chunks]
                for done, future in enumerate(as_completed(futures), 1):
                    y_start, block = future.result()
                    self._store(canvas, y_start, block)
                    logger.debug("Chunk %d/%d done (rows %d-%d)",
                                 done, len(chunks), y_start, y_start + len(block) - 1)

        self.last_render_time = time.perf_counter() - start
        pixels = camera.hsize * camera.vsize
        logger.info("Render finished in %.2fs (%.0f pixels/s)", self.last_render_time,
                    pixels / self.last_render_time if self.last_render_time > 0 else math.inf)
        return canvas

    @staticmethod
    def _store(canvas, y_start: int, block: np.ndarray):
        for offset, row in enumerate(block):
            y = y_start + offset
            for x, (r, g, b) in enumerate(row):
                canvas.set_pixel(x, y, Color(r, g, b))
