# main.py
import argparse
import logging
import math
import sys

import config
from camera.camera import Camera
from core.matrix import Matrix, NotInvertibleError
from core.point import Point3
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import World
from logging_config import setup_logging
from materials.light import PointLight
from materials.presets import ColorPresets, LightPresets, MaterialPresets
from renderer.raytracer import Renderer
from renderer.tone_mapping import clamp_to_rgb8, reinhard_tone_mapping

logger = logging.getLogger("main")

TONE_MAPS = {
    "clamp": clamp_to_rgb8,
    "reinhard": reinhard_tone_mapping,
}


def wall(rotation_y: float) -> Matrix:
    """A flattened sphere stood upright and swung around the y axis."""
    return (Matrix.translation(0, 0, 5)
            @ Matrix.rotation_y(rotation_y)
            @ Matrix.rotation_x(math.pi / 2)
            @ Matrix.scaling(10, 0.01, 10))


def create_world() -> World:
    """
    Three spheres in a room whose floor and walls are flattened spheres.
    """
    floor_material = MaterialPresets.floor()
    floor = Sphere(Matrix.scaling(10, 0.01, 10), floor_material)
    left_wall = Sphere(wall(-math.pi / 4), floor_material)
    right_wall = Sphere(wall(math.pi / 4), floor_material)

    middle = Sphere(Matrix.translation(-0.5, 1, 0.5), MaterialPresets.plastic(ColorPresets.GREEN))
    right = Sphere(
        Matrix.translation(1.5, 0.5, -0.5) @ Matrix.scaling(0.5, 0.5, 0.5),
        MaterialPresets.plastic(ColorPresets.YELLOW),
    )
    left = Sphere(
        Matrix.translation(-1.5, 0.33, -0.75) @ Matrix.scaling(0.33, 0.33, 0.33),
        MaterialPresets.glossy(ColorPresets.ORANGE),
    )

    light = PointLight(Point3(-10, 10, -10), LightPresets.daylight())
    world = World([floor, left_wall, right_wall, middle, right, left], [light])
    logger.info("Created %r", world)
    return world


def create_camera(width: int, height: int, fov_degrees: float) -> Camera:
    transform = Matrix.view_transform(Point3(0, 1.5, -5), Point3(0, 1, 0), Vector3(0, 1, 0))
    return Camera(width, height, math.radians(fov_degrees), transform)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render the demo scene with the Phong ray tracer.")
    parser.add_argument("--width", type=int, default=320, help="Image width")
    parser.add_argument("--height", type=int, default=160, help="Image height")
    parser.add_argument("--fov", type=float, default=60.0, help="Vertical field of view in degrees")
    parser.add_argument("--workers", type=int, default=config.RENDER_WORKERS,
                        help="Number of render processes")
    parser.add_argument("--output", default=config.OUTPUT_PATH,
                        help="Output file; .ppm writes plain PPM, other extensions go through Pillow")
    parser.add_argument("--tonemap", choices=sorted(TONE_MAPS), default="clamp",
                        help="How linear colors are mapped to 8-bit channels")
    parser.add_argument("--show", action="store_true", help="Open a preview window after rendering")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="Logging level")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        world = create_world()
        camera = create_camera(args.width, args.height, args.fov)
        canvas = Renderer(workers=args.workers).render(camera, world)
    except NotInvertibleError as e:
        logger.error("Scene has a degenerate transform: %s", e)
        return 1
    except ValueError as e:
        logger.error("Invalid render settings: %s", e)
        return 2

    tone_map = TONE_MAPS[args.tonemap]
    try:
        canvas.save(args.output, tone_map=tone_map)
    except OSError as e:
        logger.error("Could not write %s: %s", args.output, e)
        return 1
    logger.info("Wrote %s", args.output)

    if args.show:
        from renderer.preview import show
        show(canvas, tone_map=tone_map)
    return 0


if __name__ == "__main__":
    sys.exit(main())
