# config.py
"""Runtime configuration for the ray tracer, read from environment variables."""

import os

# Absolute tolerance for every floating-point comparison.
EPSILON = float(os.getenv("RAYTRACER_EPSILON", "1e-5"))

# Distance a hit point is pushed along its normal before casting shadow rays.
SHADOW_BIAS = float(os.getenv("RAYTRACER_SHADOW_BIAS", "0.005"))

# Render settings
RENDER_WORKERS = int(os.getenv("RAYTRACER_WORKERS", "1"))
OUTPUT_PATH = os.getenv("RAYTRACER_OUTPUT", "render.png")

# Logging settings
LOG_LEVEL = os.getenv("RAYTRACER_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("RAYTRACER_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

__all__ = [
    "EPSILON",
    "SHADOW_BIAS",
    "RENDER_WORKERS",
    "OUTPUT_PATH",
    "LOG_LEVEL",
    "LOG_FORMAT",
]
