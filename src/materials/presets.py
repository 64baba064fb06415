# materials/presets.py
from core.color import Color
from materials.material import Material


class ColorPresets:
    """Color presets used by the demo scene."""

    # Warm colors
    ORANGE = Color(1.0, 0.6, 0.1)
    YELLOW = Color(1.0, 0.8, 0.1)

    # Cool colors
    GREEN = Color(0.1, 1.0, 0.5)

    # Neutral colors
    WARM_WHITE = Color(1.0, 0.9, 0.9)


class MaterialPresets:
    """Predefined Phong materials."""

    @staticmethod
    def plastic(color: Color) -> Material:
        return Material(color=color, diffuse=0.7, specular=0.3)

    @staticmethod
    def glossy(color: Color) -> Material:
        """Tight, bright highlight."""
        return Material(color=color, diffuse=0.6, specular=0.9, shininess=300.0)

    @staticmethod
    def floor() -> Material:
        """Matte off-white surface without a highlight."""
        return Material(color=ColorPresets.WARM_WHITE, specular=0.0)


class LightPresets:
    """Predefined light intensities."""

    @staticmethod
    def daylight(intensity: float = 1.0) -> Color:
        return Color(1.0, 1.0, 1.0) * intensity
