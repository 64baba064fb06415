# core/color.py
import numbers

from core.utils import float_equal


class Color:
    """
    Linear RGB color. Components are not clamped; values outside [0, 1] are
    kept until the image is written out.
    """
    __slots__ = ('red', 'green', 'blue')

    def __init__(self, red: float, green: float, blue: float):
        self.red = float(red)
        self.green = float(green)
        self.blue = float(blue)

    @classmethod
    def black(cls) -> "Color":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def white(cls) -> "Color":
        return cls(1.0, 1.0, 1.0)

    def __add__(self, other: "Color") -> "Color":
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: "Color") -> "Color":
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other):
        if isinstance(other, numbers.Real):
            return Color(self.red * other, self.green * other, self.blue * other)
        if isinstance(other, Color):
            # Hadamard product, used to tint one color by another.
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (float_equal(self.red, other.red)
                and float_equal(self.green, other.green)
                and float_equal(self.blue, other.blue))

    def __iter__(self):
        yield self.red
        yield self.green
        yield self.blue

    def __repr__(self) -> str:
        return f"Color({self.red}, {self.green}, {self.blue})"
