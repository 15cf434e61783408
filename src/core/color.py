# core/color.py

class Color:
    """
    An RGB triple used to accumulate lighting contributions.

    Addition, component-wise multiplication and scaling clamp every channel
    to at most 1.0. There is no clamp at 0.0, so negative inputs stay
    negative.
    """
    __slots__ = ("r", "g", "b")

    def __init__(self, r: float, g: float, b: float):
        object.__setattr__(self, "r", float(r))
        object.__setattr__(self, "g", float(g))
        object.__setattr__(self, "b", float(b))

    def __setattr__(self, name, value):
        raise AttributeError("Color is immutable")

    def __reduce__(self):
        return (Color, (self.r, self.g, self.b))

    def __add__(self, other: "Color") -> "Color":
        return Color(min(1.0, self.r + other.r),
                     min(1.0, self.g + other.g),
                     min(1.0, self.b + other.b))

    def __mul__(self, other: "Color") -> "Color":
        return Color(min(1.0, self.r * other.r),
                     min(1.0, self.g * other.g),
                     min(1.0, self.b * other.b))

    def scale(self, s: float) -> "Color":
        return Color(min(1.0, s * self.r),
                     min(1.0, s * self.g),
                     min(1.0, s * self.b))

    def is_black(self) -> bool:
        return self.r == 0.0 and self.g == 0.0 and self.b == 0.0

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b))

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"

Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(1, 1, 1)
Color.RED = Color(1, 0, 0)
Color.GREEN = Color(0, 1, 0)
Color.BLUE = Color(0, 0, 1)
