# materials/light.py
from typing import Tuple
from core.color import Color
from core.vector import Vector3

class Light:
    """
    Abstract light source. Subclasses give the (unnormalized) direction from
    a shaded point toward the light, and the attenuation and color seen at
    that point.
    """
    def __init__(self, color: Color):
        self.color = color

    def direction_from(self, point: Vector3) -> Vector3:
        raise NotImplementedError("direction_from() must be implemented by subclasses.")

    def attenuation(self, point: Vector3) -> Tuple[float, Color]:
        raise NotImplementedError("attenuation() must be implemented by subclasses.")

class DirectionalLight(Light):
    """
    Light from infinitely far away. `direction` points toward the light.
    """
    def __init__(self, direction: Vector3, color: Color):
        super().__init__(color)
        if direction.length() == 0:
            raise ValueError("Directional light direction must be non-zero")
        self.direction = direction

    def direction_from(self, point: Vector3) -> Vector3:
        return self.direction

    def attenuation(self, point: Vector3) -> Tuple[float, Color]:
        return 1.0, self.color

    def __repr__(self) -> str:
        return f"DirectionalLight({self.direction}, {self.color})"

class PointLight(Light):
    """
    Positional light with quadratic falloff 1 / (c0 + c1*r + c2*r^2).
    """
    def __init__(self, position: Vector3, color: Color,
                 c0: float = 1.0, c1: float = 0.0, c2: float = 0.0):
        super().__init__(color)
        self.position = position
        self.c0 = c0
        self.c1 = c1
        self.c2 = c2

    def direction_from(self, point: Vector3) -> Vector3:
        return self.position - point

    def attenuation(self, point: Vector3) -> Tuple[float, Color]:
        r = (point - self.position).length()
        return 1.0 / (self.c0 + self.c1 * r + self.c2 * r * r), self.color

    def __repr__(self) -> str:
        return (f"PointLight({self.position}, {self.color}, "
                f"attenuation=({self.c0}, {self.c1}, {self.c2}))")
