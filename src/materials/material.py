# materials/material.py
from core.color import Color

class Material:
    """
    Surface appearance: diffuse and specular colors, Blinn-Phong shininess
    exponent, and emitted color. A non-black specular color also makes the
    surface a mirror.
    """
    __slots__ = ("diffuse", "specular", "shininess", "emission")

    def __init__(self, diffuse: Color = Color.BLACK, specular: Color = Color.BLACK,
                 shininess: float = 0.0, emission: Color = Color.BLACK):
        if shininess < 0:
            raise ValueError(f"Shininess must be non-negative, got {shininess}")
        self.diffuse = diffuse
        self.specular = specular
        self.shininess = shininess
        self.emission = emission

    @property
    def is_mirror(self) -> bool:
        return not self.specular.is_black()

    def __repr__(self) -> str:
        return (f"Material(diffuse={self.diffuse}, specular={self.specular}, "
                f"shininess={self.shininess}, emission={self.emission})")
