# materials/presets.py
from core.color import Color
from materials.material import Material

class ColorPresets:
    """Common color presets for materials."""

    # Warm colors
    RED = Color(0.9, 0.2, 0.2)
    ORANGE = Color(0.9, 0.6, 0.1)
    YELLOW = Color(0.9, 0.9, 0.1)

    # Cool colors
    BLUE = Color(0.2, 0.3, 0.9)
    GREEN = Color(0.2, 0.8, 0.2)
    PURPLE = Color(0.6, 0.2, 0.8)

    # Neutral colors
    WHITE = Color(0.9, 0.9, 0.9)
    GRAY = Color(0.5, 0.5, 0.5)
    DARK_GRAY = Color(0.1, 0.1, 0.1)

class MaterialPresets:
    """Predefined materials for built-in scenes."""

    @staticmethod
    def matte(color: Color) -> Material:
        """Diffuse only, no highlight and no reflection."""
        return Material(diffuse=color)

    @staticmethod
    def plastic(color: Color, shininess: float = 50.0) -> Material:
        """Diffuse color with a faint white highlight and reflection."""
        return Material(diffuse=color, specular=Color(0.2, 0.2, 0.2), shininess=shininess)

    @staticmethod
    def mirror(tint: Color = Color(0.8, 0.8, 0.8)) -> Material:
        return Material(specular=tint, shininess=100.0)

    @staticmethod
    def gold() -> Material:
        return Material(diffuse=Color(0.3, 0.22, 0.08), specular=Color(0.8, 0.6, 0.2),
                        shininess=80.0)

    @staticmethod
    def glow(color: Color) -> Material:
        """Emits `color` regardless of lighting."""
        return Material(emission=color)
