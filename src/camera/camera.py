# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray

class Camera:
    """
    Pinhole camera looking from `look_from` toward `look_at`.

    `fov` is the vertical field of view in degrees. `up` does not need to be
    unit length or orthogonal to the view direction.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, up: Vector3, fov: float):
        if not 0 < fov < 180:
            raise ValueError(f"Field of view must be in (0, 180) degrees, got {fov}")
        self.look_from = look_from
        self.look_at = look_at
        self.up = up
        self.fov = fov
        self.update_camera()

    def update_camera(self):
        """Computes the right-handed orthonormal basis (u, v, w)."""
        # w points away from the scene, back toward the camera
        self.w = (self.look_from - self.look_at).normalize()
        self.u = self.up.cross(self.w).normalize()
        self.v = self.w.cross(self.u)
        self.tan_y = math.tan(math.radians(self.fov) / 2)

    def get_ray(self, row: int, col: int, width: int, height: int) -> Ray:
        """
        Primary ray through the center of pixel (row, col); row 0 is the top
        of the image and col 0 the left.
        """
        half_width = width / 2.0
        half_height = height / 2.0
        tan_x = self.tan_y * half_width / half_height
        alpha = tan_x * ((col + 0.5) / half_width - 1)
        beta = self.tan_y * (1 - (row + 0.5) / half_height)
        direction = (self.u * alpha + self.v * beta - self.w).normalize()
        return Ray(self.look_from, direction)

    def __repr__(self) -> str:
        return f"Camera(from={self.look_from}, at={self.look_at}, up={self.up}, fov={self.fov})"
