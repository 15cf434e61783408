# geometry/sphere.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.utils import EPSILON_BIAS
from geometry.hittable import Shape, Intersection

class Sphere(Shape):
    """
    Represents a sphere defined by its center and radius.
    """
    def __init__(self, center: Vector3, radius: float):
        if not radius > 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = radius

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = 2 * ray.direction.dot(oc)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - 4 * a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        t1 = (-b - sqrt_disc) / (2 * a)
        t2 = (-b + sqrt_disc) / (2 * a)
        # Sphere entirely behind the ray origin
        if t1 <= 0 and t2 <= 0:
            return None

        if t1 <= 0:
            t = t2
        elif t2 <= 0:
            t = t1
        else:
            t = min(t1, t2)

        p = ray.at(EPSILON_BIAS * t)
        return Intersection(p, (p - self.center).normalize())

    def __repr__(self) -> str:
        return f"Sphere({self.center}, {self.radius})"
