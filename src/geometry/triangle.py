# geometry/triangle.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.utils import EPSILON_BIAS, PARALLEL_EPSILON
from geometry.hittable import Shape, Intersection

class Triangle(Shape):
    """
    A single triangle in 3D space.

    The plane normal and the three edge half-planes are computed once at
    construction. Each edge keeps an in-plane vector perpendicular to it and
    the sign that the opposite vertex produces against that vector; a point
    is inside when it produces the same sign for all three edges.
    """
    def __init__(self, a: Vector3, b: Vector3, c: Vector3):
        self.a = a
        self.b = b
        self.c = c

        try:
            self.normal = (c - a).cross(b - a).normalize()
        except ValueError:
            raise ValueError(f"Degenerate triangle {a}, {b}, {c}") from None

        self.edges = []
        for start, end, opposite in ((a, b, c), (b, c, a), (c, a, b)):
            perp = self.normal.cross(end - start)
            ref = 1.0 if perp.dot(opposite - start) > 0 else -1.0
            self.edges.append((start, perp, ref))

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        denom = ray.direction.dot(self.normal)
        # Ray is parallel to the triangle's plane
        if abs(denom) < PARALLEL_EPSILON:
            return None

        t = (self.a - ray.origin).dot(self.normal) / denom
        if t <= 0:
            return None

        hit = ray.at(t)
        for start, perp, ref in self.edges:
            if perp.dot(hit - start) * ref < 0:
                return None

        # Always report the side facing the incoming ray
        normal = -self.normal if denom > 0 else self.normal
        return Intersection(ray.at(EPSILON_BIAS * t), normal)

    def __repr__(self) -> str:
        return f"Triangle({self.a}, {self.b}, {self.c})"
