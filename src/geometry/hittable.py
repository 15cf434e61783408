# geometry/hittable.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray

class Intersection:
    """
    Records a ray-surface hit: the hit point and the unit surface normal.
    """
    __slots__ = ("point", "normal")

    def __init__(self, point: Vector3, normal: Vector3):
        self.point = point      # Intersection point
        self.normal = normal    # Unit normal at the intersection

    def __repr__(self) -> str:
        return f"Intersection(point={self.point}, normal={self.normal})"

class Shape:
    """
    Abstract class for primitives that can be intersected in their own
    object space.
    """
    def intersect(self, ray: Ray) -> Optional[Intersection]:
        raise NotImplementedError("intersect() must be implemented by subclasses.")
