# geometry/scene_object.py
from typing import Optional
from core.color import Color
from core.matrix import Matrix4, IDENTITY
from core.ray import Ray
from geometry.hittable import Shape, Intersection
from materials.material import Material

class SceneObject:
    """
    A shape placed in the world by an affine transform.

    `transform` maps object space to world space and `inverse` maps back;
    the two must be mutual inverses. The shape only ever sees object-space
    rays.
    """
    def __init__(self, shape: Shape, material: Material, ambient: Color = Color.BLACK,
                 transform: Matrix4 = IDENTITY, inverse: Optional[Matrix4] = None):
        if inverse is None:
            inverse = transform.inverse()
        elif not transform.is_inverse_of(inverse):
            raise ValueError("Transform and inverse transform are inconsistent")
        self.shape = shape
        self.material = material
        self.ambient = ambient
        self.transform = transform
        self.inverse = inverse

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        local_ray = Ray(self.inverse.transform_point(ray.origin),
                        self.inverse.transform_direction(ray.direction))
        hit = self.shape.intersect(local_ray)
        if hit is None:
            return None
        return Intersection(self.transform.transform_point(hit.point),
                            self.inverse.transform_normal(hit.normal).normalize())

    def __repr__(self) -> str:
        return f"SceneObject({self.shape!r})"
