# geometry/world.py
from typing import List, Optional, Tuple
from core.color import Color
from core.ray import Ray
from core.utils import reflect
from geometry.hittable import Intersection
from geometry.scene_object import SceneObject
from materials.light import Light

class Scene:
    """
    Everything needed to render one image: camera, objects, lights and the
    output size. Nothing here is mutated once rendering starts.
    """
    def __init__(self, camera, objects: List[SceneObject], lights: List[Light],
                 width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        self.camera = camera
        self.objects = list(objects)
        self.lights = list(lights)
        self.width = width
        self.height = height

    def intersect(self, ray: Ray) -> Optional[Tuple[Intersection, SceneObject]]:
        """
        Returns the hit closest to the ray origin and the object it belongs
        to, or None. On exactly equal distances the earlier object wins.
        """
        result = None
        closest_so_far = None
        for obj in self.objects:
            hit = obj.intersect(ray)
            if hit is None:
                continue
            d = (hit.point - ray.origin).length()
            if closest_so_far is None or d < closest_so_far:
                closest_so_far = d
                result = (hit, obj)
        return result

    def shade(self, ray: Ray, depth: int) -> Color:
        """
        Color seen along `ray`, allowing `depth - 1` further mirror bounces.

        Lights contribute Lambert diffuse plus Blinn-Phong specular unless a
        shadow ray toward them hits anything. Surfaces with a non-black
        specular color also add their mirror reflection.
        """
        if depth <= 0:
            return Color.BLACK
        found = self.intersect(ray)
        if found is None:
            return Color.BLACK

        hit, obj = found
        material = obj.material
        color = obj.ambient + material.emission

        for light in self.lights:
            to_light = light.direction_from(hit.point)
            # a point light lying on the surface has no direction to shade with
            if to_light.length() == 0:
                continue
            light_dir = to_light.normalize()
            if self.intersect(Ray(hit.point, light_dir)) is not None:
                continue
            attenuation, light_color = light.attenuation(hit.point)
            diffuse = material.diffuse.scale(max(0.0, hit.normal.dot(light_dir)))
            half = light_dir - ray.direction
            if material.specular.is_black() or half.length() == 0:
                specular = Color.BLACK
            else:
                specular = material.specular.scale(
                    max(0.0, hit.normal.dot(half.normalize())) ** material.shininess)
            color = color + light_color.scale(attenuation) * (diffuse + specular)

        if material.is_mirror:
            mirror = Ray(hit.point, reflect(ray.direction, hit.normal))
            color = color + material.specular * self.shade(mirror, depth - 1)

        return color

    def __repr__(self) -> str:
        return (f"Scene({self.width}x{self.height}, {len(self.objects)} objects, "
                f"{len(self.lights)} lights)")
