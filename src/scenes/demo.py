# scenes/demo.py
from core.color import Color
from core.matrix import Matrix4
from core.vector import Vector3, ZERO
from camera.camera import Camera
from geometry.scene_object import SceneObject
from geometry.sphere import Sphere
from geometry.triangle import Triangle
from geometry.world import Scene
from materials.light import DirectionalLight, PointLight
from materials.material import Material
from materials.presets import ColorPresets, MaterialPresets

def two_spheres(width: int = 320, height: int = 240) -> Scene:
    """A red sphere with a small green one in front of it, two directional lights."""
    camera = Camera(look_from=Vector3(5, 0, 0), look_at=ZERO, up=Vector3(0, 1, 0), fov=45)
    objects = [
        SceneObject(Sphere(ZERO, 1), Material(diffuse=Color.RED)),
        SceneObject(Sphere(Vector3(1, 0.1, 0.1), 0.2), Material(diffuse=Color.GREEN)),
    ]
    lights = [
        DirectionalLight(Vector3(-1, 1, 1), Color.WHITE),
        DirectionalLight(Vector3(1, -1, 1), Color.WHITE.scale(0.3)),
    ]
    return Scene(camera, objects, lights, width, height)

def showcase(width: int = 320, height: int = 240) -> Scene:
    """
    Mirror and gold spheres, a squashed transformed sphere, a glowing
    marker and a two-triangle floor, lit by a point and a directional light.
    """
    camera = Camera(look_from=Vector3(0, 2, 8), look_at=Vector3(0, 0.5, 0),
                    up=Vector3(0, 1, 0), fov=40)
    ambient = Color(0.05, 0.05, 0.05)

    objects = [
        SceneObject(Sphere(Vector3(-1.2, 1, 0), 1), MaterialPresets.mirror(), ambient),
        SceneObject(Sphere(Vector3(1.3, 0.7, 0.5), 0.7), MaterialPresets.gold(), ambient),
        SceneObject(Sphere(ZERO, 1), MaterialPresets.plastic(ColorPresets.BLUE), ambient,
                    Matrix4.translation(0.2, 0.3, 2.2) @ Matrix4.scaling(0.6, 0.3, 0.6)),
        SceneObject(Sphere(Vector3(2.5, 2.5, -2), 0.2), MaterialPresets.glow(ColorPresets.YELLOW)),
    ]

    floor = MaterialPresets.matte(ColorPresets.GRAY)
    a, b, c, d = (Vector3(-6, 0, -6), Vector3(6, 0, -6), Vector3(6, 0, 6), Vector3(-6, 0, 6))
    objects.append(SceneObject(Triangle(a, b, c), floor, ambient))
    objects.append(SceneObject(Triangle(a, c, d), floor, ambient))

    lights = [
        PointLight(Vector3(3, 6, 4), Color(0.8, 0.8, 0.8)),
        DirectionalLight(Vector3(-1, 2, 1), Color(0.3, 0.3, 0.3)),
    ]
    return Scene(camera, objects, lights, width, height)

DEMO_SCENES = {
    "two_spheres": two_spheres,
    "showcase": showcase,
}
