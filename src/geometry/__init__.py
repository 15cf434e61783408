from geometry.hittable import Intersection, Shape
from geometry.sphere import Sphere
from geometry.triangle import Triangle
from geometry.scene_object import SceneObject
from geometry.transform import TransformStack
from geometry.world import Scene
