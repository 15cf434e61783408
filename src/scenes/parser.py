# scenes/parser.py
"""
Loader for line-oriented scene description files.

Each non-blank line that does not start with ``#`` is a command followed by
whitespace-separated arguments, e.g.::

    size 640 480
    camera 0 0 5  0 0 0  0 1 0  45
    diffuse 1 0 0
    pushTransform
    translate 0 1 0
    sphere 0 0 0 1
    popTransform
    directional 0 1 1  1 1 1

Material, ambient and attenuation commands set state that applies to every
object or light declared after them. Geometry and lights are placed with the
transform on top of the transform stack at the time they are declared.
"""
import math
import os
from typing import List, Optional
from core.color import Color
from core.matrix import Matrix4
from core.vector import Vector3
from camera.camera import Camera
from geometry.scene_object import SceneObject
from geometry.sphere import Sphere
from geometry.transform import TransformStack
from geometry.triangle import Triangle
from geometry.world import Scene
from materials.light import DirectionalLight, Light, PointLight
from materials.material import Material
from renderer.raytracer import DEFAULT_MAX_DEPTH

DEFAULT_OUTPUT = "raytrace.ppm"
DEFAULT_AMBIENT = Color(0.2, 0.2, 0.2)

class SceneFileError(ValueError):
    """Raised for malformed scene files; carries the source name and line."""
    def __init__(self, message: str, source: str = "<string>", line: Optional[int] = None):
        self.source = source
        self.line = line
        self.reason = message
        where = source if line is None else f"{source}:{line}"
        super().__init__(f"{where}: {message}")

class SceneDescription:
    """A parsed scene plus the render settings given in the file."""
    def __init__(self, scene: Scene, max_depth: int = DEFAULT_MAX_DEPTH,
                 output: str = DEFAULT_OUTPUT):
        self.scene = scene
        self.max_depth = max_depth
        self.output = output

    def __repr__(self) -> str:
        return f"SceneDescription({self.scene!r}, max_depth={self.max_depth}, output={self.output!r})"

# command -> number of arguments
ARG_COUNTS = {
    "size": 2, "maxdepth": 1, "output": 1, "camera": 10,
    "sphere": 4, "maxverts": 1, "vertex": 3, "tri": 3,
    "translate": 3, "rotate": 4, "scale": 3,
    "pushTransform": 0, "popTransform": 0,
    "directional": 6, "point": 6, "attenuation": 3,
    "ambient": 3, "diffuse": 3, "specular": 3, "emission": 3, "shininess": 1,
}

class _SceneBuilder:
    """Parser state while reading one file."""
    def __init__(self):
        self.size = None
        self.camera = None
        self.max_depth = DEFAULT_MAX_DEPTH
        self.output = DEFAULT_OUTPUT
        self.objects: List[SceneObject] = []
        self.lights: List[Light] = []
        self.vertices: List[Vector3] = []
        self.max_vertices = None
        self.transforms = TransformStack()
        self.attenuation = (1.0, 0.0, 0.0)
        self.ambient = DEFAULT_AMBIENT
        self.diffuse = Color.BLACK
        self.specular = Color.BLACK
        self.emission = Color.BLACK
        self.shininess = 0.0

    def material(self) -> Material:
        return Material(self.diffuse, self.specular, self.shininess, self.emission)

    def add_object(self, shape):
        forward, inverse = self.transforms.top
        self.objects.append(SceneObject(shape, self.material(), self.ambient, forward, inverse))

    def command(self, name: str, args: List[str]):
        if name == "output":
            self.output = args[0]
            return

        values = [float(a) for a in args]
        if not all(math.isfinite(v) for v in values):
            raise ValueError(f"arguments must be finite numbers, got {' '.join(args)}")
        if name == "size":
            width, height = _int(values[0]), _int(values[1])
            if width <= 0 or height <= 0:
                raise ValueError(f"image size must be positive, got {width}x{height}")
            self.size = (width, height)
        elif name == "maxdepth":
            self.max_depth = _int(values[0])
        elif name == "camera":
            self.camera = Camera(Vector3(*values[0:3]), Vector3(*values[3:6]),
                                 Vector3(*values[6:9]), values[9])
        elif name == "sphere":
            self.add_object(Sphere(Vector3(*values[0:3]), values[3]))
        elif name == "maxverts":
            self.max_vertices = _int(values[0])
        elif name == "vertex":
            if self.max_vertices is not None and len(self.vertices) >= self.max_vertices:
                raise ValueError(f"more than maxverts={self.max_vertices} vertices")
            self.vertices.append(Vector3(*values))
        elif name == "tri":
            corners = []
            for v in values:
                index = _int(v)
                if not 0 <= index < len(self.vertices):
                    raise ValueError(f"vertex index {index} out of range "
                                     f"({len(self.vertices)} vertices defined)")
                corners.append(self.vertices[index])
            self.add_object(Triangle(*corners))
        elif name == "translate":
            self.transforms.apply(Matrix4.translation(*values),
                                  Matrix4.translation(*(-v for v in values)))
        elif name == "scale":
            if 0 in values:
                raise ValueError("scale factors must be non-zero")
            self.transforms.apply(Matrix4.scaling(*values),
                                  Matrix4.scaling(*(1.0 / v for v in values)))
        elif name == "rotate":
            axis = Vector3(*values[0:3])
            self.transforms.apply(Matrix4.rotation(axis, values[3]),
                                  Matrix4.rotation(axis, -values[3]))
        elif name == "pushTransform":
            self.transforms.push()
        elif name == "popTransform":
            self.transforms.pop()
        elif name == "directional":
            direction = self.transforms.forward.transform_direction(Vector3(*values[0:3]))
            self.lights.append(DirectionalLight(direction, Color(*values[3:6])))
        elif name == "point":
            position = self.transforms.forward.transform_point(Vector3(*values[0:3]))
            self.lights.append(PointLight(position, Color(*values[3:6]), *self.attenuation))
        elif name == "attenuation":
            if values[0] == 0 and values[1] == 0 and values[2] == 0:
                raise ValueError("attenuation coefficients cannot all be zero")
            self.attenuation = tuple(values)
        elif name == "ambient":
            self.ambient = Color(*values)
        elif name == "diffuse":
            self.diffuse = Color(*values)
        elif name == "specular":
            self.specular = Color(*values)
        elif name == "emission":
            self.emission = Color(*values)
        elif name == "shininess":
            if values[0] < 0:
                raise ValueError(f"shininess must be non-negative, got {values[0]}")
            self.shininess = values[0]

    def build(self) -> SceneDescription:
        if self.size is None:
            raise ValueError("missing 'size' command")
        if self.camera is None:
            raise ValueError("missing 'camera' command")
        scene = Scene(self.camera, self.objects, self.lights, *self.size)
        return SceneDescription(scene, self.max_depth, self.output)

def _int(value: float) -> int:
    if value != int(value):
        raise ValueError(f"expected an integer, got {value}")
    return int(value)

def parse_scene(text: str, source: str = "<string>") -> SceneDescription:
    """Parse scene description text into a SceneDescription."""
    builder = _SceneBuilder()
    for line_number, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split()
        name, args = parts[0], parts[1:]
        if name not in ARG_COUNTS:
            raise SceneFileError(f"unknown command '{name}'", source, line_number)
        if len(args) != ARG_COUNTS[name]:
            raise SceneFileError(f"'{name}' takes {ARG_COUNTS[name]} arguments, got {len(args)}",
                                 source, line_number)
        try:
            builder.command(name, args)
        except (ValueError, IndexError) as e:
            raise SceneFileError(str(e), source, line_number) from e

    try:
        return builder.build()
    except ValueError as e:
        raise SceneFileError(str(e), source) from e

def load_scene(path: str) -> SceneDescription:
    """
    Load a scene description file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        SceneFileError: If the file is malformed
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Scene file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise SceneFileError(f"not a UTF-8 text file ({e.reason})", path) from e
    return parse_scene(text, source=path)
