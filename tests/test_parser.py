"""Tests for the scene description loader and the command line."""

import math
import textwrap

import pytest

from core.color import Color
from core.matrix import IDENTITY
from core.ray import Ray
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.triangle import Triangle
from materials.light import DirectionalLight, PointLight
from main import main
from renderer.raytracer import DEFAULT_MAX_DEPTH
from scenes.parser import DEFAULT_AMBIENT, DEFAULT_OUTPUT, SceneFileError, load_scene, parse_scene

MINIMAL = """
size 4 3
camera 0 0 5  0 0 0  0 1 0  45
"""


def scene_text(body):
    return MINIMAL + textwrap.dedent(body)


class TestParseScene:
    """Parsing well-formed files."""

    def test_minimal(self):
        desc = parse_scene(MINIMAL)
        assert (desc.scene.width, desc.scene.height) == (4, 3)
        assert desc.scene.camera.fov == 45
        assert desc.scene.camera.look_from == Vector3(0, 0, 5)
        assert desc.max_depth == DEFAULT_MAX_DEPTH
        assert desc.output == DEFAULT_OUTPUT
        assert desc.scene.objects == []
        assert desc.scene.lights == []

    def test_comments_and_blank_lines(self):
        desc = parse_scene("# a comment\n\n   \n" + MINIMAL + "  # indented comment\n")
        assert desc.scene.width == 4

    def test_settings(self):
        desc = parse_scene(scene_text("""
            maxdepth 2
            output picture.png
        """))
        assert desc.max_depth == 2
        assert desc.output == "picture.png"

    def test_material_state_applies_to_later_objects(self):
        desc = parse_scene(scene_text("""
            ambient 0.1 0.1 0.1
            diffuse 1 0 0
            sphere 0 0 0 1
            diffuse 0 1 0
            specular 0.5 0.5 0.5
            shininess 20
            emission 0 0 0.25
            sphere 2 0 0 0.5
        """))
        first, second = desc.scene.objects
        assert first.material.diffuse == Color(1, 0, 0)
        assert first.material.specular == Color.BLACK
        assert first.ambient == Color(0.1, 0.1, 0.1)
        assert second.material.diffuse == Color(0, 1, 0)
        assert second.material.specular == Color(0.5, 0.5, 0.5)
        assert second.material.shininess == 20
        assert second.material.emission == Color(0, 0, 0.25)
        assert isinstance(second.shape, Sphere)
        assert second.shape.radius == 0.5

    def test_default_ambient(self):
        desc = parse_scene(scene_text("sphere 0 0 0 1"))
        assert desc.scene.objects[0].ambient == DEFAULT_AMBIENT

    def test_triangles_from_vertices(self):
        desc = parse_scene(scene_text("""
            maxverts 3
            vertex 0 0 0
            vertex 1 0 0
            vertex 0 1 0
            tri 0 1 2
        """))
        tri = desc.scene.objects[0].shape
        assert isinstance(tri, Triangle)
        assert (tri.a, tri.b, tri.c) == (Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 1, 0))

    def test_transforms_and_stack(self):
        desc = parse_scene(scene_text("""
            pushTransform
            translate 0 0 -3
            scale 2 2 2
            sphere 0 0 0 0.5
            popTransform
            sphere 0 0 0 1
        """))
        moved, plain = desc.scene.objects
        assert (moved.transform @ moved.inverse).is_close(IDENTITY)
        assert moved.transform.transform_point(Vector3(1, 0, 0)) == Vector3(2, 0, -3)
        assert plain.transform == IDENTITY
        hit = moved.intersect(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)))
        assert hit.point.z == pytest.approx(-2.0)

    def test_rotate(self):
        desc = parse_scene(scene_text("""
            rotate 0 0 1 90
            sphere 0 0 0 1
        """))
        p = desc.scene.objects[0].transform.transform_point(Vector3(1, 0, 0))
        assert (p.x, p.y, p.z) == pytest.approx((0, 1, 0), abs=1e-12)

    def test_large_translation_between_rotations(self):
        desc = parse_scene(scene_text("""
            rotate 1 2 3 37
            translate 1e8 3e7 -2e7
            rotate 0 1 1 71
            sphere 0 0 0 1
        """))
        obj = desc.scene.objects[0]
        assert obj.transform.is_inverse_of(obj.inverse)
        center = obj.transform.transform_point(Vector3(0, 0, 0))
        assert center.length() == pytest.approx(math.sqrt(1e16 + 9e14 + 4e14), rel=1e-9)

    def test_lights(self):
        desc = parse_scene(scene_text("""
            directional 0 1 1  1 1 1
            point 1 2 3  0.5 0.5 0.5
            attenuation 1 0.5 0.25
            point 0 0 0  1 0 0
        """))
        directional, plain, attenuated = desc.scene.lights
        assert isinstance(directional, DirectionalLight)
        assert directional.direction == Vector3(0, 1, 1)
        assert isinstance(plain, PointLight)
        assert plain.position == Vector3(1, 2, 3)
        assert (plain.c0, plain.c1, plain.c2) == (1, 0, 0)
        assert (attenuated.c0, attenuated.c1, attenuated.c2) == (1, 0.5, 0.25)

    def test_lights_follow_transform(self):
        desc = parse_scene(scene_text("""
            translate 1 0 0
            point 0 0 0  1 1 1
            directional 0 1 0  1 1 1
        """))
        point, directional = desc.scene.lights
        assert point.position == Vector3(1, 0, 0)
        assert directional.direction == Vector3(0, 1, 0)

    def test_load_sample_file(self, scenes_dir):
        desc = load_scene(str(scenes_dir / "mirrors.scene"))
        assert (desc.scene.width, desc.scene.height) == (320, 240)
        assert desc.output == "mirrors.png"
        assert len(desc.scene.objects) == 5
        assert len(desc.scene.lights) == 2


class TestParseErrors:
    """Malformed files raise SceneFileError with a location."""

    @pytest.mark.parametrize("body, line, message", [
        ("frobnicate 1 2", 4, "unknown command"),
        ("sphere 0 0 1", 4, "takes 4 arguments"),
        ("sphere 0 0 x 1", 4, "could not convert"),
        ("sphere 0 0 0 -1", 4, "radius"),
        ("vertex 0 0 0\ntri 0 1 2", 5, "out of range"),
        ("maxverts 1\nvertex 0 0 0\nvertex 1 0 0", 6, "maxverts"),
        ("popTransform", 4, "pop"),
        ("scale 1 0 1", 4, "non-zero"),
        ("size 0 3", 4, "positive"),
        ("maxdepth 2.5", 4, "integer"),
        ("vertex 0 0 0\nvertex 1 1 1\nvertex 2 2 2\ntri 0 1 2", 7, "Degenerate"),
        ("attenuation 0 0 0", 4, "attenuation"),
        ("size inf 4", 4, "finite"),
        ("maxdepth nan", 4, "finite"),
        ("vertex 0 0 0\ntri inf 0 0", 5, "finite"),
        ("directional 0 0 0  1 1 1", 4, "non-zero"),
        ("shininess -2", 4, "shininess"),
    ])
    def test_errors(self, body, line, message):
        with pytest.raises(SceneFileError) as excinfo:
            parse_scene(MINIMAL + body, source="bad.scene")
        assert excinfo.value.line == line
        assert excinfo.value.source == "bad.scene"
        assert message in str(excinfo.value)
        assert str(excinfo.value).startswith(f"bad.scene:{line}:")

    def test_missing_camera(self):
        with pytest.raises(SceneFileError, match="camera"):
            parse_scene("size 4 3")

    def test_missing_size(self):
        with pytest.raises(SceneFileError, match="size"):
            parse_scene("camera 0 0 5  0 0 0  0 1 0  45")

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_scene("bogus")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_scene(str(tmp_path / "nope.scene"))

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "binary.scene"
        path.write_bytes(b"size 4 3\n\xff\xfe\x00camera\n")
        with pytest.raises(SceneFileError, match="UTF-8") as excinfo:
            load_scene(str(path))
        assert excinfo.value.source == str(path)


class TestMain:
    """Command line entry point."""

    def test_renders_scene_file(self, tmp_path, capsys):
        scene_file = tmp_path / "tiny.scene"
        scene_file.write_text(scene_text("""
            ambient 1 1 1
            sphere 0 0 0 1
        """))
        out = tmp_path / "tiny.ppm"
        assert main([str(scene_file), "-o", str(out), "--quiet"]) == 0
        data = out.read_bytes()
        assert data.startswith(b"P6 4 3 255\n")
        assert len(data) == len(b"P6 4 3 255\n") + 4 * 3 * 3
        assert capsys.readouterr().out == ""

    def test_output_and_depth_from_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "tiny.scene").write_text(scene_text("output from_file.png\nmaxdepth 1"))
        assert main(["tiny.scene"]) == 0
        assert (tmp_path / "from_file.png").exists()

    def test_bad_scene_file(self, tmp_path, capsys):
        scene_file = tmp_path / "bad.scene"
        scene_file.write_text("size 4\n")
        assert main([str(scene_file), "--quiet"]) == 1
        assert "bad.scene:1" in capsys.readouterr().err

    def test_missing_scene_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.scene")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_non_finite_size(self, tmp_path, capsys):
        scene_file = tmp_path / "huge.scene"
        scene_file.write_text("size inf 4\n")
        assert main([str(scene_file), "--quiet"]) == 1
        assert "huge.scene:1" in capsys.readouterr().err
