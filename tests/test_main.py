"""Tests for the command-line entry point."""

import numpy as np
from PIL import Image

import main
from core.vector import Vector3
from conftest import assert_vec_close


class TestScenes:

    def test_sphere_world(self):
        assert len(main.create_sphere_world()) == 2

    def test_material_world(self):
        world = main.create_material_world()
        assert len(world) == 5
        assert all(obj.material is not None for obj in world)


class TestMain:

    def test_renders_ppm_file(self, tmp_path, capsys):
        out = tmp_path / "out.ppm"
        code = main.main(["--width", "4", "--height", "2", "--depth", "3", "--seed", "1",
                          "--output", str(out)])
        assert code == 0
        lines = out.read_text().splitlines()
        assert lines[:3] == ["P3", "4 2", "255"]
        assert len(lines) == 3 + 8
        assert "Image written to" in capsys.readouterr().out

    def test_stdout_holds_only_the_image(self, capsys):
        code = main.main(["--width", "3", "--height", "2", "--shading", "normal"])
        captured = capsys.readouterr()
        assert code == 0
        assert captured.out.startswith("P3\n3 2\n255\n")
        assert "=== Rendering ===" in captured.err

    def test_material_scene_to_png(self, tmp_path):
        out = tmp_path / "out.png"
        code = main.main(["--width", "4", "--height", "2", "--scene", "materials",
                          "--samples", "2", "--depth", "4", "--seed", "3", "--output", str(out)])
        assert code == 0
        with Image.open(out) as img:
            assert img.size == (4, 2)
            assert np.array(img).dtype == np.uint8

    def test_invalid_settings_report_error(self, capsys):
        code = main.main(["--width", "0"])
        assert code == 1
        assert "Error during execution" in capsys.readouterr().err


class TestViewOptions:

    def test_no_options_give_fixed_viewport(self):
        camera = main.create_camera(2.0, main.parse_args([]))
        assert_vec_close(camera.lower_left_corner, Vector3(-2, -1, -1))
        assert_vec_close(camera.horizontal, Vector3(4, 0, 0))
        assert_vec_close(camera.vertical, Vector3(0, 2, 0))
        assert camera.lens_radius == 0

    def test_options_reach_camera(self):
        args = main.parse_args(["--position", "0", "1", "2", "--yaw", "90", "--fov", "40",
                                "--aperture", "0.2", "--focus-dist", "3"])
        camera = main.create_camera(1.5, args)
        assert camera.position == Vector3(0, 1, 2)
        assert_vec_close(camera.forward, Vector3(1, 0, 0))
        assert camera.lens_radius == 0.1
        assert camera.focus_dist == 3.0

    def test_depth_of_field_render_is_reproducible(self, tmp_path):
        outputs = []
        for name in ("a.ppm", "b.ppm"):
            out = tmp_path / name
            code = main.main(["--width", "4", "--height", "2", "--scene", "materials",
                              "--position", "0", "0.5", "1", "--pitch", "-10",
                              "--aperture", "0.3", "--focus-dist", "2", "--depth", "4",
                              "--seed", "8", "--output", str(out)])
            assert code == 0
            outputs.append(out.read_text())
        assert outputs[0] == outputs[1]


class TestNormalShadingGamma:

    def render_to_stdout(self, capsys, *extra):
        assert main.main(["--width", "4", "--height", "2", "--shading", "normal", *extra]) == 0
        return capsys.readouterr().out

    def test_normal_shading_defaults_to_linear(self, capsys):
        default = self.render_to_stdout(capsys)
        linear = self.render_to_stdout(capsys, "--gamma", "1")
        corrected = self.render_to_stdout(capsys, "--gamma", "2")
        assert default == linear
        assert default != corrected

    def test_material_shading_keeps_gamma_two(self):
        assert main.default_gamma(main.parse_args([])) is None
        assert main.default_gamma(main.parse_args(["--shading", "normal", "--gamma", "2.2"])) == 2.2
