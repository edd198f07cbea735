import logging

import pytest

from meshview.app import build_scene, configure_logging, main
from meshview.material import RenderType
from meshview.mesh import Mesh
from meshview.renderer import Renderer
from meshview.vector3 import Vector3


@pytest.fixture
def package_logger():
    logger = logging.getLogger("meshview")
    saved = (logger.handlers[:], logger.level, logger.propagate)
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


def test_info_goes_to_stdout_with_location(package_logger, capsys):
    configure_logging(logging.DEBUG)
    logging.getLogger("meshview.sample").info("hello")
    captured = capsys.readouterr()
    assert "[INFO][test_app.py][Line " in captured.out
    assert captured.out.rstrip().endswith("hello")
    assert "hello" not in captured.err


def test_warnings_go_to_stderr(package_logger, capsys):
    configure_logging("DEBUG")
    logging.getLogger("meshview.sample").warning("careful")
    captured = capsys.readouterr()
    assert "[WARNING][test_app.py]" in captured.err
    assert "careful" not in captured.out


def test_configure_logging_is_idempotent(package_logger):
    configure_logging()
    logger = configure_logging()
    assert logger is package_logger
    assert len(logger.handlers) == 2


def test_build_scene_places_models_and_primitives():
    renderer = Renderer()
    shader = object()
    dragon = Mesh.triangle()
    scene = build_scene(renderer, shader, dragon)

    assert renderer.entities == scene.entities
    assert len(scene.entities) == len(scene.materials) * (1 + len(scene.meshes))
    assert [e.position for e in scene.entities[:3]] == [
        Vector3(-4.0, 2.5, 0.0),
        Vector3(0.0, 2.5, 0.0),
        Vector3(4.0, 2.5, 0.0),
    ]
    assert scene.entities[3].position == Vector3(-5.0, 0.0, 0.0)
    assert all(e.mesh is dragon for e in scene.entities[:3])
    assert all(e.shader is shader for e in scene.entities)


def test_build_scene_materials():
    scene = build_scene(Renderer(), object(), None)
    plain, wire, points = scene.materials
    assert (plain.render_type, plain.wireframe) == (RenderType.TRIANGLES, False)
    assert wire.wireframe is True
    assert points.render_type == RenderType.POINTS
    assert len(scene.entities) == len(scene.meshes) * len(scene.materials)


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "--assets" in capsys.readouterr().out