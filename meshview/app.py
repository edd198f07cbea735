"""Demo scene: a grid of primitives and loaded models under a fly camera."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from meshview.camera import Camera
from meshview.clock import Clock
from meshview.controller import Controller
from meshview.entity import Entity
from meshview.material import Material, RenderType
from meshview.mesh import Mesh
from meshview.objloader import load
from meshview.quaternion import Quaternion
from meshview.ray import Ray
from meshview.renderer import Renderer
from meshview.shader import Shader
from meshview.vector3 import Vector3
from meshview.window import Window

LOG_FORMAT = "[%(levelname)s][%(filename)s][Line %(lineno)d] %(message)s"
WIDTH, HEIGHT = 800, 600

log = logging.getLogger(__name__)


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Send package info/debug to stdout and warnings/errors to stderr."""
    logger = logging.getLogger("meshview")
    logger.handlers.clear()
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    out = logging.StreamHandler(sys.stdout)
    out.addFilter(_BelowWarning())
    err = logging.StreamHandler(sys.stderr)
    err.setLevel(logging.WARNING)
    for handler in (out, err):
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


@dataclass
class Scene:
    """What the demo created: the spinning entities and owned resources."""

    entities: List[Entity] = field(default_factory=list)
    materials: List[Material] = field(default_factory=list)
    meshes: List[Mesh] = field(default_factory=list)


def build_scene(renderer: Renderer, shader: Shader, dragon: Optional[Mesh]) -> Scene:
    """Populate ``renderer`` with the demo models and primitive grid."""
    materials = [
        Material(),
        Material(wireframe=True),
        Material(render_type=RenderType.POINTS),
    ]
    scene = Scene(materials=materials)

    def place(mesh: Mesh, material: Material, position: Vector3) -> None:
        entity = Entity(mesh, material, shader)
        entity.position = position
        renderer.add_entity(entity)
        scene.entities.append(entity)

    if dragon is not None:
        for i, material in enumerate(materials):
            place(dragon, material, Vector3(-4.0 + 4.0 * i, 2.5, 0.0))

    scene.meshes = [
        Mesh.triangle(),
        Mesh.quad(),
        Mesh.circle(),
        Mesh.pyramid(),
        Mesh.cube(),
        Mesh.cylinder(),
    ]
    for i, mesh in enumerate(scene.meshes):
        for j, material in enumerate(materials):
            place(mesh, material, Vector3(-5.0 + 2.0 * i, -1.5 * j, 0.0))

    return scene


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="meshview", description="Render a demo scene.")
    parser.add_argument("--assets", type=Path, default=Path("assets"),
                        help="directory holding shaders/ and models/")
    parser.add_argument("--log-level", default="INFO", help="logging level")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    configure_logging(args.log_level.upper())

    window = Window(WIDTH, HEIGHT, "Renderer")
    renderer = Renderer()

    camera = Camera(45.0, WIDTH / HEIGHT, 0.1, 200.0)
    camera.position = Vector3(0.0, 0.0, 12.0)
    renderer.camera = camera

    controller = Controller(camera, window)

    shaders = args.assets / "shaders"
    shader = Shader(shaders / "fog_vert.glsl", shaders / "fog_frag.glsl")

    try:
        dragon: Optional[Mesh] = load(args.assets / "models" / "dragon.obj")
    except OSError:
        dragon = None

    scene = build_scene(renderer, shader, dragon)

    ray = Ray(Vector3.splat(0.0), Vector3(45.0, 45.0, 45.0))
    ray_entity = ray.visualization_entity()
    renderer.add_entity(ray_entity)

    start = time.perf_counter()
    clock = Clock(lambda: time.perf_counter() - start)
    axis = Vector3(0.0, 1.0, 0.0)
    try:
        while not window.should_close():
            delta = clock.delta()
            now = clock.time()

            shader.refresh()
            controller.update(delta)

            rotation = Quaternion.with_axis_angle(axis, now)
            for entity in scene.entities:
                entity.rotation = rotation

            renderer.draw()
            window.update()
    finally:
        for mesh in scene.meshes:
            mesh.release()
        if dragon is not None:
            dragon.release()
        ray_entity.mesh.release()
        ray_entity.shader.release()
        shader.release()
        window.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())