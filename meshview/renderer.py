"""Draws a list of entities from a camera's point of view."""

from __future__ import annotations

import logging
from typing import List, Optional

from meshview.camera import Camera
from meshview.entity import Entity, _set_uniform_matrix

log = logging.getLogger(__name__)


class Renderer:
    """Holds the scene's entities and the camera they are seen through.

    Global render state is set up on the first draw, when a context exists.
    """

    def __init__(self) -> None:
        self.camera: Optional[Camera] = None
        self.entities: List[Entity] = []
        self._state_ready = False

    def add_entity(self, entity: Entity) -> None:
        self.entities.append(entity)

    def _prepare_state(self) -> None:
        from pyglet import gl

        gl.glDepthFunc(gl.GL_LESS)
        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glEnable(gl.GL_PROGRAM_POINT_SIZE)
        gl.glClearColor(0.0, 0.0, 0.0, 1.0)
        self._state_ready = True

    def draw(self) -> None:
        """Clear the frame and draw every entity."""
        if self.camera is None:
            log.warning("No camera set!")
            return

        from pyglet import gl

        if not self._state_ready:
            self._prepare_state()

        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)

        view = self.camera.view_matrix()
        projection = self.camera.projection_matrix()

        for entity in self.entities:
            shader = entity.shader
            if shader is None:
                log.warning("Entity without shader!")
                continue

            shader.use()
            if not _set_uniform_matrix(shader.program_id, "view", view):
                log.warning("'view' uniform not found in shader!")
            if not _set_uniform_matrix(shader.program_id, "projection", projection):
                log.warning("'projection' uniform not found in shader!")

            entity.draw()