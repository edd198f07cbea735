"""A drawable object: mesh, material and shader placed in the world."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from meshview.material import Material
from meshview.mesh import Mesh
from meshview.quaternion import Quaternion
from meshview.shader import Shader
from meshview.vector3 import Vector3

log = logging.getLogger(__name__)


def _set_uniform_matrix(program_id: int, name: str, matrix: np.ndarray) -> bool:
    """Upload a 4x4 matrix to the named uniform; return False if it does not exist."""
    from pyglet import gl

    location = gl.glGetUniformLocation(program_id, name.encode())
    if location == -1:
        return False
    column_major = np.asarray(matrix, dtype=np.float32).T.ravel()
    gl.glUniformMatrix4fv(location, 1, gl.GL_FALSE, (gl.GLfloat * 16)(*column_major))
    return True


class Entity:
    """Geometry with a transform, drawn with its material and shader."""

    def __init__(
        self,
        mesh: Optional[Mesh],
        material: Optional[Material],
        shader: Optional[Shader],
    ) -> None:
        if mesh is None:
            log.warning("Invalid mesh")
        if material is None:
            log.warning("Invalid material")
        if shader is None:
            log.warning("Invalid shader")

        self.mesh = mesh
        self.material = material
        self.shader = shader

        self.position = Vector3()
        self.rotation = Quaternion()
        self.scale = Vector3.splat(1.0)

    def model_matrix(self) -> np.ndarray:
        """Translation * rotation * scale, row-major, acting on column vectors."""
        translation = np.eye(4)
        translation[:3, 3] = tuple(self.position)
        scale = np.diag([self.scale.x, self.scale.y, self.scale.z, 1.0])
        return translation @ self.rotation.to_matrix() @ scale

    def draw(self) -> None:
        """Draw the entity with its own shader, material and mesh."""
        if self.shader is None:
            log.error("Cannot draw without shader!")
            return
        if self.mesh is None or self.material is None:
            log.error("Cannot draw without mesh and material!")
            return

        self.shader.use()
        if not _set_uniform_matrix(self.shader.program_id, "model", self.model_matrix()):
            log.warning("'model' uniform not found in shader.")

        self.material.draw(self.mesh)