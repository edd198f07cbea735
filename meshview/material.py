"""Surface settings that decide how a mesh is rasterised."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from meshview.mesh import Mesh


class RenderType(IntEnum):
    """Primitive modes, valued as the matching OpenGL enumerants."""

    POINTS = 0x0000
    LINES = 0x0001
    LINE_LOOP = 0x0002
    LINE_STRIP = 0x0003
    TRIANGLES = 0x0004
    TRIANGLE_STRIP = 0x0005
    TRIANGLE_FAN = 0x0006


@dataclass
class Material:
    """Primitive mode plus a wireframe switch."""

    render_type: RenderType = RenderType.TRIANGLES
    wireframe: bool = False

    def __post_init__(self) -> None:
        self.render_type = RenderType(self.render_type)

    def draw(self, mesh: Mesh) -> None:
        """Set raster state and draw ``mesh`` with the current program."""
        from pyglet import gl

        gl.glCullFace(gl.GL_BACK)
        gl.glFrontFace(gl.GL_CW)

        if self.wireframe:
            gl.glPolygonMode(gl.GL_FRONT_AND_BACK, gl.GL_LINE)
            gl.glDisable(gl.GL_CULL_FACE)
        else:
            gl.glPolygonMode(gl.GL_FRONT_AND_BACK, gl.GL_FILL)
            gl.glEnable(gl.GL_CULL_FACE)

        mesh.bind()
        gl.glDrawArrays(int(self.render_type), 0, mesh.vertex_count)