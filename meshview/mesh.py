"""Vertex data for drawable geometry, with builders for primitive shapes."""

from __future__ import annotations

import math
from typing import Iterable, Optional

import numpy as np

_FLOAT_SIZE = 4
_COMPONENTS = 3


def generate_colors(vertices: Iterable[float]) -> np.ndarray:
    """Derive one colour component per vertex component, each in ``[0, 1]``."""
    data = np.asarray(list(vertices) if not isinstance(vertices, np.ndarray) else vertices,
                      dtype=np.float32)
    return ((np.sin(data) + 1.0) * 0.5).astype(np.float32)


class Mesh:
    """Flat triangle-list geometry plus a per-vertex colour buffer.

    GPU buffers are created on the first :meth:`bind`, so a mesh can be
    built and inspected without a graphics context.
    """

    def __init__(self, vertices: Iterable[float], colors: Optional[Iterable[float]] = None) -> None:
        self.vertices = np.asarray(
            vertices if isinstance(vertices, np.ndarray) else list(vertices), dtype=np.float32
        )
        color_data = None if colors is None else np.asarray(
            colors if isinstance(colors, np.ndarray) else list(colors), dtype=np.float32
        )
        if color_data is None or color_data.size == 0:
            color_data = generate_colors(self.vertices)
        self.colors = color_data

        self._vao = None
        self._points_vbo = None
        self._colors_vbo = None

    @property
    def vertex_count(self) -> int:
        """Number of whole vertices in the vertex buffer."""
        return self.vertices.size // _COMPONENTS

    @classmethod
    def triangle(cls, w: float = 1.0, h: float = 1.0) -> Mesh:
        hw, hh = w * 0.5, h * 0.5
        return cls([
            hw, -hh, 0.0,   # bottom right
            -hw, -hh, 0.0,  # bottom left
            0.0, hh, 0.0,   # top middle
        ])

    @classmethod
    def quad(cls, w: float = 1.0, h: float = 1.0) -> Mesh:
        hw, hh = w * 0.5, h * 0.5
        return cls([
            hw, -hh, 0.0,   # bottom right
            -hw, -hh, 0.0,  # bottom left
            -hw, hh, 0.0,   # top left

            hw, hh, 0.0,    # top right
            hw, -hh, 0.0,   # bottom right
            -hw, hh, 0.0,   # top left
        ])

    @classmethod
    def cube(cls, scale: float = 1.0) -> Mesh:
        hs = scale * 0.5
        return cls([
            -hs, -hs, hs, hs, hs, hs, hs, -hs, hs,      # front
            -hs, -hs, hs, -hs, hs, hs, hs, hs, hs,

            -hs, -hs, -hs, hs, hs, -hs, -hs, hs, -hs,   # back
            -hs, -hs, -hs, hs, -hs, -hs, hs, hs, -hs,

            -hs, -hs, -hs, -hs, hs, hs, -hs, -hs, hs,   # left
            -hs, -hs, -hs, -hs, hs, -hs, -hs, hs, hs,

            hs, -hs, -hs, hs, hs, hs, hs, hs, -hs,      # right
            hs, -hs, -hs, hs, -hs, hs, hs, hs, hs,

            -hs, hs, -hs, hs, hs, hs, -hs, hs, hs,      # top
            -hs, hs, -hs, hs, hs, -hs, hs, hs, hs,

            -hs, -hs, -hs, hs, -hs, hs, hs, -hs, -hs,   # bottom
            -hs, -hs, -hs, -hs, -hs, hs, hs, -hs, hs,
        ])

    @classmethod
    def pyramid(cls, width: float = 1.0, height: float = 1.0) -> Mesh:
        hw, hh = width * 0.5, height * 0.5
        return cls([
            -hw, -hh, -hw, hw, -hh, hw, hw, -hh, -hw,    # base
            -hw, -hh, -hw, -hw, -hh, hw, hw, -hh, hw,

            -hw, -hh, -hw, hw, -hh, -hw, -0.0, hh, -0.0,  # back
            hw, -hh, -hw, hw, -hh, hw, -0.0, hh, -0.0,    # right
            hw, -hh, hw, -hw, -hh, hw, -0.0, hh, -0.0,    # front
            -hw, -hh, hw, -hw, -hh, -hw, -0.0, hh, -0.0,  # left
        ])

    @classmethod
    def circle(cls, radius: float = 0.5, segments: int = 16) -> Mesh:
        if segments < 1:
            raise ValueError("a circle needs at least one segment")
        offset = 2.0 * math.pi / segments
        vertices: list[float] = []
        angle = 0.0
        for _ in range(segments):
            next_angle = angle + offset
            vertices += [
                radius * math.cos(angle), radius * math.sin(angle), 0.0,
                0.0, 0.0, 0.0,
                radius * math.cos(next_angle), radius * math.sin(next_angle), 0.0,
            ]
            angle = next_angle
        return cls(vertices)

    @classmethod
    def cylinder(cls, radius: float = 0.5, height: float = 1.0, segments: int = 16) -> Mesh:
        if segments < 1:
            raise ValueError("a cylinder needs at least one segment")
        hh = height * 0.5
        offset = 2.0 * math.pi / segments
        vertices: list[float] = []
        angle = 0.0
        for _ in range(segments):
            next_angle = angle + offset
            sx, sz = radius * math.cos(angle), radius * math.sin(angle)
            ex, ez = radius * math.cos(next_angle), radius * math.sin(next_angle)
            vertices += [
                # top cap
                sx, hh, sz, ex, hh, ez, 0.0, hh, 0.0,
                # bottom cap
                sx, -hh, sz, 0.0, -hh, 0.0, ex, -hh, ez,
                # side quad
                ex, -hh, ez, sx, hh, sz, sx, -hh, sz,
                ex, hh, ez, sx, hh, sz, ex, -hh, ez,
            ]
            angle = next_angle
        return cls(vertices)

    def bind(self) -> None:
        """Bind the vertex array, uploading the buffers on first use."""
        if self._vao is not None:
            self._vao.bind()
            return

        from pyglet import gl
        from pyglet.graphics.vertexarray import VertexArray
        from pyglet.graphics.vertexbuffer import BufferObject

        def upload(data: np.ndarray):
            buffer = BufferObject(max(data.nbytes, _FLOAT_SIZE))
            if data.nbytes:
                buffer.set_data(data.ctypes.data)
            return buffer

        self._points_vbo = upload(np.ascontiguousarray(self.vertices))
        self._colors_vbo = upload(np.ascontiguousarray(self.colors))

        self._vao = VertexArray()
        self._vao.bind()
        for location, buffer in enumerate((self._points_vbo, self._colors_vbo)):
            buffer.bind()
            gl.glVertexAttribPointer(
                location, _COMPONENTS, gl.GL_FLOAT, gl.GL_FALSE, _COMPONENTS * _FLOAT_SIZE, 0
            )
            gl.glEnableVertexAttribArray(location)

    def release(self) -> None:
        """Free any GPU objects this mesh created."""
        for resource in (self._vao, self._points_vbo, self._colors_vbo):
            if resource is not None:
                resource.delete()
        self._vao = self._points_vbo = self._colors_vbo = None