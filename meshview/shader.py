"""GLSL program built from a vertex and a fragment file, reloaded on change."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _load_file(path: Path) -> str:
    log.info("Loading %s", path)
    try:
        return path.read_text()
    except OSError:
        log.error("Failed to load: %s", path)
        return ""


def _link_program(vertex_source: str, fragment_source: str):
    from pyglet.graphics.shader import Shader as StageShader
    from pyglet.graphics.shader import ShaderProgram

    return ShaderProgram(
        StageShader(vertex_source, "vertex"),
        StageShader(fragment_source, "fragment"),
    )


class Shader:
    """Shader program whose source files are watched for modification.

    The GPU program is linked the first time it is needed.
    """

    def __init__(self, vertex_path: PathLike, fragment_path: PathLike) -> None:
        self.vertex_path = Path(vertex_path)
        self.fragment_path = Path(fragment_path)
        self._vertex_mtime = self.vertex_path.stat().st_mtime_ns
        self._fragment_mtime = self.fragment_path.stat().st_mtime_ns
        self.vertex_source = _load_file(self.vertex_path)
        self.fragment_source = _load_file(self.fragment_path)
        self._program = None

    def _program_or_link(self):
        if self._program is None:
            self._program = _link_program(self.vertex_source, self.fragment_source)
        return self._program

    def _vertex_changed(self) -> bool:
        current = self.vertex_path.stat().st_mtime_ns
        if current != self._vertex_mtime:
            self._vertex_mtime = current
            return True
        return False

    def _fragment_changed(self) -> bool:
        current = self.fragment_path.stat().st_mtime_ns
        if current != self._fragment_mtime:
            self._fragment_mtime = current
            return True
        return False

    def use(self) -> None:
        """Make this program current."""
        self._program_or_link().use()

    def refresh(self) -> bool:
        """Reload the sources if a file changed; return whether a reload happened."""
        if not (self._vertex_changed() or self._fragment_changed()):
            return False

        log.info("Shaders changed. Reloading...")
        self.vertex_source = _load_file(self.vertex_path)
        self.fragment_source = _load_file(self.fragment_path)

        if self._program is not None:
            from pyglet.graphics.shader import ShaderException

            try:
                new_program = _link_program(self.vertex_source, self.fragment_source)
            except ShaderException as exc:
                log.error("Shader linking error: %s", exc)
            else:
                self._program.delete()
                self._program = new_program
        return True

    @property
    def program_id(self) -> int:
        """OpenGL name of the linked program."""
        return self._program_or_link().id

    def release(self) -> None:
        """Delete the GPU program, if one was linked."""
        if self._program is not None:
            self._program.delete()
            self._program = None