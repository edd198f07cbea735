"""Reader for the vertex and face records of Wavefront OBJ files."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, List, Union

from meshview.mesh import Mesh

log = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid face index: {text!r}")
    return int(match.group(1))


def _parse_vertex(fields: List[str]) -> List[float]:
    coords = [float(value) for value in fields[:3]]
    return coords + [0.0] * (3 - len(coords))


def _parse_face(fields: List[str]) -> List[int]:
    face = [_to_int(head) - 1 for head in (f.split("/", 1)[0] for f in fields) if head]
    triangles: List[int] = []
    for i in range(1, len(face) - 1):
        triangles += [face[i + 1], face[i], face[0]]
    return triangles


def _reorder(vertices: List[List[float]], indices: Iterable[int]) -> List[float]:
    result: List[float] = []
    for index in indices:
        if 0 <= index < len(vertices):
            result += vertices[index]
        else:
            log.error("Invalid vertex index: %d", index)
            result += [0.0, 0.0, 0.0]
    return result


def parse(content: str) -> Mesh:
    """Build a mesh from OBJ text, triangulating polygon faces as fans."""
    vertices: List[List[float]] = []
    indices: List[int] = []
    for line in content.splitlines():
        if not line or line.startswith("#"):
            continue
        fields = line.split()
        if not fields:
            continue
        kind, rest = fields[0], fields[1:]
        if kind == "v":
            vertices.append(_parse_vertex(rest))
        elif kind == "f":
            indices += _parse_face(rest)
    return Mesh(_reorder(vertices, indices))


def load(path: Union[str, Path]) -> Mesh:
    """Read and parse the OBJ file at ``path``."""
    log.info("Loading %s", path)
    try:
        content = Path(path).read_text()
    except OSError:
        log.error("Failed to load: %s", path)
        raise
    return parse(content)