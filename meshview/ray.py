"""Half-line in world space, with picking against entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

import numpy as np

from meshview.entity import Entity
from meshview.material import Material, RenderType
from meshview.mesh import Mesh
from meshview.shader import Shader
from meshview.vector3 import Vector3

BASIC_VERTEX_SHADER = Path("assets/shaders/basic_vert.glsl")
BASIC_FRAGMENT_SHADER = Path("assets/shaders/basic_frag.glsl")

_DETERMINANT_EPSILON = 1e-12


@dataclass
class Intersection:
    """A point where a ray meets an entity's surface."""

    point: Vector3
    entity: Entity
    distance: float


@dataclass
class Ray:
    """A ray with a unit direction and a set of entities it can hit."""

    position: Vector3 = field(default_factory=Vector3)
    direction: Vector3 = field(default_factory=Vector3)
    objects: List[Entity] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.direction = self.direction.normalized()

    def set(self, position: Vector3, direction: Vector3) -> None:
        """Move and re-aim the ray; the direction is normalised."""
        self.position = position
        self.direction = direction.normalized()

    def set_objects(self, objects: Iterable[Entity]) -> None:
        self.objects = list(objects)

    def _hit_distance(self, entity: Entity, length: float) -> Optional[float]:
        mesh = entity.mesh
        if mesh is None:
            return None
        count = mesh.vertex_count // 3 * 3
        if count == 0:
            return None

        local = mesh.vertices[: count * 3].reshape(-1, 3).astype(np.float64)
        homogeneous = np.hstack([local, np.ones((count, 1))])
        world = (homogeneous @ entity.model_matrix().T)[:, :3].reshape(-1, 3, 3)
        v0, v1, v2 = world[:, 0], world[:, 1], world[:, 2]

        origin = np.array(tuple(self.position), dtype=np.float64)
        direction = np.array(tuple(self.direction), dtype=np.float64)

        edge1 = v1 - v0
        edge2 = v2 - v0
        p = np.cross(direction, edge2)
        det = np.einsum("ij,ij->i", edge1, p)
        valid = np.abs(det) > _DETERMINANT_EPSILON
        inv = np.divide(1.0, det, out=np.zeros_like(det), where=valid)

        s = origin - v0
        u = np.einsum("ij,ij->i", s, p) * inv
        q = np.cross(s, edge1)
        v = (q @ direction) * inv
        t = np.einsum("ij,ij->i", edge2, q) * inv

        hit = valid & (u >= 0.0) & (v >= 0.0) & (u + v <= 1.0) & (t >= 0.0) & (t <= length)
        if not hit.any():
            return None
        return float(t[hit].min())

    def cast(self, length: float = 100.0) -> List[Intersection]:
        """Nearest hit on each object within ``length``, ordered by distance."""
        hits = []
        for entity in self.objects:
            distance = self._hit_distance(entity, length)
            if distance is not None:
                point = self.position + self.direction * distance
                hits.append(Intersection(point, entity, distance))
        hits.sort(key=lambda hit: hit.distance)
        return hits

    def visualization_mesh(self, length: float = 100.0) -> Mesh:
        """A two-vertex line from the origin, green at the start and red at the end."""
        end = self.position + self.direction.normalized(length)
        return Mesh(
            [*self.position, *end],
            [0.0, 1.0, 0.0, 1.0, 0.0, 0.0],
        )

    def visualization_entity(self, length: float = 100.0) -> Entity:
        """An entity that draws the ray as a line with the basic shader."""
        shader = Shader(BASIC_VERTEX_SHADER, BASIC_FRAGMENT_SHADER)
        material = Material(render_type=RenderType.LINES, wireframe=True)
        return Entity(self.visualization_mesh(length), material, shader)