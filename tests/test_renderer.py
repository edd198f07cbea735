import logging

from meshview.entity import Entity
from meshview.material import Material
from meshview.mesh import Mesh
from meshview.renderer import Renderer


def test_add_entity_keeps_order():
    renderer = Renderer()
    first = Entity(Mesh.triangle(), Material(), object())
    second = Entity(Mesh.quad(), Material(), object())
    renderer.add_entity(first)
    renderer.add_entity(second)
    assert renderer.entities == [first, second]


def test_draw_without_camera_warns(caplog):
    renderer = Renderer()
    renderer.add_entity(Entity(Mesh.triangle(), Material(), object()))
    with caplog.at_level(logging.WARNING):
        renderer.draw()
    assert "No camera set!" in caplog.messages