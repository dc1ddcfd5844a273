import pytest

from axion.buffers import ComponentTextBuffers, TransformBuffer
from axion.events import Entity
from axion.scene import Transform
from axion.shapes import CircleShape, Collider, ConvexPolygonShape, RectangleShape


def test_transform_buffer_starts_from_transform():
    buffers = ComponentTextBuffers()
    transform = Transform(translation=(1.2, 0.0, 0.0))
    buffer = buffers.transform_buffer(Entity(0), transform)
    assert buffer.pos_x == "1.2"
    assert float(buffer.pos_y) == 0.0
    assert "." not in buffer.pos_y
    assert buffer.scale_factor == "1"


def test_transform_buffer_is_kept_per_entity():
    buffers = ComponentTextBuffers()
    first = buffers.transform_buffer(Entity(3), Transform())
    first.pos_x = "7"
    again = buffers.transform_buffer(Entity(3), Transform(translation=(9.0, 9.0, 0.0)))
    assert again is first
    assert again.pos_x == "7"
    other = buffers.transform_buffer(Entity(4), Transform())
    assert other is not first


def test_save_writes_position_and_keeps_z():
    transform = Transform(translation=(0.0, 0.0, 5.0))
    buffer = TransformBuffer.from_transform(transform)
    buffer.pos_x = "12.5"
    buffer.pos_y = "-3"
    buffer.save(transform)
    assert transform.translation == (12.5, -3.0, 5.0)


def test_save_ignores_unparsable_fields():
    transform = Transform(translation=(2.0, 4.0, 0.0))
    buffer = TransformBuffer.from_transform(transform)
    buffer.pos_x = "abc"
    buffer.pos_y = " 8"
    buffer.scale_factor = "1_0"
    buffer.save(transform)
    assert transform.translation == (2.0, 4.0, 0.0)
    assert transform.scale == (1.0, 1.0, 1.0)


def test_save_multiplies_scale():
    transform = Transform(scale=(1.0, 2.0, 3.0))
    buffer = TransformBuffer.from_transform(transform)
    buffer.scale_factor = "2"
    buffer.save(transform)
    buffer.save(transform)
    assert transform.scale == (4.0, 8.0, 12.0)


def test_save_rotation_y_follows_position_y():
    transform = Transform()
    buffer = TransformBuffer.from_transform(transform)
    buffer.rot_x = "0.5"
    buffer.rot_y = "0.25"
    buffer.pos_y = "0.75"
    buffer.save(transform)
    assert transform.rotation[0] == 0.5
    assert transform.rotation[1] == 0.75
    assert transform.rotation[3] == 1.0


def test_round_trip_of_untouched_buffer_keeps_translation():
    transform = Transform(translation=(1.2, -0.001, 0.0))
    buffer = TransformBuffer.from_transform(transform)
    assert "e" not in buffer.pos_y
    buffer.save(transform)
    assert transform.translation[:2] == pytest.approx((1.2, -0.001))


def test_circle_buffer_holds_radius():
    buffers = ComponentTextBuffers()
    buffer = buffers.circle_buffer(Entity(1), Collider(CircleShape(radius=50.0)))
    assert float(buffer.radius) == 50.0
    assert "." not in buffer.radius
    assert buffers.circle_buffer(Entity(1), Collider(CircleShape(radius=1.0))) is buffer


def test_polygon_buffer_holds_radius_and_sides():
    buffers = ComponentTextBuffers()
    buffer = buffers.polygon_buffer(Entity(2), Collider(ConvexPolygonShape(circum_radius=50.0, sides=6)))
    assert float(buffer.circum_radius) == 50.0
    assert int(buffer.sides) == 6


def test_rectangle_buffer_holds_size():
    buffers = ComponentTextBuffers()
    buffer = buffers.rectangle_buffer(Entity(5), Collider(RectangleShape(width=50.0, height=100.0)))
    assert (float(buffer.width), float(buffer.height)) == (50.0, 100.0)
    assert Entity(5) in buffers.rectangles