from axion.events import CreateEntity, Entity, EventQueue, RemoveEntity


def test_read_returns_events_in_order():
    queue = EventQueue()
    queue.write(CreateEntity.CIRCLE)
    queue.write(CreateEntity.RECTANGLE)
    queue.write(CreateEntity.CONVEX_POLYGON)
    assert queue.read() == [
        CreateEntity.CIRCLE,
        CreateEntity.RECTANGLE,
        CreateEntity.CONVEX_POLYGON,
    ]


def test_read_drains_queue():
    queue = EventQueue()
    queue.write(RemoveEntity(target=Entity(4)))
    assert len(queue) == 1
    assert queue.read() == [RemoveEntity(target=Entity(4))]
    assert queue.read() == []
    assert len(queue) == 0


def test_events_written_after_read_are_kept():
    queue = EventQueue()
    queue.write(CreateEntity.CIRCLE)
    queue.read()
    queue.write(CreateEntity.RECTANGLE)
    assert queue.read() == [CreateEntity.RECTANGLE]


def test_remove_entity_equality():
    assert RemoveEntity(Entity(1)) == RemoveEntity(Entity(1))
    assert RemoveEntity(Entity(1)).target == 1


def test_create_entity_kinds_pass_through_queue():
    queue = EventQueue()
    for kind in CreateEntity:
        queue.write(kind)
    assert {kind.name for kind in queue.read()} == {"CIRCLE", "RECTANGLE", "CONVEX_POLYGON"}