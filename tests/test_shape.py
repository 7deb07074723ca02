import pytest

from warsector.core.camera import Camera
from warsector.core.projector import Projector
from warsector.core.shape import Shape

TRIANGLE = [[0, 0, 1000], [100, 0, 1000], [0, 100, 1000]]


def test_adjacency_lists_expand_to_edges_in_order() -> None:
    shape = Shape(TRIANGLE, [[0, [1, 2]], [1, [2]]])
    assert [(e.start_index, e.end_index) for e in shape.edges] == [(0, 1), (0, 2), (1, 2)]


def test_plain_pairs_are_accepted() -> None:
    shape = Shape(TRIANGLE, [[0, 1], [1, 2]])
    assert len(shape.edges) == 2


def test_edges_reference_vertices_by_identity() -> None:
    shape = Shape(TRIANGLE, [[0, [1]]])
    edge = shape.edges[0]
    assert edge.start is shape.vertices[0]
    assert edge.end is shape.vertices[1]


@pytest.mark.parametrize("edges", [[[0, [3]]], [[-1, [0]]], [[0, ["1"]]], [[0]]])
def test_malformed_topology_fails_at_construction(edges) -> None:
    with pytest.raises(ValueError):
        Shape(TRIANGLE, edges)


def test_vertex_with_wrong_arity_fails() -> None:
    with pytest.raises(ValueError):
        Shape([[0, 0]], [])


def test_project_caches_screen_point_on_each_vertex(camera: Camera,
                                                    projector: Projector) -> None:
    shape = Shape(TRIANGLE, [[0, [1, 2]]])
    assert shape.project(camera, projector) == 3
    assert shape.vertices[0].projection == pytest.approx((projector.origin_x, projector.origin_y))
    assert len(shape.segments()) == 2


def test_edge_to_vertex_behind_camera_is_not_drawn(camera: Camera,
                                                   projector: Projector) -> None:
    shape = Shape([[0, 0, 1000], [100, 0, 1000], [0, 0, -500]], [[0, [1, 2]], [1, [2]]])
    assert shape.project(camera, projector) == 2
    assert shape.vertices[2].projection is None
    segments = shape.segments()
    assert len(segments) == 1
    assert segments[0] == (shape.vertices[0].projection, shape.vertices[1].projection)


def test_projection_is_recomputed_when_camera_moves(camera: Camera,
                                                    projector: Projector) -> None:
    shape = Shape([[0, 0, 100]], [])
    shape.project(camera, projector)
    assert shape.vertices[0].projection is not None
    camera.move(1.0, "forwards")  # well past the vertex
    shape.project(camera, projector)
    assert shape.vertices[0].projection is None


def test_world_coordinates_are_read_only() -> None:
    shape = Shape(TRIANGLE, [])
    with pytest.raises(AttributeError):
        shape.vertices[0].x = 5.0
    with pytest.raises(ValueError):
        shape.coords[0, 0] = 5.0


def test_to_dict_regroups_adjacency() -> None:
    data = {'name': 'tri', 'vertices': TRIANGLE, 'edges': [[0, [1, 2]], [1, [2]]]}
    assert Shape.from_dict(data).to_dict() == {
        'name': 'tri',
        'vertices': [[float(c) for c in v] for v in TRIANGLE],
        'edges': [[0, [1, 2]], [1, [2]]],
    }


def test_coincident_vertices_stay_distinct(camera: Camera, projector: Projector) -> None:
    shape = Shape([[0, 0, 100], [0, 0, 100]], [[0, 1]])
    first, second = shape.vertices
    assert first is not second
    assert first != second
    shape.project(camera, projector)
    assert shape.edges[0].start is first and shape.edges[0].end is second
