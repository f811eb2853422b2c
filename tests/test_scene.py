from __future__ import annotations

from math import pi

import pytest

from zoom_fit.scene.scene import (
    IDENTITY,
    Edge,
    Face,
    Group,
    Transform,
    box_edges,
    collect_points,
    walk,
)


def test_edges_and_faces_contribute_vertices_once() -> None:
    entities = [
        Edge((0.0, 0.0, 0.0), (1.0, 0.0, 0.0)),
        Edge((1.0, 0.0, 0.0), (1.0, 1.0, 0.0)),
        Face(((0.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0))),
        "not geometry",
    ]
    assert collect_points(entities) == [
        (0.0, 0.0, 0.0),
        (1.0, 0.0, 0.0),
        (1.0, 1.0, 0.0),
        (0.0, 1.0, 0.0),
    ]


def test_near_duplicates_within_tolerance_are_merged() -> None:
    entities = [
        Edge((0.0, 0.0, 0.0), (1.0, 0.0, 0.0)),
        Edge((1.0 + 1e-9, 0.0, 0.0), (2.0, 0.0, 0.0)),
    ]
    pts = collect_points(entities)
    assert len(pts) == 3
    assert pts[1] == (1.0, 0.0, 0.0)


def test_nested_transforms_compose_outer_first() -> None:
    edge = Edge((1.0, 0.0, 0.0), (2.0, 0.0, 0.0))
    inner = Group((edge,), Transform.scaling(2.0))
    outer = Group((inner,), Transform.translation(0.0, 5.0, 0.0))
    assert collect_points([outer]) == [(2.0, 5.0, 0.0), (4.0, 5.0, 0.0)]


def test_shared_definitions_are_expanded_per_instance() -> None:
    definition = (Edge((0.0, 0.0, 0.0), (0.0, 1.0, 0.0)),)
    a = Group(definition, Transform.translation(10.0, 0.0, 0.0))
    b = Group(definition, Transform.translation(-10.0, 0.0, 0.0))
    pts = collect_points([a, b])
    assert pts == [(10.0, 0.0, 0.0), (10.0, 1.0, 0.0), (-10.0, 0.0, 0.0), (-10.0, 1.0, 0.0)]


def test_walk_keeps_depth_first_order() -> None:
    e1 = Edge((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))
    e2 = Edge((0.0, 0.0, 0.0), (2.0, 0.0, 0.0))
    e3 = Edge((0.0, 0.0, 0.0), (3.0, 0.0, 0.0))
    tree = [Group((e1, Group((e2,)))), e3]
    assert [e for e, _ in walk(tree)] == [e1, e2, e3]


def test_deep_nesting_does_not_recurse() -> None:
    node: object = Edge((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))
    for _ in range(5000):
        node = Group((node,), Transform.translation(0.0, 0.0, 1.0))
    pts = collect_points([node])
    assert pts == [(0.0, 0.0, 5000.0), (1.0, 0.0, 5000.0)]


def test_transform_product_matches_sequential_application() -> None:
    a = Transform.translation(1.0, 2.0, 3.0) * Transform.rotation_y(pi / 2)
    p = (1.0, 0.0, 0.0)
    assert a.apply(p) == pytest.approx(
        Transform.translation(1.0, 2.0, 3.0).apply(Transform.rotation_y(pi / 2).apply(p))
    )
    assert (IDENTITY * a).apply(p) == pytest.approx(a.apply(p))


def test_box_edges_cover_eight_corners() -> None:
    edges = box_edges((0.0, 0.0, 0.0), (1.0, 2.0, 3.0))
    assert len(edges) == 12
    assert len(collect_points(edges)) == 8
