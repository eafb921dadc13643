import logging

import numpy as np
import pytest

from octasphere.geometries import MeshBuilder, SubdivisionEngine, MAX_SUBDIVISIONS
from octasphere.geometries import clamp_subdivisions


def expected_vertex_count(k):
    return 6 + sum(3 * 8 * 4**j for j in range(k))


def make_engine(radius=1.0, subdivisions=0):
    return SubdivisionEngine(MeshBuilder(radius), subdivisions)


def test_setup_base():
    engine = make_engine(2)
    assert engine.state == "uninitialized"
    engine.setup_base()
    assert engine.state == "base_built"

    b = engine.builder
    assert b.vertex_count == 6
    assert b.triangle_count == 8

    s = 2 / np.sqrt(2)
    expected = [
        (0, 2, 0),
        (-s, 0, s),
        (s, 0, s),
        (-s, 0, -s),
        (s, 0, -s),
        (0, -2, 0),
    ]
    assert np.allclose(b.vertices(), expected)

    assert b.triangles().tolist() == [
        [0, 1, 2],
        [0, 3, 1],
        [0, 4, 3],
        [0, 2, 4],
        [2, 1, 5],
        [1, 3, 5],
        [3, 4, 5],
        [4, 2, 5],
    ]


def test_base_winding_is_outward():
    engine = make_engine()
    engine.setup_base()
    vertices = engine.builder.vertices().astype(np.float64)
    faces = vertices[engine.builder.triangles()]

    normals = np.cross(faces[:, 1] - faces[:, 0], faces[:, 2] - faces[:, 0])
    centers = faces.mean(axis=1)
    # All normals point the same way relative to the center of the sphere
    signs = np.sign(np.sum(normals * centers, axis=-1))
    assert len(set(signs.tolist())) == 1


def test_subdivide_once_order():
    engine = make_engine()
    engine.setup_base()
    engine.subdivide_once()
    assert engine.state == "subdividing"
    assert engine.rounds_done == 1

    b = engine.builder
    assert b.vertex_count == 6 + 3 * 8
    assert b.triangle_count == 32

    vertices = b.vertices().astype(np.float64)
    # First triangle was (0, 1, 2), its midpoints got indices 6, 7, 8
    for index, (i, j) in zip([6, 7, 8], [(0, 1), (1, 2), (2, 0)]):
        m = vertices[i] + vertices[j]
        m /= np.linalg.norm(m)
        assert np.allclose(vertices[index], m)

    assert b.triangles()[:4].tolist() == [
        [0, 6, 8],
        [6, 1, 7],
        [8, 7, 2],
        [6, 7, 8],
    ]
    # Second triangle was (0, 3, 1), its midpoints got indices 9, 10, 11
    assert b.triangles()[4:8].tolist() == [
        [0, 9, 11],
        [9, 3, 10],
        [11, 10, 1],
        [9, 10, 11],
    ]


def test_subdivision_duplicates_shared_midpoints():
    engine = make_engine()
    engine.setup_base()
    engine.subdivide_once()
    vertices = engine.builder.vertices()

    # Edge (0, 1) is shared by triangle (0, 1, 2) and (0, 3, 1). The midpoint
    # is added for both: index 6 (m12 of the first) and 11 (m31 of the second).
    assert np.allclose(vertices[6], vertices[11])


def test_counts_per_round():
    for k in range(MAX_SUBDIVISIONS + 1):
        engine = make_engine(1.5, k)
        engine.setup_base()
        engine.manage_subdivision()
        b = engine.builder
        assert engine.rounds_done == k
        assert b.triangle_count == 8 * 4**k
        assert b.vertex_count == expected_vertex_count(k)
        assert np.allclose(np.linalg.norm(b.vertices(), axis=-1), 1.5)


def test_no_forward_references():
    engine = make_engine(1, 3)
    engine.setup_base()
    vertex_count = engine.builder.vertex_count
    assert engine.builder.triangles().max() < vertex_count
    for _ in range(3):
        engine.subdivide_once()
        triangles = engine.builder.triangles()
        # New triangles only use existing vertices
        assert triangles.max() < engine.builder.vertex_count
        assert triangles.min() >= 0
        # Every round references all of the newly added vertices
        new = set(range(vertex_count, engine.builder.vertex_count))
        assert new.issubset(set(triangles.flat))
        vertex_count = engine.builder.vertex_count


def test_vertices_are_append_only():
    engine = make_engine(1, 2)
    engine.setup_base()
    base = engine.builder.vertices().copy()
    engine.subdivide_once()
    round1 = engine.builder.vertices().copy()
    engine.subdivide_once()
    round2 = engine.builder.vertices()
    assert np.all(round1[:6] == base)
    assert np.all(round2[: len(round1)] == round1)


def test_corner_children_keep_winding():
    engine = make_engine()
    engine.setup_base()
    vertices = engine.builder.vertices().astype(np.float64)
    parent = vertices[[0, 1, 2]]
    parent_normal = np.cross(parent[1] - parent[0], parent[2] - parent[0])

    engine.subdivide_once()
    vertices = engine.builder.vertices().astype(np.float64)
    children = vertices[engine.builder.triangles()[:4]]
    for child in children:
        normal = np.cross(child[1] - child[0], child[2] - child[0])
        assert np.dot(normal, parent_normal) > 0


def test_clamping(caplog):
    with caplog.at_level(logging.WARNING, logger="octasphere"):
        engine = make_engine(1, 9)
    assert engine.subdivisions == MAX_SUBDIVISIONS
    assert any("maximum" in r.getMessage() for r in caplog.records)
    assert any("9" in r.getMessage() for r in caplog.records)

    engine.setup_base()
    engine.manage_subdivision()
    reference = make_engine(1, 6)
    reference.setup_base()
    reference.manage_subdivision()
    # 8 * 4**6 == 32768
    assert engine.builder.triangle_count == 8 * 4**6
    assert engine.builder.triangle_count == reference.builder.triangle_count
    assert engine.builder.vertex_count == reference.builder.vertex_count


def test_no_warning_without_clamping(caplog):
    with caplog.at_level(logging.WARNING, logger="octasphere"):
        for k in range(MAX_SUBDIVISIONS + 1):
            assert clamp_subdivisions(k) == k
    assert not caplog.records


def test_subdivisions_check():
    with pytest.raises(ValueError):
        clamp_subdivisions(-1)
    with pytest.raises(TypeError):
        clamp_subdivisions(2.0)
    with pytest.raises(TypeError):
        clamp_subdivisions(True)
    assert clamp_subdivisions(np.int64(3)) == 3


def test_state_machine():
    engine = make_engine(1, 1)

    # Nothing before the base is built
    with pytest.raises(RuntimeError):
        engine.subdivide_once()
    with pytest.raises(RuntimeError):
        engine.manage_subdivision()
    with pytest.raises(RuntimeError):
        engine.finalize()

    engine.setup_base()
    with pytest.raises(RuntimeError):
        engine.setup_base()

    engine.manage_subdivision()
    assert engine.state == "subdividing"
    # manage_subdivision runs once, from the base
    with pytest.raises(RuntimeError):
        engine.manage_subdivision()

    mesh = engine.finalize("Done")
    assert engine.state == "finalized"
    assert mesh.name == "Done"
    assert mesh.triangle_count == 32

    for method in [engine.setup_base, engine.subdivide_once, engine.finalize]:
        with pytest.raises(RuntimeError):
            method()


def test_zero_rounds():
    engine = make_engine(1, 0)
    engine.setup_base()
    engine.manage_subdivision()
    assert engine.state == "base_built"
    mesh = engine.finalize()
    assert mesh.triangle_count == 8
    assert mesh.vertex_count == 6


def test_base_needs_empty_builder():
    b = MeshBuilder()
    b.add_vertex(1, 0, 0)
    engine = SubdivisionEngine(b)
    with pytest.raises(RuntimeError):
        engine.setup_base()
