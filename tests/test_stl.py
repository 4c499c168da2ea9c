import math

import pytest

from quadrato.mesh import Mesh
from quadrato.stl import save_stl, stl_ascii
from quadrato.vectors import v_cross, v_norm, v_sub


def _floats(line, prefix):
    assert line.startswith(prefix)
    return tuple(float(x) for x in line[len(prefix):].split())


def test_single_triangle_document():
    tri = [(0.0, 0.0, 0.0), (2.0, 0.5, 0.0), (0.25, 1.5, 1.0)]
    text = stl_ascii(Mesh(tri, [(0, 1, 2)]), name="tri")
    lines = text.strip().splitlines()

    assert lines[0] == "solid tri"
    assert lines[-1] == "endsolid tri"
    assert text.count("facet normal") == 1
    assert text.count("endfacet") == 1
    assert lines[2] == "outer loop"
    assert lines[6] == "endloop"
    assert lines[7] == "endfacet"

    expected = v_norm(v_cross(v_sub(tri[1], tri[0]), v_sub(tri[2], tri[0])))
    assert _floats(lines[1], "facet normal ") == pytest.approx(expected, abs=1e-6)
    for line, v in zip(lines[3:6], tri):
        assert _floats(line, "vertex ") == pytest.approx(v, abs=1e-6)


def test_quads_are_split(unit_quad):
    text = stl_ascii(unit_quad)
    assert text.startswith("solid quadrato\n")
    assert text.endswith("endsolid quadrato\n")
    assert text.count("facet normal 0.000000 0.000000 1.000000") == 2
    assert text.count("vertex ") == 6


def test_degenerate_triangle_has_zero_normal():
    text = stl_ascii(Mesh([(0, 0, 0), (1, 1, 1), (2, 2, 2)], [(0, 1, 2)]))
    normal = _floats(text.splitlines()[1], "facet normal ")
    assert all(math.isfinite(c) and c == 0 for c in normal)


def test_empty_mesh():
    assert stl_ascii(Mesh(), name="empty") == "solid empty\nendsolid empty\n"


def test_save_stl(tmp_path, unit_quad):
    path = tmp_path / "quad.stl"
    save_stl(str(path), unit_quad, name="plate")
    data = path.read_text(encoding="utf-8")
    assert data == stl_ascii(unit_quad, name="plate")
