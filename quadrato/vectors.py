from __future__ import annotations

import math
from typing import Sequence, Tuple

Vec3 = Tuple[float, float, float]
Vec2 = Tuple[float, float]

# shared tolerance for every colinearity / coincidence test in the package
EPSILON = 1e-4

# -----------------------------
# Small vector utilities
# -----------------------------

def v_add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def v_sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def v_scale(a: Vec3, s: float) -> Vec3:
    return (a[0] * s, a[1] * s, a[2] * s)


def v_dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def v_cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def v_len(a: Vec3) -> float:
    return math.sqrt(v_dot(a, a))


def v_norm(a: Vec3) -> Vec3:
    l = v_len(a)
    if l == 0:
        return (0.0, 0.0, 0.0)
    return (a[0] / l, a[1] / l, a[2] / l)


def v_resize(a: Vec3, length: float) -> Vec3:
    """Same direction as ``a``, scaled to ``length``."""
    return v_scale(v_norm(a), length)


def v_angle(a: Vec3, b: Vec3) -> float:
    """Unsigned angle between two directions, in radians."""
    c = v_dot(v_norm(a), v_norm(b))
    return math.acos(max(-1.0, min(1.0, c)))


def centroid(vs: Sequence[Vec3]) -> Vec3:
    n = len(vs)
    return (
        sum(v[0] for v in vs) / n,
        sum(v[1] for v in vs) / n,
        sum(v[2] for v in vs) / n,
    )


# -----------------------------
# Direction predicates
# -----------------------------

def are_colinear(a: Vec3, b: Vec3) -> bool:
    """True when ``a`` and ``b`` lie on one line through the origin.

    A zero-length input is colinear with everything.
    """
    return v_len(v_cross(a, b)) < EPSILON


def are_parallel(a: Vec3, b: Vec3) -> bool:
    return are_colinear(a, b) and v_dot(a, b) > 0


def are_anti_parallel(a: Vec3, b: Vec3) -> bool:
    return are_colinear(a, b) and v_dot(a, b) < 0


# -----------------------------
# Polygon helpers
# -----------------------------

def _check_polygon(polygon: Sequence[Vec3]) -> None:
    if len(polygon) < 2:
        raise ValueError("Polygon must have at least 2 vertices")


def polygon_is_colinear(polygon: Sequence[Vec3]) -> bool:
    """True when every edge of the polygon runs along its closing edge."""
    _check_polygon(polygon)
    closing = v_sub(polygon[0], polygon[-1])
    for p, q in zip(polygon, polygon[1:]):
        if not are_colinear(v_sub(q, p), closing):
            return False
    return True


def polygon_normal(polygon: Sequence[Vec3]) -> Vec3:
    """Lazy normal from the first, second and last vertex only.

    Only meaningful for (near) planar polygons.
    """
    _check_polygon(polygon)
    p0 = polygon[0]
    return v_norm(v_cross(v_sub(polygon[1], p0), v_sub(polygon[-1], p0)))
