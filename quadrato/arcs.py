from __future__ import annotations

import math
from typing import Callable, Dict, List, Optional, Sequence

from .numeric import remap_number_array
from .vectors import Vec2, Vec3, v_add, v_scale

UVs = List[Vec2]

# --------------------------
# Arc parametrizations (UV)
# --------------------------

def map_uvs(uvs: Sequence[Vec2], lo: float = 0.0, hi: float = 1.0) -> UVs:
    """Rescale u and v independently onto ``[lo, hi]``.

    The origin (0, 0) takes part in the range but is not returned.
    """
    us = remap_number_array([0.0] + [u for u, _ in uvs], lo, hi)
    vs = remap_number_array([0.0] + [v for _, v in uvs], lo, hi)
    return list(zip(us[1:], vs[1:]))


def simple_arc(divisions: int, max_angle: Optional[float] = None) -> UVs:
    """``divisions`` samples of ``(1 - cos t, sin t)`` for t in (0, max_angle].

    Defaults to a quarter circle. An explicit ``max_angle`` is normalised so
    the arc still ends at (1, 1).
    """
    step = (math.pi * 0.5 if max_angle is None else max_angle) / divisions
    uvs = [(1.0 - math.cos(step * i), math.sin(step * i)) for i in range(1, divisions + 1)]
    if max_angle is not None:
        return map_uvs(uvs)
    return uvs


def gothic_arc(divisions: int, steepness: float = 1.0) -> UVs:
    """Pointed arc; the default sweeps pi / 3."""
    return simple_arc(divisions, math.pi * steepness / 3.0)


def double_arc(divisions: int) -> UVs:
    """Two half-size quarter arcs in a row (``2 * divisions`` samples)."""
    uvs = simple_arc(divisions)
    return [(u * 0.5, v * 0.5) for u, v in uvs] + [(0.5 + u * 0.5, 0.5 + v * 0.5) for u, v in uvs]


ARC_PROFILES: Dict[str, Callable[[int], UVs]] = {
    "quarter": simple_arc,
    "gothic": gothic_arc,
    "double": double_arc,
}


def arc_profile(name: str, divisions: int) -> UVs:
    try:
        profile = ARC_PROFILES[name]
    except KeyError:
        raise ValueError(f"Unknown arc profile: {name!r} (expected one of {', '.join(ARC_PROFILES)})") from None
    return profile(divisions)


# -------------------
# Lifting UVs to 3D
# -------------------

def lift_arc(base: Vec3, h_dir: Vec3, v_dir: Vec3, uvs: Sequence[Vec2]) -> List[Vec3]:
    """Polyline starting at ``base`` followed by ``base + h_dir*u + v_dir*v`` per UV.

    ``base`` always comes first; callers index into the result relying on it.
    """
    return [base] + [v_add(base, v_add(v_scale(h_dir, u), v_scale(v_dir, v))) for u, v in uvs]


def arc_segment(base: Vec3, arc_base: Vec3, h_dir: Vec3, v_dir: Vec3, uvs: Sequence[Vec2]) -> List[Vec3]:
    """Leg profile: ``base + h_dir``, ``base``, then the arc lifted from ``arc_base``.

    Always ``len(uvs) + 3`` points long.
    """
    return [v_add(base, h_dir), base] + lift_arc(arc_base, h_dir, v_dir, uvs)
