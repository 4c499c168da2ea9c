"""
quadrato: arched voxel lattices.

Every grid unit becomes a *cell*: four arched legs, one per corner, rising
from a ring pulled in by ``inset_bottom`` to a ring pulled down by
``inset_top`` through an arc of radius ``radius``. Exterior side faces are
closed by *caps*, and wherever two exterior faces meet at an angle a mitred
*corner fillet* bridges their offset edges.

All patches are built with local indices, joined into one mesh and welded at
the end, which collapses the seams the patches share.

Two entry points share the machinery:

    mesh = construct_voxel_quadrata(VoxelConfig(2, 2, 2, cell_height=12, cell_width=10,
                                                inset_bottom=2, inset_top=2, arc_divisions=12))

    mesh = construct_footprint_quadrata(FootprintConfig(
        footprint=[(0, 0), (10, 0), (20, 0), (20, 10), (20, 20), (10, 20), (5, 10)],
        z_levels=[0, 12, 40], inset_bottom=2, inset_top=2, arc_divisions=12, arc_radius=3))
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .arcs import ARC_PROFILES, UVs, arc_profile, arc_segment
from .mesh import Mesh, face_normal, join, loft
from .numeric import create_number_list, pairwise
from .vectors import (Vec2, Vec3, are_colinear, centroid, v_add, v_angle, v_norm, v_resize,
                      v_scale, v_sub)

logger = logging.getLogger(__name__)

# bottom corner 0, bottom corner 1, top corner 0, top corner 1
SideFace = Tuple[Vec3, Vec3, Vec3, Vec3]

# -------------
# Configuration
# -------------

def _check_insets(t0: float, t1: float, divisions: int, profile: str) -> None:
    if t0 < 0 or t1 < 0:
        raise ValueError("insets must be >= 0")
    if divisions < 1:
        raise ValueError("arc_divisions must be >= 1")
    if profile not in ARC_PROFILES:
        raise ValueError(f"Unknown arc profile: {profile!r}")


@dataclass
class VoxelConfig:
    """Regular grid of ``x_count * y_count * z_count`` cells centred on the origin.

    ``arc_radius`` defaults to ``cell_width / 2 - inset_bottom``.
    """
    x_count: int
    y_count: int
    z_count: int
    cell_height: float
    cell_width: float
    inset_bottom: float = 1.0
    inset_top: float = 1.0
    arc_divisions: int = 8
    arc_radius: Optional[float] = None
    randomize_spacing: bool = False
    arc_profile: str = "quarter"
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if min(self.x_count, self.y_count, self.z_count) < 1:
            raise ValueError("cell counts must be >= 1")
        if self.cell_height <= 0 or self.cell_width <= 0:
            raise ValueError("cell_height and cell_width must be > 0")
        _check_insets(self.inset_bottom, self.inset_top, self.arc_divisions, self.arc_profile)

    @property
    def radius(self) -> float:
        if self.arc_radius is not None:
            return self.arc_radius
        return self.cell_width * 0.5 - self.inset_bottom

    def grid(self) -> Tuple[List[float], List[float], List[float]]:
        """x, y and z coordinates; one rng serves all three axes."""
        rng = np.random.default_rng(self.seed)
        w, h = self.cell_width, self.cell_height
        xs = create_number_list(-w * 0.5 * self.x_count, w, self.x_count, self.randomize_spacing, rng)
        ys = create_number_list(-w * 0.5 * self.y_count, w, self.y_count, self.randomize_spacing, rng)
        zs = create_number_list(-h * 0.5 * self.z_count, h, self.z_count, self.randomize_spacing, rng)
        return xs, ys, zs


@dataclass
class FootprintConfig:
    """Footprint polygon (x, y) extruded through ascending ``z_levels``.

    ``arc_radius`` defaults to ``inset_bottom``.
    """
    footprint: Sequence[Vec2]
    z_levels: Sequence[float]
    inset_bottom: float = 1.0
    inset_top: float = 1.0
    arc_divisions: int = 8
    arc_radius: Optional[float] = None
    arc_profile: str = "quarter"

    def __post_init__(self) -> None:
        if len(self.footprint) < 3:
            raise ValueError("footprint needs at least 3 vertices")
        if len(self.z_levels) < 2:
            raise ValueError("z_levels needs at least 2 values")
        if any(z1 <= z0 for z0, z1 in pairwise(self.z_levels)):
            raise ValueError("z_levels must be strictly ascending")
        _check_insets(self.inset_bottom, self.inset_top, self.arc_divisions, self.arc_profile)

    @property
    def radius(self) -> float:
        if self.arc_radius is not None:
            return self.arc_radius
        return self.inset_bottom


# -----------------
# Patch builders
# -----------------

def arc_cell_segment(bottom: Vec3, top: Vec3, v_z: Vec3, h_dirs: Sequence[Vec3],
                     t0: float, t1: float, r: float, uvs: UVs) -> Mesh:
    """One arched leg standing on corner ``bottom``.

    ``h_dirs`` holds the half edge towards the previous corner, the vector to
    the cell centre and the half edge towards the next corner. The leg is a
    loft of three profiles, one along each of them.
    """
    vh0 = v_resize(h_dirs[0], t0)
    vh2 = v_resize(h_dirs[2], t0)
    vh1 = v_add(vh0, vh2)
    loc_r = v_resize(v_z, r)

    b_b = v_add(bottom, v_resize(v_z, t0))
    b_t = v_sub(top, v_resize(v_z, t1 + r))

    series = [
        arc_segment(v_add(b_b, vh), v_add(b_t, vh), v_sub(h, vh), loc_r, uvs)
        for vh, h in zip((vh0, vh1, vh2), h_dirs)
    ]
    return loft(series, name="leg")


def center_arc_cell(bottoms: Sequence[Vec3], tops: Sequence[Vec3], t0: float, t1: float,
                    r: float, uvs: UVs, center: Optional[Vec3] = None) -> Mesh:
    """Cell over the ring ``bottoms``/``tops``, one leg per ring vertex."""
    if center is None:
        center = centroid(bottoms)
    mesh = Mesh(name="cell")
    n = len(bottoms)
    for i in range(n):
        b = bottoms[i]
        h_dirs = (
            v_scale(v_sub(bottoms[i - 1], b), 0.5),
            v_sub(center, b),
            v_scale(v_sub(bottoms[(i + 1) % n], b), 0.5),
        )
        join(mesh, arc_cell_segment(b, tops[i], v_sub(tops[i], b), h_dirs, t0, t1, r, uvs))
    return mesh


def cell_cap(face: SideFace, t0: float, t1: float, r: float, uvs: UVs) -> Mesh:
    """Closes the arched opening of an exterior side face.

    Two offset lips follow the legs on either side of the face, ``t0`` out
    along the face normal; a ring of six points on the face outline and a fan
    under each arc fill the rest.
    """
    p0, p1, p2, p3 = face
    v_z = v_sub(p2, p0)
    vh = v_scale(v_sub(p1, p0), 0.5)
    vh0 = v_resize(vh, t0)
    vhn = v_resize((vh[1], -vh[0], vh[2]), t0)

    loc_b = v_resize(v_z, t0)
    loc_t = v_resize(v_z, t1 + r)
    loc_r = v_resize(v_z, r)

    p0_bo = v_add(v_add(p0, loc_b), vh0)
    p1_bo = v_sub(v_add(p1, loc_b), vh0)
    p0_to = v_add(v_sub(p2, loc_t), vh0)
    p1_to = v_sub(v_sub(p3, loc_t), vh0)

    side = v_sub(vh, vh0)
    back = v_scale(side, -1.0)

    lip_a = arc_segment(v_add(p0_bo, vhn), v_add(p0_to, vhn), side, loc_r, uvs)
    lip_b = arc_segment(v_add(p1_bo, vhn), v_add(p1_to, vhn), back, loc_r, uvs)

    mesh = loft([arc_segment(p0_bo, p0_to, side, loc_r, uvs), lip_a], name="cap")
    join(mesh, loft([lip_b, arc_segment(p1_bo, p1_to, back, loc_r, uvs)]))

    # ring 0..5, lip_a from 6, lip_b from 6 + n
    o = len(mesh.vertices)
    n = len(lip_a)
    mid_b = v_scale(v_add(p0, p1), 0.5)
    mid_t = v_scale(v_add(p2, p3), 0.5)
    mesh.vertices.extend(v_add(p, vhn) for p in (p0, mid_b, p1, p2, mid_t, p3))
    mesh.vertices.extend(lip_a)
    mesh.vertices.extend(lip_b)

    mesh.faces.extend([
        (o + 1, o + 0, o + 7, o + 6),
        (o + 0, o + 3, o + 8, o + 7),
        (o + n + 5, o + 3, o + 4),
        (o + 2, o + 1, o + n + 6, o + n + 7),
        (o + 5, o + 2, o + n + 7, o + n + 8),
        (o + n + 5, o + 4, o + 5),
    ])
    for i in range(len(uvs)):
        mesh.faces.append((o + 9 + i, o + 8 + i, o + 3))
        mesh.faces.append((o + n + 8 + i, o + n + 9 + i, o + 5))
    return mesh


def corner_fillet(f0: SideFace, f1: SideFace, t0: float) -> Mesh:
    """Mitred strip where face ``f0`` ends and face ``f1`` starts.

    The middle profile sits on the bisector of both normals at
    ``t0 / cos(angle / 2)`` so it meets both offset faces.
    """
    n0 = v_scale(face_normal(f0), t0)
    n1 = v_scale(face_normal(f1), t0)
    half = v_angle(n0, n1) * 0.5
    mitre = v_scale(v_norm(v_add(n0, n1)), t0 / math.cos(half))
    return loft([
        [v_add(f0[3], n0), v_add(f0[1], n0)],
        [v_add(f0[3], mitre), v_add(f0[1], mitre)],
        [v_add(f1[2], n1), v_add(f1[0], n1)],
    ], name="corner")


def ring_corners(ring: Sequence[SideFace]) -> List[Tuple[SideFace, SideFace]]:
    """Consecutive faces of a closed ring whose normals are not colinear."""
    return [(f0, f1) for f0, f1 in pairwise(ring, closed=True)
            if not are_colinear(face_normal(f0), face_normal(f1))]


def _side_face(a: Vec2, b: Vec2, z0: float, z1: float) -> SideFace:
    return ((a[0], a[1], z0), (b[0], b[1], z0), (a[0], a[1], z1), (b[0], b[1], z1))


def _finish(mesh: Mesh, cells: int, caps: int, corners: int, weld: bool) -> Mesh:
    logger.debug("assembled %d cells, %d caps, %d corners: %d vertices, %d faces",
                 cells, caps, corners, len(mesh.vertices), len(mesh.faces))
    return mesh.weld() if weld else mesh


# -------------
# Constructors
# -------------

def construct_voxel_variable_heights(xs: Sequence[float], ys: Sequence[float], zs: Sequence[float],
                                     t0: float = 1.0, t1: float = 1.0, divisions: int = 8,
                                     r: float = 1.0, profile: str = "quarter",
                                     weld: bool = True) -> Mesh:
    """Voxel lattice over ascending grid coordinates ``xs``, ``ys`` and ``zs``."""
    uvs = arc_profile(profile, divisions)
    mesh = Mesh(name="quadrato")
    cells = 0

    for x0, x1 in pairwise(xs):
        for y0, y1 in pairwise(ys):
            for z0, z1 in pairwise(zs):
                bottoms = [(x0, y0, z0), (x1, y0, z0), (x1, y1, z0), (x0, y1, z0)]
                tops = [(x0, y0, z1), (x1, y0, z1), (x1, y1, z1), (x0, y1, z1)]
                center = ((x0 + x1) * 0.5, (y0 + y1) * 0.5, z0)
                join(mesh, center_arc_cell(bottoms, tops, t0, t1, r, uvs, center))
                cells += 1

    # boundary walked counter-clockwise seen from +z
    x_first, x_last = xs[0], xs[-1]
    y_first, y_last = ys[0], ys[-1]
    outline: List[Tuple[Vec2, Vec2]] = []
    outline += [((x0, y_first), (x1, y_first)) for x0, x1 in pairwise(xs)]
    outline += [((x_last, y0), (x_last, y1)) for y0, y1 in pairwise(ys)]
    outline += [((x1, y_last), (x0, y_last)) for x0, x1 in reversed(pairwise(xs))]
    outline += [((x_first, y1), (x_first, y0)) for y0, y1 in reversed(pairwise(ys))]

    caps = corners = 0
    for z0, z1 in pairwise(zs):
        ring = [_side_face(a, b, z0, z1) for a, b in outline]
        for f0, f1 in ring_corners(ring):
            join(mesh, corner_fillet(f0, f1, t0))
            corners += 1
        for f in ring:
            join(mesh, cell_cap(f, t0, t1, r, uvs))
            caps += 1

    return _finish(mesh, cells, caps, corners, weld)


def construct_variable_footprint(footprint: Sequence[Vec2], zs: Sequence[float],
                                 t0: float = 1.0, t1: float = 1.0, divisions: int = 8,
                                 r: float = 1.0, profile: str = "quarter",
                                 weld: bool = True) -> Mesh:
    """Extrudes ``footprint`` through ``zs``, one ring-shaped cell per z interval."""
    uvs = arc_profile(profile, divisions)
    mesh = Mesh(name="quadrato")
    caps = corners = 0

    for z0, z1 in pairwise(zs):
        bottoms = [(x, y, z0) for x, y in footprint]
        tops = [(x, y, z1) for x, y in footprint]
        join(mesh, center_arc_cell(bottoms, tops, t0, t1, r, uvs))

        ring = [_side_face(a, b, z0, z1) for a, b in pairwise(footprint, closed=True)]
        for f0, f1 in ring_corners(ring):
            join(mesh, corner_fillet(f0, f1, t0))
            corners += 1
        for f in ring:
            join(mesh, cell_cap(f, t0, t1, r, uvs))
            caps += 1

    return _finish(mesh, len(zs) - 1, caps, corners, weld)


def construct_voxel_quadrata(config: VoxelConfig, weld: bool = True) -> Mesh:
    xs, ys, zs = config.grid()
    return construct_voxel_variable_heights(
        xs, ys, zs, config.inset_bottom, config.inset_top, config.arc_divisions,
        config.radius, config.arc_profile, weld)


def construct_footprint_quadrata(config: FootprintConfig, weld: bool = True) -> Mesh:
    return construct_variable_footprint(
        config.footprint, config.z_levels, config.inset_bottom, config.inset_top,
        config.arc_divisions, config.radius, config.arc_profile, weld)
