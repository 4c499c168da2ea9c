"""
Indexed mesh container and the assembly primitives built on it.

A ``Mesh`` owns a list of vertices and a list of faces; each face is a tuple
of 3 (triangle) or 4 (quad) indices into ``vertices``. Patches are built with
their own zero-based indices and merged with :func:`join`, which re-bases the
incoming faces. Nothing plans indices globally.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

import numpy as np

from . import weld as _weld
from .vectors import Vec3, polygon_normal

Face = Tuple[int, ...]

# --------------
# Mesh container
# --------------

@dataclass
class Mesh:
    vertices: List[Vec3] = field(default_factory=list)
    faces: List[Face] = field(default_factory=list)
    name: str = "mesh"

    def copy(self) -> "Mesh":
        return Mesh(self.vertices.copy(), self.faces.copy(), self.name)

    # ---- composition ----
    def join(self, other: "Mesh") -> "Mesh":
        """Append ``other`` in place, shifting its faces past our vertices."""
        offset = len(self.vertices)
        self.vertices.extend(other.vertices)
        self.faces.extend(tuple(i + offset for i in f) for f in other.faces)
        return self

    def __add__(self, other: "Mesh") -> "Mesh":
        return self.copy().join(other)

    # ---- analysis ----
    def bounds(self) -> Tuple[Vec3, Vec3]:
        xs = [v[0] for v in self.vertices]
        ys = [v[1] for v in self.vertices]
        zs = [v[2] for v in self.vertices]
        return (min(xs), min(ys), min(zs)), (max(xs), max(ys), max(zs))

    def check_indices(self) -> "Mesh":
        n = len(self.vertices)
        for fi, f in enumerate(self.faces):
            for i in f:
                if not 0 <= i < n:
                    raise IndexError(f"face {fi} {f} references vertex {i}, mesh has {n} vertices")
        return self

    # ---- derived meshes ----
    def weld(self) -> "Mesh":
        """Copy with coincident vertices merged, see :mod:`quadrato.weld`."""
        vertices, faces = _weld.weld(self.vertices, self.faces)
        return Mesh(vertices, faces, self.name)

    def triangulated(self) -> "Mesh":
        return to_triangles(self)

    def flatten(self) -> Tuple[np.ndarray, np.ndarray]:
        return flatten(self)


# --------------------
# Assembly primitives
# --------------------

def join(mesh_a: Mesh, mesh_b: Mesh) -> Mesh:
    """Moves ``mesh_b`` into ``mesh_a`` and returns ``mesh_a``."""
    return mesh_a.join(mesh_b)


def loft(series: Sequence[Sequence[Vec3]], closed: bool = False, name: str = "loft") -> Mesh:
    """Quad strip through N vertex series of equal length L.

    Emits ``(N-1)*(L-1)`` quads ``[j*L+i+1, j*L+i, (j+1)*L+i, (j+1)*L+i+1]``;
    with ``closed`` each series pair gets one extra quad from position L-1
    back to position 0 (series shorter than 2 get none).
    """
    mesh = Mesh(name=name)
    if not series:
        return mesh
    length = len(series[0])
    for s in series:
        if len(s) != length:
            raise ValueError(f"loft series must share one length, got {len(s)} and {length}")
        mesh.vertices.extend(s)
    for j in range(len(series) - 1):
        a = j * length
        b = (j + 1) * length
        for i in range(length - 1):
            mesh.faces.append((a + i + 1, a + i, b + i, b + i + 1))
        if closed and length > 1:
            mesh.faces.append((a, a + length - 1, b + length - 1, b))
    return mesh


def to_triangles(mesh: Mesh) -> Mesh:
    """Quads ``[a, b, c, d]`` become ``[a, b, c]`` and ``[a, c, d]``."""
    tris: List[Face] = []
    for f in mesh.faces:
        if len(f) == 3:
            tris.append(tuple(f))
        elif len(f) == 4:
            a, b, c, d = f
            tris.append((a, b, c))
            tris.append((a, c, d))
        else:
            raise ValueError(f"face must be a triangle or a quad, got {len(f)} indices")
    return Mesh(list(mesh.vertices), tris, mesh.name)


def flatten(mesh: Mesh) -> Tuple[np.ndarray, np.ndarray]:
    """Flat ``(x, y, z, ...)`` positions and triangle-order indices for a renderer."""
    positions = np.asarray(mesh.vertices, dtype=np.float64).reshape(-1)
    tris = to_triangles(mesh).faces
    indices = np.asarray(tris, dtype=np.int64).reshape(-1)
    return positions, indices


def face_normal(polygon: Sequence[Vec3]) -> Vec3:
    """``normalize(cross(p1 - p0, p_last - p0))``; assumes a near planar face."""
    return polygon_normal(polygon)


def vertex_normals(positions: np.ndarray, indices: np.ndarray) -> np.ndarray:
    """Area-weighted per-vertex normals for flat buffers, shaped like ``positions``."""
    pts = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
    tris = np.asarray(indices, dtype=np.int64).reshape(-1, 3)
    normals = np.zeros_like(pts)
    if len(tris):
        a, b, c = pts[tris[:, 0]], pts[tris[:, 1]], pts[tris[:, 2]]
        fn = np.cross(b - a, c - a)
        for k in range(3):
            np.add.at(normals, tris[:, k], fn)
    lengths = np.linalg.norm(normals, axis=1)
    lengths[lengths == 0] = 1.0
    return (normals / lengths[:, None]).reshape(-1)
