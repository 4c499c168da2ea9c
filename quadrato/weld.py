"""
Vertex welding through a coarse spatial hash.

Independently generated patches repeat the vertices along the edges they
share. The weld pass collapses them without any topological bookkeeping:

1. pad the bounding box by ``EPSILON`` on every side and split each axis into
   64 slots, one alphabet symbol per slot;
2. bucket every vertex under its three-symbol key;
3. inside each bucket compare vertices against the representatives kept so
   far and merge anything closer than ``EPSILON`` (lowest index wins);
4. turn the merge map into a compacting remap and rewrite the faces.

Only vertices sharing a bucket are compared. Duplicates that straddle a
bucket boundary stay separate; this is an accepted approximation of the
scheme, not something to repair here.
"""
from __future__ import annotations

import logging
import math
from typing import Dict, List, Sequence, Tuple

import numpy as np

from .vectors import EPSILON, Vec3

logger = logging.getLogger(__name__)

HASH_SYMBOLS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-."
HASH_RESOLUTION = len(HASH_SYMBOLS)

Face = Tuple[int, ...]


def bounding_box(vertices: Sequence[Vec3], pad: float = EPSILON) -> Tuple[np.ndarray, np.ndarray]:
    """Padded minimum corner and per-axis scale onto ``[0, HASH_RESOLUTION)``."""
    pts = np.asarray(vertices, dtype=float).reshape(-1, 3)
    lo = pts.min(axis=0) - pad
    span = pts.max(axis=0) + pad - lo
    return lo, HASH_RESOLUTION / span


def bucket_keys(vertices: Sequence[Vec3]) -> List[str]:
    if not len(vertices):
        return []
    lo, scale = bounding_box(vertices)
    pts = np.asarray(vertices, dtype=float).reshape(-1, 3)
    slots = np.floor((pts - lo) * scale).astype(int)
    slots = np.clip(slots, 0, HASH_RESOLUTION - 1)
    return [HASH_SYMBOLS[i] + HASH_SYMBOLS[j] + HASH_SYMBOLS[k] for i, j, k in slots.tolist()]


def hash_buckets(vertices: Sequence[Vec3]) -> Dict[str, List[int]]:
    buckets: Dict[str, List[int]] = {}
    for i, key in enumerate(bucket_keys(vertices)):
        buckets.setdefault(key, []).append(i)
    return buckets


def merge_map(vertices: Sequence[Vec3], eps: float = EPSILON) -> List[int]:
    """Index of the representative every vertex merges into (itself when kept)."""
    index_map = list(range(len(vertices)))
    for indexes in hash_buckets(vertices).values():
        kept: List[int] = []
        for i in indexes:
            v = vertices[i]
            for k in kept:
                if math.dist(vertices[k], v) < eps:
                    index_map[i] = k
                    break
            else:
                kept.append(i)
    return index_map


def compact_map(index_map: Sequence[int]) -> List[int]:
    """Fold merges and the removal of discarded vertices into one remap.

    Kept vertices shift down by the number of vertices discarded before them;
    discarded vertices take their representative's shifted index.
    """
    remap: List[int] = []
    shift = 0
    for i, target in enumerate(index_map):
        if target != i:
            shift += 1
            remap.append(remap[target])
        else:
            remap.append(i - shift)
    return remap


def weld_vertices(vertices: Sequence[Vec3], eps: float = EPSILON) -> Tuple[List[Vec3], List[int]]:
    """Returns the kept vertices (original order) and the remap for face indices."""
    index_map = merge_map(vertices, eps)
    kept = [v for i, v in enumerate(vertices) if index_map[i] == i]
    return kept, compact_map(index_map)


def weld(vertices: Sequence[Vec3], faces: Sequence[Face],
         eps: float = EPSILON) -> Tuple[List[Vec3], List[Face]]:
    """Welded copies of ``vertices`` and ``faces``; the inputs are left untouched."""
    if not len(vertices):
        return list(vertices), [tuple(f) for f in faces]
    kept, remap = weld_vertices(vertices, eps)
    new_faces = [tuple(remap[i] for i in f) for f in faces]
    logger.debug("reduced vertex count from %d to %d", len(vertices), len(kept))
    return kept, new_faces
