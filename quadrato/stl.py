from __future__ import annotations

import logging
from typing import List

from .mesh import Mesh, face_normal, to_triangles

logger = logging.getLogger(__name__)


def _fmt(v) -> str:
    return f"{v[0]:.6f} {v[1]:.6f} {v[2]:.6f}"


def stl_ascii(mesh: Mesh, name: str = "quadrato") -> str:
    """ASCII STL document for ``mesh``; quads are split first, one facet per triangle."""
    tris = to_triangles(mesh)
    lines: List[str] = [f"solid {name}"]
    for a, b, c in tris.faces:
        vs = [tris.vertices[a], tris.vertices[b], tris.vertices[c]]
        lines.append(f"facet normal {_fmt(face_normal(vs))}")
        lines.append("outer loop")
        lines.extend(f"vertex {_fmt(v)}" for v in vs)
        lines.append("endloop")
        lines.append("endfacet")
    lines.append(f"endsolid {name}")
    logger.debug("wrote %d facets for solid %r", len(tris.faces), name)
    return "\n".join(lines) + "\n"


def save_stl(path: str, mesh: Mesh, name: str = "quadrato") -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(stl_ascii(mesh, name))
