"""
quadrato: procedural arched voxel lattices as indexed meshes.

Highlights
---------
• Mesh container with patch joining, triangulation and renderer buffers
• Arc profiles (quarter, gothic, double) lifted into 3D leg profiles
• Lattice generator over a voxel grid or an extruded footprint
• Spatial-hash vertex welding for the seams between patches
• ASCII STL export and a small CLI (python -m quadrato)
"""
from .arcs import double_arc, gothic_arc, lift_arc, simple_arc
from .cells import (FootprintConfig, VoxelConfig, construct_footprint_quadrata,
                    construct_variable_footprint, construct_voxel_quadrata,
                    construct_voxel_variable_heights)
from .mesh import Mesh, face_normal, flatten, join, loft, to_triangles, vertex_normals
from .numeric import create_number_list, remap_number_array
from .stl import save_stl, stl_ascii
from .vectors import are_anti_parallel, are_colinear, are_parallel

__all__ = [
    "Mesh", "join", "loft", "to_triangles", "flatten", "face_normal", "vertex_normals",
    "simple_arc", "gothic_arc", "double_arc", "lift_arc",
    "create_number_list", "remap_number_array",
    "are_parallel", "are_anti_parallel", "are_colinear",
    "VoxelConfig", "FootprintConfig", "construct_voxel_quadrata", "construct_footprint_quadrata",
    "construct_voxel_variable_heights", "construct_variable_footprint",
    "stl_ascii", "save_stl",
]
