import pytest

from quadrato.cells import VoxelConfig
from quadrato.mesh import Mesh


@pytest.fixture
def unit_quad():
    """Unit square in the XY plane, counter-clockwise seen from +z."""
    return Mesh([(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0)],
                [(0, 1, 2, 3)], name="quad")


@pytest.fixture
def single_voxel():
    return VoxelConfig(1, 1, 1, cell_height=12, cell_width=10,
                       inset_bottom=2, inset_top=2, arc_divisions=4)
