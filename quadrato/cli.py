from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence, Tuple

from .arcs import ARC_PROFILES
from .cells import (FootprintConfig, VoxelConfig, construct_footprint_quadrata,
                    construct_voxel_quadrata)
from .mesh import Mesh
from .stl import save_stl

logger = logging.getLogger(__name__)

DEMO_FOOTPRINT = "0,0 10,0 20,0 20,10 20,20 10,20 5,10"
DEMO_LEVELS = "0 12 40 48 60 68 90 98 120 128 135"

_DEF_HELP = """
Examples:
  python -m quadrato --out voxels.stl
  python -m quadrato --x 5 --y 5 --z 10 --height 20 --width 20 --divisions 8 --out tower.stl
  python -m quadrato --x 3 --y 3 --z 3 --random --seed 7 --profile gothic --out gothic.stl
  python -m quadrato --mode footprint --radius 3 --out footprint.stl
  python -m quadrato --mode footprint --xy "0,0 10,0 10,10 0,10" --levels "0 12 24" --out box.stl
"""


def _parse_xy(text: str) -> List[Tuple[float, float]]:
    pts = []
    for item in text.split():
        x, y = item.split(",")
        pts.append((float(x), float(y)))
    return pts


def _parse_levels(text: str) -> List[float]:
    return [float(z) for z in text.split()]


def build(args: argparse.Namespace) -> Mesh:
    weld = not args.no_weld
    if args.mode == "voxel":
        config = VoxelConfig(args.x, args.y, args.z, args.height, args.width,
                             inset_bottom=args.t0, inset_top=args.t1, arc_divisions=args.divisions,
                             arc_radius=args.radius, randomize_spacing=args.random,
                             arc_profile=args.profile, seed=args.seed)
        return construct_voxel_quadrata(config, weld=weld)
    config = FootprintConfig(_parse_xy(args.xy), _parse_levels(args.levels),
                             inset_bottom=args.t0, inset_top=args.t1, arc_divisions=args.divisions,
                             arc_radius=args.radius, arc_profile=args.profile)
    return construct_footprint_quadrata(config, weld=weld)


def _cli(argv: Optional[Sequence[str]] = None) -> None:
    p = argparse.ArgumentParser(prog="quadrato", description="quadrato: arched voxel lattice to STL",
                                epilog=_DEF_HELP, formatter_class=argparse.RawTextHelpFormatter)
    p.add_argument("--mode", choices=["voxel", "footprint"], default="voxel")
    p.add_argument("--out", required=True, help="Output path (.stl, ASCII)")
    p.add_argument("--name", default="quadrato", help="Solid name written to the STL")
    # voxel grid
    p.add_argument("--x", type=int, default=2)
    p.add_argument("--y", type=int, default=2)
    p.add_argument("--z", type=int, default=2)
    p.add_argument("--height", type=float, default=12.0)
    p.add_argument("--width", type=float, default=10.0)
    p.add_argument("--random", action="store_true", help="Jitter the grid spacing")
    p.add_argument("--seed", type=int)
    # footprint
    p.add_argument("--xy", default=DEMO_FOOTPRINT, help='Footprint as "x,y x,y ..."')
    p.add_argument("--levels", default=DEMO_LEVELS, help='Ascending z levels as "z z ..."')
    # shared
    p.add_argument("--t0", type=float, default=2.0, help="Bottom / side inset")
    p.add_argument("--t1", type=float, default=2.0, help="Top inset")
    p.add_argument("--divisions", type=int, default=12)
    p.add_argument("--radius", type=float)
    p.add_argument("--profile", choices=sorted(ARC_PROFILES), default="quarter")
    p.add_argument("--no-weld", action="store_true", help="Skip vertex welding")
    p.add_argument("--verbose", "-v", action="store_true")

    args = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        mesh = build(args)
    except ValueError as e:
        raise SystemExit(str(e))

    save_stl(args.out, mesh, args.name)
    logger.info("wrote %s (%d vertices, %d faces)", args.out, len(mesh.vertices), len(mesh.faces))


if __name__ == "__main__":
    _cli()
