#!/usr/bin/env python3
"""
Command-line boolean operations on STL solids.

Usage:
    python -m bspcsg OPERATION A.stl B.stl -o OUT.stl [--ascii] [--epsilon EPS]
                     [--translate-b X Y Z] [-v]

Examples:
    # Cut a hole through a block
    python -m bspcsg subtract block.stl pin.stl -o drilled.stl

    # Merge two parts, moving the second one first
    python -m bspcsg union a.stl b.stl --translate-b 0.5 0 0 -o merged.stl
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from bspcsg.geom import epsilon
from bspcsg.geometry_utils import solid_volume
from bspcsg.io.stl import read_stl, write_stl
from bspcsg.logging_config import setup_logging
from bspcsg.mesh import solid_from_mesh, solid_to_mesh
from bspcsg.solid import solid_boolean
from bspcsg.xform import Translation

logger = logging.getLogger("bspcsg.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='bspcsg', description='Boolean operations on STL solids.')
    parser.add_argument('operation', choices=['union', 'subtract', 'intersect'])
    parser.add_argument('a', type=Path, help='first operand (STL)')
    parser.add_argument('b', type=Path, help='second operand (STL)')
    parser.add_argument('-o', '--output', type=Path, required=True, help='result STL path')
    parser.add_argument('--ascii', action='store_true', help='write ASCII instead of binary STL')
    parser.add_argument('--epsilon', type=float, default=epsilon,
                        help=f'plane classification tolerance (default {epsilon})')
    parser.add_argument('--translate-b', type=float, nargs=3, metavar=('X', 'Y', 'Z'),
                        help='translate the second operand before the operation')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    if args.epsilon <= 0:
        logger.error("epsilon must be positive, got %s", args.epsilon)
        return 1

    try:
        a = read_stl(args.a)
        b = read_stl(args.b)
        if args.translate_b:
            verts, faces, normals = solid_to_mesh(b)
            b = solid_from_mesh(verts, faces, normals, matrix=Translation(args.translate_b))
        logger.info("%s: %d and %d polygons", args.operation, len(a.polygons), len(b.polygons))
        result = solid_boolean(a, b, args.operation, tol=args.epsilon)
        write_stl(result, args.output, binary=not args.ascii)
    except (ValueError, OSError) as exc:
        logger.error("%s failed: %s", args.operation, exc)
        return 1

    print(f"{args.output}: {len(result.polygons)} polygons, volume {solid_volume(result):.6g}")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
