"""Demonstration of bspCSG solid boolean operations.

Builds a pair of primitive solids, combines them and writes the
operands and the result to STL.

Examples:
    # Two overlapping cubes
    python solid_boolean_demo.py --shapes cube --operation union

    # A block with a hole drilled through it, written as ASCII
    python solid_boolean_demo.py --shapes box_hole --operation subtract --ascii
"""

import argparse
from pathlib import Path

from bspcsg.geom import point
from bspcsg.geometry_utils import solid_volume
from bspcsg.io.stl import write_stl
from bspcsg.primitives import cylinder, prism, sphere
from bspcsg.solid import solid_boolean


def _build_solids(kind: str):
    if kind == 'cube':
        a = prism(2, 2, 2)
        b = prism(2, 2, 2, center=point(0.75, 0.0, 0.0))
    elif kind == 'sphere':
        a = sphere(1.0)
        b = sphere(1.0, center=point(1.0, 0.0, 0.0))
    elif kind == 'box_hole':
        a = prism(2, 2, 2)
        b = cylinder(0.6, 3.0, slices=24)
    else:
        raise ValueError(f'unsupported shape kind: {kind!r}')
    return a, b


def main():
    parser = argparse.ArgumentParser(description='bspCSG boolean demo.')
    parser.add_argument('--shapes', choices=['cube', 'sphere', 'box_hole'], default='cube')
    parser.add_argument('--operation', choices=['union', 'subtract', 'intersect'], default='union')
    parser.add_argument('--output', type=Path, default=Path('boolean_demo'),
                        help='output directory')
    parser.add_argument('--ascii', action='store_true', help='write ASCII STL')
    args = parser.parse_args()

    a, b = _build_solids(args.shapes)
    result = solid_boolean(a, b, args.operation)

    args.output.mkdir(parents=True, exist_ok=True)
    for name, sld in (('a', a), ('b', b), (args.operation, result)):
        path = args.output / f'{args.shapes}_{name}.stl'
        write_stl(sld, path, binary=not args.ascii)
        print(f'{path}: {len(sld.polygons)} polygons, volume {solid_volume(sld):.6g}')


if __name__ == '__main__':
    main()
