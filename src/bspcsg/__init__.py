# -*- coding: utf-8 -*-
"""Boolean operations on polygon solids using BSP trees."""

from importlib.metadata import PackageNotFoundError, version

from bspcsg.bsp import BACK, COLINEAR, FRONT, SPANNING, Node, Plane, Polygon, Vertex
from bspcsg.solid import Solid, solid_boolean

try:
    __version__ = version("bspCSG")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

__all__ = [
    'COLINEAR', 'FRONT', 'BACK', 'SPANNING',
    'Vertex', 'Plane', 'Polygon', 'Node',
    'Solid', 'solid_boolean',
]
