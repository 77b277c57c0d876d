"""Boolean operations on polygon-soup solids.

A ``Solid`` is a flat list of polygons bounding a closed volume.  Each
boolean operator clones both operands, builds a BSP tree from each
clone, combines the two trees with a fixed sequence of clip and invert
steps, and flattens the result into a new ``Solid``.  Operands are
never modified.
"""

from __future__ import annotations

import logging

from bspcsg.bsp import Node, Polygon
from bspcsg.geom import epsilon

logger = logging.getLogger(__name__)


class Solid:
    """A closed volume represented by its boundary polygons."""

    def __init__(self, polygons=None):
        self.polygons = list(polygons) if polygons else []

    def __repr__(self):
        return "Solid({} polygons)".format(len(self.polygons))

    @classmethod
    def from_polygons(cls, polygons) -> "Solid":
        """wrap ``polygons`` without copying them"""
        sld = cls()
        sld.polygons = polygons
        return sld

    def to_polygons(self) -> list[Polygon]:
        return self.polygons

    def clone(self) -> "Solid":
        return Solid.from_polygons([p.clone() for p in self.polygons])

    def is_empty(self) -> bool:
        return not self.polygons

    def _trees(self, other, tol):
        return Node(self.clone().polygons, tol), Node(other.clone().polygons, tol)

    def union(self, other: "Solid", tol: float = epsilon) -> "Solid":
        """Return the space inside either solid.

        ::

            +-------+            +-------+
            |       |            |       |
            |   A   |            |       |
            |    +--+----+   =   |       +----+
            +----+--+    |       +----+       |
                 |   B   |            |       |
                 |       |            |       |
                 +-------+            +-------+
        """
        if other.is_empty() or self.is_empty():
            result = self.clone() if other.is_empty() else other.clone()
            logger.debug('union with empty operand, %d polygons', len(result.polygons))
            return result

        a, b = self._trees(other, tol)
        a.clip_to(b)
        b.clip_to(a)
        b.invert()
        b.clip_to(a)
        b.invert()
        a.build(b.all_polygons())
        result = Solid.from_polygons(a.all_polygons())
        logger.debug('union: %d + %d polygons -> %d',
                     len(self.polygons), len(other.polygons), len(result.polygons))
        return result

    def subtract(self, other: "Solid", tol: float = epsilon) -> "Solid":
        """Return the space inside this solid and outside ``other``.

        ::

            +-------+            +-------+
            |       |            |       |
            |   A   |            |       |
            |    +--+----+   =   |    +--+
            +----+--+    |       +----+
                 |   B   |
                 |       |
                 +-------+
        """
        if self.is_empty() or other.is_empty():
            result = self.clone()
            logger.debug('subtract with empty operand, %d polygons', len(result.polygons))
            return result

        a, b = self._trees(other, tol)
        a.invert()
        a.clip_to(b)
        b.clip_to(a)
        b.invert()
        b.clip_to(a)
        b.invert()
        a.build(b.all_polygons())
        a.invert()
        result = Solid.from_polygons(a.all_polygons())
        logger.debug('subtract: %d - %d polygons -> %d',
                     len(self.polygons), len(other.polygons), len(result.polygons))
        return result

    def intersect(self, other: "Solid", tol: float = epsilon) -> "Solid":
        """Return the space inside both solids.

        ::

            +-------+
            |       |
            |   A   |
            |    +--+----+   =   +--+
            +----+--+    |       +--+
                 |   B   |
                 |       |
                 +-------+
        """
        if self.is_empty() or other.is_empty():
            logger.debug('intersect with empty operand')
            return Solid()

        a, b = self._trees(other, tol)
        a.invert()
        b.clip_to(a)
        b.invert()
        a.clip_to(b)
        b.clip_to(a)
        a.build(b.all_polygons())
        a.invert()
        result = Solid.from_polygons(a.all_polygons())
        logger.debug('intersect: %d & %d polygons -> %d',
                     len(self.polygons), len(other.polygons), len(result.polygons))
        return result

    def inverse(self) -> "Solid":
        """Return the complement: same surface, inside and outside swapped."""
        sld = self.clone()
        for p in sld.polygons:
            p.flip()
        return sld


_OPERATIONS = {
    'union': Solid.union,
    'difference': Solid.subtract,
    'subtract': Solid.subtract,
    'intersection': Solid.intersect,
    'intersect': Solid.intersect,
}


def solid_boolean(a: Solid, b: Solid, operation: str, tol: float = epsilon) -> Solid:
    """Apply the boolean ``operation`` named by a string to ``a`` and ``b``."""
    op = _OPERATIONS.get(operation)
    if op is None:
        raise ValueError(f'unsupported solid boolean operation {operation!r}')
    return op(a, b, tol)


__all__ = ['Solid', 'solid_boolean']
