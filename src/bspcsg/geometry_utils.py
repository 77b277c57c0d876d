"""Triangle and measurement helpers shared by the adapters and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple

from bspcsg.geom import cross, mag

Vec3 = Tuple[float, float, float]

## normals shorter than this are treated as degenerate
_DEGENERATE_TOL = 1e-12


@dataclass(frozen=True)
class Triangle:
    """Immutable triangle representation in XYZ space."""

    normal: Vec3
    v0: Vec3
    v1: Vec3
    v2: Vec3


def to_vec3(point_like: Sequence[float]) -> Vec3:
    """Return the XYZ components of a point or vector as a tuple."""

    if len(point_like) < 3:
        raise ValueError("value must have at least three components")
    return float(point_like[0]), float(point_like[1]), float(point_like[2])


def triangle_normal(v0: Sequence[float], v1: Sequence[float], v2: Sequence[float]) -> Vec3 | None:
    """Return the unit normal of a triangle or ``None`` if degenerate."""

    n = cross([v1[0] - v0[0], v1[1] - v0[1], v1[2] - v0[2]],
              [v2[0] - v0[0], v2[1] - v0[1], v2[2] - v0[2]])
    length = mag(n)
    if length <= _DEGENERATE_TOL:
        return None
    return (n[0] / length, n[1] / length, n[2] / length)


def triangle_area(v0: Sequence[float], v1: Sequence[float], v2: Sequence[float]) -> float:
    n = cross([v1[0] - v0[0], v1[1] - v0[1], v1[2] - v0[2]],
              [v2[0] - v0[0], v2[1] - v0[1], v2[2] - v0[2]])
    return 0.5 * mag(n)


def triangles_from_mesh(mesh: Iterable[Tuple[Vec3, Vec3, Vec3, Vec3]]) -> Iterator[Triangle]:
    """Convert ``mesh_view`` output into ``Triangle`` instances."""

    for normal, v0, v1, v2 in mesh:
        yield Triangle(normal=normal, v0=v0, v1=v1, v2=v2)


def fan_triangles(polygon) -> Iterator[Tuple[Vec3, Vec3, Vec3]]:
    """Split a convex polygon into triangles fanning out from vertex 0."""

    verts = [to_vec3(v.pos) for v in polygon.vertices]
    for i in range(1, len(verts) - 1):
        yield verts[0], verts[i], verts[i + 1]


def polygon_area(polygon) -> float:
    return sum(triangle_area(*tri) for tri in fan_triangles(polygon))


def solid_volume(sld) -> float:
    """Signed volume enclosed by a solid's polygons.

    Sums the signed volumes of the tetrahedra formed by the origin and
    each fan triangle.  Outward-wound closed surfaces give a positive
    result; an inverted solid gives a negative one.
    """

    total = 0.0
    for polygon in sld.polygons:
        for a, b, c in fan_triangles(polygon):
            total += (a[0] * (b[1] * c[2] - b[2] * c[1])
                      - a[1] * (b[0] * c[2] - b[2] * c[0])
                      + a[2] * (b[0] * c[1] - b[1] * c[0]))
    return total / 6.0


def solid_bbox(sld) -> list[Vec3] | None:
    """Return ``[min, max]`` corners of a solid, or ``None`` if empty."""

    points = [to_vec3(v.pos) for p in sld.polygons for v in p.vertices]
    if not points:
        return None
    return [tuple(min(p[i] for p in points) for i in range(3)),
            tuple(max(p[i] for p in points) for i in range(3))]


__all__ = [
    "Triangle",
    "Vec3",
    "to_vec3",
    "triangle_normal",
    "triangle_area",
    "triangles_from_mesh",
    "fan_triangles",
    "polygon_area",
    "solid_volume",
    "solid_bbox",
]
