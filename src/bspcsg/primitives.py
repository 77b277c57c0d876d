## parametric solids for bspCSG

"""
==================================================
Parametric solids
==================================================

Builders for simple closed solids.  Every face is an independent
convex polygon wound counter-clockwise when seen from outside, so the
results can be fed straight into the boolean operators.

"""

import math

from bspcsg.bsp import Polygon, Vertex
from bspcsg.geom import add, isgoodnum, point, vect
from bspcsg.solid import Solid

# corner indices and outward normals for the six faces of a box.
# Corner i has x on the max side if bit 0 is set, y if bit 1, z if bit 2.
_BOX_FACES = [
    ([0, 4, 6, 2], (-1, 0, 0)),
    ([1, 3, 7, 5], (1, 0, 0)),
    ([0, 1, 5, 4], (0, -1, 0)),
    ([2, 6, 7, 3], (0, 1, 0)),
    ([0, 2, 3, 1], (0, 0, -1)),
    ([4, 5, 7, 6], (0, 0, 1)),
]


def prism(length, width, height, center=point(0, 0, 0)):
    """axis-aligned box of the given x, y and z extents centred on ``center``"""
    for x in (length, width, height):
        if not isgoodnum(x) or x <= 0:
            raise ValueError('bad box dimension: {}'.format(x))
    half = (length / 2.0, width / 2.0, height / 2.0)

    def corner(i):
        return point(center[0] + half[0] * (1 if i & 1 else -1),
                     center[1] + half[1] * (1 if i & 2 else -1),
                     center[2] + half[2] * (1 if i & 4 else -1))

    polygons = []
    for indices, normal in _BOX_FACES:
        polygons.append(Polygon([Vertex(corner(i), vect(*normal)) for i in indices]))
    return Solid(polygons)


def cube(size=1.0, center=point(0, 0, 0)):
    """cube with edge length ``size`` centred on ``center``"""
    return prism(size, size, size, center)


def sphere(radius=1.0, center=point(0, 0, 0), slices=16, stacks=8):
    """
    Latitude/longitude sphere.  ``slices`` is the number of segments
    around the y axis, ``stacks`` the number from pole to pole.  Faces
    touching a pole are triangles, the rest quads.
    """
    if not isgoodnum(radius) or radius <= 0:
        raise ValueError('bad sphere radius: {}'.format(radius))
    if slices < 3 or stacks < 2:
        raise ValueError('sphere needs at least 3 slices and 2 stacks')

    def vertex(u, v):
        theta = u * 2.0 * math.pi
        phi = v * math.pi
        d = vect(math.cos(theta) * math.sin(phi),
                 math.cos(phi),
                 math.sin(theta) * math.sin(phi))
        return Vertex(add(center, [d[0] * radius, d[1] * radius, d[2] * radius]), d)

    polygons = []
    for i in range(slices):
        for j in range(stacks):
            verts = [vertex(i / slices, j / stacks)]
            if j > 0:
                verts.append(vertex((i + 1) / slices, j / stacks))
            if j < stacks - 1:
                verts.append(vertex((i + 1) / slices, (j + 1) / stacks))
            verts.append(vertex(i / slices, (j + 1) / stacks))
            polygons.append(Polygon(verts))
    return Solid(polygons)


def cylinder(radius=1.0, height=2.0, center=point(0, 0, 0), slices=16):
    """z-aligned cylinder centred on ``center``, approximated by a prism
    over a regular ``slices``-gon"""
    if not isgoodnum(radius) or radius <= 0:
        raise ValueError('bad cylinder radius: {}'.format(radius))
    if not isgoodnum(height) or height <= 0:
        raise ValueError('bad cylinder height: {}'.format(height))
    if slices < 3:
        raise ValueError('cylinder needs at least 3 slices')

    z0 = center[2] - height / 2.0
    z1 = center[2] + height / 2.0
    angles = [i * 2.0 * math.pi / slices for i in range(slices)]
    ring = [(math.cos(a), math.sin(a)) for a in angles]

    def rim(k, z):
        c, s = ring[k % slices]
        return point(center[0] + radius * c, center[1] + radius * s, z)

    up = vect(0, 0, 1)
    down = vect(0, 0, -1)
    polygons = [
        Polygon([Vertex(rim(k, z1), vect(up)) for k in range(slices)]),
        Polygon([Vertex(rim(k, z0), vect(down)) for k in reversed(range(slices))]),
    ]
    for k in range(slices):
        n0 = vect(ring[k][0], ring[k][1], 0)
        n1 = vect(ring[(k + 1) % slices][0], ring[(k + 1) % slices][1], 0)
        polygons.append(Polygon([Vertex(rim(k, z0), n0),
                                 Vertex(rim(k + 1, z0), n1),
                                 Vertex(rim(k + 1, z1), vect(n1)),
                                 Vertex(rim(k, z1), vect(n0))]))
    return Solid(polygons)


__all__ = ['prism', 'cube', 'sphere', 'cylinder']
