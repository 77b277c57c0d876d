"""Conversion between solids and indexed triangle/polygon buffers.

These adapters sit at the boundary between the boolean engine and a
host mesh format.  Input meshes are expanded into independent
polygons (no shared vertices); output polygons are fan-triangulated
from their first vertex into flat ``numpy`` buffers.
"""

from __future__ import annotations

import logging
from typing import Iterator, Sequence, Tuple

import numpy as np

from bspcsg.bsp import Polygon, Vertex
from bspcsg.geometry_utils import Vec3, fan_triangles, triangle_normal
from bspcsg.solid import Solid
from bspcsg.xform import normal_matrix

logger = logging.getLogger(__name__)

TriTuple = Tuple[Vec3, Vec3, Vec3, Vec3]


def _as_points(array, name):
    arr = np.asarray(array, dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"{name} must have shape (N, 3), got {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} contains non-finite values")
    return arr


def _transform(arr, m):
    """apply a 4x4 array to rows of 3D points (w=1)"""
    homo = np.hstack([arr, np.ones((arr.shape[0], 1))])
    return (homo @ m.T)[:, :3]


def solid_from_mesh(vertices, faces: Sequence[Sequence[int]], normals=None, matrix=None) -> Solid:
    """Build a solid from an indexed mesh.

    ``vertices`` is an ``(N, 3)`` array-like of positions and ``faces``
    a sequence of vertex-index lists, each a convex planar polygon wound
    counter-clockwise seen from outside.  ``normals`` optionally gives
    one normal per vertex; otherwise every corner of a face takes the
    face's geometric normal.  ``matrix`` is an optional
    ``bspcsg.xform.Matrix`` applied to positions, with normals carried
    by its normal matrix and renormalised.
    """

    verts = _as_points(vertices, "vertices")
    norms = None
    if normals is not None:
        norms = _as_points(normals, "normals")
        if norms.shape != verts.shape:
            raise ValueError(f"normals shape {norms.shape} does not match vertices {verts.shape}")

    if matrix is not None:
        verts = _transform(verts, matrix.as_array())
        if norms is not None:
            norms = norms @ normal_matrix(matrix).as_array()[:3, :3].T
            lengths = np.linalg.norm(norms, axis=1, keepdims=True)
            lengths[lengths == 0.0] = 1.0
            norms = norms / lengths

    count = verts.shape[0]
    polygons = []
    for fi, face in enumerate(faces):
        idx = [int(i) for i in face]
        if len(idx) < 3:
            raise ValueError(f"face {fi} has fewer than three vertices")
        if min(idx) < 0 or max(idx) >= count:
            raise ValueError(f"face {fi} references a vertex outside 0..{count - 1}")
        if norms is None:
            n = triangle_normal(verts[idx[0]], verts[idx[1]], verts[idx[2]])
            if n is None:
                raise ValueError(f"face {fi} is degenerate")
            corner_normals = [n] * len(idx)
        else:
            corner_normals = [norms[i] for i in idx]
        polygon_verts = []
        for i, n in zip(idx, corner_normals):
            p = verts[i]
            polygon_verts.append(Vertex([float(p[0]), float(p[1]), float(p[2]), 1.0],
                                        [float(n[0]), float(n[1]), float(n[2]), 0.0]))
        polygons.append(Polygon(polygon_verts))

    logger.debug("built solid from mesh: %d vertices, %d polygons", count, len(polygons))
    return Solid(polygons)


def solid_to_mesh(sld: Solid):
    """Flatten a solid into ``(vertices, faces, normals)`` arrays.

    Every polygon contributes its own vertices.  Faces are triangles
    fanning out from each polygon's first vertex; ``faces`` is an
    ``(M, 3)`` int64 array indexing ``vertices`` and ``normals``.
    """

    verts = []
    norms = []
    faces = []
    for polygon in sld.polygons:
        offset = len(verts)
        for v in polygon.vertices:
            verts.append(v.pos[:3])
            norms.append(v.normal[:3])
        for i in range(2, len(polygon.vertices)):
            faces.append([offset, offset + i - 1, offset + i])

    return (np.asarray(verts, dtype=float).reshape(-1, 3),
            np.asarray(faces, dtype=np.int64).reshape(-1, 3),
            np.asarray(norms, dtype=float).reshape(-1, 3))


def mesh_view(sld: Solid) -> Iterator[TriTuple]:
    """Yield the fan triangles of a solid as ``(normal, v0, v1, v2)``.

    Normals are geometric unit normals.  Vertices are ``(x, y, z)``
    tuples.  Zero-area triangles are skipped silently.
    """

    for polygon in sld.polygons:
        for v0, v1, v2 in fan_triangles(polygon):
            n = triangle_normal(v0, v1, v2)
            if n is None:
                continue
            yield n, v0, v1, v2


__all__ = ['solid_from_mesh', 'solid_to_mesh', 'mesh_view']
