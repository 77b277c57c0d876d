"""STL import and export for bspCSG solids."""

from __future__ import annotations

import logging
import re
import struct
from typing import Iterable, List

from bspcsg.bsp import Polygon, Vertex
from bspcsg.geometry_utils import Triangle, triangle_normal, triangles_from_mesh
from bspcsg.mesh import mesh_view
from bspcsg.solid import Solid

logger = logging.getLogger(__name__)

_HEADER_SIZE = 80
_STRUCT_TRIANGLE = struct.Struct('<12fH')

_FLOAT = r'([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)'
_FACET = re.compile(
    r'facet\s+normal\s+' + r'\s+'.join([_FLOAT] * 3) + r'\s+outer\s+loop\s+'
    + r'\s+'.join(r'vertex\s+' + r'\s+'.join([_FLOAT] * 3) for _ in range(3))
    + r'\s+endloop\s+endfacet',
    re.IGNORECASE,
)


def write_stl(sld: Solid, path_or_file, *, binary: bool = True, name: str = 'bspCSG') -> None:
    """Write the fan triangles of ``sld`` to STL.

    ``path_or_file`` can be a filesystem path or an open stream (binary
    for ``binary=True``, text otherwise).
    """

    triangles = list(triangles_from_mesh(mesh_view(sld)))
    if hasattr(path_or_file, 'write'):
        _write(triangles, path_or_file, name, binary)
    else:
        with open(path_or_file, 'wb' if binary else 'w', encoding=None if binary else 'ascii') as stream:
            _write(triangles, stream, name, binary)
    logger.debug("wrote %d triangles (%s)", len(triangles), 'binary' if binary else 'ascii')


def _write(triangles: List[Triangle], stream, name: str, binary: bool) -> None:
    if binary:
        header = name[:_HEADER_SIZE].encode('ascii', errors='replace').ljust(_HEADER_SIZE, b' ')
        stream.write(header)
        stream.write(struct.pack('<I', len(triangles)))
        for tri in triangles:
            stream.write(_STRUCT_TRIANGLE.pack(*tri.normal, *tri.v0, *tri.v1, *tri.v2, 0))
        return

    lines = [f"solid {name}"]
    for tri in triangles:
        lines.append(f"  facet normal {tri.normal[0]:.9e} {tri.normal[1]:.9e} {tri.normal[2]:.9e}")
        lines.append("    outer loop")
        for v in (tri.v0, tri.v1, tri.v2):
            lines.append(f"      vertex {v[0]:.9e} {v[1]:.9e} {v[2]:.9e}")
        lines.append("    endloop")
        lines.append("  endfacet")
    lines.append(f"endsolid {name}")
    stream.write("\n".join(lines) + "\n")


def _is_binary_stl(data: bytes) -> bool:
    """Binary STL is an 80-byte header, a count, then 50 bytes per facet.

    ASCII files start with ``solid`` but so do some binary headers, so
    the size check decides.
    """
    if len(data) < 84:
        return False
    count = struct.unpack('<I', data[80:84])[0]
    if len(data) == 84 + count * 50:
        return True
    return not data[:_HEADER_SIZE].lstrip().lower().startswith(b'solid')


def _parse_binary(data: bytes) -> Iterable[Triangle]:
    count = struct.unpack('<I', data[80:84])[0]
    if len(data) < 84 + count * 50:
        raise ValueError(f"truncated binary STL: {count} facets declared, {len(data)} bytes")
    for k in range(count):
        values = _STRUCT_TRIANGLE.unpack_from(data, 84 + k * 50)
        yield Triangle(normal=values[0:3], v0=values[3:6], v1=values[6:9], v2=values[9:12])


def _parse_ascii(text: str) -> Iterable[Triangle]:
    for match in _FACET.finditer(text):
        g = [float(x) for x in match.groups()]
        yield Triangle(normal=tuple(g[0:3]), v0=tuple(g[3:6]), v1=tuple(g[6:9]), v2=tuple(g[9:12]))


def read_stl(path_or_file) -> Solid:
    """Read a binary or ASCII STL file into a solid.

    Each facet becomes a triangle polygon whose vertex normals are the
    stored facet normal, or the geometric normal if none is stored.
    Zero-area facets are skipped with a warning.
    """

    if hasattr(path_or_file, 'read'):
        data = path_or_file.read()
        if isinstance(data, str):
            data = data.encode('utf-8')
    else:
        with open(path_or_file, 'rb') as f:
            data = f.read()

    if _is_binary_stl(data):
        triangles = _parse_binary(data)
    else:
        triangles = _parse_ascii(data.decode('utf-8', errors='replace'))

    polygons = []
    skipped = 0
    for tri in triangles:
        geometric = triangle_normal(tri.v0, tri.v1, tri.v2)
        if geometric is None:
            skipped += 1
            continue
        n = tri.normal if any(tri.normal) else geometric
        polygons.append(Polygon([
            Vertex([float(v[0]), float(v[1]), float(v[2]), 1.0],
                   [float(n[0]), float(n[1]), float(n[2]), 0.0])
            for v in (tri.v0, tri.v1, tri.v2)
        ]))

    if skipped:
        logger.warning("skipped %d degenerate STL facets", skipped)
    logger.debug("read %d facets from STL", len(polygons))
    return Solid(polygons)


__all__ = ['write_stl', 'read_stl']
