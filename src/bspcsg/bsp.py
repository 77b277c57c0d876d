## binary space partitioning primitives for bspCSG
## Copyright (c) 2026 bspCSG contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
==================================================
BSP tree primitives for polygon-soup solids
==================================================

``Vertex``, ``Plane`` and ``Polygon`` are the geometric primitives;
``Node`` is a node of a binary space partitioning tree built from
polygons.  A node owns a splitting plane, the polygons lying in that
plane, and two optional children holding whatever lies in front of
and behind it.

The tree encodes a solid: a node with no back child stands for solid
space behind its plane, a node with no front child for empty space in
front of it.  ``Node.clip_to`` removes from one tree everything
inside the solid of another, and ``Node.invert`` swaps solid and
empty space.  The boolean operators in ``bspcsg.solid`` are fixed
sequences of these two operations.

Tree traversals use an explicit stack rather than recursion, so tree
depth is bounded by memory and not by the interpreter stack.

"""

from bspcsg.geom import cross, dot, epsilon, lerp, negate, point, sub, unit, vect, vstr

## classification of a point or polygon against a plane.  FRONT | BACK
## is SPANNING, which is how split_polygon detects a crossing edge.
COLINEAR = 0
FRONT = 1
BACK = 2
SPANNING = 3


class Vertex:
    """A polygon corner: a position point and a normal vector.

    The normal is carried and interpolated but never renormalised.
    """

    def __init__(self, pos, normal):
        self.pos = pos
        self.normal = normal

    def __repr__(self):
        return "Vertex({},{})".format(vstr(self.pos), vstr(self.normal))

    def clone(self):
        return Vertex(point(self.pos), vect(self.normal))

    def flip(self):
        """reverse the normal in place"""
        self.normal = negate(self.normal)

    def interpolate(self, other, t):
        """new vertex a fraction ``t`` of the way from this one to ``other``"""
        return Vertex(lerp(self.pos, other.pos, t),
                      lerp(self.normal, other.normal, t))


class Plane:
    """Oriented plane ``dot(normal, p) == w`` with a unit normal."""

    def __init__(self, normal, w):
        self.normal = normal
        self.w = w

    def __repr__(self):
        return "Plane({},{})".format(vstr(self.normal), self.w)

    @classmethod
    def from_points(cls, a, b, c):
        """Plane through three points, normal following the right-hand
        rule for the winding ``a``, ``b``, ``c``.
        """
        try:
            n = unit(cross(sub(b, a), sub(c, a)))
        except ValueError:
            raise ValueError('degenerate plane, points are collinear: {} {} {}'.format(
                vstr(a), vstr(b), vstr(c))) from None
        return cls(n, dot(n, a))

    def clone(self):
        return Plane(vect(self.normal), self.w)

    def flip(self):
        """reverse orientation in place, keeping the same point set"""
        self.normal = negate(self.normal)
        self.w = -self.w

    def distance(self, pos):
        """signed distance of ``pos`` from the plane, positive in front"""
        return dot(self.normal, pos) - self.w

    def classify_vertex(self, pos, tol=epsilon):
        d = self.distance(pos)
        if d < -tol:
            return BACK
        if d > tol:
            return FRONT
        return COLINEAR

    def classify_side(self, polygon, tol=epsilon):
        """classify a whole polygon; on-plane vertices don't vote"""
        ctype = COLINEAR
        for v in polygon.vertices:
            ctype |= self.classify_vertex(v.pos, tol)
        return ctype

    def split_polygon(self, polygon, coplanar_front, coplanar_back, front, back, tol=epsilon):
        """Sort ``polygon`` into one of four output lists, splitting it if
        it crosses this plane.

        A polygon in the plane goes to ``coplanar_front`` when it faces
        the same way as the plane and to ``coplanar_back`` otherwise.  A
        polygon wholly on one side goes, unmodified, to ``front`` or
        ``back``.  A spanning polygon is cut along the plane and each
        piece with at least three vertices is appended to ``front`` or
        ``back``; smaller pieces are dropped.  The output lists may be
        the same list.
        """
        ctype = self.classify_side(polygon, tol)

        if ctype == COLINEAR:
            if dot(self.normal, polygon.plane.normal) > 0:
                coplanar_front.append(polygon)
            else:
                coplanar_back.append(polygon)
        elif ctype == FRONT:
            front.append(polygon)
        elif ctype == BACK:
            back.append(polygon)
        else:
            f = []
            b = []
            verts = polygon.vertices
            types = [self.classify_vertex(v.pos, tol) for v in verts]
            n = len(verts)
            for i in range(n):
                j = (i + 1) % n
                ti = types[i]
                tj = types[j]
                vi = verts[i]
                vj = verts[j]
                if ti != BACK:
                    f.append(vi)
                if ti != FRONT:
                    b.append(vi.clone() if ti != BACK else vi)
                if (ti | tj) == SPANNING:
                    t = (self.w - dot(self.normal, vi.pos)) / dot(self.normal, sub(vj.pos, vi.pos))
                    v = vi.interpolate(vj, t)
                    f.append(v)
                    b.append(v.clone())
            if len(f) >= 3:
                front.append(Polygon(f))
            if len(b) >= 3:
                back.append(Polygon(b))


class Polygon:
    """A convex, planar loop of at least three vertices.

    The plane is computed once from the first three vertices.  Vertex
    positions must not be changed afterwards; build a new polygon
    instead.
    """

    def __init__(self, vertices):
        if len(vertices) < 3:
            raise ValueError('polygon needs at least three vertices, got {}'.format(len(vertices)))
        self.vertices = vertices
        self.plane = Plane.from_points(vertices[0].pos, vertices[1].pos, vertices[2].pos)

    def __repr__(self):
        return "Polygon({})".format(self.vertices)

    def clone(self):
        return Polygon([v.clone() for v in self.vertices])

    def flip(self):
        """turn the polygon over: reverse winding, vertex normals and plane"""
        self.vertices.reverse()
        for v in self.vertices:
            v.flip()
        self.plane.flip()


class Node:
    """Node of a BSP tree.

    ``plane`` is the splitting plane, ``polygons`` the polygons lying in
    it, ``front`` and ``back`` the subtrees for the two half-spaces.  A
    node without a plane is empty.  ``tol`` is the classification
    tolerance used for this node and every node created below it.
    """

    def __init__(self, polygons=None, tol=epsilon):
        self.plane = None
        self.front = None
        self.back = None
        self.polygons = []
        self.tol = tol
        if polygons:
            self.build(polygons)

    def __repr__(self):
        return "Node({},{} polygons)".format(self.plane, len(self.polygons))

    def _nodes(self):
        """every node of this subtree, parent before front before back"""
        result = []
        stack = [self]
        while stack:
            node = stack.pop()
            result.append(node)
            if node.back is not None:
                stack.append(node.back)
            if node.front is not None:
                stack.append(node.front)
        return result

    def clone(self):
        root = Node(tol=self.tol)
        stack = [(self, root)]
        while stack:
            src, dst = stack.pop()
            dst.plane = src.plane.clone() if src.plane is not None else None
            dst.polygons = [p.clone() for p in src.polygons]
            if src.front is not None:
                dst.front = Node(tol=src.front.tol)
                stack.append((src.front, dst.front))
            if src.back is not None:
                dst.back = Node(tol=src.back.tol)
                stack.append((src.back, dst.back))
        return root

    def build(self, polygons):
        """Insert ``polygons`` into the tree.

        An empty node adopts a copy of the first polygon's plane, so the
        tree shape follows input order.  Polygons in a node's plane stay
        at that node; everything else is split and passed down, creating
        children as needed.  The polygons become owned by the tree.
        """
        stack = [(self, list(polygons))]
        while stack:
            node, polys = stack.pop()
            if not polys:
                continue
            if node.plane is None:
                node.plane = polys[0].plane.clone()
            front = []
            back = []
            for p in polys:
                node.plane.split_polygon(p, node.polygons, node.polygons, front, back, node.tol)
            if front:
                if node.front is None:
                    node.front = Node(tol=node.tol)
                stack.append((node.front, front))
            if back:
                if node.back is None:
                    node.back = Node(tol=node.tol)
                stack.append((node.back, back))

    def clip_polygons(self, polygons):
        """Return the parts of ``polygons`` outside the solid of this tree.

        Fragments that reach a node with no back child on its back side
        are inside the solid and are dropped.  An empty tree clips
        nothing and returns a copy of the input list.
        """
        if self.plane is None:
            return list(polygons)
        result = []
        stack = [(self, list(polygons))]
        while stack:
            node, polys = stack.pop()
            if node.plane is None:
                result.extend(polys)
                continue
            front = []
            back = []
            for p in polys:
                node.plane.split_polygon(p, front, back, front, back, node.tol)
            # back is pushed first so the front subtree is finished first
            if back and node.back is not None:
                stack.append((node.back, back))
            if front:
                if node.front is not None:
                    stack.append((node.front, front))
                else:
                    result.extend(front)
        return result

    def invert(self):
        """Turn the solid of this subtree inside out."""
        for node in self._nodes():
            for p in node.polygons:
                p.flip()
            if node.plane is not None:
                node.plane.flip()
            node.front, node.back = node.back, node.front

    def clip_to(self, bsp):
        """Remove every polygon of this subtree that lies inside ``bsp``."""
        for node in self._nodes():
            node.polygons = bsp.clip_polygons(node.polygons)

    def all_polygons(self):
        """Flatten the subtree back into a polygon list."""
        polygons = []
        for node in self._nodes():
            polygons.extend(node.polygons)
        return polygons
