import pytest

from bspcsg.bsp import BACK, COLINEAR, FRONT, SPANNING, Plane, Polygon, Vertex
from bspcsg.geom import dot, epsilon, mag, point, vect
from bspcsg.geometry_utils import polygon_area


def make_polygon(*pts, normal=(0, 0, 1)):
    return Polygon([Vertex(point(*p), vect(*normal)) for p in pts])


XY_PLANE = [(-1, -1, 0), (1, -1, 0), (1, 1, 0), (-1, 1, 0)]


def yz_plane():
    return Plane(vect(1, 0, 0), 0.0)


class TestVertex:

    def test_clone_is_independent(self):
        v = Vertex(point(1, 2, 3), vect(0, 0, 1))
        c = v.clone()
        c.pos[0] = 99
        c.flip()
        assert v.pos[0] == 1
        assert v.normal == [0, 0, 1, 0]

    def test_flip_negates_normal_only(self):
        v = Vertex(point(1, 2, 3), vect(0, 1, 0))
        v.flip()
        assert v.normal[:3] == [0, -1, 0]
        assert v.pos[:3] == [1, 2, 3]

    def test_interpolate(self):
        a = Vertex(point(0, 0, 0), vect(1, 0, 0))
        b = Vertex(point(2, 0, 0), vect(0, 1, 0))
        m = a.interpolate(b, 0.5)
        assert m.pos == [1.0, 0.0, 0.0, 1.0]
        # normals are interpolated, not renormalised
        assert m.normal == [0.5, 0.5, 0.0, 0.0]


class TestPlane:

    def test_from_points(self):
        p = Plane.from_points(point(0, 0, 2), point(1, 0, 2), point(0, 1, 2))
        assert p.normal[:3] == pytest.approx([0, 0, 1])
        assert mag(p.normal) == pytest.approx(1.0)
        assert p.w == pytest.approx(2.0)

    def test_from_collinear_points(self):
        with pytest.raises(ValueError):
            Plane.from_points(point(0, 0, 0), point(1, 1, 1), point(2, 2, 2))

    def test_flip_twice_is_identity(self):
        p = Plane.from_points(point(0.3, 0.1, 2), point(1, 0.7, 2.2), point(0, 1, 2.9))
        normal = list(p.normal)
        w = p.w
        p.flip()
        assert p.normal[:3] == [-normal[0], -normal[1], -normal[2]]
        assert p.w == -w
        p.flip()
        assert p.normal[:3] == normal[:3]
        assert p.w == w

    def test_clone_is_independent(self):
        p = yz_plane()
        c = p.clone()
        c.flip()
        assert p.normal[:3] == [1, 0, 0]
        assert p.w == 0.0

    @pytest.mark.parametrize("x,expected", [
        (0.0, COLINEAR),
        (0.9e-5, COLINEAR),
        (-0.9e-5, COLINEAR),
        (2e-5, FRONT),
        (-2e-5, BACK),
        (3.0, FRONT),
        (-3.0, BACK),
    ])
    def test_classify_vertex(self, x, expected):
        assert yz_plane().classify_vertex(point(x, 5, -7)) == expected

    def test_classify_vertex_custom_tolerance(self):
        p = yz_plane()
        assert p.classify_vertex(point(0.01, 0, 0)) == FRONT
        assert p.classify_vertex(point(0.01, 0, 0), tol=0.1) == COLINEAR

    def test_classify_side(self):
        p = yz_plane()
        assert p.classify_side(make_polygon(*XY_PLANE)) == SPANNING
        assert p.classify_side(make_polygon((0, 0, 0), (1, 0, 0), (1, 1, 0))) == FRONT
        assert p.classify_side(make_polygon((0, 0, 0), (0, 1, 0), (-1, 1, 0))) == BACK
        on_plane = make_polygon((0, 0, 0), (0, 1, 0), (0, 0, 1), normal=(1, 0, 0))
        assert p.classify_side(on_plane) == COLINEAR


class TestSplitPolygon:

    def _split(self, plane, polygon):
        bins = ([], [], [], [])
        plane.split_polygon(polygon, *bins)
        return bins

    def test_coplanar_same_direction(self):
        plane = Plane(vect(0, 0, 1), 0.0)
        cf, cb, f, b = self._split(plane, make_polygon(*XY_PLANE))
        assert len(cf) == 1 and not cb and not f and not b

    def test_coplanar_opposite_direction(self):
        plane = Plane(vect(0, 0, 1), 0.0)
        polygon = make_polygon(*XY_PLANE)
        polygon.flip()
        cf, cb, f, b = self._split(plane, polygon)
        assert len(cb) == 1 and not cf and not f and not b

    def test_one_sided_polygons_pass_unmodified(self):
        plane = yz_plane()
        front_poly = make_polygon((0, 0, 0), (1, 0, 0), (1, 1, 0))
        back_poly = make_polygon((-1, 0, 0), (0, 0, 0), (-1, 1, 0))
        cf, cb, f, b = self._split(plane, front_poly)
        assert f == [front_poly] and not b
        cf, cb, f, b = self._split(plane, back_poly)
        assert b == [back_poly] and not f

    def test_spanning_square(self):
        cf, cb, f, b = self._split(yz_plane(), make_polygon(*XY_PLANE))
        assert not cf and not cb
        assert len(f) == 1 and len(b) == 1
        assert len(f[0].vertices) == 4 and len(b[0].vertices) == 4
        assert all(v.pos[0] >= -epsilon for v in f[0].vertices)
        assert all(v.pos[0] <= epsilon for v in b[0].vertices)
        assert polygon_area(f[0]) == pytest.approx(2.0)
        assert polygon_area(b[0]) == pytest.approx(2.0)
        # fragments keep the orientation of the original
        assert dot(f[0].plane.normal, [0, 0, 1]) == pytest.approx(1.0)
        assert dot(b[0].plane.normal, [0, 0, 1]) == pytest.approx(1.0)

    def test_intersection_points_lie_on_plane(self):
        plane = Plane.from_points(point(0.3, 0, 0), point(0.1, 1, 0), point(0.3, 0, 1))
        cf, cb, f, b = self._split(plane, make_polygon(*XY_PLANE))
        on_plane = [v for v in f[0].vertices if abs(plane.distance(v.pos)) <= epsilon]
        assert len(on_plane) == 2

    def test_on_plane_vertex_goes_to_both_sides(self):
        tri = make_polygon((0, -1, 0), (1, 1, 0), (-1, 1, 0))
        cf, cb, f, b = self._split(yz_plane(), tri)
        assert len(f) == 1 and len(b) == 1
        assert len(f[0].vertices) == 3 and len(b[0].vertices) == 3
        fv = f[0].vertices[0]
        bv = b[0].vertices[0]
        assert fv.pos == bv.pos
        # shared corners are copies, not the same vertex
        assert fv is not bv

    def test_fragments_do_not_share_vertices(self):
        cf, cb, f, b = self._split(yz_plane(), make_polygon(*XY_PLANE))
        front_ids = {id(v) for v in f[0].vertices}
        assert not front_ids & {id(v) for v in b[0].vertices}
        f[0].flip()
        assert all(v.normal[:3] == [0, 0, 1] for v in b[0].vertices)

    def test_interpolated_normals(self):
        verts = [Vertex(point(-1, 0, 0), vect(-1, 0, 1)),
                 Vertex(point(1, 0, 0), vect(1, 0, 1)),
                 Vertex(point(0, 1, 0), vect(0, 1, 1))]
        cf, cb, f, b = self._split(yz_plane(), Polygon(verts))
        crossing = [v for v in f[0].vertices if v.pos[1] == 0 and v.pos[0] == 0]
        assert len(crossing) == 1
        assert crossing[0].normal[:3] == pytest.approx([0, 0, 1])

    def test_same_list_for_all_outputs(self):
        out = []
        yz_plane().split_polygon(make_polygon(*XY_PLANE), out, out, out, out)
        assert len(out) == 2


class TestPolygon:

    def test_needs_three_vertices(self):
        with pytest.raises(ValueError):
            Polygon([Vertex(point(0, 0, 0), vect(0, 0, 1)),
                     Vertex(point(1, 0, 0), vect(0, 0, 1))])

    def test_plane_from_first_three_vertices(self):
        polygon = make_polygon(*XY_PLANE)
        assert polygon.plane.normal[:3] == pytest.approx([0, 0, 1])
        assert polygon.plane.w == pytest.approx(0.0)

    def test_flip(self):
        polygon = make_polygon(*XY_PLANE)
        first = polygon.vertices[0]
        polygon.flip()
        assert polygon.vertices[-1] is first
        assert all(v.normal[:3] == [0, 0, -1] for v in polygon.vertices)
        assert polygon.plane.normal[:3] == pytest.approx([0, 0, -1])

    def test_clone_is_deep(self):
        polygon = make_polygon(*XY_PLANE)
        c = polygon.clone()
        c.flip()
        assert polygon.plane.normal[:3] == pytest.approx([0, 0, 1])
        assert all(v.normal[:3] == [0, 0, 1] for v in polygon.vertices)
        assert all(a is not b for a, b in zip(polygon.vertices, c.vertices))
