import pytest

from bspcsg.geom import point, vect
from bspcsg.xform import Matrix, Rotation, Scale, Translation, normal_matrix


class TestMatrix:

    def test_identity(self):
        m = Matrix()
        assert m.mul(point(1, 2, 3)) == [1, 2, 3, 1]

    def test_init_from_rows_and_flat(self):
        rows = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]]
        a = Matrix(rows)
        b = Matrix(list(range(1, 17)))
        assert a.m == b.m
        assert a.getcol(0) == [1, 5, 9, 13]
        assert a.transpose().getrow(0) == [1, 5, 9, 13]

    def test_bad_init(self):
        with pytest.raises(ValueError):
            Matrix([1, 2, 3])
        with pytest.raises(ValueError):
            Matrix([[1, 0, 0, 0]] * 3 + [[0, 0, 0, True]])
        with pytest.raises(ValueError):
            Matrix("identity")

    def test_get_set(self):
        m = Matrix()
        m.set(0, 3, 5.0)
        assert m.get(0, 3) == 5.0
        with pytest.raises(ValueError):
            m.get(4, 0)
        with pytest.raises(ValueError):
            m.set(0, 0, 'x')

    def test_translation_moves_points_not_directions(self):
        t = Translation(point(1, 2, 3))
        assert t.mul(point(0, 0, 0)) == [1, 2, 3, 1]
        assert t.mul(vect(1, 0, 0)) == [1, 0, 0, 0]

    def test_translation_inverse(self):
        t = Translation(point(1, 2, 3))
        ti = Translation(point(1, 2, 3), inverse=True)
        assert t.mul(ti).m == Matrix().m

    def test_scale(self):
        assert Scale(2).mul(point(1, 1, 1))[:3] == [2, 2, 2]
        assert Scale(1, 2, 3).mul(point(1, 1, 1))[:3] == [1, 2, 3]
        assert Scale(2, inverse=True).mul(point(1, 1, 1))[:3] == [0.5, 0.5, 0.5]
        with pytest.raises(ValueError):
            Scale(0)

    def test_rotation(self):
        r = Rotation(vect(0, 0, 1), 90)
        assert r.mul(point(1, 0, 0))[:3] == pytest.approx([0, 1, 0], abs=1e-12)
        ri = Rotation(vect(0, 0, 1), 90, inverse=True)
        assert ri.mul(r.mul(point(1, 2, 3)))[:3] == pytest.approx([1, 2, 3])
        with pytest.raises(ValueError):
            Rotation(vect(0, 0, 0), 45)

    def test_scalar_mul(self):
        assert Matrix().mul(2).get(1, 1) == 2

    def test_normal_matrix(self):
        n = normal_matrix(Scale(2, 1, 1))
        assert n.get(0, 0) == pytest.approx(0.5)
        assert n.get(1, 1) == pytest.approx(1.0)
        n = normal_matrix(Translation(point(5, 5, 5)))
        assert n.mul(vect(0, 0, 1))[:3] == pytest.approx([0, 0, 1])
        with pytest.raises(ValueError):
            normal_matrix(Matrix([[1, 0, 0, 0], [0, 0, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]]))
