## matrix transformations for 3D homogeneous coordinates in bspCSG
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

from math import cos, radians, sin

import numpy as np

from bspcsg import geom

## A matrix is a list of four rows, each a list of four numbers.
## Vectors are columns, so ``m.mul(v)`` computes Mv.  Positions
## (w=1) pick up the translation column, directions (w=0) don't.
## Transforms are applied to polygon data before it is handed to the
## boolean operators; the operators themselves never transform.


class Matrix:
    """4x4 transformation matrix for homogeneous 3D coordinates"""

    def __init__(self, a=None):
        self.m = [[1.0, 0.0, 0.0, 0.0],
                  [0.0, 1.0, 0.0, 0.0],
                  [0.0, 0.0, 1.0, 0.0],
                  [0.0, 0.0, 0.0, 1.0]]

        if isinstance(a, Matrix):
            self.m = [list(row) for row in a.m]
        elif isinstance(a, (tuple, list)):
            if len(a) == 4 and all(isinstance(r, (tuple, list)) and len(r) == 4 for r in a):
                values = [x for row in a for x in row]
            elif len(a) == 16:
                values = list(a)
            else:
                raise ValueError('bad shape for matrix initialization: {}'.format(a))
            for ind, x in enumerate(values):
                if not geom.isgoodnum(x):
                    raise ValueError('bad element in matrix initialization: {}'.format(x))
                self.m[ind // 4][ind % 4] = x
        elif a is not None:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))

    def __repr__(self):
        return "Matrix({},{},{},{})".format(*self.m)

    def get(self, i, j):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to get: {},{}'.format(i, j))
        return self.m[i][j]

    def set(self, i, j, x):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to set: {},{}'.format(i, j))
        if not geom.isgoodnum(x):
            raise ValueError('bad value passed to set: {}'.format(x))
        self.m[i][j] = x

    def getrow(self, i):
        if i < 0 or i > 3:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        return list(self.m[i])

    def getcol(self, j):
        if j < 0 or j > 3:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        return [self.m[0][j], self.m[1][j], self.m[2][j], self.m[3][j]]

    def transpose(self):
        return Matrix([self.getcol(j) for j in range(4)])

    def as_array(self):
        """the matrix as a 4x4 float ``numpy`` array"""
        return np.array(self.m, dtype=float)

    # If x is a matrix, compute MX.  If x is a vector, compute Mx.  If
    # x is a scalar, compute xM.
    def mul(self, x):
        if isinstance(x, Matrix):
            result = Matrix()
            for i in range(4):
                row = self.m[i]
                for j in range(4):
                    result.m[i][j] = sum(row[k] * x.m[k][j] for k in range(4))
            return result
        elif geom.isvect(x):
            return [sum(self.m[i][k] * x[k] for k in range(4)) for i in range(4)]
        elif geom.isgoodnum(x):
            return Matrix([[v * x for v in row] for row in self.m])

        raise ValueError('bad thing passed to mul(): {}'.format(x))


def Translation(delta, inverse=False):
    if len(delta) < 3:
        raise ValueError('bad translation vector: {}'.format(delta))
    s = -1.0 if inverse else 1.0
    return Matrix([[1, 0, 0, s * delta[0]],
                   [0, 1, 0, s * delta[1]],
                   [0, 0, 1, s * delta[2]],
                   [0, 0, 0, 1]])


def Scale(x, y=False, z=False, inverse=False):
    if geom.isgoodnum(x):
        sx = x
        if geom.isgoodnum(y) and geom.isgoodnum(z):
            sy = y
            sz = z
        else:
            sy = sz = x
    elif isinstance(x, (tuple, list)) and len(x) >= 3:
        sx, sy, sz = x[0], x[1], x[2]
    else:
        raise ValueError('bad scaling values passed to Scale')

    if sx == 0 or sy == 0 or sz == 0:
        raise ValueError('zero scale factor not allowed')
    if inverse:
        sx = 1.0 / sx
        sy = 1.0 / sy
        sz = 1.0 / sz

    return Matrix([[sx, 0, 0, 0],
                   [0, sy, 0, 0],
                   [0, 0, sz, 0],
                   [0, 0, 0, 1.0]])


def Rotation(axis, angle, inverse=False):
    """rotation by ``angle`` degrees about ``axis`` through the origin"""
    if geom.mag(axis) < geom.epsilon:
        raise ValueError('zero-length rotation axis not allowed')
    ux, uy, uz, _ = geom.unit(axis)

    if inverse:
        angle = -angle
    rad = radians(angle % 360.0)
    cang = cos(rad)
    sang = sin(rad)
    cmin = 1.0 - cang

    return Matrix([[cang + ux*ux*cmin, ux*uy*cmin - uz*sang, ux*uz*cmin + uy*sang, 0],
                   [uy*ux*cmin + uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang, 0],
                   [uz*ux*cmin - uy*sang, uz*uy*cmin + ux*sang, cang + uz*uz*cmin, 0],
                   [0, 0, 0, 1]])


def normal_matrix(m):
    """Matrix that carries normals under ``m``: the inverse transpose of
    its linear part, with no translation.
    """
    linear = m.as_array()[:3, :3]
    if abs(np.linalg.det(linear)) < geom.epsilon ** 3:
        raise ValueError('singular transform has no normal matrix')
    n = np.linalg.inv(linear).T
    result = Matrix()
    for i in range(3):
        for j in range(3):
            result.m[i][j] = float(n[i, j])
    return result


__all__ = ['Matrix', 'Translation', 'Scale', 'Rotation', 'normal_matrix']
