## vector primitives for bspCSG
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

"""vector primitives for **bspCSG**

====================
OVERVIEW
====================

Points and vectors in **bspCSG** are plain Python lists of four
numbers in homogeneous coordinates.  A point lies in the ``w=1``
hyperplane, ``[x, y, z, 1.0]``; a direction (for example a vertex
normal) lies in the ``w=0`` hyperplane, ``[x, y, z, 0.0]``.

Most functions here are R^3 operations that ignore the ``w``
component.  The exception is ``lerp``, which interpolates all four
components so that interpolating two points yields a point and
interpolating two normals yields a direction.

constants
=========

``epsilon`` is the signed-distance tolerance used when classifying
points against a plane.  Points closer to a plane than ``epsilon``
are treated as lying on it.  The value is an absolute distance, so
geometry modelled at a very different scale should pass an
appropriately scaled ``tol`` to the operations that accept one.

"""

from math import sqrt

## constants
epsilon = 1e-5


## operations on scalars
## -----------------------

## booleans are ints as far as isinstance() is concerned, but they are
## never coordinates
def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


def close(a, b, tol=epsilon):
    """ are two scalars the same within ``tol``
    """
    return abs(a - b) < tol


## operations on vectors
## ------------------------

def vect(a=False, b=False, c=False, d=0):
    """Make a homogeneous direction vector from scalars or from any
    sequence of up to four numbers.  Unspecified components are zero.
    """
    r = [0, 0, 0, 0]
    if isgoodnum(a):
        r[0] = a
        if isgoodnum(b):
            r[1] = b
            if isgoodnum(c):
                r[2] = c
                if isgoodnum(d):
                    r[3] = d
    elif isinstance(a, (tuple, list)):
        for i in range(min(4, len(a))):
            x = a[i]
            if not isgoodnum(x):
                raise ValueError('bad vector component: {}'.format(x))
            r[i] = x
    else:
        raise ValueError('bad thing passed to vect(): {}'.format(a))
    return r


def isvect(x):
    """
    check to see if argument is a proper vector for our purposes
    """
    return isinstance(x, list) and len(x) == 4 and all(isgoodnum(c) for c in x)


def point(x=False, y=False, z=False, w=False):
    """Point creation from a point, a coordinate sequence, or scalars"""
    if isinstance(x, (tuple, list)):
        if len(x) < 3:
            raise ValueError('bad coordinate sequence passed to point(): {}'.format(x))
        for c in x[:3]:
            if not isgoodnum(c):
                raise ValueError('bad coordinate passed to point(): {}'.format(c))
        w = x[3] if len(x) > 3 else 1.0
        return [x[0], x[1], x[2], w]
    r = [0, 0, 0, 1.0]
    if isgoodnum(x):
        r[0] = x
        if isgoodnum(y):
            r[1] = y
            if isgoodnum(z):
                r[2] = z
                if isgoodnum(w):
                    r[3] = w
    if r[3] > 0:
        return r
    raise ValueError('bad w argument to point()')


def ispoint(x):
    """ is it a point?"""
    return isvect(x) and x[3] > 0.0


def vclose(a, b, tol=epsilon):
    """ are two 3 vectors the same within ``tol``"""
    return mag(sub(a, b)) < tol


## R^3 -> R^3 functions: ignore w component
## ------------------------------------------------
def add(a, b):
    """ 3 vector, `a + b`"""
    return [a[0]+b[0], a[1]+b[1], a[2]+b[2], 1.0]


def sub(a, b):
    """ 3 vector, `a - b`"""
    return [a[0]-b[0], a[1]-b[1], a[2]-b[2], 1.0]


def scale3(a, c):
    """ 3 vector, vector ``a`` times scalar ``c``, `a * c`"""
    return [a[0]*c, a[1]*c, a[2]*c, 1.0]


def negate(a):
    """ direction opposite to ``a``, as a w=0 vector"""
    return [-a[0], -a[1], -a[2], 0.0]


def cross(a, b):
    """ 3 vector cross product `a x b`"""
    return [a[1]*b[2] - a[2]*b[1],
            a[2]*b[0] - a[0]*b[2],
            a[0]*b[1] - a[1]*b[0],
            1.0]


def unit(a):
    """ unit-length w=0 vector in the direction of ``a``"""
    m = mag(a)
    if m == 0.0:
        raise ValueError('zero-length vector has no direction')
    return [a[0]/m, a[1]/m, a[2]/m, 0.0]


## R^4 -> R^4
def lerp(a, b, t):
    """ 4 vector linear interpolation, ``a`` at ``t=0``, ``b`` at ``t=1``"""
    return [a[0] + (b[0]-a[0])*t,
            a[1] + (b[1]-a[1])*t,
            a[2] + (b[2]-a[2])*t,
            a[3] + (b[3]-a[3])*t]


## R^3 -> R functions -- ignore w component
## ----------------------------------------
def dot(a, b):
    """ 3 vector ``a`` dot ``b`` """
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]


def mag(a):
    """ compute the magnitude of 3 vector ``a``"""
    return sqrt(a[0]*a[0]+a[1]*a[1]+a[2]*a[2])


def dist(a, b):
    """ euclidean distance between two 3 vector points ``a`` and ``b``"""
    return mag(sub(a, b))


def vstr(a):
    """ format a vector leaving out the homogeneous coordinate"""
    if isvect(a):
        return "[{}, {}, {}]".format(a[0], a[1], a[2])
    return str(a)
