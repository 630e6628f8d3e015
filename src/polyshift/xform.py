## matrix transformations of 3D homogeneous coordinates for polyshift
## Copyright (c) 2026 polyshift contributors

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

from math import *
import polyshift.geom as geom

## A matrix is a list of four rows, each a four vector.  Vectors are
## lists, so ``M.mul(x)`` always treats ``x`` as a column vector.
## Transforms compose right to left: ``A.mul(B)`` applies ``B``
## first.


def _checkindex(i,what):
    if not (isinstance(i,int) and 0 <= i <= 3):
        raise ValueError('bad {} index: {}'.format(what,i))

class Matrix:
    """4x4 transformation matrix for homogeneous 3D coordinates"""

    def __init__(self,a=None,trans=False):
        self.m = [[1,0,0,0],
                  [0,1,0,0],
                  [0,0,1,0],
                  [0,0,0,1]]
        self.trans=False

        if isinstance(a,Matrix):
            for i in range(4):
                self.setrow(i,list(a.getrow(i)))
        elif isinstance(a,(tuple,list)):
            if len(a) == 4 and all(isinstance(r,(tuple,list)) and len(r) == 4 for r in a):
                vals = [ x for r in a for x in r ]
            elif len(a) == 16:
                vals = list(a)
            else:
                raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
            for ind in range(16):
                x = vals[ind]
                if not geom.isgoodnum(x):
                    raise ValueError('bad element in matrix initialization: {}'.format(x))
                self.m[ind // 4][ind % 4] = x
        elif a is not None:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
        self.trans=trans

    def __repr__(self):
        return "Matrix({},{},{},{},{})".format(self.m[0],self.m[1],
                                               self.m[2],self.m[3],self.trans)

    def rows(self):
        """the rows of the matrix as new lists, respecting transpose"""
        return [ list(self.getrow(i)) for i in range(4) ]

    def get(self,i,j):
        _checkindex(i,'row')
        _checkindex(j,'column')
        if self.trans:
            return self.m[j][i]
        return self.m[i][j]

    def set(self,i,j,x):
        _checkindex(i,'row')
        _checkindex(j,'column')
        if not geom.isgoodnum(x):
            raise ValueError('bad value passed to set: {}'.format(x))
        if self.trans:
            self.m[j][i]=x
        else:
            self.m[i][j]=x

    def getrow(self,i):
        _checkindex(i,'row')
        if self.trans:
            return [ self.m[k][i] for k in range(4) ]
        return self.m[i]

    def getcol(self,j):
        _checkindex(j,'column')
        if self.trans:
            return self.m[j]
        return [ self.m[k][j] for k in range(4) ]

    def setrow(self,i,x):
        if not geom.isvect(x):
            raise ValueError('bad non-vector passed to setrow: {}'.format(x))
        _checkindex(i,'row')
        if self.trans:
            for k in range(4):
                self.m[k][i] = x[k]
        else:
            self.m[i] = list(x)

    def mul(self,x):
        """Matrix product.  For a matrix ``x`` return ``M x``, for a
        vector the transformed vector, for a scalar the scaled
        matrix."""
        if isinstance(x,Matrix):
            result = Matrix()
            for i in range(4):
                row = self.getrow(i)
                for j in range(4):
                    result.set(i,j,geom.dot4(row,x.getcol(j)))
            return result
        elif geom.isvect(x):
            return [ geom.dot4(self.getrow(i),x) for i in range(4) ]
        elif geom.isgoodnum(x):
            result = Matrix()
            for i in range(4):
                result.setrow(i,geom.scale4(self.getrow(i),x))
            return result
        raise ValueError('bad thing passed to mul(): {}'.format(x))

    def isclose(self,other,tol=geom.epsilon):
        """are all elements within ``tol`` of those of ``other``?"""
        return all(abs(self.get(i,j) - other.get(i,j)) < tol
                   for i in range(4) for j in range(4))


def Rotation(axis,angle,inverse=False):
    """rotation by ``angle`` degrees about ``axis`` through the origin,
    right handed"""
    m = geom.mag(axis)
    if m < geom.epsilon:
        raise ValueError('zero-length rotation axis not allowed')
    u = geom.scale3(axis,1.0/m)

    if inverse:
        angle = -angle
    rad = radians(angle % 360.0)

    ux = u[0]
    uy = u[1]
    uz = u[2]
    cang = cos(rad)
    cmin = 1.0-cang
    sang = sin(rad)

    # see http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[cang + ux*ux*cmin, ux*uy*cmin-uz*sang, ux*uz*cmin+uy*sang,0],
         [uy*ux*cmin+uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang,0],
         [uz*ux*cmin-uy*sang, uz*uy*cmin+ux*sang, cang+uz*uz*cmin,0],
         [0,0,0,1]]
    return Matrix(R)

def Translation(delta,inverse=False):
    """translation by vector ``delta``"""
    s = -1.0 if inverse else 1.0
    return Matrix([[1,0,0,s*delta[0]],
                   [0,1,0,s*delta[1]],
                   [0,0,1,s*delta[2]],
                   [0,0,0,1]])

def Scale(x,y=None,z=None,inverse=False):
    """scaling by ``x``, ``y``, ``z``; a single number scales
    uniformly and a vector gives all three factors"""
    if geom.isgoodnum(x):
        if geom.isgoodnum(y) and geom.isgoodnum(z):
            sx, sy, sz = x, y, z
        else:
            sx = sy = sz = x
    elif geom.isvect(x):
        sx, sy, sz = x[0], x[1], x[2]
    else:
        raise ValueError('bad scaling values passed to Scale')

    if inverse:
        if min(abs(sx),abs(sy),abs(sz)) < geom.epsilon:
            raise ValueError('cannot invert a degenerate scale')
        sx = 1.0/sx
        sy = 1.0/sy
        sz = 1.0/sz

    return Matrix([[sx,0,0,0],
                   [0,sy,0,0],
                   [0,0,sz,0],
                   [0,0,0,1.0]])

def aboutCenter(m,cent):
    """conjugate transform ``m`` so that it acts about point ``cent``
    instead of the origin"""
    return Translation(cent).mul(m).mul(Translation(cent,inverse=True))

def transformpoly(pts,m):
    """apply matrix ``m`` to every point of polyline ``pts`` and return
    the new, homogenized points"""
    if not isinstance(m,Matrix):
        raise ValueError('bad transformation matrix passed to transformpoly')
    return [ geom.homo(m.mul(geom.point(p))) for p in pts ]
