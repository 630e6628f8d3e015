## foundational computational geometry primitives for polyshift
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

"""foundational geometry primitives for **polyshift**

====================
OVERVIEW
====================

The polyshift.geom module provides the scalar, vector, point, line
and polyline operations that the offset engine in ``polyshift.offset``
is built on.  Everything here is closed-form arithmetic on plain
Python lists.

vectors and points
==================

Vectors are lists of four numbers, ``[x,y,z,w]``.  The ``w``
coordinate is a homogeneous normalization factor, so that the 4x4
matrices of ``polyshift.xform`` can express affine transforms.  A
point is a vector with ``w > 0``; ordinary geometry lies in the
``w=1`` hyperplane.  The ``vect()`` and ``point()`` convenience
functions accept almost any plausible argument, including the
``(x, y)`` tuples that come out of files and other libraries: ::

   p1 = point(0,0)
   p2 = point((2.0,-2.0))
   p3 = point([1.0, 2.0, 3.0])

Functions with an ``XY`` suffix assume their arguments lie in an XY
plane and ignore ``z``.

lines
=====

Lines are lists of two points.  ``linePointXY()`` finds the closest
point on a segment or on the infinite line through it, and
``lineLineIntersectXY()`` intersects two coplanar lines.

polylines
=========

A polyline is a list of two or more points.  If the first and last
points coincide (squared distance below ``1e-12``) the polyline is
*closed*.  Closed polylines with positive ``polyareaXY()`` are in
counter-clockwise order.

"""

from math import *
import copy
import logging

logger = logging.getLogger(__name__)

## constants
epsilon=0.000005
pi2 = 2.0*pi

## squared distance below which first and last points of a polyline
## are considered to be the same point
closedTolSq = 1e-12

## vectors shorter than this have no usable direction
unitTol = 1e-6

## operations on scalars
## -----------------------

def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n,bool)) and isinstance(n,(int,float))

def close(a,b):
    """ are two scalars the same within epsilon
    """
    return abs(a-b) < epsilon

def matchSign(ref,x):
    """return ``x`` with the sign of ``ref`` (a zero ``ref`` counts as
    negative)"""
    if (ref > 0.0) == (x > 0.0):
        return x
    return -x

## operations on vectors
## ------------------------

def vect(a=False,b=False,c=False,d=False):
    """Convenience function for making a homogeneous coordinates 4 vector
from practically anything
    """
    r = [0,0,0,1]
    if isgoodnum(a):
        r[0]=a
        if isgoodnum(b):
            r[1]=b
            if isgoodnum(c):
                r[2]=c
                if isgoodnum(d):
                    r[3]=d
    elif isinstance(a,(tuple,list)):
        for i in range(min(4,len(a))):
            x=a[i]
            if isgoodnum(x):
                r[i]=x
    return r

def vclose(a,b):
    """are two vectors the same within epsilon?"""
    return close(mag(sub(a,b)),0)

def isvect(x):
    """
    check to see if argument is a proper vector for our purposes
    """
    return isinstance(x,list) and len(x) == 4 and isgoodnum(x[0]) and isgoodnum(x[1]) and isgoodnum(x[2]) and isgoodnum(x[3])

## R^3 -> R^3 functions: ignore w component
## ------------------------------------------------
def add(a,b):
    """ 3 vector, `a + b`"""
    return [a[0]+b[0],a[1]+b[1],a[2]+b[2],1.0]

def sub(a,b):
    """ 3 vector, `a - b`"""
    return [a[0]-b[0],a[1]-b[1],a[2]-b[2],1.0]

def scale3(a,c):
    """ 3 vector, vector ''a'' times scalar ``c``, `a * c`"""
    return [a[0]*c,a[1]*c,a[2]*c,1.0]

def cross(a,b):
    """Compute the cross product of a x b, assuming that both
    fall into the w=1 hyperplane
    """
    return [ a[1]*b[2] - a[2]*b[1],
             a[2]*b[0] - a[0]*b[2],
             a[0]*b[1] - a[1]*b[0],
             1.0 ]

## rotate an XY vector by 90 degrees clockwise, equivalent to
## crossing [a1, a2, a3] with [0, 0, 1]
def orthoXY(a):
    """rotate XY vector ``a`` 90 degrees clockwise"""
    return [ a[1], -a[0], 0, 1.0 ]

def rot90XY(a):
    """rotate XY vector ``a`` 90 degrees counter-clockwise"""
    return [ -a[1], a[0], 0, 1.0 ]

def dot4(a,b):
    """ 4 vect dot product"""
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]+a[3]*b[3]

def scale4(a,c):
    """ 4 vector ``a`` times scalar ``c``"""
    return [a[0]*c,a[1]*c,a[2]*c,a[3]*c]

def homo(a):
    """Homogenize, or project back to the w=1 plane by scaling all values by w"""
    if abs(a[3]) < epsilon:
        raise ValueError('cannot homogenize vector with w = 0: {}'.format(a))
    return [ a[0]/a[3],
             a[1]/a[3],
             a[2]/a[3],
             1.0 ]

## R^3 -> R functions -- ignore w component
## ----------------------------------------
def dot(a,b):
    """ 3 vector ``a`` dot ``b`` """
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]

def crossXY(a,b):
    """z component of the cross product of two XY vectors, which is the
    signed area of the parallelogram they span"""
    return a[0]*b[1] - a[1]*b[0]

def mag(a):
    """ compute the magnitude of 3 vector ``a``"""
    return sqrt(a[0]*a[0]+a[1]*a[1]+a[2]*a[2])

def magsqXY(a):
    """squared XY length of ``a``"""
    return a[0]*a[0]+a[1]*a[1]

def dist(a,b):
    """ compute the euclidean distance between two 3 vector points ``a`` and ``b``"""
    return mag(sub(a,b))

def unitXY(a,tol=unitTol):
    """return XY vector ``a`` scaled to unit length, or ``None`` if
    ``a`` is shorter than ``tol``"""
    l = sqrt(magsqXY(a))
    if not l > tol:             # also catches NaN
        return None
    return [ a[0]/l, a[1]/l, 0, 1.0 ]

def withLengthXY(a,length):
    """return XY vector ``a`` scaled to ``length``.  Negative lengths
    reverse the vector."""
    l = sqrt(magsqXY(a))
    if not l > 0.0:
        raise ValueError('zero-length vector passed to withLengthXY: {}'.format(a))
    f = length/l
    return [ a[0]*f, a[1]*f, 0, 1.0 ]

deepcopy = copy.deepcopy

# pretty printing string formatter for vectors, lines, and polylines.
# Falls back to str() if the argument isn't one of those.
def vstr(a):
    """ utility function for recursively checking and formatting lists
    """
    if not isinstance(a,list):
        return str(a)
    if isvect(a):
        if abs(a[3]-1.0) > epsilon: # not in w=1
            return "[{}, {}, {}, {}]".format(a[0],a[1],a[2],a[3])
        elif abs(a[2]) > epsilon: # not in z=0
            return "[{}, {}, {}]".format(a[0],a[1],a[2])
        else: # in x-y plane
            return "[{}, {}]".format(a[0],a[1])
    elif len(a) > 0 and all(isinstance(x,list) for x in a):
        return "[" + ", ".join(map(vstr,a)) + "]"
    return str(a)


## operations on points
## --------------------

def point(x=False,y=False,z=False,w=False):
    """Point creation from a point, a coordinate tuple or list, or scalars"""
    if ispoint(x):
        return deepcopy(x)
    if isinstance(x,(tuple,list)):
        if len(x) < 2:
            raise ValueError('point needs at least two coordinates: {}'.format(x))
        r = vect(x)
        if r[0] != x[0] or r[1] != x[1]:
            raise ValueError('bad coordinates passed to point(): {}'.format(x))
    else:
        r = vect(x,y,z,w) if isgoodnum(x) else [0,0,0,1]
        if not isgoodnum(w):
            r[3] = 1
    if r[3] > 0:
        return r
    else:
        raise ValueError('bad w argument to point()')

def ispoint(x):
    """ is it a point?"""
    return isvect(x) and x[3] > 0.0

def pointbbox(x):
    """compute 3D bounding box of point, which is 2 epsilon on a side."""
    ee = point(epsilon,epsilon,epsilon)
    return [sub(x,ee),add(x,ee)]

## operations on lines
## --------------------

def line(p1,p2=False):
    """Value-safe line creation"""
    if isline(p1):
        return deepcopy(p1)
    elif ispoint(p1) and ispoint(p2):
        return [ point(p1), point(p2) ]
    else:
        raise ValueError('bad values passed to line()')

def isline(l):
    """ is it a line? """
    return isinstance(l,list) and len(l) == 2 \
        and ispoint(l[0]) and ispoint(l[1])

def linelength(l):
    """ return the length of a line"""
    return dist(l[0],l[1])

def linePointXY(l,p,inside=True,distance=False,params=False):
    """
    For a point ``p`` and a line ``l`` that lie in the same XY plane,
    compute the point on ``l`` that is closest to ``p``, and return
    that point. If ``inside`` is true, then return the closest
    point on the line segment, otherwise on the infinite line. If
    ``distance`` is true, return the closest distance, not the point.
    If ``params`` is true, return the line parameter of the closest
    point.  Raises ``ValueError`` for zero-length lines.

    """
    if distance and params:
        raise ValueError('incompatible distance and params parameters passed to linePointXY')
    a=l[0]
    b=l[1]
    v = sub(b,a)
    lensq = magsqXY(v)
    if lensq < closedTolSq:
        raise ValueError('zero-length line passed to linePointXY: {}'.format(vstr(l)))

    u = (( p[0]-a[0])*v[0] + (p[1]-a[1])*v[1]) / lensq
    if inside:
        u = min(1.0,max(0.0,u))
    if params:
        return u
    cp = [ a[0] + u*v[0], a[1] + u*v[1], a[2], 1.0 ]
    if distance:
        return sqrt((p[0]-cp[0])**2 + (p[1]-cp[1])**2)
    return cp

def closestPointInfiniteXY(a,b,p):
    """closest point to ``p`` on the infinite line through ``a`` and
    ``b``"""
    return linePointXY([a,b],p,inside=False)

def lineLineIntersectXY(l1,l2,inside=True,params=False):
    """Compute the intersection of two lines that lie in the same XY
    plane.  Returns the intersection point, the pair of line
    parameters if ``params`` is true, or ``False`` if the lines are
    parallel or, with ``inside`` set, don't cross within both
    segments.
    """

    x1=l1[0][0]
    y1=l1[0][1]
    z1=l1[0][2]
    x2=l1[1][0]
    y2=l1[1][1]
    x3=l2[0][0]
    y3=l2[0][1]
    x4=l2[1][0]
    y4=l2[1][1]

    ## do lines intersect anywhere?
    denom=(x1-x2)*(y3-y4)-(y1-y2)*(x3-x4)
    if denom*denom < epsilon*epsilon:
        return False

    t = ((x1-x3)*(y3-y4) - (y1-y3)*(x3-x4))/denom
    u = -1 * ((x1-x2)*(y1-y3) - (y1-y2)*(x1-x3))/denom

    if params:
        return [t,u]

    if inside and ( t < 0.0 or t > 1.0 or u < 0.0 or u > 1.0):
        return False

    return [x1 + t*(x2-x1), y1+t*(y2-y1), z1, 1.0]


## operations on polylines
## -----------------------

def ispoly(a):
    """is ``a`` a polyline, a list of two or more points?"""
    return isinstance(a,list) and len(a) > 1 and \
        all(ispoint(x) for x in a)

def isclosed(a):
    """do the first and last points of polyline ``a`` coincide?"""
    return len(a) > 2 and \
        (a[0][0]-a[-1][0])**2 + (a[0][1]-a[-1][1])**2 < closedTolSq

def polyclose(a):
    """return a closed copy of polyline ``a``"""
    ply = deepcopy(a)
    if not isclosed(ply):
        ply.append(point(ply[0]))
    return ply

def topoly(pts):
    """make a polyline from any sequence of coordinate tuples or
    points"""
    ply = [ point(p) for p in pts ]
    if len(ply) < 2:
        raise ValueError('a polyline needs at least two points, got {}'.format(len(ply)))
    return ply

def polylength(a):
    """sum of the segment lengths of polyline ``a``"""
    l = 0.0
    for i in range(1,len(a)):
        l += dist(a[i-1],a[i])
    return l

def polybbox(a):
    """Compute the bounding box of polyline ``a``"""
    if len(a) == 0:
        return False
    elif len(a) == 1:
        return pointbbox(a[0])
    minx = maxx = a[0][0]
    miny = maxy = a[0][1]
    minz = maxz = a[0][2]
    for p in a[1:]:
        minx = min(minx,p[0])
        maxx = max(maxx,p[0])
        miny = min(miny,p[1])
        maxy = max(maxy,p[1])
        minz = min(minz,p[2])
        maxz = max(maxz,p[2])
    return [ point(minx,miny,minz),point(maxx,maxy,maxz) ]

def polyareaXY(a):
    """Signed area of the loop through the points of ``a``, positive
    for counter-clockwise order.  The closing segment from the last
    point back to the first is always included, so open and closed
    polylines give the same result."""
    area = 0.0
    n = len(a)
    for i in range(n):
        p = a[i]
        q = a[(i+1) % n]
        area += p[0]*q[1] - q[0]*p[1]
    return area * 0.5

def cullDuplicatePoints(a,tol=unitTol):
    """return a copy of polyline ``a`` with consecutive points closer
    than ``tol`` removed.  The last point is kept in preference to an
    interior one, so closed polylines stay closed."""
    if len(a) < 2:
        return deepcopy(a)
    tolsq = tol*tol
    res = [ point(a[0]) ]
    for p in a[1:-1]:
        if magsqXY(sub(p,res[-1])) >= tolsq:
            res.append(point(p))
    last = a[-1]
    if len(res) > 1 and magsqXY(sub(last,res[-1])) < tolsq:
        res[-1] = point(last)
    else:
        res.append(point(last))
    if len(res) < len(a):
        logger.debug('culled %d duplicate points', len(a) - len(res))
    return res
