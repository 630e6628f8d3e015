## polyline class for polyshift
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

"""
Polyline Class
==============

``Polyline`` wraps a ``polyshift.geom`` polyline and caches its
length, bounding box and area.  An instance owns its points: the
constructor copies them, the ``points`` property hands out a copy,
and every operation that produces new geometry, such as ``offset()``,
returns a new ``Polyline``.  Changing a list you passed in or got back
never changes the instance.
"""

from polyshift.geom import *
import polyshift.xform as xform
from polyshift.offset import offsetXY


class Polyline:
    """Open or closed polyline of two or more points"""

    def __init__(self,a):
        if isinstance(a,Polyline):
            self.__pts = a.points
        else:
            self.__pts = topoly(a)
        self.__length = None
        self.__bbox = None

    def __repr__(self):
        return 'Polyline({})'.format(vstr(self.__pts))

    def __len__(self):
        return len(self.__pts)

    def __getitem__(self,i):
        return point(self.__pts[i])

    def __iter__(self):
        for p in self.__pts:
            yield point(p)

    @property
    def points(self):
        """a copy of the points"""
        return deepcopy(self.__pts)

    @property
    def closed(self):
        return isclosed(self.__pts)

    @property
    def length(self):
        if self.__length is None:
            self.__length = polylength(self.__pts)
        return self.__length

    @property
    def bbox(self):
        if self.__bbox is None:
            self.__bbox = polybbox(self.__pts)
        return deepcopy(self.__bbox)

    @property
    def area(self):
        """signed area, positive for counter-clockwise closed
        polylines.  Zero for open ones."""
        if not self.closed:
            return 0.0
        return polyareaXY(self.__pts)

    def isclose(self,other):
        """same number of points, each within epsilon"""
        other = Polyline(other)
        return len(self) == len(other) and \
            all(vclose(p,q) for p,q in zip(self.__pts,other.points))

    def reverse(self):
        return Polyline(list(reversed(self.__pts)))

    def transform(self,m):
        return Polyline(xform.transformpoly(self.__pts,m))

    def translate(self,delta):
        return self.transform(xform.Translation(delta))

    def rotate(self,ang,cent=None):
        m = xform.Rotation(point(0,0,1.0),ang)
        if cent is not None:
            m = xform.aboutCenter(m,cent)
        return self.transform(m)

    def closestPoint(self,p):
        """closest point on the polyline to point ``p``"""
        best = None
        bestd = None
        for i in range(1,len(self.__pts)):
            a = self.__pts[i-1]
            b = self.__pts[i]
            if magsqXY(sub(b,a)) < closedTolSq:
                cp = point(a)
            else:
                cp = linePointXY([a,b],p)
            d = magsqXY(sub(cp,p))
            if bestd is None or d < bestd:
                best = cp
                bestd = d
        return best

    def distanceTo(self,p):
        return sqrt(magsqXY(sub(self.closestPoint(p),p)))

    def offset(self,dists,loop=False,referenceOrient=0.0,obliqueOffsets=False):
        """parallel offset, see ``polyshift.offset.offsetXY()``"""
        return Polyline(offsetXY(self.__pts,dists,loop=loop,
                                 referenceOrient=referenceOrient,
                                 obliqueOffsets=obliqueOffsets))


## make a closed, counter-clockwise rectangle with the specified width
## and height

def Rect(width,height,center=point(0,0,0)):
    if width <= 0 or height <= 0:
        raise ValueError('bad rectangle size: {} x {}'.format(width,height))
    w=width/2.0
    h=height/2.0
    p0=add(point(-w,-h),center)
    p1=add(point(w,-h),center)
    p2=add(point(w,h),center)
    p3=add(point(-w,h),center)
    return Polyline([p0,p1,p2,p3,point(p0)])
