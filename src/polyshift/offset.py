## parallel offsetting of 2D polylines for polyshift
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

"""parallel offsets of polylines in the XY plane

``offsetXY()`` shifts every segment of a polyline sideways by its own
distance and joins neighbouring segments with true miter corners.
Positive distances move toward the inside of the loop, negative ones
outward.  Three topologies are handled:

- closed polylines (first and last point coincide), which stay closed;
- open polylines with ``loop=True``, whose ends are joined virtually
  for the corner computation only;
- open polylines, whose end points are shifted perpendicular to the
  first and last segment.

Corners that are within 0.25 degrees of straight, or that touch a
(near) zero-length segment, have no well defined miter.  They are
flagged during the main pass and afterwards placed on the line between
their nearest valid neighbours.

The caller's points are never modified; every call works on its own
copy and returns new points.
"""

from math import *
import logging

from polyshift.geom import (
    add, sub, dot, crossXY, magsqXY, unitXY, rot90XY, withLengthXY,
    matchSign, point, topoly, isclosed, isgoodnum, polyareaXY,
    closestPointInfiniteXY, vstr,
)
from polyshift.errors import (
    OffsetDistanceError, DegeneratePolylineError, ObliqueOffsetError,
)

logger = logging.getLogger(__name__)

def relAngleDiscriminant(deg):
    """value of ``(a*c - b*b)/(a*c + b*b)`` for two vectors enclosing
    an angle of ``deg`` degrees, where ``a`` and ``c`` are their
    squared lengths and ``b`` their dot product"""
    r = radians(deg)
    return sin(r)**2 / (1.0 + cos(r)**2)

## squared segment length below which a segment has no direction
LENGTH_TOL_SQ = 1e-12

## corners closer than 0.25 degrees to straight are not mitered
PARALLEL_REL = relAngleDiscriminant(0.25)

## turns below 2 degrees are ignored by the orientation detection
TURN_ANGLE_MIN = radians(2.0)

## distances of colinear segments must agree to this tolerance
DIST_TOL = 1e-9


## segment vectors
## ---------------

def segmentVectorsXY(pts,looped):
    """Return the ``next - this`` vector of every segment of ``pts``.
    If ``looped`` is true, the closing vector from the last point back
    to the first is appended, so there is one vector per point."""
    vs = [ sub(pts[i+1],pts[i]) for i in range(len(pts)-1) ]
    if looped:
        vs.append(sub(pts[0],pts[-1]))
    return vs


## orientation
## -----------

def referenceNormalXY(pts,vs,looped=True):
    """Find the side that counts as "inside" for the whole polyline.

    The signed area of the loop through ``pts`` gives a provisional
    reference.  Then the turning angle between consecutive segment
    directions is summed separately for turns that agree with the
    reference and for turns against it, ignoring turns below
    ``TURN_ANGLE_MIN``.  The larger sum belongs to the outer, convex
    side.  This stays correct for non-convex loops where a few reflex
    corners, or a self-touching outline, would mislead a plain area
    test.

    Returns a tuple ``(index, reference)``: the index of the first
    segment turning to the outer side (``-1`` if there are no turns)
    and the reference normal, positive for counter-clockwise loops.
    Raises ``DegeneratePolylineError`` if no segment has a usable
    direction.
    """
    us = [ unitXY(v) for v in vs ]
    valid = [ i for i in range(len(us)) if us[i] is not None ]
    if not valid:
        raise DegeneratePolylineError(
            'all {} points are in the same location'.format(len(pts)))

    ref = polyareaXY(pts)
    if not abs(ref) > LENGTH_TOL_SQ:
        ref = 1.0

    posSum = negSum = 0.0
    posIdx = negIdx = -1
    ## open polylines have no segment joining the end to the start
    prevU = us[valid[-1]] if looped else us[valid[0]]
    for i in valid:
        u = us[i]
        c = crossXY(prevU,u)
        ang = atan2(abs(c),dot(prevU,u))
        if ang < TURN_ANGLE_MIN:
            continue
        if c*ref > 0.0:
            posSum += ang
            if posIdx == -1:
                posIdx = i
        else:
            negSum += ang
            if negIdx == -1:
                negIdx = i
        prevU = u

    logger.debug('turning sums %.4f with, %.4f against area sign %g',
                 posSum, negSum, ref)
    if posSum >= negSum:
        return posIdx, ref
    return negIdx, -ref


## corners
## -------

def segmentShiftXY(v,d,refOrient):
    """The shift that moves a segment with direction ``v`` by distance
    ``d`` to the inside, for a polyline with reference normal
    ``refOrient``.  Used where a vertex has only one usable segment,
    such as the ends of an open polyline."""
    return withLengthXY(rot90XY(v), d if refOrient > 0.0 else -d)

def offsetInCornerXY(thisPt,prevV,nextV,prevDist,nextDist,refOrient):
    """Miter the corner at ``thisPt`` between the incoming segment
    direction ``prevV`` and the outgoing direction ``nextV``, offset by
    ``prevDist`` and ``nextDist`` respectively.

    Returns ``(pt, prevShift, nextShift)`` where ``pt`` lies on both
    offset lines and the shifts are the vectors that move the incoming
    and outgoing segments onto their offset lines.  Returns ``None``
    if either vector is (nearly) zero length or the corner is within
    0.25 degrees of straight, since then there is no unique miter.
    Both distances zero gives the vertex itself with zero shifts.
    """
    if prevDist == 0.0 and nextDist == 0.0:
        return point(thisPt), [0.0,0.0,0.0,1.0], [0.0,0.0,0.0,1.0]
    ax = prevV[0]
    ay = prevV[1]
    bx = nextV[0]
    by = nextV[1]
    a = ax*ax + ay*ay
    c = bx*bx + by*by
    if not (a > LENGTH_TOL_SQ and c > LENGTH_TOL_SQ):
        return None
    b = ax*bx + ay*by
    ac = a*c
    bb = b*b
    disc = ac - bb              # never negative
    rel = disc/(ac + bb)        # ac > 0 here
    if not rel >= PARALLEL_REL:
        return None

    n = matchSign(refOrient,crossXY(prevV,nextV))
    prevShift = withLengthXY(rot90XY(prevV), prevDist if n > 0.0 else -prevDist)
    nextShift = withLengthXY(rot90XY(nextV), nextDist if n > 0.0 else -nextDist)
    offP = add(thisPt,prevShift)
    offN = add(thisPt,nextShift)

    ## intersect offP + t*prevV with offN + s*nextV
    vx = offN[0] - offP[0]
    vy = offN[1] - offP[1]
    e = bx*vx + by*vy
    d = ax*vx + ay*vy
    t = (c*d - b*e)/disc
    pt = [ offP[0] + t*ax, offP[1] + t*ay, thisPt[2], 1.0 ]
    return pt, prevShift, nextShift


## repair of colinear and degenerate corners
## -----------------------------------------

def _searchBack(flags,i,looped):
    n = len(flags)
    for k in range(1,n):
        j = i - k
        if j < 0:
            if not looped:
                return -1
            j += n
        if not flags[j]:
            return j
    return -1

def _searchForward(flags,i,looped):
    n = len(flags)
    for k in range(1,n):
        j = i + k
        if j >= n:
            if not looped:
                return -1
            j -= n
        if not flags[j]:
            return j
    return -1

def _checkRunDistances(i,pi,ni,vs,dists,looped):
    ## every real segment between the two valid corners lies on the
    ## same line, so they all need the same distance
    if looped:
        n = len(vs)
        idxs = [ (pi + k) % n for k in range((ni - pi) % n) ]
    else:
        idxs = range(pi,ni)
    run = [ dists[j] for j in idxs if magsqXY(vs[j]) > LENGTH_TOL_SQ ]
    if run and max(run) - min(run) > DIST_TOL:
        raise ObliqueOffsetError(i,pi,ni,run)

def _placeBetween(pts,res,pi,ni,i):
    ## duplicates of a valid corner share its offset point
    for j in (pi,ni):
        if magsqXY(sub(pts[i],pts[j])) < LENGTH_TOL_SQ:
            p = point(res[j])
            break
    else:
        a = res[pi]
        b = res[ni]
        if magsqXY(sub(b,a)) < LENGTH_TOL_SQ:
            p = point(a)
        else:
            p = closestPointInfiniteXY(a,b,pts[i])
    p[2] = pts[i][2]
    return p

def _repairLooped(pts,res,flags,vs,dists,oblique):
    n = len(flags)
    fixed = 0
    for i in range(n):
        if not flags[i]:
            continue
        pi = _searchBack(flags,i,True)
        ni = _searchForward(flags,i,True)
        if pi == -1 or pi == ni:
            raise DegeneratePolylineError(
                'all {} points for offset are colinear within 0.25 degrees or identical'.format(n))
        if not oblique:
            _checkRunDistances(i,pi,ni,vs,dists,True)
        res[i] = _placeBetween(pts,res,pi,ni,i)
        fixed += 1
    return fixed

def _repairOpen(pts,res,flags,vs,dists,refOrient,oblique,first,last):
    n = len(flags)
    fixed = 0
    for i in range(n):
        if not flags[i]:
            continue
        pi = _searchBack(flags,i,False)
        ni = _searchForward(flags,i,False)
        if pi == -1 and ni == -1:
            raise DegeneratePolylineError(
                'all {} points for offset are colinear within 0.25 degrees or identical'.format(n))
        elif pi == -1:
            res[i] = add(pts[i],segmentShiftXY(vs[first],dists[first],refOrient))
        elif ni == -1:
            res[i] = add(pts[i],segmentShiftXY(vs[last],dists[last],refOrient))
        else:
            if not oblique:
                _checkRunDistances(i,pi,ni,vs,dists,False)
            res[i] = _placeBetween(pts,res,pi,ni,i)
        fixed += 1
    return fixed


## offset cores
## ------------

def _reference(pts,vs,looped,referenceOrient):
    if referenceOrient != 0.0:
        return referenceOrient
    idx, ref = referenceNormalXY(pts,vs,looped)
    logger.debug('detected %s orientation, outer turn at segment %d',
                 'counter-clockwise' if ref > 0.0 else 'clockwise', idx)
    return ref

def _offsetLooped(pts,dists,referenceOrient,oblique):
    n = len(pts)
    vs = segmentVectorsXY(pts,True)
    ref = _reference(pts,vs,True,referenceOrient)

    res = [ point(p) for p in pts ]
    flags = [False]*n

    valid = [ i for i in range(n) if magsqXY(vs[i]) > LENGTH_TOL_SQ ]
    if not valid:
        raise DegeneratePolylineError(
            'all {} points are in the same location'.format(n))
    prevIdx = valid[-1]
    for i in range(prevIdx+1,n):
        flags[i] = True

    prevV = vs[prevIdx]
    prevDist = dists[prevIdx]
    for i in range(prevIdx+1):
        corner = offsetInCornerXY(pts[i],prevV,vs[i],prevDist,dists[i],ref)
        if corner is None:
            flags[i] = True
            continue
        res[i] = corner[0]
        if magsqXY(vs[i]) > LENGTH_TOL_SQ:
            prevV = vs[i]
            prevDist = dists[i]

    fixed = _repairLooped(pts,res,flags,vs,dists,oblique)
    if fixed:
        logger.debug('repaired %d colinear or duplicate points', fixed)
    return res

def _offsetOpen(pts,dists,referenceOrient,oblique):
    n = len(pts)
    vs = segmentVectorsXY(pts,False)
    ref = _reference(pts,vs,False,referenceOrient)

    res = [ point(p) for p in pts ]
    flags = [False]*n

    valid = [ i for i in range(n-1) if magsqXY(vs[i]) > LENGTH_TOL_SQ ]
    if not valid:
        raise DegeneratePolylineError(
            'all {} points are in the same location'.format(n))
    first = valid[0]
    last = valid[-1]
    for i in range(first):
        flags[i] = True
    for i in range(last+2,n):
        flags[i] = True

    res[first] = add(pts[first],segmentShiftXY(vs[first],dists[first],ref))
    prevV = vs[first]
    prevDist = dists[first]
    for i in range(first+1,last+1):
        corner = offsetInCornerXY(pts[i],prevV,vs[i],prevDist,dists[i],ref)
        if corner is None:
            flags[i] = True
            continue
        res[i] = corner[0]
        if magsqXY(vs[i]) > LENGTH_TOL_SQ:
            prevV = vs[i]
            prevDist = dists[i]
    res[last+1] = add(pts[last+1],segmentShiftXY(vs[last],dists[last],ref))

    fixed = _repairOpen(pts,res,flags,vs,dists,ref,oblique,first,last)
    if fixed:
        logger.debug('repaired %d colinear or duplicate points', fixed)

    ## make the ends exactly perpendicular to the first and last segment
    _fixOpenEnd(pts,res,0,first,first+1)
    _fixOpenEnd(pts,res,n-1,last,last+1)
    return res

def _fixOpenEnd(pts,res,i,a,b):
    foot = closestPointInfiniteXY(pts[a],pts[b],res[i])
    res[i] = add(pts[i],sub(res[i],foot))
    res[i][2] = pts[i][2]


## dispatcher
## ----------

def _distanceList(dists,count,pointcount,topology):
    if isgoodnum(dists):
        dl = [ float(dists) ]
    elif isinstance(dists,(list,tuple)):
        dl = list(dists)
    else:
        raise ValueError('bad offset distances: {}'.format(dists))
    for d in dl:
        if not isgoodnum(d) or not isfinite(d):
            raise ValueError('bad offset distance: {}'.format(d))
    if len(dl) == 1:
        return dl*count
    if len(dl) != count:
        raise OffsetDistanceError(len(dl),count,pointcount,topology)
    return dl

def offsetXY(pts,dists,loop=False,referenceOrient=0.0,obliqueOffsets=False):
    """Offset a polyline in the XY plane.

    ``pts`` is a list of points or coordinate tuples, at least two.
    ``dists`` is a single distance or one distance per segment: one
    less than the number of points for closed polylines and for open
    ones, as many as points for open polylines with ``loop=True``
    (the last distance is for the virtual closing segment).  Positive
    distances offset toward the inside, negative ones outward.

    If ``loop`` is true an open polyline is treated as if its last
    point connected back to the first when computing the end corners.
    Closed polylines are detected automatically and ignore ``loop``.

    ``referenceOrient`` of ``0.0`` detects the orientation of the
    polyline.  A positive value forces counter-clockwise, a negative
    value clockwise; offsets then go to the other side if the points
    run the other way.

    With ``obliqueOffsets`` colinear segments may have different
    distances; the points between them are placed on the line joining
    their neighbours, so the offset is not parallel there.

    Returns a new list of points with the same length as ``pts``.
    Raises ``ValueError`` for fewer than two points,
    ``OffsetDistanceError`` for a wrong number of distances,
    ``DegeneratePolylineError`` if no offset frame can be found and
    ``ObliqueOffsetError`` for colinear segments with different
    distances.
    """
    if not isinstance(pts,(list,tuple)) or len(pts) < 2:
        raise ValueError('offsetXY needs a polyline of at least two points, got {}'.format(vstr(pts)))
    if not isgoodnum(referenceOrient) or not isfinite(referenceOrient):
        raise ValueError('bad referenceOrient: {}'.format(referenceOrient))
    ply = topoly(pts)
    n = len(ply)

    if isclosed(ply):
        dl = _distanceList(dists,n-1,n,'closed')
        logger.debug('offsetting closed polyline of %d points', n)
        res = _offsetLooped(ply[:-1],dl,referenceOrient,obliqueOffsets)
        res.append(point(res[0]))
        return res
    elif loop:
        dl = _distanceList(dists,n,n,'looped open')
        logger.debug('offsetting looped open polyline of %d points', n)
        return _offsetLooped(ply,dl,referenceOrient,obliqueOffsets)
    else:
        dl = _distanceList(dists,n-1,n,'open')
        logger.debug('offsetting open polyline of %d points', n)
        return _offsetOpen(ply,dl,referenceOrient,obliqueOffsets)

def offsetConstXY(pts,d,**kw):
    """Offset all segments of a polyline by the same distance ``d``.
    Keyword arguments are those of ``offsetXY()``."""
    if not isgoodnum(d):
        raise ValueError('bad offset distance: {}'.format(d))
    return offsetXY(pts,d,**kw)
