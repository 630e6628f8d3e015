import pytest
from polyshift.poly import Polyline, Rect
from polyshift.geom import point, vclose, close
from polyshift.errors import ObliqueOffsetError
import polyshift.xform as xform


def test_polyline_copies_points():
    pts = [point(0,0), point(2,0), point(2,2)]
    pl = Polyline(pts)
    pts[0][0] = 99
    assert vclose(pl[0], point(0,0))
    got = pl.points
    got[1][1] = 99
    assert vclose(pl[1], point(2,0))
    assert len(pl) == 3
    assert not pl.closed


def test_polyline_measures():
    pl = Polyline([(0,0), (4,0), (4,3)])
    assert close(pl.length, 7.0)
    bbox = pl.bbox
    assert vclose(bbox[0], point(0,0)) and vclose(bbox[1], point(4,3))
    assert pl.area == 0.0


def test_polyline_bad_input():
    with pytest.raises(ValueError):
        Polyline([(0,0)])


def test_rect():
    r = Rect(4, 2, point(1,1))
    assert r.closed
    assert len(r) == 5
    assert vclose(r[0], point(-1,0))
    assert vclose(r[2], point(3,2))
    assert close(r.area, 8.0)
    with pytest.raises(ValueError):
        Rect(0, 2)


def test_reverse_and_isclose():
    r = Rect(2, 2)
    rev = r.reverse()
    assert close(rev.area, -4.0)
    assert rev.reverse().isclose(r)
    assert not rev.isclose(r)


def test_transforms():
    r = Rect(2, 2)
    moved = r.translate(point(5,5))
    assert vclose(moved[0], point(4,4))
    assert vclose(r[0], point(-1,-1))
    turned = r.rotate(90)
    assert vclose(turned[0], point(1,-1))
    turned = r.rotate(90, cent=point(1,1))
    assert vclose(turned[0], point(3,-1))
    scaled = r.transform(xform.Scale(2))
    assert close(scaled.area, 16.0)


def test_closest_point():
    pl = Polyline([(0,0), (10,0), (10,10)])
    assert vclose(pl.closestPoint(point(5,3)), point(5,0))
    assert vclose(pl.closestPoint(point(12,5)), point(10,5))
    assert close(pl.distanceTo(point(13,14)), 5.0)


def test_offset():
    r = Rect(10, 10, point(5,5))
    inner = r.offset(2.0)
    assert isinstance(inner, Polyline)
    assert inner.closed
    assert inner.isclose([(2,2), (8,2), (8,8), (2,8), (2,2)])
    outer = r.offset(-1.0)
    assert close(outer.area, 144.0)
    assert r.isclose([(0,0), (10,0), (10,10), (0,10), (0,0)])


def test_offset_options():
    pl = Polyline([(0,0), (10,0), (10,10), (0,10)])
    assert pl.offset(2.0).isclose([(0,2), (8,2), (8,8), (0,8)])
    assert pl.offset(2.0, loop=True).isclose([(2,2), (8,2), (8,8), (2,8)])
    assert pl.offset(2.0, loop=True, referenceOrient=-1.0).isclose(
        [(-2,-2), (12,-2), (12,12), (-2,12)])
    straight = Polyline([(0,0), (5,0), (10,0), (10,5)])
    with pytest.raises(ObliqueOffsetError):
        straight.offset([1, 2, 1])
    bent = straight.offset([1, 2, 1], obliqueOffsets=True)
    assert vclose(bent[1], point(5,1))
