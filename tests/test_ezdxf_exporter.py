import ezdxf
import pytest

from polyshift.ezdxf_exporter import write_dxf, new_document, add_polyline
from polyshift.poly import Polyline, Rect
from polyshift.geom import point


def _lwpolylines(path):
    doc = ezdxf.readfile(path)
    return list(doc.modelspace().query("LWPOLYLINE"))


def test_write_closed_polyline(tmp_path):
    r = Rect(10, 10, point(5, 5))
    out = write_dxf(r, tmp_path / "square.dxf")
    assert out.exists() and out.stat().st_size > 0
    polylines = _lwpolylines(out)
    assert len(polylines) == 1
    pl = polylines[0]
    assert pl.closed
    pts = list(pl.get_points("xy"))
    assert len(pts) == 4
    assert pts[0] == pytest.approx((0, 0))
    assert pts[2] == pytest.approx((10, 10))
    assert pl.dxf.layer == "PATHS"


def test_write_open_point_list(tmp_path):
    out = write_dxf([(0, 0), (10, 0), (10, 10)], tmp_path / "open.dxf")
    pl = _lwpolylines(out)[0]
    assert not pl.closed
    assert len(list(pl.get_points("xy"))) == 3


def test_write_offset_layers(tmp_path):
    r = Rect(10, 10)
    inner = r.offset(1.0)
    out = write_dxf([r, inner], tmp_path / "offsets", layers=["PATHS", "OFFSETS"])
    assert out.suffix == ".dxf"
    layers = sorted(pl.dxf.layer for pl in _lwpolylines(out))
    assert layers == ["OFFSETS", "PATHS"]


def test_new_layer(tmp_path):
    out = write_dxf(Rect(1, 1), tmp_path / "custom.dxf", layers="CUT")
    doc = ezdxf.readfile(out)
    assert doc.layers.has_entry("CUT")


def test_bad_input(tmp_path):
    with pytest.raises(ValueError):
        write_dxf([], tmp_path / "empty.dxf")
    with pytest.raises(ValueError):
        write_dxf([Rect(1, 1), Rect(2, 2)], tmp_path / "x.dxf", layers=["A"])
    with pytest.raises(ValueError):
        write_dxf(["not a polyline"], tmp_path / "x.dxf")


def test_add_polyline():
    doc = new_document()
    msp = doc.modelspace()
    entity = add_polyline(msp, Polyline([(0, 0), (3, 4)]), layer="OFFSETS")
    assert entity.dxftype() == "LWPOLYLINE"
    assert len(entity) == 2
