"""
DXF export of polylines.

Writes polyshift polylines, including offset results, to DXF files
with the ezdxf library.  Every polyline becomes one LWPOLYLINE entity;
closed polylines are written once, without the repeated end point, and
with the DXF closed flag set.

Copyright (c) 2026 polyshift contributors
All rights reserved (MIT License)
"""

import logging
from pathlib import Path
from typing import List, Sequence, Union

import ezdxf

from polyshift.geom import isgoodnum, isclosed, topoly
from polyshift.poly import Polyline

logger = logging.getLogger(__name__)

LAYER_COLORS = {
    'PATHS': 7,          # white
    'OFFSETS': 4,        # aqua
    'DOCUMENTATION': 2,  # yellow
}


def _as_points(pl) -> list:
    if isinstance(pl, Polyline):
        return pl.points
    if isinstance(pl, (list, tuple)):
        return topoly(pl)
    raise ValueError(f'not a polyline: {pl!r}')


def _is_single(x) -> bool:
    if isinstance(x, Polyline):
        return True
    if isinstance(x, (list, tuple)) and x:
        first = x[0]
        return isinstance(first, (list, tuple)) and len(first) > 0 \
            and isgoodnum(first[0])
    return False


def new_document():
    """Create an empty metric (millimetre) DXF document with the
    standard polyshift layers."""
    # setup=False avoids default blocks with SOLID entities that some
    # CAD programs don't read
    doc = ezdxf.new(dxfversion='R2010', setup=False)
    doc.header['$MEASUREMENT'] = 1  # metric
    doc.header['$INSUNITS'] = 4  # millimeters
    for name, color in LAYER_COLORS.items():
        doc.layers.new(name, dxfattribs={'color': color})
    return doc


def add_polyline(msp, pl, layer: str = 'PATHS'):
    """Add one polyline to a modelspace and return the entity."""
    pts = _as_points(pl)
    closed = isclosed(pts)
    if closed:
        pts = pts[:-1]
    return msp.add_lwpolyline([(p[0], p[1]) for p in pts], format='xy',
                              close=closed, dxfattribs={'layer': layer})


def write_dxf(polylines: Union[Polyline, Sequence], output_path: Union[str, Path],
              layers: Union[str, List[str]] = 'PATHS') -> Path:
    """Write one polyline or a list of polylines to a DXF file.

    Args:
        polylines: a ``Polyline``, a point list, or a list of either
        output_path: path of the DXF file; ``.dxf`` is added if missing
        layers: layer name for all polylines, or one name per polyline

    Returns:
        The path that was written.

    Raises ``ValueError`` for bad input; errors writing the file
    propagate.
    """
    if _is_single(polylines):
        polylines = [polylines]
    if not polylines:
        raise ValueError('nothing to export')

    if isinstance(layers, str):
        layers = [layers] * len(polylines)
    if len(layers) != len(polylines):
        raise ValueError(f'{len(layers)} layers given for {len(polylines)} polylines')

    path = Path(output_path)
    if path.suffix.lower() != '.dxf':
        path = path.with_suffix('.dxf')

    doc = new_document()
    msp = doc.modelspace()
    for pl, layer in zip(polylines, layers):
        if not doc.layers.has_entry(layer):
            doc.layers.new(layer)
        add_polyline(msp, pl, layer)
    doc.saveas(path)
    logger.debug('wrote %d polylines to %s', len(polylines), path)
    return path


__all__ = ['new_document', 'add_polyline', 'write_dxf']
