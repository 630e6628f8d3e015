#!/usr/bin/env python3
"""
Command line entry point for polyshift.

Usage:
    python -m polyshift outline.json --distance 2
    python -m polyshift outline.json -d 4 -d 2 -d 2 -d 2 --loop
    cat outline.json | python -m polyshift - -d -1.5 --dxf out.dxf

The input is a JSON list of ``[x, y]`` pairs.  The offset polyline is
printed as JSON, or written to a DXF file together with the input.
"""

import argparse
import json
import logging
import sys
from pathlib import Path


def _read_points(source):
    if source == '-':
        text = sys.stdin.read()
    else:
        path = Path(source)
        if not path.exists():
            raise ValueError(f"File not found: {source}")
        text = path.read_text()
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"{source}: not valid JSON: {e}")
    if not isinstance(data, list):
        raise ValueError(f"{source}: expected a list of [x, y] points")
    return data


def _distances(values):
    if len(values) == 1:
        return values[0]
    return values


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='python -m polyshift',
        description='Parallel offset of a 2D polyline',
    )
    parser.add_argument('file', help="JSON file with a list of [x, y] points, or '-' for stdin")
    parser.add_argument('-d', '--distance', type=float, action='append', required=True,
                        help='Offset distance; repeat for one distance per segment')
    parser.add_argument('--loop', action='store_true',
                        help='Treat an open polyline as a loop when computing corners')
    parser.add_argument('--orient', type=float, default=0.0,
                        help='Reference orientation: >0 counter-clockwise, <0 clockwise, 0 detect')
    parser.add_argument('--oblique', action='store_true',
                        help='Allow different distances on colinear segments')
    parser.add_argument('--dxf', metavar='FILE',
                        help='Write input and offset polylines to a DXF file')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    from polyshift.offset import offsetXY

    try:
        pts = _read_points(args.file)
        res = offsetXY(pts, _distances(args.distance), loop=args.loop,
                       referenceOrient=args.orient,
                       obliqueOffsets=args.oblique)
        if args.dxf:
            from polyshift.ezdxf_exporter import write_dxf
            path = write_dxf([pts, res], args.dxf, layers=['PATHS', 'OFFSETS'])
            print(f"Exported to: {path}")
        else:
            json.dump([[p[0], p[1]] for p in res], sys.stdout)
            print()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
