"""Exceptions raised by the polyshift offset engine.

All of them derive from ``ValueError``, which is what the rest of the
package raises for bad input, so callers that already catch
``ValueError`` keep working.
"""


class OffsetError(ValueError):
    """Base class for failures of a polyline offset."""


class OffsetDistanceError(OffsetError):
    """The offset distance list does not fit the polyline."""

    def __init__(self, given, expected, pointcount, topology):
        self.given = given
        self.expected = expected
        self.pointcount = pointcount
        self.topology = topology
        super().__init__(
            f"{given} offset distances given but {topology} polyline with "
            f"{pointcount} points needs 1 or {expected}")


class DegeneratePolylineError(OffsetError):
    """All points coincide or are colinear, so there is no offset frame."""


class ObliqueOffsetError(OffsetError):
    """Colinear segments carry different offset distances."""

    def __init__(self, index, previdx, nextidx, distances):
        self.index = index
        self.previdx = previdx
        self.nextidx = nextidx
        self.distances = distances
        super().__init__(
            f"can't offset colinear point {index} between points {previdx} "
            f"and {nextidx}: segment distances differ {distances}; "
            f"pass obliqueOffsets=True to allow a non-parallel offset")


__all__ = [
    "OffsetError",
    "OffsetDistanceError",
    "DegeneratePolylineError",
    "ObliqueOffsetError",
]
