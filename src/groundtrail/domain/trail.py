# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Antimeridian-aware ground trail segmentation.

Turns a satellite's position history into polylines that a flat map can
draw without a line sweeping across the whole map at the ±180° meridian.

History is stored newest-first and processed oldest-first. Each step
unwraps the next longitude against the last drawn one; when the unwrapped
value leaves [-180, 180] the trail crosses the antimeridian:

    ... p1 ──► (lat_b, ±180) | (lat_b, ∓180) ──► p2 ...

The boundary latitude lat_b is linearly interpolated, the segment is
closed on one edge of the map and a new one opens on the mirrored edge.
"""
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from groundtrail.domain.errors import MalformedPointError
from groundtrail.domain.longitude import normalize_lon, normalize_lon_array, unwrap_lon

LatLon = tuple[float, float]
Segment = tuple[LatLon, ...]

_EAST_EDGE = 180.0
_WEST_EDGE = -180.0


@dataclass(frozen=True)
class HistoryPoint:
    """A past sub-satellite point. Longitude is stored un-normalized."""
    lat_deg: float
    lon_deg: float
    t: float | None = None

    def __post_init__(self) -> None:
        for name in ('lat_deg', 'lon_deg'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise MalformedPointError(
                    f"{name} must be a number, got {type(value).__name__}"
                )
        if not math.isfinite(self.lat_deg) or not -90.0 <= self.lat_deg <= 90.0:
            raise MalformedPointError(
                f"Latitude must be within [-90, 90], got {self.lat_deg}"
            )


def history_point_from_mapping(entry) -> HistoryPoint:
    """
    Coerce a history entry into a HistoryPoint.

    Accepts HistoryPoint instances unchanged and mappings with 'lat' and
    'lon' keys (plus optional 't'), the layout used by the state file.

    Raises:
        MalformedPointError: If lat/lon are missing, non-numeric or the
            latitude is out of range.
    """
    if isinstance(entry, HistoryPoint):
        return entry
    if not isinstance(entry, Mapping):
        raise MalformedPointError(
            f"History entry must be a mapping, got {type(entry).__name__}"
        )
    missing = [k for k in ('lat', 'lon') if entry.get(k) is None]
    if missing:
        raise MalformedPointError(f"History entry missing {', '.join(missing)}")
    try:
        lat = float(entry['lat'])
        lon = float(entry['lon'])
        t = float(entry['t']) if entry.get('t') is not None else None
    except (TypeError, ValueError) as e:
        raise MalformedPointError(f"History entry is not numeric: {e}") from e
    return HistoryPoint(lat_deg=lat, lon_deg=lon, t=t)


def _chronological(history: Sequence) -> list[LatLon]:
    """Validate, reverse to oldest-first and normalize longitudes."""
    points = [history_point_from_mapping(entry) for entry in history]
    return [(p.lat_deg, normalize_lon(p.lon_deg)) for p in reversed(points)]


def _advance(
    p1: LatLon, lat2: float, lon2: float,
) -> tuple[tuple[LatLon, ...], tuple[LatLon, ...] | None]:
    """
    One scan step from the last drawn point p1 towards (lat2, lon2).

    Returns (extend, restart): points appended to the current segment and,
    when the antimeridian is crossed, the opening points of the next one
    (None otherwise).

    An unwrapped -180 reached without a crossing stays -180 instead of
    normalizing to 180, and no boundary point is added when p1 already sits
    on the crossed edge. The alternatives draw a map-wide or zero-length line.
    """
    lat1, lon1 = p1
    lon2u = unwrap_lon(lon2, lon1)

    crosses_east = lon1 <= _EAST_EDGE and lon2u > _EAST_EDGE
    crosses_west = lon1 >= _WEST_EDGE and lon2u < _WEST_EDGE

    if not (crosses_east or crosses_west):
        if lon2u == _WEST_EDGE:
            # Reached the west edge from the east: stay on this side of the map
            return ((lat2, _WEST_EDGE),), None
        return ((lat2, normalize_lon(lon2u)),), None

    boundary = _EAST_EDGE if crosses_east else _WEST_EDGE
    # sign(boundary) below relies on the boundary being one of the map edges
    assert boundary in (_EAST_EDGE, _WEST_EDGE)

    # Crossing puts lon1 and lon2u on opposite sides of boundary, so the
    # denominator is non-zero and t lies in [0, 1)
    t = (boundary - lon1) / (lon2u - lon1)
    lat_b = lat1 + t * (lat2 - lat1)
    arrival = normalize_lon(lon2u - math.copysign(360.0, boundary))

    # p1 already on the edge: the boundary point would duplicate it
    extend = () if lon1 == boundary else ((lat_b, boundary),)
    return extend, ((lat_b, -boundary), (lat2, arrival))


def build_trail_segments(history: Sequence) -> tuple[Segment, ...]:
    """
    Split a position history into antimeridian-safe polylines.

    Args:
        history: HistoryPoint objects or {'lat', 'lon'} mappings,
            newest first.

    Returns:
        Segments in chronological order, each with at least two
        (lat, lon) points. Empty for histories with fewer than two points.

    Raises:
        MalformedPointError: If an entry is missing lat/lon or the
            latitude is out of range.
        InvalidLongitudeError: If a longitude is not finite.
    """
    points = _chronological(history)
    if len(points) < 2:
        return ()

    segments: list[Segment] = []
    current: list[LatLon] = [points[0]]

    for lat2, lon2 in points[1:]:
        extend, restart = _advance(current[-1], lat2, lon2)
        current.extend(extend)
        if restart is not None:
            if len(current) > 1:
                segments.append(tuple(current))
            current = list(restart)

    if len(current) > 1:
        segments.append(tuple(current))
    return tuple(segments)


def history_markers(history: Sequence) -> tuple[LatLon, ...]:
    """Every history sample as (lat, normalized lon), in stored order."""
    points = [history_point_from_mapping(entry) for entry in history]
    if not points:
        return ()
    lons = normalize_lon_array([p.lon_deg for p in points])
    return tuple(
        (p.lat_deg, lon) for p, lon in zip(points, lons.tolist())
    )
