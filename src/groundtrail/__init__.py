# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Ground Trail

Turn satellite position histories into map-drawable ground trails.
Trails are split at the antimeridian with interpolated boundary points
and each track gets a stable color from a fixed palette. Includes satellite state records,
per-track drawing bundles, and GeoJSON/CSV/CZML export.
"""

from groundtrail.domain.errors import (
    GroundTrailError,
    InvalidLongitudeError,
    MalformedPointError,
    MalformedRecordError,
)
from groundtrail.domain.longitude import (
    normalize_lon,
    normalize_lon_array,
    unwrap_lon,
)
from groundtrail.domain.trail import (
    HistoryPoint,
    build_trail_segments,
    history_markers,
)
from groundtrail.domain.palette import (
    TRAIL_COLORS,
    string_hash,
    trail_color,
)
from groundtrail.domain.config import (
    DEFAULT_CONFIG,
    TrailConfig,
)
from groundtrail.domain.satellite import (
    SatelliteRecord,
    parse_satellite_record,
    satellite_record_to_dict,
    is_visible,
    visible_satellites,
    partition_by_status,
    record_position,
    record_failure,
)
from groundtrail.domain.track_layer import (
    TrackLayer,
    build_track_layer,
    build_track_layers,
)

__all__ = [
    "GroundTrailError",
    "InvalidLongitudeError",
    "MalformedPointError",
    "MalformedRecordError",
    "normalize_lon",
    "normalize_lon_array",
    "unwrap_lon",
    "HistoryPoint",
    "build_trail_segments",
    "history_markers",
    "TRAIL_COLORS",
    "string_hash",
    "trail_color",
    "DEFAULT_CONFIG",
    "TrailConfig",
    "SatelliteRecord",
    "parse_satellite_record",
    "satellite_record_to_dict",
    "is_visible",
    "visible_satellites",
    "partition_by_status",
    "record_position",
    "record_failure",
    "TrackLayer",
    "build_track_layer",
    "build_track_layers",
]
