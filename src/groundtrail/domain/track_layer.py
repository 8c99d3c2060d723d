# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Per-satellite drawing bundles.

A TrackLayer is everything a map front end needs for one satellite:
trail segments, history markers, the live position and the trail color.
Styling beyond the color is left to the renderer.
"""
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from groundtrail.domain.config import DEFAULT_CONFIG, TrailConfig
from groundtrail.domain.errors import GroundTrailError
from groundtrail.domain.palette import trail_color
from groundtrail.domain.satellite import SatelliteRecord, visible_satellites
from groundtrail.domain.trail import LatLon, Segment, build_trail_segments, history_markers

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrackLayer:
    """Geometry and color for one satellite's ground trail."""
    sat_id: str | int | None
    name: str
    color: str
    segments: tuple[Segment, ...]
    markers: tuple[LatLon, ...]
    position: LatLon | None


def build_track_layer(
    record: SatelliteRecord,
    index: int,
    config: TrailConfig = DEFAULT_CONFIG,
) -> TrackLayer:
    """
    Build the layer for one satellite.

    The color is keyed by the satellite id, or by index when the record
    has no id, so a satellite keeps its color across re-renders.
    """
    key = record.sat_id if record.sat_id is not None else index
    return TrackLayer(
        sat_id=record.sat_id,
        name=record.display_name,
        color=trail_color(key, config.palette),
        segments=build_trail_segments(record.history),
        markers=history_markers(record.history),
        position=record.location,
    )


def build_track_layers(
    records: Iterable[SatelliteRecord],
    config: TrailConfig = DEFAULT_CONFIG,
    strict: bool = False,
) -> list[TrackLayer]:
    """
    Build layers for every visible satellite.

    Index-keyed colors use the position among visible satellites. A track
    whose history cannot be segmented is skipped with a warning, or the
    error is re-raised when strict is True.
    """
    layers: list[TrackLayer] = []
    for index, record in enumerate(visible_satellites(records)):
        try:
            layer = build_track_layer(record, index, config)
        except GroundTrailError as e:
            if strict:
                raise
            logger.warning("Skipping track %s: %s", record.display_name, e)
            continue
        logger.debug(
            "Track %s: %d segment(s), color %s",
            layer.name, len(layer.segments), layer.color,
        )
        layers.append(layer)
    return layers
