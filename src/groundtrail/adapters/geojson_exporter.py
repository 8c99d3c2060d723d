# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
GeoJSON ground trail exporter.

Exports each satellite's trail as a MultiLineString feature, one line per
antimeridian-safe segment, plus a Point feature for its live position.
Coordinates follow RFC 7946: [lon, lat]. Line styling uses the
simplestyle property names understood by most GeoJSON viewers.
External dependencies (json, file I/O) are confined to this adapter.
"""
import json

from groundtrail.ports.export import TrackExporter
from groundtrail.domain.config import DEFAULT_CONFIG, TrailConfig
from groundtrail.domain.track_layer import TrackLayer


def _lon_lat(point: tuple[float, float]) -> list[float]:
    lat, lon = point
    return [round(lon, 6), round(lat, 6)]


class GeoJsonTrackExporter(TrackExporter):
    """Exports track layers as a GeoJSON FeatureCollection."""

    def __init__(self, config: TrailConfig = DEFAULT_CONFIG) -> None:
        self._config = config

    def build_collection(self, layers: list[TrackLayer]) -> dict:
        features = []

        for layer in layers:
            if layer.segments:
                features.append({
                    'type': 'Feature',
                    'geometry': {
                        'type': 'MultiLineString',
                        'coordinates': [
                            [_lon_lat(p) for p in segment]
                            for segment in layer.segments
                        ],
                    },
                    'properties': {
                        'id': layer.sat_id,
                        'name': layer.name,
                        'kind': 'trail',
                        'stroke': layer.color,
                        'stroke-width': self._config.line_weight,
                        'stroke-opacity': self._config.line_opacity,
                    },
                })

            if layer.position is not None:
                features.append({
                    'type': 'Feature',
                    'geometry': {
                        'type': 'Point',
                        'coordinates': _lon_lat(layer.position),
                    },
                    'properties': {
                        'id': layer.sat_id,
                        'name': layer.name,
                        'kind': 'position',
                        'marker-color': layer.color,
                        'coverage_radius_m': self._config.coverage_radius_m,
                    },
                })

        return {
            'type': 'FeatureCollection',
            'features': features,
        }

    def export(self, layers: list[TrackLayer], path: str) -> int:
        collection = self.build_collection(layers)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(collection, f, indent=2, ensure_ascii=False)
        return len(layers)
