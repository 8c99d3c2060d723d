# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV ground trail exporter.

Writes one row per segment vertex so trails can be rebuilt by grouping
on (sat_id, segment_index). External dependencies (csv, file I/O) are
confined to this adapter.
"""
import csv
import logging

logger = logging.getLogger(__name__)

from groundtrail.ports.export import TrackExporter
from groundtrail.domain.track_layer import TrackLayer


_HEADER = [
    'sat_id', 'name', 'segment_index', 'point_index',
    'lat_deg', 'lon_deg', 'color',
]


class CsvTrackExporter(TrackExporter):
    """Exports trail segment vertices to CSV."""

    def export(self, layers: list[TrackLayer], path: str) -> int:
        rows = 0
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_HEADER)

            for layer in layers:
                for seg_idx, segment in enumerate(layer.segments):
                    for pt_idx, (lat, lon) in enumerate(segment):
                        writer.writerow([
                            layer.sat_id if layer.sat_id is not None else '',
                            layer.name,
                            seg_idx,
                            pt_idx,
                            f'{lat:.6f}',
                            f'{lon:.6f}',
                            layer.color,
                        ])
                        rows += 1

        if rows == 0:
            logger.warning("No trail segments to export, wrote header only to %s", path)
        return len(layers)
