# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for ground trail export.

Adapters implement this to write track layers in various formats
(GeoJSON, CSV, etc.).
"""
from typing import Protocol, runtime_checkable

from groundtrail.domain.track_layer import TrackLayer


@runtime_checkable
class TrackExporter(Protocol):
    """Port for exporting track layers to file."""

    def export(self, layers: list[TrackLayer], path: str) -> int:
        """
        Export track layers to a file.

        Args:
            layers: TrackLayer objects, one per satellite.
            path: Output file path.

        Returns:
            Number of layers exported.
        """
        ...
