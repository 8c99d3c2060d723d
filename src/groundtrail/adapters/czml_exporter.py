# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CZML ground trail exporter.

Produces a CZML document for CesiumJS: a document packet followed by one
clamped polyline packet per trail segment and one point packet per live
position. Colors are converted from palette hex strings to RGBA.
"""
import json

from groundtrail.domain.config import DEFAULT_CONFIG, TrailConfig
from groundtrail.domain.track_layer import TrackLayer


def hex_to_rgba(color: str, alpha: int = 255) -> list[int]:
    """'#RRGGBB' -> [r, g, b, alpha]."""
    value = color.lstrip('#')
    if len(value) != 6:
        raise ValueError(f"Expected #RRGGBB color, got {color!r}")
    return [int(value[i:i + 2], 16) for i in (0, 2, 4)] + [alpha]


def _document_packet(name: str) -> dict:
    return {
        "id": "document",
        "name": name,
        "version": "1.0",
    }


def trail_packets(
    layers: list[TrackLayer],
    name: str = "Ground Trails",
    config: TrailConfig = DEFAULT_CONFIG,
) -> list[dict]:
    """Document packet + polyline packet per segment + point per position."""
    packets: list[dict] = [_document_packet(name)]
    alpha = round(config.line_opacity * 255)

    for idx, layer in enumerate(layers):
        ident = layer.sat_id if layer.sat_id is not None else f"track-{idx}"
        rgba = hex_to_rgba(layer.color, alpha)

        for seg_idx, segment in enumerate(layer.segments):
            coords: list[float] = []
            for lat, lon in segment:
                coords.extend([lon, lat, 0.0])
            packets.append({
                "id": f"{ident}-seg-{seg_idx}",
                "name": layer.name,
                "polyline": {
                    "positions": {
                        "cartographicDegrees": coords,
                    },
                    "clampToGround": True,
                    "arcType": "RHUMB",
                    "material": {
                        "solidColor": {
                            "color": {"rgba": rgba},
                        },
                    },
                    "width": config.line_weight,
                },
            })

        if layer.position is not None:
            lat, lon = layer.position
            packets.append({
                "id": f"{ident}-position",
                "name": layer.name,
                "position": {
                    "cartographicDegrees": [lon, lat, 0.0],
                },
                "point": {
                    "pixelSize": config.icon_size_px,
                    "color": {"rgba": hex_to_rgba(layer.color)},
                },
            })

    return packets


def write_czml(packets: list[dict], path: str) -> int:
    """Write JSON array to file. Returns len(packets)."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(packets, f, indent=2, ensure_ascii=False)
    return len(packets)
