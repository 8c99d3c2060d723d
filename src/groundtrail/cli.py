# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for ground trail export.

Usage:
    # Summarize a satellite state file
    groundtrail -i data.json

    # Export trails to GeoJSON, CSV, or CZML
    groundtrail -i data.json --export-geojson trails.geojson
    groundtrail -i data.json --export-csv trails.csv
    groundtrail -i data.json --export-czml trails.czml

    # Fail on the first malformed track instead of skipping it
    groundtrail -i data.json --export-geojson trails.geojson --strict
"""
import argparse
import json
import logging
import sys

from groundtrail.domain.config import DEFAULT_CONFIG, TrailConfig
from groundtrail.domain.errors import GroundTrailError
from groundtrail.domain.satellite import partition_by_status
from groundtrail.domain.track_layer import TrackLayer, build_track_layers
from groundtrail.adapters.json_io import JsonStateReader
from groundtrail.adapters.geojson_exporter import GeoJsonTrackExporter
from groundtrail.adapters.csv_exporter import CsvTrackExporter
from groundtrail.adapters.czml_exporter import trail_packets, write_czml


def run(
    input_path: str,
    config: TrailConfig = DEFAULT_CONFIG,
    strict: bool = False,
) -> list[TrackLayer]:
    """
    Load a state file and build the track layers of visible satellites.

    Prints the active/inactive listing and per-track segment counts.
    """
    records = JsonStateReader(config, strict=strict).read_state(input_path)
    active, inactive = partition_by_status(records)

    print(f"Loaded {len(records)} satellites "
          f"({len(active)} active, {len(inactive)} inactive)")
    for r in active:
        print(f"  {r.display_name}: running")
    for r in inactive:
        label = "decayed" if r.decayed else "inactive"
        print(f"  {r.display_name}: {label}")

    layers = build_track_layers(records, config, strict=strict)
    for layer in layers:
        print(f"  {layer.name}: {len(layer.segments)} segment(s) {layer.color}")
    return layers


def _export(args, layers: list[TrackLayer], config: TrailConfig) -> None:
    if args.export_geojson:
        n = GeoJsonTrackExporter(config).export(layers, args.export_geojson)
        print(f"Exported {n} tracks to {args.export_geojson}")

    if args.export_csv:
        n = CsvTrackExporter().export(layers, args.export_csv)
        print(f"Exported {n} tracks to {args.export_csv}")

    if args.export_czml:
        n = write_czml(trail_packets(layers, config=config), args.export_czml)
        print(f"Exported {n} CZML packets to {args.export_czml}")


def main():
    parser = argparse.ArgumentParser(
        description="Build antimeridian-safe ground trails from satellite history"
    )
    parser.add_argument(
        '--input', '-i', required=True,
        help="Path to the satellite state JSON (array of satellite records)"
    )
    parser.add_argument(
        '--history-max', type=int, default=None,
        help=f"Use at most this many history points per satellite "
             f"(default: {DEFAULT_CONFIG.history_max})"
    )
    parser.add_argument(
        '--strict', action='store_true', default=False,
        help="Abort on a malformed track instead of skipping it"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging"
    )

    export_group = parser.add_argument_group('export')
    export_group.add_argument(
        '--export-geojson',
        help="Export trails and positions to GeoJSON (FeatureCollection)"
    )
    export_group.add_argument(
        '--export-csv',
        help="Export trail segment vertices to CSV"
    )
    export_group.add_argument(
        '--export-czml',
        help="Export trails and positions to CZML for CesiumJS"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = DEFAULT_CONFIG
        if args.history_max is not None:
            config = config.with_overrides(history_max=args.history_max)

        layers = run(args.input, config=config, strict=args.strict)

    except FileNotFoundError:
        print(
            f"Error: Input file not found: {args.input}\n"
            f"Expected a JSON array of satellite records.",
            file=sys.stderr,
        )
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: Cannot read {args.input}: {e.strerror}", file=sys.stderr)
        sys.exit(1)
    except (GroundTrailError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        _export(args, layers, config)
    except OSError as e:
        target = e.filename if e.filename is not None else "export file"
        print(f"Error: Cannot write {target}: {e.strerror}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
