# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Satellite state records.

A state file holds one record per tracked satellite: identity, status,
the latest fix and a short newest-first history. Records are immutable;
updates return new records.

A satellite without a usable fix carries the location flag (999, 999)
on disk and location=None in memory. After fail_decay_threshold
consecutive failed fixes a satellite is marked decayed and inactive.
"""
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace

from groundtrail.domain.config import DEFAULT_CONFIG, TrailConfig
from groundtrail.domain.errors import MalformedPointError, MalformedRecordError
from groundtrail.domain.trail import HistoryPoint, history_point_from_mapping

STATUS_INACTIVE = 0
STATUS_ACTIVE = 1


@dataclass(frozen=True)
class SatelliteRecord:
    """Tracked satellite state."""
    sat_id: str | int | None
    satname: str | None = None
    status: int = STATUS_INACTIVE
    decayed: bool = False
    fail_count: int = 0
    last_checked: float = 0.0
    location: tuple[float, float] | None = None
    history: tuple[HistoryPoint, ...] = ()

    @property
    def display_name(self) -> str:
        if self.satname:
            return self.satname
        return str(self.sat_id) if self.sat_id is not None else "unknown"


def _parse_location(raw, config: TrailConfig) -> tuple[float, float] | None:
    if not isinstance(raw, Mapping):
        return None
    lat = raw.get('lat')
    lon = raw.get('lon')
    if not isinstance(lat, (int, float)) or not isinstance(lon, (int, float)):
        return None
    if lat == config.invalid_location_flag and lon == config.invalid_location_flag:
        return None
    return (float(lat), float(lon))


def parse_satellite_record(
    data: Mapping,
    config: TrailConfig = DEFAULT_CONFIG,
) -> SatelliteRecord:
    """
    Build a SatelliteRecord from one state-file entry.

    Missing fields take the defaults a freshly added satellite has.
    History entries are validated and trimmed to config.history_max;
    location is kept as found so that visibility filtering can reject
    out-of-range fixes.

    Raises:
        MalformedRecordError: If data is not a mapping, the id is neither
            a string nor an integer, or a history entry is malformed.
    """
    if not isinstance(data, Mapping):
        raise MalformedRecordError(
            f"Satellite record must be an object, got {type(data).__name__}"
        )

    sat_id = data.get('id')
    if sat_id is not None and (isinstance(sat_id, bool) or not isinstance(sat_id, (str, int))):
        raise MalformedRecordError(
            f"Satellite id must be a string or integer, got {sat_id!r}"
        )

    raw_history = data.get('history') or []
    if not isinstance(raw_history, list):
        raise MalformedRecordError(f"History of {sat_id} must be an array")
    try:
        history = tuple(
            history_point_from_mapping(p) for p in raw_history[:config.history_max]
        )
    except MalformedPointError as e:
        raise MalformedRecordError(f"Satellite {sat_id}: {e}") from e

    try:
        return SatelliteRecord(
            sat_id=sat_id,
            satname=data.get('satname'),
            status=int(data.get('status') or STATUS_INACTIVE),
            decayed=bool(data.get('decayed', False)),
            fail_count=int(data.get('failCount') or 0),
            last_checked=float(data.get('lastChecked') or 0.0),
            location=_parse_location(data.get('location'), config),
            history=history,
        )
    except (TypeError, ValueError) as e:
        raise MalformedRecordError(f"Satellite {sat_id}: {e}") from e


def satellite_record_to_dict(
    record: SatelliteRecord,
    config: TrailConfig = DEFAULT_CONFIG,
) -> dict:
    """Inverse of parse_satellite_record, in state-file field names."""
    if record.location is None:
        flag = config.invalid_location_flag
        location = {'lat': flag, 'lon': flag}
    else:
        location = {'lat': record.location[0], 'lon': record.location[1]}

    history = []
    for p in record.history:
        entry = {'lat': p.lat_deg, 'lon': p.lon_deg}
        if p.t is not None:
            entry['t'] = p.t
        history.append(entry)

    return {
        'id': record.sat_id,
        'satname': record.satname,
        'status': record.status,
        'decayed': record.decayed,
        'failCount': record.fail_count,
        'lastChecked': record.last_checked,
        'location': location,
        'history': history,
    }


def is_visible(record: SatelliteRecord) -> bool:
    """Active with a finite fix inside the map's lat/lon bounds."""
    if record.status != STATUS_ACTIVE or record.location is None:
        return False
    lat, lon = record.location
    return (
        math.isfinite(lat) and math.isfinite(lon)
        and -90.0 <= lat <= 90.0
        and -180.0 <= lon <= 180.0
    )


def visible_satellites(records: Iterable[SatelliteRecord]) -> list[SatelliteRecord]:
    return [r for r in records if is_visible(r)]


def partition_by_status(
    records: Iterable[SatelliteRecord],
) -> tuple[list[SatelliteRecord], list[SatelliteRecord]]:
    """Split into (active, inactive), preserving order."""
    active: list[SatelliteRecord] = []
    inactive: list[SatelliteRecord] = []
    for r in records:
        if r.status == STATUS_ACTIVE:
            active.append(r)
        elif r.status == STATUS_INACTIVE:
            inactive.append(r)
    return active, inactive


def record_position(
    record: SatelliteRecord,
    lat_deg: float,
    lon_deg: float,
    t: float,
    checked_at: float,
    config: TrailConfig = DEFAULT_CONFIG,
) -> SatelliteRecord:
    """
    Merge a successful fix into the record.

    The new point goes to the front of the history, which is then trimmed
    to config.history_max entries. The satellite becomes active and its
    failure count resets.

    Raises:
        MalformedPointError: If lat_deg is out of range.
    """
    point = HistoryPoint(lat_deg=lat_deg, lon_deg=lon_deg, t=t)
    history = ((point,) + record.history)[:config.history_max]
    return replace(
        record,
        status=STATUS_ACTIVE,
        decayed=False,
        fail_count=0,
        last_checked=checked_at,
        location=(lat_deg, lon_deg),
        history=history,
    )


def record_failure(
    record: SatelliteRecord,
    checked_at: float,
    config: TrailConfig = DEFAULT_CONFIG,
) -> SatelliteRecord:
    """Count a failed fix; decay the satellite once the threshold is reached."""
    fail_count = record.fail_count + 1
    if fail_count >= config.fail_decay_threshold:
        return replace(
            record,
            status=STATUS_INACTIVE,
            decayed=True,
            fail_count=fail_count,
            last_checked=checked_at,
            location=None,
        )
    return replace(record, fail_count=fail_count, last_checked=checked_at)
