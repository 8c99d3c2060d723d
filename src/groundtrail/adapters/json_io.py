# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON state file I/O adapter.

The state file is a JSON array with one object per satellite, as written
by the position fetcher.
"""
import json
import logging

from groundtrail.ports import StateReader, StateWriter
from groundtrail.domain.config import DEFAULT_CONFIG, TrailConfig
from groundtrail.domain.errors import MalformedRecordError
from groundtrail.domain.satellite import (
    SatelliteRecord,
    parse_satellite_record,
    satellite_record_to_dict,
)

logger = logging.getLogger(__name__)


class JsonStateReader(StateReader):
    """Reads satellite state from JSON files.

    Records that cannot be parsed are skipped with a warning, or raise
    MalformedRecordError when strict is True.
    """

    def __init__(self, config: TrailConfig = DEFAULT_CONFIG, strict: bool = False) -> None:
        self._config = config
        self._strict = strict

    def read_state(self, path: str) -> list[SatelliteRecord]:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
        return self.parse_state(data)

    def parse_state(self, data) -> list[SatelliteRecord]:
        if not isinstance(data, list):
            raise MalformedRecordError(
                f"State must be a JSON array, got {type(data).__name__}"
            )
        records: list[SatelliteRecord] = []
        for index, item in enumerate(data):
            try:
                records.append(parse_satellite_record(item, self._config))
            except MalformedRecordError as e:
                if self._strict:
                    raise
                logger.warning("Skipping state record %d: %s", index, e)
        return records


class JsonStateWriter(StateWriter):
    """Writes satellite state to JSON files."""

    def __init__(self, config: TrailConfig = DEFAULT_CONFIG) -> None:
        self._config = config

    def write_state(self, records: list[SatelliteRecord], path: str) -> None:
        data = [satellite_record_to_dict(r, self._config) for r in records]
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
