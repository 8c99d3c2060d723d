# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for satellite state file I/O.

Adapters implement these to handle different storage formats.
"""
from typing import Protocol, runtime_checkable

from groundtrail.domain.satellite import SatelliteRecord


@runtime_checkable
class StateReader(Protocol):
    """Port for reading satellite state."""

    def read_state(self, path: str) -> list[SatelliteRecord]:
        """Read and parse a state file."""
        ...


@runtime_checkable
class StateWriter(Protocol):
    """Port for writing satellite state."""

    def write_state(self, records: list[SatelliteRecord], path: str) -> None:
        """Write satellite records to a state file."""
        ...
