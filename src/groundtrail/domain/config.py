# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Read-only trail configuration.

A single frozen TrailConfig carries the palette, history bounds and the
drawing hints handed to exporters. DEFAULT_CONFIG is built once at import;
variants are derived with with_overrides, never by mutation.
"""
from dataclasses import dataclass, replace

from groundtrail.domain.palette import TRAIL_COLORS


@dataclass(frozen=True)
class TrailConfig:
    """Process-wide settings for trail building and export."""
    palette: tuple[str, ...] = TRAIL_COLORS
    history_max: int = 4
    fail_decay_threshold: int = 3
    icon_size_px: int = 28
    line_weight: float = 2.0
    line_opacity: float = 0.9
    marker_radius_px: float = 3.0
    coverage_radius_m: float = 1_000_000.0
    invalid_location_flag: float = 999.0

    def __post_init__(self) -> None:
        if not isinstance(self.palette, tuple):
            object.__setattr__(self, 'palette', tuple(self.palette))
        if not self.palette:
            raise ValueError("palette must contain at least one color")
        if self.history_max < 1:
            raise ValueError(f"history_max must be >= 1, got {self.history_max}")
        if self.fail_decay_threshold < 1:
            raise ValueError(
                f"fail_decay_threshold must be >= 1, got {self.fail_decay_threshold}"
            )
        if not 0.0 <= self.line_opacity <= 1.0:
            raise ValueError(f"line_opacity must be in [0, 1], got {self.line_opacity}")

    def with_overrides(self, **changes) -> "TrailConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


DEFAULT_CONFIG = TrailConfig()
