# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Tests for the read-only trail configuration.
"""
import dataclasses

import pytest

from groundtrail.domain.config import DEFAULT_CONFIG, TrailConfig
from groundtrail.domain.palette import TRAIL_COLORS


class TestDefaults:
    """DEFAULT_CONFIG carries the documented values."""

    def test_values(self):
        assert DEFAULT_CONFIG.palette == TRAIL_COLORS
        assert DEFAULT_CONFIG.history_max == 4
        assert DEFAULT_CONFIG.fail_decay_threshold == 3
        assert DEFAULT_CONFIG.icon_size_px == 28
        assert DEFAULT_CONFIG.line_weight == 2.0
        assert DEFAULT_CONFIG.line_opacity == 0.9
        assert DEFAULT_CONFIG.coverage_radius_m == 1_000_000.0
        assert DEFAULT_CONFIG.invalid_location_flag == 999.0

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.history_max = 10


class TestOverrides:
    """with_overrides derives a new config."""

    def test_returns_new_instance(self):
        cfg = DEFAULT_CONFIG.with_overrides(history_max=10)
        assert cfg.history_max == 10
        assert DEFAULT_CONFIG.history_max == 4

    def test_list_palette_coerced_to_tuple(self):
        cfg = TrailConfig(palette=["#000000", "#ffffff"])
        assert cfg.palette == ("#000000", "#ffffff")


class TestValidation:
    """Invalid settings are rejected at construction."""

    @pytest.mark.parametrize("changes", [
        {'palette': ()},
        {'history_max': 0},
        {'fail_decay_threshold': 0},
        {'line_opacity': 1.5},
        {'line_opacity': -0.1},
    ])
    def test_invalid(self, changes):
        with pytest.raises(ValueError):
            DEFAULT_CONFIG.with_overrides(**changes)
