# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Tests for longitude normalization.

Verifies the (-180, 180] range convention, periodicity, idempotence and
rejection of non-finite input.
"""
import ast
import math

import numpy as np
import pytest

from groundtrail.domain.errors import InvalidLongitudeError
from groundtrail.domain.longitude import (
    normalize_lon,
    normalize_lon_array,
    unwrap_lon,
)


class TestNormalizeLon:
    """Scalar normalization onto (-180, 180]."""

    @pytest.mark.parametrize("lon, expected", [
        (0.0, 0.0),
        (45.5, 45.5),
        (180.0, 180.0),
        (-180.0, 180.0),
        (190.0, -170.0),
        (-190.0, 170.0),
        (-181.0, 179.0),
        (360.0, 0.0),
        (540.0, 180.0),
        (-540.0, 180.0),
        (720.5, 0.5),
    ])
    def test_known_values(self, lon, expected):
        assert normalize_lon(lon) == pytest.approx(expected)

    def test_minus_180_maps_to_plus_180(self):
        assert normalize_lon(-180.0) == 180.0

    def test_accepts_integers(self):
        assert normalize_lon(370) == pytest.approx(10.0)

    def test_in_range_values_unchanged(self):
        for lon in (-179.999999, -1e-20, 1e-20, 179.999999):
            assert normalize_lon(lon) == lon


class TestNormalizeLonProperties:
    """Range, idempotence and periodicity hold for arbitrary input."""

    def _samples(self):
        rng = np.random.default_rng(42)
        return rng.uniform(-1.0e4, 1.0e4, size=500).tolist()

    def test_range_invariant(self):
        for lon in self._samples():
            x = normalize_lon(lon)
            assert -180.0 < x <= 180.0, f"normalize_lon({lon}) = {x}"

    def test_idempotent(self):
        for lon in self._samples():
            once = normalize_lon(lon)
            assert normalize_lon(once) == once

    @pytest.mark.parametrize("k", range(-3, 4))
    def test_periodic(self, k):
        for lon in (12.5, -179.5, 179.5, 0.0, 90.0, -90.25):
            assert normalize_lon(lon + 360.0 * k) == pytest.approx(normalize_lon(lon))


class TestNormalizeLonErrors:
    """Non-finite longitudes are rejected."""

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_raises(self, bad):
        with pytest.raises(InvalidLongitudeError):
            normalize_lon(bad)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_lon(float('nan'))


class TestNormalizeLonArray:
    """Vectorized normalization matches the scalar version."""

    def test_matches_scalar(self):
        values = [-540.0, -190.0, -180.0, -10.0, 0.0, 180.0, 190.0, 1000.0]
        result = normalize_lon_array(values)
        assert isinstance(result, np.ndarray)
        for raw, got in zip(values, result.tolist()):
            assert got == pytest.approx(normalize_lon(raw))

    def test_minus_180_maps_to_plus_180(self):
        assert normalize_lon_array([-180.0]).tolist() == [180.0]

    def test_empty(self):
        assert normalize_lon_array([]).size == 0

    def test_nan_raises(self):
        with pytest.raises(InvalidLongitudeError):
            normalize_lon_array([0.0, math.nan])


class TestUnwrapLon:
    """Unwrapping picks the representative nearest the reference."""

    def test_eastward_over_antimeridian(self):
        assert unwrap_lon(-170.0, 170.0) == 190.0

    def test_westward_over_antimeridian(self):
        assert unwrap_lon(170.0, -170.0) == -190.0

    def test_small_step_unchanged(self):
        assert unwrap_lon(20.0, 10.0) == 20.0

    def test_exactly_half_turn_unchanged(self):
        assert unwrap_lon(180.0, 0.0) == 180.0
        assert unwrap_lon(-180.0, 0.0) == -180.0


class TestLongitudePurity:
    """Domain purity: longitude.py imports only math, numpy and the domain."""

    def test_no_external_imports(self):
        import groundtrail.domain.longitude as mod
        with open(mod.__file__) as f:
            tree = ast.parse(f.read())

        allowed_top = {'math', 'numpy'}
        allowed_internal_prefix = 'groundtrail.domain'

        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    top = alias.name.split('.')[0]
                    assert top in allowed_top or alias.name.startswith(allowed_internal_prefix), \
                        f"Forbidden import: {alias.name}"
            elif isinstance(node, ast.ImportFrom):
                if node.module and node.level == 0:
                    top = node.module.split('.')[0]
                    assert top in allowed_top or node.module.startswith(allowed_internal_prefix), \
                        f"Forbidden import from: {node.module}"
