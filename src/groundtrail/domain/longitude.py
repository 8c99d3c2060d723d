# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Longitude normalization onto the map range (-180, 180].

The canonical range is half-open on the low end: -180 and +180 denote the
same meridian and -180 is reported as +180. Values already in range are
returned untouched, which keeps normalization exactly idempotent.
"""
import math

import numpy as np

from groundtrail.domain.errors import InvalidLongitudeError


def normalize_lon(lon: float) -> float:
    """
    Map a longitude in degrees to its representative in (-180, 180].

    Args:
        lon: Longitude in degrees, any finite value.

    Returns:
        Equivalent longitude in (-180, 180].

    Raises:
        InvalidLongitudeError: If lon is NaN or infinite.
    """
    lon = float(lon)
    if not math.isfinite(lon):
        raise InvalidLongitudeError(f"Longitude must be finite, got {lon}")
    if -180.0 < lon <= 180.0:
        return lon
    # Python's % is floored, so the result is never negative
    x = (lon + 180.0) % 360.0 - 180.0
    if x == -180.0:
        x = 180.0
    return x


def normalize_lon_array(values) -> np.ndarray:
    """Vectorized normalize_lon over any array-like of longitudes."""
    lons = np.asarray(values, dtype=float)
    if not np.all(np.isfinite(lons)):
        raise InvalidLongitudeError("Longitude array contains non-finite values")
    in_range = (lons > -180.0) & (lons <= 180.0)
    wrapped = np.mod(lons + 180.0, 360.0) - 180.0
    wrapped = np.where(wrapped == -180.0, 180.0, wrapped)
    return np.where(in_range, lons, wrapped)


def unwrap_lon(lon: float, reference: float) -> float:
    """Shift lon by one turn so that lon - reference lies in [-180, 180]."""
    delta = lon - reference
    if delta > 180.0:
        return lon - 360.0
    if delta < -180.0:
        return lon + 360.0
    return lon
