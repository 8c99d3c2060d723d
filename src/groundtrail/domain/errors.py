# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Error types raised by the ground trail domain."""


class GroundTrailError(Exception):
    """Base class for all groundtrail errors."""


class InvalidLongitudeError(GroundTrailError, ValueError):
    """Longitude is NaN or infinite and cannot be normalized."""


class MalformedPointError(GroundTrailError, ValueError):
    """History point is missing lat/lon or has a latitude out of range."""


class MalformedRecordError(GroundTrailError, ValueError):
    """Satellite state record cannot be interpreted."""
