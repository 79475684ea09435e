from __future__ import annotations


class ScheduleValidationError(ValueError):
    """The request is malformed and was rejected before any solve was attempted."""
