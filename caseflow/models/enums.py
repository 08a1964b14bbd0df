"""Domain enums for intake data.

All enums use str mixin so raw intake strings compare and serialize directly.
"""

from __future__ import annotations

from enum import Enum


class HousingStatus(str, Enum):
    """Housing situation as recorded in the case-management section."""

    UNSHELTERED = "unsheltered"
    EMERGENCY_SHELTER = "emergency_shelter"
    TRANSITIONAL_HOUSING = "transitional_housing"
    AT_RISK = "at_risk"
    HOUSED = "housed"


class HousingCategory(str, Enum):
    """Collapsed housing situation the program rules reason about."""

    UNHOUSED = "unhoused"
    AT_RISK = "at_risk"
    HOUSED = "housed"
    UNKNOWN = "unknown"


class HealthStatus(str, Enum):
    """Health status values some rules treat as a qualifying condition."""

    BLIND = "blind"
    DEAF = "deaf"
