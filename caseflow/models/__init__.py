"""Domain enums shared by schemas and rules."""

from caseflow.models.enums import HealthStatus, HousingCategory, HousingStatus

__all__ = [
    "HealthStatus",
    "HousingCategory",
    "HousingStatus",
]
