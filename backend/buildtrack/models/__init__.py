"""Pydantic models (schemas) for the application."""

from buildtrack.models.enums import MilestoneStatus, ProjectType
from buildtrack.models.milestone import (
    Deliverable,
    Milestone,
    MilestoneTemplate,
    ProjectTimelinePlan,
)

__all__ = [
    # Enums
    "ProjectType",
    "MilestoneStatus",
    # Milestone
    "MilestoneTemplate",
    "Milestone",
    "Deliverable",
    "ProjectTimelinePlan",
]
