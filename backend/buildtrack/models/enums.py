"""
Enum definitions for the application.

These enums are used across models and provide type-safe category/status values.
"""

from enum import Enum


class ProjectType(str, Enum):
    """Construction project category. Drives milestone templates and estimates."""

    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"
    INFRASTRUCTURE = "infrastructure"
    RENOVATION = "renovation"
    OTHER = "other"  # Fallback for unknown categories


class MilestoneStatus(str, Enum):
    """Milestone status."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    DELAYED = "delayed"
    COMPLETED = "completed"
