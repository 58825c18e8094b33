"""
Custom exceptions for the application.
"""

from typing import Any, Optional


class BuildTrackError(Exception):
    """Base exception for buildtrack."""

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(BuildTrackError):
    """Validation error."""

    pass


class TemplateTableError(BuildTrackError):
    """Milestone template table is malformed."""

    def __init__(self, message: str, project_type: Optional[str] = None, details: Optional[Any] = None):
        super().__init__(message, details=details)
        self.project_type = project_type

