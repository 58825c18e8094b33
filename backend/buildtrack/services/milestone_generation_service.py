"""
Milestone generation service.

This module provides functionality to:
- Generate a project's milestones from its type and start/end dates
- Estimate a project end date from its type and size
- Suggest a milestone count for a project duration
- Plan a full timeline the way the project creation wizard does

Everything here is synchronous and side-effect free apart from id and
timestamp generation. The template table is read, never written.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from datetime import timedelta
from functools import lru_cache
from typing import Optional

from buildtrack.core.config import get_settings
from buildtrack.core.exceptions import ValidationError
from buildtrack.core.logger import setup_logger
from buildtrack.models.enums import MilestoneStatus
from buildtrack.models.milestone import (
    MAX_DELIVERABLE_NAME_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MAX_NAME_LENGTH,
    Deliverable,
    Milestone,
    ProjectTimelinePlan,
)
from buildtrack.services.milestone_templates import (
    ProjectTypeLike,
    get_base_duration_days,
    get_base_milestone_count,
    get_milestone_templates,
    resolve_project_type,
    validate_template_table,
)
from buildtrack.utils.datetime_utils import DateLike, ensure_utc, months_between, now_utc

logger = setup_logger(__name__)

# Size at which the duration estimate equals the base duration
SIZE_BASELINE = 1000.0

# Duration (months) covered by the base milestone count; one extra
# milestone is suggested per additional block of this length
MILESTONE_BLOCK_MONTHS = 6

# Upper bound for suggested milestone counts, however long the project
MAX_MILESTONE_COUNT = 12


def _round_half_up(value: float) -> int:
    """Round .5 upward (Python's round() would give 254 for 254.5)."""
    return math.floor(value + 0.5)


class MilestoneGenerationService:
    """Service for milestone generation and timeline heuristics."""

    def __init__(self, validate_templates: Optional[bool] = None):
        """
        Initialize milestone generation service.

        Args:
            validate_templates: Check the template table once now (defaults to VALIDATE_TEMPLATES_ON_STARTUP)
        """
        if validate_templates is None:
            validate_templates = get_settings().VALIDATE_TEMPLATES_ON_STARTUP
        if validate_templates:
            validate_template_table()

    def generate_milestones(
        self,
        project_type: ProjectTypeLike,
        start_date: DateLike,
        end_date: DateLike,
    ) -> list[Milestone]:
        """
        Generate milestones for a project type and timeline.

        Each template's target date is start + (end - start) * relative_position.
        An end date before the start date is not rejected; the dates then run
        backwards from the start.

        Args:
            project_type: Project type (unknown types use the OTHER templates)
            start_date: Project start
            end_date: Project end

        Returns:
            Fresh milestones in template order
        """
        resolved = resolve_project_type(project_type)
        templates = get_milestone_templates(resolved)
        start = ensure_utc(start_date)
        duration = ensure_utc(end_date) - start
        created_at = now_utc()

        milestones = []
        for template in templates:
            deliverables = [Deliverable(name=name) for name in template.deliverable_names]
            milestones.append(Milestone(
                name=template.name,
                description=template.description,
                target_date=start + duration * template.relative_position,
                status=MilestoneStatus.NOT_STARTED,
                deliverables=deliverables,
                date_created=created_at,
            ))

        logger.debug(
            "Generated %d milestones for project type %s (%s + %d days)",
            len(milestones),
            resolved.value,
            start,
            duration.days,
        )
        return milestones

    def calculate_project_end_date(
        self,
        project_type: ProjectTypeLike,
        start_date: DateLike,
        size: float = SIZE_BASELINE,
    ) -> DateLike:
        """
        Suggest a project end date from its type and size.

        Duration scales with the square root of size / 1000, so doubling the
        size adds about 41% rather than 100%.

        Args:
            project_type: Project type (unknown types use OTHER's base duration)
            start_date: Project start (a date or datetime; the result has the same type)
            size: Size indicator such as square footage or budget

        Returns:
            start_date plus the adjusted duration in whole days

        Raises:
            ValidationError: If the size is so large that the end date falls
                past the last representable date (year 9999)
        """
        # A non-positive size is degenerate but allowed: zero duration
        size_factor = math.sqrt(size / SIZE_BASELINE) if size > 0 else 0.0
        base_duration = get_base_duration_days(project_type)
        adjusted_days = _round_half_up(base_duration * size_factor)

        try:
            return start_date + timedelta(days=adjusted_days)
        except OverflowError as e:
            raise ValidationError(
                f"Project size {size} gives an end date beyond the supported date range",
                details={"size": size, "duration_days": adjusted_days},
            ) from e

    def suggest_milestone_count(
        self,
        project_type: ProjectTypeLike,
        duration_months: float,
    ) -> int:
        """
        Suggest how many milestones a project of this length should track.

        One milestone is added per started 6-month block beyond the first
        6 months, capped at MAX_MILESTONE_COUNT. The count is advisory;
        generate_milestones always emits the template table's own count.

        Args:
            project_type: Project type (unknown types use OTHER's base count)
            duration_months: Project duration in months (any real number)

        Returns:
            Suggested milestone count
        """
        duration_factor = max(1, math.ceil((duration_months - MILESTONE_BLOCK_MONTHS) / MILESTONE_BLOCK_MONTHS))
        base_count = get_base_milestone_count(project_type)
        return min(MAX_MILESTONE_COUNT, base_count + duration_factor - 1)

    def plan_project_timeline(
        self,
        project_type: ProjectTypeLike,
        start_date: DateLike,
        end_date: Optional[DateLike] = None,
        size: float = SIZE_BASELINE,
    ) -> ProjectTimelinePlan:
        """
        Build a project timeline the way the creation wizard does.

        When no end date is given, it is estimated from the project type and
        size. Milestones are generated for the resulting range and the
        suggested milestone count is reported next to them without being
        applied.
        """
        resolved = resolve_project_type(project_type)
        estimated = end_date is None
        if estimated:
            end_date = self.calculate_project_end_date(resolved, start_date, size)

        duration_months = months_between(start_date, end_date)
        return ProjectTimelinePlan(
            project_type=resolved,
            start_date=start_date,
            end_date=end_date,
            end_date_estimated=estimated,
            duration_months=duration_months,
            suggested_milestone_count=self.suggest_milestone_count(resolved, duration_months),
            milestones=self.generate_milestones(resolved, start_date, end_date),
            size=size,
        )


def create_milestone(
    name: str,
    target_date: DateLike,
    description: str = "",
    deliverable_names: Iterable[str] = (),
) -> Milestone:
    """
    Create a single user-defined milestone.

    Blank deliverable names are skipped.

    Raises:
        ValidationError: If the name is blank, or a name or the description
            is longer than the model allows
    """
    if not name or not name.strip():
        raise ValidationError("Milestone name is required", details={"name": name})

    name = name.strip()
    description = description.strip()
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"Milestone name must be at most {MAX_NAME_LENGTH} characters",
            details={"field": "name", "length": len(name)},
        )
    if len(description) > MAX_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"Milestone description must be at most {MAX_DESCRIPTION_LENGTH} characters",
            details={"field": "description", "length": len(description)},
        )

    deliverables = []
    for item in deliverable_names:
        if not item or not item.strip():
            continue
        item = item.strip()
        if len(item) > MAX_DELIVERABLE_NAME_LENGTH:
            raise ValidationError(
                f"Deliverable name must be at most {MAX_DELIVERABLE_NAME_LENGTH} characters",
                details={"field": "deliverable_names", "length": len(item)},
            )
        deliverables.append(Deliverable(name=item))

    return Milestone(
        name=name,
        description=description,
        target_date=ensure_utc(target_date),
        status=MilestoneStatus.NOT_STARTED,
        deliverables=deliverables,
    )


def sort_milestones(milestones: Iterable[Milestone]) -> list[Milestone]:
    """Return milestones ordered by target date (stable for equal dates)."""
    return sorted(milestones, key=lambda m: m.target_date)


@lru_cache()
def get_milestone_generation_service() -> MilestoneGenerationService:
    """Get the shared service instance (built, and the table validated, once)."""
    return MilestoneGenerationService()


def generate_milestones(
    project_type: ProjectTypeLike,
    start_date: DateLike,
    end_date: DateLike,
) -> list[Milestone]:
    """Generate milestones with the shared service."""
    return get_milestone_generation_service().generate_milestones(project_type, start_date, end_date)


def calculate_project_end_date(
    project_type: ProjectTypeLike,
    start_date: DateLike,
    size: float = SIZE_BASELINE,
) -> DateLike:
    """Estimate a project end date with the shared service."""
    return get_milestone_generation_service().calculate_project_end_date(project_type, start_date, size)


def suggest_milestone_count(project_type: ProjectTypeLike, duration_months: float) -> int:
    """Suggest a milestone count with the shared service."""
    return get_milestone_generation_service().suggest_milestone_count(project_type, duration_months)


def plan_project_timeline(
    project_type: ProjectTypeLike,
    start_date: DateLike,
    end_date: Optional[DateLike] = None,
    size: float = SIZE_BASELINE,
) -> ProjectTimelinePlan:
    """Plan a project timeline with the shared service."""
    return get_milestone_generation_service().plan_project_timeline(project_type, start_date, end_date, size)
