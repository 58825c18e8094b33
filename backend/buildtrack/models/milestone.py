"""
Milestone model definitions.

Templates are static, author-defined phase descriptions. Milestones and
deliverables are the concrete, dated records produced from them for one
project.
"""

from datetime import date, datetime
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from buildtrack.models.enums import MilestoneStatus, ProjectType
from buildtrack.utils.datetime_utils import now_utc
from buildtrack.utils.id_utils import generate_deliverable_id, generate_milestone_id

MAX_NAME_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 2000
MAX_DELIVERABLE_NAME_LENGTH = 500


class MilestoneTemplate(BaseModel):
    """One project phase from the template table (not yet bound to dates)."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH, description="Phase title")
    description: str = Field(..., max_length=MAX_DESCRIPTION_LENGTH, description="One-sentence phase summary")
    relative_position: float = Field(
        ..., ge=0.0, le=1.0, description="Fraction of the project timeline at which the milestone is due"
    )
    deliverable_names: tuple[str, ...] = Field(default=(), description="Deliverables expected at this phase")


class Deliverable(BaseModel):
    """Single checklist item owned by a milestone."""

    id: str = Field(default_factory=generate_deliverable_id)
    name: str = Field(..., min_length=1, max_length=MAX_DELIVERABLE_NAME_LENGTH)
    completed: bool = False


class Milestone(BaseModel):
    """Concrete milestone with an absolute target date."""

    id: str = Field(default_factory=generate_milestone_id)
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH, description="Milestone title")
    description: str = Field("", max_length=MAX_DESCRIPTION_LENGTH, description="Milestone description")
    target_date: datetime = Field(..., description="Target due date (UTC)")
    status: MilestoneStatus = Field(MilestoneStatus.NOT_STARTED)
    deliverables: list[Deliverable] = Field(default_factory=list)
    date_created: datetime = Field(default_factory=now_utc)

    @property
    def completion_ratio(self) -> float:
        """Completed deliverables / total deliverables (0.0 when there are none)."""
        if not self.deliverables:
            return 0.0
        done = sum(1 for d in self.deliverables if d.completed)
        return done / len(self.deliverables)


class ProjectTimelinePlan(BaseModel):
    """Result of planning a project timeline from a category and date range."""

    project_type: ProjectType
    start_date: Union[datetime, date]
    end_date: Union[datetime, date]
    end_date_estimated: bool = Field(False, description="True when end_date came from the duration estimator")
    duration_months: float
    suggested_milestone_count: int = Field(..., description="Advisory count, not applied to milestones")
    milestones: list[Milestone] = Field(default_factory=list)
    size: float = Field(..., description="Size metric the duration estimate is based on")
