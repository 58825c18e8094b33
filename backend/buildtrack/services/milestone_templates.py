"""
Milestone template catalog.

Static table of project phases per project type, plus the per-type constants
the duration estimator and milestone-count advisor are calibrated against.
Changing how a project type is planned means editing this table, not the
generation code.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Optional, Union

from buildtrack.core.exceptions import TemplateTableError
from buildtrack.core.logger import setup_logger
from buildtrack.models.enums import ProjectType
from buildtrack.models.milestone import MilestoneTemplate

logger = setup_logger(__name__)

ProjectTypeLike = Union[ProjectType, str, None]


def _template(name: str, description: str, position: float, deliverables: list[str]) -> MilestoneTemplate:
    return MilestoneTemplate(
        name=name,
        description=description,
        relative_position=position,
        deliverable_names=tuple(deliverables),
    )


_TEMPLATES: dict[ProjectType, tuple[MilestoneTemplate, ...]] = {
    ProjectType.RESIDENTIAL: (
        _template(
            "Project Initiation & Planning",
            "Initial project setup, planning, and design documents finalization",
            0.05,
            [
                "Approved architectural drawings",
                "Project schedule finalized",
                "Building permit applications submitted",
                "Contractor selection completed",
            ],
        ),
        _template(
            "Foundation & Structural Framework",
            "Completion of the building foundation and structural framing",
            0.2,
            [
                "Excavation completed",
                "Foundation poured and cured",
                "Structural framing erected",
                "Building wrap installed",
                "Roof structure completed",
            ],
        ),
        _template(
            "Rough-ins & Exterior Completion",
            "Completion of mechanical, electrical, and plumbing rough-ins with exterior finishes",
            0.4,
            [
                "Electrical rough-in completed",
                "Plumbing rough-in completed",
                "HVAC system installed",
                "Windows and doors installed",
                "Roofing completed",
                "Exterior siding/finishes completed",
            ],
        ),
        _template(
            "Interior Finishing",
            "Completion of all interior finishes and fixtures",
            0.7,
            [
                "Drywall installation and finishing",
                "Interior painting completed",
                "Flooring installed",
                "Cabinetry and countertops installed",
                "Plumbing fixtures installed",
                "Electrical fixtures installed",
            ],
        ),
        _template(
            "Final Inspections & Handover",
            "Final inspections, punch list completion, and project handover",
            0.95,
            [
                "All building inspections passed",
                "Final cleaning completed",
                "Punch list items addressed",
                "Certificate of occupancy obtained",
                "Homeowner walkthrough completed",
                "Project documentation delivered",
            ],
        ),
    ),
    ProjectType.COMMERCIAL: (
        _template(
            "Pre-Construction Phase",
            "Site analysis, design development, and permitting",
            0.05,
            [
                "Site analysis report completed",
                "Design development drawings approved",
                "Construction documents finalized",
                "Building permits obtained",
                "Contractor bidding completed",
                "Construction contracts signed",
            ],
        ),
        _template(
            "Site Preparation & Foundation",
            "Site clearing, excavation, and foundation work",
            0.15,
            [
                "Site demolition completed",
                "Utilities located and marked",
                "Excavation completed",
                "Foundation formwork and reinforcement installed",
                "Foundation concrete poured and cured",
                "Waterproofing completed",
            ],
        ),
        _template(
            "Structural Framework",
            "Steel/concrete structure erection and exterior enclosure",
            0.3,
            [
                "Structural steel/concrete frame erected",
                "Floor decks installed",
                "Exterior wall framing completed",
                "Roof structure completed",
                "Building envelope weather-tight",
            ],
        ),
        _template(
            "MEP Rough-ins & Core Systems",
            "Mechanical, electrical, plumbing, and fire protection systems installation",
            0.5,
            [
                "HVAC ductwork and equipment installed",
                "Electrical conduits and wiring installed",
                "Plumbing piping installed",
                "Fire protection system installed",
                "Elevator installation started",
                "Low voltage systems roughed-in",
            ],
        ),
        _template(
            "Interior Construction",
            "Interior partitions, finishes, and fixtures installation",
            0.7,
            [
                "Interior framing completed",
                "Drywall installation and finishing",
                "Ceiling systems installed",
                "Interior painting completed",
                "Flooring installed",
                "Millwork and cabinetry installed",
            ],
        ),
        _template(
            "Building Systems Completion",
            "Completion and testing of all building systems",
            0.85,
            [
                "HVAC system tested and balanced",
                "Electrical systems tested",
                "Plumbing fixtures installed and tested",
                "Fire alarm and sprinkler systems tested",
                "Building automation system programmed",
                "Commissioning procedures initiated",
            ],
        ),
        _template(
            "Project Completion & Closeout",
            "Final inspections, commissioning, and project closeout",
            0.95,
            [
                "Final building inspections passed",
                "Certificate of occupancy obtained",
                "Systems commissioning completed",
                "Punch list items addressed",
                "Final cleaning completed",
                "Owner training conducted",
                "Project documentation delivered",
            ],
        ),
    ),
    ProjectType.INDUSTRIAL: (
        _template(
            "Project Definition & Engineering",
            "Project scope definition, engineering design, and regulatory approvals",
            0.05,
            [
                "Project charter approved",
                "Process flow diagrams finalized",
                "Equipment specifications completed",
                "Engineering drawings approved",
                "Environmental permits obtained",
                "Construction permits secured",
            ],
        ),
        _template(
            "Site Development & Foundation",
            "Site preparation and foundation construction",
            0.15,
            [
                "Site clearing and grading completed",
                "Soil stabilization completed",
                "Utilities infrastructure installed",
                "Foundation design verified",
                "Foundation concrete poured and cured",
                "Equipment pads constructed",
            ],
        ),
        _template(
            "Structural Construction",
            "Building structure and envelope construction",
            0.3,
            [
                "Steel structure erected",
                "Roof system installed",
                "Exterior cladding completed",
                "Floor slabs poured",
                "Overhead crane systems installed",
                "Loading docks constructed",
            ],
        ),
        _template(
            "Utility & Process Systems",
            "Installation of utility services and process systems",
            0.5,
            [
                "Electrical distribution system installed",
                "Compressed air system installed",
                "Process piping installed",
                "HVAC systems installed",
                "Water treatment systems installed",
                "Waste management systems installed",
            ],
        ),
        _template(
            "Process Equipment Installation",
            "Installation of manufacturing equipment and production lines",
            0.65,
            [
                "Production equipment delivered",
                "Equipment foundations and anchoring completed",
                "Equipment installation and alignment",
                "Conveyor systems installed",
                "Control systems installed",
                "Equipment connections completed",
            ],
        ),
        _template(
            "Systems Integration & Testing",
            "Integration and testing of all production and utility systems",
            0.8,
            [
                "Electrical systems tested",
                "Process systems tested",
                "Control systems programmed and tested",
                "Safety systems verified",
                "Production line dry run completed",
                "System integration verified",
            ],
        ),
        _template(
            "Commissioning & Validation",
            "Final commissioning, validation, and handover of the facility",
            0.95,
            [
                "Pre-commissioning checklist completed",
                "Systems commissioning completed",
                "Performance qualification conducted",
                "Facility validation documentation completed",
                "Staff training completed",
                "Final handover and acceptance",
            ],
        ),
    ),
    ProjectType.INFRASTRUCTURE: (
        _template(
            "Feasibility & Preliminary Design",
            "Project feasibility studies, environmental assessments, and preliminary design",
            0.05,
            [
                "Feasibility study completed",
                "Environmental impact assessment",
                "Preliminary design drawings",
                "Geotechnical investigations completed",
                "Stakeholder consultations conducted",
                "Regulatory approvals initiated",
            ],
        ),
        _template(
            "Detailed Design & Permitting",
            "Completion of detailed engineering design and obtaining necessary permits",
            0.15,
            [
                "Detailed design drawings completed",
                "Design specifications finalized",
                "Construction methodology established",
                "Traffic management plan developed",
                "Construction permits obtained",
                "Utility relocation plans approved",
            ],
        ),
        _template(
            "Site Preparation & Mobilization",
            "Site preparation, contractor mobilization, and preliminary works",
            0.25,
            [
                "Site cleared and prepared",
                "Access roads constructed",
                "Construction facilities established",
                "Erosion control measures implemented",
                "Existing utilities located and protected",
                "Survey control points established",
            ],
        ),
        _template(
            "Foundation & Substructure",
            "Construction of foundations and substructure elements",
            0.4,
            [
                "Excavation and earthworks completed",
                "Piling/foundation systems installed",
                "Substructure concrete works completed",
                "Drainage systems installed",
                "Underground utilities installed",
                "Waterproofing completed",
            ],
        ),
        _template(
            "Superstructure Construction",
            "Construction of main structural elements",
            0.6,
            [
                "Main structural elements constructed",
                "Bridge deck/roadway constructed",
                "Retaining walls completed",
                "Structural connections finalized",
                "Expansion joints installed",
                "Quality control tests completed",
            ],
        ),
        _template(
            "Systems Installation & Finishing",
            "Installation of infrastructure systems and finishing works",
            0.8,
            [
                "Road surfacing/pavement completed",
                "Lighting systems installed",
                "Signage and safety features installed",
                "Landscaping and environmental measures implemented",
                "Barriers and guardrails installed",
                "Finishing works completed",
            ],
        ),
        _template(
            "Testing & Commissioning",
            "Final testing, commissioning, and project handover",
            0.95,
            [
                "Load testing completed",
                "Systems testing conducted",
                "Safety inspections passed",
                "As-built documentation completed",
                "Maintenance manuals provided",
                "Final inspections and project handover",
            ],
        ),
    ),
    ProjectType.RENOVATION: (
        _template(
            "Pre-Construction Assessment",
            "Detailed assessment of existing conditions and finalization of renovation plans",
            0.05,
            [
                "Existing conditions documented",
                "Hazardous materials assessment completed",
                "Structural assessment conducted",
                "Renovation plans finalized",
                "Building permits obtained",
                "Contractor selection completed",
            ],
        ),
        _template(
            "Demolition & Structural Modifications",
            "Selective demolition and structural modifications as required",
            0.2,
            [
                "Site protection measures implemented",
                "Selective demolition completed",
                "Structural modifications executed",
                "Hidden conditions addressed",
                "Waste removal completed",
                "Structural inspections passed",
            ],
        ),
        _template(
            "MEP Rough-ins & Infrastructure Updates",
            "Updating of mechanical, electrical, and plumbing systems",
            0.4,
            [
                "Electrical system updates roughed-in",
                "Plumbing system updates roughed-in",
                "HVAC system updates roughed-in",
                "Technology infrastructure installed",
                "Rough inspections passed",
                "Building envelope updates completed",
            ],
        ),
        _template(
            "Interior Reconstruction",
            "Interior reconstruction including walls, ceilings, and core elements",
            0.6,
            [
                "New wall framing completed",
                "Drywall installation and finishing",
                "Ceiling systems installed",
                "Door and window installation",
                "Millwork and cabinetry installed",
                "Mechanical/electrical trim installed",
            ],
        ),
        _template(
            "Finishes & Fixtures",
            "Application of finishes and installation of fixtures",
            0.8,
            [
                "Flooring installed",
                "Painting and wall finishes completed",
                "Plumbing fixtures installed",
                "Lighting fixtures installed",
                "Appliances installed",
                "Interior trim work completed",
            ],
        ),
        _template(
            "Final Inspections & Closeout",
            "Final inspections, cleaning, and project closeout",
            0.95,
            [
                "Final building inspections passed",
                "Systems testing completed",
                "Punch list items addressed",
                "Final cleaning completed",
                "Owner training conducted",
                "Project documentation delivered",
            ],
        ),
    ),
    ProjectType.OTHER: (
        _template(
            "Project Initiation",
            "Project kickoff, planning, and initial documentation",
            0.05,
            [
                "Project charter approved",
                "Initial requirements documented",
                "Project team assembled",
                "Preliminary schedule developed",
                "Risk assessment completed",
            ],
        ),
        _template(
            "Design & Planning",
            "Detailed design and comprehensive project planning",
            0.25,
            [
                "Detailed designs completed",
                "Specifications finalized",
                "Permits and approvals obtained",
                "Procurement plan established",
                "Detailed project schedule created",
            ],
        ),
        _template(
            "Implementation - Phase 1",
            "Initial implementation phase",
            0.45,
            [
                "Phase 1 work executed",
                "Quality control checks completed",
                "Progress reporting established",
                "Initial systems tested",
                "Phase 1 review conducted",
            ],
        ),
        _template(
            "Implementation - Phase 2",
            "Secondary implementation phase",
            0.7,
            [
                "Phase 2 work executed",
                "Integration with phase 1 completed",
                "Systems testing conducted",
                "User acceptance testing initiated",
                "Training materials developed",
            ],
        ),
        _template(
            "Project Completion",
            "Project finalization, handover, and closeout",
            0.95,
            [
                "Final testing completed",
                "User training conducted",
                "Documentation finalized",
                "Project handover completed",
                "Lessons learned documented",
            ],
        ),
    ),
}

MILESTONE_TEMPLATES: Mapping[ProjectType, tuple[MilestoneTemplate, ...]] = MappingProxyType(_TEMPLATES)

# Standard durations (days) at the baseline project size
BASE_DURATION_DAYS: Mapping[ProjectType, int] = MappingProxyType({
    ProjectType.RESIDENTIAL: 180,  # 6 months
    ProjectType.COMMERCIAL: 365,  # 12 months
    ProjectType.INDUSTRIAL: 450,  # 15 months
    ProjectType.INFRASTRUCTURE: 540,  # 18 months
    ProjectType.RENOVATION: 120,  # 4 months
    ProjectType.OTHER: 270,  # 9 months
})

BASE_MILESTONE_COUNTS: Mapping[ProjectType, int] = MappingProxyType({
    ProjectType.RESIDENTIAL: 5,
    ProjectType.COMMERCIAL: 7,
    ProjectType.INDUSTRIAL: 7,
    ProjectType.INFRASTRUCTURE: 7,
    ProjectType.RENOVATION: 6,
    ProjectType.OTHER: 5,
})


def resolve_project_type(value: ProjectTypeLike) -> ProjectType:
    """
    Resolve a raw category tag to a ProjectType.

    Accepts enum members and strings in any case ("residential",
    "RESIDENTIAL"). Anything unrecognized resolves to ProjectType.OTHER.

    Args:
        value: Category tag from the caller

    Returns:
        Matching ProjectType, or ProjectType.OTHER
    """
    if isinstance(value, ProjectType):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        for member in ProjectType:
            if member.value == normalized:
                return member

    logger.debug(f"Unknown project type {value!r}, falling back to {ProjectType.OTHER.value}")
    return ProjectType.OTHER


def get_milestone_templates(project_type: ProjectTypeLike) -> tuple[MilestoneTemplate, ...]:
    """Return the template list for a project type (OTHER's list for unknown types)."""
    return MILESTONE_TEMPLATES[resolve_project_type(project_type)]


def get_base_duration_days(project_type: ProjectTypeLike) -> int:
    """Return the standard duration in days for a project type."""
    return BASE_DURATION_DAYS[resolve_project_type(project_type)]


def get_base_milestone_count(project_type: ProjectTypeLike) -> int:
    """Return the baseline milestone count for a project type."""
    return BASE_MILESTONE_COUNTS[resolve_project_type(project_type)]


def validate_template_table(
    table: Optional[Mapping[ProjectType, tuple[MilestoneTemplate, ...]]] = None,
) -> None:
    """
    Check the authored template table.

    The generator trusts table order to produce chronological milestones,
    so ordering is verified here once instead of on every generation.

    Args:
        table: Table to check (defaults to MILESTONE_TEMPLATES)

    Raises:
        TemplateTableError: A project type is missing or has no templates,
            a position is outside [0, 1], or positions decrease.
    """
    table = MILESTONE_TEMPLATES if table is None else table

    if ProjectType.OTHER not in table:
        raise TemplateTableError("Fallback project type 'other' has no templates", project_type="other")

    for project_type in ProjectType:
        templates = table.get(project_type)
        if not templates:
            raise TemplateTableError(
                f"Project type '{project_type.value}' has no milestone templates",
                project_type=project_type.value,
            )

        previous = 0.0
        for index, template in enumerate(templates):
            position = template.relative_position
            if not 0.0 <= position <= 1.0:
                raise TemplateTableError(
                    f"Template '{template.name}' position {position} is outside [0, 1]",
                    project_type=project_type.value,
                    details={"index": index, "relative_position": position},
                )
            if position < previous:
                raise TemplateTableError(
                    f"Template '{template.name}' position {position} precedes previous position {previous}",
                    project_type=project_type.value,
                    details={"index": index, "relative_position": position, "previous": previous},
                )
            previous = position

    logger.info(f"Milestone template table validated ({len(table)} project types)")
