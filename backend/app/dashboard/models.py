from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from app.dashboard.utils import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Severity(str, Enum):
    low = "Low"
    medium = "Medium"
    high = "High"


class SeverityFilter(str, Enum):
    all = "All"
    low = "Low"
    medium = "Medium"
    high = "High"


class SortOrder(str, Enum):
    newest = "newest"
    oldest = "oldest"


class IncidentDraft(CamelModel):
    title: str
    description: str
    severity: Severity


class Incident(CamelModel):
    # records are never edited once reported
    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    severity: Severity
    reported_at: datetime


class ViewState(CamelModel):
    severity_filter: SeverityFilter = SeverityFilter.all
    sort_order: SortOrder = SortOrder.newest
    expanded_incident_id: int | None = None
    show_form: bool = False


class IncidentListItem(CamelModel):
    incident: Incident
    expanded: bool = False


class DashboardView(CamelModel):
    view: ViewState
    incidents: list[IncidentListItem] = Field(default_factory=list)
    total: int = 0
    form_errors: dict[str, str] = Field(default_factory=dict)
