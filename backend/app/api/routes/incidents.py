from __future__ import annotations

from typing import Any, List, Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse

from app.api.state import form, store
from app.dashboard.models import CamelModel, Incident, SeverityFilter, SortOrder, ViewState

router = APIRouter()


class SubmitIncidentRequest(CamelModel):
    # left untyped so bad values come back as form errors, not request errors
    title: Any = None
    description: Any = None
    severity: Any = None


class FormErrorsResponse(CamelModel):
    errors: dict[str, str]


@router.get("/incidents", response_model=List[Incident])
def list_incidents(
    severity: Optional[SeverityFilter] = Query(default=None),
    sort: Optional[SortOrder] = Query(default=None),
) -> List[Incident]:
    return store.list_view(
        severity or store.view.severity_filter,
        sort or store.view.sort_order,
    )


@router.get("/incidents/{incident_id}", response_model=Incident)
def get_incident(incident_id: int) -> Incident:
    incident = store.get(incident_id)
    if not incident:
        raise HTTPException(status_code=404, detail="Incident not found")
    return incident


@router.post(
    "/incidents",
    response_model=Incident,
    status_code=201,
    responses={422: {"model": FormErrorsResponse}},
)
def submit_incident(req: SubmitIncidentRequest) -> Incident | JSONResponse:
    result = form.submit(store, req.title, req.description, req.severity)
    if not result.ok:
        return JSONResponse(status_code=422, content={"errors": result.errors})
    return result.incident


@router.post("/incidents/{incident_id}/toggle", response_model=ViewState)
def toggle_incident_details(incident_id: int) -> ViewState:
    if not store.get(incident_id):
        raise HTTPException(status_code=404, detail="Incident not found")
    store.toggle_expanded(incident_id)
    return store.view
