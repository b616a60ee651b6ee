from __future__ import annotations

from fastapi import APIRouter

from app.api.state import form, store
from app.dashboard.models import CamelModel, DashboardView, SeverityFilter, SortOrder, ViewState
from app.dashboard.view import build_dashboard

router = APIRouter()


class FilterRequest(CamelModel):
    severity: SeverityFilter


class SortRequest(CamelModel):
    order: SortOrder


@router.get("/dashboard", response_model=DashboardView)
def get_dashboard() -> DashboardView:
    return build_dashboard(store, form)


@router.put("/view/filter", response_model=ViewState)
def set_filter(body: FilterRequest) -> ViewState:
    store.set_filter(body.severity)
    return store.view


@router.put("/view/sort", response_model=ViewState)
def set_sort(body: SortRequest) -> ViewState:
    store.set_sort_order(body.order)
    return store.view


@router.post("/form/toggle", response_model=ViewState)
def toggle_form() -> ViewState:
    # the form opens empty and closes without keeping stale errors
    form.reset()
    store.toggle_form()
    return store.view


@router.post("/form/cancel", response_model=ViewState)
def cancel_form() -> ViewState:
    form.reset()
    store.close_form()
    return store.view
