from __future__ import annotations

from app.dashboard.models import DashboardView, IncidentListItem
from app.dashboard.store.memory import MemoryIncidentStore
from app.dashboard.validation import IncidentFormValidator


def build_dashboard(store: MemoryIncidentStore, form: IncidentFormValidator) -> DashboardView:
    """
    Snapshot of everything the dashboard page renders: the view controls,
    the filtered/sorted list with the expanded item marked, and any inline
    form errors.
    """
    expanded_id = store.view.expanded_incident_id
    items = [
        IncidentListItem(incident=incident, expanded=incident.id == expanded_id)
        for incident in store.current_view()
    ]
    return DashboardView(
        view=store.view.model_copy(),
        incidents=items,
        total=len(store.incidents),
        form_errors=dict(form.errors),
    )
