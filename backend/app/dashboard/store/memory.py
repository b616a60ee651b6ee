from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Iterable, List

from app.dashboard.models import (
    Incident,
    IncidentDraft,
    Severity,
    SeverityFilter,
    SortOrder,
    ViewState,
)
from app.dashboard.utils import now_utc

logger = logging.getLogger(__name__)


@dataclass
class MemoryIncidentStore:
    """
    In-memory incident store plus the dashboard's view state.

    Incidents are kept in insertion order; everything the list shows is
    derived from them on demand (filter, then sort).

    Sync route handlers run in a thread pool, so every mutation holds
    ``_lock``. Id assignment and the append happen under the same hold.
    """

    incidents: List[Incident] = field(default_factory=list)
    view: ViewState = field(default_factory=ViewState)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def load(self, incidents: Iterable[Incident]) -> None:
        batch = list(incidents)
        with self._lock:
            known = {i.id for i in self.incidents}
            for incident in batch:
                if incident.id in known:
                    raise ValueError(f"duplicate incident id {incident.id}")
                known.add(incident.id)
            self.incidents.extend(batch)

    def clear(self) -> None:
        with self._lock:
            self.incidents.clear()
            self.view = ViewState()

    def get(self, incident_id: int) -> Incident | None:
        for incident in list(self.incidents):
            if incident.id == incident_id:
                return incident
        return None

    def next_id(self) -> int:
        if not self.incidents:
            return 1
        return max(i.id for i in self.incidents) + 1

    def list_view(
        self,
        severity_filter: SeverityFilter | Severity | str = SeverityFilter.all,
        sort_order: SortOrder | str = SortOrder.newest,
    ) -> List[Incident]:
        wanted = SeverityFilter(severity_filter)
        order = SortOrder(sort_order)

        if wanted == SeverityFilter.all:
            items = list(self.incidents)
        else:
            items = [i for i in self.incidents if i.severity.value == wanted.value]

        # sorted() is stable in both directions, so equal timestamps keep insertion order
        return sorted(items, key=lambda i: i.reported_at, reverse=order == SortOrder.newest)

    def current_view(self) -> List[Incident]:
        return self.list_view(self.view.severity_filter, self.view.sort_order)

    def add_incident(self, draft: IncidentDraft) -> Incident:
        with self._lock:
            incident = Incident(
                id=self.next_id(),
                title=draft.title,
                description=draft.description,
                severity=draft.severity,
                reported_at=now_utc(),
            )
            self.incidents.append(incident)
            self.view.show_form = False
        logger.info("incident %s reported (severity=%s)", incident.id, incident.severity.value)
        return incident

    def toggle_expanded(self, incident_id: int) -> int | None:
        with self._lock:
            if self.view.expanded_incident_id == incident_id:
                self.view.expanded_incident_id = None
            else:
                self.view.expanded_incident_id = incident_id
            return self.view.expanded_incident_id

    def set_filter(self, severity_filter: SeverityFilter | str) -> None:
        with self._lock:
            self.view.severity_filter = SeverityFilter(severity_filter)

    def set_sort_order(self, sort_order: SortOrder | str) -> None:
        with self._lock:
            self.view.sort_order = SortOrder(sort_order)

    def toggle_form(self) -> bool:
        with self._lock:
            self.view.show_form = not self.view.show_form
            return self.view.show_form

    def close_form(self) -> None:
        with self._lock:
            self.view.show_form = False
