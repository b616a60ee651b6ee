from __future__ import annotations

import logging

from app.dashboard.seed import mock_incidents
from app.dashboard.store.memory import MemoryIncidentStore
from app.dashboard.validation import IncidentFormValidator

logger = logging.getLogger(__name__)


store = MemoryIncidentStore()
form = IncidentFormValidator()


def reset(*, seed: bool) -> None:
    """Drop all incidents and view state, optionally reloading the mock incidents."""
    store.clear()
    form.reset()
    if seed:
        incidents = mock_incidents()
        store.load(incidents)
        logger.info("loaded %d seed incidents", len(incidents))
