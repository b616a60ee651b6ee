from __future__ import annotations

from typing import Any, Dict, List

from app.dashboard.models import Incident


def mock_incidents_raw() -> List[Dict[str, Any]]:
    """
    The incidents the dashboard starts with when seeding is enabled.
    """
    return [
        {
            "id": 1,
            "title": "Biased Recommendation Algorithm",
            "description": "Algorithm consistently favored certain demographics...",
            "severity": "Medium",
            "reported_at": "2025-03-15T10:00:00Z",
        },
        {
            "id": 2,
            "title": "LLM Hallucination in Critical Info",
            "description": "LLM provided incorrect safety procedure information...",
            "severity": "High",
            "reported_at": "2025-04-01T14:30:00Z",
        },
        {
            "id": 3,
            "title": "Minor Data Leak via Chatbot",
            "description": "Chatbot inadvertently exposed non-sensitive user metadata...",
            "severity": "Low",
            "reported_at": "2025-03-20T09:15:00Z",
        },
    ]


def mock_incidents() -> List[Incident]:
    return [Incident.model_validate(item) for item in mock_incidents_raw()]
