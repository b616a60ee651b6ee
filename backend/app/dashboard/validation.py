from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from app.dashboard.models import Incident, IncidentDraft, Severity
from app.dashboard.store.memory import MemoryIncidentStore

logger = logging.getLogger(__name__)

TITLE_REQUIRED = "Title is required"
DESCRIPTION_REQUIRED = "Description is required"
SEVERITY_REQUIRED = "Severity is required"
TITLE_NOT_TEXT = "Title must be text"
DESCRIPTION_NOT_TEXT = "Description must be text"
SEVERITY_UNKNOWN = "Severity must be one of: " + ", ".join(s.value for s in Severity)


@dataclass
class ValidationResult:
    draft: Optional[IncidentDraft] = None
    errors: Dict[str, str] = field(default_factory=dict)
    incident: Optional[Incident] = None

    @property
    def ok(self) -> bool:
        return self.draft is not None and not self.errors


def _parse_severity(value: Any) -> tuple[Severity | None, str | None]:
    if value is None:
        return None, SEVERITY_REQUIRED
    if isinstance(value, Severity):
        return value, None
    if not isinstance(value, str):
        return None, SEVERITY_UNKNOWN
    if not value:
        return None, SEVERITY_REQUIRED
    for s in Severity:
        if s.value == value:
            return s, None
    return None, SEVERITY_UNKNOWN


def _text_error(value: Any, required: str, not_text: str) -> str | None:
    if value is None:
        return required
    if not isinstance(value, str):
        return not_text
    if not value.strip():
        return required
    return None


@dataclass
class IncidentFormValidator:
    """
    Validates the "Report New Incident" form.

    Validation is all-or-nothing: either every field passes and a draft is
    produced, or the full set of field errors is returned. Field values are
    carried through as entered; only the emptiness check looks at stripped
    text.
    """

    errors: Dict[str, str] = field(default_factory=dict)

    def validate(
        self,
        title: Any,
        description: Any,
        severity: Any,
    ) -> ValidationResult:
        errors: Dict[str, str] = {}

        title_error = _text_error(title, TITLE_REQUIRED, TITLE_NOT_TEXT)
        if title_error:
            errors["title"] = title_error

        description_error = _text_error(description, DESCRIPTION_REQUIRED, DESCRIPTION_NOT_TEXT)
        if description_error:
            errors["description"] = description_error

        parsed_severity, severity_error = _parse_severity(severity)
        if severity_error:
            errors["severity"] = severity_error

        self.errors = errors
        if errors:
            return ValidationResult(errors=dict(errors))

        draft = IncidentDraft(title=title, description=description, severity=parsed_severity)
        return ValidationResult(draft=draft)

    def submit(
        self,
        store: MemoryIncidentStore,
        title: Any,
        description: Any,
        severity: Any,
    ) -> ValidationResult:
        result = self.validate(title, description, severity)
        if not result.ok:
            logger.info("incident submission rejected: %s", ", ".join(sorted(result.errors)))
            return result

        result.incident = store.add_incident(result.draft)
        return result

    def reset(self) -> None:
        self.errors = {}
