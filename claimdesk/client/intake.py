"""Claim intake form.

The form is an explicit state machine::

    faq -> editing -> submitting -> submitted
                 ^          |
                 +- error --+

``reduce`` is a pure function from (state, action) to a new state; it never
performs I/O. ``IntakeForm`` owns the current state and the HTTP client and
is the only place that talks to the backend.
"""
import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, Optional, Union

import httpx

from claimdesk.client.brands import Brand, find_brand
from claimdesk.client.messages import DEFAULT_LOCALE, translate

logger = logging.getLogger(__name__)

FORM_FIELDS = (
    "orderNumber",
    "email",
    "name",
    "street",
    "postalCode",
    "city",
    "phoneNumber",
    "brand",
    "problemDescription",
)
REQUIRED_FIELDS = FORM_FIELDS


class Phase(str, Enum):
    FAQ = "faq"
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"


@dataclass(frozen=True)
class IntakeState:
    phase: Phase = Phase.FAQ
    # Never mutated in place; the reducer always builds a new dict
    fields: Dict[str, str] = field(default_factory=lambda: {name: "" for name in FORM_FIELDS})
    notification_acknowledged: bool = False
    error: Optional[str] = None
    case_id: Optional[str] = None


@dataclass(frozen=True)
class CompleteFaq:
    pass


@dataclass(frozen=True)
class ChangeField:
    name: str
    value: str


@dataclass(frozen=True)
class SelectBrand:
    brand: str


@dataclass(frozen=True)
class AcknowledgeNotification:
    acknowledged: bool


@dataclass(frozen=True)
class SubmitStarted:
    pass


@dataclass(frozen=True)
class SubmitSucceeded:
    case_id: str


@dataclass(frozen=True)
class SubmitFailed:
    message: str


Action = Union[
    CompleteFaq,
    ChangeField,
    SelectBrand,
    AcknowledgeNotification,
    SubmitStarted,
    SubmitSucceeded,
    SubmitFailed,
]


def reduce(state: IntakeState, action: Action) -> IntakeState:
    """Apply ``action`` to ``state``. Actions that don't fit the phase are no-ops."""
    if isinstance(action, CompleteFaq):
        if state.phase is Phase.FAQ:
            return replace(state, phase=Phase.EDITING)
        return state

    if isinstance(action, SubmitSucceeded):
        if state.phase is Phase.SUBMITTING:
            return replace(state, phase=Phase.SUBMITTED, case_id=action.case_id, error=None)
        return state

    if isinstance(action, SubmitFailed):
        if state.phase in (Phase.EDITING, Phase.SUBMITTING):
            return replace(state, phase=Phase.EDITING, error=action.message)
        return state

    # Everything below only applies while the form is editable
    if state.phase is not Phase.EDITING:
        return state

    if isinstance(action, ChangeField):
        if action.name not in FORM_FIELDS or action.name == "brand":
            return state
        return replace(state, fields={**state.fields, action.name: action.value})

    if isinstance(action, SelectBrand):
        # A new brand means a new disclosure, so the old acknowledgment no longer counts
        return replace(state, fields={**state.fields, "brand": action.brand}, notification_acknowledged=False)

    if isinstance(action, AcknowledgeNotification):
        return replace(state, notification_acknowledged=bool(action.acknowledged))

    if isinstance(action, SubmitStarted):
        return replace(state, phase=Phase.SUBMITTING, error=None)

    return state


def missing_fields(state: IntakeState) -> List[str]:
    return [name for name in REQUIRED_FIELDS if not (state.fields.get(name) or "").strip()]


def submit_disabled(state: IntakeState) -> bool:
    return state.phase is not Phase.EDITING or not state.notification_acknowledged


def brand_notice(state: IntakeState, locale: str = DEFAULT_LOCALE) -> Optional[str]:
    brand: Optional[Brand] = find_brand(state.fields.get("brand"))
    return translate(brand.notice, locale) if brand else None


def claim_payload(state: IntakeState) -> dict:
    return {**state.fields, "notificationAcknowledged": state.notification_acknowledged}


@dataclass(frozen=True)
class Navigation:
    path: str
    case_id: str


class IntakeForm:
    """Drives an ``IntakeState`` and posts the finished claim."""

    def __init__(self, client: httpx.AsyncClient, locale: str = DEFAULT_LOCALE):
        self.client = client
        self.locale = locale
        self.state = IntakeState()
        self._mounted = True

    def dispatch(self, action: Action) -> IntakeState:
        self.state = reduce(self.state, action)
        return self.state

    @property
    def navigation(self) -> Optional[Navigation]:
        if self.state.phase is Phase.SUBMITTED and self.state.case_id:
            return Navigation("/status", self.state.case_id)
        return None

    def close(self) -> None:
        """Stop accepting results; a response still in flight is dropped."""
        self._mounted = False

    def _settle(self, action: Action) -> IntakeState:
        if not self._mounted:
            logger.debug("Intake form closed; discarding %s", type(action).__name__)
            return self.state
        return self.dispatch(action)

    async def submit(self) -> IntakeState:
        state = self.state
        if state.phase is not Phase.EDITING:
            return state
        if not state.notification_acknowledged:
            return self.dispatch(SubmitFailed(translate("pleaseAcknowledgeNotification", self.locale)))
        missing = missing_fields(state)
        if missing:
            labels = ", ".join(translate(name, self.locale) for name in missing)
            return self.dispatch(SubmitFailed(translate("missingRequiredFields", self.locale, fields=labels)))

        self.dispatch(SubmitStarted())
        try:
            response = await self.client.post("/api/claims", json=claim_payload(state))
        except httpx.HTTPError as e:
            logger.error("Error submitting claim: %s", e)
            return self._settle(SubmitFailed(translate("errorSubmittingClaim", self.locale)))

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not response.is_success or not isinstance(data, dict) or "id" not in data:
            message = data.get("error") if isinstance(data, dict) else None
            logger.warning("Claim submission rejected (%s): %s", response.status_code, message)
            return self._settle(SubmitFailed(message or translate("failedToSubmitClaim", self.locale)))
        return self._settle(SubmitSucceeded(data["id"]))
