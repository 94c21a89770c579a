import logging
from typing import List, Optional, Tuple

import httpx

from claimdesk.client.messages import DEFAULT_LOCALE, format_timestamp, status_label, translate

logger = logging.getLogger(__name__)


class StatusViewer:
    """Looks up a claim by id or by (order number, email) and renders it."""

    def __init__(self, client: httpx.AsyncClient, locale: str = DEFAULT_LOCALE):
        self.client = client
        self.locale = locale
        self.claim: Optional[dict] = None
        self.error: Optional[str] = None
        self._mounted = True

    def close(self) -> None:
        self._mounted = False

    def _show(self, claim: Optional[dict], error: Optional[str]) -> Optional[dict]:
        if not self._mounted:
            return None
        self.claim = claim
        self.error = error
        return claim

    @staticmethod
    def _body(response: httpx.Response):
        try:
            return response.json()
        except ValueError:
            logger.error("Non-JSON response from %s", response.request.url)
            return None

    async def open(self, case_id: str) -> Optional[dict]:
        """Arrival with a known id, e.g. straight after submitting."""
        try:
            response = await self.client.get(f"/api/claims/{case_id}")
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("Error fetching claim %s: %s", case_id, e)
            return self._show(None, translate("errorFetchingClaim", self.locale))
        claim = self._body(response)
        if not isinstance(claim, dict):
            return self._show(None, translate("errorFetchingClaim", self.locale))
        return self._show(claim, None)

    async def lookup(self, order_number: str, email: str) -> Optional[dict]:
        self.error = None
        try:
            response = await self.client.get("/api/claims", params={"orderNumber": order_number, "email": email})
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("Error looking up claim for order %s: %s", order_number, e)
            return self._show(None, translate("errorFetchingClaim", self.locale))
        found = self._body(response)
        if not isinstance(found, list):
            return self._show(None, translate("errorFetchingClaim", self.locale))
        if not found:
            return self._show(None, translate("noClaimFound", self.locale))
        return self._show(found[0], None)

    def rendered(self) -> Optional[List[Tuple[str, str]]]:
        """(label, value) pairs for the claim on display."""
        if not self.claim:
            return None
        c = self.claim
        return [
            (translate("orderNumber", self.locale), c.get("orderNumber") or ""),
            (translate("name", self.locale), c.get("name") or ""),
            (translate("status", self.locale), status_label(c.get("status"), self.locale)),
            (translate("submissionDate", self.locale), format_timestamp(c.get("submissionDate"), self.locale)),
        ]
