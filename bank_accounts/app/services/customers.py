from __future__ import annotations

import logging
from typing import Protocol

import httpx


logger = logging.getLogger(__name__)


class CustomerValidator(Protocol):
    def exists(self, customer_id: int) -> bool:
        ...


class HttpCustomerValidator:
    """Checks customer existence against the customer service.

    Lookups fail closed: an error status, a transport failure, a timeout or a
    body that is not a customer document all count as "customer not found".
    Callers cannot tell an absent customer from an unreachable service, and
    no retry is attempted here.
    """

    def __init__(self, client: httpx.Client) -> None:
        self.client = client

    def exists(self, customer_id: int) -> bool:
        try:
            response = self.client.get(f"/customers/{customer_id}")
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            logger.warning(
                "customer.lookup.failed",
                extra={"customer_id": customer_id, "error": repr(exc)},
            )
            return False

        if not isinstance(payload, dict) or not payload:
            logger.warning(
                "customer.lookup.failed",
                extra={"customer_id": customer_id, "error": "unexpected response body"},
            )
            return False
        return True
