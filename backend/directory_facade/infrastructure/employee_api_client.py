"""Employee API Client — wraps httpx.AsyncClient for the upstream employee directory.

Invariants:
    - Every call is attempted exactly once: no retry, no backoff
    - Connection failures and timeouts mapped to UpstreamFailureError (core/errors.py)
    - HTTP error statuses are NOT raised here: the facade classifies them
    - Base URL is fixed at construction; the client holds no other state

Design Decisions:
    - Wrapper over raw client: isolates transport details from the facade (ADR: single responsibility)
    - Shared AsyncClient injected, not owned: the lifespan opens and closes it
    - DELETE carries a JSON body: the upstream delete operation is name-keyed
"""

import logging
from urllib.parse import quote

import httpx

from directory_facade.core.errors import ErrorContext, UpstreamFailureError
from directory_facade.core.transport_protocols import UpstreamResponse

logger = logging.getLogger(__name__)


def build_http_client(timeout_seconds: float) -> httpx.AsyncClient:
    """Create the shared AsyncClient with JSON defaults."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout_seconds),
        headers={"Accept": "application/json"},
    )


def _decode_payload(response: httpx.Response):
    """Decoded JSON body, or None when the body is empty or not JSON."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        logger.warning(
            f"Upstream returned non-JSON body ({response.status_code})",
            extra={"upstream_status": response.status_code},
        )
        return None


class EmployeeApiClient:
    """Issues GET/POST/DELETE calls against the upstream employee endpoint."""

    def __init__(self, http_client: httpx.AsyncClient, base_url: str):
        self._http = http_client
        self._base_url = base_url.rstrip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    async def get_all(self) -> UpstreamResponse:
        return await self._send("GET", self._base_url, operation="get_all")

    async def get_one(self, employee_id: str) -> UpstreamResponse:
        url = f"{self._base_url}/{quote(employee_id, safe='')}"
        return await self._send("GET", url, operation="get_one")

    async def create(self, body: dict) -> UpstreamResponse:
        return await self._send("POST", self._base_url, body, operation="create")

    async def delete(self, body: dict) -> UpstreamResponse:
        return await self._send("DELETE", self._base_url, body, operation="delete")

    async def _send(
        self, method: str, url: str, body: dict | None = None, *, operation: str,
    ) -> UpstreamResponse:
        try:
            response = await self._http.request(method, url, json=body)
        except httpx.TimeoutException:
            logger.error(
                f"Upstream {method} {url} timed out",
                extra={"operation": operation},
            )
            raise UpstreamFailureError(
                "Employee API timed out",
                context=ErrorContext(operation=operation),
            )
        except httpx.TransportError as e:
            logger.error(
                f"Upstream {method} {url} failed: {e}",
                extra={"operation": operation},
            )
            raise UpstreamFailureError(
                f"Employee API unreachable: {type(e).__name__}",
                context=ErrorContext(operation=operation),
            )
        logger.debug(
            f"Upstream {method} {url} -> {response.status_code}",
            extra={"operation": operation, "upstream_status": response.status_code},
        )
        return UpstreamResponse(
            status_code=response.status_code,
            payload=_decode_payload(response),
        )
