"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - The facade reaches the upstream only through EmployeeTransport
    - UpstreamResponse is immutable and carries the raw transport status

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy (ADR: ExMA anti-pattern)
    - Async in Protocol: implementations do network IO; the pure rules that
      consume the decoded results are never async
"""

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class UpstreamResponse:
    """Transport status plus decoded JSON body (None when empty or not JSON)."""
    status_code: int
    payload: Any = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class EmployeeLike(Protocol):
    """Structural contract for employee records consumed by the pure rules."""
    name: str
    salary: int


class CreateRequestLike(Protocol):
    """Structural contract for create input checked by validate_create_request."""
    name: str | None
    salary: int | None
    age: int | None
    title: str | None


class EmployeeTransport(Protocol):
    """Contract for the upstream employee API — implemented by infrastructure."""
    async def get_all(self) -> UpstreamResponse: ...
    async def get_one(self, employee_id: str) -> UpstreamResponse: ...
    async def create(self, body: dict) -> UpstreamResponse: ...
    async def delete(self, body: dict) -> UpstreamResponse: ...
