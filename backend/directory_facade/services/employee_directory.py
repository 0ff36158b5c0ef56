"""Employee Directory Facade — maps caller operations onto upstream employee API calls.

Invariants:
    - Stateless: holds only the injected transport, safe for concurrent use
    - Every upstream call attempted exactly once; compound operations stop at the
      first failing step, so delete never issues DELETE after a failed lookup
    - Caller input validated (core/employee_rules.py) before any network call
    - Envelope data trusted only on transport success; absent data on get/create
      returns None instead of raising
    - Search, max and top-N always work on a fresh full list (no upstream query, no cache)

Design Decisions:
    - Upstream delete is keyed by employee name, so delete resolves id -> name first
      (ADR: upstream contract, kept literally)
    - Malformed success envelopes raise UpstreamFailureError rather than leaking
      pydantic ValidationError to the HTTP layer
"""

import logging
from typing import Any

from pydantic import StrictBool, ValidationError

from directory_facade.core.employee_rules import (
    filter_by_name,
    highest_salary,
    require_employee_id,
    top_earner_names,
    validate_create_request,
)
from directory_facade.core.errors import (
    ErrorContext, ResourceNotFoundError, UpstreamFailureError,
)
from directory_facade.core.transport_protocols import (
    EmployeeTransport, UpstreamResponse,
)
from directory_facade.schemas.employee import (
    ApiEnvelope, Employee, EmployeeCreateRequest,
)

logger = logging.getLogger(__name__)


def _parse_envelope(
    response: UpstreamResponse, payload_type: Any, operation: str,
) -> ApiEnvelope:
    """Validate the upstream body as {data, status}; empty body -> empty envelope."""
    try:
        return ApiEnvelope[payload_type].model_validate(response.payload or {})
    except ValidationError as e:
        logger.error(
            f"Malformed upstream envelope for {operation}: {e.error_count()} error(s)",
            extra={"operation": operation, "upstream_status": response.status_code},
        )
        raise UpstreamFailureError(
            f"Unexpected response from employee API during {operation}",
            response.status_code,
            ErrorContext(operation=operation),
        )


class EmployeeDirectory:
    """Read/write facade over the upstream employee directory."""

    def __init__(self, transport: EmployeeTransport):
        self._transport = transport

    async def list_employees(self) -> list[Employee]:
        """All employees, in upstream order."""
        logger.info("Fetching all employees", extra={"operation": "list"})
        response = await self._transport.get_all()
        if not response.is_success:
            logger.error(
                f"Failed to fetch employees: {response.status_code}",
                extra={"operation": "list", "upstream_status": response.status_code},
            )
            raise UpstreamFailureError(
                "Failed to fetch employees", response.status_code,
                ErrorContext(operation="list"),
            )
        envelope = _parse_envelope(response, list[Employee], "list")
        if envelope.data is None:
            raise UpstreamFailureError(
                "Employee API returned no employee list", response.status_code,
                ErrorContext(operation="list"),
            )
        return envelope.data

    async def search_by_name(self, fragment: str) -> list[Employee]:
        """Employees whose name contains `fragment`, case-insensitive."""
        logger.info(
            f"Searching employees with name containing: {fragment!r}",
            extra={"operation": "search"},
        )
        return filter_by_name(await self.list_employees(), fragment)

    async def get_by_id(self, employee_id: str) -> Employee | None:
        """Single employee, or None when the upstream envelope has no data."""
        log_extra = {"operation": "get", "employee_id": employee_id}
        logger.info(f"Fetching employee with ID: {employee_id}", extra=log_extra)
        response = await self._transport.get_one(employee_id)
        if response.is_not_found:
            logger.error(f"Employee with ID {employee_id} not found", extra=log_extra)
            raise ResourceNotFoundError(
                "Employee", employee_id,
                ErrorContext(operation="get", employee_id=employee_id),
            )
        if not response.is_success:
            logger.error(
                f"Failed to fetch employee: {response.status_code}",
                extra={**log_extra, "upstream_status": response.status_code},
            )
            raise UpstreamFailureError(
                "Failed to fetch employee", response.status_code,
                ErrorContext(operation="get", employee_id=employee_id),
            )
        return _parse_envelope(response, Employee, "get").data

    async def highest_salary(self) -> int:
        """Maximum salary; 0 when the directory is empty."""
        logger.info("Fetching highest salary", extra={"operation": "highest_salary"})
        return highest_salary(await self.list_employees())

    async def top_earner_names(self) -> list[str]:
        """Names of the ten highest-paid employees, highest first."""
        logger.info(
            "Fetching top ten highest earning employees",
            extra={"operation": "top_earners"},
        )
        return top_earner_names(await self.list_employees())

    async def create_employee(
        self, request: EmployeeCreateRequest | None,
    ) -> Employee | None:
        """Validate then POST; returns the created record or None."""
        validate_create_request(request)
        logger.info(
            f"Creating a new employee: {request.name}",
            extra={"operation": "create"},
        )
        response = await self._transport.create(request.to_upstream_body())
        if not response.is_success:
            logger.error(
                f"Failed to create employee: {response.status_code}",
                extra={"operation": "create", "upstream_status": response.status_code},
            )
            raise UpstreamFailureError(
                "Failed to create employee", response.status_code,
                ErrorContext(operation="create"),
            )
        return _parse_envelope(response, Employee, "create").data

    async def delete_by_id(self, employee_id: str | None) -> str:
        """Delete by id via the name-keyed upstream call; returns the deleted name."""
        employee_id = require_employee_id(employee_id)
        log_extra = {"operation": "delete", "employee_id": employee_id}
        logger.info(f"Deleting employee with ID: {employee_id}", extra=log_extra)

        employee = await self.get_by_id(employee_id)
        if employee is None:
            raise ResourceNotFoundError(
                "Employee", employee_id,
                ErrorContext(operation="delete", employee_id=employee_id),
            )

        response = await self._transport.delete({"name": employee.name})
        try:
            envelope = _parse_envelope(response, StrictBool, "delete")
        except UpstreamFailureError:
            envelope = ApiEnvelope[StrictBool]()
        if response.is_success and envelope.data is True:
            return employee.name

        status_text = envelope.status or f"HTTP {response.status_code}"
        logger.error(
            f"Failed to delete employee {employee_id}: {status_text}",
            extra={**log_extra, "upstream_status": response.status_code},
        )
        raise UpstreamFailureError(
            f"Failed to delete employee: {status_text}", response.status_code,
            ErrorContext(operation="delete", employee_id=employee_id),
        )
