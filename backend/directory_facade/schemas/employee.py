"""Employee Schemas — Pydantic models for upstream records, envelopes, and create input.

Invariants:
    - Employee serializes with the upstream keys (employee_name, employee_salary, ...)
    - EmployeeCreateRequest accepts incomplete input: business validation runs in
      core/employee_rules.py so each failure is reported with its own message
    - ApiEnvelope.data is None when the upstream omitted the payload

Design Decisions:
    - Field aliases over renamed attributes: Python code reads employee.name while
      the wire keeps the upstream shape (ADR: callers see the upstream record)
    - Generic envelope over one class per payload type: list, single record and
      boolean payloads share {data, status}
"""

from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Employee(BaseModel):
    """Employee record as owned by the upstream directory."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str = Field(alias="employee_name")
    salary: int = Field(alias="employee_salary")
    age: int = Field(alias="employee_age")
    title: str = Field(alias="employee_title")
    email: str | None = Field(None, alias="employee_email")


class EmployeeCreateRequest(BaseModel):
    """Create input — types checked here, constraints checked by the facade."""
    id: UUID | None = None
    name: str | None = None
    salary: int | None = None
    age: int | None = None
    title: str | None = None
    email: str | None = None

    def to_upstream_body(self) -> dict:
        """JSON body for POST <base>; unset optional keys are omitted."""
        return self.model_dump(mode="json", exclude_none=True)


class ApiEnvelope(BaseModel, Generic[T]):
    """Upstream response wrapper."""
    data: T | None = None
    status: str | None = None
