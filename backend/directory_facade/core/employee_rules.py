"""Employee Rules — pure validation and aggregation over employee collections.

Invariants:
    - No IO, no async: every function is deterministic over its arguments
    - validate_create_request is fail-fast, checks run in a fixed order
      (request, name, salary, age, title) and the first failure wins
    - highest_salary of an empty collection is 0, never an error
    - top_earner_names never returns more than `limit` names

Design Decisions:
    - Rules raise InvalidInputError / MissingArgumentError directly: the facade
      propagates them unchanged (ADR: single error path)
"""

from collections.abc import Sequence
from typing import TypeVar

from directory_facade.core.errors import InvalidInputError, MissingArgumentError
from directory_facade.core.transport_protocols import CreateRequestLike, EmployeeLike

E = TypeVar("E", bound=EmployeeLike)

MIN_AGE = 16
MAX_AGE = 75
TOP_EARNERS_LIMIT = 10


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_create_request(request: CreateRequestLike | None) -> None:
    """Raise InvalidInputError for the first violated create constraint."""
    if request is None:
        raise InvalidInputError("Employee input must not be null", field="request")
    if _is_blank(request.name):
        raise InvalidInputError("Employee name must not be blank", field="name")
    if request.salary is None or request.salary <= 0:
        raise InvalidInputError(
            "Employee salary must be greater than zero", field="salary",
        )
    if request.age is None or not MIN_AGE <= request.age <= MAX_AGE:
        raise InvalidInputError(
            f"Employee age must be between {MIN_AGE} and {MAX_AGE}", field="age",
        )
    if _is_blank(request.title):
        raise InvalidInputError("Employee title must not be blank", field="title")


def require_employee_id(employee_id: str | None) -> str:
    """Absent id -> MissingArgumentError, blank id -> InvalidInputError."""
    if employee_id is None:
        raise MissingArgumentError("id")
    if not employee_id.strip():
        raise InvalidInputError("Employee id must not be blank", field="id")
    return employee_id


def filter_by_name(employees: Sequence[E], fragment: str) -> list[E]:
    """Case-insensitive substring match on name, upstream order kept."""
    needle = fragment.lower()
    return [e for e in employees if needle in e.name.lower()]


def highest_salary(employees: Sequence[EmployeeLike]) -> int:
    return max((e.salary for e in employees), default=0)


def top_earner_names(
    employees: Sequence[EmployeeLike], limit: int = TOP_EARNERS_LIMIT,
) -> list[str]:
    """Names of the `limit` highest salaries, highest first."""
    ranked = sorted(employees, key=lambda e: e.salary, reverse=True)
    return [e.name for e in ranked[:limit]]
