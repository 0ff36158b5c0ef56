"""Route Dependencies — expose lifespan-owned objects to route handlers.

Invariants:
    - The EmployeeDirectory lives on app.state, created once in the lifespan
    - Tests replace get_directory via app.dependency_overrides
"""

from fastapi import Request

from directory_facade.services.employee_directory import EmployeeDirectory


def get_directory(request: Request) -> EmployeeDirectory:
    return request.app.state.directory
