"""Employee Routes — REST surface over the EmployeeDirectory facade.

Invariants:
    - Routes never contain business logic (delegate to EmployeeDirectory)
    - Fixed paths (/highestSalary, /topTen..., /search, /search/...) registered before /{employee_id}
    - Errors propagate as DirectoryError and are rendered by api/error_handlers.py

Design Decisions:
    - Paths and camelCase segments kept from the existing public API contract
    - Create body optional at the FastAPI level: an absent body reaches the facade
      as None and fails its own validation with a 400
"""

from fastapi import APIRouter, Body, Depends, status

from directory_facade.api.dependencies import get_directory
from directory_facade.schemas.employee import Employee, EmployeeCreateRequest
from directory_facade.services.employee_directory import EmployeeDirectory

router = APIRouter(prefix="/api/v1/employee", tags=["employees"])


@router.get("", response_model=list[Employee])
async def get_all_employees(
    directory: EmployeeDirectory = Depends(get_directory),
):
    """List all employees in upstream order."""
    return await directory.list_employees()


@router.get("/search", response_model=list[Employee])
@router.get("/search/", response_model=list[Employee])
async def get_employees_by_empty_search(
    directory: EmployeeDirectory = Depends(get_directory),
):
    """Empty search string: matches every employee."""
    return await directory.search_by_name("")


@router.get("/search/{search_string}", response_model=list[Employee])
async def get_employees_by_name_search(
    search_string: str, directory: EmployeeDirectory = Depends(get_directory),
):
    """Case-insensitive name substring search."""
    return await directory.search_by_name(search_string)


@router.get("/highestSalary", response_model=int)
async def get_highest_salary_of_employees(
    directory: EmployeeDirectory = Depends(get_directory),
):
    return await directory.highest_salary()


@router.get("/topTenHighestEarningEmployeeNames", response_model=list[str])
async def get_top_ten_highest_earning_employee_names(
    directory: EmployeeDirectory = Depends(get_directory),
):
    return await directory.top_earner_names()


@router.get("/{employee_id}", response_model=Employee | None)
async def get_employee_by_id(
    employee_id: str, directory: EmployeeDirectory = Depends(get_directory),
):
    """Single employee; null when the upstream returned no record."""
    return await directory.get_by_id(employee_id)


@router.post(
    "", response_model=Employee | None,
    status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    body: EmployeeCreateRequest | None = Body(None),
    directory: EmployeeDirectory = Depends(get_directory),
):
    """Validate and create an employee upstream."""
    return await directory.create_employee(body)


@router.delete("/{employee_id}", response_model=str)
async def delete_employee_by_id(
    employee_id: str, directory: EmployeeDirectory = Depends(get_directory),
):
    """Delete an employee; responds with the deleted employee's name."""
    return await directory.delete_by_id(employee_id)
