"""Root conftest — shared test configuration and upstream fixtures.

Invariants:
    - Tests never reach a real employee API: every upstream call goes through
      httpx.MockTransport backed by FakeUpstream
    - EmployeeApiClient and EmployeeDirectory run unmodified on top of the fake
"""

import os

import httpx
import pytest

# Ensure tests don't accidentally point at a real upstream
os.environ.setdefault("EMPLOYEE_API_BASE_URL", "http://upstream.test/api/v1/employee")
os.environ.setdefault("LOG_FORMAT", "text")

from directory_facade.infrastructure.employee_api_client import EmployeeApiClient  # noqa: E402
from directory_facade.services.employee_directory import EmployeeDirectory  # noqa: E402
from tests.fake_upstream import BASE_URL, FakeUpstream, employee_json  # noqa: E402


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
async def http_client(upstream):
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(upstream.handler),
    ) as client:
        yield client


@pytest.fixture
def api_client(http_client):
    return EmployeeApiClient(http_client, BASE_URL)


@pytest.fixture
def directory(api_client):
    return EmployeeDirectory(api_client)


@pytest.fixture
def sample_employees():
    return [
        employee_json("1", "emp1", 50000, 30, "Engineer", "john.doe@example.com"),
        employee_json("2", "emp2", 60000, 28, "HR Manager", "jane.smith@example.com"),
        employee_json("3", "emp3", 70000, 35, "Developer", "alice.johnson@example.com"),
    ]
