"""Employee Routes — HTTP surface, status mapping and error envelopes.

Invariants:
    - 200 for reads and delete, 201 for create
    - ResourceNotFound → 404, InvalidInput/MissingArgument → 400, UpstreamFailure → 500
    - Employee responses keep the upstream wire keys
"""

from tests.fake_upstream import BASE_PATH, employee_json

API = "/api/v1/employee"


async def test_get_all_employees(client, upstream, sample_employees):
    upstream.respond_list(sample_employees)

    res = await client.get(API)

    assert res.status_code == 200
    body = res.json()
    assert [e["employee_name"] for e in body] == ["emp1", "emp2", "emp3"]
    assert body[0]["employee_salary"] == 50000


async def test_get_all_upstream_failure_is_500(client, upstream):
    upstream.respond("GET", BASE_PATH, 502)

    res = await client.get(API)

    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "UPSTREAM_FAILURE"
    assert error["context"]["upstream_status"] == 502


async def test_search_route(client, upstream, sample_employees):
    upstream.respond_list(sample_employees)

    res = await client.get(f"{API}/search/EMP3")

    assert res.status_code == 200
    assert [e["id"] for e in res.json()] == ["3"]


async def test_highest_salary_route(client, upstream, sample_employees):
    upstream.respond_list(sample_employees)

    res = await client.get(f"{API}/highestSalary")

    assert res.status_code == 200
    assert res.json() == 70000


async def test_top_ten_route(client, upstream, sample_employees):
    upstream.respond_list(sample_employees)

    res = await client.get(f"{API}/topTenHighestEarningEmployeeNames")

    assert res.status_code == 200
    assert res.json() == ["emp3", "emp2", "emp1"]


async def test_get_by_id_route(client, upstream):
    upstream.respond_one("1", employee_json("1", "emp1", 50000))

    res = await client.get(f"{API}/1")

    assert res.status_code == 200
    assert res.json()["employee_name"] == "emp1"


async def test_get_by_id_not_found_is_404(client, upstream):
    res = await client.get(f"{API}/404-id")

    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert "404-id" in error["message"]


async def test_get_by_id_absent_payload_is_null(client, upstream):
    upstream.respond_one("1", None)

    res = await client.get(f"{API}/1")

    assert res.status_code == 200
    assert res.json() is None


async def test_create_returns_201(client, upstream):
    created = employee_json("42", "emp4", 55000, 32, "manager")
    upstream.respond("POST", BASE_PATH, 200, {"data": created, "status": "ok"})

    res = await client.post(API, json={
        "name": "emp4", "salary": 55000, "age": 32, "title": "manager",
    })

    assert res.status_code == 201
    assert res.json()["id"] == "42"


async def test_create_invalid_age_is_400(client, upstream):
    res = await client.post(API, json={
        "name": "emp4", "salary": 55000, "age": 80, "title": "manager",
    })

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "INVALID_INPUT"
    assert "age" in error["message"]
    assert upstream.requests == []


async def test_create_without_body_is_400(client, upstream):
    res = await client.post(API)

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_INPUT"


async def test_create_wrong_type_is_validation_error(client, upstream):
    res = await client.post(API, json={
        "name": "emp4", "salary": "lots", "age": 32, "title": "manager",
    })

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert any(d["field"].endswith("salary") for d in error["details"])


async def test_delete_returns_name(client, upstream):
    upstream.respond_one("5", employee_json("5", "emp5", 40000))
    upstream.respond_delete(True)

    res = await client.delete(f"{API}/5")

    assert res.status_code == 200
    assert res.json() == "emp5"


async def test_delete_blank_id_is_400(client, upstream):
    res = await client.delete(f"{API}/%20")

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_INPUT"


async def test_delete_failed_flag_is_500(client, upstream):
    upstream.respond_one("5", employee_json("5", "emp5", 40000))
    upstream.respond_delete(False, status="Deletion failed")

    res = await client.delete(f"{API}/5")

    assert res.status_code == 500
    assert "Deletion failed" in res.json()["error"]["message"]


async def test_empty_search_returns_everyone_in_order(client, upstream, sample_employees):
    upstream.respond_list(sample_employees)

    res = await client.get(f"{API}/search/")

    assert res.status_code == 200
    assert [e["id"] for e in res.json()] == ["1", "2", "3"]
    assert [r["path"] for r in upstream.requests] == [BASE_PATH]


async def test_search_without_trailing_slash_is_empty_search(client, upstream, sample_employees):
    upstream.respond_list(sample_employees)

    res = await client.get(f"{API}/search")

    assert res.status_code == 200
    assert len(res.json()) == 3
    assert [r["path"] for r in upstream.requests] == [BASE_PATH]
