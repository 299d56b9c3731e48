"""
API tests for the challenge, grading and database routes.
"""

import pytest
from httpx import AsyncClient

from api.main import app
from api.deps import LOCAL_ONLY_DETAIL
from core.config import Settings, get_settings


@pytest.mark.asyncio
class TestHealthCheck:
    async def test_health_check(self, client: AsyncClient):
        response = await client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"


@pytest.mark.asyncio
class TestChallengesAPI:
    async def test_list_all(self, client: AsyncClient):
        response = await client.get("/api/v1/challenges/")
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 79
        assert data[0]["key"] == "1.1"

    async def test_list_part(self, client: AsyncClient):
        response = await client.get("/api/v1/challenges/", params={"part": 4})
        assert response.status_code == 200
        keys = [c["key"] for c in response.json()]
        assert len(keys) == 14
        assert all(k.startswith("4.") for k in keys)

    async def test_list_unknown_part(self, client: AsyncClient):
        response = await client.get("/api/v1/challenges/", params={"part": 9})
        assert response.status_code == 404

    async def test_get_challenge(self, client: AsyncClient):
        response = await client.get("/api/v1/challenges/1.9")
        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Count the Employees"
        assert data["topics"] == ["COUNT"]
        assert "COUNT(*)" in data["solution"]

    async def test_get_challenge_not_found(self, client: AsyncClient):
        response = await client.get("/api/v1/challenges/9.99")
        assert response.status_code == 404

    async def test_grade_reference_solution(self, client: AsyncClient):
        response = await client.post("/api/v1/challenges/1.9/grade")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "passed"
        assert data["rows"] == [["37"]]

    async def test_grade_submission(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/challenges/1.9/grade",
            json={"sql": "SELECT 36 AS total_employees"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "failed"
        assert data["messages"]

    async def test_grade_unknown_challenge(self, client: AsyncClient):
        response = await client.post("/api/v1/challenges/0.1/grade", json={"sql": "SELECT 1"})
        assert response.status_code == 404


@pytest.mark.asyncio
class TestDatabaseAPI:
    async def test_summary(self, client: AsyncClient):
        response = await client.get("/api/v1/database/summary")
        assert response.status_code == 200
        data = response.json()
        assert data["completion"]["employee_count"] == 37
        assert data["row_counts"]["order_items"] == 37
        assert len(data["row_counts"]) == 26

    async def test_integrity(self, client: AsyncClient):
        response = await client.get("/api/v1/database/integrity")
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 14
        assert data[0]["order_id"] == 3
        assert data[0]["difference"] == "400.04"

    async def test_reset(self, client: AsyncClient):
        response = await client.post("/api/v1/database/reset")
        assert response.status_code == 200
        assert response.json()["order_count"] == 20

    async def test_reset_forbidden_outside_local(self, client: AsyncClient):
        app.dependency_overrides[get_settings] = lambda: Settings(app_env="production")
        response = await client.post("/api/v1/database/reset")
        assert response.status_code == 403
        assert response.json()["detail"] == LOCAL_ONLY_DETAIL

    async def test_modifying_submission_forbidden_outside_local(self, client: AsyncClient):
        app.dependency_overrides[get_settings] = lambda: Settings(app_env="production")
        response = await client.post(
            "/api/v1/challenges/1.9/grade",
            json={"sql": "DROP VIEW order_summary; DELETE FROM order_items"},
        )
        assert response.status_code == 403
        assert response.json()["detail"] == LOCAL_ONLY_DETAIL

        summary = await client.get("/api/v1/database/summary")
        assert summary.json()["row_counts"]["order_items"] == 37

    async def test_modifying_reference_solution_forbidden_outside_local(self, client: AsyncClient):
        app.dependency_overrides[get_settings] = lambda: Settings(app_env="production")
        response = await client.post("/api/v1/challenges/5.6/grade")
        assert response.status_code == 403
        assert response.json()["detail"] == LOCAL_ONLY_DETAIL

    async def test_read_only_grading_allowed_outside_local(self, client: AsyncClient):
        app.dependency_overrides[get_settings] = lambda: Settings(app_env="production")
        response = await client.post(
            "/api/v1/challenges/1.9/grade",
            json={"sql": "SELECT COUNT(*) AS total_employees FROM employees"},
        )
        assert response.status_code == 200
        assert response.json()["status"] == "passed"
