"""
Tests for /api/v1/plans routes.
"""

from datetime import date, timedelta

from app.features.plans import LLMModelUnavailableError

INTAKE = {
    "race_location": "Berlin",
    "race_date": (date.today() + timedelta(weeks=10)).isoformat(),
    "race_division": "mens-open",
    "current_time_s": 5400,
    "target_time_s": 4800,
    "station_times": {"wallBalls": 480, "skiErg": 0},
    "run_days": 3,
    "strength_days": 2,
    "gym_days": 1,
    "equipment": ["Rower"],
}


class TestPriorities:

    def test_ranked(self, client):
        response = client.post(
            "/api/v1/plans/priorities",
            json={"station_times": {"skiErg": 300, "wallBalls": 420, "row": 0}},
        )
        assert response.status_code == 200
        items = response.json()["priorities"]
        assert [i["station"] for i in items] == ["wallBalls", "skiErg"]
        assert items[0]["savings"] == "3:30"
        assert items[0]["savings_s"] == 210

    def test_unknown_station_key(self, client):
        response = client.post(
            "/api/v1/plans/priorities", json={"station_times": {"swim": 100}}
        )
        assert response.status_code == 422


class TestCreatePlan:

    def test_generate_and_fetch(self, client, generator):
        response = client.post("/api/v1/plans", json=INTAKE)
        assert response.status_code == 200
        plan = response.json()
        assert plan["weeks"] == 10
        assert plan["html"] == generator.html
        assert plan["intake"]["station_times"] == {"wallBalls": 480}
        assert "**Race Location:** Berlin" in generator.prompts[0]

        response = client.get(f"/api/v1/plans/{plan['id']}")
        assert response.status_code == 200
        assert response.json()["id"] == plan["id"]

    def test_llm_error_status(self, client, generator):
        generator.error = LLMModelUnavailableError("Model x is not available", "404")
        response = client.post("/api/v1/plans", json=INTAKE)
        assert response.status_code == 503
        assert response.json()["detail"]["message"] == "Model x is not available"

    def test_too_many_training_days(self, client):
        response = client.post(
            "/api/v1/plans", json={**INTAKE, "run_days": 5, "strength_days": 3}
        )
        assert response.status_code == 422

    def test_missing_plan(self, client):
        assert client.get("/api/v1/plans/nope").status_code == 404


class TestRegenerate:

    def test_replaces_html(self, client, generator):
        plan_id = client.post("/api/v1/plans", json=INTAKE).json()["id"]

        generator.html = "<section>v2</section>"
        response = client.post(f"/api/v1/plans/{plan_id}/regenerate")
        assert response.status_code == 200
        assert response.json()["html"] == "<section>v2</section>"
        assert len(generator.prompts) == 2
        assert generator.prompts[0] == generator.prompts[1]

    def test_missing_plan(self, client):
        assert client.post("/api/v1/plans/nope/regenerate").status_code == 404
