"""Tests for the HTTP server."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from workout_builder.core.result import Result
from workout_builder.db.models import AttributeValue
from workout_builder.server.schemas import GetExercisesRequest
from workout_builder.services import ExerciseSelectionService


class TestGetExercisesRequest:
    """Tests for request validation."""

    def test_defaults(self):
        """Test limit defaults to 3 and values parse to enums."""
        req = GetExercisesRequest(equipment=["DUMBBELL"], muscles=["CHEST"])
        assert req.limit == 3
        assert req.muscles == [AttributeValue.CHEST]

    def test_duplicates_removed_in_order(self):
        """Test repeated values are dropped keeping first-seen order."""
        req = GetExercisesRequest(
            equipment=["BENCH", "DUMBBELL", "BENCH"], muscles=["BACK", "CHEST", "BACK"]
        )
        assert req.equipment == [AttributeValue.BENCH, AttributeValue.DUMBBELL]
        assert req.muscles == [AttributeValue.BACK, AttributeValue.CHEST]

    def test_empty_lists_rejected(self):
        """Test both lists must be non-empty."""
        with pytest.raises(ValidationError):
            GetExercisesRequest(equipment=[], muscles=["CHEST"])
        with pytest.raises(ValidationError):
            GetExercisesRequest(equipment=["DUMBBELL"], muscles=[])

    def test_wrong_category_rejected(self):
        """Test muscles and equipment cannot be swapped."""
        with pytest.raises(ValidationError):
            GetExercisesRequest(equipment=["CHEST"], muscles=["CHEST"])
        with pytest.raises(ValidationError):
            GetExercisesRequest(equipment=["DUMBBELL"], muscles=["STRETCHING"])

    def test_unknown_value_rejected(self):
        """Test values outside the attribute vocabulary are rejected."""
        with pytest.raises(ValidationError):
            GetExercisesRequest(equipment=["SPACESHIP"], muscles=["CHEST"])

    @pytest.mark.parametrize("limit", [0, -1, 11])
    def test_limit_bounds(self, limit):
        """Test limit must be between 1 and 10."""
        with pytest.raises(ValidationError):
            GetExercisesRequest(equipment=["DUMBBELL"], muscles=["CHEST"], limit=limit)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_check(self, client):
        """Test that health check returns healthy status."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "workout-builder"}


class TestExercisesEndpoint:
    """Tests for POST /exercises."""

    def test_select(self, client):
        """Test a valid request returns one group per muscle in order."""
        response = client.post(
            "/exercises",
            json={"muscles": ["CHEST", "BACK"], "equipment": ["DUMBBELL", "BENCH"], "limit": 2},
        )
        assert response.status_code == 200
        data = response.json()
        assert [g["muscle"] for g in data] == ["CHEST", "BACK"]
        for group in data:
            assert 0 < len(group["exercises"]) <= 2
            for ex in group["exercises"]:
                assert {"id", "name", "attributes"} <= set(ex)

    def test_muscles_without_matches_dropped(self, client):
        """Test muscles with no matching exercises are left out."""
        response = client.post(
            "/exercises", json={"muscles": ["CALVES"], "equipment": ["SLED"]}
        )
        assert response.status_code == 200
        assert response.json() == []

    def test_validation_error(self, client):
        """Test an invalid body returns 422."""
        response = client.post("/exercises", json={"muscles": [], "equipment": ["DUMBBELL"]})
        assert response.status_code == 422

    def test_service_error(self, client):
        """Test a service failure returns 500 with the generic message."""
        with patch(
            "workout_builder.server.app.ExerciseSelectionService.get_exercises",
            return_value=Result.err("Error fetching exercises"),
        ):
            response = client.post(
                "/exercises", json={"muscles": ["CHEST"], "equipment": ["DUMBBELL"]}
            )
        assert response.status_code == 500
        assert response.json() == {"detail": "Error fetching exercises"}

    def test_each_request_gets_its_own_generator(self, client, test_context):
        """Test worker threads never share the context's random generator."""
        with patch(
            "workout_builder.server.app.ExerciseSelectionService",
            wraps=ExerciseSelectionService,
        ) as service_cls:
            for _ in range(2):
                response = client.post(
                    "/exercises", json={"muscles": ["CHEST"], "equipment": ["BENCH"]}
                )
                assert response.status_code == 200

        generators = [call.args[2] for call in service_cls.call_args_list]
        assert len(generators) == 2
        assert generators[0] is not generators[1]
        assert all(rng is not test_context.rng for rng in generators)


class TestExerciseLookup:
    """Tests for GET /exercises/{id} and /attributes."""

    def test_get_exercise(self, client):
        """Test an exercise can be fetched by id."""
        selection = client.post(
            "/exercises", json={"muscles": ["TRICEPS"], "equipment": ["BANDS"]}
        ).json()
        exercise_id = selection[0]["exercises"][0]["id"]

        response = client.get(f"/exercises/{exercise_id}")
        assert response.status_code == 200
        assert response.json()["name"] == "Band Triceps Pushdown"

    def test_get_exercise_not_found(self, client):
        """Test an unknown id returns 404."""
        response = client.get("/exercises/99999")
        assert response.status_code == 404

    def test_list_attributes(self, client):
        """Test attribute names are listed with their values."""
        response = client.get("/attributes")
        assert response.status_code == 200
        by_name = {row["name"]: row["values"] for row in response.json()}
        assert set(by_name) == {
            "TYPE",
            "PRIMARY_MUSCLE",
            "SECONDARY_MUSCLE",
            "EQUIPMENT",
            "MECHANICS_TYPE",
        }
        assert by_name["MECHANICS_TYPE"] == ["COMPOUND", "ISOLATION"]
