import requests
from typing import Optional


class CoachClient:
    """Simple REST client for the coach API."""

    def __init__(self, base_url: str = "http://localhost:8000", api_key: Optional[str] = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.headers = {"X-API-Key": api_key} if api_key else {}

    def _post(self, path: str, json=None, params: Optional[dict] = None):
        resp = requests.post(
            f"{self.base_url}{path}", json=json, params=params, headers=self.headers
        )
        resp.raise_for_status()
        return resp.json()

    def macros(self, profile: dict) -> dict:
        return self._post("/macros", json=profile)

    def meal_plan(self, profile: dict) -> dict:
        return self._post("/meal_plans", json=profile)

    def workout_program(self, profile: dict, split_type: Optional[str] = None) -> dict:
        params = {"split_type": split_type} if split_type else None
        return self._post("/workout_programs", json=profile, params=params)

    def suggest(self, exercise_name: str, recent_sessions: list[list[dict]]) -> dict:
        return self._post(
            "/overload/suggest",
            json={"exercise_name": exercise_name, "recent_sessions": recent_sessions},
        )
