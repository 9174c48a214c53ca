import os
import sys
import unittest
from unittest import mock

from fastapi.testclient import TestClient

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from client import CoachClient
from rest_api import CoachAPI


class ClientTest(unittest.TestCase):
    def setUp(self) -> None:
        self.yaml_path = "test_client.yaml"
        self.test_client = TestClient(CoachAPI(yaml_path=self.yaml_path).app)
        self.client = CoachClient(base_url="http://testserver/")

    def _post(self, url, json=None, params=None, headers=None):
        return self.test_client.post(
            url.replace("http://testserver", ""), json=json, params=params, headers=headers
        )

    def test_macros_and_suggest(self) -> None:
        with mock.patch("client.requests.post", side_effect=self._post):
            targets = self.client.macros({"weight_kg": 80})
            self.assertEqual(targets["protein_g"], 160)
            program = self.client.workout_program({"weekly_training_days": 2}, "Upper/Lower")
            self.assertEqual(len(program["days"]), 8)
            result = self.client.suggest("Squat", [])
            self.assertEqual(result["suggested_weight_kg"], 20)


if __name__ == "__main__":
    unittest.main()
