import os
import sys
import unittest

from pydantic import ValidationError

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from algorithms import ProgressiveOverloadEstimator, estimate_next_weight
from models import SessionSet


def session(weights, rpes=None, successes=None, name="Squat"):
    rpes = rpes or [None] * len(weights)
    successes = successes if successes is not None else [True] * len(weights)
    return [
        SessionSet(exercise_name=name, set_number=i + 1, weight_kg=w, reps=8, rpe=r, success=s)
        for i, (w, r, s) in enumerate(zip(weights, rpes, successes))
    ]


class ProgressiveOverloadTestCase(unittest.TestCase):
    def test_cold_start(self) -> None:
        result = estimate_next_weight("Squat", [])
        self.assertEqual(result.suggested_weight_kg, 20)
        self.assertEqual(result.last_weight_kg, 0)
        self.assertEqual(result.reason, "First session - start with a moderate weight")

    def test_empty_sessions_count_as_no_history(self) -> None:
        result = estimate_next_weight("Squat", [[], []])
        self.assertEqual(result.suggested_weight_kg, 20)
        self.assertEqual(result.last_weight_kg, 0)

    def test_empty_latest_session_is_skipped(self) -> None:
        result = estimate_next_weight("Squat", [[], session([60, 60], [9, 9])])
        self.assertEqual(result.last_weight_kg, 60.0)

    def test_low_rpe_increase(self) -> None:
        result = estimate_next_weight("Squat", [session([100, 100, 100], [6, 6, 6])])
        self.assertEqual(result.suggested_weight_kg, 102.5)
        self.assertEqual(result.last_weight_kg, 100.0)
        self.assertEqual(result.reason, "All sets completed with low RPE - increase weight")

    def test_missing_rpe_defaults_to_seven(self) -> None:
        result = estimate_next_weight("Squat", [session([100, 100, 100])])
        self.assertEqual(result.suggested_weight_kg, 102.5)

    def test_high_rpe_small_increase(self) -> None:
        result = estimate_next_weight("Squat", [session([120, 120], [8, 9])])
        self.assertEqual(result.suggested_weight_kg, 122.5)
        self.assertEqual(result.reason, "All sets completed but high RPE - small increase")

    def test_deload_rounds_half_up(self) -> None:
        # 50 * 0.925 = 46.25 -> 18.5 plates -> 19 -> 47.5
        result = estimate_next_weight(
            "Squat", [session([50, 50, 50, 50], successes=[True, False, False, False])]
        )
        self.assertEqual(result.suggested_weight_kg, 47.5)
        self.assertEqual(result.reason, "Failed most sets - deload weight")

    def test_half_success_maintains(self) -> None:
        result = estimate_next_weight(
            "Squat", [session([60, 60, 60, 60], successes=[True, True, False, False])]
        )
        self.assertEqual(result.suggested_weight_kg, 60.0)
        self.assertEqual(result.reason, "Maintain current weight")

    def test_rpe_between_seven_and_eight_maintains(self) -> None:
        result = estimate_next_weight("Squat", [session([60, 60], [7, 8])])
        self.assertEqual(result.suggested_weight_kg, 60.0)
        self.assertEqual(result.reason, "Maintain current weight")

    def test_only_latest_session_used(self) -> None:
        result = estimate_next_weight(
            "Squat", [session([60, 60], [6, 6]), session([140, 140], [6, 6])]
        )
        self.assertEqual(result.last_weight_kg, 60.0)
        self.assertEqual(result.suggested_weight_kg, 62.5)

    def test_last_weight_one_decimal(self) -> None:
        result = estimate_next_weight("Squat", [session([60, 62.5, 62.5], [6, 6, 6])])
        self.assertEqual(result.last_weight_kg, 61.7)
        self.assertEqual(result.suggested_weight_kg, 62.5)

    def test_custom_increment(self) -> None:
        estimator = ProgressiveOverloadEstimator(plate_increment=5.0, starting_weight=10.0)
        self.assertEqual(estimator.estimate("Squat", []).suggested_weight_kg, 10.0)
        result = estimator.estimate("Squat", [session([100, 100], [6, 6])])
        self.assertEqual(result.suggested_weight_kg, 105.0)
        with self.assertRaises(ValueError):
            ProgressiveOverloadEstimator(plate_increment=0)

    def test_non_finite_set_weight_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            session([float("inf")])
        with self.assertRaises(ValidationError):
            session([1e308])
        with self.assertRaises(ValidationError):
            session([100], rpes=[float("nan")])


if __name__ == "__main__":
    unittest.main()
