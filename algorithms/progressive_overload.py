import logging
from typing import Sequence

from models import OverloadSuggestion, SessionSet
from .math_tools import MathTools

logger = logging.getLogger("coach_core.overload")


class ProgressiveOverloadEstimator:
    """Suggest the working weight for the next occurrence of an exercise.

    Only the most recent logged session is considered. Its mean weight is
    scaled according to how many sets succeeded and how hard they felt, then
    rounded to the nearest loadable plate increment.
    """

    STARTING_WEIGHT: float = 20.0
    PLATE_INCREMENT: float = 2.5
    DEFAULT_RPE: float = 7.0

    LOW_RPE: float = 7.0
    HIGH_RPE: float = 8.0
    DELOAD_BELOW: float = 0.5

    INCREASE_FACTOR: float = 1.025
    SMALL_INCREASE_FACTOR: float = 1.0125
    DELOAD_FACTOR: float = 0.925

    REASON_FIRST = "First session - start with a moderate weight"
    REASON_INCREASE = "All sets completed with low RPE - increase weight"
    REASON_SMALL_INCREASE = "All sets completed but high RPE - small increase"
    REASON_DELOAD = "Failed most sets - deload weight"
    REASON_MAINTAIN = "Maintain current weight"

    def __init__(
        self,
        starting_weight: float | None = None,
        plate_increment: float | None = None,
        default_rpe: float | None = None,
    ) -> None:
        if starting_weight is not None:
            self.STARTING_WEIGHT = starting_weight
        if plate_increment is not None:
            if plate_increment <= 0:
                raise ValueError("plate_increment must be positive")
            self.PLATE_INCREMENT = plate_increment
        if default_rpe is not None:
            self.DEFAULT_RPE = default_rpe

    def decide(self, success_rate: float, avg_rpe: float) -> tuple[float, str]:
        """Return the weight factor and reason for a session summary."""
        if success_rate >= 1.0 and avg_rpe <= self.LOW_RPE:
            return self.INCREASE_FACTOR, self.REASON_INCREASE
        if success_rate >= 1.0 and avg_rpe >= self.HIGH_RPE:
            return self.SMALL_INCREASE_FACTOR, self.REASON_SMALL_INCREASE
        if success_rate < self.DELOAD_BELOW:
            return self.DELOAD_FACTOR, self.REASON_DELOAD
        # includes a clean session whose mean RPE sits between 7 and 8
        return 1.0, self.REASON_MAINTAIN

    def estimate(
        self, exercise_name: str, recent_sessions: Sequence[Sequence[SessionSet]]
    ) -> OverloadSuggestion:
        sessions = [s for s in recent_sessions if len(s) > 0]
        if not sessions:
            logger.debug("%s: no logged sets, cold start", exercise_name)
            return OverloadSuggestion(
                suggested_weight_kg=self.STARTING_WEIGHT,
                reason=self.REASON_FIRST,
                last_weight_kg=0.0,
            )

        last = sessions[0]
        avg_weight = MathTools.mean(s.weight_kg for s in last)
        avg_rpe = MathTools.mean(
            s.rpe if s.rpe is not None else self.DEFAULT_RPE for s in last
        )
        success_rate = MathTools.fraction(sum(1 for s in last if s.success), len(last))

        factor, reason = self.decide(success_rate, avg_rpe)
        suggested = MathTools.round_to_increment(avg_weight * factor, self.PLATE_INCREMENT)
        logger.debug(
            "%s: avg_weight=%.2f avg_rpe=%.2f success=%.2f -> %.1f (%s)",
            exercise_name,
            avg_weight,
            avg_rpe,
            success_rate,
            suggested,
            reason,
        )
        return OverloadSuggestion(
            suggested_weight_kg=max(suggested, 0.0),
            reason=reason,
            last_weight_kg=MathTools.round_half_up(avg_weight, 1),
        )


def estimate_next_weight(
    exercise_name: str, recent_sessions: Sequence[Sequence[SessionSet]]
) -> OverloadSuggestion:
    """Suggest the next weight from sessions ordered most recent first."""
    return ProgressiveOverloadEstimator().estimate(exercise_name, recent_sessions)
