from __future__ import annotations
import logging
from typing import Iterable

from algorithms import ProgressiveOverloadEstimator
from models import (
    Exercise,
    ExerciseLogDraft,
    OverloadSuggestion,
    SessionSet,
    SetDraft,
    WorkoutDay,
    WorkoutSession,
)
from settings_schema import SettingsSchema

logger = logging.getLogger("coach_core.recommendations")


class RecommendationService:
    """Generate next-session weight suggestions from logged history."""

    def __init__(self, settings: SettingsSchema | None = None) -> None:
        self.settings = settings or SettingsSchema()
        self.estimator = ProgressiveOverloadEstimator(
            starting_weight=self.settings.starting_weight_kg,
            plate_increment=self.settings.plate_increment_kg,
            default_rpe=self.settings.default_rpe,
        )

    def recent_sets(
        self, exercise_name: str, sessions: Iterable[WorkoutSession]
    ) -> list[list[SessionSet]]:
        """Return per-session set lists for ``exercise_name``, newest first.

        Only the newest ``history_sessions`` sessions are looked at; sessions
        in that window that did not include the exercise are skipped.
        """
        window = sorted(sessions, key=lambda s: s.session_date, reverse=True)[
            : self.settings.history_sessions
        ]
        history: list[list[SessionSet]] = []
        for session in window:
            sets = [s for s in session.sets if s.exercise_name == exercise_name]
            if sets:
                history.append(sorted(sets, key=lambda s: s.set_number))
        return history

    def suggest(
        self, exercise_name: str, sessions: Iterable[WorkoutSession]
    ) -> OverloadSuggestion:
        return self.estimator.estimate(
            exercise_name, self.recent_sets(exercise_name, sessions)
        )

    def draft_for(self, exercise: Exercise, suggestion: OverloadSuggestion) -> ExerciseLogDraft:
        sets = [
            SetDraft(weight_kg=suggestion.suggested_weight_kg, rpe=self.settings.default_rpe)
            for _ in range(exercise.sets)
        ]
        return ExerciseLogDraft(exercise=exercise, sets=sets, suggestion=suggestion)

    def prepare_log(
        self, workout_day: WorkoutDay, sessions: Iterable[WorkoutSession]
    ) -> list[ExerciseLogDraft]:
        """Prefill a logging session for every exercise of ``workout_day``."""
        history = list(sessions)
        drafts = []
        for exercise in sorted(workout_day.exercises, key=lambda e: e.order_index):
            drafts.append(self.draft_for(exercise, self.suggest(exercise.name, history)))
        logger.info(
            "prepared %d exercises for day %d (%s)",
            len(drafts),
            workout_day.day_number,
            workout_day.focus,
        )
        return drafts
