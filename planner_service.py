from __future__ import annotations
import datetime
import logging

from algorithms import (
    build_meal_plan,
    build_workout_program,
    compute_macro_targets,
)
from models import ClientProfile, MacroTargets, MealPlan, SplitType, WorkoutProgram
from settings_schema import SettingsSchema

logger = logging.getLogger("coach_core.planner")


class PlannerService:
    """Generates nutrition and training programs for a client."""

    def __init__(self, settings: SettingsSchema | None = None) -> None:
        self.settings = settings or SettingsSchema()

    def macro_targets(
        self, profile: ClientProfile, today: datetime.date | None = None
    ) -> MacroTargets:
        return compute_macro_targets(profile, today)

    def create_meal_plan(
        self, profile: ClientProfile, today: datetime.date | None = None
    ) -> MealPlan:
        return build_meal_plan(profile, today)

    def create_workout_program(
        self,
        profile: ClientProfile,
        split_type: SplitType | str | None = None,
    ) -> WorkoutProgram:
        """Create a 28-day program for ``profile``.

        The split falls back to the configured default; the weekly day count
        comes from the profile with its own default applied.
        """
        split = split_type or self.settings.default_split
        days = profile.resolve().weekly_training_days
        logger.info(
            "generating %s program for client %s with %d days/week",
            split,
            profile.id,
            days,
        )
        return build_workout_program(split, days, client_id=profile.id)
