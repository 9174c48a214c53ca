import datetime
import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, FastAPI, Header, HTTPException
from pydantic import BaseModel

from algorithms import (
    WeightConverter,
    generate_daily_meals,
    generate_workout_templates,
    schedule_workouts,
)
from config import load_settings
from models import (
    ClientProfile,
    ExerciseLogDraft,
    MacroTargets,
    Meal,
    MealPlan,
    OverloadSuggestion,
    ScheduledWorkout,
    SessionSet,
    WorkoutDay,
    WorkoutProgram,
    WorkoutSession,
    WorkoutTemplate,
)
from planner_service import PlannerService
from recommendation_service import RecommendationService

logger = logging.getLogger("coach_core.api")


class SuggestRequest(BaseModel):
    exercise_name: str
    recent_sessions: list[list[SessionSet]] = []


class PrepareRequest(BaseModel):
    workout_day: WorkoutDay
    sessions: list[WorkoutSession] = []


class CoachAPI:
    """Provides REST endpoints for program generation and load suggestions."""

    def __init__(self, yaml_path: str = "settings.yaml") -> None:
        self.yaml_path = yaml_path
        self.settings = load_settings(yaml_path)
        self.planner = PlannerService(self.settings)
        self.recommender = RecommendationService(self.settings)
        self.app = FastAPI(
            title="Coach API",
            description="REST API for meal plans, workout programs and overload suggestions",
        )
        self._setup_routes()

    def _require_key(self, x_api_key: Optional[str] = Header(None)) -> None:
        expected = self.settings.api_key
        if expected and x_api_key != expected:
            raise HTTPException(status_code=401, detail="invalid api key")

    def _setup_routes(self) -> None:
        guard = [Depends(self._require_key)]
        nutrition_router = APIRouter(tags=["Nutrition"], dependencies=guard)
        training_router = APIRouter(tags=["Training"], dependencies=guard)
        overload_router = APIRouter(
            prefix="/overload", tags=["Progressive Overload"], dependencies=guard
        )

        @self.app.get("/health", summary="Health check")
        def health():
            return {"status": "ok"}

        @nutrition_router.post("/macros", response_model=MacroTargets)
        def macros(profile: ClientProfile, today: Optional[datetime.date] = None):
            return self.planner.macro_targets(profile, today)

        @nutrition_router.post("/meals/daily", response_model=list[Meal])
        def daily_meals(targets: MacroTargets):
            return generate_daily_meals(targets)

        @nutrition_router.post("/meal_plans", response_model=MealPlan)
        def meal_plan(profile: ClientProfile, today: Optional[datetime.date] = None):
            return self.planner.create_meal_plan(profile, today)

        @training_router.post("/workouts/templates", response_model=list[WorkoutTemplate])
        def workout_templates(split_type: str, weekly_training_days: int):
            return generate_workout_templates(split_type, weekly_training_days)

        @training_router.post("/workouts/schedule", response_model=list[ScheduledWorkout])
        def workout_schedule(split_type: str, weekly_training_days: int):
            templates = generate_workout_templates(split_type, weekly_training_days)
            return schedule_workouts(templates, weekly_training_days)

        @training_router.post("/workout_programs", response_model=WorkoutProgram)
        def workout_program(profile: ClientProfile, split_type: Optional[str] = None):
            return self.planner.create_workout_program(profile, split_type)

        @overload_router.post("/suggest")
        def suggest(req: SuggestRequest = Body(...)):
            suggestion: OverloadSuggestion = self.recommender.estimator.estimate(
                req.exercise_name, req.recent_sessions
            )
            unit = self.settings.weight_unit
            return {
                **suggestion.model_dump(),
                "unit": unit,
                "display_weight": WeightConverter.from_kg(
                    suggestion.suggested_weight_kg, unit
                ),
            }

        @overload_router.post("/prepare", response_model=list[ExerciseLogDraft])
        def prepare(req: PrepareRequest = Body(...)):
            return self.recommender.prepare_log(req.workout_day, req.sessions)

        self.app.include_router(nutrition_router)
        self.app.include_router(training_router)
        self.app.include_router(overload_router)


api = CoachAPI()
app = api.app

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app)
