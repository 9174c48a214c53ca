from .math_tools import MathTools
from .macro_calculator import MacroCalculator, compute_macro_targets
from .meal_plan_generator import MealPlanGenerator, build_meal_plan, generate_daily_meals
from .workout_plan_generator import (
    WorkoutPlanGenerator,
    build_workout_program,
    generate_workout_templates,
    schedule_workouts,
)
from .progressive_overload import ProgressiveOverloadEstimator, estimate_next_weight
from .weight_converter import WeightConverter

__all__ = [
    "MathTools",
    "MacroCalculator",
    "compute_macro_targets",
    "MealPlanGenerator",
    "generate_daily_meals",
    "build_meal_plan",
    "WorkoutPlanGenerator",
    "generate_workout_templates",
    "schedule_workouts",
    "build_workout_program",
    "ProgressiveOverloadEstimator",
    "estimate_next_weight",
    "WeightConverter",
]
