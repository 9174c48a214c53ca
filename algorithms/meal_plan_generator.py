import datetime
import logging

from models import ClientProfile, FoodItem, MacroTargets, Meal, MealPlan, MealPlanDay, MealSlot
from .macro_calculator import compute_macro_targets
from .math_tools import MathTools

logger = logging.getLogger("coach_core.meals")


FOOD_DATABASE: tuple[FoodItem, ...] = (
    FoodItem(name="Chicken Breast", protein_g=31, carbs_g=0, fats_g=3.6, calories=165, serving="100g"),
    FoodItem(name="White Rice", protein_g=2.7, carbs_g=28, fats_g=0.3, calories=130, serving="100g"),
    FoodItem(name="Eggs", protein_g=13, carbs_g=1.1, fats_g=11, calories=155, serving="2 eggs"),
    FoodItem(name="Oats", protein_g=13.2, carbs_g=67, fats_g=6.9, calories=389, serving="100g"),
    FoodItem(name="Sweet Potato", protein_g=2, carbs_g=20, fats_g=0.1, calories=86, serving="100g"),
    FoodItem(name="Lean Beef", protein_g=26, carbs_g=0, fats_g=15, calories=250, serving="100g"),
    FoodItem(name="Broccoli", protein_g=2.8, carbs_g=7, fats_g=0.4, calories=34, serving="100g"),
    FoodItem(name="Banana", protein_g=1.3, carbs_g=27, fats_g=0.3, calories=105, serving="1 medium"),
    FoodItem(name="Salmon", protein_g=25, carbs_g=0, fats_g=13, calories=208, serving="100g"),
    FoodItem(name="Greek Yogurt", protein_g=10, carbs_g=3.6, fats_g=0.4, calories=59, serving="100g"),
    FoodItem(name="Almonds", protein_g=6, carbs_g=6, fats_g=14, calories=164, serving="28g"),
    FoodItem(name="Spinach", protein_g=2.9, carbs_g=3.6, fats_g=0.4, calories=23, serving="100g"),
    FoodItem(name="Brown Rice", protein_g=2.6, carbs_g=23, fats_g=0.9, calories=111, serving="100g"),
    FoodItem(name="Turkey Breast", protein_g=29, carbs_g=0, fats_g=1, calories=135, serving="100g"),
    FoodItem(name="Apple", protein_g=0.3, carbs_g=25, fats_g=0.3, calories=95, serving="1 medium"),
)

FOODS_BY_NAME: dict[str, FoodItem] = {f.name: f for f in FOOD_DATABASE}

MEAL_FOODS: dict[MealSlot, tuple[str, ...]] = {
    MealSlot.BREAKFAST: ("Eggs", "Oats", "Banana"),
    MealSlot.SNACK_1: ("Greek Yogurt", "Almonds"),
    MealSlot.LUNCH: ("Chicken Breast", "Brown Rice", "Broccoli"),
    MealSlot.SNACK_2: ("Turkey Breast", "Apple"),
    MealSlot.DINNER: ("Salmon", "Sweet Potato", "Spinach"),
}

PLAN_WEEKS = 4
DAYS_PER_WEEK = 7


class MealPlanGenerator:
    """Assemble meals from the fixed food catalog."""

    SLOTS: tuple[MealSlot, ...] = tuple(MealSlot)

    @classmethod
    def per_meal_targets(cls, targets: MacroTargets) -> dict[str, float]:
        """Even split of each macro across the daily meal slots."""
        count = len(cls.SLOTS)
        return {
            "protein_g": targets.protein_g / count,
            "carbs_g": targets.carbs_g / count,
            "fats_g": targets.fats_g / count,
        }

    @staticmethod
    def build_meal(slot: MealSlot) -> Meal:
        foods = [FOODS_BY_NAME[name] for name in MEAL_FOODS[slot]]
        return Meal(
            meal_type=slot,
            title=", ".join(f.name for f in foods),
            protein_g=MathTools.round_int(MathTools.total(f.protein_g for f in foods)),
            carbs_g=MathTools.round_int(MathTools.total(f.carbs_g for f in foods)),
            fats_g=MathTools.round_int(MathTools.total(f.fats_g for f in foods)),
            calories=MathTools.round_int(MathTools.total(f.calories for f in foods)),
        )

    @classmethod
    def daily_meals(cls, targets: MacroTargets) -> list[Meal]:
        # Food choice is keyed on the slot only; the shares are informational.
        logger.debug("per-meal targets: %s", cls.per_meal_targets(targets))
        return [cls.build_meal(slot) for slot in cls.SLOTS]

    @classmethod
    def meal_plan(
        cls, targets: MacroTargets, client_id: str | None = None
    ) -> MealPlan:
        days: list[MealPlanDay] = []
        for week in range(1, PLAN_WEEKS + 1):
            for day_in_week in range(1, DAYS_PER_WEEK + 1):
                days.append(
                    MealPlanDay(
                        day_number=(week - 1) * DAYS_PER_WEEK + day_in_week,
                        week_number=week,
                        meals=cls.daily_meals(targets),
                    )
                )
        return MealPlan(client_id=client_id, targets=targets, days=days)


def generate_daily_meals(targets: MacroTargets) -> list[Meal]:
    """Return the five meals of one plan day in slot order."""
    return MealPlanGenerator.daily_meals(targets)


def build_meal_plan(
    profile: ClientProfile,
    today: datetime.date | None = None,
    client_id: str | None = None,
) -> MealPlan:
    """Compute targets for ``profile`` and lay out a 28-day meal plan."""
    targets = compute_macro_targets(profile, today)
    plan = MealPlanGenerator.meal_plan(targets, client_id=client_id or profile.id)
    logger.info(
        "meal plan built: %d days, %d kcal/day", len(plan.days), targets.calories
    )
    return plan
