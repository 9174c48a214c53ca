import os
import sys
import datetime
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from algorithms import MealPlanGenerator, build_meal_plan, generate_daily_meals
from algorithms.meal_plan_generator import FOOD_DATABASE, MEAL_FOODS, FOODS_BY_NAME
from models import ClientProfile, MacroTargets, MealSlot


class MealPlanGeneratorTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.targets = MacroTargets(calories=2161, protein_g=160, carbs_g=232, fats_g=66)

    def test_catalog(self) -> None:
        self.assertEqual(len(FOOD_DATABASE), 15)
        for names in MEAL_FOODS.values():
            for name in names:
                self.assertIn(name, FOODS_BY_NAME)

    def test_five_meals_in_slot_order(self) -> None:
        meals = generate_daily_meals(self.targets)
        self.assertEqual(
            [m.meal_type for m in meals],
            [MealSlot.BREAKFAST, MealSlot.SNACK_1, MealSlot.LUNCH, MealSlot.SNACK_2, MealSlot.DINNER],
        )
        self.assertEqual(meals[0].title, "Eggs, Oats, Banana")
        self.assertEqual(meals[1].title, "Greek Yogurt, Almonds")
        self.assertEqual(meals[2].title, "Chicken Breast, Brown Rice, Broccoli")
        self.assertEqual(meals[3].title, "Turkey Breast, Apple")
        self.assertEqual(meals[4].title, "Salmon, Sweet Potato, Spinach")

    def test_meal_totals(self) -> None:
        meals = {m.meal_type: m for m in generate_daily_meals(self.targets)}
        lunch = meals[MealSlot.LUNCH]
        self.assertEqual(
            (lunch.protein_g, lunch.carbs_g, lunch.fats_g, lunch.calories), (36, 30, 5, 310)
        )
        snack = meals[MealSlot.SNACK_1]
        self.assertEqual(
            (snack.protein_g, snack.carbs_g, snack.fats_g, snack.calories), (16, 10, 14, 223)
        )
        self.assertEqual(meals[MealSlot.BREAKFAST].calories, 649)
        self.assertEqual(meals[MealSlot.SNACK_2].calories, 230)
        self.assertEqual(meals[MealSlot.DINNER].calories, 317)

    def test_meals_do_not_depend_on_targets(self) -> None:
        other = MacroTargets(calories=1200, protein_g=90, carbs_g=80, fats_g=40)
        self.assertEqual(generate_daily_meals(self.targets), generate_daily_meals(other))
        zero = MacroTargets(calories=0, protein_g=0, carbs_g=0, fats_g=0)
        self.assertEqual(generate_daily_meals(self.targets), generate_daily_meals(zero))

    def test_per_meal_targets(self) -> None:
        shares = MealPlanGenerator.per_meal_targets(self.targets)
        self.assertAlmostEqual(shares["protein_g"], 32.0)
        self.assertAlmostEqual(shares["carbs_g"], 46.4)
        self.assertAlmostEqual(shares["fats_g"], 13.2)

    def test_build_meal_plan(self) -> None:
        profile = ClientProfile(id="c1", weight_kg=80, height_cm=180, goals="fat_loss")
        plan = build_meal_plan(profile, datetime.date(2026, 1, 1))
        self.assertEqual(plan.client_id, "c1")
        self.assertEqual(plan.targets.protein_g, 160)
        self.assertEqual(len(plan.days), 28)
        self.assertEqual([d.day_number for d in plan.days], list(range(1, 29)))
        self.assertEqual(plan.days[0].week_number, 1)
        self.assertEqual(plan.days[7].week_number, 2)
        self.assertEqual(plan.days[27].week_number, 4)
        for day in plan.days:
            self.assertEqual(day.day_number, (day.week_number - 1) * 7 + (day.day_number - 1) % 7 + 1)
            self.assertEqual(len(day.meals), 5)


if __name__ == "__main__":
    unittest.main()
