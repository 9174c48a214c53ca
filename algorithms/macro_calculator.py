import datetime
import logging

from models import ActivityLevel, ClientProfile, Gender, MacroTargets, ResolvedProfile
from .math_tools import MathTools

logger = logging.getLogger("coach_core.macros")


class MacroCalculator:
    """Daily calorie and macronutrient targets from a client profile."""

    ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
        ActivityLevel.SEDENTARY: 1.2,
        ActivityLevel.LIGHT: 1.375,
        ActivityLevel.MODERATE: 1.55,
        ActivityLevel.ACTIVE: 1.725,
        ActivityLevel.VERY_ACTIVE: 1.9,
    }
    DEFAULT_MULTIPLIER: float = 1.55
    CUT_FACTOR: float = 0.8
    BULK_FACTOR: float = 1.125
    CUT_KEYWORDS: tuple[str, ...] = ("loss", "cut")
    BULK_KEYWORDS: tuple[str, ...] = ("gain", "bulk")
    PROTEIN_G_PER_KG: float = 2.0
    FAT_CALORIE_SHARE: float = 0.275

    @staticmethod
    def bmr(weight_kg: float, height_cm: float, age: int, gender: Gender) -> float:
        """Basal metabolic rate using the Mifflin-St Jeor equation."""
        base = 10 * weight_kg + 6.25 * height_cm - 5 * age
        if gender is Gender.MALE:
            return base + 5
        return base - 161

    @classmethod
    def tdee(cls, bmr: float, activity_level: ActivityLevel) -> float:
        return bmr * cls.ACTIVITY_MULTIPLIERS.get(activity_level, cls.DEFAULT_MULTIPLIER)

    @classmethod
    def goal_factor(cls, goal_text: str | None) -> float:
        """Calorie multiplier for a goal label.

        Labels are matched by case-insensitive substring so "Fat Loss",
        "fat_loss" and "cutting" all select the deficit. Deficit keywords
        win over surplus keywords.
        """
        text = (goal_text or "").lower()
        if any(k in text for k in cls.CUT_KEYWORDS):
            return cls.CUT_FACTOR
        if any(k in text for k in cls.BULK_KEYWORDS):
            return cls.BULK_FACTOR
        return 1.0

    @classmethod
    def targets_for(cls, profile: ResolvedProfile) -> MacroTargets:
        bmr = cls.bmr(profile.weight_kg, profile.height_cm, profile.age, profile.gender)
        tdee = cls.tdee(bmr, profile.activity_level)
        calories = tdee * cls.goal_factor(profile.goal_text)

        protein_g = profile.weight_kg * cls.PROTEIN_G_PER_KG
        fats_g = calories * cls.FAT_CALORIE_SHARE / MathTools.KCAL_PER_G_FAT
        carbs_g = (
            calories
            - (protein_g * MathTools.KCAL_PER_G_PROTEIN + fats_g * MathTools.KCAL_PER_G_FAT)
        ) / MathTools.KCAL_PER_G_CARB
        if carbs_g < 0:
            logger.warning(
                "carbohydrate target %.1f g is negative for %.1f kcal; clamping to 0",
                carbs_g,
                calories,
            )
            carbs_g = 0.0

        logger.debug(
            "bmr=%.2f tdee=%.2f calories=%.2f goal=%r", bmr, tdee, calories, profile.goal_text
        )
        return MacroTargets(
            calories=max(MathTools.round_int(calories), 0),
            protein_g=MathTools.round_int(protein_g),
            carbs_g=MathTools.round_int(carbs_g),
            fats_g=max(MathTools.round_int(fats_g), 0),
        )


def compute_macro_targets(
    profile: ClientProfile, today: datetime.date | None = None
) -> MacroTargets:
    """Return daily macro targets for ``profile`` with defaults applied."""
    return MacroCalculator.targets_for(profile.resolve(today))
