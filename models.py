from __future__ import annotations
import datetime
from enum import Enum
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"

    @classmethod
    def parse(cls, value: str | None) -> "Gender":
        """Missing means male; anything that is not "male" counts as female."""
        if value is None:
            return cls.MALE
        text = str(value).strip().lower()
        if not text or text == cls.MALE.value:
            return cls.MALE
        return cls.FEMALE


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

    @classmethod
    def parse(cls, value: str | None) -> "ActivityLevel":
        if value is None:
            return cls.MODERATE
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.MODERATE


class Goal(str, Enum):
    FAT_LOSS = "fat_loss"
    MUSCLE_GAIN = "muscle_gain"
    RECOMP = "recomp"
    STRENGTH = "strength"
    MAINTENANCE = "maintenance"


class SplitType(str, Enum):
    PUSH_PULL_LEGS = "Push/Pull/Legs"
    UPPER_LOWER = "Upper/Lower"
    FULL_BODY = "Full Body"

    @classmethod
    def parse(cls, value: "SplitType | str | None") -> Optional["SplitType"]:
        """Return the split for ``value`` or ``None`` when it is not known."""
        if isinstance(value, cls):
            return value
        if value is None:
            return None
        try:
            return cls(str(value))
        except ValueError:
            return None


class MealSlot(str, Enum):
    BREAKFAST = "Breakfast"
    SNACK_1 = "Snack 1"
    LUNCH = "Lunch"
    SNACK_2 = "Snack 2"
    DINNER = "Dinner"


class ClientProfile(BaseModel):
    """Client record as stored by the application layer."""

    id: Optional[str] = None
    full_name: Optional[str] = None
    weight_kg: Optional[float] = Field(None, ge=0, le=1000, allow_inf_nan=False)
    height_cm: Optional[float] = Field(None, ge=0, le=300, allow_inf_nan=False)
    dob: Optional[datetime.date] = None
    gender: Optional[str] = None
    activity_level: Optional[str] = None
    goals: Optional[str] = None
    weekly_training_days: Optional[int] = None

    # carried by the record, not used by any formula
    bodyfat_percentage: Optional[float] = Field(None, ge=0, le=100, allow_inf_nan=False)
    target_weight_kg: Optional[float] = Field(None, ge=0, le=1000, allow_inf_nan=False)
    training_experience: Optional[str] = None
    available_equipment: list[str] = Field(default_factory=list)
    diet_type: Optional[str] = None
    allergies: list[str] = Field(default_factory=list)
    disliked_foods: list[str] = Field(default_factory=list)

    @field_validator(
        "weight_kg",
        "height_cm",
        "dob",
        "gender",
        "activity_level",
        "goals",
        "weekly_training_days",
        "bodyfat_percentage",
        "target_weight_kg",
        mode="before",
    )
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def resolve(self, today: datetime.date | None = None) -> "ResolvedProfile":
        """Apply fallback defaults and return a fully populated profile.

        A missing ``weekly_training_days`` becomes 4. An explicit 0 is kept
        as 0 and yields an empty schedule: 0 is deliberately not treated as
        missing, so a ``days or 4`` style fallback does not apply.
        """
        today = today or datetime.date.today()
        age = today.year - self.dob.year if self.dob else ResolvedProfile.DEFAULT_AGE
        days = self.weekly_training_days
        return ResolvedProfile(
            weight_kg=self.weight_kg or ResolvedProfile.DEFAULT_WEIGHT_KG,
            height_cm=self.height_cm or ResolvedProfile.DEFAULT_HEIGHT_CM,
            age=age,
            gender=Gender.parse(self.gender),
            activity_level=ActivityLevel.parse(self.activity_level),
            goal_text=(self.goals or Goal.MAINTENANCE.value).strip().lower(),
            weekly_training_days=(
                ResolvedProfile.DEFAULT_TRAINING_DAYS if days is None else days
            ),
        )


class ResolvedProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    DEFAULT_WEIGHT_KG: ClassVar[float] = 70.0
    DEFAULT_HEIGHT_CM: ClassVar[float] = 170.0
    DEFAULT_AGE: ClassVar[int] = 30
    DEFAULT_TRAINING_DAYS: ClassVar[int] = 4

    weight_kg: float
    height_cm: float
    age: int
    gender: Gender
    activity_level: ActivityLevel
    goal_text: str
    weekly_training_days: int


class MacroTargets(BaseModel):
    model_config = ConfigDict(frozen=True)

    calories: int = Field(ge=0)
    protein_g: int = Field(ge=0)
    carbs_g: int = Field(ge=0)
    fats_g: int = Field(ge=0)


class FoodItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    protein_g: float
    carbs_g: float
    fats_g: float
    calories: float
    serving: str


class Meal(BaseModel):
    meal_type: MealSlot
    title: str
    protein_g: int = Field(ge=0)
    carbs_g: int = Field(ge=0)
    fats_g: int = Field(ge=0)
    calories: int = Field(ge=0)


class MealPlanDay(BaseModel):
    day_number: int = Field(ge=1, le=28)
    week_number: int = Field(ge=1, le=4)
    meals: list[Meal] = Field(default_factory=list)


class MealPlan(BaseModel):
    client_id: Optional[str] = None
    targets: MacroTargets
    days: list[MealPlanDay] = Field(default_factory=list)


class ExerciseTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    sets: int
    reps: str
    notes: str = ""
    order_index: int


class WorkoutTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    focus: str
    exercises: tuple[ExerciseTemplate, ...]


class ScheduledWorkout(BaseModel):
    model_config = ConfigDict(frozen=True)

    day_number: int
    week_number: int
    template: WorkoutTemplate


class Exercise(BaseModel):
    name: str
    sets: int
    reps: str
    notes: str = ""
    order_index: int


class WorkoutDay(BaseModel):
    id: Optional[str] = None
    day_number: int = Field(ge=1, le=28)
    week_number: int = Field(ge=1, le=4)
    focus: str
    exercises: list[Exercise] = Field(default_factory=list)


class WorkoutProgram(BaseModel):
    client_id: Optional[str] = None
    split_type: str
    days: list[WorkoutDay] = Field(default_factory=list)


class SessionSet(BaseModel):
    exercise_name: str
    set_number: int = 1
    weight_kg: float = Field(ge=0, le=1000, allow_inf_nan=False)
    reps: int = Field(0, ge=0)
    rpe: Optional[float] = Field(None, ge=1, le=10, allow_inf_nan=False)
    success: bool = True


class WorkoutSession(BaseModel):
    id: Optional[str] = None
    client_id: Optional[str] = None
    workout_day_id: Optional[str] = None
    session_date: datetime.date
    notes: Optional[str] = None
    sets: list[SessionSet] = Field(default_factory=list)


class OverloadSuggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    suggested_weight_kg: float = Field(ge=0)
    reason: str
    last_weight_kg: float = Field(ge=0)


class SetDraft(BaseModel):
    weight_kg: float
    reps: Optional[int] = None
    rpe: float = 7
    success: bool = True


class ExerciseLogDraft(BaseModel):
    exercise: Exercise
    sets: list[SetDraft] = Field(default_factory=list)
    suggestion: Optional[OverloadSuggestion] = None
