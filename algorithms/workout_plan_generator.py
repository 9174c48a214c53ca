import logging

from models import (
    Exercise,
    ExerciseTemplate,
    ScheduledWorkout,
    SplitType,
    WorkoutDay,
    WorkoutProgram,
    WorkoutTemplate,
)
from .math_tools import MathTools

logger = logging.getLogger("coach_core.workouts")


def _template(focus: str, rows: list[tuple[str, int, str, str]]) -> WorkoutTemplate:
    return WorkoutTemplate(
        focus=focus,
        exercises=tuple(
            ExerciseTemplate(name=name, sets=sets, reps=reps, notes=notes, order_index=i)
            for i, (name, sets, reps, notes) in enumerate(rows)
        ),
    )


PUSH_WORKOUT = _template(
    "Push",
    [
        ("Barbell Bench Press", 4, "8-10", "Compound movement"),
        ("Incline Dumbbell Press", 3, "10-12", "Upper chest focus"),
        ("Overhead Press", 4, "8-10", "Shoulder compound"),
        ("Lateral Raises", 3, "12-15", "Side delts"),
        ("Tricep Dips", 3, "10-12", "Bodyweight or weighted"),
        ("Tricep Pushdowns", 3, "12-15", "Cable isolation"),
    ],
)

PULL_WORKOUT = _template(
    "Pull",
    [
        ("Pull-ups", 4, "8-10", "Assisted if needed"),
        ("Barbell Rows", 4, "8-10", "Back thickness"),
        ("Lat Pulldowns", 3, "10-12", "Back width"),
        ("Face Pulls", 3, "15-20", "Rear delts"),
        ("Barbell Curls", 3, "10-12", "Bicep mass"),
        ("Hammer Curls", 3, "12-15", "Brachialis focus"),
    ],
)

LEGS_WORKOUT = _template(
    "Legs",
    [
        ("Barbell Squat", 4, "8-10", "King of exercises"),
        ("Romanian Deadlift", 4, "8-10", "Hamstring focus"),
        ("Leg Press", 3, "12-15", "Quad volume"),
        ("Walking Lunges", 3, "12 each", "Unilateral work"),
        ("Leg Curls", 3, "12-15", "Hamstring isolation"),
        ("Calf Raises", 4, "15-20", "Standing or seated"),
    ],
)

UPPER_WORKOUT = _template(
    "Upper Body",
    [
        ("Bench Press", 4, "8-10", "Chest compound"),
        ("Barbell Rows", 4, "8-10", "Back compound"),
        ("Overhead Press", 3, "8-10", "Shoulders"),
        ("Pull-ups", 3, "8-10", "Back width"),
        ("Dumbbell Curls", 3, "10-12", "Biceps"),
        ("Tricep Extensions", 3, "10-12", "Triceps"),
    ],
)

LOWER_WORKOUT = _template(
    "Lower Body",
    [
        ("Squat", 4, "8-10", "Quad focus"),
        ("Deadlift", 4, "6-8", "Posterior chain"),
        ("Leg Press", 3, "12-15", "Volume work"),
        ("Leg Curls", 3, "12-15", "Hamstrings"),
        ("Leg Extensions", 3, "12-15", "Quad isolation"),
        ("Calf Raises", 4, "15-20", "Calves"),
    ],
)

FULL_BODY_WORKOUT = _template(
    "Full Body",
    [
        ("Squat", 3, "8-10", "Lower body compound"),
        ("Bench Press", 3, "8-10", "Upper body push"),
        ("Barbell Rows", 3, "8-10", "Upper body pull"),
        ("Overhead Press", 3, "8-10", "Shoulders"),
        ("Romanian Deadlift", 3, "10-12", "Hamstrings"),
        ("Pull-ups", 3, "8-10", "Back"),
    ],
)

WORKOUT_TEMPLATES: dict[str, WorkoutTemplate] = {
    t.focus: t
    for t in (
        PUSH_WORKOUT,
        PULL_WORKOUT,
        LEGS_WORKOUT,
        UPPER_WORKOUT,
        LOWER_WORKOUT,
        FULL_BODY_WORKOUT,
    )
}


class WorkoutPlanGenerator:
    """Build a four week training calendar from a split archetype."""

    WEEKS: int = 4
    DAYS_PER_WEEK: int = 7
    FULL_BODY_MAX: int = 4

    @classmethod
    def training_days(cls, weekly_training_days: int) -> int:
        """Clamp a weekly day count into [0, 7]."""
        days = int(MathTools.clamp(weekly_training_days, 0, cls.DAYS_PER_WEEK))
        if days != weekly_training_days:
            logger.warning(
                "weekly training days %s out of range, using %d",
                weekly_training_days,
                days,
            )
        return days

    @classmethod
    def templates(
        cls, split_type: SplitType | str | None, weekly_training_days: int
    ) -> list[WorkoutTemplate]:
        days = cls.training_days(weekly_training_days)
        split = SplitType.parse(split_type)
        if split is SplitType.PUSH_PULL_LEGS:
            cycle = [PUSH_WORKOUT, PULL_WORKOUT, LEGS_WORKOUT]
            return cycle * 2 if days >= 6 else cycle
        if split is SplitType.UPPER_LOWER:
            pair = [UPPER_WORKOUT, LOWER_WORKOUT]
            return pair * 2 if days >= 4 else pair
        if split is SplitType.FULL_BODY:
            return [FULL_BODY_WORKOUT] * min(days, cls.FULL_BODY_MAX)
        logger.warning("unknown split type %r, no workouts generated", split_type)
        return []

    @classmethod
    def schedule(
        cls, templates: list[WorkoutTemplate], weekly_training_days: int
    ) -> list[ScheduledWorkout]:
        days = cls.training_days(weekly_training_days)
        if not templates or days == 0:
            return []
        schedule: list[ScheduledWorkout] = []
        cursor = 0
        for week in range(1, cls.WEEKS + 1):
            placed = 0
            for day in range(1, cls.DAYS_PER_WEEK + 1):
                if placed >= days:
                    break
                schedule.append(
                    ScheduledWorkout(
                        day_number=(week - 1) * cls.DAYS_PER_WEEK + day,
                        week_number=week,
                        template=templates[cursor % len(templates)],
                    )
                )
                cursor += 1
                placed += 1
        return schedule

    @staticmethod
    def materialize(item: ScheduledWorkout) -> WorkoutDay:
        exercises = sorted(item.template.exercises, key=lambda e: e.order_index)
        return WorkoutDay(
            day_number=item.day_number,
            week_number=item.week_number,
            focus=item.template.focus,
            exercises=[Exercise(**e.model_dump()) for e in exercises],
        )


def generate_workout_templates(
    split_type: SplitType | str | None, weekly_training_days: int
) -> list[WorkoutTemplate]:
    """Return the ordered template rotation for a split."""
    return WorkoutPlanGenerator.templates(split_type, weekly_training_days)


def schedule_workouts(
    templates: list[WorkoutTemplate], weekly_training_days: int
) -> list[ScheduledWorkout]:
    """Place templates round-robin on the first training days of each week."""
    return WorkoutPlanGenerator.schedule(templates, weekly_training_days)


def build_workout_program(
    split_type: SplitType | str,
    weekly_training_days: int,
    client_id: str | None = None,
) -> WorkoutProgram:
    templates = generate_workout_templates(split_type, weekly_training_days)
    schedule = schedule_workouts(templates, weekly_training_days)
    label = split_type.value if isinstance(split_type, SplitType) else str(split_type)
    program = WorkoutProgram(
        client_id=client_id,
        split_type=label,
        days=[WorkoutPlanGenerator.materialize(item) for item in schedule],
    )
    logger.info("workout program built: %s, %d days", label, len(program.days))
    return program
