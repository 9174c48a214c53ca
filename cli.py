import argparse
import json
import logging

from algorithms import WeightConverter, estimate_next_weight
from config import load_settings
from models import ClientProfile, SessionSet
from planner_service import PlannerService


def _read_json(path: str):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, default=str))


def macros(profile_path: str, yaml_path: str) -> dict:
    planner = PlannerService(load_settings(yaml_path))
    profile = ClientProfile(**_read_json(profile_path))
    return planner.macro_targets(profile).model_dump()


def meal_plan(profile_path: str, yaml_path: str, out: str | None = None) -> dict:
    planner = PlannerService(load_settings(yaml_path))
    profile = ClientProfile(**_read_json(profile_path))
    plan = planner.create_meal_plan(profile).model_dump(mode="json")
    if out:
        with open(out, "w", encoding="utf-8") as f:
            json.dump(plan, f, indent=2)
    return plan


def program(
    profile_path: str, yaml_path: str, split: str | None = None, out: str | None = None
) -> dict:
    planner = PlannerService(load_settings(yaml_path))
    profile = ClientProfile(**_read_json(profile_path))
    data = planner.create_workout_program(profile, split).model_dump(mode="json")
    if out:
        with open(out, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
    return data


def suggest(exercise: str, sessions_path: str | None) -> dict:
    """Suggest a weight from a JSON list of sessions (each a list of sets)."""
    raw = _read_json(sessions_path) if sessions_path else []
    sessions = [
        [SessionSet(**{"exercise_name": exercise, **s}) for s in session]
        for session in raw
    ]
    return estimate_next_weight(exercise, sessions).model_dump()


def main() -> None:
    parser = argparse.ArgumentParser(description="Coaching program tools")
    parser.add_argument("--yaml", default="settings.yaml")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="cmd", required=True)

    mac = sub.add_parser("macros")
    mac.add_argument("--profile", required=True)

    meals = sub.add_parser("meal-plan")
    meals.add_argument("--profile", required=True)
    meals.add_argument("--out")

    prog = sub.add_parser("program")
    prog.add_argument("--profile", required=True)
    prog.add_argument("--split", choices=["Push/Pull/Legs", "Upper/Lower", "Full Body"])
    prog.add_argument("--out")

    sug = sub.add_parser("suggest")
    sug.add_argument("--exercise", required=True)
    sug.add_argument("--sessions")

    conv = sub.add_parser("convert")
    conv.add_argument("--weight", type=float, required=True)
    conv.add_argument("--unit", choices=["kg", "lb"], required=True)

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "macros":
        _print_json(macros(args.profile, args.yaml))
    elif args.cmd == "meal-plan":
        plan = meal_plan(args.profile, args.yaml, args.out)
        if not args.out:
            _print_json(plan)
    elif args.cmd == "program":
        data = program(args.profile, args.yaml, args.split, args.out)
        if not args.out:
            _print_json(data)
    elif args.cmd == "suggest":
        result = suggest(args.exercise, args.sessions)
        unit = load_settings(args.yaml).weight_unit
        result["display_weight"] = WeightConverter.from_kg(result["suggested_weight_kg"], unit)
        result["unit"] = unit
        _print_json(result)
    elif args.cmd == "convert":
        if args.unit == "kg":
            print(f"{args.weight} kg = {WeightConverter.kg_to_lb(args.weight)} lb")
        else:
            print(f"{args.weight} lb = {WeightConverter.lb_to_kg(args.weight)} kg")


if __name__ == "__main__":
    main()
