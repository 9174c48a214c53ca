from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError


class SettingsSchema(BaseModel):
    weight_unit: Literal["kg", "lb"] = "kg"
    default_split: str = "Upper/Lower"
    history_sessions: int = Field(3, ge=1)
    starting_weight_kg: float = Field(20.0, ge=0)
    plate_increment_kg: float = Field(2.5, gt=0)
    default_rpe: float = Field(7.0, ge=1, le=10)
    api_key: Optional[str] = None


def validate_settings(data: dict) -> SettingsSchema:
    try:
        return SettingsSchema(**data)
    except ValidationError as e:
        raise ValueError(str(e))
