import re
from datetime import datetime, timezone
from pydantic import BaseModel, Field, field_validator

UUID4_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)


def _validate_uuid4(v: str) -> str:
    if not UUID4_RE.match(v.lower()):
        raise ValueError("must be a valid UUID v4")
    return v.lower()


class ProfileCreate(BaseModel):
    id: str
    name: str = Field(min_length=1, max_length=50)
    model_config = {"extra": "ignore"}

    @field_validator("id")
    @classmethod
    def validate_id(cls, v):
        return _validate_uuid4(v)


class ProfileCreateRequest(BaseModel):
    profile: ProfileCreate


class ExerciseLogCreate(BaseModel):
    user_id: str
    # Omitted by clients logging "right now"
    exercise_date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    model_config = {"extra": "ignore"}

    @field_validator("user_id")
    @classmethod
    def validate_user_id(cls, v):
        return _validate_uuid4(v)


class ExerciseLogCreateRequest(BaseModel):
    exercise_log: ExerciseLogCreate


class UserProfileResponse(BaseModel):
    name: str
    total_exercise_day_count: int
    current_exercise_day_streak: int
