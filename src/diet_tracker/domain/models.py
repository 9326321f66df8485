"""Domain models for users and their daily targets."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID

from diet_tracker.domain.meals import Meal


class Sex(str, Enum):
    """Biological sex used by the BMR formula."""

    MALE = "male"
    FEMALE = "female"


class Activity(str, Enum):
    """Physical activity level applied on top of BMR."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


@dataclass(frozen=True)
class UserProfile:
    """Biometric inputs for daily targets."""

    sex: Sex | None = None
    activity: Activity | None = None
    age: int = 0
    height: int = 0
    weight: int = 0


@dataclass(frozen=True)
class DailyTargets:
    """Daily calorie and macronutrient targets in kcal and grams."""

    calories_per_day: int = 0
    protein_per_day: int = 0
    carbohydrate_per_day: int = 0
    fat_per_day: int = 0


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    email: str
    username: str
    first_name: str
    last_name: str
    picture_url: str | None = None
    profile: UserProfile = field(default_factory=UserProfile)
    targets: DailyTargets = field(default_factory=DailyTargets)
    favourite_meals: tuple[Meal, ...] = field(default=())
    created_at: datetime | None = None
