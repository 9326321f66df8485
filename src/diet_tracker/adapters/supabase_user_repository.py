"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from diet_tracker.adapters.supabase_meal_repository import meal_to_row, parse_meal
from diet_tracker.adapters.supabase_product_repository import NIL_ID
from diet_tracker.domain.models import (
    Activity,
    DailyTargets,
    Sex,
    UserProfile,
    UserRecord,
)
from diet_tracker.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user by id, if present."""
        return self._get_one("id", str(user_id))

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user registered with an email, if present."""
        return self._get_one("email", email)

    def save_user(self, user: UserRecord) -> UserRecord:
        """Insert or update a user row and return it."""
        response = self.client.table("users").upsert(_user_to_row(user)).execute()
        if not response.data:
            raise RuntimeError("Failed to save user in Supabase")
        return _parse_user(response.data[0])

    def delete_all_users(self) -> None:
        """Delete every user row."""
        self.client.table("users").delete().neq("id", NIL_ID).execute()

    def _get_one(self, column: str, value: str) -> UserRecord | None:
        response = (
            self.client.table("users")
            .select("*")
            .eq(column, value)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None


def _user_to_row(user: UserRecord) -> dict[str, object]:
    profile = user.profile
    targets = user.targets
    return {
        "id": str(user.id),
        "email": user.email,
        "username": user.username,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "picture_url": user.picture_url,
        "sex": profile.sex.value if profile.sex else None,
        "activity": profile.activity.value if profile.activity else None,
        "age": profile.age,
        "height": profile.height,
        "weight": profile.weight,
        "calories_per_day": targets.calories_per_day,
        "protein_per_day": targets.protein_per_day,
        "carbohydrate_per_day": targets.carbohydrate_per_day,
        "fat_per_day": targets.fat_per_day,
        "favourite_meals": [meal_to_row(meal) for meal in user.favourite_meals],
        "created_at": user.created_at.isoformat() if user.created_at else None,
    }


def _parse_user(row: dict[str, object]) -> UserRecord:
    """Parse a user row into a domain model."""
    sex_raw = row.get("sex")
    activity_raw = row.get("activity")
    created_raw = row.get("created_at")
    return UserRecord(
        id=UUID(str(row["id"])),
        email=str(row.get("email", "")),
        username=str(row.get("username", "")),
        first_name=str(row.get("first_name") or ""),
        last_name=str(row.get("last_name") or ""),
        picture_url=row.get("picture_url"),
        profile=UserProfile(
            sex=Sex(sex_raw) if sex_raw else None,
            activity=Activity(activity_raw) if activity_raw else None,
            age=int(row.get("age") or 0),
            height=int(row.get("height") or 0),
            weight=int(row.get("weight") or 0),
        ),
        targets=DailyTargets(
            calories_per_day=int(row.get("calories_per_day") or 0),
            protein_per_day=int(row.get("protein_per_day") or 0),
            carbohydrate_per_day=int(row.get("carbohydrate_per_day") or 0),
            fat_per_day=int(row.get("fat_per_day") or 0),
        ),
        favourite_meals=tuple(
            parse_meal(item) for item in row.get("favourite_meals") or []
        ),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
    )
