"""Pydantic request and response models for the HTTP API."""

from datetime import date, datetime
from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from diet_tracker.domain.carts import CartReport
from diet_tracker.domain.meals import ProductLine
from diet_tracker.domain.models import Activity, Sex
from diet_tracker.services.meals import MealDraft
from diet_tracker.services.products import MAX_KCAL, MAX_MACRO_GRAMS, ProductDraft
from diet_tracker.services.users import UserDraft, UserUpdate

T = TypeVar("T")


class ApiModel(BaseModel):
    """Base model that can be built from domain dataclasses."""

    model_config = ConfigDict(from_attributes=True)


class ProductIn(BaseModel):
    """Payload for creating or updating a product, per 100 g."""

    name: str = Field(min_length=1)
    description: str = ""
    protein: float = Field(ge=0, le=MAX_MACRO_GRAMS)
    carbohydrate: float = Field(ge=0, le=MAX_MACRO_GRAMS)
    fat: float = Field(ge=0, le=MAX_MACRO_GRAMS)
    fibre: float = Field(ge=0, le=MAX_MACRO_GRAMS)
    kcal: float = Field(ge=0, le=MAX_KCAL)
    image_url: str | None = None

    def to_draft(self) -> ProductDraft:
        return ProductDraft(**self.model_dump())


class ProductLineIn(BaseModel):
    """A product and the amount of it in grams."""

    product_id: UUID
    amount: float = Field(gt=0)

    def to_line(self) -> ProductLine:
        return ProductLine(product_id=self.product_id, amount=self.amount)


class MealIn(BaseModel):
    """Payload for creating or updating a meal."""

    name: str = Field(min_length=1)
    description: str = ""
    recipe: str = ""
    products: list[ProductLineIn] = Field(default_factory=list)
    image_url: str | None = None

    def to_draft(self) -> MealDraft:
        return MealDraft(
            name=self.name,
            description=self.description,
            recipe=self.recipe,
            lines=[line.to_line() for line in self.products],
            image_url=self.image_url,
        )


class UserIn(BaseModel):
    """Payload for registering a user."""

    email: EmailStr
    username: str = Field(min_length=1)
    first_name: str = ""
    last_name: str = ""
    picture_url: str | None = None

    def to_draft(self) -> UserDraft:
        return UserDraft(**self.model_dump())


class UserUpdateIn(BaseModel):
    """Payload for updating a user's profile."""

    username: str = Field(min_length=1)
    first_name: str = ""
    last_name: str = ""
    sex: Sex | None = None
    activity: Activity | None = None
    age: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)
    weight: int = Field(default=0, ge=0)
    picture_url: str | None = None

    def to_update(self) -> UserUpdate:
        return UserUpdate(**self.model_dump())


class NutrientsOut(ApiModel):
    protein: float
    carbohydrate: float
    fat: float
    fibre: float
    kcal: float
    carbohydrate_exchange: float
    protein_and_fat_equivalent: float


class ProductOut(ApiModel):
    id: UUID
    user_id: UUID | None
    name: str
    description: str
    image_url: str | None
    amount: float
    nutrients: NutrientsOut


class MealOut(ApiModel):
    id: UUID
    user_id: UUID | None
    name: str
    description: str
    recipe: str
    image_url: str | None
    amount: float
    nutrients: NutrientsOut
    products: list[ProductOut]


class ProfileOut(ApiModel):
    sex: Sex | None
    activity: Activity | None
    age: int
    height: int
    weight: int


class TargetsOut(ApiModel):
    calories_per_day: int
    protein_per_day: int
    carbohydrate_per_day: int
    fat_per_day: int


class UserOut(ApiModel):
    id: UUID
    email: str
    username: str
    first_name: str
    last_name: str
    picture_url: str | None
    profile: ProfileOut
    targets: TargetsOut
    created_at: datetime | None


class FavouriteOut(BaseModel):
    meal_id: UUID
    is_favourite: bool


class PageOut(ApiModel, Generic[T]):
    """A page of results with navigation metadata."""

    content: list[T]
    page_number: int
    page_size: int
    total_elements: int
    total_pages: int
    is_first: bool
    is_last: bool


class MacroProgressOut(ApiModel):
    consumed: float
    target: float
    remaining: float


class TargetProgressOut(ApiModel):
    calories: MacroProgressOut
    protein: MacroProgressOut
    carbohydrate: MacroProgressOut
    fat: MacroProgressOut


class CartOut(BaseModel):
    """A daily cart with totals derived from its entries."""

    id: UUID
    user_id: UUID
    day: date
    meals: list[MealOut]
    products: list[ProductOut]
    item_counter: int
    nutrients: NutrientsOut
    all_products: list[ProductOut]
    progress: TargetProgressOut

    @classmethod
    def from_report(cls, report: CartReport) -> "CartOut":
        cart = report.cart
        return cls(
            id=cart.id,
            user_id=cart.user_id,
            day=cart.day,
            meals=[MealOut.model_validate(meal) for meal in cart.meals],
            products=[ProductOut.model_validate(item) for item in cart.products],
            item_counter=report.summary.item_counter,
            nutrients=NutrientsOut.model_validate(report.summary.nutrients),
            all_products=[
                ProductOut.model_validate(item) for item in report.summary.all_products
            ],
            progress=TargetProgressOut.model_validate(report.progress),
        )
