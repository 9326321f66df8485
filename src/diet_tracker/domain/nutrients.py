"""Nutrient value object shared by products, meals and carts."""

from collections.abc import Iterable
from dataclasses import dataclass, fields
from decimal import ROUND_HALF_UP, Decimal

PRECISION = Decimal("0.01")


def round_value(value: float) -> float:
    """Round half-up to two decimal places."""
    return float(Decimal(str(value)).quantize(PRECISION, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class Nutrients:
    """Nutrient values expressed for a given physical amount.

    Protein, carbohydrate, fat and fibre are grams, kcal is energy. The two
    diabetes metrics are derived: one carbohydrate exchange is 10 g of
    digestible carbohydrate, one protein-and-fat equivalent is 100 kcal from
    protein and fat.
    """

    protein: float = 0.0
    carbohydrate: float = 0.0
    fat: float = 0.0
    fibre: float = 0.0
    kcal: float = 0.0
    carbohydrate_exchange: float = 0.0
    protein_and_fat_equivalent: float = 0.0

    @classmethod
    def zero(cls) -> "Nutrients":
        """Return nutrients with every field set to zero."""
        return cls()

    def __add__(self, other: "Nutrients") -> "Nutrients":
        if not isinstance(other, Nutrients):
            return NotImplemented
        return Nutrients(
            **{
                field.name: round_value(
                    getattr(self, field.name) + getattr(other, field.name)
                )
                for field in fields(self)
            }
        )

    def scaled(self, factor: float) -> "Nutrients":
        """Return nutrients multiplied by factor and rounded."""
        return Nutrients(
            **{
                field.name: round_value(getattr(self, field.name) * factor)
                for field in fields(self)
            }
        )

    def as_dict(self) -> dict[str, float]:
        """Return the nutrient fields as a plain dict."""
        return {field.name: getattr(self, field.name) for field in fields(self)}

    @classmethod
    def from_dict(cls, payload: dict[str, object]) -> "Nutrients":
        """Build nutrients from a mapping, treating missing keys as zero."""
        return cls(
            **{
                field.name: float(payload.get(field.name) or 0.0)
                for field in fields(cls)
            }
        )


def sum_nutrients(items: Iterable[Nutrients]) -> Nutrients:
    """Sum nutrient values component-wise."""
    total = Nutrients.zero()
    for item in items:
        total = total + item
    return total
