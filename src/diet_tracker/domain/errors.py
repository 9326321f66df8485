"""Domain errors raised by the diet tracker core and services."""


class DietTrackerError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DietTrackerError):
    """Raised when a referenced product, meal, user or cart does not exist."""


class ValidationError(DietTrackerError):
    """Raised when an amount or nutrient input is invalid."""


class OwnershipViolation(DietTrackerError):
    """Raised when the caller does not own the entity being mutated."""
