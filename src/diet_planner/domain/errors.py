"""Domain errors raised by the planning engine."""


class PlannerError(Exception):
    """Base class for diet planner errors."""


class InvalidShareSumError(PlannerError):
    """Raised when percentage shares do not total 100."""


class DivisionByZeroError(PlannerError):
    """Raised when a non-zero share is assigned to a meal class with no meals."""


class InvalidMealCountError(PlannerError):
    """Raised when a meal count is negative."""


class MealNotFoundError(PlannerError):
    """Raised when a meal id is not present in the meal target sequence."""

    def __init__(self, meal_id: str) -> None:
        super().__init__(f"Meal not found: {meal_id}")
        self.meal_id = meal_id


class UnsupportedSexError(PlannerError):
    """Raised when a sex category has no BMR formula."""


class WizardStepError(PlannerError):
    """Raised when the wizard cannot move to the requested step."""


class SessionNotFoundError(PlannerError):
    """Raised when a wizard session does not exist."""


class InvalidProfileError(PlannerError):
    """Raised when a patient profile has non-positive measurements."""
