"""
Error taxonomy for the calculation engine.

Every precondition violation is raised synchronously and propagates to the
caller unmodified. Routers translate these into HTTP status codes.
"""


class CalculationError(ValueError):
    """Base class for all calculation failures."""


class InvalidDimensionError(CalculationError):
    """A geometric input is zero, negative, NaN, or missing."""


class InvalidInputError(CalculationError):
    """A costing input (area, coats, coverage) violates its precondition."""


class UnsupportedCategoryError(CalculationError):
    """Surface category or surface type outside wall/ceiling/door/linear."""


class LookupNotFoundError(LookupError):
    """Reference data row missing or inactive.

    Raised by the reference-data service, never by the pure calculators.
    """
