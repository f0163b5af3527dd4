"""Domain-level exceptions.

Every error raised by the factories or value objects is a subclass of
CarFactoryError so the CLI layer can catch them uniformly and display
user-friendly messages.
"""


class CarFactoryError(Exception):
    """Base class for all domain errors."""


class ValidationError(CarFactoryError):
    """A value object invariant was violated."""


class UnknownVariantError(CarFactoryError):
    """A selector key is outside its closed set of variants."""
