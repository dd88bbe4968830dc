class PoroFluidsError(Exception):
    """Base class for all porefluids errors."""

    pass


class ValidationError(PoroFluidsError, ValueError):
    """Raised when input data fails validation checks."""

    pass


class PreconditionViolation(ValidationError):
    """
    Raised when an argument lies outside the admissible range of a relation.

    E.g. a saturation outside [0, 1], a negative capillary pressure or a
    non-positive Brooks-Corey parameter.
    """

    pass


class DomainError(PoroFluidsError, ValueError):
    """Raised for an undefined phase/component index or an undefined binary pair."""

    pass


class UnsupportedPropertyError(PoroFluidsError, NotImplementedError):
    """Raised when a component provider does not implement a requested property."""

    pass


class ComputationError(PoroFluidsError):
    """Raised when there is an error during property evaluation."""

    pass
