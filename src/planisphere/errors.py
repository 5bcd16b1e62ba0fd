"""Exceptions raised by the planisphere core and the argument checks that raise them."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from planisphere.numeric.interval import Interval


class InvariantViolation(ValueError):
    """A value object was constructed with arguments outside its domain."""


class CatalogueConsistencyError(InvariantViolation):
    """An asterism refers to a star the catalogue does not contain."""


class ObserverResolutionError(Exception):
    """Observer time or location could not be resolved."""


def check_argument(condition: bool, message: str = "invalid argument") -> None:
    """Raise InvariantViolation unless condition holds."""
    if not condition:
        raise InvariantViolation(message)


def check_in_interval(interval: "Interval", value: float, what: str = "value") -> float:
    """Return value unchanged if the interval contains it.

    Raises:
        InvariantViolation: If value lies outside the interval.
    """
    if not interval.contains(value):
        raise InvariantViolation(f"{what} {value!r} not in {interval}")
    return value
