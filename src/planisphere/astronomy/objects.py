"""Celestial objects: stars, planets, the Sun and the Moon.

Objects are immutable snapshots produced by the position models (or loaded from
the star catalogue). Besides a name and an equatorial position, every object
carries a small bag of numeric attributes (magnitude, angular size, phase)
keyed by AttributeKind, holding only the attributes the object actually has.
"""

import math
from abc import ABC
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar, Protocol

from planisphere.coordinates.spherical import EclipticCoordinates, EquatorialCoordinates
from planisphere.errors import check_argument, check_in_interval
from planisphere.numeric.interval import ClosedInterval

if TYPE_CHECKING:
    from planisphere.coordinates.conversions import EclipticToEquatorialConversion

_PHASE_RANGE = ClosedInterval(0.0, 1.0)
_COLOR_INDEX_RANGE = ClosedInterval(-0.5, 5.5)


class CelestialObjectType(Enum):
    """Object categories, declared in nearest-object search order."""

    STAR = auto()
    SUN = auto()
    MOON = auto()
    PLANET = auto()


class CelestialObjectIdentifier(Enum):
    STAR = ("Star", CelestialObjectType.STAR)
    MERCURY = ("Mercury", CelestialObjectType.PLANET)
    VENUS = ("Venus", CelestialObjectType.PLANET)
    EARTH = ("Earth", CelestialObjectType.PLANET)
    MARS = ("Mars", CelestialObjectType.PLANET)
    JUPITER = ("Jupiter", CelestialObjectType.PLANET)
    SATURN = ("Saturn", CelestialObjectType.PLANET)
    URANUS = ("Uranus", CelestialObjectType.PLANET)
    NEPTUNE = ("Neptune", CelestialObjectType.PLANET)
    SUN = ("Sun", CelestialObjectType.SUN)
    MOON = ("Moon", CelestialObjectType.MOON)

    def __init__(self, label: str, object_type: CelestialObjectType) -> None:
        self.label = label
        self.object_type = object_type


class AttributeKind(Enum):
    """Numeric attribute kinds with their display label and decimal precision."""

    PHASE = ("Phase", 2)
    ANGULAR_SIZE = ("Angular size", 5)
    MAGNITUDE = ("Magnitude", 1)

    def __init__(self, label: str, precision: int) -> None:
        self.label = label
        self.precision = precision

    def check(self, value: float) -> float:
        if self is AttributeKind.PHASE:
            check_in_interval(_PHASE_RANGE, value, "phase")
        elif self is AttributeKind.ANGULAR_SIZE:
            check_argument(value >= 0, f"angular size must be non-negative, got {value}")
        return value

    def format(self, value: float) -> str:
        return f"{self.label}: {value:.{self.precision}f}"


@dataclass(frozen=True)
class FloatAttribute:
    """Validated numeric attribute together with its display text."""

    kind: AttributeKind
    value: float
    text: str = field(init=False)

    def __post_init__(self) -> None:
        self.kind.check(self.value)
        object.__setattr__(self, "text", self.kind.format(self.value))


class CelestialObject(ABC):
    """Base of every object variant.

    Variants define name, equatorial_pos, angular_size and magnitude either as
    dataclass fields or as class constants.
    """

    identifier: ClassVar[CelestialObjectIdentifier]
    name: str
    equatorial_pos: EquatorialCoordinates
    angular_size: float
    magnitude: float
    attributes: Mapping[AttributeKind, FloatAttribute]

    def _set_attributes(self, *attributes: FloatAttribute) -> None:
        object.__setattr__(
            self, "attributes", MappingProxyType({a.kind: a for a in attributes})
        )

    @property
    def object_type(self) -> CelestialObjectType:
        return self.identifier.object_type

    def attribute(self, kind: AttributeKind) -> FloatAttribute | None:
        return self.attributes.get(kind)

    def info(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.info()


@dataclass(frozen=True, eq=False)
class Star(CelestialObject):
    """Catalogue star. Stars compare by identity."""

    identifier: ClassVar[CelestialObjectIdentifier] = CelestialObjectIdentifier.STAR
    angular_size: ClassVar[float] = 0.0

    hipparcos_id: int
    name: str
    equatorial_pos: EquatorialCoordinates
    magnitude: float
    color_index: float

    def __post_init__(self) -> None:
        check_argument(
            self.hipparcos_id >= 0,
            f"hipparcos id must be non-negative, got {self.hipparcos_id}",
        )
        check_in_interval(_COLOR_INDEX_RANGE, self.color_index, "color index")
        self._set_attributes(FloatAttribute(AttributeKind.MAGNITUDE, self.magnitude))

    @property
    def color_temperature(self) -> int:
        """Approximate surface temperature in kelvins derived from the B-V index."""
        c = 0.92 * self.color_index
        return math.floor(4600 * (1 / (c + 1.7) + 1 / (c + 0.62)))


@dataclass(frozen=True, eq=False)
class Planet(CelestialObject):
    name: str
    identifier: CelestialObjectIdentifier  # type: ignore[misc]
    equatorial_pos: EquatorialCoordinates
    angular_size: float
    magnitude: float

    def __post_init__(self) -> None:
        check_argument(
            self.identifier.object_type is CelestialObjectType.PLANET,
            f"{self.identifier.name} is not a planet",
        )
        self._set_attributes(
            FloatAttribute(AttributeKind.ANGULAR_SIZE, self.angular_size),
            FloatAttribute(AttributeKind.MAGNITUDE, self.magnitude),
        )


@dataclass(frozen=True, eq=False)
class Sun(CelestialObject):
    identifier: ClassVar[CelestialObjectIdentifier] = CelestialObjectIdentifier.SUN
    name: ClassVar[str] = "Sun"
    magnitude: ClassVar[float] = -26.7

    ecliptic_pos: EclipticCoordinates
    equatorial_pos: EquatorialCoordinates
    angular_size: float
    mean_anomaly: float

    def __post_init__(self) -> None:
        self._set_attributes(
            FloatAttribute(AttributeKind.ANGULAR_SIZE, self.angular_size),
            FloatAttribute(AttributeKind.MAGNITUDE, self.magnitude),
        )


@dataclass(frozen=True, eq=False)
class Moon(CelestialObject):
    identifier: ClassVar[CelestialObjectIdentifier] = CelestialObjectIdentifier.MOON
    name: ClassVar[str] = "Moon"
    magnitude: ClassVar[float] = 0.0

    equatorial_pos: EquatorialCoordinates
    angular_size: float
    phase: float

    def __post_init__(self) -> None:
        self._set_attributes(
            FloatAttribute(AttributeKind.ANGULAR_SIZE, self.angular_size),
            FloatAttribute(AttributeKind.PHASE, self.phase),
        )

    def info(self) -> str:
        return f"{self.name} ({self.phase * 100:.1f}%)"


class CelestialObjectModel(Protocol):
    """Computes the state of one body at an instant."""

    def at(
        self,
        days_since_j2010: float,
        ecliptic_to_equatorial: "EclipticToEquatorialConversion",
    ) -> CelestialObject: ...
