"""Star catalogue with its asterisms."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import BinaryIO, Protocol

import numpy as np

from planisphere.astronomy.objects import Star
from planisphere.errors import CatalogueConsistencyError, InvariantViolation

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Asterism:
    """Ordered group of catalogue stars. Asterisms compare by identity."""

    stars: tuple[Star, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "stars", tuple(self.stars))
        if not self.stars:
            raise InvariantViolation("an asterism needs at least one star")

    def __len__(self) -> int:
        return len(self.stars)


class Loader(Protocol):
    """Reads catalogue data from a binary stream into a builder.

    Loaders do not close the stream. I/O errors propagate unchanged.
    """

    def load(self, stream: BinaryIO, builder: "StarCatalogue.Builder") -> None: ...


class StarCatalogue:
    """Immutable list of stars plus asterisms indexing into it."""

    def __init__(self, stars: Iterable[Star], asterisms: Iterable[Asterism]) -> None:
        self._stars: tuple[Star, ...] = tuple(stars)
        index_of = {star: i for i, star in enumerate(self._stars)}

        asterism_indices: dict[Asterism, tuple[int, ...]] = {}
        for asterism in asterisms:
            indices = []
            for star in asterism.stars:
                i = index_of.get(star)
                if i is None:
                    raise CatalogueConsistencyError(
                        f"asterism star {star.name!r} (HIP {star.hipparcos_id}) "
                        "is not in the catalogue"
                    )
                indices.append(i)
            asterism_indices[asterism] = tuple(indices)
        self._asterism_indices = MappingProxyType(asterism_indices)

        ra = np.fromiter((s.equatorial_pos.ra for s in self._stars), float, len(self._stars))
        dec = np.fromiter((s.equatorial_pos.dec for s in self._stars), float, len(self._stars))
        ra.flags.writeable = False
        dec.flags.writeable = False
        self.ra = ra
        self.dec = dec
        logger.debug(
            "catalogue built: %d stars, %d asterisms",
            len(self._stars),
            len(self._asterism_indices),
        )

    def stars(self) -> tuple[Star, ...]:
        return self._stars

    def asterisms(self) -> tuple[Asterism, ...]:
        return tuple(self._asterism_indices)

    def asterism_indices(self, asterism: Asterism) -> tuple[int, ...]:
        """Positions in stars() of the stars of asterism, in asterism order.

        Raises:
            InvariantViolation: If the asterism is not part of the catalogue.
        """
        try:
            return self._asterism_indices[asterism]
        except KeyError:
            raise InvariantViolation("asterism is not part of the catalogue") from None

    class Builder:
        """Mutable staging area fed by loaders.

        build() hands the staged stars and asterisms over to the new catalogue
        and leaves the builder empty.
        """

        def __init__(self) -> None:
            self._stars: list[Star] = []
            self._asterisms: list[Asterism] = []

        def add_star(self, star: Star) -> "StarCatalogue.Builder":
            self._stars.append(star)
            return self

        def add_asterism(self, asterism: Asterism) -> "StarCatalogue.Builder":
            self._asterisms.append(asterism)
            return self

        def stars(self) -> Sequence[Star]:
            return tuple(self._stars)

        def asterisms(self) -> Sequence[Asterism]:
            return tuple(self._asterisms)

        def load_from(self, stream: BinaryIO, loader: Loader) -> "StarCatalogue.Builder":
            loader.load(stream, self)
            return self

        def build(self) -> "StarCatalogue":
            catalogue = StarCatalogue(self._stars, self._asterisms)
            self._stars, self._asterisms = [], []
            return catalogue
