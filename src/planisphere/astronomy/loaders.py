"""Catalogue loaders for the HYG star database and the asterism list."""

import logging
from enum import IntEnum
from typing import BinaryIO

import pandas as pd

from planisphere.astronomy.catalogue import Asterism, StarCatalogue
from planisphere.astronomy.objects import Star
from planisphere.coordinates.spherical import EquatorialCoordinates
from planisphere.errors import CatalogueConsistencyError

logger = logging.getLogger(__name__)


class HygColumn(IntEnum):
    """Positions of the HYG v3 columns the loader reads (37 columns in total)."""

    HIP = 1
    PROPER = 6
    MAG = 13
    CI = 16
    RARAD = 23
    DECRAD = 24
    BAYER = 27
    CON = 29


class HygDatabaseLoader:
    """Loads stars from a HYG database CSV export.

    Empty identifiers, magnitudes and color indices default to 0. A star
    without a proper name is named after its Bayer designation ("?" when
    unknown) and constellation, e.g. "Eta Ori".
    """

    def load(self, stream: BinaryIO, builder: StarCatalogue.Builder) -> None:
        try:
            frame = pd.read_csv(
                stream,
                header=0,
                usecols=[c.value for c in HygColumn],
                dtype=str,
                keep_default_na=False,
                na_filter=False,
            )
        except pd.errors.EmptyDataError:
            logger.info("loaded 0 stars from an empty stream")
            return
        # usecols keeps file order, which is the enum order
        frame.columns = [c.name for c in sorted(HygColumn)]

        for row in frame.itertuples(index=False):
            name = row.PROPER or f"{row.BAYER or '?'} {row.CON}"
            builder.add_star(
                Star(
                    hipparcos_id=_parse(row.HIP, int, 0),
                    name=name,
                    equatorial_pos=EquatorialCoordinates(
                        float(row.RARAD), float(row.DECRAD)
                    ),
                    magnitude=_parse(row.MAG, float, 0.0),
                    color_index=_parse(row.CI, float, 0.0),
                )
            )
        logger.info("loaded %d stars", len(frame))


class AsterismLoader:
    """Loads asterisms, one per line, as comma-separated hipparcos ids.

    The stars must already be in the builder.
    """

    def load(self, stream: BinaryIO, builder: StarCatalogue.Builder) -> None:
        by_id = {s.hipparcos_id: s for s in builder.stars() if s.hipparcos_id != 0}
        count = 0
        for line_no, raw in enumerate(stream, start=1):
            line = raw.decode("ascii").strip()
            if not line:
                continue
            stars = []
            for token in line.split(","):
                hip = int(token)
                star = by_id.get(hip)
                if star is None:
                    raise CatalogueConsistencyError(
                        f"line {line_no}: no star with hipparcos id {hip}"
                    )
                stars.append(star)
            builder.add_asterism(Asterism(tuple(stars)))
            count += 1
        logger.info("loaded %d asterisms", count)


def _parse(text: str, convert, default):
    if not text:
        return default
    return convert(text)
