from datetime import datetime
from pathlib import Path

import pytest
from pytz import utc

from planisphere.astronomy.catalogue import StarCatalogue
from planisphere.astronomy.loaders import AsterismLoader, HygDatabaseLoader

RESOURCES = Path(__file__).parent.parent / "resources"
HYG_SAMPLE = RESOURCES / "hyg_sample.csv"
ASTERISMS = RESOURCES / "asterisms.txt"


def utc_dt(*args: int) -> datetime:
    return datetime(*args, tzinfo=utc)


@pytest.fixture(scope="session")
def catalogue() -> StarCatalogue:
    builder = StarCatalogue.Builder()
    with HYG_SAMPLE.open("rb") as f:
        builder.load_from(f, HygDatabaseLoader())
    with ASTERISMS.open("rb") as f:
        builder.load_from(f, AsterismLoader())
    return builder.build()


@pytest.fixture
def star_by_name(catalogue):
    def find(name: str):
        return next(s for s in catalogue.stars() if s.name.lower() == name.lower())

    return find
