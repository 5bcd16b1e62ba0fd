"""Entry-point layer: observer resolution, catalogue loading, sky computation."""

import logging
from datetime import datetime
from pathlib import Path

from pytz import timezone, utc
from pytz.exceptions import InvalidTimeError
from timezonefinder import TimezoneFinder

from planisphere.astronomy.catalogue import StarCatalogue
from planisphere.astronomy.loaders import AsterismLoader, HygDatabaseLoader
from planisphere.astronomy.observed_sky import ObservedSky
from planisphere.config import Settings
from planisphere.coordinates.projection import StereographicProjection
from planisphere.coordinates.spherical import (
    GeographicCoordinates,
    HorizontalCoordinates,
)
from planisphere.errors import ObserverResolutionError
from planisphere.models import ObserverContext, QueryInput

logger = logging.getLogger(__name__)

_tf = TimezoneFinder()


def resolve_observer(query: QueryInput) -> ObserverContext:
    """Turn a site and a local time string into an ObserverContext.

    Args:
        query: Latitude/longitude in degrees and local time "YYYY-MM-DD HH:MM".

    Returns:
        ObserverContext with the instant converted to UTC.

    Raises:
        ObserverResolutionError: If the site is out of range, the time string is
            malformed, no timezone covers the site, or the local time does not
            exist or is ambiguous there.
    """
    if not (
        GeographicCoordinates.is_valid_lat_deg(query.lat)
        and GeographicCoordinates.is_valid_lon_deg(query.lng)
    ):
        raise ObserverResolutionError(
            f"Invalid site: lat={query.lat}, lng={query.lng}"
        )
    try:
        dt = datetime.strptime(query.when, "%Y-%m-%d %H:%M")
    except ValueError as e:
        raise ObserverResolutionError(f"Invalid time: {query.when!r}") from e

    tz_str = _tf.timezone_at(lat=query.lat, lng=query.lng)
    if tz_str is None:
        raise ObserverResolutionError(
            f"Timezone not found: lat={query.lat}, lng={query.lng}"
        )
    local_tz = timezone(tz_str)
    try:
        utc_dt = local_tz.localize(dt, is_dst=None).astimezone(utc)
    except InvalidTimeError as e:
        raise ObserverResolutionError(f"{query.when} is not a valid time in {tz_str}") from e

    return ObserverContext(lat=query.lat, lng=query.lng, utc_dt=utc_dt, tz_name=tz_str)


def load_catalogue(stars_path: Path, asterisms_path: Path) -> StarCatalogue:
    """Build a catalogue from a HYG CSV file and an asterism file."""
    builder = StarCatalogue.Builder()
    with stars_path.open("rb") as f:
        builder.load_from(f, HygDatabaseLoader())
    with asterisms_path.open("rb") as f:
        builder.load_from(f, AsterismLoader())
    logger.info("catalogue loaded from %s and %s", stars_path, asterisms_path)
    return builder.build()


def compute_observed_sky(
    context: ObserverContext,
    catalogue: StarCatalogue,
    center_az_deg: float = 180.0,
    center_alt_deg: float = 15.0,
) -> ObservedSky:
    """Project the sky of context onto a plane centred on the given direction.

    Args:
        context: Resolved observer.
        catalogue: Stars and asterisms.
        center_az_deg: Azimuth of the projection centre in degrees.
        center_alt_deg: Altitude of the projection centre in degrees.

    Returns:
        ObservedSky for the observer's instant and site.
    """
    where = GeographicCoordinates.of_deg(context.lng, context.lat)
    center = HorizontalCoordinates.of_deg(center_az_deg, center_alt_deg)
    logger.debug("observed sky at %s from %s, centre %s", context.utc_dt, where, center)
    return ObservedSky(context.utc_dt, where, StereographicProjection(center), catalogue)


def run(query: QueryInput, settings: Settings) -> ObservedSky:
    """Top-level entry point: takes a QueryInput and returns an ObservedSky.

    Args:
        query: User input (site, local time string).
        settings: Catalogue paths and projection centre.

    Returns:
        Fully computed ObservedSky.
    """
    context = resolve_observer(query)
    catalogue = load_catalogue(settings.stars_path, settings.asterisms_path)
    return compute_observed_sky(
        context, catalogue, settings.center_az_deg, settings.center_alt_deg
    )
