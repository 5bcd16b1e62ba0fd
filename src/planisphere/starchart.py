"""CLI entry point: print the observed sky for a site and local time.

    planisphere --lat 46.52 --lon 6.57 --when "2020-02-17 20:15" --x 0.1 --y 0.2
"""

import argparse
import logging
import sys

from planisphere.astronomy.objects import CelestialObjectType
from planisphere.astronomy.observed_sky import ObservedSky
from planisphere.compute import run
from planisphere.config import Settings, load_settings
from planisphere.coordinates.spherical import CartesianCoordinates
from planisphere.errors import ObserverResolutionError
from planisphere.models import QueryInput

logger = logging.getLogger(__name__)


def _parse_args(settings: Settings, argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="planisphere", description="Positions of the Sun, Moon, planets and stars."
    )
    parser.add_argument("--when", required=True, help='local time, "YYYY-MM-DD HH:MM"')
    parser.add_argument("--lat", type=float, default=settings.observer_lat_deg)
    parser.add_argument("--lon", type=float, default=settings.observer_lon_deg)
    parser.add_argument("--center-az", type=float, default=settings.center_az_deg)
    parser.add_argument("--center-alt", type=float, default=settings.center_alt_deg)
    parser.add_argument("--x", type=float, default=0.0, help="query point on the plane")
    parser.add_argument("--y", type=float, default=0.0)
    parser.add_argument("--max-distance", type=float, default=settings.max_distance)
    parser.add_argument(
        "--types",
        default=",".join(t.name.lower() for t in CelestialObjectType),
        help="comma-separated categories searched for the closest object",
    )
    return parser.parse_args(argv)


def _print_sky(sky: ObservedSky) -> None:
    print(f"{sky.sun().info():<10} {sky.sun_position()}  {sky.sun().equatorial_pos}")
    print(f"{sky.moon().info():<10} {sky.moon_position()}  {sky.moon().equatorial_pos}")
    positions = sky.planet_positions()
    for i, planet in enumerate(sky.planets()):
        print(
            f"{planet.info():<10} (x={positions[2 * i]:.4f}, y={positions[2 * i + 1]:.4f})"
            f"  {planet.equatorial_pos}  mag {planet.magnitude:.1f}"
        )
    print(f"{len(sky.stars())} stars, {len(sky.asterisms())} asterisms")


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    args = _parse_args(settings, argv)
    try:
        types = {CelestialObjectType[t.strip().upper()] for t in args.types.split(",")}
    except KeyError as e:
        logger.error("unknown object type %s", e)
        return 2

    try:
        sky = run(QueryInput(lat=args.lat, lng=args.lon, when=args.when), settings)
    except ObserverResolutionError as e:
        logger.error("%s", e)
        return 1

    _print_sky(sky)
    closest = sky.object_closest_to(
        CartesianCoordinates(args.x, args.y), args.max_distance, types
    )
    if closest is None:
        print(f"nothing within {args.max_distance} of ({args.x}, {args.y})")
    else:
        print(f"closest to ({args.x}, {args.y}): {closest.info()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
