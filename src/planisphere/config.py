"""Runtime settings read from the environment (and a .env file when present)."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_ROOT = Path(__file__).parent.parent.parent
_RESOURCES = _ROOT / "resources"


@dataclass(frozen=True)
class Settings:
    stars_path: Path
    asterisms_path: Path
    log_level: str
    observer_lat_deg: float
    observer_lon_deg: float
    center_az_deg: float
    center_alt_deg: float
    max_distance: float  # projection plane units


def _float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def load_settings() -> Settings:
    """Load settings from environment variables.

    Variables already set in the environment win over the .env file.

    Returns:
        Settings with defaults filled in for unset variables.

    Raises:
        ValueError: If a numeric variable does not parse as a number.
    """
    load_dotenv()
    return Settings(
        stars_path=Path(
            os.environ.get("PLANISPHERE_STARS_PATH", _RESOURCES / "hyg_sample.csv")
        ),
        asterisms_path=Path(
            os.environ.get("PLANISPHERE_ASTERISMS_PATH", _RESOURCES / "asterisms.txt")
        ),
        log_level=os.environ.get("PLANISPHERE_LOG_LEVEL", "INFO").upper(),
        observer_lat_deg=_float("PLANISPHERE_OBSERVER_LAT", 46.52),
        observer_lon_deg=_float("PLANISPHERE_OBSERVER_LON", 6.57),
        center_az_deg=_float("PLANISPHERE_CENTER_AZ", 180.0),
        center_alt_deg=_float("PLANISPHERE_CENTER_ALT", 15.0),
        max_distance=_float("PLANISPHERE_MAX_DISTANCE", 0.05),
    )
