"""Environment-driven settings. Entry points call load_dotenv() before load_settings()."""

import os
from dataclasses import dataclass

from neverlandcompass.models import ObserverLocation

# Melbourne, Australia. Used when the device cannot report a location.
DEFAULT_FALLBACK_LAT = -37.8136
DEFAULT_FALLBACK_LNG = 144.9631


@dataclass(frozen=True)
class Settings:
    """Runtime settings for scripts and renderers."""

    fallback_location: ObserverLocation
    pointing_tolerance: float  # Degrees
    scene_distance: float  # Radius of the 3D sky dome
    lang: str  # 'ko' or 'en'
    log_level: str  # logging level name


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


def load_settings() -> Settings:
    """Read NEVERLAND_* environment variables into a Settings object.

    Raises:
        ValueError: When a numeric variable is malformed or the fallback
            location is out of range.
    """
    return Settings(
        fallback_location=ObserverLocation(
            lat=_env_float("NEVERLAND_FALLBACK_LAT", DEFAULT_FALLBACK_LAT),
            lng=_env_float("NEVERLAND_FALLBACK_LNG", DEFAULT_FALLBACK_LNG),
        ),
        pointing_tolerance=_env_float("NEVERLAND_POINTING_TOLERANCE", 20.0),
        scene_distance=_env_float("NEVERLAND_SCENE_DISTANCE", 10.0),
        lang=os.environ.get("NEVERLAND_LANG", "en"),
        log_level=os.environ.get("NEVERLAND_LOG_LEVEL", "INFO").upper(),
    )
