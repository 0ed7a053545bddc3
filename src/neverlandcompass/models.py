"""Data model definitions — value types shared by the engine, guidance, and render layers."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class QueryInput:
    """Raw script input. Not yet validated."""

    lat: float  # Latitude (decimal degrees)
    lng: float  # Longitude (decimal degrees, east positive)
    when: str  # Local civil time, "YYYY-MM-DD HH:MM" format string
    star: str = "Sirius"  # Catalog name of the target star


@dataclass(frozen=True)
class ObserverLocation:
    """Observer geodetic coordinates. A fallback reading looks the same as a real one."""

    lat: float  # Latitude (decimal degrees, [-90, 90])
    lng: float  # Longitude (decimal degrees, [-180, 180])

    def __post_init__(self) -> None:
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"Latitude out of range: {self.lat}")
        if not -180.0 <= self.lng <= 180.0:
            raise ValueError(f"Longitude out of range: {self.lng}")


@dataclass(frozen=True)
class StarCatalogEntry:
    """Fixed equatorial coordinates + display attributes for a single star."""

    name: str  # Display name ("Sirius")
    nickname: str  # Popular name ("The Dog Star")
    ra_hours: float  # Right ascension (hours, [0, 24))
    dec_deg: float  # Declination (degrees)
    magnitude: float  # Apparent magnitude
    color: str  # Hex display color
    light_years: float  # Distance from the Sun


@dataclass(frozen=True)
class HorizontalPosition:
    """Altitude/azimuth of a star for one observer at one instant."""

    alt_deg: float  # Altitude above horizon (degrees, [-90, 90])
    az_deg: float  # Azimuth (degrees, [0, 360), 0=N, 90=E)
    is_visible: bool  # alt_deg > 0
    rise_time: str | None  # "HH:MM", None when the star never crosses the horizon
    set_time: str | None  # "HH:MM", None when the star never crosses the horizon


@dataclass(frozen=True)
class DirectionVector3D:
    """Scene coordinates. Y is up, Z is north, X is east."""

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class PointingComparison:
    """How far a device's pointing direction is from the target."""

    is_pointing: bool  # distance_deg <= tolerance
    distance_deg: float  # Flat azimuth/altitude error (degrees, >= 0)


@dataclass(frozen=True)
class DeviceOrientation:
    """One snapshot of the device-orientation stream. Unknown angles are None."""

    alpha: float | None  # Compass heading (0-360, 0 = North)
    beta: float | None  # Front-to-back tilt (-180 to 180)
    gamma: float | None  # Left-to-right tilt (-90 to 90)
    absolute: bool = False  # Heading is referenced to magnetic north


@dataclass(frozen=True)
class StarFix:
    """The sole input to renderers and guidance. Fully computed state."""

    star: StarCatalogEntry
    location: ObserverLocation
    utc_dt: datetime  # UTC datetime (with tzinfo=utc)
    position: HorizontalPosition
    direction: DirectionVector3D  # Scene placement of the star
    compass: str  # 16-point compass label of the azimuth ("SSE")


@dataclass(frozen=True)
class Guidance:
    """A headline plus a smaller hint line for UI feedback."""

    headline: str
    hint: str | None = None
