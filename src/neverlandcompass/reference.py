"""Cross-check of the closed-form time chain against skyfield's timescale.

Only skyfield's builtin leap-second and Delta T tables are used, so nothing is
downloaded.
"""

import logging
from datetime import datetime
from functools import lru_cache

from skyfield.api import load
from skyfield.timelib import Time, Timescale

from neverlandcompass.compute import julian_date, local_sidereal_time, to_utc

logger = logging.getLogger(__name__)

SIDEREAL_DRIFT_WARN_DEG = 0.05


@lru_cache(maxsize=1)
def _timescale() -> Timescale:
    return load.timescale(builtin=True)


def _skyfield_time(when: datetime) -> Time:
    return _timescale().from_datetime(to_utc(when))


def reference_julian_date(when: datetime) -> float:
    """UT1 Julian Date according to skyfield (differs from UTC by under a second)."""
    return float(_skyfield_time(when).ut1)


def reference_local_sidereal_time(when: datetime, lng_deg: float) -> float:
    """Local mean sidereal time in degrees [0, 360) from skyfield's GMST."""
    gmst_hours = float(_skyfield_time(when).gmst)
    return (gmst_hours * 15 + lng_deg) % 360.0


def sidereal_drift(when: datetime, lng_deg: float) -> float:
    """Signed difference (degrees, [-180, 180)) between our LST and skyfield's.

    Logs a warning when the drift exceeds SIDEREAL_DRIFT_WARN_DEG.
    """
    ours = local_sidereal_time(when, lng_deg)
    theirs = reference_local_sidereal_time(when, lng_deg)
    drift = (ours - theirs + 180.0) % 360.0 - 180.0
    if abs(drift) > SIDEREAL_DRIFT_WARN_DEG:
        logger.warning(
            "Sidereal time drift %.4f° at %s (JD %.5f)",
            drift,
            to_utc(when).isoformat(),
            julian_date(when),
        )
    return drift
