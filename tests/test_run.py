from __future__ import annotations

from datetime import datetime

import pytest
from pytz import utc

from neverlandcompass.catalog import SIRIUS, VEGA, UnknownStarError
from neverlandcompass.compute import TimeResolutionError, resolve_utc, run
from neverlandcompass.models import ObserverLocation, QueryInput

SEOUL = ObserverLocation(lat=37.5665, lng=126.978)
NEW_YORK = ObserverLocation(lat=40.7128, lng=-74.006)


def test_resolve_utc_uses_local_timezone() -> None:
    assert resolve_utc(SEOUL, "1995-01-15 00:00") == datetime(
        1995, 1, 14, 15, 0, tzinfo=utc
    )


def test_resolve_utc_applies_daylight_saving() -> None:
    # EDT (UTC-4) in July, EST (UTC-5) in January
    assert resolve_utc(NEW_YORK, "2026-07-04 21:00") == datetime(
        2026, 7, 5, 1, 0, tzinfo=utc
    )
    assert resolve_utc(NEW_YORK, "2026-01-04 21:00") == datetime(
        2026, 1, 5, 2, 0, tzinfo=utc
    )


@pytest.mark.parametrize("when", ["", "15/01/2026 22:00", "2026-13-01 00:00"])
def test_resolve_utc_rejects_bad_strings(when: str) -> None:
    with pytest.raises(TimeResolutionError):
        resolve_utc(SEOUL, when)


def test_resolve_utc_rejects_skipped_local_time() -> None:
    # Clocks jump from 02:00 to 03:00 on 2024-03-10 in New York
    with pytest.raises(TimeResolutionError):
        resolve_utc(NEW_YORK, "2024-03-10 02:30")


def test_run_builds_fix() -> None:
    fix = run(QueryInput(lat=-37.8136, lng=144.9631, when="2026-01-15 22:00"))
    assert fix.star is SIRIUS
    assert fix.utc_dt == datetime(2026, 1, 15, 11, 0, tzinfo=utc)  # AEDT, UTC+11
    assert 0.0 <= fix.position.az_deg < 360.0
    x, y, z = fix.direction.x, fix.direction.y, fix.direction.z
    assert (x * x + y * y + z * z) ** 0.5 == pytest.approx(10.0)


def test_run_star_lookup_and_distance() -> None:
    fix = run(
        QueryInput(lat=37.5665, lng=126.978, when="2026-08-01 21:00", star="vega"),
        distance=3.0,
    )
    assert fix.star is VEGA
    assert abs(fix.direction.y) <= 3.0


def test_run_unknown_star() -> None:
    with pytest.raises(UnknownStarError):
        run(QueryInput(lat=0.0, lng=0.0, when="2026-01-15 22:00", star="Peter"))


@pytest.mark.parametrize(("lat", "lng"), [(91.0, 0.0), (-90.5, 0.0), (0.0, 180.5)])
def test_run_rejects_out_of_range_location(lat: float, lng: float) -> None:
    with pytest.raises(ValueError):
        run(QueryInput(lat=lat, lng=lng, when="2026-01-15 22:00"))
