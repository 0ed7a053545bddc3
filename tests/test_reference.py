from __future__ import annotations

import logging
from datetime import datetime

import pytest
from pytz import utc

from neverlandcompass import reference
from neverlandcompass.compute import julian_date, local_sidereal_time
from neverlandcompass.reference import (
    reference_julian_date,
    reference_local_sidereal_time,
    sidereal_drift,
)

_INSTANTS = [
    datetime(2000, 1, 1, 12, 0, tzinfo=utc),
    datetime(2012, 6, 30, 23, 59, 30, tzinfo=utc),
    datetime(2026, 1, 15, 11, 0, tzinfo=utc),
]


@pytest.mark.parametrize("when", _INSTANTS)
def test_julian_date_matches_skyfield(when: datetime) -> None:
    # skyfield reports UT1, which stays within 0.9 s of UTC
    assert julian_date(when) == pytest.approx(reference_julian_date(when), abs=2e-5)


@pytest.mark.parametrize("when", _INSTANTS)
@pytest.mark.parametrize("lng", [-122.42, 0.0, 144.9631])
def test_local_sidereal_time_matches_skyfield(when: datetime, lng: float) -> None:
    ours = local_sidereal_time(when, lng)
    theirs = reference_local_sidereal_time(when, lng)
    assert 0.0 <= theirs < 360.0
    assert (ours - theirs + 180.0) % 360.0 - 180.0 == pytest.approx(0.0, abs=0.01)


def test_sidereal_drift_is_quiet_when_small(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="neverlandcompass.reference"):
        drift = sidereal_drift(_INSTANTS[-1], 144.9631)
    assert abs(drift) < reference.SIDEREAL_DRIFT_WARN_DEG
    assert caplog.records == []


def test_sidereal_drift_warns_when_large(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    when = _INSTANTS[0]
    shifted = (local_sidereal_time(when, 0.0) - 1.0) % 360.0
    monkeypatch.setattr(
        reference, "reference_local_sidereal_time", lambda _when, _lng: shifted
    )

    with caplog.at_level(logging.WARNING, logger="neverlandcompass.reference"):
        drift = sidereal_drift(when, 0.0)

    assert drift == pytest.approx(1.0)
    assert "Sidereal time drift" in caplog.text
