from __future__ import annotations

from datetime import datetime
from typing import Callable

import matplotlib
import pytest
from pytz import utc

from neverlandcompass.catalog import SIRIUS
from neverlandcompass.models import (
    DirectionVector3D,
    HorizontalPosition,
    ObserverLocation,
    StarFix,
)

matplotlib.use("Agg")


@pytest.fixture
def j2000_noon() -> datetime:
    """JD 2451545.0 exactly."""
    return datetime(2000, 1, 1, 12, 0, tzinfo=utc)


@pytest.fixture
def j2000_evening() -> datetime:
    """JD 2451545.25; Sirius sits just below the eastern horizon at (0, 0)."""
    return datetime(2000, 1, 1, 18, 0, tzinfo=utc)


@pytest.fixture
def null_island() -> ObserverLocation:
    return ObserverLocation(lat=0.0, lng=0.0)


@pytest.fixture
def melbourne() -> ObserverLocation:
    return ObserverLocation(lat=-37.8136, lng=144.9631)


def _make_fix(
    alt_deg: float,
    az_deg: float,
    compass: str,
    rise_time: str | None = "18:05",
    set_time: str | None = "06:40",
) -> StarFix:
    return StarFix(
        star=SIRIUS,
        location=ObserverLocation(lat=-37.8136, lng=144.9631),
        utc_dt=datetime(2026, 1, 15, 11, 0, tzinfo=utc),
        position=HorizontalPosition(
            alt_deg=alt_deg,
            az_deg=az_deg,
            is_visible=alt_deg > 0,
            rise_time=rise_time,
            set_time=set_time,
        ),
        direction=DirectionVector3D(x=0.0, y=0.0, z=10.0),
        compass=compass,
    )


@pytest.fixture
def make_fix() -> Callable[..., StarFix]:
    """Hand-built fixes so message tests do not depend on the clock math."""
    return _make_fix
