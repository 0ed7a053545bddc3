from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest
from matplotlib.figure import Figure
from pytz import utc

from neverlandcompass.catalog import POLARIS, SIRIUS
from neverlandcompass.compute import compute_star_fix, device_altitude
from neverlandcompass.models import DeviceOrientation, ObserverLocation, StarFix
from neverlandcompass.renderers.plotly_3d import render_sky_dome
from neverlandcompass.renderers.static import render_compass_card, save_compass_card


@pytest.fixture
def fix(melbourne: ObserverLocation) -> StarFix:
    return compute_star_fix(SIRIUS, melbourne, datetime(2026, 1, 15, 11, 0, tzinfo=utc))


def test_sky_dome_places_star_at_direction_vector(fix: StarFix) -> None:
    fig = render_sky_dome(fix)

    assert len(fig.data) == 3
    star = fig.data[-1]
    assert star.name == "Sirius"
    # Plotly is Z-up: (east, north, up) = (x, z, y)
    assert star.x[-1] == pytest.approx(fix.direction.x)
    assert star.y[-1] == pytest.approx(fix.direction.z)
    assert star.z[-1] == pytest.approx(fix.direction.y)


def test_sky_dome_draws_device_ray(fix: StarFix) -> None:
    orientation = DeviceOrientation(alpha=120.0, beta=60.0, gamma=0.0)
    fig = render_sky_dome(fix, orientation, device_altitude(orientation.beta))
    assert len(fig.data) == 4
    assert fig.data[-1].name == "Device"


def test_sky_dome_skips_unknown_device(fix: StarFix) -> None:
    orientation = DeviceOrientation(alpha=None, beta=None, gamma=None)
    fig = render_sky_dome(fix, orientation, device_altitude(orientation.beta))
    assert len(fig.data) == 3


def test_compass_card_renders(fix: StarFix) -> None:
    fig = render_compass_card(fix)
    texts = [text.get_text() for text in fig.axes[0].texts]
    assert isinstance(fig, Figure)
    assert "N" in texts
    assert "SSW" in texts
    assert any(text.startswith("Rises") or "never" in text for text in texts)


def test_save_compass_card(tmp_path: Path) -> None:
    fix = compute_star_fix(
        POLARIS,
        ObserverLocation(lat=45.0, lng=0.0),
        datetime(2026, 1, 15, tzinfo=utc),
    )
    path = save_compass_card(fix, tmp_path / "cards" / "polaris.png")
    assert path.exists()
    assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
