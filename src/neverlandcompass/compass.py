"""Script entry point for the Neverland compass.

Edit the where/when variables at the top, then run:
    uv run python src/neverlandcompass/compass.py
"""

import logging

from dotenv import load_dotenv

from neverlandcompass.compute import compare_pointing, device_altitude, run
from neverlandcompass.config import load_settings
from neverlandcompass.guidance import describe_pointing, describe_schedule
from neverlandcompass.models import DeviceOrientation, QueryInput
from neverlandcompass.renderers.plotly_3d import render_sky_dome
from neverlandcompass.renderers.static import save_compass_card

where: tuple[float, float] | None = None  # (lat, lng); None uses the fallback
when = "2026-01-15 22:00"
star = "Sirius"
# Pretend the phone is held up towards the south-east
orientation = DeviceOrientation(alpha=120.0, beta=60.0, gamma=0.0, absolute=True)


def main() -> None:
    load_dotenv()
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    lat, lng = where or (settings.fallback_location.lat, settings.fallback_location.lng)
    fix = run(
        QueryInput(lat=lat, lng=lng, when=when, star=star),
        distance=settings.scene_distance,
    )

    device_alt = device_altitude(orientation.beta)
    comparison = compare_pointing(
        orientation.alpha,
        device_alt,
        fix.position.az_deg,
        fix.position.alt_deg,
        settings.pointing_tolerance,
    )
    guidance = describe_pointing(fix, comparison, settings.lang)
    print(guidance.headline)
    if guidance.hint:
        print(guidance.hint)
    print(describe_schedule(fix, settings.lang))

    path = save_compass_card(fix, lang=settings.lang)
    print(f"Saved: {path}")
    html_path = path.with_suffix(".html")
    render_sky_dome(fix, orientation, device_alt, settings.lang).write_html(html_path)
    print(f"Saved: {html_path}")


if __name__ == "__main__":
    main()
