"""Matplotlib static PNG renderer — a compass card whose needle points at the star."""

import math
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import Circle, Polygon

from neverlandcompass.compute import compass_label
from neverlandcompass.guidance import describe_position, describe_schedule
from neverlandcompass.models import StarFix

_ROOT = Path(__file__).parent.parent.parent.parent

_BG = "#050a1a"
_RING_COLOR = "#7ec8e3"
_TEXT_COLOR = "#e8e8e8"


def _needle_xy(az_deg: float, length: float) -> tuple[float, float]:
    """Compass bearing -> plot coordinates (north up, east right)."""
    az = math.radians(az_deg)
    return length * math.sin(az), length * math.cos(az)


def render_compass_card(
    fix: StarFix, chart_size: int = 6, lang: str = "en"
) -> Figure:
    """Render a StarFix as a compass card.

    Args:
        fix: Fully computed star position.
        chart_size: Output image size in inches.
        lang: Language code for captions.

    Returns:
        matplotlib Figure object.
    """
    fig, ax = plt.subplots(figsize=(chart_size, chart_size))
    fig.patch.set_facecolor(_BG)
    ax.set_facecolor(_BG)

    ax.add_patch(Circle((0, 0), 1, color=_RING_COLOR, fill=False, linewidth=1.5))
    ax.add_patch(Circle((0, 0), 0.04, color=_TEXT_COLOR, zorder=4))

    # Ticks every 22.5°, longer on the cardinal points
    for i in range(16):
        az = i * 22.5
        label = compass_label(az)
        inner = 0.88 if i % 4 == 0 else 0.93
        x0, y0 = _needle_xy(az, inner)
        x1, y1 = _needle_xy(az, 1.0)
        ax.plot([x0, x1], [y0, y1], color=_RING_COLOR, linewidth=1, zorder=1)
        lx, ly = _needle_xy(az, 1.12)
        ax.text(
            lx,
            ly,
            label,
            color=_TEXT_COLOR,
            fontsize=12 if i % 4 == 0 else 7,
            ha="center",
            va="center",
        )

    pos = fix.position
    tip = np.array(_needle_xy(pos.az_deg, 0.8))
    side = np.array(_needle_xy(pos.az_deg + 90, 0.06))
    tail = np.array(_needle_xy(pos.az_deg + 180, 0.35))
    needle_color = fix.star.color if pos.is_visible else "#666666"
    ax.add_patch(Polygon([tip, side, -side], closed=True, color=needle_color, zorder=3))
    ax.add_patch(Polygon([tail, side, -side], closed=True, color="#444a5a", zorder=3))

    caption = describe_position(fix, lang).headline
    schedule = describe_schedule(fix, lang)
    ax.text(0, -1.32, caption, color=_TEXT_COLOR, fontsize=11, ha="center")
    ax.text(0, -1.45, schedule, color=_TEXT_COLOR, fontsize=9, ha="center", alpha=0.7)

    ax.set_xlim(-1.3, 1.3)
    ax.set_ylim(-1.55, 1.3)
    ax.set_aspect("equal")
    ax.axis("off")

    return fig


def save_compass_card(
    fix: StarFix, output_path: Path | None = None, lang: str = "en"
) -> Path:
    """Save a StarFix compass card as a PNG file.

    Args:
        fix: Fully computed star position.
        output_path: Destination path. Auto-generated under results/ if None.
        lang: Language code for captions.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        when_str = fix.utc_dt.strftime("%Y_%m_%d_%H_%M")
        loc = fix.location
        filename = f"{fix.star.name}__{loc.lat:.2f}_{loc.lng:.2f}__{when_str}.png"
        output_path = _ROOT / "results" / filename

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_compass_card(fix, lang=lang)
    fig.savefig(output_path, facecolor=_BG)
    plt.close(fig)
    return output_path
