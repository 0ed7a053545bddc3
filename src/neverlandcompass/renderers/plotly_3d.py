"""Plotly 3D sky dome renderer.

Places the target star at its scene direction vector inside a horizon ring.
Scene vectors are Y-up; Plotly's 3D axes are Z-up, so (x, y, z) is drawn as
(x, z, y): east, north, up.
"""

import numpy as np
import plotly.graph_objects as go

from neverlandcompass.compute import compass_label, to_direction_vector
from neverlandcompass.i18n import t
from neverlandcompass.models import DeviceOrientation, DirectionVector3D, StarFix

_BG = "#050a1a"
_HORIZON_COLOR = "#334466"
_LABEL_COLOR = "#e8e8e8"
_DEVICE_COLOR = "#ffd54f"


def _plot_xyz(v: DirectionVector3D) -> tuple[float, float, float]:
    return v.x, v.z, v.y


def _horizon_trace(radius: float, lang: str) -> go.Scatter3d:
    az = np.linspace(0.0, 2 * np.pi, 181)
    return go.Scatter3d(
        x=radius * np.sin(az),
        y=radius * np.cos(az),
        z=np.zeros_like(az),
        mode="lines",
        line=dict(color=_HORIZON_COLOR, width=3),
        hoverinfo="skip",
        name=t("horizon", lang),
    )


def _cardinal_trace(radius: float) -> go.Scatter3d:
    points = [
        _plot_xyz(to_direction_vector(0.0, az, radius * 1.08))
        for az in (0.0, 90.0, 180.0, 270.0)
    ]
    xs, ys, zs = zip(*points)
    return go.Scatter3d(
        x=xs,
        y=ys,
        z=zs,
        mode="text",
        text=[compass_label(az) for az in (0.0, 90.0, 180.0, 270.0)],
        textfont=dict(color=_LABEL_COLOR, size=14),
        hoverinfo="skip",
        showlegend=False,
    )


def _star_trace(fix: StarFix) -> go.Scatter3d:
    x, y, z = _plot_xyz(fix.direction)
    pos = fix.position
    # Brighter stars get bigger markers; Sirius (-1.46) is near the cap.
    size = float(np.clip(10 - 2 * fix.star.magnitude, 6, 14))
    return go.Scatter3d(
        x=[0.0, x],
        y=[0.0, y],
        z=[0.0, z],
        mode="lines+markers+text",
        line=dict(color=fix.star.color, width=2, dash="dot"),
        marker=dict(size=[0, size], color=fix.star.color, opacity=0.95),
        text=["", fix.star.name],
        textposition="top center",
        textfont=dict(color=fix.star.color),
        hovertext=[
            "",
            f"{fix.star.name}: alt {pos.alt_deg:.1f}°, az {pos.az_deg:.1f}° ({fix.compass})",
        ],
        hoverinfo="text",
        name=fix.star.name,
    )


def _device_trace(
    heading: float, altitude: float, radius: float, lang: str
) -> go.Scatter3d:
    x, y, z = _plot_xyz(to_direction_vector(altitude, heading, radius))
    return go.Scatter3d(
        x=[0.0, x],
        y=[0.0, y],
        z=[0.0, z],
        mode="lines+markers",
        line=dict(color=_DEVICE_COLOR, width=4),
        marker=dict(size=[0, 5], color=_DEVICE_COLOR),
        hoverinfo="skip",
        name=t("device_marker", lang),
    )


def render_sky_dome(
    fix: StarFix,
    device: DeviceOrientation | None = None,
    device_alt: float | None = None,
    lang: str = "en",
) -> go.Figure:
    """Render a StarFix as a rotatable Plotly 3D sky dome.

    Args:
        fix: Fully computed star position.
        device: Optional orientation snapshot; its heading is drawn as a ray.
        device_alt: Pointing altitude for the device ray (see device_altitude).
        lang: Language code for labels.

    Returns:
        Plotly Figure object.
    """
    radius = float(np.linalg.norm(_plot_xyz(fix.direction))) or 10.0

    traces = [_horizon_trace(radius, lang), _cardinal_trace(radius), _star_trace(fix)]
    if device is not None and device.alpha is not None and device_alt is not None:
        traces.append(_device_trace(device.alpha, device_alt, radius, lang))

    fig = go.Figure(data=traces)
    axis = dict(visible=False, range=[-radius * 1.2, radius * 1.2])
    fig.update_layout(
        paper_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        width=800,
        height=800,
        scene=dict(
            xaxis=axis,
            yaxis=axis,
            zaxis=axis,
            aspectmode="cube",
            bgcolor=_BG,
        ),
    )
    return fig
