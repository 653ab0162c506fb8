"""
Plotly rendering of a RenderModel
"""

import plotly.graph_objects as go

from analytics.view import (
    AXIS_TRANSITION_MS,
    POINT_OPACITY,
    POINT_RADIUS,
    RenderModel,
)
from config import CHART_HEIGHT, CHART_WIDTH, MARGIN

POINTS_TRACE = "points"


def ui_revision(model: RenderModel) -> str:
    """Zoom and legend state survive reruns only while the selection is unchanged"""
    return "/".join(model.state.columns)


def build_figure(model: RenderModel) -> go.Figure:
    """
    All points live in one trace keyed by sequence id, so Plotly matches each
    marker between renders and animates its position and colour, even when its
    colour category changes.

    The legend is drawn by empty proxy traces, one per colour-domain value in
    domain order.
    """
    fig = go.Figure()

    fig.add_trace(
        go.Scatter(
            x=[p.x for p in model.points],
            y=[p.y for p in model.points],
            ids=[p.id for p in model.points],
            mode="markers",
            name=POINTS_TRACE,
            showlegend=False,
            marker=dict(
                size=POINT_RADIUS * 2,
                color=[p.color for p in model.points],
                opacity=POINT_OPACITY,
                line=dict(width=0),
            ),
            customdata=[p.tooltip for p in model.points],
            hovertemplate="%{customdata}<extra></extra>",
        )
    )

    for entry in model.legend:
        fig.add_trace(
            go.Scatter(
                x=[None],
                y=[None],
                mode="markers",
                name=entry.label,
                showlegend=True,
                hoverinfo="skip",
                marker=dict(size=POINT_RADIUS * 2, color=entry.color, opacity=POINT_OPACITY),
            )
        )

    fig.update_layout(
        width=CHART_WIDTH,
        height=CHART_HEIGHT,
        margin=MARGIN,
        showlegend=True,
        legend=dict(
            title=dict(text=model.legend_title),
            traceorder="normal",
            itemsizing="constant",
            itemclick=False,
            itemdoubleclick=False,
            x=1.02,
            y=1,
            xanchor="left",
            yanchor="top",
        ),
        transition=dict(duration=AXIS_TRANSITION_MS, easing="cubic-in-out"),
        uirevision=ui_revision(model),
        hovermode="closest",
    )
    fig.update_xaxes(title_text=model.x_label, range=list(model.x_domain), zeroline=False)
    fig.update_yaxes(title_text=model.y_label, range=list(model.y_domain), zeroline=False)
    return fig
