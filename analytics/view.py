"""
Pure view computation: selection + records -> render model
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence, Tuple

import pandas as pd
from plotly.colors import qualitative

from analytics.fields import (
    AGE_GROUP_COLUMN,
    DEFAULT_COLOR,
    DEFAULT_X,
    DEFAULT_Y,
    Field,
    axis_label,
    color_label,
    format_raw,
)
from analytics.reconcile import Reconciliation, reconcile
from analytics.stats import SummaryStats, summary_statistics

logger = logging.getLogger(__name__)

# d3.schemeCategory10
PALETTE: Tuple[str, ...] = tuple(qualitative.D3)

DOMAIN_HEADROOM = 1.1
EMPTY_DOMAIN = (0.0, 1.0)
LEGEND_ROW_HEIGHT = 25

POINT_RADIUS = 5
POINT_OPACITY = 0.7
AXIS_TRANSITION_MS = 1000


@dataclass(frozen=True)
class ViewState:
    x_field: Field
    y_field: Field
    color_field: Field

    @classmethod
    def from_values(cls, x: Any, y: Any, color: Any) -> "ViewState":
        return cls(Field.parse(x), Field.parse(y), Field.parse(color))

    @classmethod
    def default(cls) -> "ViewState":
        return cls(DEFAULT_X, DEFAULT_Y, DEFAULT_COLOR)

    @property
    def columns(self) -> List[str]:
        return [self.x_field.value, self.y_field.value, self.color_field.value]


@dataclass(frozen=True)
class Point:
    id: str
    x: float
    y: float
    color_value: float
    color: str
    tooltip: str


@dataclass(frozen=True)
class LegendEntry:
    value: float
    label: str
    color: str
    offset: int


@dataclass(frozen=True)
class RenderModel:
    state: ViewState
    points: Tuple[Point, ...]
    x_domain: Tuple[float, float]
    y_domain: Tuple[float, float]
    color_domain: Tuple[float, ...]
    legend_title: str
    legend: Tuple[LegendEntry, ...]
    x_label: str
    y_label: str
    reconciliation: Reconciliation
    stats: SummaryStats

    @property
    def ids(self) -> List[str]:
        return [p.id for p in self.points]


def filter_valid(frame: pd.DataFrame, state: ViewState) -> pd.DataFrame:
    """Rows where all three selected fields are present"""
    return frame.dropna(subset=state.columns)


def linear_domain(values: pd.Series) -> Tuple[float, float]:
    """Zero baseline with 10% headroom above the maximum"""
    if values.empty:
        return EMPTY_DOMAIN
    return (0.0, float(values.max()) * DOMAIN_HEADROOM)


def color_domain(values: pd.Series) -> Tuple[float, ...]:
    return tuple(sorted(float(v) for v in values.unique()))


def color_scale(domain: Sequence[float]) -> Dict[float, str]:
    """Ordinal palette: the n-th domain value takes the n-th colour, cycling"""
    return {value: PALETTE[i % len(PALETTE)] for i, value in enumerate(domain)}


def build_legend(field: Field, domain: Sequence[float]) -> Tuple[LegendEntry, ...]:
    colors = color_scale(domain)
    return tuple(
        LegendEntry(
            value=value,
            label=color_label(field, value),
            color=colors[value],
            offset=i * LEGEND_ROW_HEIGHT,
        )
        for i, value in enumerate(domain)
    )


def tooltip_text(state: ViewState, x: float, y: float, c: float, age_group: Any) -> str:
    return (
        f"<b>{axis_label(state.x_field)}:</b> {x:.2f}<br>"
        f"<b>{axis_label(state.y_field)}:</b> {y:.2f}<br>"
        f"<b>{axis_label(state.color_field)}:</b> {color_label(state.color_field, c)}<br>"
        f"<b>Age Group:</b> {format_raw(age_group)}"
    )


def compute_view(
    frame: pd.DataFrame, state: ViewState, previous_ids: Iterable[str] = ()
) -> RenderModel:
    """
    Recompute everything the dashboard draws for one selection.

    Args:
        frame: Records table from records_frame()
        state: Current X / Y / colour selection
        previous_ids: Sequence ids drawn by the previous render

    Returns:
        RenderModel; equal inputs always give an equal model
    """
    x_col, y_col, c_col = state.columns
    valid = filter_valid(frame, state)

    domain = color_domain(valid[c_col])
    colors = color_scale(domain)
    points = tuple(
        Point(
            id=str(seq),
            x=float(x),
            y=float(y),
            color_value=float(c),
            color=colors[float(c)],
            tooltip=tooltip_text(state, float(x), float(y), float(c), age),
        )
        for seq, x, y, c, age in zip(
            valid.index, valid[x_col], valid[y_col], valid[c_col], valid[AGE_GROUP_COLUMN]
        )
    )

    model = RenderModel(
        state=state,
        points=points,
        x_domain=linear_domain(valid[x_col]),
        y_domain=linear_domain(valid[y_col]),
        color_domain=domain,
        legend_title=axis_label(state.color_field),
        legend=build_legend(state.color_field, domain),
        x_label=axis_label(state.x_field),
        y_label=axis_label(state.y_field),
        reconciliation=reconcile(previous_ids, (p.id for p in points)),
        stats=summary_statistics(valid, frame),
    )
    logger.debug(
        "View %s/%s/%s: %d of %d records, %d entering, %d exiting",
        x_col,
        y_col,
        c_col,
        len(points),
        len(frame),
        len(model.reconciliation.enter),
        len(model.reconciliation.exit),
    )
    return model
