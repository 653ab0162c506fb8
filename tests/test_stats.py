"""Unit tests for the summary statistics panel."""

from __future__ import annotations

import pytest

from analytics.stats import format_mean
from analytics.view import ViewState, compute_view

pytestmark = pytest.mark.unit


def test_means_filter_each_field_independently(make_frame) -> None:
    """A record missing one measure still counts toward the others."""

    frame = make_frame(
        {"_BMI5": "25", "MENTHLTH": "", "GENHLTH": "1"},
        {"_BMI5": "", "MENTHLTH": "10", "GENHLTH": "1"},
    )
    state = ViewState.from_values("_BMI5", "MENTHLTH", "GENHLTH")
    stats = compute_view(frame, state).stats
    assert stats.total_records == 0
    assert stats.mean_bmi == pytest.approx(25.0)
    assert stats.mean_mental_health == pytest.approx(10.0)
    assert stats.mean_physical_health is None


def test_zero_is_a_valid_value(make_frame) -> None:
    frame = make_frame({"PHYSHLTH": "0"}, {"PHYSHLTH": "10"})
    stats = compute_view(frame, ViewState.default()).stats
    assert stats.mean_physical_health == pytest.approx(5.0)


def test_stats_for_the_survey_fixture(survey_frame) -> None:
    stats = compute_view(survey_frame, ViewState.default()).stats
    assert stats.total_records == 3
    assert stats.mean_bmi == pytest.approx(28.75)
    assert stats.mean_physical_health == pytest.approx(7.4)
    assert stats.mean_mental_health == pytest.approx(6.0)


def test_display_readout(survey_frame) -> None:
    display = compute_view(survey_frame, ViewState.default()).stats.as_display()
    assert display == {
        "Total Records": "3",
        "Avg BMI": "28.8",
        "Avg Physical Health Days": "7.4",
        "Avg Mental Health Days": "6.0",
    }


def test_format_mean() -> None:
    assert format_mean(None) == "N/A"
    assert format_mean(0.0) == "0.0"
    assert format_mean(12.345) == "12.3"
