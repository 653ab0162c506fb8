"""Unit tests for field parsing and label translation."""

from __future__ import annotations

import pytest

from analytics.fields import Field, axis_label, color_label
from analytics.records import Record

pytestmark = pytest.mark.unit


def test_field_values_are_the_recognised_column_names() -> None:
    """Option values stay exactly the survey column names."""

    assert {f.value for f in Field} == {
        "_BMI5",
        "PHYSHLTH",
        "MENTHLTH",
        "GENHLTH",
        "SEXVAR",
        "_TOTINDA",
        "SMOKE100",
    }


def test_parse_rejects_unknown_field() -> None:
    with pytest.raises(ValueError, match="Unknown field"):
        Field.parse("WEIGHT2")


def test_parse_accepts_names_and_members() -> None:
    assert Field.parse("GENHLTH") is Field.GENERAL_HEALTH
    assert Field.parse(Field.SMOKED) is Field.SMOKED


def test_value_of_reads_the_mapped_attribute() -> None:
    """Every field resolves to a Record attribute."""

    record = Record(
        sequence_id="1",
        sex_code=2,
        age_group_code=4,
        general_health=3.0,
        physical_health_days=1.0,
        mental_health_days=2.0,
        body_mass_index=2500.0,
        physical_activity_flag=1.0,
        smoked_flag=2.0,
    )
    assert Field.BMI.value_of(record) == 2500.0
    assert Field.SEX.value_of(record) == 2
    assert Field.SMOKED.value_of(record) == 2.0


def test_axis_label_translates_and_falls_back() -> None:
    assert axis_label(Field.BMI) == "Body Mass Index (BMI)"
    assert axis_label("PHYSHLTH") == "Physical Health Days (past 30)"
    assert axis_label("OTHER") == "OTHER"


def test_color_label_translates_coded_values() -> None:
    assert color_label(Field.GENERAL_HEALTH, 2.0) == "Very Good"
    assert color_label("GENHLTH", 7) == "Don't Know"
    assert color_label(Field.SEX, 1.0) == "Male"
    assert color_label(Field.PHYSICAL_ACTIVITY, 2.0) == "Inactive"


def test_color_label_falls_back_to_raw_value() -> None:
    """Out-of-range codes and unlabelled fields render their raw value."""

    assert color_label(Field.GENERAL_HEALTH, 9.0) == "9"
    assert color_label(Field.BMI, 2817.0) == "2817"
    assert color_label(Field.BMI, 28.5) == "28.5"
