"""Pytest fixtures shared across the analytics and rendering tests."""

from __future__ import annotations

from typing import Callable, Mapping

import pandas as pd
import pytest

from analytics.fields import Field
from analytics.records import coerce_records, records_frame

RowFactory = Callable[..., dict]


def _raw_row(seq: str, values: Mapping[str, str] | None = None) -> dict:
    row = {"SEQNO": seq, "SEXVAR": "1", "_AGEG5YR": "5"}
    row.update({f.value: "" for f in Field if f is not Field.SEX})
    row.update(values or {})
    return row


@pytest.fixture
def make_row() -> RowFactory:
    """Return a factory for raw CSV rows with optional fields blank unless given."""

    return _raw_row


@pytest.fixture
def make_frame() -> Callable[..., pd.DataFrame]:
    """Return a factory coercing raw value mappings into a records table.

    Each positional argument is a mapping of column name to raw text; rows get
    sequence ids r0, r1, ... in order.
    """

    def build(*values: Mapping[str, str]) -> pd.DataFrame:
        rows = [_raw_row(f"r{i}", v) for i, v in enumerate(values)]
        return records_frame(coerce_records(rows))

    return build


@pytest.fixture
def survey_frame(make_frame) -> pd.DataFrame:
    """Five respondents (r0..r4) with a mix of missing fields."""

    return make_frame(
        {"_BMI5": "25", "PHYSHLTH": "2", "MENTHLTH": "4", "GENHLTH": "2"},
        {"_BMI5": "30", "PHYSHLTH": "10", "MENTHLTH": "", "GENHLTH": "1"},
        {"_BMI5": "", "PHYSHLTH": "0", "MENTHLTH": "8", "GENHLTH": "3"},
        {"_BMI5": "20", "PHYSHLTH": "5", "MENTHLTH": "0", "GENHLTH": "2"},
        {"_BMI5": "40", "PHYSHLTH": "20", "MENTHLTH": "12", "GENHLTH": ""},
    )
