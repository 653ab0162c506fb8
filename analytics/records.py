"""
Coercion of raw survey rows into typed records
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional

import pandas as pd

from analytics.fields import AGE_GROUP_COLUMN, FIELD_ATTRIBUTES, SEQUENCE_COLUMN, Field

logger = logging.getLogger(__name__)


class RecordError(ValueError):
    """A required column is missing or unparsable"""


@dataclass(frozen=True)
class Record:
    sequence_id: str
    sex_code: int
    age_group_code: int
    general_health: Optional[float] = None
    physical_health_days: Optional[float] = None
    mental_health_days: Optional[float] = None
    body_mass_index: Optional[float] = None
    physical_activity_flag: Optional[float] = None
    smoked_flag: Optional[float] = None


def coerce_numeric(raw: Optional[str], column: str = "") -> Optional[float]:
    """Empty or missing -> None, otherwise a finite float.

    Text that does not parse to a finite number is logged and treated as missing.
    """
    if raw is None:
        return None
    text = str(raw).strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        logger.warning("Non-numeric value %r in column %s treated as missing", raw, column)
        return None
    if not math.isfinite(value):
        logger.warning("Non-finite value %r in column %s treated as missing", raw, column)
        return None
    return value


def _required_code(raw: Mapping[str, Optional[str]], column: str) -> int:
    value = coerce_numeric(raw.get(column), column)
    if value is None:
        raise RecordError(f"Required column '{column}' is missing or invalid: {raw.get(column)!r}")
    return int(value)


def coerce_record(raw: Mapping[str, Optional[str]]) -> Record:
    sequence_id = (raw.get(SEQUENCE_COLUMN) or "").strip()
    if not sequence_id:
        raise RecordError(f"Required column '{SEQUENCE_COLUMN}' is missing")

    optional = {
        FIELD_ATTRIBUTES[field]: coerce_numeric(raw.get(field.value), field.value)
        for field in Field
        if field is not Field.SEX
    }
    return Record(
        sequence_id=sequence_id,
        sex_code=_required_code(raw, Field.SEX.value),
        age_group_code=_required_code(raw, AGE_GROUP_COLUMN),
        **optional,
    )


def coerce_records(rows: Iterable[Mapping[str, Optional[str]]]) -> List[Record]:
    return [coerce_record(row) for row in rows]


def records_frame(records: Iterable[Record]) -> pd.DataFrame:
    """Tabulate records by column name, indexed by sequence id.

    Null values become NaN in float columns.
    """
    columns = [SEQUENCE_COLUMN, AGE_GROUP_COLUMN] + [f.value for f in Field]
    rows = [
        {
            SEQUENCE_COLUMN: r.sequence_id,
            AGE_GROUP_COLUMN: r.age_group_code,
            **{f.value: f.value_of(r) for f in Field},
        }
        for r in records
    ]
    df = pd.DataFrame(rows, columns=columns)
    for f in Field:
        df[f.value] = pd.to_numeric(df[f.value], errors="coerce").astype(float)
    df.index = pd.Index(df[SEQUENCE_COLUMN], name="id")
    return df
