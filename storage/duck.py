# storage/duck.py
import logging
import pathlib
from typing import Dict, List, Optional

import duckdb
import pandas as pd

from analytics.records import RecordError, coerce_records, records_frame

logger = logging.getLogger(__name__)


class DatasetLoadError(RuntimeError):
    """The survey CSV could not be read or coerced."""


def _quote(path: str) -> str:
    return "'" + path.replace("'", "''") + "'"


def read_raw_rows(path: str | pathlib.Path) -> List[Dict[str, Optional[str]]]:
    """Read every CSV column as text; empty cells come back as None."""
    csv_path = pathlib.Path(path)
    if not csv_path.is_file():
        raise FileNotFoundError(f"Dataset not found at {csv_path}")

    with duckdb.connect() as con:
        res = con.execute(
            f"SELECT * FROM read_csv({_quote(str(csv_path))}, header = true, all_varchar = true)"
        )
        cols = [d[0] for d in (res.description or [])]
        rows = res.fetchall()
    return [dict(zip(cols, row)) for row in rows]


def load_dataset(path: str | pathlib.Path) -> pd.DataFrame:
    """Load and coerce the survey records into the table compute_view consumes."""
    try:
        raw = read_raw_rows(path)
        df = records_frame(coerce_records(raw))
    except (duckdb.Error, OSError, RecordError) as e:
        raise DatasetLoadError(f"Failed to load dataset '{path}': {e}") from e

    logger.info("Dataset loaded from %s: %d records", path, len(df))
    return df
