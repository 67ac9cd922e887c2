"""
Tabular views over a session log, for charts and post-session tables.
Number formatting is left to the presentation layer.
"""

from typing import Sequence, Tuple

import numpy as np
import pandas as pd

from src.kinetics.core import Record


def records_to_frame(records: Sequence[Record]) -> pd.DataFrame:
    """One row per record, columns in Record.FIELDS order."""
    columns = list(Record.FIELDS)
    records = tuple(records)
    if not records:
        return pd.DataFrame(columns=columns, dtype=float)
    return pd.DataFrame([r.as_dict() for r in records], columns=columns)


def trailing_window(
    records: Sequence[Record], chart_length: float, step_time: float
) -> Tuple[Record, ...]:
    """The last `chart_length` seconds of records, counted in ticks."""
    count = int(chart_length / step_time)
    if count <= 0:
        return ()
    return tuple(records)[-count:]


def non_finite_rows(frame: pd.DataFrame) -> pd.DataFrame:
    """Rows holding NaN or +/-Infinity in any column."""
    if frame.empty:
        return frame
    values = frame.to_numpy(dtype=float)
    mask = ~np.isfinite(values).all(axis=1)
    return frame[mask]
