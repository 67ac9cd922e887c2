"""
Sample feeds for a derivation session.
The live motion sensor is an external collaborator; these cover development
(random preview data) and replay of previously captured tables.
"""

from typing import Iterable, Iterator, List, Optional

import numpy as np
import pandas as pd

from src.kinetics.core import RawSample, Record
from src.kinetics.session import DerivationSession

SAMPLE_COLUMNS = ["t", "ax", "ay", "az"]


def simulated_feed(
    duration: float, step_time: float = 0.1, seed: Optional[int] = None
) -> Iterator[RawSample]:
    """
    Uniform random accelerations in [-1, 1] m/s^2 per axis, one sample per
    tick at t = 0, step, 2*step, ... up to and including `duration`.
    """
    if step_time <= 0:
        raise ValueError("step_time must be positive")

    rng = np.random.default_rng(seed)
    n_ticks = int(round(duration / step_time)) + 1
    for i in range(n_ticks):
        ax, ay, az = rng.uniform(-1.0, 1.0, size=3)
        # multiply instead of accumulating so ticks don't drift
        yield RawSample(t=round(i * step_time, 9), ax=float(ax), ay=float(ay), az=float(az))


def samples_from_frame(frame: pd.DataFrame) -> Iterator[RawSample]:
    """Replay samples from a table with columns t, ax, ay, az."""
    missing = [c for c in SAMPLE_COLUMNS if c not in frame.columns]
    if missing:
        raise ValueError(f"Sample table is missing columns: {missing}")

    for row in frame[SAMPLE_COLUMNS].itertuples(index=False):
        yield RawSample(t=float(row.t), ax=float(row.ax), ay=float(row.ay), az=float(row.az))


def run_feed(session: DerivationSession, samples: Iterable[RawSample]) -> List[Record]:
    """Push every sample through an already started session, in order."""
    return [session.ingest(sample) for sample in samples]
