"""
Basic Kinematic Metrics (Peak acceleration, final speed)
"""

import numpy as np
import pandas as pd
from typing import Dict, Any, Optional
from .base import MetricStrategy


class PeakKinematics(MetricStrategy):
    def calculate(
        self, frame: pd.DataFrame, session_params: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        if frame.empty:
            return {"Error": "No records in session"}

        a_mag = frame["a_mag"].to_numpy(dtype=float)
        if not np.any(np.isfinite(a_mag)):
            return {"Error": "No finite acceleration values"}

        # 1. Peak acceleration magnitude (NaN rows ignored)
        idx_peak = int(np.nanargmax(np.where(np.isfinite(a_mag), a_mag, np.nan)))
        peak_a = a_mag[idx_peak]
        time_at_peak = frame["t"].iloc[idx_peak]

        # 2. Speed at the last tick
        last = frame.iloc[-1]
        final_speed = float(np.sqrt(last["vx"] ** 2 + last["vy"] ** 2 + last["vz"] ** 2))

        return {
            "Peak_Accel_Mag": round(float(peak_a), 3),
            "Time_at_Peak_s": round(float(time_at_peak), 3),
            "Final_Speed": round(final_speed, 3),
            "Duration_s": round(float(frame["t"].iloc[-1] - frame["t"].iloc[0]), 3),
        }
