"""
Running-sum velocity vs. time-scaled integration.

The derived records integrate acceleration as a plain running sum per tick.
This metric reports how far that drifts from a trapezoidal integral scaled by
the nominal step time, without touching the records themselves.
"""

import numpy as np
import pandas as pd
from scipy import integrate
from typing import Dict, Any, Optional
from .base import MetricStrategy

AXES = ("x", "y", "z")


class IntegrationDrift(MetricStrategy):
    def calculate(
        self, frame: pd.DataFrame, session_params: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        step_time = self.effective_params(session_params).get("step_time")
        if not step_time or step_time <= 0:
            return {"Error": "step_time parameter required"}
        if len(frame) < 2:
            return {"Error": "Need at least two records"}

        drift = {}
        for axis in AXES:
            accel = frame[f"a{axis}"].to_numpy(dtype=float)
            running = frame[f"v{axis}"].to_numpy(dtype=float)

            # v(t_k) = v(t_0) + Integral(a dt), sampled at the nominal step
            scaled = running[0] + integrate.cumulative_trapezoid(
                accel, dx=step_time, initial=0
            )
            drift[axis] = running - scaled

        final_running = np.sqrt(sum(frame[f"v{a}"].iloc[-1] ** 2 for a in AXES))
        final_scaled = np.sqrt(
            sum((frame[f"v{a}"].iloc[-1] - drift[a][-1]) ** 2 for a in AXES)
        )

        return {
            "Final_Speed_Running_Sum": round(float(final_running), 4),
            "Final_Speed_Time_Scaled": round(float(final_scaled), 4),
            "Max_Axis_Drift": round(
                float(max(np.nanmax(np.abs(d)) for d in drift.values())), 4
            ),
        }
