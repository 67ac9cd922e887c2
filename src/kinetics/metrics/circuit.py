"""
Power and circuit metrics (peak current/voltage, energy, non-finite records)
"""

import numpy as np
import pandas as pd
from scipy import integrate
from typing import Dict, Any, Optional
from .base import MetricStrategy


class CircuitSummary(MetricStrategy):
    """Peak circuit values and energy from the power magnitude"""

    def calculate(
        self, frame: pd.DataFrame, session_params: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        if frame.empty:
            return {"Error": "No records in session"}

        values = frame.to_numpy(dtype=float)
        finite_rows = np.isfinite(values).all(axis=1)
        clean = frame[finite_rows]

        results: Dict[str, Any] = {"Non_Finite_Records": int((~finite_rows).sum())}
        if clean.empty:
            results["Error"] = "No finite records"
            return results

        # Energy = Integral(|P| dt) over the finite part of the session [J]
        if len(clean) >= 2:
            energy = integrate.trapezoid(clean["p_mag"], clean["t"])
        else:
            energy = 0.0

        results.update(
            {
                "Peak_Power_Mag": round(float(clean["p_mag"].max()), 4),
                "Peak_Current_A": round(float(clean["current"].max()), 4),
                "Peak_Voltage_V": round(float(clean["voltage"].max()), 4),
                "Energy_J": round(float(energy), 4),
            }
        )
        return results
