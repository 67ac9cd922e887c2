"""
Derivation engine: one raw sample + carried state -> one record + next state.

Velocity is a running sum of per-tick acceleration (not scaled by the step
time) and power is computed per axis as mass * a_axis * v_axis. Charts and
tables downstream are built against exactly these shapes.
"""

from typing import Tuple

import numpy as np

from src.kinetics.core import CarriedState, RawSample, Record
from src.kinetics.parameters import ConfigurationResolver


def _norm(x: float, y: float, z: float) -> float:
    return float(np.sqrt(x * x + y * y + z * z))


def derive(
    sample: RawSample, state: CarriedState, params: ConfigurationResolver
) -> Tuple[Record, CarriedState]:
    """
    Pure state transition. Never raises on numeric input: ill-defined math
    (e.g. a negative operand under the square root) yields NaN/Infinity.
    """
    mass = params.resolve("Mass")
    resistance = params.resolve("Resistance")

    with np.errstate(all="ignore"):
        ax, ay, az = np.float64(sample.ax), np.float64(sample.ay), np.float64(sample.az)

        # 1. Acceleration magnitude
        a_mag = _norm(ax, ay, az)
        a_mag_delta = a_mag - state.a_mag

        # 2. Velocity (first tick of a session starts from V0 along Y)
        if sample.t == 0:
            vx, vy, vz = np.float64(0.0), np.float64(params.resolve("V0")), np.float64(0.0)
        else:
            vx = state.vx + ax
            vy = state.vy + ay
            vz = state.vz + az

        # 3. Power per axis
        px = mass * ax * vx
        py = mass * ay * vy
        pz = mass * az * vz

        p_mag = _norm(px, py, pz)
        p_mag_delta = p_mag - state.p_mag

        # 4. Circuit values
        current = float(np.sqrt(np.float64(p_mag) * resistance))
        voltage = current * resistance

    record = Record(
        t=float(sample.t),
        ax=float(ax),
        ay=float(ay),
        az=float(az),
        vx=float(vx),
        vy=float(vy),
        vz=float(vz),
        a_mag=a_mag,
        a_mag_delta=float(a_mag_delta),
        px=float(px),
        py=float(py),
        pz=float(pz),
        p_mag=p_mag,
        p_mag_delta=float(p_mag_delta),
        current=current,
        voltage=float(voltage),
    )
    next_state = CarriedState(
        vx=record.vx, vy=record.vy, vz=record.vz, a_mag=record.a_mag, p_mag=record.p_mag
    )
    return record, next_state
