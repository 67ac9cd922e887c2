"""
Core data structures for the derived-metrics pipeline.
"""

import math
from dataclasses import dataclass, asdict
from typing import Dict, Tuple


@dataclass(frozen=True)
class RawSample:
    """One tick of the acceleration feed (gravity already removed upstream)."""

    t: float  # seconds since recording start
    ax: float  # m/s^2
    ay: float
    az: float


@dataclass(frozen=True)
class CarriedState:
    """
    History needed to derive the next tick without rescanning the log.
    Owned by exactly one session; each tick replaces it with a new instance.
    """

    vx: float = 0.0
    vy: float = 0.0
    vz: float = 0.0
    a_mag: float = 0.0
    p_mag: float = 0.0

    @classmethod
    def zero(cls) -> "CarriedState":
        return cls()

    @property
    def velocity(self) -> Tuple[float, float, float]:
        return (self.vx, self.vy, self.vz)


@dataclass(frozen=True)
class Record:
    """Fully derived values for a single tick. Never mutated once emitted."""

    t: float
    # acceleration (echo of the sample)
    ax: float
    ay: float
    az: float
    # running-sum velocity
    vx: float
    vy: float
    vz: float
    # acceleration magnitude and its change since the previous tick
    a_mag: float
    a_mag_delta: float
    # per-axis power: mass * a_axis * v_axis
    px: float
    py: float
    pz: float
    p_mag: float
    p_mag_delta: float
    # circuit values from power magnitude and resistance
    current: float
    voltage: float

    FIELDS = (
        "t",
        "ax", "ay", "az",
        "vx", "vy", "vz",
        "px", "py", "pz",
        "a_mag", "a_mag_delta", "p_mag", "p_mag_delta",
        "current", "voltage",
    )

    def as_dict(self) -> Dict[str, float]:
        values = asdict(self)
        return {name: values[name] for name in self.FIELDS}

    @property
    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in asdict(self).values())
