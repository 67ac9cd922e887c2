import math

import pytest

from src.kinetics.core import CarriedState, RawSample
from src.kinetics.derivation import derive
from src.kinetics.parameters import ConfigurationResolver

DEFAULTS = {"Mass": 1.0, "Resistance": 0.1, "V0": 0.0, "StepTime": 0.1}


def params(**overrides):
    return ConfigurationResolver(overrides, defaults=DEFAULTS)


def test_acceleration_magnitude_and_first_delta():
    record, state = derive(RawSample(0.1, 3.0, 4.0, 0.0), CarriedState.zero(), params())
    assert record.a_mag == 5.0
    assert record.a_mag_delta == record.a_mag
    assert state.a_mag == 5.0


def test_first_tick_velocity_uses_v0_along_y():
    record, state = derive(RawSample(0.0, 9.0, -3.0, 1.5), CarriedState.zero(), params(V0=2))
    assert (record.vx, record.vy, record.vz) == (0.0, 2.0, 0.0)
    assert state.velocity == (0.0, 2.0, 0.0)


def test_velocity_is_a_running_sum():
    p = params()
    state = CarriedState.zero()
    _, state = derive(RawSample(1.0, 1.0, 0.0, 0.0), state, p)
    record, state = derive(RawSample(2.0, 1.0, 0.0, 0.0), state, p)
    assert record.vx == 2.0


def test_power_per_axis():
    state = CarriedState(vx=1.0)
    record, _ = derive(RawSample(0.5, 3.0, 0.0, 0.0), state, params(Mass=2))
    assert record.vx == 4.0
    assert record.px == 24.0
    assert record.p_mag == 24.0


def test_current_and_voltage_from_power_magnitude():
    # ax=2, vx=2 with mass 1 -> px=4, p_mag=4
    state = CarriedState(vx=0.0)
    record, _ = derive(RawSample(0.1, 2.0, 0.0, 0.0), state, params(Resistance=0.25))
    assert record.p_mag == 4.0
    assert record.current == 1.0
    assert record.voltage == 0.25


def test_deltas_use_carried_magnitudes():
    state = CarriedState(a_mag=1.0, p_mag=10.0)
    record, _ = derive(RawSample(0.1, 3.0, 4.0, 0.0), state, params())
    assert record.a_mag_delta == 4.0
    assert record.p_mag_delta == record.p_mag - 10.0


def test_next_state_carries_velocity_and_magnitudes():
    record, state = derive(RawSample(0.3, 1.0, 2.0, 2.0), CarriedState(1.0, 1.0, 1.0), params())
    assert state == CarriedState(
        vx=record.vx, vy=record.vy, vz=record.vz, a_mag=record.a_mag, p_mag=record.p_mag
    )


def test_negative_resistance_yields_nan_without_raising():
    record, _ = derive(RawSample(0.1, 1.0, 0.0, 0.0), CarriedState(vx=1.0), params(Resistance=-1))
    assert math.isnan(record.current)
    assert math.isnan(record.voltage)
    assert not record.is_finite


def test_non_finite_input_propagates():
    record, state = derive(RawSample(0.1, float("inf"), 0.0, 0.0), CarriedState.zero(), params())
    assert math.isinf(record.a_mag)
    assert not record.is_finite
    assert math.isinf(state.vx)


def test_derive_is_pure():
    state = CarriedState(vx=0.5, vy=-0.5, a_mag=2.0, p_mag=1.0)
    sample = RawSample(0.7, 0.3, -0.2, 0.9)
    p = params(Mass=3, Resistance=0.5)
    assert derive(sample, state, p) == derive(sample, state, p)
    assert state == CarriedState(vx=0.5, vy=-0.5, a_mag=2.0, p_mag=1.0)


def test_record_is_immutable():
    record, _ = derive(RawSample(0.1, 1.0, 1.0, 1.0), CarriedState.zero(), params())
    with pytest.raises(AttributeError):
        record.vx = 5.0
