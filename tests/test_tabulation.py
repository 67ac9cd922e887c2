import math

from src.kinetics.core import Record
from src.kinetics.session import DerivationSession
from src.kinetics.sources import simulated_feed
from src.kinetics.tabulation import non_finite_rows, records_to_frame, trailing_window
from src.kinetics.core import RawSample


def recorded(duration=3.0, step=0.1, **config):
    session = DerivationSession()
    session.start_session(config)
    for sample in simulated_feed(duration, step, seed=11):
        session.ingest(sample)
    return session.end_session()


def test_frame_columns_follow_record_fields():
    records = recorded(0.5)
    frame = records_to_frame(records)
    assert list(frame.columns) == list(Record.FIELDS)
    assert len(frame) == len(records)
    assert frame["vx"].iloc[-1] == records[-1].vx


def test_empty_log_gives_empty_frame_with_columns():
    frame = records_to_frame([])
    assert frame.empty
    assert list(frame.columns) == list(Record.FIELDS)


def test_trailing_window_matches_chart_length():
    records = recorded(3.0)
    window = trailing_window(records, chart_length=2.0, step_time=0.1)
    assert len(window) == 20
    assert window[-1] == records[-1]


def test_trailing_window_shorter_than_log():
    records = recorded(0.5)
    assert trailing_window(records, 2.0, 0.1) == tuple(records)


def test_non_finite_rows_are_flagged():
    session = DerivationSession()
    session.start_session({"Resistance": -1})
    session.ingest(RawSample(0.0, 0.0, 0.0, 0.0))
    session.ingest(RawSample(0.1, 1.0, 0.0, 0.0))
    frame = records_to_frame(session.end_session())

    flagged = non_finite_rows(frame)
    # p_mag is 0 on the first tick, so sqrt(0 * -1) is still finite
    assert len(flagged) == 1
    assert flagged["t"].iloc[0] == 0.1
    assert math.isnan(flagged["current"].iloc[0])
