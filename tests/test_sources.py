import pandas as pd
import pytest

from src.kinetics.core import RawSample
from src.kinetics.session import DerivationSession
from src.kinetics.sources import run_feed, samples_from_frame, simulated_feed


def test_simulated_feed_ticks_and_bounds():
    feed = list(simulated_feed(1.0, 0.1, seed=7))
    assert len(feed) == 11
    assert feed[0].t == 0.0
    assert feed[-1].t == 1.0
    assert all(b.t > a.t for a, b in zip(feed, feed[1:]))
    for s in feed:
        assert -1.0 <= s.ax <= 1.0 and -1.0 <= s.ay <= 1.0 and -1.0 <= s.az <= 1.0


def test_simulated_feed_is_reproducible_with_seed():
    assert list(simulated_feed(0.5, 0.1, seed=3)) == list(simulated_feed(0.5, 0.1, seed=3))


def test_simulated_feed_rejects_bad_step():
    with pytest.raises(ValueError):
        list(simulated_feed(1.0, 0.0))


def test_samples_from_frame():
    frame = pd.DataFrame({"t": [0.0, 0.1], "ax": [1, 2], "ay": [0, 0], "az": [3, 4], "extra": [9, 9]})
    assert list(samples_from_frame(frame)) == [RawSample(0.0, 1.0, 0.0, 3.0), RawSample(0.1, 2.0, 0.0, 4.0)]


def test_samples_from_frame_requires_columns():
    with pytest.raises(ValueError):
        list(samples_from_frame(pd.DataFrame({"t": [0.0], "ax": [1.0]})))


def test_run_feed_drives_session():
    session = DerivationSession()
    session.start_session({"V0": 1.0})
    records = run_feed(session, simulated_feed(0.3, 0.1, seed=1))
    assert len(records) == 4
    assert records[0].vy == 1.0
    assert session.log.snapshot() == tuple(records)
