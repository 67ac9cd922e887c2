"""
Recording session lifecycle (Idle <-> Recording) and the append-only session log.
"""

import threading
from enum import Enum
from typing import Callable, Iterator, List, Mapping, Optional, Tuple

from loguru import logger

from src.kinetics.core import CarriedState, RawSample, Record
from src.kinetics.derivation import derive
from src.kinetics.errors import SessionStateError
from src.kinetics.parameters import ConfigurationResolver

RecordSink = Callable[[Record], None]


class SessionState(Enum):
    IDLE = "idle"
    RECORDING = "recording"


class SessionLog:
    """
    Ordered, append-only record store.

    Single writer, many readers: readers iterate over a snapshot, so a chart
    or table walking the log never sees it change underneath them.
    """

    def __init__(self):
        self._records: List[Record] = []
        self._lock = threading.Lock()

    def append(self, record: Record) -> None:
        with self._lock:
            self._records.append(record)

    def clear(self) -> None:
        with self._lock:
            self._records = []

    def snapshot(self) -> Tuple[Record, ...]:
        with self._lock:
            return tuple(self._records)

    def last(self) -> Optional[Record]:
        with self._lock:
            return self._records[-1] if self._records else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.snapshot())


class DerivationSession:
    """
    Owns one carried state and one session log.

    start_session() -> ingest() per tick -> end_session(). Restarting always
    begins a fresh session; there is no pause.
    """

    def __init__(self, sinks: Optional[List[RecordSink]] = None):
        self._log = SessionLog()
        self._state = SessionState.IDLE
        self._carried: Optional[CarriedState] = None
        self._resolver: Optional[ConfigurationResolver] = None
        self._sinks: List[RecordSink] = list(sinks or [])
        # serialises ingest(); each record depends on the previous carried state
        self._lock = threading.Lock()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def log(self) -> SessionLog:
        return self._log

    @property
    def carried_state(self) -> Optional[CarriedState]:
        return self._carried

    @property
    def resolver(self) -> Optional[ConfigurationResolver]:
        return self._resolver

    def add_sink(self, sink: RecordSink) -> None:
        with self._lock:
            self._sinks.append(sink)

    def start_session(self, config: Optional[Mapping[str, float]] = None) -> None:
        resolver = ConfigurationResolver(config)
        with self._lock:
            self._resolver = resolver
            self._log.clear()
            self._carried = CarriedState.zero()
            self._state = SessionState.RECORDING
        logger.info(f"Session started with overrides {resolver.overrides}")

    def ingest(self, sample: RawSample) -> Record:
        with self._lock:
            if self._state is not SessionState.RECORDING:
                raise SessionStateError("ingest() called with no active session")

            last = self._log.last()
            if last is not None and not sample.t > last.t:
                logger.warning(
                    f"Non-increasing tick {sample.t} after {last.t}; deltas may be corrupted"
                )

            record, self._carried = derive(sample, self._carried, self._resolver)
            self._log.append(record)
            sinks = list(self._sinks)

        # sinks run unlocked; they may call end_session()
        for sink in sinks:
            sink(record)

        if not record.is_finite:
            logger.warning(f"Non-finite record at t={record.t}")
        logger.debug(
            f"t={record.t:.3f} |a|={record.a_mag:.3f} |p|={record.p_mag:.3f} "
            f"I={record.current:.3f}"
        )
        return record

    def end_session(self) -> Tuple[Record, ...]:
        with self._lock:
            if self._state is not SessionState.RECORDING:
                raise SessionStateError("end_session() called with no active session")
            self._state = SessionState.IDLE
            records = self._log.snapshot()
        logger.info(f"Session ended: {len(records)} records")
        return records
