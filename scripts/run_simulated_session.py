"""
Simulated Recording Session.
Feeds random preview samples through a derivation session, then runs the
post-session metrics and prints a summary.
"""

import argparse
import os

from loguru import logger
from tqdm import tqdm

from config import settings
from src.kinetics.session import DerivationSession
from src.kinetics.sources import simulated_feed
from src.kinetics.tabulation import non_finite_rows, trailing_window
from src.kinetics.pipeline import SessionAnalysisPipeline
from src.kinetics.metrics.kinematics import PeakKinematics
from src.kinetics.metrics.circuit import CircuitSummary
from src.kinetics.metrics.integration import IntegrationDrift


def parse_args():
    parser = argparse.ArgumentParser(description="Run a simulated accelerometer session.")
    parser.add_argument("--duration", type=float, default=10.0, help="Session length in seconds.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the preview feed.")
    parser.add_argument("--mass", type=float, default=None, help="Mass override (kg).")
    parser.add_argument("--resistance", type=float, default=None, help="Resistance override (Ω).")
    parser.add_argument("--v0", type=float, default=None, help="Starting velocity along Y (m/s).")
    parser.add_argument("--step-time", type=float, default=None, help="Seconds between ticks.")
    return parser.parse_args()


def main():
    args = parse_args()

    os.makedirs(settings.LOG_DIR, exist_ok=True)
    logger.add(os.path.join(settings.LOG_DIR, "session_{time}.log"), level="DEBUG")

    # 1. Session configuration (only what the user actually set)
    overrides = {
        "Mass": args.mass,
        "Resistance": args.resistance,
        "V0": args.v0,
        "StepTime": args.step_time,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}

    session = DerivationSession()
    session.start_session(overrides)
    step_time = session.resolver.resolve("StepTime")

    # 2. Recording
    n_ticks = int(round(args.duration / step_time)) + 1
    for sample in tqdm(
        simulated_feed(args.duration, step_time, seed=args.seed),
        total=n_ticks,
        desc="Recording",
    ):
        session.ingest(sample)

    records = session.end_session()

    # 3. Post-session analysis
    pipeline = SessionAnalysisPipeline()
    pipeline.add_metric(PeakKinematics())
    pipeline.add_metric(CircuitSummary())
    pipeline.add_metric(IntegrationDrift())

    results = pipeline.run(records, session.resolver)
    frame = results["frame"]

    print("\n=== Session Results ===")
    for k, v in results.items():
        if k != "frame":
            print(f"  - {k}: {v}")

    window = trailing_window(
        records,
        session.resolver.resolve("ChartLength"),
        step_time,
    )
    print(f"\n[*] Live chart window: {len(window)} records")

    flagged = non_finite_rows(frame)
    if not flagged.empty:
        print(f"[!] {len(flagged)} non-finite records")

    print("\n=== Last Records ===")
    print(frame.tail(5).to_string(index=False))


if __name__ == "__main__":
    main()
