"""
Post-session Analysis Pipeline.
Runs registered metrics over the frozen log returned by end_session().
"""

from typing import List, Dict, Any, Optional, Sequence

from loguru import logger

from src.kinetics.core import Record
from src.kinetics.metrics.base import MetricStrategy
from src.kinetics.parameters import ConfigurationResolver
from src.kinetics.tabulation import records_to_frame


class SessionAnalysisPipeline:
    def __init__(self):
        self.metrics: List[MetricStrategy] = []

    def add_metric(self, metric: MetricStrategy):
        self.metrics.append(metric)

    def run(
        self,
        records: Sequence[Record],
        resolver: Optional[ConfigurationResolver] = None,
    ) -> Dict[str, Any]:
        """
        Tabulate the records, then compute every registered metric.

        :param resolver: session parameters; step time and mass are handed to
                         metrics that did not receive them explicitly
        """
        resolver = resolver or ConfigurationResolver()

        # 1. Tabulation
        frame = records_to_frame(records)
        results: Dict[str, Any] = {"frame": frame, "Record_Count": len(frame)}

        # 2. Metric calculation (session values are per run, never stored on the metric)
        session_params = {
            "step_time": resolver.resolve("StepTime"),
            "mass": resolver.resolve("Mass"),
        }
        for metric in self.metrics:
            name = metric.__class__.__name__
            try:
                metric_res = metric.calculate(frame, session_params)
            except Exception as e:
                logger.warning(f"{name} failed: {e}")
                results[f"Error_{name}"] = str(e)
                continue

            for key, value in metric_res.items():
                # bare "Error" keys would collide across metrics
                results[f"Error_{name}" if key == "Error" else key] = value

        return results
