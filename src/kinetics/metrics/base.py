"""
Base interface for all post-session metrics.
Strategy Pattern implementation.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional

import pandas as pd


class MetricStrategy(ABC):
    """Parent class of every session metric"""

    # Explicit parameters given at construction; they win over session values
    def __init__(self, **kwargs):
        self.params = kwargs

    def effective_params(self, session_params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Session parameters for this run, overridden by explicit ones"""
        return {**(session_params or {}), **self.params}

    @abstractmethod
    def calculate(
        self, frame: pd.DataFrame, session_params: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Take the tabulated session log and return results as a dict"""
        pass
