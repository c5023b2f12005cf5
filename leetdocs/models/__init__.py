"""
Data Models Layer.

This package contains the Pydantic configuration model and the dataclasses
that carry problems, account data and run statistics through the pipeline.
"""

from .config import SyncConfig
from .problem import LeetCodeData, SolvedProblem
from .stats import SyncStats

__all__ = ["LeetCodeData", "SolvedProblem", "SyncConfig", "SyncStats"]
