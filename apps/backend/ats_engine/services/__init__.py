from .analysis_service import ResumeAnalysisService
from .generative_client import GenerativeAnalysisClient
from .history_service import AnalysisHistoryService
from .stats import compute_stats, score_tier
from .exceptions import (
    InputError,
    NotFoundError,
    PersistenceError,
)

__all__ = [
    "ResumeAnalysisService",
    "GenerativeAnalysisClient",
    "AnalysisHistoryService",
    "compute_stats",
    "score_tier",
    "InputError",
    "NotFoundError",
    "PersistenceError",
]
