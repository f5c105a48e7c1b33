from .resume_analysis import AnalysisResult, GenerativeAnalysis, HeuristicAnalysis
from .history import AnalysisRecord, AnalysisStats, NewAnalysisRecord, ScoreTier

__all__ = [
    "AnalysisResult",
    "GenerativeAnalysis",
    "HeuristicAnalysis",
    "AnalysisRecord",
    "AnalysisStats",
    "NewAnalysisRecord",
    "ScoreTier",
]
