from .base import Base
from .analysis import AnalysisHistory

__all__ = ["Base", "AnalysisHistory"]
