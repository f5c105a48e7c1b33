from .exceptions import ParseError, ServiceError
from .manager import AgentManager
from .providers.heuristic import HeuristicAnalyzer, analyze_heuristic

__all__ = [
    "AgentManager",
    "HeuristicAnalyzer",
    "analyze_heuristic",
    "ParseError",
    "ServiceError",
]
