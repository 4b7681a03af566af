from .session_detector import detect_sessions, summarize_sessions
from .stat_strategies import StatStrategy
from .interaction_strategy import InteractionGraph, InteractionStrategy, accumulate_pair_weights
from .tfidf_strategy import TfidfStrategy, calc_tfidf, top_terms
from .stat_strategy_factory import StatStrategyFactory

__all__ = [
    "detect_sessions", "summarize_sessions", "StatStrategy",
    "InteractionGraph", "InteractionStrategy", "accumulate_pair_weights",
    "TfidfStrategy", "calc_tfidf", "top_terms", "StatStrategyFactory"
]
