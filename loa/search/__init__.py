"""Game-tree search for the automated player."""

from .negamax import LOSS, WIN, SearchConfig, SearchEngine, evaluate

__all__ = ["LOSS", "WIN", "SearchConfig", "SearchEngine", "evaluate"]
