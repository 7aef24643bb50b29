"""In-process practice bots for exercising the engine."""

from .bots import baseline_strategy, passive_strategy
from .runner import PracticeSession, SessionSummary

__all__ = ["baseline_strategy", "passive_strategy", "PracticeSession", "SessionSummary"]
