"""Store-backed repositories for criteria, feedback, votes and decisions."""

from .criteria import DEFAULT_CRITERIA, CriteriaRegistry
from .decisions import DecisionLog
from .feedback import FeedbackRepository
from .votes import VoteRepository

__all__ = [
    "DEFAULT_CRITERIA",
    "CriteriaRegistry",
    "DecisionLog",
    "FeedbackRepository",
    "VoteRepository",
]
