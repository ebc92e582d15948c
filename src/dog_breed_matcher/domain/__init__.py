"""Domain modules for breed matching."""

from .profile import UserProfile
from .ranking import ScoredBreed, rank_breeds
from .scoring import ScoreBreakdown, score_breakdown, score_breed
from .traits import DerivedTraits, derive_traits

__all__ = [
    "DerivedTraits",
    "ScoreBreakdown",
    "ScoredBreed",
    "UserProfile",
    "derive_traits",
    "rank_breeds",
    "score_breakdown",
    "score_breed",
]
