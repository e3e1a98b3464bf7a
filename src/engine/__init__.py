"""
Hand Cricket Game Engine.

Pure Python game logic with zero UI/network dependencies.
Handles the computer's biased moves, ball resolution and match phases.
"""

from src.engine.base import (
    HUMAN_TEAM,
    BallOutcome,
    CommentaryCategory,
    MatchPhase,
    MatchState,
    Team,
    format_overs,
)
from src.engine.commentary import CommentaryEngine
from src.engine.match import MatchEngine
from src.engine.opponent import OpponentEngine

__all__ = [
    # Data Classes
    "BallOutcome",
    "MatchState",
    # Enums
    "CommentaryCategory",
    "MatchPhase",
    "Team",
    "HUMAN_TEAM",
    # Engines
    "CommentaryEngine",
    "MatchEngine",
    "OpponentEngine",
    # Helpers
    "format_overs",
]
