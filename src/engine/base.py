"""
Hand Cricket - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. Ball outcomes and match states are immutable (frozen
dataclasses); the match engine produces a new state for every operation.
"""

from dataclasses import dataclass, field
from enum import Enum, auto


BALLS_PER_OVER = 6
MIN_MOVE = 1
MAX_MOVE = 6


class Team(Enum):
    """The two sides of a match. Team A is the human's side and bats first."""
    A = "a"
    B = "b"

    @property
    def opponent(self) -> "Team":
        return Team.B if self is Team.A else Team.A


HUMAN_TEAM = Team.A


class MatchPhase(Enum):
    """Lifecycle phases of a match. Exactly one is active at a time."""
    MENU = "menu"
    FIRST_INNINGS = "first_innings"      # Team A bats, human bats
    INNINGS_BREAK = "innings_break"
    SECOND_INNINGS = "second_innings"    # Team B bats, human bowls
    MATCH_OVER = "match_over"

    @property
    def is_innings(self) -> bool:
        """Returns True if balls can be played in this phase."""
        return self in (MatchPhase.FIRST_INNINGS, MatchPhase.SECOND_INNINGS)


class CommentaryCategory(Enum):
    """Flavor-text categories. Dismissal and each run value have their own."""
    WICKET = auto()
    SINGLE = auto()
    DOUBLE = auto()
    TRIPLE = auto()
    FOUR = auto()
    FIVE = auto()
    SIX = auto()


def format_overs(balls: int) -> str:
    """Format a ball count as cricket overs, e.g. 14 balls -> ``"2.2"``."""
    return f"{balls // BALLS_PER_OVER}.{balls % BALLS_PER_OVER}"


@dataclass(frozen=True)
class BallOutcome:
    """
    A single resolved delivery.

    Attributes:
        batting_team: Side that was batting
        bowling_team: Side that was bowling
        batting_move: Number chosen by the batting side (1-6)
        bowling_move: Number chosen by the bowling side (1-6)
        is_out: Whether the numbers matched
        runs: Runs credited (0 on a dismissal, else the batting number)
        commentary: Display text, replaceable by enrichment
        sequence: 1-based position of this ball within the match history
    """
    batting_team: Team
    bowling_team: Team
    batting_move: int
    bowling_move: int
    is_out: bool
    runs: int
    commentary: str
    sequence: int = 0

    def __post_init__(self) -> None:
        """Validate the numeric fields agree with the resolution rule."""
        for name in ("batting_move", "bowling_move"):
            value = getattr(self, name)
            if not (MIN_MOVE <= value <= MAX_MOVE):
                raise ValueError(
                    f"Invalid {name} {value}. Must be between {MIN_MOVE} and {MAX_MOVE}."
                )
        if self.is_out != (self.batting_move == self.bowling_move):
            raise ValueError("is_out must be True exactly when both moves match.")
        expected_runs = 0 if self.is_out else self.batting_move
        if self.runs != expected_runs:
            raise ValueError(f"Expected {expected_runs} runs, got {self.runs}.")

    @property
    def is_maximum(self) -> bool:
        """Returns True for a six."""
        return not self.is_out and self.runs == MAX_MOVE


@dataclass(frozen=True)
class MatchState:
    """
    Complete state of a match.

    Attributes:
        phase: Current lifecycle phase
        score_a: Cumulative runs for Team A
        score_b: Cumulative runs for Team B
        target: Runs Team B needs, set when the first innings ends
        history: Every ball played this match, oldest first
        winner: Winning side, None while undecided or after a tie
        last_ball: Most recent ball since the last phase transition
        match_id: Identifier of this match, empty in the menu
    """
    phase: MatchPhase = MatchPhase.MENU
    score_a: int = 0
    score_b: int = 0
    target: int | None = None
    history: tuple[BallOutcome, ...] = field(default_factory=tuple)
    winner: Team | None = None
    last_ball: BallOutcome | None = None
    match_id: str = ""

    def score_for(self, team: Team) -> int:
        """Cumulative runs for a side."""
        return self.score_a if team is Team.A else self.score_b

    def balls_in_innings(self, team: Team) -> int:
        """Number of balls a side has faced."""
        return sum(1 for ball in self.history if ball.batting_team is team)

    @property
    def batting_team(self) -> Team | None:
        """Side currently at the crease, or None outside an innings."""
        if self.phase is MatchPhase.FIRST_INNINGS:
            return Team.A
        if self.phase is MatchPhase.SECOND_INNINGS:
            return Team.B
        return None

    @property
    def runs_needed(self) -> int | None:
        """Runs Team B still needs, or None before a target exists."""
        if self.target is None:
            return None
        return max(self.target - self.score_b, 0)

    @property
    def is_tie(self) -> bool:
        return self.phase is MatchPhase.MATCH_OVER and self.winner is None
