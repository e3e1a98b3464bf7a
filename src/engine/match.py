"""
Hand Cricket - Match Engine

Two-innings, single-wicket hand cricket. Each ball both sides pick a
number 1-6: matching numbers is a dismissal, otherwise the batting side
scores its number. Team A (the human) bats first and sets a target of its
score plus one; Team B chases it.

All methods are stateless class methods operating on immutable data.
State is passed in and returned, never stored. Operations called in a
phase where they are not defined return the state unchanged.
"""

import logging
import random
import uuid
from dataclasses import replace

from src.engine.base import (
    HUMAN_TEAM,
    BallOutcome,
    MatchPhase,
    MatchState,
    Team,
)
from src.engine.commentary import CommentaryEngine
from src.engine.opponent import OpponentEngine

logger = logging.getLogger(__name__)

# (batting, bowling) for each phase in which balls can be played
_INNINGS_ROLES: dict[MatchPhase, tuple[Team, Team]] = {
    MatchPhase.FIRST_INNINGS: (Team.A, Team.B),
    MatchPhase.SECOND_INNINGS: (Team.B, Team.A),
}


class MatchEngine:
    """
    Stateless state machine for a hand cricket match.

    Phases advance FIRST_INNINGS -> INNINGS_BREAK -> SECOND_INNINGS ->
    MATCH_OVER, with restart and return-to-menu available from anywhere.
    """

    @classmethod
    def new_state(cls) -> MatchState:
        """The empty menu state."""
        return MatchState()

    @classmethod
    def start_match(cls, state: MatchState | None = None) -> MatchState:
        """Begin a fresh match in the first innings.

        The previous state, if any, is discarded.
        """
        match_id = uuid.uuid4().hex
        logger.info("Match %s started", match_id)
        return MatchState(phase=MatchPhase.FIRST_INNINGS, match_id=match_id)

    @classmethod
    def restart_match(cls, state: MatchState) -> MatchState:
        """Equivalent to starting a new match from any phase."""
        return cls.start_match(state)

    @classmethod
    def return_to_menu(cls, state: MatchState) -> MatchState:
        """Abandon the match and return to the empty menu state."""
        if state.match_id:
            logger.info("Match %s abandoned for menu", state.match_id)
        return cls.new_state()

    @classmethod
    def start_second_innings(cls, state: MatchState) -> MatchState:
        """Move from the innings break into the chase.

        Scores and target are untouched; the last ball is cleared.
        """
        if state.phase is not MatchPhase.INNINGS_BREAK:
            return state
        return replace(state, phase=MatchPhase.SECOND_INNINGS, last_ball=None)

    @classmethod
    def resolve_ball(
        cls,
        batting_team: Team,
        batting_move: int,
        bowling_move: int,
        sequence: int,
        rng: random.Random | None = None,
    ) -> BallOutcome:
        """Resolve two numbers into a ball outcome with local commentary."""
        is_out = batting_move == bowling_move
        runs = 0 if is_out else batting_move
        return BallOutcome(
            batting_team=batting_team,
            bowling_team=batting_team.opponent,
            batting_move=batting_move,
            bowling_move=bowling_move,
            is_out=is_out,
            runs=runs,
            commentary=CommentaryEngine.pick_commentary(runs, is_out, rng),
            sequence=sequence,
        )

    @classmethod
    def play_ball(
        cls,
        state: MatchState,
        human_move: int,
        rng: random.Random | None = None,
    ) -> MatchState:
        """
        Play one ball with the human's number.

        The computer's number comes from OpponentEngine. Outside an
        innings this is a no-op.

        Args:
            state: Current match state
            human_move: Number the human chose (1-6)
            rng: Source of randomness for the computer and commentary

        Returns:
            The next match state
        """
        roles = _INNINGS_ROLES.get(state.phase)
        if roles is None:
            return state
        batting_team, bowling_team = roles

        computer_move = OpponentEngine.compute_move(
            human_move,
            batting_team,
            state.score_a,
            state.score_b,
            state.target,
            rng=rng,
        )
        if batting_team is HUMAN_TEAM:
            batting_move, bowling_move = human_move, computer_move
        else:
            batting_move, bowling_move = computer_move, human_move

        ball = cls.resolve_ball(
            batting_team,
            batting_move,
            bowling_move,
            sequence=len(state.history) + 1,
            rng=rng,
        )

        score_a, score_b = state.score_a, state.score_b
        if not ball.is_out:
            if batting_team is Team.A:
                score_a += ball.runs
            else:
                score_b += ball.runs

        phase, target, winner = cls._transition(
            state.phase, ball, score_a, score_b, state.target
        )

        logger.debug(
            "Ball %d: %s %d vs %d -> %s",
            ball.sequence,
            batting_team.name,
            batting_move,
            bowling_move,
            "OUT" if ball.is_out else f"{ball.runs} runs",
        )

        return replace(
            state,
            phase=phase,
            score_a=score_a,
            score_b=score_b,
            target=target,
            history=state.history + (ball,),
            winner=winner,
            last_ball=ball,
        )

    @classmethod
    def _transition(
        cls,
        phase: MatchPhase,
        ball: BallOutcome,
        score_a: int,
        score_b: int,
        target: int | None,
    ) -> tuple[MatchPhase, int | None, Team | None]:
        """Phase, target and winner after a ball has been scored."""
        if phase is MatchPhase.FIRST_INNINGS:
            if ball.is_out:
                target = score_a + 1
                logger.info("Innings break: Team A all out for %d, target %d", score_a, target)
                return MatchPhase.INNINGS_BREAK, target, None
            return phase, target, None

        if phase is MatchPhase.SECOND_INNINGS:
            if target is None:
                raise ValueError("Second innings has no target.")
            # Reaching the target wins even if the same ball is a dismissal
            if score_b >= target:
                logger.info("Match over: Team B chased %d", target)
                return MatchPhase.MATCH_OVER, target, Team.B
            if ball.is_out:
                if score_b == target - 1:
                    logger.info("Match over: tie on %d", score_b)
                    return MatchPhase.MATCH_OVER, target, None
                logger.info("Match over: Team A defended %d", target)
                return MatchPhase.MATCH_OVER, target, Team.A
            return phase, target, None

        raise ValueError(f"No ball transition from {phase.name}.")

    @classmethod
    def apply_commentary(
        cls,
        state: MatchState,
        match_id: str,
        sequence: int,
        commentary: str,
    ) -> MatchState:
        """
        Replace the commentary of the latest ball.

        Applied only if ``(match_id, sequence)`` still identifies the
        latest ball; anything else is a stale update and is discarded.
        Numeric fields are never touched.
        """
        last = state.last_ball
        if (
            not commentary
            or last is None
            or state.match_id != match_id
            or last.sequence != sequence
        ):
            logger.debug("Discarded stale commentary for ball %s/%d", match_id, sequence)
            return state

        updated = replace(last, commentary=commentary)
        history = state.history[:-1] + (updated,)
        return replace(state, history=history, last_ball=updated)
