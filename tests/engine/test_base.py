"""
Hand Cricket - Base Type Tests
"""

import pytest

from src.engine.base import (
    BallOutcome,
    MatchPhase,
    MatchState,
    Team,
    format_overs,
)


def make_ball(bat=4, bowl=2, team=Team.A, **overrides):
    is_out = bat == bowl
    fields = dict(
        batting_team=team,
        bowling_team=team.opponent,
        batting_move=bat,
        bowling_move=bowl,
        is_out=is_out,
        runs=0 if is_out else bat,
        commentary="Shot!",
        sequence=1,
    )
    fields.update(overrides)
    return BallOutcome(**fields)


class TestTeam:
    def test_opponent(self):
        assert Team.A.opponent is Team.B
        assert Team.B.opponent is Team.A


class TestMatchPhase:
    @pytest.mark.parametrize(
        "phase,expected",
        [
            (MatchPhase.MENU, False),
            (MatchPhase.FIRST_INNINGS, True),
            (MatchPhase.INNINGS_BREAK, False),
            (MatchPhase.SECOND_INNINGS, True),
            (MatchPhase.MATCH_OVER, False),
        ],
    )
    def test_is_innings(self, phase, expected):
        assert phase.is_innings is expected


class TestFormatOvers:
    @pytest.mark.parametrize("balls,expected", [(0, "0.0"), (5, "0.5"), (6, "1.0"), (14, "2.2")])
    def test_format(self, balls, expected):
        assert format_overs(balls) == expected


class TestBallOutcome:
    def test_scoring_ball(self):
        ball = make_ball(bat=5, bowl=1)
        assert ball.runs == 5
        assert not ball.is_out
        assert not ball.is_maximum

    def test_dismissal(self):
        ball = make_ball(bat=3, bowl=3)
        assert ball.is_out
        assert ball.runs == 0

    def test_maximum(self):
        assert make_ball(bat=6, bowl=2).is_maximum
        assert not make_ball(bat=6, bowl=6).is_maximum

    def test_frozen(self):
        ball = make_ball()
        with pytest.raises(AttributeError):
            ball.runs = 6

    @pytest.mark.parametrize("bat,bowl", [(0, 3), (7, 3), (3, 0), (3, 7)])
    def test_move_range(self, bat, bowl):
        with pytest.raises(ValueError, match="Must be between 1 and 6"):
            make_ball(bat=bat, bowl=bowl, is_out=False, runs=0)

    def test_out_flag_must_match_moves(self):
        with pytest.raises(ValueError, match="is_out"):
            make_ball(bat=3, bowl=3, is_out=False, runs=3)

    def test_no_runs_on_dismissal(self):
        with pytest.raises(ValueError, match="Expected 0 runs"):
            make_ball(bat=3, bowl=3, runs=3)

    def test_runs_equal_batting_move(self):
        with pytest.raises(ValueError, match="Expected 4 runs"):
            make_ball(bat=4, bowl=1, runs=2)


class TestMatchState:
    def test_defaults(self):
        state = MatchState()
        assert state.phase is MatchPhase.MENU
        assert state.batting_team is None
        assert state.runs_needed is None
        assert not state.is_tie

    def test_score_for(self):
        state = MatchState(score_a=40, score_b=12)
        assert state.score_for(Team.A) == 40
        assert state.score_for(Team.B) == 12

    def test_batting_team(self):
        assert MatchState(phase=MatchPhase.FIRST_INNINGS).batting_team is Team.A
        assert MatchState(phase=MatchPhase.SECOND_INNINGS).batting_team is Team.B
        assert MatchState(phase=MatchPhase.INNINGS_BREAK).batting_team is None

    def test_runs_needed(self):
        assert MatchState(score_b=30, target=50).runs_needed == 20
        assert MatchState(score_b=55, target=50).runs_needed == 0

    def test_balls_in_innings(self):
        history = (
            make_ball(team=Team.A, sequence=1),
            make_ball(bat=2, bowl=2, team=Team.A, sequence=2),
            make_ball(team=Team.B, sequence=3),
        )
        state = MatchState(history=history)
        assert state.balls_in_innings(Team.A) == 2
        assert state.balls_in_innings(Team.B) == 1

    def test_tie(self):
        assert MatchState(phase=MatchPhase.MATCH_OVER, winner=None).is_tie
        assert not MatchState(phase=MatchPhase.MATCH_OVER, winner=Team.A).is_tie
