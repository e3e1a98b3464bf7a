"""
Hand Cricket - Match Engine Tests

State machine transitions, scoring invariants and guarded commentary
updates.
"""

import random
from dataclasses import replace
from unittest.mock import patch

import pytest

from src.engine.base import MatchPhase, MatchState, Team
from src.engine.match import MatchEngine


# === Lifecycle ===


class TestLifecycle:
    def test_new_state_is_menu(self):
        state = MatchEngine.new_state()
        assert state.phase is MatchPhase.MENU
        assert state.score_a == 0
        assert state.score_b == 0
        assert state.target is None
        assert state.history == ()
        assert state.winner is None
        assert state.last_ball is None

    def test_start_match(self):
        state = MatchEngine.start_match(MatchEngine.new_state())
        assert state.phase is MatchPhase.FIRST_INNINGS
        assert state.match_id
        assert state.history == ()

    def test_each_start_gets_new_match_id(self):
        first = MatchEngine.start_match()
        second = MatchEngine.start_match(first)
        assert first.match_id != second.match_id

    def test_restart_resets_everything(self, chase_state):
        state = chase_state(score_b=20, target=40)
        restarted = MatchEngine.restart_match(state)
        assert restarted.phase is MatchPhase.FIRST_INNINGS
        assert restarted.score_a == 0
        assert restarted.score_b == 0
        assert restarted.target is None
        assert restarted.match_id != state.match_id

    def test_return_to_menu(self, chase_state):
        state = MatchEngine.return_to_menu(chase_state(score_b=20, target=40))
        assert state == MatchEngine.new_state()

    @pytest.mark.parametrize(
        "phase",
        [MatchPhase.MENU, MatchPhase.INNINGS_BREAK, MatchPhase.MATCH_OVER],
    )
    def test_play_ball_outside_innings_is_noop(self, phase):
        state = MatchState(phase=phase, score_a=12, target=13)
        assert MatchEngine.play_ball(state, 3) is state


# === First innings ===


class TestFirstInnings:
    def test_protected_ball_scores(self, first_innings_state, scripted_rng):
        """Input 3, accidental match overridden at a low score."""
        rng = scripted_rng(ints=[3], floats=[0.0])
        state = MatchEngine.play_ball(first_innings_state, 3, rng=rng)

        assert state.score_a == 3
        assert state.phase is MatchPhase.FIRST_INNINGS
        assert len(state.history) == 1
        assert state.last_ball.is_out is False
        assert state.last_ball.bowling_move == 4

    def test_ball_records_roles(self, first_innings_state, scripted_rng):
        state = MatchEngine.play_ball(first_innings_state, 5, rng=scripted_rng(ints=[2]))
        ball = state.last_ball
        assert ball.batting_team is Team.A
        assert ball.bowling_team is Team.B
        assert ball.batting_move == 5
        assert ball.bowling_move == 2
        assert ball.runs == 5
        assert ball.sequence == 1
        assert ball.commentary

    def test_target_none_during_innings(self, first_innings_state):
        rng = random.Random(11)
        state = first_innings_state
        while state.phase is MatchPhase.FIRST_INNINGS:
            assert state.target is None
            state = MatchEngine.play_ball(state, 2, rng=rng)

    def test_score_is_sum_of_runs(self, first_innings_state):
        rng = random.Random(5)
        state = first_innings_state
        previous = 0
        for count in range(1, 200):
            state = MatchEngine.play_ball(state, rng.randint(1, 6), rng=rng)
            assert len(state.history) == count
            assert state.score_a >= previous
            assert state.score_a == sum(b.runs for b in state.history)
            previous = state.score_a
            if state.phase is not MatchPhase.FIRST_INNINGS:
                break

    def test_drive_to_96_then_forced_dismissal(self, first_innings_state, scripted_rng):
        # Sixteen sixes against a bowled 1; the ball at 90 survives the pressure roll
        rng = scripted_rng(ints=[1] * 16, floats=[0.99])
        state = first_innings_state
        for _ in range(16):
            state = MatchEngine.play_ball(state, 6, rng=rng)
        assert state.score_a == 96
        assert state.phase is MatchPhase.FIRST_INNINGS

        state = MatchEngine.play_ball(state, 6, rng=rng)
        assert state.last_ball.is_out is True
        assert state.last_ball.runs == 0
        assert state.phase is MatchPhase.INNINGS_BREAK
        assert state.target == 97
        assert state.score_a == 96
        assert state.winner is None

    def test_dismissal_sets_target(self, first_innings_state, scripted_rng):
        state = replace(first_innings_state, score_a=20)
        # Accidental match, protection roll fails
        state = MatchEngine.play_ball(state, 4, rng=scripted_rng(ints=[4], floats=[0.99]))
        assert state.phase is MatchPhase.INNINGS_BREAK
        assert state.target == 21


# === Innings break ===


class TestInningsBreak:
    def test_start_second_innings(self):
        ball_state = MatchEngine.play_ball(
            MatchState(phase=MatchPhase.FIRST_INNINGS, score_a=96, match_id="m"), 2
        )
        assert ball_state.phase is MatchPhase.INNINGS_BREAK
        assert ball_state.last_ball is not None

        state = MatchEngine.start_second_innings(ball_state)
        assert state.phase is MatchPhase.SECOND_INNINGS
        assert state.last_ball is None
        assert state.score_a == ball_state.score_a
        assert state.score_b == ball_state.score_b
        assert state.target == ball_state.target
        assert state.history == ball_state.history

    @pytest.mark.parametrize(
        "phase",
        [MatchPhase.MENU, MatchPhase.FIRST_INNINGS, MatchPhase.SECOND_INNINGS, MatchPhase.MATCH_OVER],
    )
    def test_start_second_innings_elsewhere_is_noop(self, phase):
        state = MatchState(phase=phase)
        assert MatchEngine.start_second_innings(state) is state


# === Second innings ===


class TestSecondInnings:
    @pytest.mark.parametrize("move", [1, 2, 3, 4, 5, 6])
    def test_kill_switch_ends_match_for_team_a(self, chase_state, move):
        state = MatchEngine.play_ball(chase_state(score_b=45, target=50), move)
        assert state.last_ball.is_out is True
        assert state.last_ball.batting_team is Team.B
        assert state.last_ball.bowling_move == move
        assert state.phase is MatchPhase.MATCH_OVER
        assert state.winner is Team.A

    def test_tie_one_short_of_target(self, chase_state):
        state = MatchEngine.play_ball(chase_state(score_b=49, target=50), 3)
        assert state.phase is MatchPhase.MATCH_OVER
        assert state.winner is None
        assert state.is_tie
        assert state.score_b == state.target - 1

    def test_two_short_is_team_a_win(self, chase_state):
        state = MatchEngine.play_ball(chase_state(score_b=48, target=50), 3)
        assert state.winner is Team.A
        assert not state.is_tie

    def test_chase_continues(self, chase_state, scripted_rng):
        rng = scripted_rng(ints=[5], floats=[0.9])
        state = MatchEngine.play_ball(chase_state(score_b=0, target=50), 2, rng=rng)
        assert state.phase is MatchPhase.SECOND_INNINGS
        assert state.score_b == 5
        assert state.score_a == 49
        assert state.winner is None

    def test_reaching_target_wins_for_team_b(self, chase_state):
        with patch("src.engine.match.OpponentEngine.compute_move", return_value=6):
            state = MatchEngine.play_ball(chase_state(score_b=45, target=50), 1)
        assert state.score_b == 51
        assert state.phase is MatchPhase.MATCH_OVER
        assert state.winner is Team.B

    def test_target_reached_checked_before_dismissal(self):
        ball = MatchEngine.resolve_ball(Team.B, 3, 3, sequence=1)
        phase, target, winner = MatchEngine._transition(
            MatchPhase.SECOND_INNINGS, ball, 49, 50, 50
        )
        assert phase is MatchPhase.MATCH_OVER
        assert winner is Team.B
        assert target == 50


# === Full-match invariants ===


class TestMatchInvariants:
    @pytest.mark.parametrize("seed", range(40))
    def test_random_full_match(self, seed):
        rng = random.Random(seed)
        state = MatchEngine.start_match()
        target_at_break = None

        for _ in range(1000):
            if state.phase is MatchPhase.INNINGS_BREAK:
                assert state.winner is None
                target_at_break = state.target
                state = MatchEngine.start_second_innings(state)
                continue
            if state.phase is MatchPhase.MATCH_OVER:
                break

            before = state
            state = MatchEngine.play_ball(state, rng.randint(1, 6), rng=rng)
            ball = state.last_ball

            assert len(state.history) == len(before.history) + 1
            assert ball.is_out == (ball.batting_move == ball.bowling_move)
            if ball.is_out:
                assert ball.runs == 0
            assert state.score_a >= before.score_a
            assert state.score_b >= before.score_b
            if state.phase is not MatchPhase.MATCH_OVER:
                assert state.winner is None
            if target_at_break is not None:
                assert state.target == target_at_break

        assert state.phase is MatchPhase.MATCH_OVER
        assert target_at_break == state.score_a + 1
        # The chase is always stopped before the target
        assert state.winner is Team.A or (
            state.winner is None and state.score_b == state.target - 1
        )


# === Commentary enrichment ===


class TestApplyCommentary:
    @pytest.fixture
    def played(self, first_innings_state, scripted_rng):
        state = MatchEngine.play_ball(first_innings_state, 4, rng=scripted_rng(ints=[1]))
        return MatchEngine.play_ball(state, 2, rng=scripted_rng(ints=[1]))

    def test_updates_latest_ball(self, played):
        state = MatchEngine.apply_commentary(played, played.match_id, 2, "Glorious!")
        assert state.last_ball.commentary == "Glorious!"
        assert state.history[-1].commentary == "Glorious!"

    def test_numeric_fields_untouched(self, played):
        state = MatchEngine.apply_commentary(played, played.match_id, 2, "Glorious!")
        before, after = played.last_ball, state.last_ball
        assert (after.batting_move, after.bowling_move, after.is_out, after.runs) == (
            before.batting_move,
            before.bowling_move,
            before.is_out,
            before.runs,
        )
        assert state.score_a == played.score_a

    def test_stale_sequence_discarded(self, played):
        assert MatchEngine.apply_commentary(played, played.match_id, 1, "Old news") is played

    def test_other_match_discarded(self, played):
        assert MatchEngine.apply_commentary(played, "another-match", 2, "Wrong match") is played

    def test_empty_text_discarded(self, played):
        assert MatchEngine.apply_commentary(played, played.match_id, 2, "") is played

    def test_after_second_innings_start_discarded(self):
        state = MatchEngine.play_ball(
            MatchState(phase=MatchPhase.FIRST_INNINGS, score_a=96, match_id="m"), 2
        )
        state = MatchEngine.start_second_innings(state)
        assert MatchEngine.apply_commentary(state, "m", 1, "Late") is state
