"""
Hand Cricket - Match Event Tests
"""

import pytest

from src.engine.base import BallOutcome, MatchPhase, MatchState, Team
from src.engine.match import MatchEngine
from src.realtime.events import (
    EventPayload,
    MatchEvent,
    build_payloads,
    classify_ball,
    classify_transition,
)


def ball(bat, bowl, team=Team.A, sequence=1):
    is_out = bat == bowl
    return BallOutcome(
        batting_team=team,
        bowling_team=team.opponent,
        batting_move=bat,
        bowling_move=bowl,
        is_out=is_out,
        runs=0 if is_out else bat,
        commentary="...",
        sequence=sequence,
    )


class TestClassifyBall:
    def test_no_ball(self):
        assert classify_ball(MatchState(phase=MatchPhase.FIRST_INNINGS)) == []

    @pytest.mark.parametrize(
        "bat,bowl,event",
        [
            (1, 2, MatchEvent.RUNS_SCORED),
            (3, 2, MatchEvent.RUNS_SCORED),
            (4, 2, MatchEvent.BOUNDARY),
            (5, 2, MatchEvent.RUNS_SCORED),
            (6, 2, MatchEvent.MAXIMUM),
            (2, 2, MatchEvent.WICKET),
        ],
    )
    def test_ball_events(self, bat, bowl, event):
        state = MatchState(phase=MatchPhase.FIRST_INNINGS, last_ball=ball(bat, bowl))
        assert classify_ball(state) == [event]

    def test_innings_break(self):
        state = MatchState(phase=MatchPhase.INNINGS_BREAK, last_ball=ball(2, 2))
        assert classify_ball(state) == [MatchEvent.WICKET, MatchEvent.INNINGS_BREAK]

    def test_match_won(self):
        state = MatchState(
            phase=MatchPhase.MATCH_OVER, winner=Team.A, last_ball=ball(3, 3, team=Team.B)
        )
        assert classify_ball(state) == [MatchEvent.WICKET, MatchEvent.MATCH_WON]

    def test_match_tied(self):
        state = MatchState(
            phase=MatchPhase.MATCH_OVER, winner=None, last_ball=ball(3, 3, team=Team.B)
        )
        assert classify_ball(state) == [MatchEvent.WICKET, MatchEvent.MATCH_TIED]


class TestClassifyTransition:
    def test_same_state(self):
        state = MatchEngine.start_match()
        assert classify_transition(state, state) == []

    def test_match_started(self):
        before = MatchEngine.new_state()
        assert classify_transition(before, MatchEngine.start_match(before)) == [
            MatchEvent.MATCH_STARTED
        ]

    def test_restart_is_match_started(self, chase_state):
        before = chase_state(score_b=10, target=30)
        assert classify_transition(before, MatchEngine.restart_match(before)) == [
            MatchEvent.MATCH_STARTED
        ]

    def test_returned_to_menu(self, first_innings_state):
        after = MatchEngine.return_to_menu(first_innings_state)
        assert classify_transition(first_innings_state, after) == [MatchEvent.RETURNED_TO_MENU]

    def test_menu_to_menu_is_silent(self):
        assert classify_transition(MatchState(), MatchState()) == []

    def test_second_innings_started(self):
        before = MatchState(phase=MatchPhase.INNINGS_BREAK, score_a=20, target=21, match_id="m")
        after = MatchEngine.start_second_innings(before)
        assert classify_transition(before, after) == [MatchEvent.SECOND_INNINGS_STARTED]

    def test_ball_played(self, first_innings_state, scripted_rng):
        after = MatchEngine.play_ball(first_innings_state, 6, rng=scripted_rng(ints=[1]))
        assert classify_transition(first_innings_state, after) == [MatchEvent.MAXIMUM]

    def test_commentary_update_is_silent(self, first_innings_state, scripted_rng):
        played = MatchEngine.play_ball(first_innings_state, 4, rng=scripted_rng(ints=[1]))
        updated = MatchEngine.apply_commentary(played, played.match_id, 1, "What a shot")
        assert classify_transition(played, updated) == []


class TestBuildPayloads:
    def test_payload_refers_to_ball(self, first_innings_state, scripted_rng):
        after = MatchEngine.play_ball(first_innings_state, 4, rng=scripted_rng(ints=[2]))
        payloads = build_payloads(first_innings_state, after)

        assert payloads == [
            EventPayload(
                event=MatchEvent.BOUNDARY,
                match_id="match-1",
                sequence=1,
                data={"phase": "first_innings", "score_a": 4, "score_b": 0, "target": None},
            )
        ]

    def test_payload_without_ball(self):
        before = MatchEngine.new_state()
        after = MatchEngine.start_match(before)
        (payload,) = build_payloads(before, after)
        assert payload.event is MatchEvent.MATCH_STARTED
        assert payload.sequence is None
        assert payload.match_id == after.match_id

    def test_final_ball_payloads(self, chase_state):
        before = chase_state(score_b=45, target=50)
        after = MatchEngine.play_ball(before, 2)
        events = [p.event for p in build_payloads(before, after)]
        assert events == [MatchEvent.WICKET, MatchEvent.MATCH_WON]
        assert after.phase is MatchPhase.MATCH_OVER
