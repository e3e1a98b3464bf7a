"""
Hand Cricket - Match Event Definitions

Event types derived from match state changes. The UI turns them into
sound effects; the session uses them to decide which enrichment to fetch.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from src.engine.base import MatchPhase, MatchState


class MatchEvent(Enum):
    """Events that can occur during a match."""

    MATCH_STARTED = auto()
    RUNS_SCORED = auto()
    BOUNDARY = auto()
    MAXIMUM = auto()
    WICKET = auto()
    INNINGS_BREAK = auto()
    SECOND_INNINGS_STARTED = auto()
    MATCH_WON = auto()
    MATCH_TIED = auto()
    RETURNED_TO_MENU = auto()


@dataclass
class EventPayload:
    """Wrapper for event data."""

    event: MatchEvent
    match_id: str
    sequence: int | None = None
    data: dict[str, Any] = field(default_factory=dict)


# Map phase changes caused by a ball to events
_BALL_PHASE_EVENT_MAP: dict[MatchPhase, MatchEvent] = {
    MatchPhase.INNINGS_BREAK: MatchEvent.INNINGS_BREAK,
}

_BOUNDARY_RUNS = 4
_MAXIMUM_RUNS = 6


def classify_ball(state: MatchState) -> list[MatchEvent]:
    """Events for the latest ball of a state."""
    ball = state.last_ball
    if ball is None:
        return []

    if ball.is_out:
        events = [MatchEvent.WICKET]
    elif ball.runs == _MAXIMUM_RUNS:
        events = [MatchEvent.MAXIMUM]
    elif ball.runs == _BOUNDARY_RUNS:
        events = [MatchEvent.BOUNDARY]
    else:
        events = [MatchEvent.RUNS_SCORED]

    if state.phase in _BALL_PHASE_EVENT_MAP:
        events.append(_BALL_PHASE_EVENT_MAP[state.phase])
    elif state.phase is MatchPhase.MATCH_OVER:
        events.append(MatchEvent.MATCH_TIED if state.winner is None else MatchEvent.MATCH_WON)

    return events


def classify_transition(before: MatchState, after: MatchState) -> list[MatchEvent]:
    """Determine the events caused by moving from one state to the next."""
    if after is before:
        return []

    if after.phase is MatchPhase.MENU:
        return [MatchEvent.RETURNED_TO_MENU] if before.phase is not MatchPhase.MENU else []

    if after.match_id != before.match_id:
        return [MatchEvent.MATCH_STARTED]

    if (
        before.phase is MatchPhase.INNINGS_BREAK
        and after.phase is MatchPhase.SECOND_INNINGS
    ):
        return [MatchEvent.SECOND_INNINGS_STARTED]

    if len(after.history) > len(before.history):
        return classify_ball(after)

    return []


def build_payloads(
    before: MatchState, after: MatchState
) -> list[EventPayload]:
    """Wrap the events of a transition with the ball they refer to."""
    ball = after.last_ball
    return [
        EventPayload(
            event=event,
            match_id=after.match_id,
            sequence=ball.sequence if ball is not None else None,
            data={
                "phase": after.phase.value,
                "score_a": after.score_a,
                "score_b": after.score_b,
                "target": after.target,
            },
        )
        for event in classify_transition(before, after)
    ]
