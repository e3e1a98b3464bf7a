"""
Hand Cricket - Match Session

The single controller that owns a match. It serialises the engine
operations, records events for the UI, and schedules optional enrichment
(AI commentary, coach tips, voice, venue) whose results are applied only
if they still refer to the current match and latest ball.
"""

from __future__ import annotations

import logging
import random
import threading
from functools import partial

from src.config.settings import Settings, get_settings
from src.engine.base import BALLS_PER_OVER, MatchState
from src.engine.commentary import CommentaryEngine
from src.engine.match import MatchEngine
from src.engine.validators import validate_move
from src.realtime.events import EventPayload, MatchEvent, build_payloads
from src.realtime.worker import EnrichmentWorker
from src.services.models import VenueInfo
from src.services.provider import CommentaryProvider

logger = logging.getLogger(__name__)

_VOICE_EVENTS = frozenset({MatchEvent.WICKET, MatchEvent.MAXIMUM})


class MatchSession:
    """Owns one MatchState and the flavor attached to it.

    All operations hold a lock for their whole duration, so two
    ``play_ball`` calls can never interleave. Enrichment callbacks arrive
    on the worker thread and take the same lock.
    """

    def __init__(
        self,
        provider: CommentaryProvider | None = None,
        worker: EnrichmentWorker | None = None,
        *,
        rng: random.Random | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._provider = provider
        self._worker = worker
        self._rng = rng or random.Random()
        self._lock = threading.RLock()

        self._state = MatchEngine.new_state()
        self._coach_tip: str | None = None
        self._venue: VenueInfo | None = None
        self._voice_clip: bytes | None = None
        self._pending_tips = 0
        self._tip_sequence = 0
        self._events: list[EventPayload] = []
        self._revision = 0

    # -- Read-only views -------------------------------------------------

    @property
    def state(self) -> MatchState:
        return self._state

    @property
    def coach_tip(self) -> str | None:
        return self._coach_tip

    @property
    def venue(self) -> VenueInfo | None:
        return self._venue

    @property
    def is_ai_loading(self) -> bool:
        """Returns True while a coach tip request is in flight."""
        return self._pending_tips > 0

    @property
    def revision(self) -> int:
        """Bumped on every change, including late enrichment."""
        return self._revision

    def take_voice_clip(self) -> bytes | None:
        """Pop the pending voice clip so it plays once."""
        with self._lock:
            clip, self._voice_clip = self._voice_clip, None
            return clip

    def drain_events(self) -> list[EventPayload]:
        """Pop the events recorded since the last call."""
        with self._lock:
            events, self._events = self._events, []
            return events

    # -- Operations ------------------------------------------------------

    def start_match(self) -> MatchState:
        """Start a new match from the menu (or anywhere)."""
        with self._lock:
            self._reset(MatchEngine.start_match(self._state))
            self._coach_tip = CommentaryEngine.WELCOME_TIP
            self._schedule_venue_lookup()
            return self._state

    def restart_match(self) -> MatchState:
        """Throw the current match away and start again."""
        with self._lock:
            self._reset(MatchEngine.restart_match(self._state))
            self._schedule_venue_lookup()
            return self._state

    def return_to_menu(self) -> MatchState:
        with self._lock:
            self._reset(MatchEngine.return_to_menu(self._state))
            return self._state

    def start_second_innings(self) -> MatchState:
        """Begin the chase; ignored outside the innings break."""
        with self._lock:
            after = MatchEngine.start_second_innings(self._state)
            if after is not self._state:
                self._commit(after)
                self._coach_tip = CommentaryEngine.DEFEND_TIP
                # First-innings tips still in flight must not replace it
                self._tip_sequence = len(after.history) + 1
            return self._state

    def play_ball(self, human_move: int) -> MatchState:
        """
        Play one ball with the human's number.

        Out-of-range input is rejected here and never reaches the engine.

        Returns:
            The state after the ball (unchanged if the input was rejected
            or no innings is in progress)
        """
        try:
            validate_move(human_move)
        except ValueError as exc:
            logger.warning("Rejected move %r: %s", human_move, exc)
            return self._state

        with self._lock:
            after = MatchEngine.play_ball(self._state, human_move, rng=self._rng)
            if after is self._state:
                return after
            events = self._commit(after)
            self._schedule_enrichment(after, events)
            return after

    # -- Internals -------------------------------------------------------

    def _reset(self, state: MatchState) -> None:
        self._commit(state)
        self._coach_tip = None
        self._venue = None
        self._voice_clip = None
        self._pending_tips = 0
        self._tip_sequence = 0

    def _commit(self, after: MatchState) -> set[MatchEvent]:
        """Store a new state and record the events it caused."""
        payloads = build_payloads(self._state, after)
        self._state = after
        self._events.extend(payloads)
        self._revision += 1
        return {p.event for p in payloads}

    @property
    def _enrichment_ready(self) -> bool:
        return (
            self._provider is not None
            and self._worker is not None
            and self._provider.available
        )

    def _schedule_venue_lookup(self) -> None:
        if not self._enrichment_ready:
            return
        self._worker.submit(
            self._provider.lookup_venue(),
            on_result=partial(self._apply_venue, self._state.match_id),
        )

    def _schedule_enrichment(self, state: MatchState, events: set[MatchEvent]) -> None:
        ball = state.last_ball
        if ball is None:
            return

        over_complete = (
            not ball.is_out
            and state.phase.is_innings
            and len(state.history) % BALLS_PER_OVER == 0
        )

        if not self._enrichment_ready:
            if over_complete:
                self._coach_tip = CommentaryEngine.coach_tip(state, self._rng)
            return

        key = (state.match_id, ball.sequence)

        if self._rng.random() < self._settings.ai_commentary_probability:
            self._worker.submit(
                self._provider.fetch_ball_commentary(
                    ball.batting_team,
                    ball.bowling_team,
                    ball.runs,
                    ball.is_out,
                    CommentaryEngine.context_label(state),
                ),
                on_result=partial(self._apply_commentary, *key),
            )

        if self._settings.enable_voice and events & _VOICE_EVENTS:
            self._worker.submit(
                self._provider.synthesize_speech(ball.commentary),
                on_result=partial(self._apply_voice, *key),
            )

        if over_complete:
            self._pending_tips += 1
            self._tip_sequence = ball.sequence
            self._worker.submit(
                self._provider.fetch_coach_tip(state),
                on_result=partial(self._apply_coach_tip, *key),
            )

    def _apply_commentary(self, match_id: str, sequence: int, text: str | None) -> None:
        if not text:
            return
        with self._lock:
            after = MatchEngine.apply_commentary(self._state, match_id, sequence, text)
            if after is not self._state:
                self._state = after
                self._revision += 1

    def _apply_voice(self, match_id: str, sequence: int, clip: bytes | None) -> None:
        if not clip:
            return
        with self._lock:
            last = self._state.last_ball
            if self._state.match_id != match_id or last is None or last.sequence != sequence:
                logger.debug("Discarded stale voice clip for ball %s/%d", match_id, sequence)
                return
            self._voice_clip = clip
            self._revision += 1

    def _apply_coach_tip(self, match_id: str, sequence: int, tip: str | None) -> None:
        with self._lock:
            # Requests from an abandoned match were dropped from the count on reset
            if self._state.match_id != match_id:
                return
            self._pending_tips = max(self._pending_tips - 1, 0)
            if sequence < self._tip_sequence or not self._state.phase.is_innings:
                logger.debug("Discarded stale coach tip for ball %s/%d", match_id, sequence)
                return
            self._coach_tip = tip or CommentaryEngine.coach_tip(self._state, self._rng)
            self._revision += 1

    def _apply_venue(self, match_id: str, venue: VenueInfo | None) -> None:
        if venue is None:
            return
        with self._lock:
            if self._state.match_id != match_id:
                return
            self._venue = venue
            self._revision += 1
