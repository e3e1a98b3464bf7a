"""
Hand Cricket - Local Commentary

Fixed flavor-text tables used for every ball. Remote commentary may later
replace the text of the latest ball, but these lines always stand in when
it is unavailable.
"""

import random
from typing import ClassVar

from src.engine.base import CommentaryCategory, MatchPhase, MatchState, Team

_default_rng = random.Random()


COMMENTARY_LINES: dict[CommentaryCategory, tuple[str, ...]] = {
    CommentaryCategory.WICKET: (
        "Clean bowled! What a delivery!",
        "Caught! Straight into the hands of the fielder.",
        "LBW! That looked plump.",
        "Run out! A mix-up in the middle.",
        "Stumped! The batter was miles out.",
        "The bails go flying! He's gone!",
        "Edged and taken! The keeper makes no mistake.",
    ),
    CommentaryCategory.SINGLE: (
        "Quick single taken.",
        "Pushed to long-on for one.",
        "Smart cricket, rotating the strike.",
        "Tapped and run, good calling.",
        "Just a single off that one.",
    ),
    CommentaryCategory.DOUBLE: (
        "Placed into the gap, they come back for two.",
        "Good running between the wickets, two more.",
        "Worked off the pads for a couple.",
        "Hard-run two, the fielder was slow to react.",
    ),
    CommentaryCategory.TRIPLE: (
        "Chased down just inside the rope, three runs.",
        "Superb running, they turn it into three!",
        "Driven into the deep, that's three.",
        "The outfield slows it down, they settle for three.",
    ),
    CommentaryCategory.FOUR: (
        "Beautiful drive through the covers for four!",
        "Smashed to the boundary! Four runs.",
        "Elegant stroke play, finding the gap.",
        "Races away to the fence!",
        "Classy shot, just timed it perfectly.",
    ),
    CommentaryCategory.FIVE: (
        "Overthrows! A wild throw gifts them five.",
        "Five runs! The ball hits the helmet behind the keeper.",
        "Chaos in the field, they scamper five.",
        "A rare five, misfield and overthrow combined!",
    ),
    CommentaryCategory.SIX: (
        "Maximum! That's gone out of the park!",
        "Huge hit! All the way for six!",
        "That's massive! Into the top tier!",
        "Launched into orbit! What a strike!",
        "Clean hit! That's sailing over the ropes.",
    ),
}

_RUNS_TO_CATEGORY: dict[int, CommentaryCategory] = {
    1: CommentaryCategory.SINGLE,
    2: CommentaryCategory.DOUBLE,
    3: CommentaryCategory.TRIPLE,
    4: CommentaryCategory.FOUR,
    5: CommentaryCategory.FIVE,
    6: CommentaryCategory.SIX,
}


class CommentaryEngine:
    """Stateless lookup of local commentary and coach tips."""

    WELCOME_TIP: ClassVar[str] = "Welcome to the match! Start by building a solid inning."
    DEFEND_TIP: ClassVar[str] = "Defend the total! Mix up your deliveries."

    BATTING_TIPS: ClassVar[tuple[str, ...]] = (
        "Play straight and keep the scoreboard ticking.",
        "Mix up your numbers, don't get predictable.",
        "Rotate the strike, the big shots will come.",
        "Stay calm, wickets in hand are gold.",
    )
    BOWLING_TIPS: ClassVar[tuple[str, ...]] = (
        "Keep it tight, build the pressure.",
        "Change your pace, make them guess.",
        "Attack the stumps, one wicket ends it.",
        "Hold your nerve, the chase is on them.",
    )

    @classmethod
    def category_for(cls, runs: int, is_out: bool) -> CommentaryCategory:
        """Map a ball result to its commentary category."""
        if is_out:
            return CommentaryCategory.WICKET
        try:
            return _RUNS_TO_CATEGORY[runs]
        except KeyError:
            raise ValueError(f"No commentary category for {runs} runs.") from None

    @classmethod
    def pick_commentary(
        cls,
        runs: int,
        is_out: bool,
        rng: random.Random | None = None,
    ) -> str:
        """Pick a line uniformly from the ball's category."""
        lines = COMMENTARY_LINES[cls.category_for(runs, is_out)]
        return (rng or _default_rng).choice(lines)

    @classmethod
    def coach_tip(cls, state: MatchState, rng: random.Random | None = None) -> str | None:
        """Local coach tip for the current phase, None outside an innings."""
        rng = rng or _default_rng
        if state.phase is MatchPhase.FIRST_INNINGS:
            return rng.choice(cls.BATTING_TIPS)
        if state.phase is MatchPhase.SECOND_INNINGS:
            return rng.choice(cls.BOWLING_TIPS)
        return None

    @staticmethod
    def context_label(state: MatchState) -> str:
        """Short score context sent along with commentary requests."""
        if state.last_ball is not None and state.last_ball.batting_team is Team.B:
            return f"Chase: {state.score_b}/{state.target}"
        return f"Score: {state.score_a}"
