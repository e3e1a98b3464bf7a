"""
Hand Cricket - Opponent Move Engine

The computer's number is not a fair roll. While the human bats, the
computer shields early wickets and closes in as the score approaches a
soft ceiling of 100. While the human bowls, the computer's chase is
steered towards a dismissal, guaranteed once six or fewer runs are needed.

All methods are stateless class methods. Randomness comes from an
injectable ``random.Random`` so the policy bands can be tested exactly.
"""

import random
from typing import ClassVar

from src.engine.base import HUMAN_TEAM, MAX_MOVE, MIN_MOVE, Team
from src.engine.validators import validate_move, validate_score, validate_target

_default_rng = random.Random()


class OpponentEngine:
    """
    Stateless engine for the computer's move.

    Thresholds are fixed policy constants.
    """

    # Human batting: scoring ceiling
    FORCE_WICKET_SCORE: ClassVar[int] = 95
    PRESSURE_SCORE: ClassVar[int] = 85
    PRESSURE_BASE_CHANCE: ClassVar[float] = 0.3

    # Human batting: early wicket protection, (score below, chance) pairs
    PROTECTION_BANDS: ClassVar[tuple[tuple[int, float], ...]] = (
        (40, 0.95),
        (85, 0.70),
    )

    # Human bowling: chase steering
    CHASE_KILL_RUNS: ClassVar[int] = 6
    CHASE_TENSION_RUNS: ClassVar[int] = 15
    TENSION_CHANCE: ClassVar[float] = 0.5
    EARLY_CHASE_CHANCE: ClassVar[float] = 0.1

    @classmethod
    def random_move(cls, rng: random.Random | None = None) -> int:
        """Draw a uniformly random number 1-6."""
        return (rng or _default_rng).randint(MIN_MOVE, MAX_MOVE)

    @classmethod
    def wicket_pressure(cls, score: int) -> float:
        """Chance of a forced dismissal while the human bats.

        Zero below the pressure zone, rising linearly through it, and
        certain from the force-wicket score upwards.
        """
        if score >= cls.FORCE_WICKET_SCORE:
            return 1.0
        if score < cls.PRESSURE_SCORE:
            return 0.0
        span = cls.FORCE_WICKET_SCORE - cls.PRESSURE_SCORE
        progress = (score - cls.PRESSURE_SCORE) / span
        return cls.PRESSURE_BASE_CHANCE + (1.0 - cls.PRESSURE_BASE_CHANCE) * progress

    @classmethod
    def protection_chance(cls, score: int) -> float:
        """Chance an accidental match is overridden while the human bats."""
        for below, chance in cls.PROTECTION_BANDS:
            if score < below:
                return chance
        return 0.0

    @classmethod
    def chase_dismissal_chance(cls, runs_needed: int) -> float:
        """Chance of a forced dismissal while the computer chases."""
        if runs_needed <= cls.CHASE_KILL_RUNS:
            return 1.0
        if runs_needed <= cls.CHASE_TENSION_RUNS:
            return cls.TENSION_CHANCE
        return cls.EARLY_CHASE_CHANCE

    @staticmethod
    def different_move(move: int) -> int:
        """A number guaranteed to differ from ``move``."""
        return (move % MAX_MOVE) + 1

    @classmethod
    def compute_move(
        cls,
        human_move: int,
        batting_team: Team,
        score_a: int,
        score_b: int,
        target: int | None,
        rng: random.Random | None = None,
    ) -> int:
        """
        Produce the computer's number for one ball.

        A uniformly random candidate is always drawn first. The policy
        then either keeps it, replaces it with the human's number (a
        forced dismissal) or replaces an accidental match with a
        different number (a protected wicket).

        Args:
            human_move: Number the human chose (1-6)
            batting_team: Side currently batting
            score_a: Team A cumulative score
            score_b: Team B cumulative score
            target: Chase target, None during the first innings
            rng: Source of randomness (defaults to a module generator)

        Returns:
            The computer's number (1-6)

        Raises:
            ValueError: If any input is out of range
        """
        validate_move(human_move)
        validate_score(score_a)
        validate_score(score_b)
        validate_target(target)
        rng = rng or _default_rng

        candidate = cls.random_move(rng)

        if batting_team is HUMAN_TEAM:
            score = score_a
            pressure = cls.wicket_pressure(score)
            if pressure >= 1.0 or (pressure > 0.0 and rng.random() < pressure):
                return human_move

            if candidate == human_move:
                protection = cls.protection_chance(score)
                if protection > 0.0 and rng.random() < protection:
                    return cls.different_move(human_move)
            return candidate

        if target is None:
            return candidate

        runs_needed = target - score_b
        chance = cls.chase_dismissal_chance(runs_needed)
        if chance >= 1.0 or rng.random() < chance:
            return human_move
        return candidate
