"""
Hand Cricket - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from src.engine.base import MAX_MOVE, MIN_MOVE


def validate_move(move: int) -> int:
    """
    Validate a number chosen for a ball.

    Args:
        move: Number chosen by a side

    Returns:
        Validated move

    Raises:
        ValueError: If the move is not an integer between 1 and 6
    """
    if isinstance(move, bool) or not isinstance(move, int):
        raise ValueError(f"Move must be an integer, got {type(move).__name__}.")

    if not (MIN_MOVE <= move <= MAX_MOVE):
        raise ValueError(f"Move must be between {MIN_MOVE} and {MAX_MOVE}, got {move}.")

    return move


def validate_score(score: int) -> int:
    """
    Validate a cumulative score.

    Args:
        score: Score to validate

    Returns:
        Validated score

    Raises:
        ValueError: If score is not a non-negative integer
    """
    if not isinstance(score, int):
        raise ValueError(f"Score must be an integer, got {type(score).__name__}.")

    if score < 0:
        raise ValueError(f"Score cannot be negative, got {score}.")

    return score


def validate_target(target: int | None) -> int | None:
    """
    Validate a chase target.

    Args:
        target: Target to validate (None before the innings break)

    Returns:
        Validated target

    Raises:
        ValueError: If target is not None or a positive integer
    """
    if target is None:
        return None

    if not isinstance(target, int):
        raise ValueError(f"Target must be an integer, got {type(target).__name__}.")

    if target <= 0:
        raise ValueError(f"Target must be positive, got {target}.")

    return target
