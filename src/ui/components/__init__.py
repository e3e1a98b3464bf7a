"""UI components for Hand Cricket."""

from src.ui.components.coach_tip import render_coach_tip
from src.ui.components.game_feed import render_game_feed
from src.ui.components.scoreboard import render_scoreboard
from src.ui.components.turn_controls import render_turn_controls

__all__ = [
    "render_coach_tip",
    "render_game_feed",
    "render_scoreboard",
    "render_turn_controls",
]
