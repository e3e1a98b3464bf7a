"""
Hand Cricket External Services.

Optional Gemini-backed commentary, coach tips, voice and venue lookup.
"""

from src.services.models import VenueInfo
from src.services.provider import CommentaryProvider, get_commentary_provider

__all__ = [
    "CommentaryProvider",
    "VenueInfo",
    "get_commentary_provider",
]
