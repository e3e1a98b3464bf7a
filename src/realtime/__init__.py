"""
Hand Cricket Match Session.

The match controller plus background enrichment of commentary, coach
tips, voice and venue.
"""

from src.realtime.events import EventPayload, MatchEvent, classify_transition
from src.realtime.session import MatchSession
from src.realtime.worker import EnrichmentWorker, get_enrichment_worker

__all__ = [
    "EnrichmentWorker",
    "EventPayload",
    "MatchEvent",
    "MatchSession",
    "classify_transition",
    "get_enrichment_worker",
]
