"""
Analytics package exports.
"""

from srs.analytics.service import FORECAST_DAYS, build_deck_overview, summarize_cards
from srs.analytics.types import DeckOverview

__all__ = [
    "FORECAST_DAYS",
    "build_deck_overview",
    "summarize_cards",
    "DeckOverview",
]
