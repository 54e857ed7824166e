"""
Types for deck analytics.
"""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from srs.scheduling.card import CardId


@dataclass(frozen=True)
class DeckOverview:
    """
    Precomputed metrics and series for one deck.
    """
    deck_id: CardId
    total_cards: int
    due_now: int
    mastered: int
    stage_counts: pd.Series
    due_forecast_daily: pd.Series
