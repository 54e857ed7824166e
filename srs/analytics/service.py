"""
Deck analytics service.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from srs.analytics.metrics import (
    cards_to_frame,
    compute_due_forecast,
    compute_due_now,
    compute_stage_counts,
)
from srs.analytics.types import DeckOverview
from srs.persistence import CardStore
from srs.scheduling.card import Card, CardId, utc_now
from srs.scheduling.constants import CardStage


FORECAST_DAYS = 14


def summarize_cards(
    deck_id: CardId,
    cards: list[Card],
    now: Optional[datetime] = None,
    forecast_days: int = FORECAST_DAYS
) -> DeckOverview:
    """
    Build a deck overview from a card snapshot.
    """
    if now is None:
        now = utc_now()

    cards_df = cards_to_frame(cards)
    stage_counts = compute_stage_counts(cards_df)

    return DeckOverview(
        deck_id=deck_id,
        total_cards=len(cards_df),
        due_now=compute_due_now(cards_df, now),
        mastered=int(stage_counts[CardStage.MASTERED.name.lower()]),
        stage_counts=stage_counts,
        due_forecast_daily=compute_due_forecast(cards_df, now, forecast_days),
    )


def build_deck_overview(
    store: CardStore,
    deck_id: CardId,
    now: Optional[datetime] = None,
    forecast_days: int = FORECAST_DAYS
) -> DeckOverview:
    """
    Load a deck from the store and summarize it.
    """
    cards = store.load_cards_for_deck(deck_id) or []
    return summarize_cards(deck_id, cards, now=now, forecast_days=forecast_days)
