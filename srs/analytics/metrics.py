"""
Metric computations for deck analytics.
"""

from __future__ import annotations

from datetime import datetime

import pandas as pd

from srs.scheduling.card import Card, as_utc
from srs.scheduling.constants import CardStage


CARD_COLUMNS = ["id", "deck_id", "state", "interval", "due"]


def cards_to_frame(cards: list[Card]) -> pd.DataFrame:
    """
    Flatten card records into a DataFrame with a UTC `due` column.
    """
    if not cards:
        frame = pd.DataFrame(columns=CARD_COLUMNS)
        frame["due"] = pd.to_datetime(frame["due"], utc=True).dt.as_unit("ns")
        return frame

    frame = pd.DataFrame(
        [
            {
                "id": c.id,
                "deck_id": c.deck_id,
                "state": int(c.state),
                "interval": c.interval,
                "due": as_utc(c.due),
            }
            for c in cards
        ],
        columns=CARD_COLUMNS,
    )
    frame["due"] = pd.to_datetime(frame["due"], utc=True).dt.as_unit("ns")
    return frame


def compute_stage_counts(cards_df: pd.DataFrame) -> pd.Series:
    """
    Card count per stage, every stage present (zeros included).
    """
    labels = [stage.name.lower() for stage in CardStage]
    if cards_df.empty:
        return pd.Series(0, index=labels, dtype="int64")

    counts = cards_df["state"].value_counts()
    values = [int(counts.get(int(stage), 0)) for stage in CardStage]
    return pd.Series(values, index=labels, dtype="int64")


def compute_due_now(cards_df: pd.DataFrame, now: datetime) -> int:
    """
    Cards eligible for standard review at `now`.
    """
    if cards_df.empty:
        return 0
    now_ts = pd.Timestamp(as_utc(now))
    eligible = (cards_df["due"] <= now_ts) & (cards_df["state"] != int(CardStage.MASTERED))
    return int(eligible.sum())


def compute_due_forecast(cards_df: pd.DataFrame, now: datetime, days: int) -> pd.Series:
    """
    Number of cards coming due on each of the next `days` UTC days.

    Day 0 also absorbs everything already overdue. Mastered cards are
    left out.
    """
    start = pd.Timestamp(as_utc(now)).floor("D")
    day_index = pd.date_range(start=start, periods=max(days, 0), freq="D", unit="ns")
    if cards_df.empty or len(day_index) == 0:
        return pd.Series(0, index=day_index, dtype="int64")

    active = cards_df[cards_df["state"] != int(CardStage.MASTERED)]
    due_days = active["due"].dt.floor("D")
    due_days = due_days.where(due_days >= start, start)
    counts = due_days.value_counts()
    return counts.reindex(day_index, fill_value=0).astype("int64")
