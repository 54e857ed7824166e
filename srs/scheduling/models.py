"""
SQLAlchemy ORM Models for the Card Store

Defines Deck and CardRecord models. Only learning state is stored here;
card content (headword, definition, media) belongs to the host app.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def _utc_now():
    return datetime.now(timezone.utc)


class Deck(Base):
    """A named collection of cards."""
    __tablename__ = 'decks'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utc_now)

    def __repr__(self):
        return f"<Deck(id={self.id}, name={self.name!r})>"


class CardRecord(Base):
    """
    Persistent learning state for a single card.

    state: 0 = New, 1..4 = Learning, 5 = Mastered
    """
    __tablename__ = 'cards'

    id = Column(Integer, primary_key=True, autoincrement=True)
    deck_id = Column(Integer, ForeignKey('decks.id'), nullable=False, index=True)

    state = Column(Integer, nullable=False, default=0)
    interval = Column(Integer, nullable=False, default=0)  # Days
    due = Column(DateTime(timezone=True), nullable=False, index=True)

    def __repr__(self):
        return f"<CardRecord(id={self.id}, deck={self.deck_id}, state={self.state})>"
