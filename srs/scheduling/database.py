"""
Database - Card Store I/O Operations

Handles all database operations for decks and card learning state.
Uses SQLAlchemy ORM; any backend SQLAlchemy supports (Postgres in
production, SQLite for local use and tests).

This module handles ONLY database I/O.
Algorithm logic is handled by the scheduler module.
"""

from __future__ import annotations
import logging
from datetime import datetime
from typing import Iterable, Optional

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from srs.scheduling.card import Card, CardId, as_utc, new_card, utc_now
from srs.scheduling.models import Base, CardRecord, Deck

logger = logging.getLogger(__name__)


def get_engine(db_url: str) -> Engine:
    """
    Get SQLAlchemy engine for database connection.

    Server databases get connection pooling; SQLite uses SQLAlchemy's
    default pool for its dialect.

    Returns:
        SQLAlchemy Engine instance
    """
    if db_url.startswith("sqlite"):
        return create_engine(db_url, echo=False)

    return create_engine(
        db_url,
        pool_size=5,           # Keep 5 connections open
        max_overflow=10,       # Allow up to 10 extra connections
        pool_pre_ping=True,    # Verify connections before use
        echo=False
    )


def _to_card(db_card: CardRecord) -> Card:
    return Card(
        id=db_card.id,
        deck_id=db_card.deck_id,
        state=db_card.state,
        interval=db_card.interval,
        due=as_utc(db_card.due),
    )


class SqlCardStore:
    """
    CardStore backed by a SQL database.

    The engine is injected so several stores (and tests) never share
    process-wide state.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)

    @classmethod
    def from_url(cls, db_url: str) -> "SqlCardStore":
        return cls(get_engine(db_url))

    @classmethod
    def from_env(cls) -> "SqlCardStore":
        """Build a store from DATABASE_URL (honours TEST_MODE)."""
        from srs.config import get_database_url

        return cls.from_url(get_database_url())

    def get_session(self) -> Session:
        """
        Get a SQLAlchemy session for database operations.

        Returns:
            SQLAlchemy Session instance
        """
        return self._session_factory()

    # ---- Schema ----

    def init_db(self) -> None:
        """
        Initialize database schema if tables don't exist.

        Safe to call multiple times - only creates missing tables.
        """
        existing_tables = inspect(self.engine).get_table_names()
        if 'decks' in existing_tables and 'cards' in existing_tables:
            return

        Base.metadata.create_all(self.engine)
        logger.info("Created card store tables on %s", self.engine.url.render_as_string(hide_password=True))

    def reset_db(self) -> None:
        """
        DANGEROUS: Delete all data and recreate tables.

        Only use this for testing or when you want to start fresh.
        All learning progress will be lost!
        """
        Base.metadata.drop_all(self.engine)
        logger.warning("Dropped all card store tables")
        self.init_db()

    # ---- Decks and cards ----

    def create_deck(self, name: str) -> int:
        """
        Create a deck and return its id.
        """
        session = self.get_session()
        try:
            deck = Deck(name=name)
            session.add(deck)
            session.commit()
            return deck.id
        finally:
            session.close()

    def create_card(self, deck_id: CardId, now: Optional[datetime] = None) -> Card:
        """
        Insert a new card (state 0, interval 0, due now) into a deck.

        Returns:
            The stored Card with its assigned id
        """
        now = as_utc(now) if now is not None else utc_now()
        session = self.get_session()
        try:
            db_card = CardRecord(deck_id=deck_id, state=0, interval=0, due=now)
            session.add(db_card)
            session.commit()
            return new_card(db_card.id, db_card.deck_id, now)
        finally:
            session.close()

    def load_cards_for_deck(self, deck_id: CardId) -> list[Card]:
        """
        Load every card in a deck (no ordering guarantee).

        Returns:
            List of Card snapshots; empty for a missing deck
        """
        session = self.get_session()
        try:
            db_cards = session.query(CardRecord).filter(
                CardRecord.deck_id == deck_id
            ).all()
            return [_to_card(db_card) for db_card in db_cards]
        finally:
            session.close()

    def load_card(self, card_id: CardId) -> Optional[Card]:
        """
        Load a single card.

        Returns:
            Card if found, None otherwise
        """
        session = self.get_session()
        try:
            db_card = session.get(CardRecord, card_id)
            return _to_card(db_card) if db_card is not None else None
        finally:
            session.close()

    def save_card(self, card: Card) -> None:
        """
        Save card state to database (insert or update by id).

        Args:
            card: Card to save
        """
        self.batch_save_cards([card])

    def batch_save_cards(self, cards: Iterable[Card]) -> None:
        """
        Save multiple cards in a single database transaction.

        Args:
            cards: Cards to save
        """
        cards = list(cards)
        if not cards:
            return

        session = self.get_session()
        try:
            for card in cards:
                db_card = session.get(CardRecord, card.id)

                if db_card is None:
                    db_card = CardRecord(id=card.id, deck_id=card.deck_id)
                    session.add(db_card)

                db_card.deck_id = card.deck_id
                db_card.state = card.state
                db_card.interval = card.interval
                db_card.due = as_utc(card.due)

            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
