"""Shared service resources: the deck, the player store and live rounds."""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from uuid import uuid4

from itsdangerous import URLSafeTimedSerializer, BadSignature, SignatureExpired

from blackjack.cards import Deck
from blackjack.game import RoundEngine
from casino.store import PlayerStore
from config import config

logger = logging.getLogger(__name__)


class SessionSigner:
    """Sign and verify round IDs using itsdangerous."""

    def __init__(self, secret_key: str | None = None) -> None:
        """Initialize the signer with a secret key."""
        self._secret_key = secret_key or config.security.secret_key
        self._serializer = URLSafeTimedSerializer(self._secret_key, salt="round")

    def sign(self, round_id: str) -> str:
        """Create a signed token from a round ID."""
        return self._serializer.dumps(round_id)

    def unsign(self, token: str, max_age: int | None = None) -> str | None:
        """
        Verify and extract the round ID from a signed token.

        Args:
            token: The signed token to verify
            max_age: Maximum age in seconds (defaults to round_ttl)

        Returns:
            The round ID if valid, None otherwise
        """
        max_age = max_age or config.round_ttl
        try:
            return self._serializer.loads(token, max_age=max_age)
        except (BadSignature, SignatureExpired):
            return None


@dataclass
class LiveRound:
    """A round waiting for the player's decisions."""

    engine: RoundEngine
    player_name: str
    expires_at: datetime


class RoundStore:
    """In-memory registry of rounds that have not finished yet."""

    def __init__(self, signer: SessionSigner | None = None, ttl: int | None = None) -> None:
        self._signer = signer or SessionSigner()
        self._ttl = ttl or config.round_ttl
        self._rounds: dict[str, LiveRound] = {}

    async def add(self, engine: RoundEngine, player_name: str) -> str:
        """Register a round; returns its signed token."""
        round_id = str(uuid4())
        expires_at = datetime.now() + timedelta(seconds=self._ttl)
        self._rounds[round_id] = LiveRound(engine, player_name, expires_at)
        return self._signer.sign(round_id)

    async def get(self, token: str) -> LiveRound | None:
        """Look up a round by token; None if unknown, expired or tampered with."""
        round_id = self._signer.unsign(token, max_age=self._ttl)
        if round_id is None or round_id not in self._rounds:
            return None

        live = self._rounds[round_id]
        if live.expires_at < datetime.now():
            await self.delete(token)
            return None
        return live

    async def delete(self, token: str) -> None:
        """Forget a round."""
        round_id = self._signer.unsign(token, max_age=self._ttl)
        if round_id is not None:
            self._rounds.pop(round_id, None)

    async def active_for(self, player_name: str) -> bool:
        """Check if a player already has an unexpired round in progress."""
        await self.cleanup_expired()
        wanted = player_name.casefold()
        return any(r.player_name.casefold() == wanted for r in self._rounds.values())

    async def cleanup_expired(self) -> int:
        """Remove expired rounds."""
        now = datetime.now()
        expired = [rid for rid, live in self._rounds.items() if live.expires_at < now]
        for rid in expired:
            del self._rounds[rid]
        if expired:
            logger.info("Dropped %d abandoned rounds", len(expired))
        return len(expired)

    def __len__(self) -> int:
        return len(self._rounds)


# Global instances, created on first use
_deck: Deck | None = None
_player_store: PlayerStore | None = None
_round_store: RoundStore | None = None


def get_deck() -> Deck:
    """Get the deck shared by every round the service deals."""
    global _deck
    if _deck is None:
        _deck = Deck()
    return _deck


def get_player_store() -> PlayerStore:
    """Get or load the player store."""
    global _player_store
    if _player_store is None:
        _player_store = PlayerStore(config.store.db_path)
        _player_store.ensure_exists()
        _player_store.load()
    return _player_store


async def get_round_store() -> RoundStore:
    """Get or create the round registry."""
    global _round_store
    if _round_store is None:
        _round_store = RoundStore()
    return _round_store
