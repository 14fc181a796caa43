"""Tests for round tokens and the live round registry."""

from datetime import datetime, timedelta

import pytest

from api.session import RoundStore, SessionSigner
from blackjack.game import RoundEngine


class TestSessionSigner:
    """Tests for SessionSigner class."""

    def test_sign_creates_token(self):
        """Test that sign creates a non-empty token."""
        signer = SessionSigner(secret_key="test-secret")
        token = signer.sign("round-123")
        assert token
        assert token != "round-123"

    def test_unsign_returns_original_id(self):
        signer = SessionSigner(secret_key="test-secret")
        token = signer.sign("round-456")
        assert signer.unsign(token, max_age=3600) == "round-456"

    def test_unsign_invalid_token_returns_none(self):
        signer = SessionSigner(secret_key="test-secret")
        assert signer.unsign("invalid-token-data", max_age=3600) is None

    def test_unsign_wrong_secret_returns_none(self):
        token = SessionSigner(secret_key="secret-one").sign("round")
        assert SessionSigner(secret_key="secret-two").unsign(token, max_age=3600) is None


@pytest.fixture
def rounds():
    return RoundStore(signer=SessionSigner(secret_key="test-secret"), ttl=60)


class TestRoundStore:
    """Tests for the in-memory round registry."""

    @pytest.mark.asyncio
    async def test_add_and_get(self, rounds, deck):
        engine = RoundEngine(deck, bet=10)
        token = await rounds.add(engine, "Alice")

        live = await rounds.get(token)

        assert live is not None
        assert live.engine is engine
        assert live.player_name == "Alice"
        assert len(rounds) == 1

    @pytest.mark.asyncio
    async def test_delete(self, rounds, deck):
        token = await rounds.add(RoundEngine(deck, bet=10), "Alice")
        await rounds.delete(token)
        assert await rounds.get(token) is None
        assert len(rounds) == 0

    @pytest.mark.asyncio
    async def test_tampered_token(self, rounds, deck):
        token = await rounds.add(RoundEngine(deck, bet=10), "Alice")
        assert await rounds.get(token + "x") is None

    @pytest.mark.asyncio
    async def test_expired_round(self, rounds, deck):
        token = await rounds.add(RoundEngine(deck, bet=10), "Alice")
        live = await rounds.get(token)
        live.expires_at = datetime.now() - timedelta(seconds=1)

        assert await rounds.get(token) is None
        assert len(rounds) == 0

    @pytest.mark.asyncio
    async def test_active_for(self, rounds, deck):
        await rounds.add(RoundEngine(deck, bet=10), "Alice")
        assert await rounds.active_for("ALICE")
        assert not await rounds.active_for("Bob")

    @pytest.mark.asyncio
    async def test_cleanup_expired(self, rounds, deck):
        old = await rounds.add(RoundEngine(deck, bet=10), "Alice")
        await rounds.add(RoundEngine(deck, bet=10), "Bob")
        (await rounds.get(old)).expires_at = datetime.now() - timedelta(seconds=1)

        assert await rounds.cleanup_expired() == 1
        assert len(rounds) == 1
        assert not await rounds.active_for("Alice")
