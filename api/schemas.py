"""Pydantic schemas for API requests and responses."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


# Player schemas
class PlayerRequest(BaseModel):
    """Request to look up or register a player."""

    name: str = Field(..., min_length=1, max_length=64, pattern=r"^[^,\n]+$")


class PlayerResponse(BaseModel):
    """Player record."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    balance: int
    wins: int


class PlayerLookupResponse(PlayerResponse):
    """Player record plus whether it was just created."""

    is_new: bool


# Round schemas
class StartRoundRequest(PlayerRequest):
    """Request to start a round."""

    bet: int = Field(..., ge=1, description="Bet amount")


class DecisionRequest(BaseModel):
    """Player decision during their turn."""

    decision: Literal["hit", "stand"]


class CardResponse(BaseModel):
    """Card representation."""

    rank: str
    suit: str
    value: int
    label: str


class OutcomeResponse(BaseModel):
    """Settled round."""

    result: Literal["win", "lose", "push"]
    delta: int
    player_won: bool
    pushed: bool


class RoundResponse(BaseModel):
    """Visible state of a round; hidden dealer cards are null."""

    round_id: str
    state: str
    bet: int
    player_cards: list[CardResponse]
    player_value: int
    dealer_cards: list[CardResponse | None]
    dealer_value: int
    hole_hidden: bool
    outcome: OutcomeResponse | None = None
    player: PlayerResponse
