"""Round endpoints: start a round, read the table, hit or stand."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from api.schemas import (
    CardResponse,
    DecisionRequest,
    OutcomeResponse,
    PlayerResponse,
    RoundResponse,
    StartRoundRequest,
)
from api.session import RoundStore, get_deck, get_player_store, get_round_store
from blackjack.cards import Card, Deck
from blackjack.game import Decision, RoundEngine, apply_outcome
from casino.player import Player
from casino.store import PlayerStore
from config import config

logger = logging.getLogger(__name__)

router = APIRouter()

Store = Annotated[PlayerStore, Depends(get_player_store)]
Rounds = Annotated[RoundStore, Depends(get_round_store)]
SharedDeck = Annotated[Deck, Depends(get_deck)]

_DECISIONS = {"hit": Decision.HIT, "stand": Decision.STAND}


def _card_response(card: Card | None) -> CardResponse | None:
    """Convert a Card to CardResponse; hidden cards stay None."""
    if card is None:
        return None
    return CardResponse(
        rank=str(card.rank),
        suit=str(card.suit),
        value=card.value,
        label=card.label,
    )


def _round_response(token: str, engine: RoundEngine, player: Player) -> RoundResponse:
    """Convert the visible table to a response."""
    table = engine.table()
    outcome = None
    if engine.outcome is not None:
        outcome = OutcomeResponse(
            result=engine.outcome.result,
            delta=engine.outcome.delta,
            player_won=engine.outcome.player_won,
            pushed=engine.outcome.pushed,
        )

    return RoundResponse(
        round_id=token,
        state=table.state.name,
        bet=table.bet,
        player_cards=[_card_response(c) for c in table.player_cards],
        player_value=table.player_value,
        dealer_cards=[_card_response(c) for c in table.dealer_cards],
        dealer_value=table.dealer_value,
        hole_hidden=table.hole_hidden,
        outcome=outcome,
        player=PlayerResponse.model_validate(player),
    )


def _player_or_404(store: PlayerStore, name: str) -> Player:
    player = store.find_by_name(name)
    if player is None:
        raise HTTPException(status_code=404, detail="Player not found")
    return player


async def _finish_if_done(
    token: str,
    engine: RoundEngine,
    player: Player,
    store: PlayerStore,
    rounds: RoundStore,
) -> None:
    """Apply a finished round to the player record and forget it."""
    if not engine.is_done or engine.outcome is None:
        return

    apply_outcome(engine.outcome, player)
    store.save()
    await rounds.delete(token)
    logger.info(
        "Round finished for %s: %s %+d (balance %d)",
        player.name,
        engine.outcome.result,
        engine.outcome.delta,
        player.balance,
    )


@router.post("")
async def start_round(
    request: StartRoundRequest,
    store: Store,
    rounds: Rounds,
    deck: SharedDeck,
) -> RoundResponse:
    """Place a bet and deal."""
    player = _player_or_404(store, request.name)

    if request.bet < config.game.min_bet:
        raise HTTPException(
            status_code=400,
            detail=f"Minimum bet is {config.game.min_bet}",
        )
    if request.bet > player.balance:
        raise HTTPException(
            status_code=400,
            detail=f"Bet exceeds balance of {player.balance}",
        )
    if await rounds.active_for(player.name):
        raise HTTPException(status_code=409, detail="Round already in progress")

    engine = RoundEngine(deck, request.bet, dealer_stands_on=config.game.dealer_stands_on)
    engine.start()
    token = await rounds.add(engine, player.name)
    logger.info("Round started for %s with bet %d", player.name, request.bet)

    return _round_response(token, engine, player)


@router.get("/{token}")
async def get_round(token: str, store: Store, rounds: Rounds) -> RoundResponse:
    """Current visible table of a round in progress."""
    live = await rounds.get(token)
    if live is None:
        raise HTTPException(status_code=404, detail="Round not found")
    return _round_response(token, live.engine, _player_or_404(store, live.player_name))


@router.post("/{token}/decision")
async def decide(
    token: str,
    request: DecisionRequest,
    store: Store,
    rounds: Rounds,
) -> RoundResponse:
    """Hit or stand. The response carries the outcome once the round is over."""
    live = await rounds.get(token)
    if live is None:
        raise HTTPException(status_code=404, detail="Round not found")

    player = _player_or_404(store, live.player_name)
    if not live.engine.apply_decision(_DECISIONS[request.decision]):
        raise HTTPException(status_code=400, detail=f"Cannot {request.decision} now")

    await _finish_if_done(token, live.engine, player, store, rounds)
    return _round_response(token, live.engine, player)
