"""Player record endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from api.schemas import PlayerLookupResponse, PlayerRequest, PlayerResponse
from api.session import get_player_store
from casino.store import PlayerStore

router = APIRouter()

Store = Annotated[PlayerStore, Depends(get_player_store)]


@router.post("")
async def get_or_create_player(request: PlayerRequest, store: Store) -> PlayerLookupResponse:
    """Find a player, registering them with the starting balance if new."""
    player, is_new = store.get_or_create(request.name)
    if is_new:
        store.save()
    return PlayerLookupResponse(
        name=player.name,
        balance=player.balance,
        wins=player.wins,
        is_new=is_new,
    )


@router.get("/top")
async def top_players(store: Store) -> list[PlayerResponse]:
    """Players tied for the most wins."""
    return [PlayerResponse.model_validate(p) for p in store.top_players()]


@router.get("/{name}")
async def get_player(name: str, store: Store) -> PlayerResponse:
    """Look up a player by name (case-insensitive)."""
    player = store.find_by_name(name)
    if player is None:
        raise HTTPException(status_code=404, detail="Player not found")
    return PlayerResponse.model_validate(player)
