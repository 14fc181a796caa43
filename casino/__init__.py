"""Console casino: player records, menus and the application loop."""

from casino.player import Player
from casino.store import PlayerStore
from casino.menu import AppMenu, ConsoleDecisions
from casino.manager import GameManager

__all__ = [
    "Player",
    "PlayerStore",
    "AppMenu",
    "ConsoleDecisions",
    "GameManager",
]
