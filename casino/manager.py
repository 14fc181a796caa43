"""Application controller tying the menus, player store and round engine together."""

import logging

from blackjack.cards import Deck
from blackjack.game import RoundEngine
from casino.menu import (
    AppMenu,
    ConsoleDecisions,
    render_outcome,
    render_player_info,
    render_top_players,
)
from casino.player import Player
from casino.store import PlayerStore
from config import config

logger = logging.getLogger(__name__)


class GameManager:
    """
    Runs the console casino.

    One deck is shared by every round played during the session; player
    records are loaded at start-up and written back on exit.
    """

    def __init__(
        self,
        store: PlayerStore,
        menu: AppMenu | None = None,
        deck: Deck | None = None,
        dealer_stands_on: int | None = None,
    ) -> None:
        self.store = store
        self.menu = menu or AppMenu()
        self.deck = deck or Deck()
        self.dealer_stands_on = (
            config.game.dealer_stands_on if dealer_stands_on is None else dealer_stands_on
        )

    def run(self) -> None:
        """Main menu loop; saves players when the user exits."""
        self.store.ensure_exists()
        self.store.load()

        running = True
        while running:
            choice = self.menu.main_menu_choice()
            if choice == "P":
                self.play_flow()
            elif choice == "S":
                self.search_flow()
            elif choice == "E":
                running = False
            else:
                self.menu.say("invalid choice.", "")

        self.store.save()
        self.menu.say("Saving...", "Done! Please visit us again!")

    def play_flow(self) -> None:
        """Identify the player, then play rounds until they stop or go broke."""
        name = self.menu.prompt_name()
        if not name:
            self.menu.say("name cannot be empty.", "")
            return
        if "," in name:
            self.menu.say("name cannot contain commas.", "")
            return

        player, is_new = self.store.get_or_create(name)
        self.menu.show_welcome(player.name, player.balance, is_new)

        if player.balance == 0:
            self.menu.say("your balance is $0. returning to main menu.", "")
            return

        again = True
        while again:
            bet = self.menu.prompt_bet(player.balance)
            if bet == 0:
                break

            self.play_round(player, bet)
            self.menu.say("")
            again = self.menu.prompt_continue()

    def play_round(self, player: Player, bet: int) -> None:
        """Play one round for a player against the shared deck and show the result."""
        engine = RoundEngine(self.deck, bet, dealer_stands_on=self.dealer_stands_on)
        outcome = engine.play(ConsoleDecisions(self.menu), sink=player)

        self.menu.show_table(engine.table())
        self.menu.say(render_outcome(outcome, bet), "")
        logger.info(
            "%s bet %d: %s (balance %d, wins %d)",
            player.name,
            bet,
            outcome.result,
            player.balance,
            player.wins,
        )

    def search_flow(self) -> None:
        """Top-player and by-name lookups."""
        back = False
        while not back:
            choice = self.menu.search_menu_choice()
            if choice == "T":
                self.menu.say(*render_top_players(self.store.top_players()))
                self.menu.pause_enter()
            elif choice == "N":
                player = self.store.find_by_name(self.menu.prompt_search_name())
                if player is None:
                    self.menu.say("player not found.")
                else:
                    self.menu.say(*render_player_info(player))
                self.menu.pause_enter()
            elif choice == "B":
                back = True
            else:
                self.menu.say("invalid choice.", "")
