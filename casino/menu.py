"""Text menus, prompts and table rendering for the console casino."""

from typing import Callable, Sequence

from blackjack.game import Decision, RoundOutcome, TableView, parse_decision
from casino.player import Player
from config import config

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

BOARD_HEADER = (
    "               -- BLACK JACK --",
    "+======================+=====================+",
    "|| PLAYER              | DEALER             ||",
    "+======================+=====================+",
)
BOARD_ROW_RULE = "+----------------------+---------------------+"


def render_table(table: TableView) -> list[str]:
    """Render the two-column PLAYER / DEALER board; hidden cards are left blank."""
    lines = list(BOARD_HEADER)
    for i in range(table.rows):
        left = table.player_cards[i].label if i < len(table.player_cards) else ""
        right = ""
        if i < len(table.dealer_cards) and table.dealer_cards[i] is not None:
            right = table.dealer_cards[i].label  # type: ignore[union-attr]
        lines.append(f"| {left:<20}|| {right:<19} |")
        lines.append(BOARD_ROW_RULE)
    lines.append("")
    return lines


def render_outcome(outcome: RoundOutcome, bet: int) -> str:
    """One-line result of a round."""
    if outcome.player_won:
        return f"You won {bet}$"
    if outcome.pushed:
        return "Push (tie)"
    return f"You lost {bet}$"


def render_top_players(players: Sequence[Player]) -> list[str]:
    """Render the top players table."""
    if not players:
        return ["no players in database."]

    lines = [
        "              - TOP PLAYERS -",
        "+====================+=================+",
        "| NAME               | # WINS          |",
        "+====================+=================+",
    ]
    for p in players:
        lines.append(f"| {p.name:<18} | {p.wins:<7}         |")
        lines.append("+--------------------------------------+")
    return lines


def render_player_info(player: Player) -> list[str]:
    """Render the single player info table."""
    balance = f"{player.balance}  $"
    return [
        "                       - PLAYER INFO -",
        "+====================+=================+=================+",
        "| NAME               | # WINS          | BALANCE         |",
        "+====================+=================+=================+",
        f"| {player.name:<18} | {player.wins:<7}         | {balance:<13}   |",
        "+--------------------------------------------------------+",
        "",
    ]


class AppMenu:
    """
    Console menus and prompts.

    Input and output are injected so the menus can be driven by scripted
    answers in tests.
    """

    def __init__(
        self,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
        min_bet: int | None = None,
    ) -> None:
        self._input = input_fn
        self._output = output_fn
        self.min_bet = config.game.min_bet if min_bet is None else min_bet

    def say(self, *lines: str) -> None:
        """Print lines of text."""
        for line in lines:
            self._output(line)

    def ask(self, prompt: str) -> str:
        """Prompt for one line of input, stripped, followed by a blank line."""
        answer = self._input(prompt).strip()
        self._output("")
        return answer

    def _choice(self, options: Sequence[str]) -> str:
        self.say("", "Select one of these options:", "")
        self.say(*(f"        {option}" for option in options))
        self.say("")
        choice = self.ask("Enter a choice: ")
        return choice[0].upper() if choice else " "

    def main_menu_choice(self) -> str:
        """Show the main menu; returns the upper-cased first character or ' '."""
        return self._choice(["(P) Play Game", "(S) Search", "(E) Exit"])

    def search_menu_choice(self) -> str:
        """Show the search menu; returns the upper-cased first character or ' '."""
        return self._choice(
            [
                "(T) Top player (Most number of wins)",
                "(N) Looking for a Name",
                "(B) Back to Main menu",
            ]
        )

    def prompt_name(self) -> str:
        return self.ask("Enter your name: ")

    def prompt_search_name(self) -> str:
        return self.ask("What is your name: ")

    def show_welcome(self, name: str, balance: int, is_new: bool) -> None:
        """Print the welcome banner for a new or returning player."""
        greeting = "Welcome" if is_new else "Welcome back"
        rule = "*" * 66
        self.say(
            rule,
            f"***    {greeting} {name}    ---   Your initial balance is: {balance}  $    ***",
            rule,
            "",
        )

    def prompt_bet(self, balance: int) -> int:
        """
        Ask for a bet until a valid one is given.

        Returns 0 when the player wants to go back to the main menu.
        """
        while True:
            text = self.ask("How much do you want to bet this round? ")
            try:
                bet = int(text)
            except ValueError:
                self.say("please enter a whole number.", "")
                continue

            if bet == 0:
                return 0
            if bet < self.min_bet:
                self.say(f"minimum bet is ${self.min_bet}.", "")
                continue
            if bet > balance:
                self.say(f"over your balance (${balance}).", "")
                continue
            return bet

    def prompt_continue(self) -> bool:
        """Ask whether to play another round."""
        answer = self.ask("Do you want to continue(y/n)? ")
        return answer[:1].upper() == "Y"

    def pause_enter(self) -> None:
        """Wait for the user to press Enter."""
        self.say("", "Press Enter to continue...")
        self._input("")
        self.say("")

    def show_table(self, table: TableView) -> None:
        self.say(*render_table(table))


class ConsoleDecisions:
    """Decision source that shows the board and asks Hit/Stand on the console."""

    def __init__(self, menu: AppMenu) -> None:
        self.menu = menu
        self._shown: tuple | None = None

    def next_decision(self, table: TableView) -> Decision:
        # Redraw the board only when a card was added since the last prompt
        snapshot = (table.player_cards, table.dealer_cards)
        if snapshot != self._shown:
            self.menu.show_table(table)
            self._shown = snapshot

        self.menu.say("Select an option:", "", "                  1. Hit", "                  2. Stand", "")
        return parse_decision(self.menu.ask("Your choice: "))
