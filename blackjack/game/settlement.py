"""Round settlement - pure outcome calculation."""

from dataclasses import dataclass
from typing import Literal

from blackjack.hand import BUST_LIMIT


@dataclass(frozen=True)
class RoundOutcome:
    """Effect of one finished round on the player's record."""

    delta: int
    player_won: bool
    pushed: bool

    @property
    def result(self) -> Literal["win", "lose", "push"]:
        """Short label for the outcome."""
        if self.player_won:
            return "win"
        if self.pushed:
            return "push"
        return "lose"


def settle(
    player_busted: bool,
    player_value: int,
    dealer_value: int,
    bet: int,
) -> RoundOutcome:
    """
    Settle a round.

    Rules, first match wins:
        player busted                    -> lose the bet
        dealer busted or player higher   -> win the bet
        dealer higher                    -> lose the bet
        equal totals                     -> push
    """
    if player_busted:
        return RoundOutcome(delta=-bet, player_won=False, pushed=False)

    if dealer_value > BUST_LIMIT or player_value > dealer_value:
        return RoundOutcome(delta=bet, player_won=True, pushed=False)

    if player_value < dealer_value:
        return RoundOutcome(delta=-bet, player_won=False, pushed=False)

    return RoundOutcome(delta=0, player_won=False, pushed=True)
