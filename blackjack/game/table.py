"""Read-only projection of a round for rendering."""

from dataclasses import dataclass

from blackjack.cards import Card
from blackjack.game.state import RoundState


@dataclass(frozen=True)
class TableView:
    """
    What the player is allowed to see of a round.

    While the hole card is hidden, its slot in ``dealer_cards`` is None and
    ``dealer_value`` only counts the face-up cards.
    """

    state: RoundState
    bet: int
    player_cards: tuple[Card, ...]
    player_value: int
    dealer_cards: tuple[Card | None, ...]
    dealer_value: int
    hole_hidden: bool

    @property
    def rows(self) -> int:
        """Return the number of board rows needed to show both hands."""
        return max(len(self.player_cards), len(self.dealer_cards))
