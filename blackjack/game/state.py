"""Round state enumeration."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: DEALING → PLAYER_TURN → DEALER_TURN → SETTLEMENT → DONE
    A player bust goes straight from PLAYER_TURN to SETTLEMENT.
    """

    # Four cards being dealt
    DEALING = auto()

    # Player hits or stands
    PLAYER_TURN = auto()

    # Dealer draws to 17
    DEALER_TURN = auto()

    # Determining the outcome
    SETTLEMENT = auto()

    # Round finished; engines are not reused
    DONE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

