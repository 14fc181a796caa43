"""Player decisions and the collaborators a round talks to."""

from enum import Enum, auto
from typing import TYPE_CHECKING, Iterable, Protocol

if TYPE_CHECKING:
    from blackjack.game.table import TableView


class Decision(Enum):
    """A single answer to the hit/stand prompt."""

    HIT = auto()
    STAND = auto()
    INVALID = auto()


_DECISION_WORDS = {
    "1": Decision.HIT,
    "h": Decision.HIT,
    "hit": Decision.HIT,
    "2": Decision.STAND,
    "s": Decision.STAND,
    "stand": Decision.STAND,
}


def parse_decision(text: str) -> Decision:
    """Map raw menu input to a decision; anything unrecognised is INVALID."""
    return _DECISION_WORDS.get(text.strip().lower(), Decision.INVALID)


class DecisionSource(Protocol):
    """Anything that can answer the hit/stand prompt."""

    def next_decision(self, table: "TableView") -> Decision:
        """Block until the player decides, then return the decision."""
        ...


class BalanceSink(Protocol):
    """Receiver of a settled round's effects on a player record."""

    def apply_delta(self, amount: int) -> None:
        """Add a signed amount to the balance."""
        ...

    def credit_win(self) -> None:
        """Count one more win."""
        ...


class ScriptedDecisions:
    """Decision source that replays a fixed sequence of answers."""

    def __init__(self, decisions: Iterable[Decision | str]) -> None:
        self._pending = [
            d if isinstance(d, Decision) else parse_decision(d) for d in decisions
        ]
        self.asked = 0

    def next_decision(self, table: "TableView") -> Decision:
        self.asked += 1
        if not self._pending:
            raise RuntimeError("Scripted decisions exhausted")
        return self._pending.pop(0)

    @property
    def remaining(self) -> int:
        """Return how many scripted answers have not been used."""
        return len(self._pending)
