"""Round engine and state management."""

from blackjack.game.decisions import (
    BalanceSink,
    Decision,
    DecisionSource,
    ScriptedDecisions,
    parse_decision,
)
from blackjack.game.events import GameEvent, EventType
from blackjack.game.settlement import RoundOutcome, settle
from blackjack.game.state import RoundState
from blackjack.game.table import TableView
from blackjack.game.engine import RoundEngine, apply_outcome

__all__ = [
    "BalanceSink",
    "Decision",
    "DecisionSource",
    "ScriptedDecisions",
    "parse_decision",
    "GameEvent",
    "EventType",
    "RoundOutcome",
    "settle",
    "RoundState",
    "TableView",
    "RoundEngine",
    "apply_outcome",
]
