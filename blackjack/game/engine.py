"""Round engine with state machine."""

import logging
from typing import Callable

from transitions import Machine

from blackjack.cards import Card, Deck
from blackjack.hand import Hand, hand_value
from blackjack.game.decisions import BalanceSink, Decision, DecisionSource
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.settlement import RoundOutcome, settle
from blackjack.game.state import RoundState
from blackjack.game.table import TableView

logger = logging.getLogger(__name__)

DEALER_STANDS_ON = 17


def apply_outcome(outcome: RoundOutcome, sink: BalanceSink) -> None:
    """Push a settled outcome into a player record."""
    sink.apply_delta(outcome.delta)
    if outcome.player_won:
        sink.credit_win()


class RoundEngine:
    """
    One round of blackjack, driven by a state machine.

    The engine owns both hands for the round and draws from a deck shared
    with other rounds. It never touches a player record directly: the
    outcome is returned, and only pushed into a BalanceSink when one is
    given to ``play``.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "cards_dealt", "source": "dealing", "dest": "player_turn"},
        {"trigger": "player_hits", "source": "player_turn", "dest": "player_turn"},
        {"trigger": "player_busts", "source": "player_turn", "dest": "settlement"},
        {"trigger": "player_stands", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "dealer_done", "source": "dealer_turn", "dest": "settlement"},
        {"trigger": "settled", "source": "settlement", "dest": "done"},
    ]

    def __init__(
        self,
        deck: Deck,
        bet: int,
        dealer_stands_on: int = DEALER_STANDS_ON,
    ) -> None:
        """
        Initialize a round.

        Args:
            deck: Shared deck to draw from
            bet: Bet amount, already validated by the caller
            dealer_stands_on: Lowest total the dealer stands on
        """
        self.deck = deck
        self.bet = bet
        self.dealer_stands_on = dealer_stands_on

        self.player_hand = Hand()
        self.dealer_hand = Hand()
        self.player_busted = False
        self.outcome: RoundOutcome | None = None
        self.events = EventEmitter()

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="dealing",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to round events."""
        self.events.subscribe(handler, event_type)

    def start(self) -> bool:
        """Deal player, dealer, player, dealer and hand control to the player."""
        if self.state != RoundState.DEALING:
            return False

        self._deal_card_to_hand(self.player_hand)
        self._deal_card_to_hand(self.dealer_hand)
        self._deal_card_to_hand(self.player_hand)
        self._deal_card_to_hand(self.dealer_hand, face_up=False)

        logger.debug("Round started: bet=%d player=%s", self.bet, self.player_hand)
        self.events.emit_new(EventType.ROUND_STARTED, bet=self.bet)
        self.cards_dealt()
        return True

    def _deal_card_to_hand(self, hand: Hand, face_up: bool = True) -> Card:
        """Draw one card from the shared deck into a hand."""
        rebuilds = self.deck.rebuild_count
        card = self.deck.draw()
        if self.deck.rebuild_count != rebuilds:
            self.events.emit_new(EventType.DECK_REBUILT)

        hand.add_card(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            hand="dealer" if hand is self.dealer_hand else "player",
            hand_value=hand.value if face_up or hand is not self.dealer_hand else None,
        )
        return card

    def hit(self) -> bool:
        """Player hits (takes another card)."""
        if self.state != RoundState.PLAYER_TURN:
            return False

        self._deal_card_to_hand(self.player_hand)
        self.events.emit_new(EventType.PLAYER_HIT, hand_value=self.player_hand.value)

        if self.player_hand.is_busted:
            self.player_busted = True
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=self.player_hand.value)
            self.player_busts()
            self._resolve_round()
            return True

        self.player_hits()  # Stay in player turn
        return True

    def stand(self) -> bool:
        """Player stands; the dealer plays out the round."""
        if self.state != RoundState.PLAYER_TURN:
            return False

        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player_hand.value)
        self.player_stands()
        self._play_dealer()
        return True

    def apply_decision(self, decision: Decision) -> bool:
        """
        Apply one answer from the decision source.

        Returns False, leaving the round untouched, for INVALID answers or
        when it is not the player's turn.
        """
        if decision is Decision.HIT:
            return self.hit()
        if decision is Decision.STAND:
            return self.stand()

        if self.state == RoundState.PLAYER_TURN:
            self.events.emit_new(EventType.INVALID_DECISION)
        return False

    def _play_dealer(self) -> None:
        """Dealer reveals the hole card and draws until reaching the stand total."""
        self.events.emit_new(
            EventType.DEALER_REVEALS,
            card=str(self.dealer_hand.cards[1]),
            hand_value=self.dealer_hand.value,
        )

        while self.dealer_hand.value < self.dealer_stands_on:
            self._deal_card_to_hand(self.dealer_hand)
            self.events.emit_new(EventType.DEALER_HITS, hand_value=self.dealer_hand.value)

        if self.dealer_hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer_hand.value)

        self.dealer_done()
        self._resolve_round()

    def _resolve_round(self) -> None:
        """Settle the bet and finish the round."""
        outcome = settle(
            self.player_busted,
            self.player_hand.value,
            self.dealer_hand.value,
            self.bet,
        )

        if outcome.player_won:
            self.events.emit_new(EventType.PLAYER_WINS, amount=outcome.delta)
        elif outcome.pushed:
            self.events.emit_new(EventType.PUSH)
        else:
            self.events.emit_new(EventType.PLAYER_LOSES, amount=-outcome.delta)

        self.outcome = outcome
        self.settled()

        logger.debug(
            "Round ended: player=%d dealer=%d result=%s delta=%d",
            self.player_hand.value,
            self.dealer_hand.value,
            outcome.result,
            outcome.delta,
        )
        self.events.emit_new(EventType.ROUND_ENDED, result=outcome.result, delta=outcome.delta)

    def play(
        self,
        decisions: DecisionSource,
        sink: BalanceSink | None = None,
    ) -> RoundOutcome:
        """
        Play the round to completion.

        Args:
            decisions: Asked for hit/stand until the player stands or busts
            sink: Player record to apply the outcome to, if any

        Returns:
            The settled outcome
        """
        self.start()

        while self.state == RoundState.PLAYER_TURN:
            self.apply_decision(decisions.next_decision(self.table()))

        if self.outcome is None:
            raise RuntimeError("Round ended without an outcome")
        if sink is not None:
            apply_outcome(self.outcome, sink)
        return self.outcome

    @property
    def hole_hidden(self) -> bool:
        """Check if the dealer's second card is still face down."""
        return self.state in (RoundState.DEALING, RoundState.PLAYER_TURN)

    def table(self) -> TableView:
        """Return what the player may currently see."""
        dealer_cards: tuple[Card | None, ...] = tuple(self.dealer_hand.cards)
        dealer_value = self.dealer_hand.value
        if self.hole_hidden and len(dealer_cards) >= 2:
            dealer_cards = (dealer_cards[0], None) + dealer_cards[2:]
            dealer_value = hand_value(c for c in dealer_cards if c is not None)

        return TableView(
            state=self.state,
            bet=self.bet,
            player_cards=tuple(self.player_hand.cards),
            player_value=self.player_hand.value,
            dealer_cards=dealer_cards,
            dealer_value=dealer_value,
            hole_hidden=self.hole_hidden,
        )

    @property
    def is_done(self) -> bool:
        """Check if the round has finished."""
        return self.state == RoundState.DONE
