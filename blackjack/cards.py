"""Card and Deck classes - immutable cards, self-rebuilding deck."""

import threading
from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterable, Iterator


class Suit(Enum):
    """Card suits."""

    SPADES = "Spades"
    DIAMONDS = "Diamonds"
    CLUBS = "Clubs"
    HEARTS = "Hearts"

    def __str__(self) -> str:
        symbols = {
            Suit.SPADES: "♠",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
            Suit.HEARTS: "♥",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks, ace low (1) through king (13)."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        if 2 <= self.value <= 10:
            return str(self.value)
        return {
            Rank.ACE: "A",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self == Rank.ACE:
            return 11
        return min(self.value, 10)

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @property
    def label(self) -> str:
        """Long form used on the text board, e.g. 'Seven of Diamonds'."""
        return f"{self.rank.name.title()} of {self.suit.value}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like 'A♠', 'AS', '10h'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {str(rank): rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


def full_deck() -> list[Card]:
    """Return one of each of the 52 cards, in suit-then-rank order."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


class Deck:
    """
    A single 52-card deck shared by every round of a session.

    Cards are drawn from the end of the internal list. When the deck runs
    out, the next draw rebuilds a full deck and shuffles it before dealing,
    so drawing never fails.
    """

    def __init__(self, rng: Random | None = None) -> None:
        """Initialize a full, shuffled deck."""
        self._rng = rng or Random()
        self._lock = threading.Lock()
        self._cards: list[Card] = []
        self._rebuild_count = 0
        self.reset()
        self.shuffle()

    @classmethod
    def stacked(cls, cards: Iterable[Card], rng: Random | None = None) -> "Deck":
        """
        Create a deck that deals the given cards first, in the given order.

        Once those cards are used up the deck rebuilds like any other.
        """
        deck = cls(rng=rng)
        deck._cards = list(reversed(list(cards)))
        return deck

    def reset(self) -> None:
        """Reset deck to all 52 cards in order."""
        self._cards = full_deck()

    def shuffle(self) -> None:
        """
        Shuffle the deck in place.

        Forward Fisher-Yates: each position is swapped with a uniformly
        chosen position at or before it.
        """
        cards = self._cards
        for i in range(len(cards)):
            j = self._rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]

    def draw(self) -> Card:
        """Draw a card from the top of the deck, rebuilding it if empty."""
        with self._lock:
            if not self._cards:
                self.reset()
                self.shuffle()
                self._rebuild_count += 1
            return self._cards.pop()

    @property
    def rebuild_count(self) -> int:
        """Return how many times the deck was rebuilt after running out."""
        return self._rebuild_count

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))
