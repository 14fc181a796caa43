"""Pytest fixtures for blackjack casino tests."""

import pytest
from random import Random

from hypothesis import strategies as st

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.hand import Hand
from casino.player import Player
from casino.store import PlayerStore


def cards(*codes: str) -> list[Card]:
    """Build cards from short codes like 'AS', 'TH', '7D'."""
    return [Card.from_string(code) for code in codes]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A fresh shuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def stacked_deck(rng):
    """Factory for decks that deal the given card codes first, in order."""

    def make(*codes: str) -> Deck:
        return Deck.stacked(cards(*codes), rng=rng)

    return make


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural 21 (A-K)."""
    return Hand(cards("AS", "KH"))


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return Hand(cards("AS", "6H"))


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return Hand(cards("TS", "6H"))


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return Hand(cards("TS", "6H", "KC"))


@pytest.fixture
def player():
    """A player with the default starting balance."""
    return Player(name="Alice", balance=100, wins=0)


@pytest.fixture
def db_path(tmp_path):
    """Path of a player records file inside a temp directory."""
    return tmp_path / "res" / "CasinoInfo.txt"


@pytest.fixture
def store(db_path):
    """A player store backed by a temp file with three players."""
    db_path.parent.mkdir(parents=True)
    db_path.write_text("Alice,100,3\nBob,40,5\nCarol,0,5\n", encoding="utf-8")
    s = PlayerStore(db_path, starting_balance=100)
    s.load()
    return s


# Hypothesis strategies for property-based testing
@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


@st.composite
def cards_strategy(draw, min_cards=0, max_cards=11):
    """Generate a random sequence of cards."""
    return draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards))


class ScriptedConsole:
    """Feeds canned answers to prompts and records everything printed."""

    def __init__(self, *answers: str) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError("no more scripted answers")
        return self.answers.pop(0)

    def print(self, line: str = "") -> None:
        self.lines.append(line)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def console():
    """Factory for scripted consoles."""
    return ScriptedConsole
