"""Player record kept in the casino database."""

from dataclasses import dataclass


@dataclass
class Player:
    """A named player with a balance that never drops below zero and a win count."""

    name: str
    balance: int = 0
    wins: int = 0

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Player name cannot be empty")
        if "," in self.name or "\n" in self.name:
            raise ValueError("Player name cannot contain commas or line breaks")
        if self.balance < 0:
            raise ValueError("Balance cannot be negative")
        if self.wins < 0:
            raise ValueError("Wins cannot be negative")

    def apply_delta(self, amount: int) -> None:
        """Add a signed amount to the balance, clamping at 0."""
        self.balance = max(0, self.balance + amount)

    def credit_win(self) -> None:
        """Count one more win."""
        self.wins += 1

    def to_line(self) -> str:
        """Serialize to a 'name,balance,wins' record."""
        return f"{self.name},{self.balance},{self.wins}"
