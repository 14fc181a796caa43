"""Flat-file player store."""

import logging
from pathlib import Path

from casino.player import Player
from config import config

logger = logging.getLogger(__name__)


def _safe_int(s: str, default: int = 0) -> int:
    """Parse an int, falling back to a default for malformed (or negative) input."""
    try:
        value = int(s)
    except ValueError:
        return default
    return value if value >= 0 else default


def parse_line(line: str) -> Player | None:
    """
    Parse one 'name,balance,wins' record.

    Returns None for blank lines, lines without exactly three fields and
    lines with an empty name. Malformed numbers become 0.
    """
    line = line.strip()
    if not line:
        return None

    parts = line.split(",")
    if len(parts) != 3:
        return None

    name = parts[0].strip()
    if not name:
        return None

    return Player(
        name=name,
        balance=_safe_int(parts[1].strip()),
        wins=_safe_int(parts[2].strip()),
    )


class PlayerStore:
    """
    In-memory list of players backed by a text file.

    Each line of the file holds one record: ``name,balance,wins``. The whole
    file is rewritten on save.
    """

    def __init__(
        self,
        path: str | Path | None = None,
        starting_balance: int | None = None,
    ) -> None:
        self.path = Path(path or config.store.db_path)
        self.starting_balance = (
            config.game.starting_balance if starting_balance is None else starting_balance
        )
        self._players: list[Player] = []

    def ensure_exists(self) -> None:
        """Create the data directory and an empty file if missing."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.touch(exist_ok=True)

    def load(self) -> list[Player]:
        """Replace the in-memory players with the file contents."""
        self._players.clear()
        if not self.path.exists():
            return self.players

        try:
            with self.path.open(encoding="utf-8") as f:
                for line in f:
                    player = parse_line(line)
                    if player is not None:
                        self._players.append(player)
        except (OSError, UnicodeDecodeError) as e:
            self._players.clear()
            logger.warning("Failed to load players from %s: %s", self.path, e)
            return self.players

        logger.info("Loaded %d players from %s", len(self._players), self.path)
        return self.players

    def save(self) -> None:
        """Write every player to the file, overwriting it."""
        try:
            self.ensure_exists()
            with self.path.open("w", encoding="utf-8") as f:
                for player in self._players:
                    f.write(player.to_line() + "\n")
        except OSError as e:
            logger.error("Failed to save players to %s: %s", self.path, e)
            raise

        logger.info("Saved %d players to %s", len(self._players), self.path)

    @property
    def players(self) -> list[Player]:
        """Return a copy of the player list."""
        return self._players.copy()

    def find_by_name(self, name: str) -> Player | None:
        """Find a player by name, ignoring case."""
        wanted = name.strip().casefold()
        for player in self._players:
            if player.name.casefold() == wanted:
                return player
        return None

    def get_or_create(self, name: str) -> tuple[Player, bool]:
        """
        Find a player or register a new one with the starting balance.

        Returns:
            The player and True if it was just created
        """
        player = self.find_by_name(name)
        if player is not None:
            return player, False

        player = Player(name=name.strip(), balance=self.starting_balance, wins=0)
        self._players.append(player)
        logger.info("Registered new player %r", player.name)
        return player, True

    def top_players(self) -> list[Player]:
        """Return every player tied for the highest win count."""
        if not self._players:
            return []
        max_wins = max(p.wins for p in self._players)
        return [p for p in self._players if p.wins == max_wins]

    def __len__(self) -> int:
        return len(self._players)
