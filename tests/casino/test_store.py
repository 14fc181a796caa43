"""Tests for the flat-file player store."""

import pytest

from casino.player import Player
from casino.store import PlayerStore, parse_line


class TestParseLine:
    """Tests for record parsing."""

    def test_valid_line(self):
        assert parse_line("Alice,100,3\n") == Player("Alice", 100, 3)

    def test_whitespace_is_trimmed(self):
        assert parse_line("  Bob , 40 , 5 ") == Player("Bob", 40, 5)

    @pytest.mark.parametrize("line", ["", "   \n", "Alice,100", "Alice,1,2,3", ",5,5"])
    def test_skipped_lines(self, line):
        assert parse_line(line) is None

    def test_malformed_numbers_default_to_zero(self):
        assert parse_line("Carl,lots,many") == Player("Carl", 0, 0)
        assert parse_line("Carl,-5,2") == Player("Carl", 0, 2)


class TestPlayerStore:
    """Tests for PlayerStore."""

    def test_load(self, store):
        assert len(store) == 3
        assert [p.name for p in store.players] == ["Alice", "Bob", "Carol"]

    def test_load_missing_file(self, tmp_path):
        store = PlayerStore(tmp_path / "nope.txt")
        assert store.load() == []

    def test_load_undecodable_file_yields_no_players(self, store, db_path, caplog):
        db_path.write_bytes(b"Ren\xe9,50,1\nBob,10,2\n")

        assert store.load() == []
        assert len(store) == 0
        assert "Failed to load players" in caplog.text

    def test_load_replaces_previous_players(self, store, db_path):
        db_path.write_text("Zed,1,1\n", encoding="utf-8")
        store.load()
        assert [p.name for p in store.players] == ["Zed"]

    def test_ensure_exists_creates_dir_and_file(self, tmp_path):
        path = tmp_path / "res" / "CasinoInfo.txt"
        PlayerStore(path).ensure_exists()
        assert path.exists()
        assert path.read_text() == ""

    def test_save_round_trips_records(self, store, db_path):
        store.find_by_name("alice").apply_delta(-40)
        store.save()

        assert db_path.read_text(encoding="utf-8") == "Alice,60,3\nBob,40,5\nCarol,0,5\n"

        reloaded = PlayerStore(db_path)
        reloaded.load()
        assert reloaded.find_by_name("Alice").balance == 60

    def test_find_by_name_ignores_case(self, store):
        assert store.find_by_name("BOB").name == "Bob"
        assert store.find_by_name(" carol ").name == "Carol"
        assert store.find_by_name("Nobody") is None

    def test_get_or_create_existing(self, store):
        player, is_new = store.get_or_create("alice")
        assert not is_new
        assert player.balance == 100
        assert len(store) == 3

    def test_get_or_create_new(self, store):
        player, is_new = store.get_or_create("Dave")
        assert is_new
        assert player == Player("Dave", 100, 0)
        assert len(store) == 4

    def test_get_or_create_rejects_comma_in_name(self, store, db_path):
        with pytest.raises(ValueError):
            store.get_or_create("Smith, John")
        assert len(store) == 3

        store.save()
        reloaded = PlayerStore(db_path)
        reloaded.load()
        assert [p.name for p in reloaded.players] == ["Alice", "Bob", "Carol"]

    def test_players_is_a_copy(self, store):
        store.players.clear()
        assert len(store) == 3

    def test_top_players_returns_ties(self, store):
        assert [p.name for p in store.top_players()] == ["Bob", "Carol"]

    def test_top_players_empty(self, tmp_path):
        assert PlayerStore(tmp_path / "empty.txt").top_players() == []

    def test_save_failure_is_raised(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        store = PlayerStore(blocker / "CasinoInfo.txt")
        with pytest.raises(OSError):
            store.save()
