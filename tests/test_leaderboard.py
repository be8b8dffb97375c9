import json

import pytest

from game.marine.entities import Hazard
from game.marine.leaderboard import Leaderboard, attach_leaderboard, format_board
from game.marine.session import GameResult, InputSignals, Session


def test_missing_file_is_empty(tmp_path):
    assert Leaderboard(str(tmp_path / "none.json")).load() == []


def test_add_sorts_descending_and_caps(tmp_path):
    board = Leaderboard(str(tmp_path / "scores.json"), capacity=3)
    for name, score in [("a", 2), ("b", 7), ("c", 2), ("d", 5), ("e", 1)]:
        top = board.add(GameResult(name, score))

    assert [(e["name"], e["score"]) for e in top] == [("b", 7), ("d", 5), ("a", 2)]
    assert board.load() == top
    assert all("date" in e for e in top)


def test_corrupt_file_is_ignored(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text("{not json")
    board = Leaderboard(str(path))

    assert board.load() == []
    board.add(GameResult("x", 1))
    assert json.loads(path.read_text())[0]["name"] == "x"


def test_clear_removes_file(tmp_path):
    path = tmp_path / "scores.json"
    board = Leaderboard(str(path))
    board.add(GameResult("x", 1))
    board.clear()
    assert not path.exists()
    board.clear()


def test_records_session_results(tmp_path, config):
    board = Leaderboard(str(tmp_path / "nested" / "scores.json"))
    s = Session(config, display_name="Nemo")
    s.add_game_over_listener(board)

    s.activate()
    s.scoreboard.add(3)
    s.hazards.append(Hazard(x=s.player.x, y=s.player.y))
    s.tick(InputSignals(), 0.0)

    assert [(e["name"], e["score"]) for e in board.load()] == [("Nemo", 3)]


def test_entries_with_non_integer_scores_are_dropped(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps([
        {"name": "none", "score": None},
        {"name": "text", "score": "7"},
        {"name": "flag", "score": True},
        {"name": "float", "score": 4.5},
        "not a dict",
        {"name": "ok", "score": 2},
    ]))
    board = Leaderboard(str(path))

    assert [e["name"] for e in board.load()] == ["ok"]
    top = board.add(GameResult("new", 3))
    assert [(e["name"], e["score"]) for e in top] == [("new", 3), ("ok", 2)]


def test_bad_stored_score_does_not_block_later_results(tmp_path, config):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps([{"name": "old", "score": None}]))
    board = Leaderboard(str(path))
    s = Session(config, display_name="Nemo")
    s.add_game_over_listener(board)

    for score in (1, 4):
        s.activate()
        s.scoreboard.add(score)
        s.hazards.append(Hazard(x=s.player.x, y=s.player.y))
        s.tick(InputSignals(), 0.0)

    assert [(e["name"], e["score"]) for e in board.load()] == [("Nemo", 4), ("Nemo", 1)]


def test_save_replaces_file_without_leftovers(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text("[]")
    board = Leaderboard(str(path))

    board.add(GameResult("a", 5))
    board.add(GameResult("b", 6))

    assert sorted(p.name for p in tmp_path.iterdir()) == ["scores.json"]
    assert [e["name"] for e in json.loads(path.read_text())] == ["b", "a"]


def test_failed_write_keeps_previous_board(tmp_path, monkeypatch):
    path = tmp_path / "scores.json"
    board = Leaderboard(str(path))
    board.add(GameResult("kept", 9))

    def broken_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("game.marine.leaderboard.os.replace", broken_replace)
    with pytest.raises(OSError):
        board.add(GameResult("lost", 1))

    assert [e["name"] for e in board.load()] == ["kept"]
    assert sorted(p.name for p in tmp_path.iterdir()) == ["scores.json"]


def test_display_name_is_remembered(tmp_path, config):
    board = Leaderboard(str(tmp_path / "scores.json"))
    assert board.load_name() == ""

    first = Session(config)
    assert attach_leaderboard(first, board, "  Coral ", echo=False) == "Coral"

    second = Session(config)
    assert attach_leaderboard(second, board, None, echo=False) == "Coral"
    assert (tmp_path / "scores.name").read_text() == "Coral"


def test_game_over_prints_board_with_player_marked(tmp_path, config, capsys):
    board = Leaderboard(str(tmp_path / "scores.json"))
    board.add(GameResult("Dory", 8))
    s = Session(config)
    attach_leaderboard(s, board, "Nemo")

    s.activate()
    s.scoreboard.add(3)
    s.hazards.append(Hazard(x=s.player.x, y=s.player.y))
    s.tick(InputSignals(), 0.0)

    out = capsys.readouterr().out
    assert "Saved for Nemo" in out
    assert " 1. Dory" in out
    assert "* 2. Nemo" in out
    assert [e["name"] for e in board.load()] == ["Dory", "Nemo"]


def test_format_board_empty_and_highlight():
    assert format_board([]) == ["  (no scores yet)"]
    rows = format_board([{"name": "a", "score": 2}, {"name": "b", "score": 1}], highlight="b")
    assert rows[0].startswith(" ") and rows[1].startswith("*")
