from logic.game_state import Player, Phase
from main import ConsoleGame


def scripted_input(monkeypatch, answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


def test_two_player_game_to_a_win(monkeypatch, capsys):
    scripted_input(monkeypatch, ["0", "3", "1", "4", "2", "n"])
    game = ConsoleGame(vs_ai=False)
    game.start()

    assert game.engine.state.winner == Player.PLAYER1
    assert "GAME OVER" in capsys.readouterr().out


def test_bad_input_and_quit(monkeypatch, capsys):
    scripted_input(monkeypatch, ["x", "0", "0", "q"])
    game = ConsoleGame(vs_ai=False)
    game.start()

    out = capsys.readouterr().out
    assert "Please type a position" in out
    assert "already occupied" in out
    assert game.engine.state.board.count(None) == 8
    assert not game.is_running


def test_ai_answers_each_placement(monkeypatch):
    scripted_input(monkeypatch, ["6", "7", "q"])
    game = ConsoleGame(vs_ai=True, use_delay=False)
    game.start()

    state = game.engine.state
    assert state.phase == Phase.PLACEMENT
    assert len(state.pieces_of(Player.PLAYER2)) == 2
    assert state.board[6] == Player.PLAYER1


def test_reset_command(monkeypatch):
    scripted_input(monkeypatch, ["4", "r", "q"])
    game = ConsoleGame(vs_ai=False)
    game.start()
    assert game.engine.state.board == [None] * 9
