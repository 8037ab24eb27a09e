from logic.ai_player import AIPlayer
from logic.config import GameConfig
from logic.game_state import Player, Phase, Move

P1, P2 = Player.PLAYER1, Player.PLAYER2
_ = None


def test_evaluate_scores_only_finished_lines():
    ai = AIPlayer(P2)
    assert ai.evaluate([P2, P2, P2, _, _, _, _, _, _]) == 10
    assert ai.evaluate([P1, _, _, P1, _, _, P1, _, _]) == -10
    assert ai.evaluate([P2, P2, _, P1, P1, _, _, _, _]) == 0


def test_evaluate_for_player_one():
    ai = AIPlayer(P1)
    assert ai.evaluate([P1, P1, P1, _, _, _, _, _, _]) == GameConfig.WIN_SCORE


def test_blocks_opponent_line():
    board = [_, _, _,
             _, P2, _,
             P1, P1, _]
    assert AIPlayer(P2).get_best_move(board, Phase.PLACEMENT) == Move(target=8)


def test_takes_winning_placement():
    board = [_, _, _,
             P2, P2, _,
             P1, P1, _]
    assert AIPlayer(P2).get_best_move(board, Phase.PLACEMENT) == Move(target=5)


def test_takes_winning_step():
    board = [_, P2, P1,
             P2, _, P2,
             P1, P1, _]
    move = AIPlayer(P2).get_best_move(board, Phase.MOVEMENT)
    assert move == Move(target=4, source=1)


def test_search_leaves_board_untouched():
    board = [P1, _, _,
             _, P2, _,
             _, P1, _]
    before = list(board)
    AIPlayer(P2).get_best_move(board, Phase.PLACEMENT)
    assert board == before


def test_minimax_restores_board():
    board = [P1, P2, _, P2, P1, _, P1, P2, _]
    before = list(board)
    ai = AIPlayer(P2)
    ai.minimax(board, 3, True, phase=Phase.MOVEMENT)
    assert board == before
    assert ai.moves_evaluated > 1


def test_minimax_at_depth_zero_returns_evaluation():
    ai = AIPlayer(P2)
    assert ai.minimax([_] * 9, 0, True) == 0
    assert ai.minimax([P1, P1, P1, _, _, _, _, _, _], 3, True) == -10


def test_same_board_same_move():
    board = [P1, _, _, _, _, _, _, _, _]
    ai = AIPlayer(P2)
    first = ai.get_best_move(board, Phase.PLACEMENT)
    assert all(ai.get_best_move(board, Phase.PLACEMENT) == first for _ in range(3))


def test_candidates_order():
    board = [P2, _, _,
             _, P1, _,
             _, P2, P1]
    ai = AIPlayer(P2)
    assert ai.get_candidates(board, Phase.MOVEMENT, P2) == [
        Move(target=1, source=0),
        Move(target=3, source=0),
        Move(target=6, source=7),
    ]
    assert [m.target for m in ai.get_candidates(board, Phase.PLACEMENT, P2)] == [1, 2, 3, 5, 6]


def test_no_move_when_blocked():
    board = [P2, P2, P1,
             P1, P1, P2,
             _, _, P1]
    assert AIPlayer(P2).get_best_move(board, Phase.MOVEMENT) is None


def test_move_suggestion_text():
    board = [_, _, _,
             P2, P2, _,
             P1, P1, _]
    assert AIPlayer(P2).get_move_suggestion(board, Phase.PLACEMENT) == "Place a pawn on 5"
    blocked = [P2, P2, P1, P1, P1, P2, _, _, P1]
    assert AIPlayer(P2).get_move_suggestion(blocked, Phase.MOVEMENT) == "No moves available!"
