from logic.game_state import GameState, Player, Phase
from logic.move_validator import MoveValidator, MoveError

P1, P2 = Player.PLAYER1, Player.PLAYER2
_ = None


def movement_state(board, current=P1):
    return GameState(
        board=list(board),
        current_player=current,
        phase=Phase.MOVEMENT,
        pawns_remaining={P1: 0, P2: 0},
    )


def test_placement_on_empty_cell_is_valid():
    assert MoveValidator().validate_placement(GameState(), 4).is_valid


def test_placement_on_occupied_cell():
    state = GameState(board=[P1, _, _, _, _, _, _, _, _])
    result = MoveValidator().validate_placement(state, 0)
    assert not result.is_valid
    assert result.error == MoveError.INVALID_PLACEMENT
    assert "occupied" in result.error_message


def test_placement_out_of_range():
    result = MoveValidator().validate_placement(GameState(), 9)
    assert result.error == MoveError.INVALID_PLACEMENT


def test_placement_after_countdown_exhausted():
    state = GameState(pawns_remaining={P1: 0, P2: 1})
    result = MoveValidator().validate_placement(state, 4)
    assert result.error == MoveError.INVALID_PLACEMENT


def test_placement_in_movement_phase():
    state = movement_state([P1, P2, _, P2, P1, _, P1, P2, _])
    result = MoveValidator().validate_placement(state, 2)
    assert result.error == MoveError.INVALID_PLACEMENT


def test_placement_after_game_over():
    state = GameState(winner=P1)
    assert MoveValidator().validate_placement(state, 4).error == MoveError.GAME_OVER


def test_selection_needs_own_pawn():
    state = movement_state([P1, P2, _, _, P1, P2, P2, P1, _])
    validator = MoveValidator()
    assert validator.validate_selection(state, 0).is_valid
    assert validator.validate_selection(state, 1).error == MoveError.INVALID_SELECTION
    assert validator.validate_selection(state, 2).error == MoveError.INVALID_SELECTION


def test_selection_during_placement():
    result = MoveValidator().validate_selection(GameState(board=[P1] + [None] * 8), 0)
    assert result.error == MoveError.INVALID_SELECTION


def test_move_to_adjacent_empty_cell():
    board = [P1, _, _, _, _, _, _, _, _]
    validator = MoveValidator()
    assert validator.validate_move(board, 0, 1).is_valid
    assert validator.validate_move(board, 0, 4).is_valid


def test_move_to_non_adjacent_cell():
    board = [P1, _, _, _, _, _, _, _, _]
    result = MoveValidator().validate_move(board, 0, 8)
    assert result.error == MoveError.ILLEGAL_MOVE


def test_move_to_occupied_cell():
    board = [P1, P2, _, _, _, _, _, _, _]
    assert MoveValidator().validate_move(board, 0, 1).error == MoveError.ILLEGAL_MOVE


def test_valid_placements_are_empty_cells_ascending():
    board = [P1, _, P2, _, _, P1, _, _, P2]
    assert MoveValidator().get_valid_placements(board) == [1, 3, 4, 6, 7]


def test_valid_moves_order():
    board = [P2, _, _,
             _, P1, _,
             _, P2, P1]
    moves = MoveValidator().get_valid_moves(board, P2)
    assert moves == [(0, 1), (0, 3), (7, 6)]
