"""
Move validator for Règle de Trois.
Validates that placements and pawn moves follow the rules.
"""

from enum import Enum
from typing import Optional, Tuple, List, Sequence
from dataclasses import dataclass

from .board import BOARD
from .game_state import GameState, Player, Phase, Cell, adjacent_empty


class MoveError(Enum):
    """Why an input was rejected."""
    INVALID_PLACEMENT = "invalid_placement"
    INVALID_SELECTION = "invalid_selection"
    ILLEGAL_MOVE = "illegal_move"
    GAME_OVER = "game_over"
    NO_MOVE_AVAILABLE = "no_move_available"
    BUSY = "busy"
    NOT_YOUR_TURN = "not_your_turn"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates moves.

    Rules:
    1. Nothing is accepted once the game is won
    2. Placement phase: place on an empty cell while you have pawns left
    3. Movement phase: step your own pawn to an adjacent empty cell
    """

    def validate_placement(
        self,
        game_state: GameState,
        position: int
    ) -> ValidationResult:
        """
        Validate a placement.

        Args:
            game_state: Current game state.
            position: Cell to place a pawn on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error=MoveError.GAME_OVER,
                error_message="Game is already over!"
            )

        if game_state.phase != Phase.PLACEMENT:
            return ValidationResult(
                is_valid=False,
                error=MoveError.INVALID_PLACEMENT,
                error_message="Placement phase is over, move a pawn instead."
            )

        if not BOARD.is_valid_position(position):
            return ValidationResult(
                is_valid=False,
                error=MoveError.INVALID_PLACEMENT,
                error_message=f"Invalid position {position}. Must be 0-8."
            )

        if game_state.board[position] is not None:
            return ValidationResult(
                is_valid=False,
                error=MoveError.INVALID_PLACEMENT,
                error_message=f"Cell {position} is already occupied by {game_state.board[position].value}"
            )

        # Stale or replayed input can arrive after a countdown hits zero
        if game_state.pawns_remaining[game_state.current_player] <= 0:
            return ValidationResult(
                is_valid=False,
                error=MoveError.INVALID_PLACEMENT,
                error_message=f"{game_state.current_player.value} has no more pawns!"
            )

        return ValidationResult(is_valid=True)

    def validate_selection(
        self,
        game_state: GameState,
        position: int
    ) -> ValidationResult:
        """
        Validate picking up a pawn to move.

        Args:
            game_state: Current game state.
            position: Cell holding the pawn.

        Returns:
            ValidationResult.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error=MoveError.GAME_OVER,
                error_message="Game is already over!"
            )

        if game_state.phase != Phase.MOVEMENT:
            return ValidationResult(
                is_valid=False,
                error=MoveError.INVALID_SELECTION,
                error_message="Pawns can only be moved in the movement phase."
            )

        if not BOARD.is_valid_position(position):
            return ValidationResult(
                is_valid=False,
                error=MoveError.INVALID_SELECTION,
                error_message=f"Invalid position {position}. Must be 0-8."
            )

        if game_state.board[position] != game_state.current_player:
            return ValidationResult(
                is_valid=False,
                error=MoveError.INVALID_SELECTION,
                error_message=f"Cell {position} does not hold a {game_state.current_player.value} pawn."
            )

        return ValidationResult(is_valid=True)

    def validate_move(
        self,
        board: Sequence[Cell],
        source: int,
        target: int
    ) -> ValidationResult:
        """
        Validate stepping a pawn from source to target.

        Args:
            board: The 9 board cells.
            source: Cell the pawn is on.
            target: Cell to move it to.

        Returns:
            ValidationResult.
        """
        if not (BOARD.is_valid_position(source) and BOARD.is_valid_position(target)):
            return ValidationResult(
                is_valid=False,
                error=MoveError.ILLEGAL_MOVE,
                error_message=f"Invalid move {source} -> {target}."
            )

        if board[target] is not None:
            return ValidationResult(
                is_valid=False,
                error=MoveError.ILLEGAL_MOVE,
                error_message=f"Cell {target} is already occupied."
            )

        if not BOARD.adjacent(source, target):
            return ValidationResult(
                is_valid=False,
                error=MoveError.ILLEGAL_MOVE,
                error_message=f"Cell {target} is not connected to {source}."
            )

        return ValidationResult(is_valid=True)

    def get_valid_placements(self, board: Sequence[Cell]) -> List[int]:
        """Get all empty cells, ascending."""
        return [pos for pos, cell in enumerate(board) if cell is None]

    def get_valid_moves(
        self,
        board: Sequence[Cell],
        player: Player
    ) -> List[Tuple[int, int]]:
        """
        Get all pawn moves for a player.

        Args:
            board: The 9 board cells.
            player: The player to move.

        Returns:
            List of (source, target) pairs, by source then target.
        """
        valid_moves = []

        for source, cell in enumerate(board):
            if cell != player:
                continue
            for target in adjacent_empty(board, source):
                valid_moves.append((source, target))

        return valid_moves
