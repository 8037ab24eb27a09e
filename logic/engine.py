"""
Game engine for Règle de Trois.
Owns the live game state and turns clicks and AI moves into state changes.
"""

from dataclasses import dataclass
from typing import Optional

from .ai_player import AIPlayer
from .config import GameConfig
from .game_state import GameState, Player, Phase, Move, StateSnapshot
from .move_validator import MoveValidator, MoveError, ValidationResult
from .win_checker import WinChecker


@dataclass
class MoveResult:
    """
    Outcome of an input.

    The snapshot is always the state after the call, whether or not
    the input was accepted.
    """
    success: bool
    snapshot: StateSnapshot
    error: Optional[MoveError] = None
    error_message: Optional[str] = None


class GameEngine:
    """
    Runs one game.

    Game flow:
    1. Placement: players take turns placing 3 pawns each on empty cells
    2. Movement: players take turns stepping a pawn to a connected empty cell
    3. The first player with 3 pawns on a line wins and the game stops

    Every accepted input goes placement/move -> win check -> turn switch.
    The turn switches even on the winning move.
    """

    def __init__(
        self,
        ai_player: Optional[Player] = Player.PLAYER2,
        search_depth: int = GameConfig.SEARCH_DEPTH
    ):
        """
        Initialize the engine.

        Args:
            ai_player: Which player the AI controls, or None for two humans.
            search_depth: Plies the AI searches.
        """
        self.ai_player = ai_player
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(ai_player, search_depth) if ai_player is not None else None

        self.state = GameState()

        # Set while an AI move has been requested but not applied
        self.is_ai_thinking = False
        self.pending_move: Optional[Move] = None

    # ==================== QUERIES ====================

    @property
    def is_ai_turn(self) -> bool:
        return (
            self.ai_player is not None
            and not self.state.is_game_over
            and self.state.current_player == self.ai_player
        )

    def get_snapshot(self) -> StateSnapshot:
        return self.state.snapshot(move_pending=self.is_ai_thinking)

    def check_winner(self, board=None) -> Optional[Player]:
        """Check a board (the live one by default) for a winner."""
        return self.win_checker.check_winner(self.state.board if board is None else board)

    # ==================== HUMAN INPUT ====================

    def handle_click(self, position: int) -> MoveResult:
        """Route a clicked position to placement or movement by phase."""
        if self.state.phase == Phase.PLACEMENT:
            return self.apply_placement(position)
        return self.apply_select_or_move(position)

    def apply_placement(self, position: int) -> MoveResult:
        """
        Place the current player's pawn.

        Args:
            position: Cell to place on (0-8).

        Returns:
            MoveResult. On failure nothing changes.
        """
        rejected = self._gate_human_input()
        if rejected is not None:
            return rejected
        return self._place(position)

    def apply_select_or_move(self, position: int) -> MoveResult:
        """
        Select a pawn, or move the selected pawn.

        With nothing selected, clicking an own pawn selects it and
        anything else does nothing. With a pawn selected, the click is
        the move target; an illegal target just drops the selection.

        Args:
            position: Clicked cell (0-8).

        Returns:
            MoveResult. success is False when the selection or move was refused.
        """
        rejected = self._gate_human_input()
        if rejected is not None:
            return rejected
        return self._select_or_move(position)

    def _gate_human_input(self) -> Optional[MoveResult]:
        if self.state.is_game_over:
            return self._reject(MoveError.GAME_OVER, "Game is already over!")
        if self.is_ai_thinking:
            return self._reject(MoveError.BUSY, "Wait for the AI to move.")
        if self.is_ai_turn:
            return self._reject(MoveError.NOT_YOUR_TURN, "It's the AI's turn.")
        return None

    # ==================== AI ====================

    def request_ai_move(self) -> Optional[Move]:
        """
        Ask the AI for its move without applying it.

        The engine stays marked as thinking until apply_ai_move runs,
        so human input is refused in between.

        Returns:
            The AI's Move, or None if it has none (or it isn't its turn).
        """
        if not self.is_ai_turn:
            return None

        self.is_ai_thinking = True
        move = self.ai.get_best_move(self.state.board, self.state.phase)

        if move is None:
            self.is_ai_thinking = False
        self.pending_move = move
        return move

    def apply_ai_move(self, move: Move) -> MoveResult:
        """
        Apply a move the AI chose, exactly like a human move.

        Only the move from the last request_ai_move is accepted, and
        only while it is still the AI's turn.

        Args:
            move: Move returned by request_ai_move.

        Returns:
            MoveResult.
        """
        if self.state.is_game_over:
            return self._reject(MoveError.GAME_OVER, "Game is already over!")

        if not self.is_ai_turn:
            return self._reject(MoveError.NOT_YOUR_TURN, "It's not the AI's turn.")

        if self.pending_move is None or move != self.pending_move:
            return self._reject(MoveError.ILLEGAL_MOVE, f"{move} is not the AI's pending move.")

        self.is_ai_thinking = False
        self.pending_move = None

        if move.is_placement:
            return self._place(move.target)

        selected = self._select_or_move(move.source)
        if not selected.success:
            return selected
        return self._select_or_move(move.target)

    def play_ai_turn(self) -> MoveResult:
        """Request and apply the AI's move in one go."""
        if self.state.is_game_over:
            return self._reject(MoveError.GAME_OVER, "Game is already over!")

        move = self.request_ai_move()
        if move is None:
            return self._reject(MoveError.NO_MOVE_AVAILABLE, "AI has no move available.")
        return self.apply_ai_move(move)

    # ==================== GAME CONTROL ====================

    def reset_game(self) -> StateSnapshot:
        """Throw the current game away and start a new one."""
        self.state = GameState()
        self.is_ai_thinking = False
        self.pending_move = None
        return self.get_snapshot()

    # ==================== RULES ====================

    def _place(self, position: int) -> MoveResult:
        result = self.validator.validate_placement(self.state, position)
        if not result.is_valid:
            return self._rejected(result)

        self.state.place_pawn(position)
        self.win_checker.update_game_state(self.state)
        self.state.switch_turn()

        return MoveResult(success=True, snapshot=self.get_snapshot())

    def _select_or_move(self, position: int) -> MoveResult:
        if self.state.selected_position is None:
            result = self.validator.validate_selection(self.state, position)
            if not result.is_valid:
                return self._rejected(result)

            self.state.selected_position = position
            return MoveResult(success=True, snapshot=self.get_snapshot())

        source = self.state.selected_position
        result = self.validator.validate_move(self.state.board, source, position)
        if not result.is_valid:
            # Illegal target: drop the selection, leave the board alone
            self.state.selected_position = None
            return self._rejected(result)

        self.state.move_pawn(source, position)
        self.win_checker.update_game_state(self.state)
        self.state.switch_turn()

        return MoveResult(success=True, snapshot=self.get_snapshot())

    def _reject(self, error: MoveError, message: str) -> MoveResult:
        return MoveResult(
            success=False,
            snapshot=self.get_snapshot(),
            error=error,
            error_message=message
        )

    def _rejected(self, result: ValidationResult) -> MoveResult:
        return self._reject(result.error, result.error_message)
