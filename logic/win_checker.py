"""
Win checker for Règle de Trois.
Checks if a player has lined up three pawns.
"""

from typing import Optional, Sequence, Tuple
from .board import BOARD
from .game_state import GameState, Player, Cell


class WinChecker:
    """
    Checks for win conditions.

    Win condition: 3 pawns of the same player on one of the 8 lines
    (rows, columns, diagonals). There is no draw.
    """

    WINNING_LINES = BOARD.winning_lines()

    def check_winner(self, board: Sequence[Cell]) -> Optional[Player]:
        """
        Check if there's a winner.

        Lines are scanned rows first, then columns, then diagonals, and
        the first complete line decides.

        Args:
            board: The 9 board cells.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner

        return None

    def _check_line(
        self,
        board: Sequence[Cell],
        line: Tuple[int, int, int]
    ) -> Optional[Player]:
        """
        Check if a single line has a winner.

        Returns:
            The owning Player if all 3 cells hold the same pawn, None otherwise.
        """
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Record the winner on the game state, if there is one.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        winner = self.check_winner(game_state.board)

        if winner is not None:
            game_state.winner = winner
            game_state.selected_position = None

        return game_state

    def get_winning_line(self, board: Sequence[Cell]) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            board: The 9 board cells.

        Returns:
            The winning line as a triple of positions, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None
