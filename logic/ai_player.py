"""
AI player for Règle de Trois.
Uses the Minimax algorithm with alpha-beta pruning to choose a move.
"""

from typing import Optional, List, Sequence
from .config import GameConfig
from .game_state import Player, Phase, Cell, Move
from .move_validator import MoveValidator
from .win_checker import WinChecker


class AIPlayer:
    """
    An AI that plays Règle de Trois using depth-limited Minimax.

    Only finished lines are scored, so the AI takes a win it can see,
    blocks a loss it can see, and is otherwise indifferent. Moves are
    tried in a fixed order and the first best one is kept, so the same
    board always gets the same answer.
    """

    def __init__(
        self,
        player: Player = Player.PLAYER2,
        depth: int = GameConfig.SEARCH_DEPTH
    ):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: PLAYER2)
            depth: Plies searched after each candidate move.
        """
        self.player = player
        self.depth = depth
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    def evaluate(self, board: Sequence[Cell]) -> int:
        """
        Score a board from the AI's point of view.

        Returns:
            +WIN_SCORE if the AI has a line, -WIN_SCORE if the opponent
            does, 0 otherwise.
        """
        winner = self.win_checker.check_winner(board)

        if winner == self.player:
            return GameConfig.WIN_SCORE
        elif winner == self.player.opposite():
            return -GameConfig.WIN_SCORE
        return 0

    def get_candidates(
        self,
        board: Sequence[Cell],
        phase: Phase,
        player: Player
    ) -> List[Move]:
        """
        List the moves a player could make, in search order.

        Placement: every empty cell, ascending. Pawn counts are not
        tracked here; the search never crosses into the movement phase.
        Movement: every (own pawn, adjacent empty cell) pair.
        """
        if phase == Phase.PLACEMENT:
            return [Move(target=pos) for pos in self.validator.get_valid_placements(board)]

        return [
            Move(target=target, source=source)
            for source, target in self.validator.get_valid_moves(board, player)
        ]

    def _apply(self, board: List[Cell], move: Move, player: Player):
        if move.source is not None:
            board[move.source] = None
        board[move.target] = player

    def _undo(self, board: List[Cell], move: Move, player: Player):
        board[move.target] = None
        if move.source is not None:
            board[move.source] = player

    def get_best_move(
        self,
        board: Sequence[Cell],
        phase: Phase
    ) -> Optional[Move]:
        """
        Get the best move for the current position.

        The search works on its own copy of the board; the caller's
        board is never modified.

        Args:
            board: The 9 board cells.
            phase: Current game phase.

        Returns:
            The chosen Move, or None if the AI has no legal move.
        """
        self.moves_evaluated = 0

        work = list(board)
        candidates = self.get_candidates(work, phase, self.player)

        if not candidates:
            return None

        best_score = -GameConfig.SCORE_BOUND
        best_move = None

        for move in candidates:
            # Try this move
            self._apply(work, move, self.player)

            # The opponent answers next, so the child is a minimizing node
            score = self.minimax(
                work,
                self.depth,
                is_maximizing=False,
                alpha=-GameConfig.SCORE_BOUND,
                beta=GameConfig.SCORE_BOUND,
                phase=phase
            )

            self._undo(work, move, self.player)

            if best_move is None or score > best_score:
                best_score = score
                best_move = move

        print(f"AI evaluated {self.moves_evaluated} positions. Best move: {best_move} (score: {best_score})")

        return best_move

    def minimax(
        self,
        board: List[Cell],
        depth: int,
        is_maximizing: bool,
        alpha: int = -GameConfig.SCORE_BOUND,
        beta: int = GameConfig.SCORE_BOUND,
        phase: Phase = Phase.PLACEMENT
    ) -> int:
        """
        Minimax algorithm with alpha-beta pruning.

        Moves are applied to the board in place and undone before the
        next sibling is tried, so the board comes back unchanged.

        Args:
            board: Board to search (mutated and restored).
            depth: How deep to search.
            is_maximizing: True if it's the AI's turn at this node.
            alpha: Alpha value for pruning.
            beta: Beta value for pruning.
            phase: Phase the whole search runs in.

        Returns:
            The score of the position.
        """
        self.moves_evaluated += 1

        # A finished line is scored the same at any depth
        score = self.evaluate(board)
        if score != 0 or depth == 0:
            return score

        player = self.player if is_maximizing else self.player.opposite()
        candidates = self.get_candidates(board, phase, player)

        if not candidates:
            return 0  # Side to move is stuck

        if is_maximizing:
            max_score = -GameConfig.SCORE_BOUND
            for move in candidates:
                self._apply(board, move, player)
                score = self.minimax(board, depth - 1, False, alpha, beta, phase)
                self._undo(board, move, player)
                max_score = max(max_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            min_score = GameConfig.SCORE_BOUND
            for move in candidates:
                self._apply(board, move, player)
                score = self.minimax(board, depth - 1, True, alpha, beta, phase)
                self._undo(board, move, player)
                min_score = min(min_score, score)
                beta = min(beta, score)
                if beta <= alpha:
                    break  # Prune
            return min_score

    def get_move_suggestion(self, board: Sequence[Cell], phase: Phase) -> str:
        """
        Get a human-readable move suggestion.

        Returns:
            A string describing the suggested move.
        """
        move = self.get_best_move(board, phase)

        if move is None:
            return "No moves available!"

        if move.is_placement:
            return f"Place a pawn on {move.target}"
        return f"Move the pawn on {move.source} to {move.target}"
