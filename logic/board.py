"""
Board topology for Règle de Trois.
A fixed graph of 9 intersection points and the lines that win the game.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .config import GameConfig


@dataclass(frozen=True)
class Position:
    """
    An intersection point on the board.
    """
    id: int                     # Position index (0-8)
    x: int                      # Canvas x (rendering only)
    y: int                      # Canvas y (rendering only)
    neighbors: Tuple[int, ...]  # Adjacent positions, ascending


class BoardTopology:
    """
    The board graph.

    Positions are laid out on a 3x3 grid and indexed row by row:

        0 --- 1 --- 2
        | \\   |   / |
        3 --- 4 --- 5
        | /   |   \\ |
        6 --- 7 --- 8

    The eight outer points form a ring (0-1-2-5-8-7-6-3), and the
    center (4) connects to all of them. The graph never changes.
    """

    # Outer ring, walked clockwise from the top-left corner
    RING = (0, 1, 2, 5, 8, 7, 6, 3)

    # All possible winning lines
    WINNING_LINES = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    # Canvas layout
    ORIGIN = 50
    SPACING = 100

    def __init__(self):
        self._adjacency = self._build_adjacency()
        self.positions: List[Position] = [
            Position(
                id=pos,
                x=self.ORIGIN + (pos % GameConfig.BOARD_SIZE) * self.SPACING,
                y=self.ORIGIN + (pos // GameConfig.BOARD_SIZE) * self.SPACING,
                neighbors=tuple(sorted(self._adjacency[pos])),
            )
            for pos in range(GameConfig.NUM_POSITIONS)
        ]

    def _build_adjacency(self) -> Dict[int, set]:
        """Link each ring point to its two ring neighbors and the center."""
        center = GameConfig.CENTER_POSITION
        adjacency = {pos: set() for pos in range(GameConfig.NUM_POSITIONS)}

        for i, pos in enumerate(self.RING):
            nxt = self.RING[(i + 1) % len(self.RING)]
            adjacency[pos].add(nxt)
            adjacency[nxt].add(pos)
            adjacency[pos].add(center)
            adjacency[center].add(pos)

        return adjacency

    def is_valid_position(self, position: int) -> bool:
        """Check that a position index is on the board."""
        return (
            isinstance(position, int)
            and not isinstance(position, bool)
            and 0 <= position < GameConfig.NUM_POSITIONS
        )

    def adjacent(self, a: int, b: int) -> bool:
        """
        Check if two positions are connected by a line.

        Args:
            a: First position.
            b: Second position.

        Returns:
            True if a pawn can step from a to b.
        """
        if not (self.is_valid_position(a) and self.is_valid_position(b)):
            return False
        return b in self._adjacency[a]

    def neighbors(self, position: int) -> Tuple[int, ...]:
        """Get the positions adjacent to a position, ascending."""
        return self.positions[position].neighbors

    def winning_lines(self) -> Tuple[Tuple[int, int, int], ...]:
        """Get the 8 winning lines: rows, then columns, then diagonals."""
        return self.WINNING_LINES


# Shared read-only instance
BOARD = BoardTopology()
