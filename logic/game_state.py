"""
Game state management for Règle de Trois.
Tracks the board, current player, phase and pawn counts.
"""

from enum import Enum
from typing import Optional, List, Dict, Tuple
from dataclasses import dataclass, field

from .board import BOARD
from .config import GameConfig


class Player(Enum):
    """The two players in the game."""
    PLAYER1 = "player1"
    PLAYER2 = "player2"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.PLAYER2 if self == Player.PLAYER1 else Player.PLAYER1


class Phase(Enum):
    """Game phases. PLACEMENT only ever advances to MOVEMENT."""
    PLACEMENT = "placement"
    MOVEMENT = "movement"


# A board cell: None means empty
Cell = Optional[Player]


@dataclass(frozen=True)
class Move:
    """
    A move in the game.

    Placements have no source; movements step a pawn from source to target.
    """
    target: int
    source: Optional[int] = None

    @property
    def is_placement(self) -> bool:
        return self.source is None


@dataclass(frozen=True)
class StateSnapshot:
    """
    Read-only view of the game, handed to front ends after every change.
    """
    board: Tuple[Cell, ...]
    current_player: Player
    phase: Phase
    pawns_remaining: Tuple[Tuple[Player, int], ...]
    selected_position: Optional[int]
    winner: Optional[Player]
    move_pending: bool = False

    @property
    def is_game_over(self) -> bool:
        return self.winner is not None

    def pawns_left(self, player: Player) -> int:
        return dict(self.pawns_remaining)[player]

    def to_dict(self) -> dict:
        """Plain-data form for consumers that can't use the enums."""
        return {
            "board": [cell.value if cell else None for cell in self.board],
            "currentPlayer": self.current_player.value,
            "phase": self.phase.value,
            "pawnsRemaining": {p.value: n for p, n in self.pawns_remaining},
            "selectedPosition": self.selected_position,
            "winner": self.winner.value if self.winner else None,
            "movePending": self.move_pending,
        }


def _full_pawn_counts() -> Dict[Player, int]:
    return {player: GameConfig.PAWNS_PER_PLAYER for player in Player}


@dataclass
class GameState:
    """
    The complete state of a game.

    Tracks:
    - The 9 board cells (which player's pawn is where)
    - Current player and phase
    - How many pawns each player still has to place
    - The pawn selected for moving (movement phase only)
    - Game result

    The mutators here only touch the data. Rule checks live in
    MoveValidator and sequencing lives in GameEngine.
    """

    # The 9 cells - None means empty
    board: List[Cell] = field(
        default_factory=lambda: [None] * GameConfig.NUM_POSITIONS
    )

    # Current player's turn
    current_player: Player = Player.PLAYER1

    phase: Phase = Phase.PLACEMENT

    # Pawns left to place, counted down during placement
    pawns_remaining: Dict[Player, int] = field(default_factory=_full_pawn_counts)

    # Pawn chosen but not yet moved
    selected_position: Optional[int] = None

    # Game result (no draws in this game)
    winner: Optional[Player] = None

    @property
    def is_game_over(self) -> bool:
        return self.winner is not None

    def place_pawn(self, position: int) -> None:
        """
        Put the current player's pawn on a cell and count it down.
        Starts the movement phase once both players are out of pawns.
        """
        player = self.current_player
        self.board[position] = player
        self.pawns_remaining[player] -= 1

        if all(count == 0 for count in self.pawns_remaining.values()):
            self.phase = Phase.MOVEMENT

    def move_pawn(self, source: int, target: int) -> None:
        """Step a pawn from source to target and drop the selection."""
        self.board[target] = self.board[source]
        self.board[source] = None
        self.selected_position = None

    def switch_turn(self) -> None:
        self.current_player = self.current_player.opposite()

    def pieces_of(self, player: Player) -> List[int]:
        """Get the positions holding a player's pawns."""
        return [pos for pos, cell in enumerate(self.board) if cell == player]

    def snapshot(self, move_pending: bool = False) -> StateSnapshot:
        """Freeze the current state for front ends."""
        return StateSnapshot(
            board=tuple(self.board),
            current_player=self.current_player,
            phase=self.phase,
            pawns_remaining=tuple(
                (player, self.pawns_remaining[player]) for player in Player
            ),
            selected_position=self.selected_position,
            winner=self.winner,
            move_pending=move_pending,
        )

    def print_board(self):
        """Print the board to console."""
        def cell(pos: int) -> str:
            piece = self.board[pos]
            if piece is None:
                mark = str(pos)
            else:
                mark = "R" if piece == Player.PLAYER1 else "B"
            if pos == self.selected_position:
                return f"<{mark}>"
            return f"[{mark}]"

        print()
        print(f" {cell(0)}---{cell(1)}---{cell(2)}")
        print("  |  \\   |   /  |")
        print(f" {cell(3)}---{cell(4)}---{cell(5)}")
        print("  |  /   |   \\  |")
        print(f" {cell(6)}---{cell(7)}---{cell(8)}")

        # Print game info
        if self.is_game_over:
            print(f"\n🏆 {self.winner.value.upper()} WINS!")
        else:
            print(f"\nPhase: {self.phase.value}")
            print(f"Current turn: {self.current_player.value}")
            if self.phase == Phase.PLACEMENT:
                print(
                    f"Pawns to place: player1={self.pawns_remaining[Player.PLAYER1]} "
                    f"player2={self.pawns_remaining[Player.PLAYER2]}"
                )


def adjacent_empty(board: List[Cell], position: int) -> List[int]:
    """Get the empty cells a pawn at position could step to."""
    return [n for n in BOARD.neighbors(position) if board[n] is None]
