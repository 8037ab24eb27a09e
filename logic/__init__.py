"""
Logic module for Règle de Trois.
Handles the board, game state, rules, and AI opponent.
"""

from .config import GameConfig
from .board import BOARD, BoardTopology, Position
from .game_state import GameState, Player, Phase, Move, StateSnapshot
from .move_validator import MoveValidator, MoveError, ValidationResult
from .win_checker import WinChecker
from .ai_player import AIPlayer
from .engine import GameEngine, MoveResult
