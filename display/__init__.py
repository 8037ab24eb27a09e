"""
Display module for Règle de Trois.
Settings and helpers for drawing the board.
"""

from .config import DisplayConfig
from .animation import PawnAnimation, thinking_delay
