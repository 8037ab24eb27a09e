"""
Lobby module for Règle de Trois.
In-memory registry of open games for discovery and joining.
"""

from .registry import GameRegistry, GameSession, GameListing
