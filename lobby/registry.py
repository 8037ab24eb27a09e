"""
Game registry for the Règle de Trois lobby.
Keeps track of open games and tells listeners whenever the list changes.
"""

import uuid
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional


@dataclass(frozen=True)
class GameListing:
    """A game as shown in the lobby."""
    id: str
    player_count: int

    def to_dict(self) -> dict:
        return {"id": self.id, "players": self.player_count}


@dataclass
class GameSession:
    """
    A game waiting for or holding players.
    """
    id: str
    players: List[str] = field(default_factory=list)

    @property
    def is_full(self) -> bool:
        return len(self.players) >= GameRegistry.MAX_PLAYERS

    def listing(self) -> GameListing:
        return GameListing(id=self.id, player_count=len(self.players))


# Called with the full game list after every change
Listener = Callable[[List[GameListing]], None]


class GameRegistry:
    """
    Lobby bookkeeping.

    The registry only tracks who sits at which game. It never looks
    inside a game; each session's engine is owned by whoever runs it.
    """

    MAX_PLAYERS = 2

    def __init__(self, id_factory: Optional[Callable[[], str]] = None):
        """
        Initialize the registry.

        Args:
            id_factory: Makes new game ids (default: short random hex).
        """
        self._games: Dict[str, GameSession] = {}
        self._listeners: List[Listener] = []
        self._id_factory = id_factory or (lambda: uuid.uuid4().hex[:8])

    def subscribe(self, listener: Listener):
        """Register a listener and send it the current list right away."""
        self._listeners.append(listener)
        listener(self.list_games())

    def unsubscribe(self, listener: Listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def create_game(self, player_id: str) -> str:
        """
        Open a new game with the creator already seated.

        Args:
            player_id: Who is creating the game.

        Returns:
            The new game's id.
        """
        game_id = self._id_factory()
        while game_id in self._games:
            game_id = self._id_factory()

        self._games[game_id] = GameSession(id=game_id, players=[player_id])
        print(f"Lobby: {player_id} created game {game_id}")

        self._broadcast()
        return game_id

    def join_game(self, game_id: str, player_id: str) -> bool:
        """
        Seat a player at an existing game.

        Returns:
            True if the player joined; False if the game is unknown,
            full, or the player is already in it.
        """
        session = self._games.get(game_id)

        if session is None:
            print(f"Lobby: game {game_id} does not exist!")
            return False

        if player_id in session.players:
            print(f"Lobby: {player_id} is already in game {game_id}")
            return False

        if session.is_full:
            print(f"Lobby: game {game_id} is full!")
            return False

        session.players.append(player_id)
        print(f"Lobby: {player_id} joined game {game_id}")

        self._broadcast()
        return True

    def leave_game(self, game_id: str, player_id: str) -> bool:
        """
        Remove a player from a game. Empty games are closed.

        Returns:
            True if the player was in the game.
        """
        session = self._games.get(game_id)

        if session is None or player_id not in session.players:
            return False

        session.players.remove(player_id)
        if not session.players:
            del self._games[game_id]
            print(f"Lobby: game {game_id} closed")

        self._broadcast()
        return True

    def get_game(self, game_id: str) -> Optional[GameSession]:
        return self._games.get(game_id)

    def list_games(self) -> List[GameListing]:
        """Get every open game, oldest first."""
        return [session.listing() for session in self._games.values()]

    def _broadcast(self):
        games = self.list_games()
        for listener in list(self._listeners):
            listener(games)
