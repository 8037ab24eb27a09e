"""
Main entry point for Règle de Trois.

Launches the board UI by default, or plays in the terminal with --no-ui.
Human plays player 1 (red); the AI plays player 2 (blue) unless
--two-player is given.
"""

import time
from typing import Optional

from logic.engine import GameEngine, MoveResult
from logic.game_state import Player, Phase
from display.animation import thinking_delay


class ConsoleGame:
    """
    Terminal front end.

    Game flow:
    1. Player 1 types a position to place (or select / move) a pawn
    2. The AI (or player 2) answers
    3. Repeat until someone lines up three pawns
    """

    def __init__(self, vs_ai: bool = True, use_delay: bool = True):
        """
        Initialize the console game.

        Args:
            vs_ai: Play against the AI instead of a second human.
            use_delay: Pause before the AI moves.
        """
        self.engine = GameEngine(ai_player=Player.PLAYER2 if vs_ai else None)
        self.use_delay = use_delay
        self.is_running = False

    def start(self):
        """Start the game."""
        print("\nStarting Règle de Trois...")
        print("Type a position (0-8), 'h' for a hint, 'r' to reset, 'q' to quit\n")

        self.is_running = True
        self.engine.state.print_board()
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            if self.engine.state.is_game_over:
                self._show_game_result()
                if not self._ask_play_again():
                    return
                continue

            if self.engine.is_ai_turn:
                self._ai_move()
                continue

            command = self._prompt()
            if command is None:
                continue
            self._handle_command(command)

    def _prompt(self) -> Optional[str]:
        state = self.engine.state
        if state.phase == Phase.PLACEMENT:
            action = "place a pawn"
        elif state.selected_position is None:
            action = "select a pawn"
        else:
            action = f"move pawn {state.selected_position} to"

        try:
            return input(f"{state.current_player.value} - {action}: ").strip().lower()
        except EOFError:
            self.is_running = False
            return None

    def _handle_command(self, command: str):
        if command == 'q':
            print("\nGame quit by user.")
            self.is_running = False
        elif command == 'r':
            self._reset_game()
        elif command == 'h':
            self._show_hint()
        elif command.isdigit():
            self._report(self.engine.handle_click(int(command)))
        else:
            print("Please type a position (0-8), 'h', 'r' or 'q'.")

    def _report(self, result: MoveResult):
        if not result.success and result.error_message:
            print(f"  {result.error_message}")
        self.engine.state.print_board()

    def _ai_move(self):
        """Play the AI's move."""
        print("\n>>> AI is thinking...")
        if self.use_delay:
            time.sleep(thinking_delay())

        move = self.engine.request_ai_move()
        if move is None:
            print("ERROR: AI could not find a move!")
            self.is_running = False
            return

        if move.is_placement:
            print(f">>> AI places a pawn on {move.target}")
        else:
            print(f">>> AI moves {move.source} -> {move.target}")

        self._report(self.engine.apply_ai_move(move))

    def _show_hint(self):
        """Ask an AI playing the current side what it would do."""
        from logic.ai_player import AIPlayer

        state = self.engine.state
        advisor = AIPlayer(state.current_player)
        print(f"  Hint: {advisor.get_move_suggestion(state.board, state.phase)}")

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)

        winner = self.engine.state.winner
        if winner == self.engine.ai_player:
            print("\n🤖 AI wins! Better luck next time!")
        else:
            print(f"\n🎉 Congratulations {winner.value}! You won!")

        print("\n" + "="*60)

    def _ask_play_again(self) -> bool:
        try:
            answer = input("Play again? [y/N] ").strip().lower()
        except EOFError:
            return False
        if answer == 'y':
            self._reset_game()
            return True
        return False

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.engine.reset_game()
        self.engine.state.print_board()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Règle de Trois")
    parser.add_argument(
        "--two-player",
        action="store_true",
        help="Two humans take turns (no AI)"
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Skip the AI's thinking pause"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )

    args = parser.parse_args()

    # Launch UI by default
    if not args.no_ui:
        from ui import RegleDeTroisUI
        print("\n" + "="*60)
        print("   Règle de Trois UI")
        print("="*60 + "\n")
        ui = RegleDeTroisUI(vs_ai=not args.two_player, use_delay=not args.no_delay)
        ui.run()
        return

    # Console mode (--no-ui)
    game = ConsoleGame(vs_ai=not args.two_player, use_delay=not args.no_delay)

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
