"""
Règle de Trois UI
A graphical interface for the game using Tkinter.

Shows:
- The board with connecting lines and pawns
- Game status, phase and pawns left to place
- What the AI is doing
"""

import time
import threading
import tkinter as tk
from tkinter import ttk
from typing import Optional

# Logic imports
from logic.board import BOARD
from logic.engine import GameEngine
from logic.game_state import Player, Phase, Move, StateSnapshot
from logic.win_checker import WinChecker

# Display imports
from display.config import DisplayConfig
from display.animation import PawnAnimation, thinking_delay


class RegleDeTroisUI:
    """
    Main UI class for the game.
    """

    def __init__(self, vs_ai: bool = True, use_delay: bool = True):
        """
        Initialize the UI.

        Args:
            vs_ai: Play against the AI (as player 2) instead of a second human.
            use_delay: Pause before showing AI moves.
        """
        self.config = DisplayConfig()
        self.use_delay = use_delay
        self.engine = GameEngine(ai_player=Player.PLAYER2 if vs_ai else None)
        self.win_checker = WinChecker()

        # Animation state
        self.animation: Optional[PawnAnimation] = None
        self.animation_started = 0.0
        self.animating_target: Optional[int] = None

        # Bumped on reset so stale AI threads drop their result
        self.game_id = 0

        self._create_ui()
        self._redraw()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(self.config.WINDOW_TITLE)
        self.root.configure(bg=self.config.BACKGROUND_COLOR)
        self.root.minsize(420, 520)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=self.config.BACKGROUND_COLOR)
        style.configure('TLabel', background=self.config.BACKGROUND_COLOR, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')
        style.configure('Move.TLabel', font=('Segoe UI', 11), foreground='#00ff88')

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        ttk.Label(main_frame, text="🌟 Règle de Trois", style='Title.TLabel').pack(pady=(0, 10))

        # Board canvas
        self.canvas = tk.Canvas(
            main_frame,
            width=self.config.CANVAS_WIDTH,
            height=self.config.CANVAS_HEIGHT,
            bg='#f5f0e1',
            highlightthickness=2,
            highlightbackground='#00d4ff'
        )
        self.canvas.pack()
        self.canvas.bind("<Button-1>", self._on_canvas_click)

        # Game status section
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(10, 2))

        self.phase_label = ttk.Label(main_frame, text="Phase: -")
        self.phase_label.pack()

        self.pawns_label = ttk.Label(main_frame, text="")
        self.pawns_label.pack()

        self.ai_label = ttk.Label(main_frame, text="", style='Move.TLabel')
        self.ai_label.pack(pady=5)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="🔄 New Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="✕ Quit",
            font=('Segoe UI', 11, 'bold'),
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    # ==================== INPUT ====================

    @property
    def input_locked(self) -> bool:
        """Clicks are ignored while a pawn slides or the AI has a move pending."""
        return self.animation is not None or self.engine.is_ai_thinking

    def _on_canvas_click(self, event):
        """Map a click to the nearest position and hand it to the engine."""
        if self.input_locked:
            return

        position = self._position_at(event.x, event.y)
        if position is None:
            return

        before = self.engine.get_snapshot()
        result = self.engine.handle_click(position)

        if not result.success:
            if result.error_message:
                print(result.error_message)
            self._redraw()
            return

        self._after_move(before, result.snapshot)

    def _position_at(self, x: int, y: int) -> Optional[int]:
        radius = self.config.POSITION_RADIUS
        for pos in BOARD.positions:
            if (pos.x - x) ** 2 + (pos.y - y) ** 2 <= radius ** 2:
                return pos.id
        return None

    # ==================== MOVES ====================

    def _after_move(self, before: StateSnapshot, after: StateSnapshot):
        """Animate a pawn step if there was one, then hand over to the AI."""
        source, target = self._find_step(before, after)

        if source is not None:
            self._start_animation(source, target)
        else:
            self._redraw()
            self._maybe_start_ai()

    def _find_step(self, before: StateSnapshot, after: StateSnapshot):
        """Work out which pawn moved by comparing two boards."""
        source = target = None
        for pos in range(len(after.board)):
            if before.board[pos] is not None and after.board[pos] is None:
                source = pos
            elif before.board[pos] is None and after.board[pos] is not None:
                target = pos
        return source, target

    def _start_animation(self, source: int, target: int):
        start = BOARD.positions[source]
        end = BOARD.positions[target]
        self.animation = PawnAnimation((start.x, start.y), (end.x, end.y))
        self.animation_started = time.monotonic()
        self.animating_target = target
        self._animate_step()

    def _animate_step(self):
        if self.animation is None:
            return

        elapsed = time.monotonic() - self.animation_started
        self._redraw()

        if self.animation.is_finished(elapsed):
            self.animation = None
            self.animating_target = None
            self._redraw()
            self._maybe_start_ai()
            return

        self.root.after(int(1000 / self.config.ANIMATION_FPS), self._animate_step)

    # ==================== AI ====================

    def _maybe_start_ai(self):
        if not self.engine.is_ai_turn or self.engine.is_ai_thinking:
            return

        game_id = self.game_id
        self.ai_label.configure(text="🤖 AI is thinking...")

        # Search in the background so the window stays responsive
        threading.Thread(target=self._ai_move, args=(game_id,), daemon=True).start()

    def _ai_move(self, game_id: int):
        """Compute the AI's move (runs in background thread)."""
        started = time.monotonic()
        move = self.engine.request_ai_move()

        delay = thinking_delay() if self.use_delay else 0.0
        remaining = max(0.0, delay - (time.monotonic() - started))

        self.root.after(int(remaining * 1000), lambda: self._apply_ai_move(game_id, move))

    def _apply_ai_move(self, game_id: int, move: Optional[Move]):
        """Apply the AI's move (runs on UI thread)."""
        if game_id != self.game_id:
            return  # Game was reset while the AI was thinking

        if move is None:
            self.ai_label.configure(text="🤖 AI has no move available!")
            return

        before = self.engine.get_snapshot()
        result = self.engine.apply_ai_move(move)

        if move.is_placement:
            self.ai_label.configure(text=f"🤖 AI placed on {move.target}")
        else:
            self.ai_label.configure(text=f"🤖 AI moved {move.source} → {move.target}")

        if result.success:
            self._after_move(before, result.snapshot)
        else:
            print(f"AI move rejected: {result.error_message}")
            self._redraw()

    # ==================== DRAWING ====================

    def _redraw(self):
        snapshot = self.engine.get_snapshot()
        self._draw_board(snapshot)
        self._update_game_info(snapshot)

    def _draw_board(self, snapshot: StateSnapshot):
        """Draw lines, positions and pawns."""
        c = self.canvas
        c.delete("all")

        # Connecting lines
        for pos in BOARD.positions:
            for n in pos.neighbors:
                if n > pos.id:
                    other = BOARD.positions[n]
                    c.create_line(pos.x, pos.y, other.x, other.y,
                                  fill=self.config.LINE_COLOR, width=self.config.LINE_WIDTH)

        # Winning line on top of the board lines
        line = self.win_checker.get_winning_line(snapshot.board)
        if line and self.animation is None:
            a, b = BOARD.positions[line[0]], BOARD.positions[line[2]]
            c.create_line(a.x, a.y, b.x, b.y, fill=self.config.WIN_LINE_COLOR, width=8)

        r = self.config.POSITION_RADIUS
        for pos in BOARD.positions:
            cell = snapshot.board[pos.id]
            if pos.id == self.animating_target:
                cell = None  # Drawn by the animation instead

            selected = pos.id == snapshot.selected_position
            c.create_oval(
                pos.x - r, pos.y - r, pos.x + r, pos.y + r,
                fill=self._color_for(cell),
                outline=self.config.SELECTED_COLOR if selected else self.config.LINE_COLOR,
                width=self.config.SELECTED_WIDTH if selected else self.config.LINE_WIDTH
            )

        if self.animation is not None:
            x, y = self.animation.position_at(time.monotonic() - self.animation_started)
            c.create_oval(
                x - r, y - r, x + r, y + r,
                fill=self._color_for(snapshot.board[self.animating_target]),
                outline=self.config.LINE_COLOR,
                width=self.config.LINE_WIDTH
            )

    def _color_for(self, cell: Optional[Player]) -> str:
        if cell == Player.PLAYER1:
            return self.config.PLAYER1_COLOR
        if cell == Player.PLAYER2:
            return self.config.PLAYER2_COLOR
        return self.config.EMPTY_COLOR

    def _player_name(self, player: Player) -> str:
        if player == Player.PLAYER1:
            return "Player 1 (Red)"
        if self.engine.ai_player == player:
            return "AI (Blue)"
        return "Player 2 (Blue)"

    def _update_game_info(self, snapshot: StateSnapshot):
        """Update game status labels."""
        if snapshot.is_game_over:
            self.status_label.configure(text=f"🎉 {self._player_name(snapshot.winner)} Wins!")
        else:
            self.status_label.configure(text=f"Turn: {self._player_name(snapshot.current_player)}")

        if snapshot.phase == Phase.PLACEMENT:
            self.phase_label.configure(text="Phase: Placing Pawns")
            self.pawns_label.configure(
                text=f"To place - Red: {snapshot.pawns_left(Player.PLAYER1)}  "
                     f"Blue: {snapshot.pawns_left(Player.PLAYER2)}"
            )
        else:
            self.phase_label.configure(text="Phase: Moving Pawns")
            self.pawns_label.configure(text="Select a pawn, then a connected empty spot")

    # ==================== CONTROL ====================

    def _reset_game(self):
        """Reset the game."""
        print("Resetting game...")
        self.game_id += 1
        self.animation = None
        self.animating_target = None
        self.engine.reset_game()
        self.ai_label.configure(text="")
        self._redraw()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Règle de Trois UI")
    parser.add_argument(
        "--two-player",
        action="store_true",
        help="Two humans on one screen (no AI)"
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Show AI moves without the thinking pause"
    )

    args = parser.parse_args()

    print("\n" + "="*60)
    print("   Règle de Trois UI")
    print("="*60)
    print(f"   Mode: {'Two players' if args.two_player else 'Human vs AI'}")
    print("="*60 + "\n")

    ui = RegleDeTroisUI(vs_ai=not args.two_player, use_delay=not args.no_delay)
    ui.run()


if __name__ == "__main__":
    main()
