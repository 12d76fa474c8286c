"""
TicTacToe UI
A graphical interface for playing against the minimax AI using Tkinter.

Shows:
- The 3x3 board (click a square to play)
- Whose turn it is and the game result
- Score cards for Player, Tie and AI
- A rules panel that can be opened and closed
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import Optional

from logic.board import Mark
from logic.config import GameConfig
from logic.ai_player import AIPlayer
from logic.game_state import GameEngine
from logic.move_validator import MoveValidator
from scoreboard import Scoreboard


logger = logging.getLogger(__name__)


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(
        self,
        human_mark: Mark = GameConfig.HUMAN_MARK,
        think_delay: float = GameConfig.AI_THINK_DELAY_S
    ):
        """Initialize the UI."""
        self.human_mark = human_mark
        self.ai_mark = human_mark.opposite()
        self.think_delay_ms = int(think_delay * 1000)
        self.validator = MoveValidator()
        self.ai = AIPlayer(self.ai_mark)

        self.engine = GameEngine.fresh()
        self.scoreboard = Scoreboard(human_mark=human_mark)

        # Pending root.after() id for the AI move
        self.pending_ai_move: Optional[str] = None
        self.rules_visible = False

        self._create_ui()
        self._refresh()
        self._schedule_ai_move()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(GameConfig.WINDOW_TITLE)
        self.root.configure(bg=GameConfig.BACKGROUND)
        self.root.minsize(420, 560)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=GameConfig.BACKGROUND)
        style.configure('TLabel', background=GameConfig.BACKGROUND,
                        foreground=GameConfig.FOREGROUND, font=('Segoe UI', 12))
        style.configure('Title.TLabel', font=('Segoe UI', 24, 'bold'))
        style.configure('Status.TLabel', font=('Segoe UI', 18, 'bold'))
        style.configure('Score.TLabel', font=('Segoe UI', 14, 'bold'))

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=16, pady=16)

        # Header: title and rules toggle
        header = ttk.Frame(main_frame)
        header.pack(fill=tk.X)
        ttk.Label(header, text=GameConfig.WINDOW_TITLE, style='Title.TLabel').pack(side=tk.LEFT)
        tk.Button(
            header,
            text="Rules",
            font=('Segoe UI', 12, 'underline'),
            bg=GameConfig.BACKGROUND,
            fg=GameConfig.FOREGROUND,
            relief='flat',
            command=self._toggle_rules
        ).pack(side=tk.RIGHT)

        # Rules panel (hidden until toggled)
        self.rules_frame = ttk.Frame(main_frame)
        ttk.Label(self.rules_frame, text=GameConfig.RULES, justify=tk.LEFT,
                  wraplength=380).pack(pady=8)

        # Turn / result line
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(12, 8))

        # Board
        self.board_frame = ttk.Frame(main_frame)
        self.board_frame.pack(pady=8)

        self.cell_buttons = []
        for index in range(9):
            button = tk.Button(
                self.board_frame,
                text="",
                font=('Segoe UI', 32, 'bold'),
                width=3,
                height=1,
                bg='#262626',
                fg=GameConfig.FOREGROUND,
                disabledforeground=GameConfig.FOREGROUND,
                relief='ridge',
                borderwidth=3,
                command=lambda i=index: self._on_cell_click(i)
            )
            button.grid(row=index // 3, column=index % 3, padx=2, pady=2)
            self.cell_buttons.append(button)

        # Score cards
        score_frame = ttk.Frame(main_frame)
        score_frame.pack(fill=tk.X, pady=12)
        self.human_score_label = self._score_card(score_frame, f"Player ({self.human_mark})")
        self.tie_score_label = self._score_card(score_frame, "Tie")
        self.ai_score_label = self._score_card(score_frame, f"AI ({self.ai_mark})")

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=8)

        tk.Button(
            control_frame,
            text="New Round",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Quit",
            font=('Segoe UI', 11, 'bold'),
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _score_card(self, parent, title: str) -> ttk.Label:
        """Add a titled score column and return its value label."""
        card = ttk.Frame(parent)
        card.pack(side=tk.LEFT, expand=True)
        ttk.Label(card, text=title, style='Score.TLabel').pack()
        value = ttk.Label(card, text="0", style='Score.TLabel')
        value.pack()
        return value

    def _toggle_rules(self):
        """Open or close the rules panel."""
        if self.rules_visible:
            self.rules_frame.pack_forget()
        else:
            self.rules_frame.pack(fill=tk.X, before=self.status_label)
        self.rules_visible = not self.rules_visible

    def _on_cell_click(self, index: int):
        """Play the human's move, then queue the AI's answer."""
        if self.pending_ai_move is not None or self.engine.turn != self.human_mark:
            return

        before = self.engine
        self.engine = self.engine.apply_move(index)
        if self.engine is before:
            return  # Illegal move, nothing changed

        self._after_move()

    def _schedule_ai_move(self):
        """Queue the AI move after the think delay, if it's the AI's turn."""
        if self.engine.is_over() or self.engine.turn != self.ai_mark:
            return

        self.status_label.configure(text="AI is thinking...")
        self._set_board_enabled(False)
        self.pending_ai_move = self.root.after(self.think_delay_ms, self._ai_move)

    def _ai_move(self):
        """Play the AI's move (runs on the UI thread)."""
        self.pending_ai_move = None
        if self.engine.is_over() or self.engine.turn != self.ai_mark:
            return

        self.engine = self.ai.play(self.engine)
        self._after_move()

    def _after_move(self):
        """Tally a finished game or hand over to the next player."""
        status = self.engine.current_status()
        if status.is_over:
            self.scoreboard.record(status)
            logger.debug("Round over: %s (%s)", status.describe(), self.scoreboard.summary())
        self._refresh()
        self._schedule_ai_move()

    def _refresh(self):
        """Redraw board, status line and scores from the engine."""
        status = self.engine.current_status()
        winning_line = self.engine.board.winning_line() or ()

        for index, cell in enumerate(self.engine.cells):
            button = self.cell_buttons[index]
            color = GameConfig.HUMAN_COLOR if cell == self.human_mark else GameConfig.AI_COLOR
            button.configure(
                text=str(cell) if cell is not None else "",
                fg=color,
                disabledforeground=color,
                bg=GameConfig.WIN_HIGHLIGHT if index in winning_line else '#262626'
            )

        if status.is_over:
            if status.winner == self.human_mark:
                text = "You win!"
            elif status.winner == self.ai_mark:
                text = "AI wins!"
            else:
                text = "It's a tie!"
        else:
            text = f"{self.engine.turn}'s Turn"
        self.status_label.configure(text=text)

        self._set_board_enabled(not status.is_over and self.engine.turn == self.human_mark)

        self.human_score_label.configure(text=str(self.scoreboard.human_wins))
        self.tie_score_label.configure(text=str(self.scoreboard.ties))
        self.ai_score_label.configure(text=str(self.scoreboard.ai_wins))

    def _set_board_enabled(self, enabled: bool):
        # Only open squares are clickable
        open_squares = self.validator.get_valid_moves(self.engine) if enabled else []
        for index, button in enumerate(self.cell_buttons):
            button.configure(state='normal' if index in open_squares else 'disabled')

    def _reset_game(self):
        """Start a new round, keeping the score."""
        if self.pending_ai_move is not None:
            self.root.after_cancel(self.pending_ai_move)
            self.pending_ai_move = None

        self.engine = self.engine.reset()
        self._refresh()
        self._schedule_ai_move()

    def _quit(self):
        """Quit the application."""
        print(f"Final score - {self.scoreboard.summary()}")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


if __name__ == "__main__":
    from main import main
    raise SystemExit(main([]))
