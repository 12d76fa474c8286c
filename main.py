"""
Main entry point for TicTacToe against the minimax AI.

This script ties together:
- Logic (board, game engine, move validation, AI)
- A score tally across rounds
- A console front end, or the Tkinter UI (ui.py)

Run this script to play TicTacToe against the computer!
"""

import logging
import time

from logic.board import Mark
from logic.config import GameConfig
from logic.game_state import GameEngine
from logic.ai_player import AIPlayer
from logic.move_validator import MoveValidator
from scoreboard import Scoreboard


logger = logging.getLogger(__name__)

HELP_TEXT = "Enter 1-9 to play a square, r = new round, s = scores, ? = rules, q = quit"


class ConsoleGame:
    """
    Console controller for a TicTacToe session.

    Game flow:
    1. Human types a cell number (1-9)
    2. The move is applied if legal, otherwise the reason is shown
    3. After a short pause the AI answers with its best move
    4. Repeat until someone wins or it's a draw, then tally the result
    """

    def __init__(
        self,
        human_mark: Mark = GameConfig.HUMAN_MARK,
        think_delay: float = GameConfig.AI_THINK_DELAY_S
    ):
        """
        Initialize the console game.

        Args:
            human_mark: Which mark the human plays (X moves first).
            think_delay: Seconds to pause before the AI moves.
        """
        self.human_mark = human_mark
        self.ai_mark = human_mark.opposite()
        self.think_delay = think_delay
        self.validator = MoveValidator()
        self.ai = AIPlayer(self.ai_mark)

        self.engine = GameEngine.fresh()
        self.scoreboard = Scoreboard(human_mark=human_mark)
        self.is_running = False

    def start(self):
        """Run the input loop until the player quits."""
        print("\n" + "="*60)
        print("   Tic Tac Toe - You vs. the AI")
        print(f"   Human plays: {self.human_mark}")
        print(f"   AI plays: {self.ai_mark}")
        print("="*60)
        print(HELP_TEXT)

        self.is_running = True
        self._ai_move_if_due()
        self._print_board()

        while self.is_running:
            try:
                command = input("\nYour move: ")
            except EOFError:
                break
            self.handle_command(command)

        print(f"\nFinal score - {self.scoreboard.summary()}")

    def handle_command(self, command: str):
        """
        Handle one line of player input.

        Args:
            command: Raw input line.
        """
        command = command.strip().lower()

        if command in ("q", "quit", "exit"):
            self.is_running = False
        elif command in ("r", "reset"):
            self._reset_game()
        elif command in ("s", "score", "scores"):
            print(self.scoreboard.summary())
        elif command in ("?", "h", "help", "rules"):
            print("\nRules:\n" + GameConfig.RULES)
            print("\n" + HELP_TEXT)
        elif command.isdigit():
            cell = int(command)
            if not 1 <= cell <= 9:
                print("Pick a square from 1 to 9.")
                return
            self.play_human_move(cell - 1)
        else:
            print(f"Unknown command {command!r}. {HELP_TEXT}")

    def play_human_move(self, index: int):
        """
        Apply a human move, then let the AI answer.

        Args:
            index: Cell index (0-8).
        """
        if self.engine.turn != self.human_mark and not self.engine.is_over():
            print("Wait for the AI to move.")
            return

        result = self.validator.validate_move(self.engine, index)
        if not result.is_valid:
            print(result.error_message)
            return

        self.engine = self.engine.apply_move(index)

        if not self._finish_round_if_over():
            self._ai_move_if_due()
            self._finish_round_if_over()

        self._print_board()

    def _ai_move_if_due(self):
        """Play the AI's move if it's the AI's turn."""
        if self.engine.is_over() or self.engine.turn != self.ai_mark:
            return

        print("\n>>> AI is thinking...")
        if self.think_delay > 0:
            time.sleep(self.think_delay)

        move = self.ai.get_best_move(self.engine)
        self.engine = self.engine.apply_move(move)
        print(f">>> AI plays {self.ai_mark} at {move + 1}")

    def _finish_round_if_over(self) -> bool:
        """Tally and announce the result once the game has ended."""
        status = self.engine.current_status()
        if not status.is_over:
            return False

        self.scoreboard.record(status)
        self._show_game_result()
        return True

    def _show_game_result(self):
        status = self.engine.current_status()

        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)

        if status.winner == self.human_mark:
            print("\nCongratulations! You won!")
        elif status.winner == self.ai_mark:
            print("\nAI wins! Better luck next time!")
        else:
            print("\nIt's a draw! Good game!")

        print(self.scoreboard.summary())
        print("Type r to play again or q to quit.")

    def _reset_game(self):
        """Start a new round, keeping the score."""
        print("\nResetting game...")
        self.engine = self.engine.reset()
        self._ai_move_if_due()
        self._print_board()

    def _print_board(self):
        print()
        print(self.engine.board.render())
        if not self.engine.is_over():
            side = "You" if self.engine.turn == self.human_mark else "AI"
            print(f"\n{self.engine.turn}'s turn ({side})")
            open_squares = " ".join(str(index + 1) for index in self.validator.get_valid_moves(self.engine))
            print(f"Open squares: {open_squares}")


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against a minimax AI")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the AI play first (as X)"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=GameConfig.AI_THINK_DELAY_S,
        help="Seconds the AI pauses before moving (default: %(default)s)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log search details"
    )

    args = parser.parse_args(argv)

    if args.delay < 0:
        parser.error("--delay must not be negative")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else GameConfig.LOG_LEVEL,
        format=GameConfig.LOG_FORMAT
    )

    # Determine players: --ai-first hands the AI the human's usual mark
    human_mark = GameConfig.HUMAN_MARK
    if args.ai_first:
        human_mark = human_mark.opposite()
    logger.debug("Human plays %s, delay %.2fs", human_mark, args.delay)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(human_mark=human_mark, think_delay=args.delay)
        ui.run()
        return 0

    # Console mode (--no-ui)
    game = ConsoleGame(human_mark=human_mark, think_delay=args.delay)

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
