"""
Score tally for a TicTacToe session.
Lives outside the engine: the front ends record finished games here.
"""

from dataclasses import dataclass

from logic.board import Mark
from logic.game_state import GameStatus, Outcome


@dataclass
class Scoreboard:
    """Wins per side plus ties, counted across rounds."""
    human_mark: Mark = Mark.X
    human_wins: int = 0
    ai_wins: int = 0
    ties: int = 0

    def record(self, status: GameStatus) -> bool:
        """
        Count a finished game.

        Args:
            status: Status of the game that just ended.

        Returns:
            True if the tally changed, False for a game still in progress.
        """
        if status.outcome == Outcome.WON:
            if status.winner == self.human_mark:
                self.human_wins += 1
            else:
                self.ai_wins += 1
            return True

        if status.outcome == Outcome.DRAW:
            self.ties += 1
            return True

        return False

    def reset(self):
        self.human_wins = 0
        self.ai_wins = 0
        self.ties = 0

    @property
    def games_played(self) -> int:
        return self.human_wins + self.ai_wins + self.ties

    def summary(self) -> str:
        ai_mark = self.human_mark.opposite()
        return (
            f"Player ({self.human_mark}): {self.human_wins}  "
            f"Tie: {self.ties}  "
            f"AI ({ai_mark}): {self.ai_wins}"
        )
