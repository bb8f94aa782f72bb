"""
Main script for TicTacToe against the minimax AI.

Plays in the terminal by default, or opens the Tkinter window with --ui.
Type a cell number (0-8) to play it:

     0 | 1 | 2
    ---+---+---
     3 | 4 | 5
    ---+---+---
     6 | 7 | 8
"""

import argparse
import logging
import random
from typing import Callable, List, Optional

from engine.ai_player import AIPlayer
from engine.board import format_board
from engine.config import GameConfig
from engine.game_engine import GameEngine
from engine.game_state import Outcome, Player

FIRST_MOVER_CHOICES = {
    "h": Player.HUMAN,
    "human": Player.HUMAN,
    "c": Player.AUTOMATED,
    "computer": Player.AUTOMATED,
}


class ConsoleGame:
    """
    Terminal front-end for the engine.

    Game flow:
    1. Ask who plays first (unless given on the command line)
    2. Show the board and read a cell from the human
    3. The engine answers with the computer's move
    4. Show the result and score when the round ends
    5. 'r' restarts the round, 'n' starts a new one, 'q' quits
    """

    def __init__(
        self,
        engine: Optional[GameEngine] = None,
        first_mover: Optional[Player] = None,
        input_fn: Optional[Callable[[str], str]] = None
    ):
        """
        Args:
            engine: Engine to play on (default: a fresh one).
            first_mover: Who opens every new round; asked each round if None.
            input_fn: Reads one line of user input (default: input).
        """
        self.engine = engine or GameEngine()
        self.first_mover = first_mover
        self.input_fn = input_fn or input
        self.is_running = False

    def start(self):
        """Run rounds until the user quits or input ends."""
        print("\n" + "=" * 40)
        print("   Tic Tac Toe - you are " + Player.HUMAN.mark.value)
        print("=" * 40)
        print("Enter 0-8 to play, 'r' restart round, 'n' new round, 'q' quit")

        self.is_running = True
        try:
            while self.is_running:
                if self.engine.first_mover is None:
                    self._choose_first_mover()
                else:
                    self._play_turn()
        except EOFError:
            self.is_running = False

    def _choose_first_mover(self):
        if self.first_mover is not None:
            self.engine.choose_first_mover(self.first_mover)
            return

        answer = self.input_fn("\nWho plays first? [h]uman / [c]omputer: ").strip().lower()
        if answer == "q":
            self.is_running = False
            return
        player = FIRST_MOVER_CHOICES.get(answer)
        if player is None:
            print("Please answer 'h' or 'c'.")
            return
        self.engine.choose_first_mover(player)

    def _play_turn(self):
        engine = self.engine
        print()
        print(format_board(engine.board))

        if engine.outcome.is_over:
            self._show_result()
            prompt = "\n[r]estart round, [n]ew round or [q]uit: "
        else:
            cells = ", ".join(str(cell) for cell in engine.validator.get_valid_moves(engine.state))
            prompt = f"\nYour move ({cells}): "

        answer = self.input_fn(prompt).strip().lower()
        if answer == "q":
            self.is_running = False
        elif answer == "r":
            engine.restart_round()
        elif answer == "n":
            engine.new_round()
        elif not answer.isdecimal():
            print(f"'{answer}' is not a cell number.")
        elif not engine.submit_human_move(int(answer)):
            result = engine.validator.validate_human_move(engine.state, int(answer))
            print(f"Move rejected: {result.error_message}")

    def _show_result(self):
        outcome = self.engine.outcome
        if outcome == Outcome.HUMAN_WIN:
            print("\nYou won!")
        elif outcome == Outcome.AUTOMATED_WIN:
            print("\nComputer wins!")
        else:
            print("\nIt's a draw!")
        score = self.engine.score
        print(f"User Wins: {score.human_wins} | Computer Wins: {score.automated_wins}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tic Tac Toe against a minimax AI")
    parser.add_argument(
        "--first",
        choices=["human", "computer"],
        default=None,
        help="Who moves first in every round (asked each round if omitted)"
    )
    parser.add_argument(
        "--ui",
        action="store_true",
        help="Open the Tkinter window instead of playing in the terminal"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the AI's fallback move"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else GameConfig.LOG_LEVEL,
        format=GameConfig.LOG_FORMAT,
    )

    engine = GameEngine(ai=AIPlayer(rng=random.Random(args.seed)))

    if args.ui:
        from ui import TicTacToeUI
        TicTacToeUI(engine).run()
        return 0

    first_mover = FIRST_MOVER_CHOICES.get(args.first) if args.first else None
    game = ConsoleGame(engine, first_mover=first_mover)
    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
