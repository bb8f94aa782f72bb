"""
Game engine for TicTacToe.

Owns the round state and the score, arbitrates turns, and plays the
automated player's replies. Front-ends only call the public methods and
read the observables; illegal requests are ignored rather than raised.
"""

import logging
from typing import Callable, List, Optional, Tuple

from .ai_player import AIPlayer
from .board import Board, Mark, format_board
from .game_state import GameState, Outcome, Player, ScoreTally
from .move_validator import MoveValidator
from .win_checker import Line, WinChecker

logger = logging.getLogger(__name__)

Listener = Callable[["GameEngine"], None]


class GameEngine:
    """
    Controller for a session of human vs. automated TicTacToe.

    Game flow:
    1. A front-end picks who moves first (choose_first_mover)
    2. If the automated player opens, its move is played right away
    3. Each accepted human move is followed by the automated reply
    4. After every move the board is checked for a win or a draw
    5. new_round / restart_round start over; the score is kept
    """

    def __init__(
        self,
        ai: Optional[AIPlayer] = None,
        state: Optional[GameState] = None,
        score: Optional[ScoreTally] = None
    ):
        """
        Initialize the engine.

        Args:
            ai: Picks the automated moves. Anything with a
                get_best_move(board) method will do.
            state: Round to continue from (default: nobody chosen yet).
            score: Score to continue from (default: 0 - 0).
        """
        self.ai = ai if ai is not None else AIPlayer()
        self.state = state if state is not None else GameState()
        self.score = score if score is not None else ScoreTally()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self._listeners: List[Listener] = []

    # ==================== OBSERVABLES ====================

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def outcome(self) -> Outcome:
        return self.state.outcome

    @property
    def first_mover(self) -> Optional[Player]:
        return self.state.first_mover

    @property
    def current_player(self) -> Optional[Player]:
        return self.state.current_player

    def is_humans_turn(self) -> bool:
        return self.state.is_humans_turn()

    @property
    def winning_line(self) -> Optional[Line]:
        return self.win_checker.winning_line(self.board)

    @property
    def history(self) -> List[Tuple[Player, int]]:
        return self.state.history()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback run after every state change.

        Returns:
            A function that removes the callback again.
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ==================== OPERATIONS ====================

    def choose_first_mover(self, who: Player) -> bool:
        """
        Pick who opens the round.

        Only accepted while nobody has been chosen; the choice then holds
        until new_round().

        Returns:
            True if the choice was accepted.
        """
        if not isinstance(who, Player):
            logger.debug("Ignoring first mover %r", who)
            return False

        if self.state.first_mover is not None:
            logger.debug("First mover already chosen (%s), ignoring %s",
                         self.state.first_mover.value, who.value)
            return False

        self._set_first_mover(who)
        self._notify()
        return True

    def submit_human_move(self, cell: int) -> bool:
        """
        Play a cell for the human, then let the automated player reply.

        Args:
            cell: Cell index (0-8).

        Returns:
            True if the move was played, False if it was rejected.
        """
        result = self.validator.validate_human_move(self.state, cell)
        if not result.is_valid:
            logger.debug("Rejected human move %r: %s", cell, result.error_message)
            return False

        self.state.human_moves.append(cell)
        logger.info("Human played cell %d", cell)

        board = self.state.board
        if self.win_checker.winner(board) is Mark.HUMAN:
            self._finish(Outcome.HUMAN_WIN)
        elif self.win_checker.is_full(board):
            self._finish(Outcome.DRAW)
        else:
            self._automated_move()

        self._notify()
        return True

    def perform_automated_move(self) -> Optional[int]:
        """
        Let the automated player move if it is its turn.

        Returns:
            The cell played, or None if no move was made.
        """
        cell = self._automated_move()
        self._notify()
        return cell

    def new_round(self):
        """Clear the board, the result and the first-mover choice."""
        logger.info("New round - choose who moves first")
        # Keep the choice here so clearing it goes through the transition hook
        self.state.clear(keep_first_mover=True)
        self._set_first_mover(None)
        self._notify()

    def restart_round(self):
        """Clear the board and the result, keep who moves first."""
        logger.info("Restarting round")
        self.state.clear(keep_first_mover=True)
        self._play_opening_if_due()
        self._notify()

    # ==================== INTERNALS ====================

    def _set_first_mover(self, who: Optional[Player]):
        previous = self.state.first_mover
        self.state.first_mover = who
        if who != previous:
            self._on_first_mover_changed(previous, who)

    def _on_first_mover_changed(self, previous: Optional[Player], current: Optional[Player]):
        """The only reactive rule: a new automated opener plays at once."""
        if current is not None:
            logger.info("Round started, %s moves first", current.value)
        self._play_opening_if_due()

    def _play_opening_if_due(self):
        state = self.state
        if (state.first_mover == Player.AUTOMATED
                and not state.is_game_over
                and not state.human_moves
                and not state.automated_moves):
            self._automated_move()

    def _automated_move(self) -> Optional[int]:
        if self.state.is_game_over:
            return None

        board = self.state.board
        if self.win_checker.is_terminal(board):
            self._resolve(board)
            return None

        if self.state.current_player != Player.AUTOMATED:
            logger.debug("Not the automated player's turn")
            return None

        cell = self.ai.get_best_move(board)
        if cell is None:
            return None

        self.state.automated_moves.append(cell)
        logger.info("Automated player played cell %d", cell)

        board = self.state.board
        if self.win_checker.winner(board) is Mark.AUTOMATED:
            self._finish(Outcome.AUTOMATED_WIN)
        elif self.win_checker.is_full(board):
            self._finish(Outcome.DRAW)
        return cell

    def _resolve(self, board: Board):
        """Set the outcome of a board that is already over."""
        winner = self.win_checker.winner(board)
        if winner is Mark.HUMAN:
            self._finish(Outcome.HUMAN_WIN)
        elif winner is Mark.AUTOMATED:
            self._finish(Outcome.AUTOMATED_WIN)
        else:
            self._finish(Outcome.DRAW)

    def _finish(self, outcome: Outcome):
        self.state.outcome = outcome
        self.score.record(outcome)
        logger.info(
            "Round over: %s (human %d - %d automated)\n%s",
            outcome.value, self.score.human_wins, self.score.automated_wins,
            format_board(self.board),
        )

    def _notify(self):
        for listener in list(self._listeners):
            listener(self)
