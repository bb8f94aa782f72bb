"""
TicTacToe UI
A graphical interface for playing against the minimax AI using Tkinter.

Shows:
- Score (human wins vs. computer wins)
- Round result
- Who-plays-first choice, then the board
- New Round / Restart Round controls
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import Optional

from PIL import ImageTk

from board_view import BoardView
from engine.config import GameConfig
from engine.game_engine import GameEngine
from engine.game_state import Outcome, Player

logger = logging.getLogger(__name__)


class TicTacToeUI:
    """
    Main UI class. All game rules live in the engine; the window only
    forwards clicks and redraws whenever the engine reports a change.
    """

    def __init__(self, engine: Optional[GameEngine] = None):
        """Initialize the UI."""
        self.engine = engine or GameEngine()
        self.view = BoardView()

        self._create_ui()
        self._unsubscribe = self.engine.subscribe(lambda _engine: self._refresh())
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(GameConfig.WINDOW_TITLE)
        self.root.configure(bg='white')
        self.root.resizable(False, False)

        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='white')
        style.configure('TLabel', background='white', font=('Segoe UI', 12))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'))
        style.configure('Result.TLabel', font=('Segoe UI', 12, 'bold'), foreground='#16a34a')

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=16, pady=16)

        ttk.Label(main_frame, text="Tic Tac Toe", style='Title.TLabel').pack()

        self.score_label = ttk.Label(main_frame, text="")
        self.score_label.pack(pady=(6, 0))

        self.result_label = ttk.Label(main_frame, text="", style='Result.TLabel')
        self.result_label.pack(pady=(4, 0))

        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="New Round (choose first)",
            bg='#3b82f6',
            fg='white',
            command=self.engine.new_round
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Restart Round",
            bg='#e5e7eb',
            command=self.engine.restart_round
        ).pack(side=tk.LEFT, padx=5)

        # First-move selection, shown until someone is chosen
        self.choose_frame = ttk.Frame(main_frame)
        ttk.Label(self.choose_frame, text="Who plays first?").pack(pady=(0, 6))
        choose_buttons = ttk.Frame(self.choose_frame)
        choose_buttons.pack()
        for text, player in (("User First", Player.HUMAN), ("Computer First", Player.AUTOMATED)):
            tk.Button(
                choose_buttons,
                text=text,
                bg='black',
                fg='white',
                width=14,
                command=lambda p=player: self.engine.choose_first_mover(p)
            ).pack(side=tk.LEFT, padx=5)

        # Board canvas
        size = self.view.size
        self.board_canvas = tk.Canvas(main_frame, width=size, height=size,
                                      highlightthickness=0, cursor='hand2')
        self.board_canvas.bind("<Button-1>", self._on_click)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_click(self, event):
        cell = self.view.cell_at(event.x, event.y)
        if cell is not None:
            self.engine.submit_human_move(cell)

    def _refresh(self):
        """Redraw everything from the engine's observables."""
        engine = self.engine
        self.score_label.configure(
            text=f"User Wins: {engine.score.human_wins} | "
                 f"Computer Wins: {engine.score.automated_wins}"
        )
        self.result_label.configure(text=self._result_text(engine.outcome))

        if engine.first_mover is None:
            self.board_canvas.pack_forget()
            self.choose_frame.pack(pady=10)
            return

        self.choose_frame.pack_forget()
        self.board_canvas.pack(pady=10)

        image = self.view.render(engine.board, engine.winning_line)
        photo = ImageTk.PhotoImage(image)
        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

    @staticmethod
    def _result_text(outcome: Outcome) -> str:
        if outcome == Outcome.HUMAN_WIN:
            return "User Wins!"
        if outcome == Outcome.AUTOMATED_WIN:
            return "Computer Wins!"
        if outcome == Outcome.DRAW:
            return "Draw!"
        return ""

    def _quit(self):
        """Quit the application."""
        logger.info("Quitting...")
        self._unsubscribe()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
