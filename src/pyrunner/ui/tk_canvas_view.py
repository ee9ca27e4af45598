from __future__ import annotations

import tkinter as tk
from collections.abc import Callable

from pyrunner.domain.game_state import GameState
from pyrunner.ui.painter import paint_frame

_FRAME_TAG = "frame"


class TkCanvasView:
    def __init__(
        self,
        root: tk.Misc,
        *,
        width: int,
        height: int,
        sprite: tk.PhotoImage | None = None,
        on_restart_clicked: Callable[[], None],
    ) -> None:
        self._w = width
        self._h = height
        self._sprite = sprite

        self.score_label = tk.Label(root, text="Score: 0", anchor="w", font=("TkDefaultFont", 12))
        self.score_label.pack(side="top", fill="x", padx=8)

        self.canvas = tk.Canvas(root, width=width, height=height, highlightthickness=0, bg="white")
        self.canvas.pack(side="top")

        # Game-over overlay, placed over the canvas only when needed.
        self._overlay = tk.Frame(self.canvas, bd=2, relief="ridge", padx=16, pady=12)
        tk.Label(self._overlay, text="Game Over!", font=("TkDefaultFont", 16, "bold")).pack()
        self._final_label = tk.Label(self._overlay, text="")
        self._final_label.pack(pady=(4, 8))
        tk.Button(self._overlay, text="Restart", command=on_restart_clicked).pack()

    # ---------- RunnerView ----------

    def render(self, state: GameState) -> None:
        paint_frame(self, state, sprite_available=self._sprite is not None)

    def show_score(self, score: int) -> None:
        self.score_label.config(text=f"Score: {score}")

    def show_game_over(self, final_score: int) -> None:
        self._final_label.config(text=f"Your score: {final_score}")
        self._overlay.place(relx=0.5, rely=0.5, anchor="center")

    def hide_game_over(self) -> None:
        self._overlay.place_forget()

    # ---------- DrawSurface ----------

    def clear(self) -> None:
        self.canvas.delete(_FRAME_TAG)

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        self.canvas.create_rectangle(x, y, x + w, y + h, outline="", fill=color, tags=(_FRAME_TAG,))

    def blit(self, x: float, y: float, w: float, h: float) -> None:
        # Player size was taken from the scaled sprite, so no resampling here.
        self.canvas.create_image(x, y, anchor="nw", image=self._sprite, tags=(_FRAME_TAG,))
