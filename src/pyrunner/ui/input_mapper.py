from __future__ import annotations

import tkinter as tk
from collections.abc import Callable


class TkInputMapper:
    """
    Space, Up and a tap/click on the canvas jump; Return restarts.
    Events are forwarded immediately; the Tk event loop never overlaps a tick.
    """

    def __init__(
        self,
        root: tk.Tk,
        canvas: tk.Canvas,
        *,
        on_jump: Callable[[], None],
        on_restart: Callable[[], None],
    ) -> None:
        self._on_jump = on_jump
        self._on_restart = on_restart

        root.bind("<KeyPress-space>", self._on_jump_key)
        root.bind("<KeyPress-Up>", self._on_jump_key)
        root.bind("<KeyPress-Return>", self._on_restart_key)
        canvas.bind("<ButtonPress-1>", self._on_jump_key)

        # Helps ensure root gets key events.
        root.focus_set()

    def _on_jump_key(self, _evt: tk.Event) -> None:
        self._on_jump()

    def _on_restart_key(self, _evt: tk.Event) -> None:
        self._on_restart()
