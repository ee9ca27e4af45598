from __future__ import annotations

import logging
import tkinter as tk

from pyrunner.app.frame_loop import FrameLoop
from pyrunner.app.runner_controller import RunnerController
from pyrunner.config import RunnerConfig
from pyrunner.domain.rng import RandomSource, make_rng
from pyrunner.ui.input_mapper import TkInputMapper
from pyrunner.ui.sprite import config_for_sprite, load_sprite
from pyrunner.ui.tk_canvas_view import TkCanvasView

logger = logging.getLogger(__name__)


class GameApp:
    def __init__(self, config: RunnerConfig, *, rng: RandomSource | None = None) -> None:
        self.root = tk.Tk()
        self.root.title("Runner")
        self.root.resizable(False, False)

        # Player box follows the scaled sprite when there is one.
        sprite = load_sprite(self.root, config.sprite_path, scale=config.sprite_scale)
        if sprite is not None:
            sized = config_for_sprite(config, float(sprite.width()), float(sprite.height()))
            if sized is None:
                sprite = None
            else:
                config = sized
        self.config = config

        self.view = TkCanvasView(
            self.root,
            width=config.canvas_width,
            height=config.canvas_height,
            sprite=sprite,
            on_restart_clicked=self._restart,
        )
        self.controller = RunnerController(
            config,
            rng=rng if rng is not None else make_rng(),
            view=self.view,
        )
        self.input = TkInputMapper(
            self.root,
            self.view.canvas,
            on_jump=self.controller.jump,
            on_restart=self._restart,
        )

        self.loop = FrameLoop(
            scheduler=self.root,
            tick_fn=self.controller.tick,
            fps=config.fps,
            cancel_errors=(tk.TclError,),
        )
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

    def run(self) -> None:
        self.loop.start()
        self.root.mainloop()

    def _restart(self) -> None:
        if self.controller.restart():
            self.loop.start()

    def _on_close(self) -> None:
        logger.debug("window closed")
        self.loop.stop()
        self.root.destroy()
