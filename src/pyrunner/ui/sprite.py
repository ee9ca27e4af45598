from __future__ import annotations

import logging
import tkinter as tk
from fractions import Fraction
from pathlib import Path

from pyrunner.config import RunnerConfig
from pyrunner.domain.exceptions import ConfigError

logger = logging.getLogger(__name__)

_MIN_RATIO = Fraction(1, 10)


def scale_factors(scale: float) -> tuple[int, int]:
    """
    (zoom, subsample) pair approximating scale. Never below 1/10, so a tiny
    scale cannot round to 0 and leave the image at full size.
    """
    ratio = max(Fraction(scale).limit_denominator(10), _MIN_RATIO)
    return ratio.numerator, ratio.denominator


def load_sprite(master: tk.Misc, path: Path | None, *, scale: float = 0.3) -> tk.PhotoImage | None:
    """
    Load the runner image (GIF/PNG) and scale it.

    PhotoImage only scales by integer factors, so the scale is approximated as
    zoom(n).subsample(d). Returns None when the image is missing or unreadable;
    callers draw a placeholder instead.
    """
    if path is None:
        return None
    if not path.is_file():
        logger.warning("sprite %s not found, drawing placeholder", path)
        return None

    try:
        image = tk.PhotoImage(master=master, file=str(path))
    except tk.TclError as e:
        logger.warning("could not load sprite %s: %s", path, e)
        return None

    zoom, subsample = scale_factors(scale)
    if zoom > 1:
        image = image.zoom(zoom)
    if subsample > 1:
        image = image.subsample(subsample)

    if image.width() <= 0 or image.height() <= 0:
        logger.warning("sprite %s scaled to an empty image, drawing placeholder", path)
        return None
    return image


def config_for_sprite(config: RunnerConfig, width: float, height: float) -> RunnerConfig | None:
    """Config with the player sized to the sprite, or None when it does not fit the canvas."""
    try:
        return config.with_player_size(width, height)
    except ConfigError as e:
        logger.warning("sprite %gx%g does not fit (%s), drawing placeholder", width, height, e)
        return None
