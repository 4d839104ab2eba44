"""
Utility functions for game mechanics
"""

from __future__ import annotations
import colorsys
import random
from typing import Tuple, Optional
import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def aabb_overlap(ax, ay, aw, ah, bx, by, bw, bh) -> bool:
    """Check if two axis-aligned boxes overlap (edges touching do not count)"""
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def hue_to_rgb(hue: float) -> Tuple[int, int, int]:
    """Fully saturated, half-lightness color for a hue in degrees"""
    r, g, b = colorsys.hls_to_rgb((hue % 360.0) / 360.0, 0.5, 1.0)
    return int(round(r * 255)), int(round(g * 255)), int(round(b * 255))


def format_countdown(ticks: int) -> str:
    """MM:SS display for a tick countdown.

    Minutes divide by 3600 and seconds take the remainder over 60, so the
    display assumes 60 ticks per second.
    """
    minutes = ticks // 3600
    seconds = (ticks % 3600) // 60
    return f"{minutes:02d}:{seconds:02d}"


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
