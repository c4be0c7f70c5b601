"""Quantify and adjust single colors.

For the purposes of this module, a color is three uint8 channels (red, green, blue).
Saturation here is not HSV saturation. It is the spread between the brightest and
darkest channel relative to the brightest channel, scaled to [0, 255].

:created: 2026-10-17
"""

from collections.abc import Iterable
from typing import Annotated, TypeAlias

import numpy as np
from numpy import typing as npt

from color_theme.errors import DegenerateColorError

_RGB: TypeAlias = Annotated[npt.NDArray[np.uint8], (3,)]


def get_saturation(color: _RGB | Iterable[int]) -> int:
    """Return the saturation of the color.

    :param color: RGB color as three integers in the range [0, 255]
    :return: Saturation score between 0 and 255, where 0 is any shade of gray and
        255 is a color with at least one channel at 0 and one above 0.

    `255 * (1 - min / max)` in float32, truncated toward zero, so (3, 1, 1) scores
    169, not 170. Black has no brightest channel to compare against, so it is
    defined as 0 like every other gray.
    """
    channels = [int(x) for x in color]
    maxi = max(channels)
    if maxi == 0:
        return 0
    mini = min(channels)
    ratio = np.float32(mini) / np.float32(maxi)
    return int(np.float32(255) * (np.float32(1) - ratio))


def rescale_brightness(color: _RGB | Iterable[int], target_brightness: int) -> _RGB:
    """Scale a color so its brightest channel equals target_brightness.

    :param color: RGB color as three integers in the range [0, 255]
    :param target_brightness: new value for the brightest channel [0, 255]
    :return: (3,) uint8 array. The multiplier and products are single precision.
        Channels are truncated toward zero and clipped at 255, so the brightest
        channel may land one below the target.
    :raise DegenerateColorError: if every channel of color is 0
    """
    channels = np.asarray(color, dtype=np.float32)
    maxi = np.max(channels)
    if maxi == 0:
        raise DegenerateColorError
    multiplier = np.float32(target_brightness) / maxi
    return np.minimum(np.float32(255), channels * multiplier).astype(np.uint8)


def format_rgb(color: _RGB | Iterable[int]) -> str:
    """Format a color as a css-style rgb string.

    :param color: RGB color as three integers in the range [0, 255]
    :return: a string like "rgb(255, 0, 0)"
    """
    r, g, b = (int(x) for x in color)
    return f"rgb({r}, {g}, {b})"
