"""Convert image files to numpy pixel buffers.

:created: 2026-10-17
"""

import logging
import os
from pathlib import Path
from typing import Annotated, TypeAlias

import numpy as np
import numpy.typing as npt
from PIL import Image, UnidentifiedImageError

from color_theme.errors import ImageLoadError, ImageWriteError

# every pixel of an rgb image in row-major order
_Pixels: TypeAlias = Annotated[npt.NDArray[np.uint8], (-1, 3)]


def load_rgb_image(
    filename: str | os.PathLike[str], max_dim: int | None = None
) -> Image.Image:
    """Open an image and convert it to 8-bit RGB.

    :param filename: path to an image in any format Pillow can read
    :param max_dim: optionally shrink the image so neither side exceeds max_dim
    :return: a loaded Pillow image in mode "RGB". Any alpha channel is dropped.
    :raise ImageLoadError: if the file is missing or cannot be decoded
    """
    try:
        with Image.open(filename) as image:
            rgb = image.convert("RGB")
    except (UnidentifiedImageError, OSError) as e:
        msg = f"Cannot load image '{filename}': {e}"
        raise ImageLoadError(msg) from e
    if max_dim is not None and max(rgb.size) > max_dim:
        rgb.thumbnail((max_dim, max_dim), Image.Resampling.LANCZOS)
    return rgb


def get_image_pixels(
    filename: str | os.PathLike[str], max_dim: int | None = None
) -> _Pixels:
    """Get every rgb pixel in an image.

    :param filename: path to an image in any format Pillow can read
    :param max_dim: optionally shrink the image so neither side exceeds max_dim
    :return: (width * height, 3) array of uint8 pixels in row-major order. The array
        is a fresh copy and safe to sort in place.
    :raise ImageLoadError: if the file is missing or cannot be decoded
    """
    image = load_rgb_image(filename, max_dim)
    logging.info(f"loaded '{Path(filename).name}' at {image.width}x{image.height}")
    return np.array(image, dtype=np.uint8).reshape(-1, 3)


def write_rgb_image(path: str | os.PathLike[str], pixels: npt.ArrayLike) -> Path:
    """Write an (r, c, 3) array of uint8 values to an image file.

    :param path: output path. The format is taken from the suffix.
    :param pixels: (r, c, 3) array of rgb uint8 values
    :return: path to the written image
    :raise ImageWriteError: if the suffix is not a format Pillow can write or the
        file cannot be created
    :effects: writes an image to the filesystem
    """
    image = Image.fromarray(np.asarray(pixels, dtype=np.uint8))
    try:
        image.save(path)
    except (ValueError, OSError) as e:
        msg = f"Cannot write image '{path}': {e}"
        raise ImageWriteError(msg) from e
    return Path(path)


def write_palette_swatch(
    path: str | os.PathLike[str], palette: npt.ArrayLike, swatch_size: int = 32
) -> Path:
    """Write a palette as a row of square swatches.

    :param path: output path. The format is taken from the suffix.
    :param palette: (m, 3) array of uint8 colors
    :param swatch_size: width and height of each swatch in pixels
    :return: path to the written image
    :raise ImageWriteError: if the image cannot be written
    :effects: writes an image to the filesystem
    """
    colors = np.asarray(palette, dtype=np.uint8).reshape(-1, 3)
    row = np.repeat(colors[np.newaxis, :, :], swatch_size, axis=1)
    return write_rgb_image(path, np.repeat(row, swatch_size, axis=0))
