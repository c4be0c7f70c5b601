"""Reduce a buffer of pixels to a small palette with median cut.

Each pass doubles the number of buckets. Buckets are contiguous row ranges of one
shared pixel array. Every bucket is sorted in place along whichever channel has the
widest spread inside that bucket, so the next, finer pass splits each bucket at its
median along that channel. After the last pass, each bucket is averaged into one
palette color.

Buckets are not balanced. Bucket size is `len(pixels) // bucket_count` at every
pass, so up to `bucket_count - 1` trailing pixels never reach a final bucket and
never contribute to the palette.

:created: 2026-10-17
"""

import logging
from typing import Annotated, TypeAlias

import numpy as np
from numpy import typing as npt

from color_theme.errors import (
    EmptyInputError,
    InvalidPaletteSizeError,
    InvalidPixelBufferError,
)

_RGB: TypeAlias = Annotated[npt.NDArray[np.uint8], (3,)]
_Pixels: TypeAlias = Annotated[npt.NDArray[np.uint8], "(n,3)"]
_Palette: TypeAlias = Annotated[npt.NDArray[np.uint8], "(m,3)"]


def get_widest_channel(bucket: _Pixels) -> int:
    """Return the index of the channel with the largest max - min spread.

    :param bucket: (n, 3) array of pixels, n > 0
    :return: 0 for red, 1 for green, 2 for blue

    Ties go to the earlier channel.
    """
    spread = bucket.max(axis=0).astype(np.intp) - bucket.min(axis=0)
    return int(np.argmax(spread))


def sort_bucket(bucket: _Pixels) -> None:
    """Sort a bucket in place along its widest channel.

    :param bucket: (n, 3) array of pixels. This is typically a view into a larger
        pixel array.
    :effects: reorders the rows of bucket

    The sort is stable, so pixels with equal values in the sort channel keep their
    relative order from the previous pass.
    """
    if len(bucket) < 2:
        return
    channel = get_widest_channel(bucket)
    order = np.argsort(bucket[:, channel], kind="stable")
    bucket[:] = bucket[order]


def average_bucket(bucket: _Pixels) -> _RGB:
    """Average the pixels in a bucket, rounding each channel down.

    :param bucket: (n, 3) array of pixels
    :return: (3,) uint8 array
    :raise EmptyInputError: if bucket has no pixels
    """
    if len(bucket) == 0:
        raise EmptyInputError("Cannot average an empty bucket.")
    totals = bucket.sum(axis=0, dtype=np.int64)
    return (totals // len(bucket)).astype(np.uint8)


def get_pass_count(count: int) -> int:
    """Return how many sorting passes are required for count colors.

    :param count: number of palette colors, count >= 1
    :return: ceil(log2(count)) + 1

    The last pass has 2 ** (passes - 1) buckets, the smallest power of two that is
    at least count.
    """
    return (count - 1).bit_length() + 1


def _as_pixel_buffer(pixels: _Pixels | npt.ArrayLike) -> _Pixels:
    """Return pixels as an (n, 3) uint8 array, sharing memory where possible.

    :param pixels: an (n, 3) or (r, c, 3) array-like of 8-bit channel values
    :return: an (n, 3) uint8 array. If pixels is already a contiguous (n, 3) uint8
        array, it is returned as is and will be sorted in place.
    """
    buffer = np.asarray(pixels, dtype=np.uint8)
    if buffer.ndim == 1 and buffer.size == 0:
        return buffer.reshape(0, 3)
    if buffer.shape[-1] != 3:
        msg = f"Expected pixels with 3 channels, got shape {buffer.shape}."
        raise InvalidPixelBufferError(msg)
    if buffer.ndim != 2:
        buffer = buffer.reshape(-1, 3)
    return buffer


def median_cut_palette(pixels: _Pixels | npt.ArrayLike, count: int) -> _Palette:
    """Extract count representative colors from a buffer of pixels.

    :param pixels: (n, 3) array of uint8 pixels, typically every pixel of an image
        in row-major order. (r, c, 3) arrays are flattened.
    :param count: number of colors to return, count >= 1
    :return: (count, 3) uint8 array of bucket averages, in bucket order
    :raise InvalidPaletteSizeError: if count < 1 or there are fewer pixels than
        final buckets
    :raise EmptyInputError: if pixels is empty
    :raise InvalidPixelBufferError: if pixels do not have 3 channels
    :effects: sorts pixels in place if pixels is a contiguous (n, 3) uint8 array.
        Pass a copy if you need the original order.
    """
    if count < 1:
        msg = f"Palette size must be at least 1, got {count}."
        raise InvalidPaletteSizeError(msg)
    buffer = _as_pixel_buffer(pixels)
    pixel_count = len(buffer)
    if pixel_count == 0:
        raise EmptyInputError

    passes = get_pass_count(count)
    final_bucket_count = 2 ** (passes - 1)
    if pixel_count < final_bucket_count:
        msg = (
            f"Palette size {count} needs {final_bucket_count} buckets, "
            + f"but the image only has {pixel_count} pixels."
        )
        raise InvalidPaletteSizeError(msg)

    logging.info(f"median cut: {pixel_count} pixels, {passes} passes")
    bucket_size = pixel_count
    for i in range(passes):
        bucket_count = 2**i
        bucket_size = pixel_count // bucket_count
        for index in range(bucket_count):
            sort_bucket(buffer[bucket_size * index : bucket_size * (index + 1)])

    palette = [
        average_bucket(buffer[bucket_size * index : bucket_size * (index + 1)])
        for index in range(count)
    ]
    return np.array(palette, dtype=np.uint8)
