"""Frequency-domain helpers used by the FFT channelizer."""

from __future__ import annotations

from typing import Sequence

import numpy as np


def fft_swap_sides(data: Sequence[complex] | np.ndarray) -> np.ndarray:
    """Return ``data`` with its two halves exchanged.

    For odd lengths the last element stays where it is.
    """
    arr = np.asarray(data)
    middle = len(arr) // 2
    return np.concatenate((arr[middle:2 * middle], arr[:middle], arr[2 * middle:]))


def multiply_and_shift(
    values: Sequence[complex] | np.ndarray,
    kernel: Sequence[complex] | np.ndarray,
    output_len: int,
    offset: int,
) -> np.ndarray:
    """Multiply ``values`` by ``kernel`` and fold the product into ``output_len`` bins.

    The product is wrapped around the output, starting at a bin chosen so that
    input bin ``offset`` from the centre lands in the centre of the output.
    This decimates the spectrum and shifts it in one pass.
    """
    vals = np.asarray(values, dtype=np.complex128)
    kern = np.asarray(kernel, dtype=np.complex128)
    input_len = len(vals)
    if output_len <= 0 or input_len % output_len != 0:
        raise ValueError("input length must be a multiple of output_len")
    if len(kern) < input_len:
        raise ValueError("kernel is shorter than the input")
    half = input_len // 2
    if not -half <= offset < half:
        raise ValueError(f"offset {offset} out of range [{-half}, {half})")
    head_idx = (input_len - offset + output_len // 2) % output_len
    product = kern[:input_len] * vals
    output = np.zeros(output_len, dtype=np.complex128)
    np.add.at(output, (np.arange(input_len) + head_idx) % output_len, product)
    return output